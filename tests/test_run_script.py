"""Development launcher at the repository root."""

import importlib.util
import os

import pytest

RUN_PY = os.path.join(os.path.dirname(__file__), '..', 'run.py')


@pytest.fixture
def run_module():
    spec = importlib.util.spec_from_file_location("run_script", RUN_PY)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_missing_dependency_message(run_module, capsys):
    run_module._explain_missing_dependency(ModuleNotFoundError("No module named 'mcp'", name="mcp"))
    err = capsys.readouterr().err
    assert "wow-api-mcp is missing a required dependency: mcp" in err
    assert "pip install -e ." in err
    assert "code --install-extension ketho.wow-api" in err
    assert "WOW_API_EXT_PATH" in err


def test_main_exits_when_import_fails(run_module, monkeypatch, capsys):
    import builtins

    real_import = builtins.__import__

    def fake_import(name, *args, **kwargs):
        if name == "wow_api_mcp.mcp_server":
            raise ModuleNotFoundError("No module named 'mcp'", name="mcp")
        return real_import(name, *args, **kwargs)

    monkeypatch.setattr(builtins, "__import__", fake_import)
    with pytest.raises(SystemExit) as excinfo:
        run_module.main()
    assert excinfo.value.code == 1
    assert "missing a required dependency: mcp" in capsys.readouterr().err
