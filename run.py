#!/usr/bin/env python
"""
Development convenience script to run the WoW API MCP server.
"""
import os
import sys
import traceback

# Add src directory to path
src_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

def _explain_missing_dependency(error: ModuleNotFoundError) -> None:
    missing = getattr(error, "name", None) or str(error)
    sys.stderr.write(
        "wow-api-mcp is missing a required dependency: {name}\n"
        "Install the server from the repository root: pip install -e .\n"
        "The ketho.wow-api VS Code extension is needed as well "
        "(code --install-extension ketho.wow-api, or set WOW_API_EXT_PATH).\n"
        "See README.md for setup.\n".format(name=missing)
    )

def main() -> None:
    try:
        from wow_api_mcp.mcp_server import main as server_main
    except ModuleNotFoundError as exc:
        _explain_missing_dependency(exc)
        raise SystemExit(1) from exc
    except Exception:
        traceback.print_exc()
        raise SystemExit(1)
    else:
        server_main()


if __name__ == "__main__":
    main()
