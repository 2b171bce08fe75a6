"""
Configuration Management for the WoW API MCP server

Following Linus's principle: "Good configuration is no configuration."
Finds the ketho.wow-api VS Code extension on its own, with optional
environment variable overrides.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """The annotation corpus could not be located; the server cannot start."""


class ExtensionConfig:
    """Where the annotation corpus lives and how the server logs."""

    DEFAULT_EXTENSION_PREFIX = "ketho.wow-api-"
    DEFAULT_LOG_LEVEL = "ERROR"
    # Editor data directories searched under the home directory, in order.
    EDITOR_DIRS = (".vscode", ".vscode-insiders", ".vscode-oss", ".cursor")

    def __init__(self):
        self.extension_path = os.environ.get("WOW_API_EXT_PATH") or None
        self.extension_prefix = os.environ.get(
            "WOW_API_EXTENSION_PREFIX", self.DEFAULT_EXTENSION_PREFIX
        )
        self.log_level = os.environ.get("WOW_API_LOG_LEVEL", self.DEFAULT_LOG_LEVEL).upper()
        self.home_dir = os.environ.get("USERPROFILE") or os.environ.get("HOME") or str(Path.home())

        self._validate_config()

    def _validate_config(self):
        """Validate configuration values"""
        if not self.extension_prefix:
            raise ValueError("extension_prefix must not be empty")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    def get_log_level(self) -> int:
        return logging.getLevelName(self.log_level)

    def candidate_extension_dirs(self) -> List[Path]:
        """Editor extension directories to scan when no override is set."""
        return [Path(self.home_dir) / editor / "extensions" for editor in self.EDITOR_DIRS]

    def scan_extensions_dir(self, extensions_dir: Path) -> Optional[Path]:
        """Return the newest matching extension inside ``extensions_dir``, or None."""
        try:
            matches = sorted(
                entry for entry in os.listdir(extensions_dir)
                if entry.startswith(self.extension_prefix)
            )
        except OSError:
            return None
        if matches:
            return Path(extensions_dir) / matches[-1]
        return None

    def find_extension_path(self) -> Optional[Path]:
        """
        Resolve the extension root.

        Resolution order:
        1. WOW_API_EXT_PATH, if it contains ``Annotations/``
        2. WOW_API_EXT_PATH scanned as an extensions directory
        3. the editor extension directories under the home directory
        """
        if self.extension_path:
            ext_path = Path(self.extension_path)
            if (ext_path / "Annotations").exists():
                return ext_path
            return self.scan_extensions_dir(ext_path)

        for extensions_dir in self.candidate_extension_dirs():
            found = self.scan_extensions_dir(extensions_dir)
            if found:
                return found
        return None

    def require_extension_path(self) -> Path:
        """Like find_extension_path, but raise ConfigurationError when nothing is found."""
        ext_path = self.find_extension_path()
        if ext_path is None:
            raise ConfigurationError(
                "Could not find ketho.wow-api VS Code extension.\n"
                "Install it: code --install-extension ketho.wow-api\n"
                "Or set WOW_API_EXT_PATH env var to the extension directory."
            )
        logger.info(f"Using WoW API extension at {ext_path}")
        return ext_path

    def __repr__(self) -> str:
        return (
            f"ExtensionConfig("
            f"extension_path={self.extension_path!r}, "
            f"extension_prefix={self.extension_prefix!r}, "
            f"log_level={self.log_level!r}, "
            f"home_dir={self.home_dir!r})"
        )


# Global configuration instance
_config: Optional[ExtensionConfig] = None


def get_config() -> ExtensionConfig:
    """Get global configuration instance"""
    global _config
    if _config is None:
        _config = ExtensionConfig()
    return _config


def reset_config():
    """Reset configuration (mainly for testing)"""
    global _config
    _config = None


# Environment documentation
CONFIG_DOCS = """
WoW API MCP Configuration Environment Variables:

- WOW_API_EXT_PATH: Extension root, or an extensions directory to scan
- WOW_API_EXTENSION_PREFIX: Extension directory prefix (default: ketho.wow-api-)
- WOW_API_LOG_LEVEL: Logging level written to stderr (default: ERROR)

Example usage:
    export WOW_API_EXT_PATH=~/.vscode/extensions/ketho.wow-api-0.20.3
    export WOW_API_LOG_LEVEL=INFO
"""
