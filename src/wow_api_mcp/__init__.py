"""WoW API MCP server.

Indexes the LuaLS annotations of the ketho.wow-api VS Code extension and
serves lookups over the Model Context Protocol.
"""

__version__ = "1.0.0"

from .config import ConfigurationError, get_config
from .core.index import ApiIndex
from .indexing.api_index_builder import ApiIndexBuilder, build_api_index, load_api_index

__all__ = [
    "ApiIndex",
    "ApiIndexBuilder",
    "ConfigurationError",
    "build_api_index",
    "get_config",
    "load_api_index",
]
