"""
Core module - the API index and the tools that query it.
"""

from .index import ApiIndex, LOOKUP_LIMIT, SEARCH_LIMIT
from .tool_registry import execute_tool, get_tool_registry

__all__ = [
    "ApiIndex",
    "LOOKUP_LIMIT",
    "SEARCH_LIMIT",
    "execute_tool",
    "get_tool_registry",
]
