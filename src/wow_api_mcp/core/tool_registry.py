"""
Tool Registry - 工具注册表

Maps MCP tool names to the functions in api_tools.
"""

import logging
from typing import Callable, Dict

from .api_tools import (
    tool_get_api_stats,
    tool_get_enum,
    tool_get_event,
    tool_get_namespace,
    tool_get_widget_methods,
    tool_list_deprecated,
    tool_lookup_api,
    tool_search_api,
)
from .index import ApiIndex

logger = logging.getLogger(__name__)

TOOL_REGISTRY: Dict[str, Callable[..., str]] = {
    "lookup_api": tool_lookup_api,
    "search_api": tool_search_api,
    "list_deprecated": tool_list_deprecated,
    "get_namespace": tool_get_namespace,
    "get_widget_methods": tool_get_widget_methods,
    "get_enum": tool_get_enum,
    "get_event": tool_get_event,
    "get_api_stats": tool_get_api_stats,
}


def get_tool_registry() -> Dict[str, Callable[..., str]]:
    return dict(TOOL_REGISTRY)


def execute_tool(index: ApiIndex, tool_name: str, **kwargs) -> str:
    """
    统一工具执行器 - 替代所有if/else分支

    Unknown tools and bad arguments come back as error text.
    """
    tool_func = TOOL_REGISTRY.get(tool_name)
    if not tool_func:
        return f"Unknown tool: {tool_name}"

    try:
        return tool_func(index, **kwargs)
    except TypeError as e:
        logger.warning(f"Bad arguments for {tool_name}: {e}")
        return f"Tool execution failed: {e}"
