"""WoW API MCP server.

The index is built once in the server lifespan and handed to every tool
through the lifespan context; restart the server to pick up a new extension
version.
"""
import sys
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from mcp.server.fastmcp import Context, FastMCP

from .config import CONFIG_DOCS, ConfigurationError, get_config
from .core.index import ApiIndex
from .core.tool_registry import execute_tool
from .indexing.api_index_builder import load_api_index
from .utils import handle_mcp_resource_errors, handle_mcp_tool_errors

logger = logging.getLogger(__name__)


@dataclass
class WowApiContext:
    index: ApiIndex


@asynccontextmanager
async def api_index_lifespan(_server: FastMCP) -> AsyncIterator[WowApiContext]:
    index = load_api_index()
    stats = index.get_stats()
    logger.info(
        f"WoW API index ready: {stats['total_functions']} functions, "
        f"{stats['deprecated_functions']} deprecated, {stats['namespaces']} namespaces, "
        f"{stats['enums']} enums, {stats['events']} events"
    )
    yield WowApiContext(index=index)


mcp = FastMCP(
    "wow-api",
    instructions="WoW API reference server: functions, deprecations, namespaces, widgets, enums and events.",
    lifespan=api_index_lifespan,
)


def _index(ctx: Context) -> ApiIndex:
    return ctx.request_context.lifespan_context.index


@mcp.resource("config://wow-api")
@handle_mcp_resource_errors
def get_server_config() -> str:
    return f"{get_config()!r}\n{CONFIG_DOCS}"


@mcp.tool()
@handle_mcp_tool_errors
def lookup_api(name: str, ctx: Context) -> str:
    """Look up a WoW API function by name (exact or partial match). Returns full signature, params, returns, deprecation status, replacement, wiki link, game versions.

    Args:
        name: Function name to look up (e.g. "IsSpellKnown", "C_SpellBook.IsSpellKnown")
    """
    return execute_tool(_index(ctx), "lookup_api", name=name)


@mcp.tool()
@handle_mcp_tool_errors
def search_api(query: str, ctx: Context) -> str:
    """Search WoW API functions by keyword. Searches function names and descriptions. Returns up to 50 results.

    Args:
        query: Search query (e.g. "spell", "unit frame", "achievement")
    """
    return execute_tool(_index(ctx), "search_api", query=query)


@mcp.tool()
@handle_mcp_tool_errors
def list_deprecated(ctx: Context, filter: Optional[str] = None) -> str:
    """List all deprecated WoW API functions with their replacements. Optionally filter by namespace or function name.

    Args:
        filter: Optional filter by namespace or function name (e.g. "Spell", "Item", "Guild")
    """
    return execute_tool(_index(ctx), "list_deprecated", filter=filter)


@mcp.tool()
@handle_mcp_tool_errors
def get_namespace(name: str, ctx: Context) -> str:
    """Get all functions in a WoW API namespace (e.g. "C_SpellBook", "C_Item"). Pass "list" to see all available namespaces."""
    return execute_tool(_index(ctx), "get_namespace", name=name)


@mcp.tool()
@handle_mcp_tool_errors
def get_widget_methods(widget_type: str, ctx: Context) -> str:
    """Get all methods for a WoW UI widget class (e.g. "Frame", "Button", "ScriptRegion"). Pass "list" to see all widget types."""
    return execute_tool(_index(ctx), "get_widget_methods", widget_type=widget_type)


@mcp.tool()
@handle_mcp_tool_errors
def get_enum(name: str, ctx: Context) -> str:
    """Look up a WoW enum and its values (e.g. "Enum.SpellBookSpellBank"). Supports partial name matching."""
    return execute_tool(_index(ctx), "get_enum", name=name)


@mcp.tool()
@handle_mcp_tool_errors
def get_event(name: str, ctx: Context) -> str:
    """Look up a WoW frame event and its payload parameters (e.g. "PLAYER_LOGIN", "ADDON_LOADED"). Supports partial name matching."""
    return execute_tool(_index(ctx), "get_event", name=name)


@mcp.tool()
@handle_mcp_tool_errors
def get_api_stats(ctx: Context) -> str:
    """Counts of loaded functions, deprecations, namespaces, widgets, enums, events and CVars."""
    return execute_tool(_index(ctx), "get_api_stats")


def main():
    config = get_config()
    logging.basicConfig(level=config.get_log_level(), stream=sys.stderr)
    try:
        config.require_extension_path()
    except ConfigurationError as e:
        sys.stderr.write(f"{e}\n")
        raise SystemExit(1) from e
    mcp.run()


if __name__ == '__main__':
    main()
