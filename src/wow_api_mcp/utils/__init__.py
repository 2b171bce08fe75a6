"""
Utility modules for the WoW API MCP server.

This package contains shared utilities:
- error_handler: Decorator-based error handling for MCP entry points
- response_formatter: Text rendering of index records
- file_walker: Sorted recursive discovery of annotation files
"""

from .error_handler import handle_mcp_resource_errors, handle_mcp_tool_errors
from .response_formatter import ResponseFormatter
from .file_walker import FileWalker, create_file_walker

__all__ = [
    'handle_mcp_resource_errors',
    'handle_mcp_tool_errors',
    'ResponseFormatter',
    'FileWalker',
    'create_file_walker'
]
