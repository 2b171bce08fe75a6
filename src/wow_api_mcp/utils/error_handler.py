"""
Decorator-based error handling for MCP entry points.

Ordinary not-found results are plain text and never reach these handlers;
they only catch unexpected failures so a single bad request cannot take the
stdio server down.
"""

import logging
from functools import wraps
from typing import Callable

logger = logging.getLogger(__name__)


def handle_mcp_tool_errors(func: Callable) -> Callable:
    """Turn an exception raised by a tool into an error text response."""

    @wraps(func)
    def wrapper(*args, **kwargs) -> str:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.exception(f"Tool {func.__name__} failed")
            return f"Error in {func.__name__}: {e}"

    return wrapper


def handle_mcp_resource_errors(func: Callable) -> Callable:
    """Same as handle_mcp_tool_errors, for resource handlers."""

    @wraps(func)
    def wrapper(*args, **kwargs) -> str:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.exception(f"Resource {func.__name__} failed")
            return f"Error reading resource {func.__name__}: {e}"

    return wrapper
