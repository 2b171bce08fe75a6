"""
MCP Tools - 直接数据操作

Each tool takes the loaded ApiIndex plus the request arguments and returns
display text. Not-found is an ordinary answer, never an exception.
"""

from typing import Optional

from ..utils.response_formatter import ResponseFormatter
from .index import ApiIndex

LIST_KEYWORD = "list"
RESULT_SEPARATOR = "\n\n---\n\n"


def tool_lookup_api(index: ApiIndex, name: str) -> str:
    results = index.lookup_api(name)
    if not results:
        return f'No API function found matching "{name}".'
    return RESULT_SEPARATOR.join(ResponseFormatter.format_function(f) for f in results)


def tool_search_api(index: ApiIndex, query: str) -> str:
    results = index.search_api(query)
    if not results:
        return f'No API functions found matching "{query}".'
    lines = [f'Found {len(results)} result(s) for "{query}":\n']
    lines.extend(ResponseFormatter.format_function_compact(f) for f in results)
    return "\n".join(lines)


def tool_list_deprecated(index: ApiIndex, filter: Optional[str] = None) -> str:
    results = index.list_deprecated(filter)
    filter_msg = f' matching "{filter}"' if filter else ""
    if not results:
        return f"No deprecated functions found{filter_msg}."
    lines = [f"{len(results)} deprecated function(s){filter_msg}:\n"]
    lines.extend(ResponseFormatter.format_deprecated_entry(f) for f in results)
    return "\n".join(lines)


def tool_get_namespace(index: ApiIndex, name: str) -> str:
    """Functions of one namespace; ``"list"`` lists every namespace."""
    if name.lower() == LIST_KEYWORD:
        namespaces = index.list_namespaces()
        return f"{len(namespaces)} namespaces:\n\n" + "\n".join(namespaces)

    functions = index.get_namespace(name)
    if not functions:
        return f'No namespace found matching "{name}". Use name="list" to see all namespaces.'

    header = f"Namespace: {functions[0].namespace or name} ({len(functions)} functions)\n"
    return "\n\n".join([header] + [ResponseFormatter.format_function(f) for f in functions])


def tool_get_widget_methods(index: ApiIndex, widget_type: str) -> str:
    """Class info and methods of a widget; ``"list"`` lists every widget type."""
    if widget_type.lower() == LIST_KEYWORD:
        widgets = index.list_widgets()
        return f"{len(widgets)} widget types:\n\n" + "\n".join(widgets)

    widget = index.get_widget_methods(widget_type)
    if widget is None:
        return (
            f'No widget type found matching "{widget_type}". '
            f'Use widget_type="list" to see all types.'
        )
    return ResponseFormatter.format_widget(widget)


def tool_get_enum(index: ApiIndex, name: str) -> str:
    if name in index.enums:
        return "\n".join(ResponseFormatter.format_enum_values(name, index.enums[name]))

    result = index.get_enum(name)
    if result is not None:
        return "\n".join(ResponseFormatter.format_enum_tables(result))

    matches = index.search_enums(name)
    if not matches:
        return f'No enum found matching "{name}".'
    lines = [f'Enums matching "{name}":\n']
    lines.extend(ResponseFormatter.format_enum_tables(matches))
    return "\n".join(lines)


def tool_get_event(index: ApiIndex, name: str) -> str:
    result = index.get_event(name)
    if result is None:
        return f'No event found matching "{name}".'
    if isinstance(result, list):
        return ResponseFormatter.format_event_list(name, result)
    return ResponseFormatter.format_event(result)


def tool_get_api_stats(index: ApiIndex) -> str:
    return ResponseFormatter.format_stats(index.get_stats())
