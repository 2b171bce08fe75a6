"""
Response formatting utilities.

Renders index records as the plain text the MCP tools return.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Mapping

if TYPE_CHECKING:
    from ..indexing.models import EventInfo, FunctionInfo, WidgetInfo


class ResponseFormatter:
    """Text renderings shared by all tools."""

    @staticmethod
    def format_function(func: "FunctionInfo") -> str:
        """Full multi-line rendering of one function."""
        lines = []

        if func.deprecated:
            lines.append(f"[DEPRECATED] {func.full_name}")
            if func.replaced_by:
                lines.append(f"  Replaced by: {func.replaced_by}")
                if func.replaced_by_url:
                    lines.append(f"  Replacement docs: {func.replaced_by_url}")
            if func.deprecated_in_patch:
                lines.append(f"  Deprecated in patch: {func.deprecated_in_patch}")
        else:
            lines.append(func.full_name)

        if func.description:
            lines.append(f"  Description: {func.description}")
        if func.wiki_url:
            lines.append(f"  Wiki: {func.wiki_url}")
        if func.game_versions:
            lines.append(f"  Game versions: {', '.join(func.game_versions)}")

        if func.params:
            lines.append("  Parameters:")
            for p in func.params:
                opt = "?" if p.optional else ""
                desc = f" -- {p.description}" if p.description else ""
                lines.append(f"    {p.name}{opt}: {p.type}{desc}")

        if func.returns:
            lines.append("  Returns:")
            for r in func.returns:
                name = f"{r.name}: " if r.name else ""
                desc = f" -- {r.description}" if r.description else ""
                lines.append(f"    {name}{r.type}{desc}")

        return "\n".join(lines)

    @staticmethod
    def format_function_compact(func: "FunctionInfo") -> str:
        """One-line signature: ``[DEPRECATED] NS.Func(a: t, b?: t) -> r -> Replacement``."""
        dep = "[DEPRECATED] " if func.deprecated else ""
        replacement = f" -> {func.replaced_by}" if func.replaced_by else ""
        params = ", ".join(f"{p.name}{'?' if p.optional else ''}: {p.type}" for p in func.params)
        returns = ", ".join(r.type for r in func.returns)
        ret_str = f" -> {returns}" if returns else ""
        return f"{dep}{func.full_name}({params}){ret_str}{replacement}"

    @staticmethod
    def format_deprecated_entry(func: "FunctionInfo") -> str:
        replacement = f" -> {func.replaced_by}" if func.replaced_by else " (no replacement listed)"
        patch = f" [patch {func.deprecated_in_patch}]" if func.deprecated_in_patch else ""
        return f"{func.full_name}{replacement}{patch}"

    @staticmethod
    def format_widget(widget: "WidgetInfo") -> str:
        lines = []
        class_info = widget.class_info
        if class_info:
            lines.append(f"Widget: {class_info.name}")
            if class_info.inherits:
                lines.append(f"Inherits: {', '.join(class_info.inherits)}")
            if class_info.wiki_url:
                lines.append(f"Wiki: {class_info.wiki_url}")
            if class_info.fields:
                lines.append("\nFields:")
                for f in class_info.fields:
                    opt = "?" if f.optional else ""
                    desc = f" -- {f.description}" if f.description else ""
                    lines.append(f"  {f.name}{opt}: {f.type}{desc}")

        if widget.methods:
            lines.append(f"\nMethods ({len(widget.methods)}):\n")
            for method in widget.methods:
                lines.append(ResponseFormatter.format_function(method))
                lines.append("")

        return "\n".join(lines)

    @staticmethod
    def format_enum_values(name: str, values: Mapping[str, int]) -> List[str]:
        lines = [f"{name}:"]
        for key, value in values.items():
            lines.append(f"  {key} = {value}")
        return lines

    @staticmethod
    def format_enum_tables(tables: Mapping[str, Mapping[str, int]]) -> List[str]:
        lines: List[str] = []
        for enum_name, values in tables.items():
            lines.extend(ResponseFormatter.format_enum_values(enum_name, values))
            lines.append("")
        return lines

    @staticmethod
    def format_event(event: "EventInfo") -> str:
        payload = f"Payload: {event.payload}" if event.payload else "No payload parameters"
        return f"Event: {event.name}\n{payload}"

    @staticmethod
    def format_event_list(query: str, events: List["EventInfo"]) -> str:
        lines = [f'Events matching "{query}" ({len(events)} results):\n']
        for event in events:
            payload = f" -- payload: {event.payload}" if event.payload else " -- no payload"
            lines.append(f"{event.name}{payload}")
        return "\n".join(lines)

    @staticmethod
    def format_stats(stats: Dict[str, Any]) -> str:
        return "\n".join(f"{key}: {value}" for key, value in stats.items())
