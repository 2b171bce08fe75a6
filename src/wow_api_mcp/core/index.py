"""Core data structures: the unified API index and its queries."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Union

from ..indexing.models import ClassInfo, EventInfo, FunctionInfo, WidgetInfo

LOOKUP_LIMIT = 25
SEARCH_LIMIT = 50

EnumTable = Dict[str, int]


@dataclass
class ApiIndex:
    """In-memory index of the WoW API.

    Built once by ``ApiIndexBuilder`` and read-only afterwards; every query
    method is a pure read. Insertion order of ``functions`` follows the load
    passes and determines the order of list results.
    """

    functions: Dict[str, FunctionInfo] = field(default_factory=dict)
    namespaces: Dict[str, List[FunctionInfo]] = field(default_factory=dict)
    widgets: Dict[str, WidgetInfo] = field(default_factory=dict)
    enums: Dict[str, EnumTable] = field(default_factory=dict)
    events: Dict[str, EventInfo] = field(default_factory=dict)
    cvars: List[str] = field(default_factory=list)
    deprecated_names: Set[str] = field(default_factory=set)
    flavor_map: Dict[str, List[str]] = field(default_factory=dict)
    extension_version: Optional[str] = None

    # ----- 构建 - load passes only -----

    def add_function(self, func: FunctionInfo, source: str) -> None:
        """Index (or reindex) a function under its qualified name."""
        func.source = source
        previous = self.functions.get(func.full_name)
        self.functions[func.full_name] = func

        if func.namespace and not func.is_method:
            members = self.namespaces.setdefault(func.namespace, [])
            position = next((i for i, m in enumerate(members) if m is previous), None)
            if position is None:
                members.append(func)
            else:
                members[position] = func

    def add_class(self, class_info: ClassInfo) -> None:
        """Register a class declaration; accumulated methods are kept."""
        widget = self.widgets.get(class_info.name)
        if widget is None:
            self.widgets[class_info.name] = WidgetInfo(class_info=class_info)
        else:
            widget.class_info = class_info

    def add_widget_method(self, func: FunctionInfo) -> None:
        """Attach a method to its owner, creating the widget entry if needed."""
        self.widgets.setdefault(func.namespace, WidgetInfo()).methods.append(func)

    def has_function(self, full_name: str) -> bool:
        return full_name in self.functions

    # ----- 查询 - read-only -----

    def lookup_api(self, name: str) -> List[FunctionInfo]:
        """Look up a function by exact, case-insensitive, or partial name."""
        if name in self.functions:
            return [self.functions[name]]

        lower_name = name.lower()
        for key, func in self.functions.items():
            if key.lower() == lower_name:
                return [func]

        results = []
        for key, func in self.functions.items():
            short_name = func.name or key
            if short_name.lower() == lower_name or lower_name in key.lower():
                results.append(func)
                if len(results) >= LOOKUP_LIMIT:
                    break
        return results

    def search_api(self, query: str) -> List[FunctionInfo]:
        """Keyword search over qualified name, short name and description."""
        lower_query = query.lower()
        results = []
        for func in self.functions.values():
            searchable = " ".join(
                part for part in (func.full_name, func.name, func.description) if part
            ).lower()
            if lower_query in searchable:
                results.append(func)
                if len(results) >= SEARCH_LIMIT:
                    break
        return results

    def list_deprecated(self, namespace_filter: Optional[str] = None) -> List[FunctionInfo]:
        """All deprecated functions, optionally filtered by namespace (or name)."""
        lower_filter = namespace_filter.lower() if namespace_filter else None
        results = []
        for func in self.functions.values():
            if not func.deprecated:
                continue
            if lower_filter:
                haystack = func.namespace if func.namespace else func.full_name
                if lower_filter not in haystack.lower():
                    continue
            results.append(func)
        return results

    def get_namespace(self, name: str) -> List[FunctionInfo]:
        if name in self.namespaces:
            return self.namespaces[name]

        lower_name = name.lower()
        for key, funcs in self.namespaces.items():
            if key.lower() == lower_name:
                return funcs
        return []

    def list_namespaces(self) -> List[str]:
        return sorted(self.namespaces)

    def get_widget_methods(self, widget_type: str) -> Optional[WidgetInfo]:
        if widget_type in self.widgets:
            return self.widgets[widget_type]

        lower_type = widget_type.lower()
        for key, widget in self.widgets.items():
            if key.lower() == lower_type:
                return widget
        return None

    def list_widgets(self) -> List[str]:
        return sorted(self.widgets)

    def get_enum(self, name: str) -> Optional[Union[EnumTable, Dict[str, EnumTable]]]:
        """Exact match returns the table itself.

        Otherwise the first enum whose name equals or contains ``name``
        (case-insensitively) is returned wrapped as ``{enum_name: table}``.
        """
        if name in self.enums:
            return self.enums[name]

        lower_name = name.lower()
        for key, values in self.enums.items():
            if lower_name in key.lower():
                return {key: values}
        return None

    def search_enums(self, query: str) -> Dict[str, EnumTable]:
        lower_query = query.lower()
        return {key: values for key, values in self.enums.items() if lower_query in key.lower()}

    def get_event(self, name: str) -> Optional[Union[EventInfo, List[EventInfo]]]:
        """Exact (upper-cased) match returns one event, else the list of substring matches."""
        upper_name = name.upper()
        if upper_name in self.events:
            return self.events[upper_name]

        results = [event for key, event in self.events.items() if upper_name in key]
        return results or None

    def get_stats(self) -> Dict[str, Any]:
        return {
            "extension_version": self.extension_version,
            "total_functions": len(self.functions),
            "deprecated_functions": sum(1 for f in self.functions.values() if f.deprecated),
            "namespaces": len(self.namespaces),
            "widget_types": len(self.widgets),
            "enums": len(self.enums),
            "events": len(self.events),
            "cvars": len(self.cvars),
        }
