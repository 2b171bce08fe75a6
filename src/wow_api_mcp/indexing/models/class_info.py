"""
Class and widget information models for API indexing.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .function_info import FunctionInfo


@dataclass
class FieldInfo:
    """A single ``@field`` entry of a class."""

    name: str
    type: str
    optional: bool = False
    description: Optional[str] = None


@dataclass
class ClassInfo:
    """A ``@class`` declaration with its fields and parents."""

    name: str
    inherits: List[str] = field(default_factory=list)
    fields: List[FieldInfo] = field(default_factory=list)
    wiki_url: Optional[str] = None


@dataclass
class WidgetInfo:
    """Entry of the widget table.

    Methods are collected independently of the class declaration, so
    ``class_info`` stays ``None`` for owners that never declared ``@class``.
    """

    class_info: Optional[ClassInfo] = None
    methods: List[FunctionInfo] = field(default_factory=list)
