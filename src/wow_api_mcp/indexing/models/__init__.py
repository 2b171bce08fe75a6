"""
Model classes for the indexing system.
"""

from .function_info import FunctionInfo, ParamInfo, ReturnInfo
from .class_info import ClassInfo, FieldInfo, WidgetInfo
from .event_info import EventInfo

__all__ = [
    'FunctionInfo',
    'ParamInfo',
    'ReturnInfo',
    'ClassInfo',
    'FieldInfo',
    'WidgetInfo',
    'EventInfo',
]
