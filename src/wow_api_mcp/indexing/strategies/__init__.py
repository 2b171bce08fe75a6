"""
Parsing strategies for the annotation corpus and its side tables.
"""

from .lua_annotation_strategy import (
    LuaAnnotationStrategy,
    ParsedLuaFile,
    parse_annotation_block,
    parse_class_block,
    parse_function_line,
)
from .lua_data_strategy import (
    parse_cvar_file,
    parse_enum_file,
    parse_enum_text,
    parse_event_file,
    parse_event_text,
    parse_string_list_text,
)
from .ts_data_strategy import (
    decode_flavor_bitmask,
    extract_patch_from_filename,
    parse_deprecated_file,
    parse_deprecated_text,
    parse_flavor_file,
    parse_flavor_text,
)

__all__ = [
    'LuaAnnotationStrategy',
    'ParsedLuaFile',
    'parse_annotation_block',
    'parse_class_block',
    'parse_function_line',
    'parse_cvar_file',
    'parse_enum_file',
    'parse_enum_text',
    'parse_event_file',
    'parse_event_text',
    'parse_string_list_text',
    'decode_flavor_bitmask',
    'extract_patch_from_filename',
    'parse_deprecated_file',
    'parse_deprecated_text',
    'parse_flavor_file',
    'parse_flavor_text',
]
