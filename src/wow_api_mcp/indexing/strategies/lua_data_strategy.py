"""
Parsers for the single-file data tables: enums, frame events and CVars.
"""

import re
from typing import Dict, List

from ..models import EventInfo
from .lua_annotation_strategy import BOM

ENUM_START_RE = re.compile(r"^(?:---)?@enum\s+([\w.]+)")
ENUM_OPEN_RE = re.compile(r"^[\w.]+\s*=\s*\{$")
ENUM_CLOSE_RE = re.compile(r"^\},?$")
ENUM_ENTRY_RE = re.compile(r"^(\w+)\s*=\s*(-?\d+),?$")

EVENT_RE = re.compile(r'^\s*(?:---)?\|"([^"]+)"(?:\s*#\s*`([^`]*)`)?')
STRING_LIST_RE = re.compile(r'^\s*(?:---)?\|"([^"]+)"')


def parse_enum_text(content: str) -> Dict[str, Dict[str, int]]:
    """Parse ``---@enum`` blocks.

    Format::

        ---@enum Enum.Name
        Enum.Name = {
            Key = 0,
        }

    A table is committed only when its closing brace is seen; a new
    ``@enum`` line discards an unfinished one.
    """
    enums: Dict[str, Dict[str, int]] = {}
    current_enum = None
    current_values: Dict[str, int] = {}

    for raw_line in content.splitlines():
        line = raw_line.strip().lstrip(BOM)

        start = ENUM_START_RE.match(line)
        if start:
            current_enum = start.group(1)
            current_values = {}
            continue

        if current_enum is None:
            continue

        if ENUM_OPEN_RE.match(line):
            continue

        if ENUM_CLOSE_RE.match(line):
            enums[current_enum] = current_values
            current_enum = None
            current_values = {}
            continue

        entry = ENUM_ENTRY_RE.match(line)
        if entry:
            current_values[entry.group(1)] = int(entry.group(2))

    return enums


def parse_event_text(content: str) -> Dict[str, EventInfo]:
    """Parse ``---|"EVENT_NAME" # `payload``` alias lines into EventInfo records."""
    events: Dict[str, EventInfo] = {}
    for line in content.splitlines():
        match = EVENT_RE.match(line.lstrip(BOM))
        if match:
            events[match.group(1)] = EventInfo(name=match.group(1), payload=match.group(2) or None)
    return events


def parse_string_list_text(content: str) -> List[str]:
    """Collect every ``---|"value"`` line in order (CVar names)."""
    values = []
    for line in content.splitlines():
        match = STRING_LIST_RE.match(line.lstrip(BOM))
        if match:
            values.append(match.group(1))
    return values


def _read(file_path: str) -> str:
    with open(file_path, "r", encoding="utf-8-sig", errors="replace") as f:
        return f.read()


def parse_enum_file(file_path: str) -> Dict[str, Dict[str, int]]:
    return parse_enum_text(_read(file_path))


def parse_event_file(file_path: str) -> Dict[str, EventInfo]:
    return parse_event_text(_read(file_path))


def parse_cvar_file(file_path: str) -> List[str]:
    return parse_string_list_text(_read(file_path))
