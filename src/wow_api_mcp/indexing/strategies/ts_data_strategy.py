"""
Parsers for the compiled side tables shipped next to the annotations.

Both files are JavaScript modules; they are scanned with regular
expressions, never evaluated.
"""

import re
from pathlib import Path
from typing import Dict, List, Optional

# Bit assignments of the flavor bitmask, in display order.
FLAVOR_BITS = (
    (0x1, "Mainline"),
    (0x2, "Vanilla"),
    (0x4, "Mists"),
)

FLAVOR_ENTRY_RE = re.compile(r'\["([^"]+)"\]\s*:\s*(0[xX][0-9a-fA-F]+|\d+)')
QUOTED_STRING_RE = re.compile(r'"([^"]+)"')
PATCH_FILENAME_RE = re.compile(r"Deprecated_(\d+)[._](\d+)[._](\d+)")

# Module boilerplate strings that appear in deprecated.js but are not API names.
DEPRECATED_SENTINELS = frozenset({"__esModule", "use strict"})


def decode_flavor_bitmask(bitmask: int) -> List[str]:
    """Decode a flavor bitmask into game version tags; unknown bits are ignored."""
    return [tag for bit, tag in FLAVOR_BITS if bitmask & bit]


def _parse_int_literal(literal: str) -> int:
    if literal.lower().startswith("0x"):
        return int(literal, 16)
    return int(literal)


def parse_flavor_text(content: str) -> Dict[str, List[str]]:
    """Parse ``["Name"]: 0x7`` entries into name -> game versions."""
    return {
        match.group(1): decode_flavor_bitmask(_parse_int_literal(match.group(2)))
        for match in FLAVOR_ENTRY_RE.finditer(content)
    }


def parse_deprecated_text(content: str) -> List[str]:
    """Collect every quoted string except the module boilerplate."""
    return [
        match.group(1)
        for match in QUOTED_STRING_RE.finditer(content)
        if match.group(1) not in DEPRECATED_SENTINELS
    ]


def parse_flavor_file(file_path: str) -> Dict[str, List[str]]:
    return parse_flavor_text(Path(file_path).read_text(encoding="utf-8-sig", errors="replace"))


def parse_deprecated_file(file_path: str) -> List[str]:
    return parse_deprecated_text(Path(file_path).read_text(encoding="utf-8-sig", errors="replace"))


def extract_patch_from_filename(file_path: str) -> Optional[str]:
    """``Deprecated_11_0_5.lua`` -> ``"11.0.5"``; None when the name has no patch."""
    match = PATCH_FILENAME_RE.search(Path(file_path).name)
    if match:
        return ".".join(match.groups())
    return None
