"""
LuaLS annotation parsing strategy.

Turns ``---`` doc-comment blocks and the declaration line that follows them
into FunctionInfo / ClassInfo records. Comment lines are classified one
at a time against an ordered rule table; lines matching no rule are skipped.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, List, Match, Optional, Pattern, Tuple

from ..models import ClassInfo, FieldInfo, FunctionInfo, ParamInfo, ReturnInfo

logger = logging.getLogger(__name__)

ANNOTATION_PREFIX = "---"
# Byte-order mark; str.strip() keeps it.
BOM = "\ufeff"

_PREFIX_RE = re.compile(r"^---\s?")

NAMESPACED_FUNCTION_RE = re.compile(r"^function\s+([\w.]+)\s*\(([^)]*)\)\s*end$")
METHOD_FUNCTION_RE = re.compile(r"^function\s+([\w.]+):(\w+)\s*\(([^)]*)\)\s*end$")

CLASS_RE = re.compile(r"^---@class\s+([\w.]+)(?:\s*:\s*([\w.,\s]+))?")
FIELD_RE = re.compile(r"^---@field\s+(\w+)(\?)?\s+(\S+)\s*(.*)?$")
CLASS_DOC_RE = re.compile(r"^---\[Documentation\]\(([^)]+)\)")


@dataclass
class AnnotationBlock:
    """Partial function record accumulated from one comment block."""

    deprecated: bool = False
    replaced_by: Optional[str] = None
    replaced_by_url: Optional[str] = None
    wiki_url: Optional[str] = None
    params: List[ParamInfo] = field(default_factory=list)
    returns: List[ReturnInfo] = field(default_factory=list)
    description_parts: List[str] = field(default_factory=list)

    @property
    def description(self) -> Optional[str]:
        return " ".join(self.description_parts) if self.description_parts else None


@dataclass
class ParsedLuaFile:
    """Everything extracted from one annotation file."""

    functions: List[FunctionInfo] = field(default_factory=list)
    classes: List[ClassInfo] = field(default_factory=list)


def _mark_deprecated(block: AnnotationBlock, _match: Match) -> None:
    block.deprecated = True


def _set_replacement(block: AnnotationBlock, match: Match) -> None:
    block.replaced_by = match.group(1)
    block.replaced_by_url = match.group(2)


def _set_wiki_url(block: AnnotationBlock, match: Match) -> None:
    block.wiki_url = match.group(1)


def _add_param(block: AnnotationBlock, match: Match) -> None:
    block.params.append(ParamInfo(
        name=match.group(1),
        optional=bool(match.group(2)),
        type=match.group(3),
        description=match.group(4) or None,
    ))


def _add_return(block: AnnotationBlock, match: Match) -> None:
    block.returns.append(ReturnInfo(
        type=match.group(1),
        name=match.group(2) or None,
        description=match.group(3) or None,
    ))


def _ignore(_block: AnnotationBlock, _match: Match) -> None:
    pass


def _add_description(block: AnnotationBlock, match: Match) -> None:
    block.description_parts.append(match.group(1))


# Order matters: first match wins for each line.
ANNOTATION_RULES: List[Tuple[Pattern, Callable[[AnnotationBlock, Match], None]]] = [
    (re.compile(r"^@deprecated$"), _mark_deprecated),
    (re.compile(r"^Deprecated by \[([^\]]+)\]\(([^)]+)\)"), _set_replacement),
    (re.compile(r"^\[Documentation\]\(([^)]+)\)"), _set_wiki_url),
    (re.compile(r"^@param\s+(\w+)(\?)?\s+(\S+)\s*(.*)?$"), _add_param),
    (re.compile(r"^@return\s+(\S+)\s*(\w+)?\s*(.*)?$"), _add_return),
    # class/field/enum/alias/overload metadata and headings belong to other extractors
    (re.compile(r"^[@#]"), _ignore),
    (re.compile(r"^\s*(\S.*?)\s*$"), _add_description),
]


def parse_annotation_block(lines: List[str]) -> AnnotationBlock:
    """Classify each ``---`` line of a block and fold it into one AnnotationBlock."""
    block = AnnotationBlock()
    for line in lines:
        text = _PREFIX_RE.sub("", line, count=1)
        for pattern, handler in ANNOTATION_RULES:
            match = pattern.match(text)
            if match:
                handler(block, match)
                break
    return block


def parse_function_line(line: str) -> Optional[FunctionInfo]:
    """Parse ``function NS.Func(args) end`` or ``function Owner:Method(args) end``.

    Returns None for anything else.
    """
    match = NAMESPACED_FUNCTION_RE.match(line)
    if match:
        full_name, args = match.group(1), match.group(2)
        namespace, dot, name = full_name.rpartition(".")
        if not dot:
            return FunctionInfo(full_name=full_name, name=full_name, args=args)
        return FunctionInfo(full_name=full_name, name=name, namespace=namespace, args=args)

    match = METHOD_FUNCTION_RE.match(line)
    if match:
        owner, method, args = match.groups()
        return FunctionInfo(
            full_name=f"{owner}:{method}",
            name=method,
            namespace=owner,
            is_method=True,
            args=args,
        )

    return None


def parse_class_block(lines: List[str]) -> List[ClassInfo]:
    """Extract every ``@class`` declared in a pending comment block.

    Fields and the documentation link are shared by all classes of the block.
    """
    classes = []
    for line in lines:
        class_match = CLASS_RE.match(line)
        if not class_match:
            continue

        parents = class_match.group(2)
        class_info = ClassInfo(
            name=class_match.group(1),
            inherits=[p.strip() for p in parents.split(",") if p.strip()] if parents else [],
        )
        for block_line in lines:
            field_match = FIELD_RE.match(block_line)
            if field_match:
                class_info.fields.append(FieldInfo(
                    name=field_match.group(1),
                    optional=bool(field_match.group(2)),
                    type=field_match.group(3),
                    description=field_match.group(4) or None,
                ))
            doc_match = CLASS_DOC_RE.match(block_line)
            if doc_match:
                class_info.wiki_url = doc_match.group(1)
        classes.append(class_info)
    return classes


class LuaAnnotationStrategy:
    """Strategy for parsing LuaLS annotation files."""

    def get_supported_extensions(self) -> List[str]:
        return ['.lua']

    def parse_file(self, file_path: str) -> ParsedLuaFile:
        """Parse an annotation file from disk."""
        with open(file_path, "r", encoding="utf-8-sig", errors="replace") as f:
            content = f.read()
        parsed = self.parse_content(content)
        logger.debug(
            f"Parsed {file_path}: {len(parsed.functions)} functions, {len(parsed.classes)} classes"
        )
        return parsed

    def parse_content(self, content: str) -> ParsedLuaFile:
        """Parse annotation text.

        ``---`` lines accumulate into a pending block. A ``function`` line
        consumes the block as its annotations; any other line (including a
        blank one, or the end of input) ends the block and turns its
        ``@class`` declarations into ClassInfo records.
        """
        result = ParsedLuaFile()
        pending: List[str] = []

        for raw_line in content.splitlines() + [""]:
            line = raw_line.strip().lstrip(BOM)

            if line.startswith(ANNOTATION_PREFIX):
                pending.append(line)
                continue

            if line.startswith("function "):
                function_info = parse_function_line(line)
                if function_info:
                    block = parse_annotation_block(pending)
                    function_info.deprecated = block.deprecated
                    function_info.replaced_by = block.replaced_by
                    function_info.replaced_by_url = block.replaced_by_url
                    function_info.wiki_url = block.wiki_url
                    function_info.params = block.params
                    function_info.returns = block.returns
                    function_info.description = block.description
                    result.functions.append(function_info)
                pending = []
                continue

            if pending:
                result.classes.extend(parse_class_block(pending))
                pending = []

        return result
