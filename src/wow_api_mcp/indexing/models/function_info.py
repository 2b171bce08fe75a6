"""
Function information model for API indexing.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ParamInfo:
    """A single ``@param`` entry."""

    name: str
    type: str
    optional: bool = False
    description: Optional[str] = None


@dataclass
class ReturnInfo:
    """A single ``@return`` entry."""

    type: str
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass
class FunctionInfo:
    """Information about an API function or widget method.

    ``full_name`` is the primary key of the index: ``C_Spell.GetSpellInfo`` for
    namespaced functions, ``Frame:Show`` for methods.
    """

    full_name: str
    name: str
    namespace: Optional[str] = None
    is_method: bool = False
    args: str = ""
    params: List[ParamInfo] = field(default_factory=list)
    returns: List[ReturnInfo] = field(default_factory=list)
    description: Optional[str] = None
    wiki_url: Optional[str] = None
    deprecated: bool = False
    replaced_by: Optional[str] = None
    replaced_by_url: Optional[str] = None
    deprecated_in_patch: Optional[str] = None
    game_versions: List[str] = field(default_factory=list)
    source: Optional[str] = None
