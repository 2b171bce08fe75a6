"""
Frame event model.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EventInfo:
    """A frame event and its payload text, if any."""

    name: str
    payload: Optional[str] = None
