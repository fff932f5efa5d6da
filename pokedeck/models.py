"""Data models for pokedeck.

Notice enum, Candidate, DisplayRecord: the typed structures that flow
through store → fetcher → display → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Notice(str, Enum):
    """User-visible notices emitted by the store and the resolver."""

    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class Candidate:
    """An unconfirmed search result awaiting the user's confirmation."""

    id: int
    image_url: str = ""


@dataclass
class DisplayRecord:
    """View-model for one saved entry, rebuilt on every collection change.

    ``speed`` is None when the upstream record carries no speed stat.
    ``visible`` controls whether the speed is rendered or masked.
    """

    id: int
    name: str = ""
    image_url: str = ""
    speed: Optional[int] = None
    visible: bool = False

    @property
    def speed_label(self) -> str:
        if not self.visible:
            return "-"
        if self.speed is None:
            return "?"
        return str(self.speed)
