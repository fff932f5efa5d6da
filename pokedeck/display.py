"""Display list: the current cards and their speed visibility flags.

Pure local state: nothing here touches storage or the network.
"""

from __future__ import annotations

from typing import Iterator, Optional

from pokedeck.models import DisplayRecord


class DisplayList:
    """Ordered display records with show/hide/toggle operations."""

    def __init__(self, records: Optional[list[DisplayRecord]] = None) -> None:
        self._records: list[DisplayRecord] = list(records or [])

    @property
    def records(self) -> list[DisplayRecord]:
        return list(self._records)

    @property
    def ids(self) -> list[int]:
        return [r.id for r in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[DisplayRecord]:
        return iter(list(self._records))

    def get(self, item_id: int) -> Optional[DisplayRecord]:
        for record in self._records:
            if record.id == item_id:
                return record
        return None

    def replace(self, records: list[DisplayRecord]) -> None:
        """Install a freshly fetched list. Every record starts hidden."""
        for record in records:
            record.visible = False
        self._records = list(records)

    def show_all(self) -> None:
        for record in self._records:
            record.visible = True

    def hide_all(self) -> None:
        for record in self._records:
            record.visible = False

    def toggle(self, item_id: int) -> bool:
        """Flip one record's visibility. Returns False if the id isn't shown."""
        record = self.get(item_id)
        if record is None:
            return False
        record.visible = not record.visible
        return True
