"""Collection store: the ordered list of saved ids and its persistence.

The id sequence is the source of truth for membership. It is unique,
insertion ordered, and written back to storage after every mutation.
Subscribers are called with a copy of the new sequence after each change.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Optional

from pokedeck.models import Notice
from pokedeck.storage import Storage

logger = logging.getLogger(__name__)

STORAGE_KEY = "pokemons"

NoticeCallback = Callable[[Notice, str], None]
ChangeCallback = Callable[[list[int]], None]


def ignore_notice(notice: Notice, message: str) -> None:
    pass


def decode_ids(raw: Optional[str]) -> list[int]:
    """Decode a stored JSON id list, falling back to an empty list.

    Non-integer entries are dropped and repeated ids keep their first
    position, so whatever comes back satisfies the uniqueness invariant.
    """
    if raw is None:
        return []
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning("Stored collection is not valid JSON, starting empty: %s", e)
        return []
    if not isinstance(data, list):
        logger.warning("Stored collection is not a list, starting empty")
        return []

    ids: list[int] = []
    for item in data:
        # bool is an int subclass; true/false are not ids
        if isinstance(item, bool) or not isinstance(item, int):
            logger.warning("Dropping non-integer id from stored collection: %r", item)
            continue
        if item not in ids:
            ids.append(item)
    return ids


def encode_ids(ids: list[int]) -> str:
    return json.dumps(ids)


class CollectionStore:
    """Ordered, duplicate-free id collection backed by a Storage."""

    def __init__(
        self,
        storage: Storage,
        key: str = STORAGE_KEY,
        notify: Optional[NoticeCallback] = None,
    ) -> None:
        self.storage = storage
        self.key = key
        self.notify = notify or ignore_notice
        self._ids: list[int] = []
        self._subscribers: list[ChangeCallback] = []

    @property
    def ids(self) -> list[int]:
        return list(self._ids)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register a change callback. Returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self) -> None:
        snapshot = self.ids
        for callback in list(self._subscribers):
            callback(snapshot)

    def _save(self, ids: list[int]) -> None:
        """Persist ``ids``, then adopt them. A failed write leaves memory as it was."""
        self.storage.set(self.key, encode_ids(ids))
        self._ids = ids

    def load(self) -> list[int]:
        """Read the persisted sequence and notify subscribers."""
        self._ids = decode_ids(self.storage.get(self.key))
        logger.debug("Loaded %d ids from storage", len(self._ids))
        self._publish()
        return self.ids

    def add(self, item_id: int) -> bool:
        """Append an id. A duplicate raises a notice and changes nothing."""
        if item_id in self._ids:
            self.notify(Notice.DUPLICATE, f"#{item_id} is already in the collection.")
            return False
        self._save([*self._ids, item_id])
        self.notify(Notice.ADDED, f"Added #{item_id}.")
        self._publish()
        return True

    def remove(self, item_id: int) -> bool:
        """Remove an id if present. Absent ids are a no-op."""
        if item_id not in self._ids:
            return False
        self._save([i for i in self._ids if i != item_id])
        self.notify(Notice.REMOVED, f"Removed #{item_id}.")
        self._publish()
        return True
