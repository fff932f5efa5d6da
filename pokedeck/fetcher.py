"""Detail fetcher: resolves the saved id sequence into display records.

Every refresh re-fetches every id from scratch; there is no cache and no
retry. Ids whose lookup fails are left out of the display list but stay in
the collection, so a later refresh can bring them back.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from pokedeck.lookup import PokedeckLookupError
from pokedeck.models import DisplayRecord

logger = logging.getLogger(__name__)


class LookupClient(Protocol):
    def fetch(self, key: str | int) -> DisplayRecord: ...


def fetch_records(ids: list[int], client: LookupClient) -> list[DisplayRecord]:
    """Look up each id in order and return the hidden records that resolved."""
    records: list[DisplayRecord] = []
    for item_id in ids:
        try:
            record = client.fetch(item_id)
        except PokedeckLookupError as e:
            logger.warning("Skipping #%s: %s", item_id, e.reason)
            continue
        record.visible = False
        records.append(record)
    return records


class DetailFetcher:
    """Runs fetch passes and drops any pass superseded while it ran.

    Each call to ``refresh`` takes a new generation number. If another
    refresh starts before this one finishes (for example a change callback
    fired from inside a lookup), the older pass returns None instead of its
    stale records.
    """

    def __init__(self, client: LookupClient) -> None:
        self.client = client
        self.generation = 0

    def refresh(self, ids: list[int]) -> Optional[list[DisplayRecord]]:
        self.generation += 1
        generation = self.generation
        if not ids:
            return []

        records = fetch_records(ids, self.client)
        if generation != self.generation:
            logger.debug("Discarding superseded fetch pass %d", generation)
            return None
        return records
