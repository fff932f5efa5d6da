"""Candidate resolver: one search, one pending candidate, one confirm.

A search never raises into the caller: lookup failures clear the candidate
and emit a not-found notice instead.
"""

from __future__ import annotations

import logging
from typing import Optional

from pokedeck.fetcher import LookupClient
from pokedeck.lookup import LookupFailedError, PokedeckLookupError, normalize_query
from pokedeck.models import Candidate, Notice
from pokedeck.store import CollectionStore, NoticeCallback, ignore_notice

logger = logging.getLogger(__name__)


class CandidateResolver:
    """Holds at most one unconfirmed search result."""

    def __init__(
        self,
        client: LookupClient,
        store: CollectionStore,
        notify: Optional[NoticeCallback] = None,
    ) -> None:
        self.client = client
        self.store = store
        self.notify = notify or ignore_notice
        self.candidate: Optional[Candidate] = None
        self.query: str = ""

    def search(self, raw: str) -> Optional[Candidate]:
        """Look up ``raw`` and make the result the pending candidate.

        Blank input is ignored and leaves any existing candidate alone.
        """
        self.query = raw
        key = normalize_query(raw)
        if not key:
            return None

        try:
            record = self.client.fetch(key)
        except PokedeckLookupError as e:
            if isinstance(e, LookupFailedError):
                logger.warning("Search for %r failed: %s", key, e.reason)
            self.candidate = None
            self.notify(Notice.NOT_FOUND, f"No pokemon found for '{raw.strip()}'.")
            return None

        self.candidate = Candidate(id=record.id, image_url=record.image_url)
        return self.candidate

    def clear(self) -> None:
        self.candidate = None

    def confirm(self) -> bool:
        """Commit the pending candidate into the store.

        Returns True only when the store gained a new id.
        """
        candidate = self.candidate
        if candidate is None:
            return False

        if candidate.id in self.store:
            self.notify(Notice.DUPLICATE, f"#{candidate.id} is already in the collection.")
            self.candidate = None
            return False

        self.store.add(candidate.id)
        self.candidate = None
        self.query = ""
        return True
