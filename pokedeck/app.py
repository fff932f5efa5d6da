"""Application shell: wires store → fetcher → display and routes notices.

The store publishes every change; the app answers by running a fetch pass
and installing the result in the display list. Notices from the store and
the resolver fan out to whatever listeners the UI registered.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from pokedeck.config import Settings
from pokedeck.display import DisplayList
from pokedeck.fetcher import DetailFetcher, LookupClient
from pokedeck.lookup import PokeApiClient
from pokedeck.models import Candidate, Notice
from pokedeck.resolver import CandidateResolver
from pokedeck.storage import JsonFileStorage, MemoryStorage, Storage
from pokedeck.store import CollectionStore, NoticeCallback

logger = logging.getLogger(__name__)


class CatalogApp:
    """The collection, its display list, and the search slot, wired together."""

    def __init__(self, storage: Storage, client: LookupClient) -> None:
        self.client = client
        self._listeners: list[NoticeCallback] = []

        self.store = CollectionStore(storage, notify=self._emit)
        self.fetcher = DetailFetcher(client)
        self.display = DisplayList()
        self.resolver = CandidateResolver(client, self.store, notify=self._emit)
        self._detach_display = self.store.subscribe(self._on_change)

    @classmethod
    def create(cls, settings: Settings) -> CatalogApp:
        """Build the production graph: file (or memory) storage + PokeAPI client."""
        storage: Storage
        if settings.ephemeral:
            storage = MemoryStorage()
        else:
            storage = JsonFileStorage(settings.data_file)
        client = PokeApiClient(settings.api_url, timeout=settings.timeout_s)
        return cls(storage, client)

    def close(self) -> None:
        close = getattr(self.client, "close", None)
        if close is not None:
            close()

    def on_notice(self, callback: NoticeCallback) -> Callable[[], None]:
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _emit(self, notice: Notice, message: str) -> None:
        for callback in list(self._listeners):
            callback(notice, message)

    def _on_change(self, ids: list[int]) -> None:
        records = self.fetcher.refresh(ids)
        if records is None:
            return
        self.display.replace(records)
        logger.debug("Display rebuilt: %d of %d ids resolved", len(records), len(ids))

    def start(self, fetch: bool = True) -> None:
        """Load the saved collection; the load publishes and triggers a fetch.

        With ``fetch=False`` the display list is detached for good: the store
        is loaded and can be edited, but no lookups run on load or on change.
        """
        if not fetch:
            self._detach_display()
        self.store.load()

    def refresh(self) -> None:
        """Re-fetch every saved id, e.g. to retry ones that failed earlier."""
        self._on_change(self.store.ids)

    # Convenience pass-throughs for UIs

    def search(self, raw: str) -> Optional[Candidate]:
        return self.resolver.search(raw)

    def confirm(self) -> bool:
        return self.resolver.confirm()

    def remove(self, item_id: int) -> bool:
        return self.store.remove(item_id)

    @property
    def candidate(self) -> Optional[Candidate]:
        return self.resolver.candidate
