"""Shared fixtures: an in-memory lookup service and storage."""

from __future__ import annotations

import dataclasses

import pytest

from pokedeck.app import CatalogApp
from pokedeck.lookup import LookupFailedError, NotFoundError
from pokedeck.models import DisplayRecord
from pokedeck.storage import MemoryStorage
from tests.helpers import make_record


class FakeClient:
    """Stands in for PokeApiClient. Keys are ids or lower-case names."""

    def __init__(self, records: list[DisplayRecord]) -> None:
        self.records = {r.id: r for r in records}
        self.missing: set[int] = set()
        self.broken: set[int] = set()
        self.calls: list[str] = []
        self.closed = False

    def fetch(self, key: str | int) -> DisplayRecord:
        key = str(key)
        self.calls.append(key)
        record = None
        if key.isdigit():
            record = self.records.get(int(key))
        else:
            record = next((r for r in self.records.values() if r.name == key), None)

        if record is None or record.id in self.missing:
            raise NotFoundError(key, "HTTP 404")
        if record.id in self.broken:
            raise LookupFailedError(key, "connection reset")
        return dataclasses.replace(record, visible=False)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def client():
    """Lookup service knowing bulbasaur, ivysaur, venusaur and pikachu."""
    return FakeClient([
        make_record(1, "bulbasaur", 45),
        make_record(2, "ivysaur", 60),
        make_record(3, "venusaur", 80),
        make_record(25, "pikachu", 90),
    ])


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def catalog(storage, client):
    """A started CatalogApp on empty memory storage."""
    app = CatalogApp(storage, client)
    app.start()
    return app
