"""Tests for search and confirm."""

import pytest

from pokedeck.models import Candidate, Notice
from pokedeck.resolver import CandidateResolver
from pokedeck.store import STORAGE_KEY, CollectionStore


@pytest.fixture
def notices():
    return []


@pytest.fixture
def store(storage, notices):
    s = CollectionStore(storage, notify=lambda n, msg: notices.append(n))
    s.load()
    return s


@pytest.fixture
def resolver(client, store, notices):
    return CandidateResolver(client, store, notify=lambda n, msg: notices.append(n))


# --- search ---

def test_search_by_id_sets_candidate(resolver):
    candidate = resolver.search("25")
    assert candidate == Candidate(id=25, image_url="https://img.example/25.png")
    assert resolver.candidate == candidate


def test_search_is_case_insensitive(resolver, client):
    assert resolver.search("  PIKACHU ").id == 25
    assert client.calls == ["pikachu"]


@pytest.mark.parametrize("raw", ["", "   "])
def test_blank_search_is_noop(resolver, client, notices, raw):
    resolver.search("1")
    assert resolver.search(raw) is None
    assert resolver.candidate.id == 1
    assert client.calls == ["1"]
    assert notices == []


def test_search_not_found_clears_candidate(resolver, store, storage, notices):
    resolver.search("1")
    assert resolver.search("999999") is None
    assert resolver.candidate is None
    assert notices == [Notice.NOT_FOUND]
    assert store.ids == []
    assert storage.get(STORAGE_KEY) is None


def test_search_transport_error_is_reported_as_not_found(resolver, client, notices):
    client.broken.add(3)
    assert resolver.search("3") is None
    assert notices == [Notice.NOT_FOUND]


def test_new_search_replaces_candidate(resolver):
    resolver.search("1")
    resolver.search("2")
    assert resolver.candidate.id == 2


# --- confirm ---

def test_confirm_without_candidate_is_noop(resolver, store):
    assert resolver.confirm() is False
    assert store.ids == []


def test_confirm_adds_and_clears(resolver, store):
    resolver.search("bulbasaur")
    assert resolver.confirm()
    assert store.ids == [1]
    assert resolver.candidate is None
    assert resolver.query == ""


def test_confirm_duplicate_clears_without_mutation(resolver, store, storage, notices):
    resolver.search("1")
    resolver.confirm()
    before = storage.get(STORAGE_KEY)
    notices.clear()

    resolver.search("bulbasaur")
    assert resolver.confirm() is False
    assert resolver.candidate is None
    assert store.ids == [1]
    assert storage.get(STORAGE_KEY) == before
    assert notices == [Notice.DUPLICATE]
