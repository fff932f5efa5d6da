"""Tests for the JSON file storage backend."""

import json

from pokedeck.storage import JsonFileStorage, MemoryStorage


def test_memory_storage_get_set():
    s = MemoryStorage()
    assert s.get("k") is None
    s.set("k", "v")
    assert s.get("k") == "v"


def test_missing_file_reads_empty(tmp_path):
    s = JsonFileStorage(tmp_path / "nope.json")
    assert s.get("pokemons") is None


def test_set_creates_parent_dirs_and_keeps_other_keys(tmp_path):
    path = tmp_path / "deep" / "dir" / "storage.json"
    s = JsonFileStorage(path)
    s.set("a", "1")
    s.set("b", "[2]")

    assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1", "b": "[2]"}
    assert not path.with_name("storage.json.tmp").exists()
    assert JsonFileStorage(path).get("b") == "[2]"


def test_corrupt_file_reads_empty_and_is_replaced_on_write(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{broken", encoding="utf-8")
    s = JsonFileStorage(path)

    assert s.get("pokemons") is None
    s.set("pokemons", "[1]")
    assert s.get("pokemons") == "[1]"


def test_non_object_file_reads_empty(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert JsonFileStorage(path).get("pokemons") is None


def test_non_string_values_are_ignored(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"pokemons": [1, 2], "other": "x"}), encoding="utf-8")
    s = JsonFileStorage(path)
    assert s.get("pokemons") is None
    assert s.get("other") == "x"
