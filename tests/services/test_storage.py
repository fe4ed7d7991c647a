# tests/services/test_storage.py
import json

import pytest

from fakelang.services.storage import InMemoryDictionaryStore, JsonDictionaryStore, atomic_write_text


def test_json_store_round_trip(tmp_path):
    store = JsonDictionaryStore(tmp_path / "cache")
    store.write("Russian_FakeDictionary", {"кот": "ляп", "dog": "zib"})

    path = tmp_path / "cache" / "Russian_FakeDictionary.json"
    assert path.read_text(encoding="utf-8") == '{"кот":"ляп","dog":"zib"}'
    assert store.exists("Russian_FakeDictionary")
    assert store.read("Russian_FakeDictionary") == {"кот": "ляп", "dog": "zib"}


def test_missing_key_reads_as_empty(tmp_path):
    store = JsonDictionaryStore(tmp_path)
    assert not store.exists("English_Graph")
    assert store.read("English_Graph") == {}


def test_malformed_json_propagates(tmp_path):
    (tmp_path / "Broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        JsonDictionaryStore(tmp_path).read("Broken")


def test_non_object_json_is_rejected(tmp_path):
    (tmp_path / "List.json").write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        JsonDictionaryStore(tmp_path).read("List")


def test_atomic_write_replaces_and_leaves_no_temp_files(tmp_path):
    target = tmp_path / "nested" / "value.json"
    atomic_write_text(target, "first")
    atomic_write_text(target, "second")
    assert target.read_text(encoding="utf-8") == "second"
    assert [p.name for p in target.parent.iterdir()] == ["value.json"]


def test_atomic_write_cleans_up_on_failure(tmp_path, mocker):
    target = tmp_path / "value.json"
    mocker.patch("fakelang.services.storage.os.replace", side_effect=OSError("disk full"))
    with pytest.raises(OSError):
        atomic_write_text(target, "data")
    assert list(tmp_path.iterdir()) == []


def test_in_memory_store_copies_values():
    store = InMemoryDictionaryStore()
    mapping = {"a": {"b": 1}}
    store.write("English_Graph", mapping)
    mapping["a"]["b"] = 5
    read_back = store.read("English_Graph")
    read_back["a"]["b"] = 7
    assert store.read("English_Graph") == {"a": {"b": 1}}
    assert store.exists("English_Graph")
    assert not store.exists("Russian_Graph")
