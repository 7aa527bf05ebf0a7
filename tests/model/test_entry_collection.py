from __future__ import annotations

import pytest

from layersync.contracts.exceptions import DuplicateBindingError
from layersync.model.collection import EntryCollection
from layersync.model.entry import LayerEntry
from layersync.target.layer import Layer
from tests.fakes.recorder import EventRecorder


def entry(title: str, **kwargs: object) -> LayerEntry:
    return LayerEntry(title=title, layer=Layer(title=title), **kwargs)


def test_insert_indexes_by_id_and_layer() -> None:
    data = EntryCollection()
    first, second = entry("A"), entry("B")

    data.insert(0, [first, second])

    assert data.items() == [first, second]
    assert data.get(first.id) is first
    assert data.pairs.entry_for(second.layer) is second


def test_insert_rejects_duplicate_id_without_partial_state() -> None:
    data = EntryCollection()
    data.insert(0, [entry("A", id="same")])
    fresh = entry("B")

    with pytest.raises(ValueError):
        data.insert(1, [fresh, entry("C", id="same")])

    assert len(data) == 1
    assert data.pairs.entry_for(fresh.layer) is None
    assert data.get(fresh.id) is None


def test_insert_rejects_layer_already_bound() -> None:
    data = EntryCollection()
    bound = entry("A")
    data.insert(0, [bound])

    with pytest.raises(DuplicateBindingError):
        data.insert(1, [LayerEntry(title="again", layer=bound.layer)])

    assert data.items() == [bound]


def test_insert_out_of_range() -> None:
    with pytest.raises(IndexError):
        EntryCollection().insert(1, [entry("A")])


def test_remove_at_releases_pairs() -> None:
    data = EntryCollection()
    first = entry("A")
    data.insert(0, [first])

    assert data.remove_at(0) is first
    assert data.pairs.entry_for(first.layer) is None
    assert data.get(first.id) is None


def test_replace_fires_replace_and_swaps_slot() -> None:
    data = EntryCollection()
    old, other = entry("A"), entry("B")
    data.insert(0, [old, other])
    recorder = EventRecorder().watch(data, "replace")
    new = entry("X")

    assert data.replace(old.id, new) is old

    assert data.items() == [new, other]
    assert recorder.args("replace") == [(old.id, old, new)]
    assert data.pairs.entry_for(old.layer) is None
    assert data.pairs.entry_for(new.layer) is new


def test_replace_failure_restores_old_entry() -> None:
    data = EntryCollection()
    old, other = entry("A"), entry("B")
    data.insert(0, [old, other])

    with pytest.raises(DuplicateBindingError):
        data.replace(old.id, LayerEntry(layer=other.layer))

    assert data.items() == [old, other]
    assert data.pairs.entry_for(old.layer) is old


def test_replace_unknown_key() -> None:
    with pytest.raises(KeyError):
        EntryCollection().replace("missing", entry("A"))


def test_set_all_swaps_content_silently() -> None:
    data = EntryCollection()
    old = entry("A")
    data.insert(0, [old])
    recorder = EventRecorder().watch(data, "replace")
    new = [entry("B"), entry("C")]

    assert data.set_all(new) == [old]
    assert data.items() == new
    assert data.pairs.entry_for(old.layer) is None
    assert recorder.calls == []


def test_set_all_failure_keeps_previous_content() -> None:
    data = EntryCollection()
    old = entry("A")
    data.insert(0, [old])
    shared = Layer()

    with pytest.raises(DuplicateBindingError):
        data.set_all([LayerEntry(layer=shared), LayerEntry(layer=shared)])

    assert data.items() == [old]
    assert data.pairs.entry_for(old.layer) is old
