from __future__ import annotations

import pytest

from layersync.contracts.exceptions import DuplicateBindingError
from layersync.model.entry import LayerEntry
from layersync.model.pairs import EntryPairMap
from layersync.target.layer import Layer


def test_lookup_in_both_directions() -> None:
    pairs = EntryPairMap()
    layer = Layer(title="A")
    entry = LayerEntry(title="A", layer=layer)

    pairs.pair(entry)

    assert pairs.entry_for(layer) is entry
    assert pairs.layer_for(entry) is layer
    assert entry in pairs
    assert layer in pairs
    assert len(pairs) == 1


def test_lookup_miss_returns_none() -> None:
    pairs = EntryPairMap()

    assert pairs.entry_for(Layer()) is None
    assert pairs.layer_for(LayerEntry(layer=Layer())) is None


def test_equal_looking_layers_are_different_keys() -> None:
    pairs = EntryPairMap()
    first = Layer(title="Same")
    second = Layer(title="Same")
    entry = LayerEntry(title="Same", layer=first)

    pairs.pair(entry)

    assert pairs.entry_for(second) is None


def test_equal_looking_entries_are_different_keys() -> None:
    pairs = EntryPairMap()
    layer = Layer(title="Same")
    entry = LayerEntry(id="x", title="Same", layer=layer)
    twin = LayerEntry(id="x", title="Same", layer=layer)

    pairs.pair(entry)

    assert twin not in pairs
    with pytest.raises(DuplicateBindingError) as exc_info:
        pairs.pair(twin)
    assert exc_info.value.bound_entry_id == "x"


def test_pairing_same_entry_twice_is_noop() -> None:
    pairs = EntryPairMap()
    entry = LayerEntry(layer=Layer())

    pairs.pair(entry)
    pairs.pair(entry)

    assert len(pairs) == 1


def test_release_frees_both_directions() -> None:
    pairs = EntryPairMap()
    layer = Layer()
    entry = LayerEntry(layer=layer)
    pairs.pair(entry)

    assert pairs.release(entry) is layer
    assert pairs.entry_for(layer) is None
    assert pairs.release(entry) is None

    replacement = LayerEntry(layer=layer)
    pairs.pair(replacement)
    assert pairs.entry_for(layer) is replacement


def test_clear() -> None:
    pairs = EntryPairMap()
    pairs.pair(LayerEntry(layer=Layer()))
    pairs.pair(LayerEntry(layer=Layer()))

    pairs.clear()

    assert len(pairs) == 0
