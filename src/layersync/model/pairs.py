"""Identity map between store entries and their backing layers."""

from __future__ import annotations

from collections.abc import Iterator

from layersync.contracts.exceptions import DuplicateBindingError
from layersync.model.entry import LayerEntry
from layersync.target.layer import Layer


class EntryPairMap:
    """Bidirectional index ``layer <-> entry`` keyed by object identity.

    Both directions are O(1). Value equality is never consulted: two layers
    with identical properties are two different keys.
    """

    def __init__(self) -> None:
        self._entry_by_layer: dict[int, LayerEntry] = {}
        self._layer_by_entry: dict[int, Layer] = {}

    def __len__(self) -> int:
        return len(self._layer_by_entry)

    def __contains__(self, obj: object) -> bool:
        if isinstance(obj, LayerEntry):
            return id(obj) in self._layer_by_entry
        return id(obj) in self._entry_by_layer

    def __iter__(self) -> Iterator[LayerEntry]:
        return iter(list(self._entry_by_layer.values()))

    def entry_for(self, layer: Layer) -> LayerEntry | None:
        return self._entry_by_layer.get(id(layer))

    def layer_for(self, entry: LayerEntry) -> Layer | None:
        return self._layer_by_entry.get(id(entry))

    def pair(self, entry: LayerEntry) -> None:
        layer = entry.layer
        bound = self._entry_by_layer.get(id(layer))
        if bound is entry:
            return
        if bound is not None:
            raise DuplicateBindingError(
                f"layer {layer!r} is already bound to entry {bound.id}",
                entry_id=entry.id,
                bound_entry_id=bound.id,
            )
        if id(entry) in self._layer_by_entry:
            raise DuplicateBindingError(
                f"entry {entry.id} is already bound to another layer",
                entry_id=entry.id,
                bound_entry_id=entry.id,
            )
        self._entry_by_layer[id(layer)] = entry
        self._layer_by_entry[id(entry)] = layer

    def release(self, entry: LayerEntry) -> Layer | None:
        layer = self._layer_by_entry.pop(id(entry), None)
        if layer is not None and self._entry_by_layer.get(id(layer)) is entry:
            del self._entry_by_layer[id(layer)]
        return layer

    def clear(self) -> None:
        self._entry_by_layer.clear()
        self._layer_by_entry.clear()
