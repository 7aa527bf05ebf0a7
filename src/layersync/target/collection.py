"""Ordered, observable collection of layers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from layersync.contracts.events import CollectionEvent, Observable
from layersync.target.layer import Layer

logger = logging.getLogger(__name__)


class LayerCollection(Observable):
    """The layers of a map, bottom to top.

    Mutations fire one ``add`` or ``remove`` notification per affected layer,
    carrying a :class:`CollectionEvent`. The event is fired after the
    collection reflects the change, so handlers may read the new state.
    Membership is tested by identity.
    """

    def __init__(self, layers: Iterable[Layer] | None = None) -> None:
        super().__init__()
        self._layers: list[Layer] = []
        for layer in layers or ():
            self._check_new(layer)
            self._layers.append(layer)

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __contains__(self, layer: object) -> bool:
        return self.index_of(layer) > -1

    def get_array(self) -> list[Layer]:
        return list(self._layers)

    def get_at(self, index: int) -> Layer:
        return self._layers[index]

    def index_of(self, layer: object) -> int:
        for index, candidate in enumerate(self._layers):
            if candidate is layer:
                return index
        return -1

    def for_each(self, fn: Callable[[Layer], Any]) -> None:
        for layer in list(self._layers):
            fn(layer)

    def push(self, layer: Layer) -> int:
        self.insert_at(len(self._layers), layer)
        return len(self._layers)

    def insert_at(self, index: int, layer: Layer) -> None:
        if index < 0 or index > len(self._layers):
            raise IndexError(f"insert index {index} out of range for {len(self._layers)} layers")
        self._check_new(layer)
        self._layers.insert(index, layer)
        self.fire("add", CollectionEvent(layer, index))

    def extend(self, layers: Iterable[Layer]) -> None:
        for layer in list(layers):
            self.push(layer)

    def remove(self, layer: Layer) -> Layer | None:
        index = self.index_of(layer)
        if index == -1:
            return None
        return self.remove_at(index)

    def remove_at(self, index: int) -> Layer:
        layer = self._layers.pop(index)
        self.fire("remove", CollectionEvent(layer, index))
        return layer

    def clear(self) -> None:
        while self._layers:
            self.remove_at(len(self._layers) - 1)

    def move(self, layer: Layer, index: int) -> None:
        """Reorder ``layer`` to ``index`` as a remove followed by an insert."""
        current = self.index_of(layer)
        if current == -1:
            raise ValueError(f"{layer!r} is not in the collection")
        if index < 0 or index >= len(self._layers):
            raise IndexError(f"move index {index} out of range for {len(self._layers)} layers")
        if current == index:
            return
        self.remove_at(current)
        self.insert_at(index, layer)

    def _check_new(self, layer: Layer) -> None:
        if not isinstance(layer, Layer):
            raise TypeError(f"expected a Layer, got {type(layer).__name__}")
        if self.index_of(layer) > -1:
            raise ValueError(f"{layer!r} is already in the collection")
