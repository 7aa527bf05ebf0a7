"""Replay store changes onto a layer collection."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from layersync.contracts.events import Operation
from layersync.sync.guard import Guard, GuardState
from layersync.sync.subscriptions import LayerListeners
from layersync.target.collection import LayerCollection

if TYPE_CHECKING:
    from layersync.model.entry import LayerEntry
    from layersync.model.store import LayerStore
    from layersync.target.layer import Layer

logger = logging.getLogger(__name__)


class ModelToTarget:
    """Handlers for notifications that originate on the store side."""

    def __init__(
        self,
        store: LayerStore,
        target: LayerCollection,
        state: GuardState,
        listeners: LayerListeners,
        *,
        title_key: str,
    ) -> None:
        self._store = store
        self._target = target
        self._state = state
        self._listeners = listeners
        self._title_key = title_key

    def on_add(self, store: LayerStore, entries: Sequence[LayerEntry], index: int) -> None:
        if self._state.active(Guard.ADDING):
            return
        with self._state.guard(Guard.ADDING):
            for entry in entries:
                self._place_layer(entry)

    def on_remove(self, store: LayerStore, entry: LayerEntry, index: int) -> None:
        if self._state.active(Guard.REMOVING):
            return
        self._remove_layer(entry)

    def on_replace(self, key: str, old_entry: LayerEntry, new_entry: LayerEntry) -> None:
        if not self._state.active(Guard.REMOVING):
            self._remove_layer(old_entry)
        if self._state.active(Guard.ADDING):
            return
        with self._state.guard(Guard.ADDING):
            self._place_layer(new_entry)

    def on_update(
        self, store: LayerStore, entry: LayerEntry, operation: Operation, modified: Sequence[str]
    ) -> None:
        if operation is not Operation.EDIT or "title" not in modified:
            return
        layer = entry.layer
        if entry.title != layer.get(self._title_key):
            layer.set(self._title_key, entry.title)

    def _remove_layer(self, entry: LayerEntry) -> None:
        layer = entry.layer
        self._listeners.unlisten(layer)
        if layer in self._target:
            with self._state.guard(Guard.REMOVING):
                self._target.remove(layer)
            logger.debug("Removed %r for entry %s", layer, entry.id)

    def _place_layer(self, entry: LayerEntry) -> None:
        layer = entry.layer
        self._listeners.listen(layer)
        position = self._target_position(entry)
        if layer in self._target:
            # already shown but unpaired until now: only its position changes
            with self._state.guard(Guard.REMOVING):
                self._target.move(layer, position)
        else:
            self._target.insert_at(position, layer)
        logger.debug("Placed %r for entry %s at %d", layer, entry.id, position)

    def _target_position(self, entry: LayerEntry) -> int:
        """Target index for ``entry.layer`` that keeps paired layers in store order.

        Layers without an entry can sit anywhere in the target, so the store
        index is not a target index. The layer goes right after the layer of
        the closest preceding entry shown in the target, else right before the
        layer of the closest following one. With neither, a layer already
        shown stays put and a new one is pushed. Indexes are counted as if
        ``entry.layer`` were not in the target, as :meth:`LayerCollection.move`
        expects.
        """
        layer = entry.layer
        entries = self._store.entries
        index = self._store.index_of(entry)
        if index != -1:
            for neighbour in reversed(entries[:index]):
                position = self._position_without(neighbour.layer, layer)
                if position != -1:
                    return position + 1
            for neighbour in entries[index + 1 :]:
                position = self._position_without(neighbour.layer, layer)
                if position != -1:
                    return position
        current = self._target.index_of(layer)
        return len(self._target) if current == -1 else current

    def _position_without(self, neighbour: Layer, layer: Layer) -> int:
        position = self._target.index_of(neighbour)
        if position == -1:
            return -1
        current = self._target.index_of(layer)
        if current != -1 and current < position:
            return position - 1
        return position
