"""Replay layer collection changes onto a store."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from layersync.contracts.events import CollectionEvent, PropertyChangeEvent
from layersync.sync.guard import Guard, GuardState
from layersync.sync.subscriptions import LayerListeners
from layersync.target.collection import LayerCollection

if TYPE_CHECKING:
    from layersync.model.entry import LayerEntry
    from layersync.model.store import LayerStore

logger = logging.getLogger(__name__)


class TargetToModel:
    """Handlers for notifications that originate on the layer side.

    Also handles store ``load``/``clear``: both wipe or rebuild the layer
    collection wholesale, with the store already holding its final content.
    """

    def __init__(self, store: LayerStore, target: LayerCollection, state: GuardState, *, title_key: str) -> None:
        self._store = store
        self._target = target
        self._state = state
        self._title_key = title_key
        self.listeners = LayerListeners(self.on_change_layer)

    def on_add_layer(self, event: CollectionEvent) -> None:
        layer = event.element
        self.listeners.listen(layer)
        if self._state.active(Guard.ADDING):
            logger.debug("Skipping echoed add of %r", layer)
            return
        if self._store.get_by_layer(layer) is not None:
            logger.debug("%r already has an entry", layer)
            return

        result = self._store.reader.read(layer)
        if not result.success:
            logger.warning("Could not import added layer %r: %s", layer, result.message)
            return

        index = self._store_index_for(event.index)
        with self._state.guard(Guard.ADDING):
            self._store.insert(index, result.entries)
        logger.debug("Imported %r at store index %d", layer, index)

    def on_remove_layer(self, event: CollectionEvent) -> None:
        if self._state.active(Guard.REMOVING):
            return
        layer = event.element
        entry = self._store.get_by_layer(layer)
        if entry is None:
            return
        with self._state.guard(Guard.REMOVING):
            self.listeners.unlisten(layer)
            self._store.remove(entry)
        logger.debug("Removed entry %s of %r", entry.id, layer)

    def on_change_layer(self, event: PropertyChangeEvent) -> None:
        layer = event.target
        entry = self._store.get_by_layer(layer)
        if entry is None:
            return
        if event.key == self._title_key:
            title = layer.get(self._title_key)
            entry.title = "" if title is None else str(title)
        else:
            self._store.notify_entry_changed(entry)

    def on_load(self, store: LayerStore, entries: Sequence[LayerEntry], successful: bool, add_records: bool) -> None:
        if not successful:
            return
        if not add_records:
            self._clear_target()

        layers = [entry.layer for entry in entries if entry.layer not in self._target]
        for layer in layers:
            self.listeners.listen(layer)
        if layers:
            with self._state.guard(Guard.ADDING):
                self._target.extend(layers)
        logger.debug("Load pushed %d layers (additive=%s)", len(layers), add_records)

    def on_clear(self, store: LayerStore, entries: Sequence[LayerEntry]) -> None:
        self._clear_target()

    def _clear_target(self) -> None:
        with self._state.guard(Guard.REMOVING):
            self._target.for_each(self.listeners.unlisten)
            self._target.clear()

    def _store_index_for(self, target_index: int) -> int:
        # layers without an entry take no slot in the store
        index = 0
        for position, layer in enumerate(self._target):
            if position >= target_index:
                break
            if self._store.get_by_layer(layer) is not None:
                index += 1
        return index
