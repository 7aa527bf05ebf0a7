"""Wiring between one store and one layer collection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from layersync.contracts.config import SyncConfig
from layersync.contracts.events import Subscription
from layersync.sync.guard import GuardState
from layersync.sync.model_to_target import ModelToTarget
from layersync.sync.subscriptions import LayerListeners
from layersync.sync.target_to_model import TargetToModel
from layersync.target.collection import LayerCollection

if TYPE_CHECKING:
    from layersync.model.store import LayerStore

logger = logging.getLogger(__name__)


class MapBinding:
    """Owns everything a bound store/collection pair needs at runtime.

    That is the guard flags, both propagators, the per-layer property
    listeners and the collection-level subscriptions. :meth:`detach` undoes
    :meth:`attach` exactly, in reverse order.
    """

    def __init__(self, store: LayerStore, target: LayerCollection, *, config: SyncConfig | None = None) -> None:
        self._config = config or store.config
        self.store = store
        self.target = target
        self.state = GuardState()
        self.target_to_model = TargetToModel(store, target, self.state, title_key=self._config.title_key)
        self.model_to_target = ModelToTarget(
            store,
            target,
            self.state,
            self.target_to_model.listeners,
            title_key=self._config.title_key,
        )
        self._subscriptions: list[Subscription] = []

    @property
    def listeners(self) -> LayerListeners:
        return self.target_to_model.listeners

    @property
    def attached(self) -> bool:
        return bool(self._subscriptions)

    def attach(self) -> None:
        if self._subscriptions:
            return
        if self._config.bind_existing:
            self._import_existing()

        for layer in self.target:
            self.listeners.listen(layer)

        t2m = self.target_to_model
        m2t = self.model_to_target
        self._subscriptions = [
            self.target.on("add", t2m.on_add_layer),
            self.target.on("remove", t2m.on_remove_layer),
            self.store.on("load", t2m.on_load),
            self.store.on("clear", t2m.on_clear),
            self.store.on("add", m2t.on_add),
            self.store.on("remove", m2t.on_remove),
            self.store.on("update", m2t.on_update),
            self.store.data.on("replace", m2t.on_replace),
        ]

    def detach(self) -> None:
        while self._subscriptions:
            self._subscriptions.pop().cancel()
        self.listeners.unlisten_all()

    def _import_existing(self) -> None:
        missing = [layer for layer in self.target if self.store.get_by_layer(layer) is None]
        if not missing:
            return
        result = self.store.load_raw_data(missing, append=True)
        if result.success:
            logger.debug("Imported %d existing layers", result.total)
