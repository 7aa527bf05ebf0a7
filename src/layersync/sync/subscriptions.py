"""Book-keeping of per-layer property listeners."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from layersync.contracts.events import PropertyChangeEvent, Subscription
from layersync.target.layer import Layer


class LayerListeners:
    """The ``propertychange`` subscriptions a binding holds, one per layer.

    ``listen`` is idempotent, and ``unlisten`` detaches exactly the
    subscription that ``listen`` created for that layer.
    """

    def __init__(self, handler: Callable[[PropertyChangeEvent], Any]) -> None:
        self._handler = handler
        self._subscriptions: dict[int, Subscription] = {}

    def __len__(self) -> int:
        return len(self._subscriptions)

    def is_listening(self, layer: Layer) -> bool:
        return id(layer) in self._subscriptions

    def listen(self, layer: Layer) -> bool:
        if id(layer) in self._subscriptions:
            return False
        self._subscriptions[id(layer)] = layer.on("propertychange", self._handler)
        return True

    def unlisten(self, layer: Layer) -> bool:
        subscription = self._subscriptions.pop(id(layer), None)
        if subscription is None:
            return False
        subscription.cancel()
        return True

    def unlisten_all(self) -> None:
        for key in reversed(list(self._subscriptions)):
            self._subscriptions.pop(key).cancel()
