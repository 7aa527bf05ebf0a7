"""Synchronous observable primitives shared by stores, collections and layers.

Every notification in layersync is dispatched in-process and synchronously:
``fire`` returns only after each handler ran, so one external mutation
finishes its whole ripple of propagated effects before the next one starts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class Operation(StrEnum):
    """Kind of ``update`` notification emitted by a store."""

    EDIT = "edit"
    COMMIT = "commit"
    REJECT = "reject"


@dataclass(frozen=True)
class CollectionEvent:
    """Payload of a layer collection ``add``/``remove`` notification."""

    element: Any
    index: int


@dataclass(frozen=True)
class PropertyChangeEvent:
    """Payload of a layer ``propertychange`` notification."""

    target: Any
    key: str
    old_value: Any = None


@dataclass(eq=False)
class Subscription:
    """Handle returned by :meth:`Observable.on`.

    Cancelling a subscription detaches its handler; doing it twice is harmless.
    """

    source: Observable
    event: str
    handler: Handler
    active: bool = field(default=True)

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self.source._detach(self)


class Observable:
    """Minimal named-event emitter.

    Handlers are called in registration order. Registering the same handler
    twice for one event keeps a single registration. Exceptions raised by a
    handler propagate to the caller of :meth:`fire`.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Subscription]] = {}

    def on(self, event: str, handler: Handler) -> Subscription:
        subscriptions = self._listeners.setdefault(event, [])
        for existing in subscriptions:
            if existing.handler == handler:
                return existing
        subscription = Subscription(self, event, handler)
        subscriptions.append(subscription)
        return subscription

    def un(self, event: str, handler: Handler) -> None:
        for existing in list(self._listeners.get(event, ())):
            if existing.handler == handler:
                existing.cancel()

    def fire(self, event: str, *args: Any) -> None:
        subscriptions = self._listeners.get(event)
        if not subscriptions:
            return
        # handlers may detach themselves (or others) while we dispatch
        for subscription in list(subscriptions):
            if subscription.active:
                subscription.handler(*args)

    def has_listeners(self, event: str) -> bool:
        return bool(self._listeners.get(event))

    def listener_count(self, event: str | None = None) -> int:
        if event is not None:
            return len(self._listeners.get(event, ()))
        return sum(len(subscriptions) for subscriptions in self._listeners.values())

    def clear_listeners(self) -> None:
        for subscriptions in list(self._listeners.values()):
            for subscription in list(subscriptions):
                subscription.cancel()
        self._listeners.clear()

    def _detach(self, subscription: Subscription) -> None:
        subscriptions = self._listeners.get(subscription.event)
        if subscriptions is None:
            return
        try:
            subscriptions.remove(subscription)
        except ValueError:
            logger.debug("subscription for %r already detached", subscription.event)
            return
        if not subscriptions:
            del self._listeners[subscription.event]


__all__ = [
    "CollectionEvent",
    "Handler",
    "Observable",
    "Operation",
    "PropertyChangeEvent",
    "Subscription",
]
