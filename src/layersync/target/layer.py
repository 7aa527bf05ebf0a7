"""Observable map layer."""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from typing import Any

from layersync.contracts.events import Observable, PropertyChangeEvent

_UIDS = itertools.count(1)

_UNSET = object()


class Layer(Observable):
    """A layer object with a mutable property bag.

    Layers compare by identity only: two layers holding the same properties
    are still different layers. Every effective ``set`` fires a
    ``propertychange`` notification carrying a :class:`PropertyChangeEvent`.
    """

    def __init__(self, properties: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        super().__init__()
        self.uid = next(_UIDS)
        self._properties: dict[str, Any] = dict(properties or {})
        self._properties.update(kwargs)

    def get(self, key: str, default: Any = None) -> Any:
        return self._properties.get(key, default)

    def set(self, key: str, value: Any) -> None:
        old_value = self._properties.get(key, _UNSET)
        if old_value is not _UNSET and old_value == value:
            return
        self._properties[key] = value
        self.fire("propertychange", PropertyChangeEvent(self, key, None if old_value is _UNSET else old_value))

    def set_properties(self, properties: Mapping[str, Any]) -> None:
        for key, value in properties.items():
            self.set(key, value)

    def get_properties(self) -> dict[str, Any]:
        return dict(self._properties)

    def __repr__(self) -> str:
        return f"Layer(uid={self.uid}, {self._properties!r})"
