"""Turn raw layers into store entries."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from layersync.contracts.config import SyncConfig
from layersync.contracts.exceptions import ReaderError
from layersync.model.entry import LayerEntry
from layersync.target.layer import Layer

logger = logging.getLogger(__name__)


class ReadResult(BaseModel):
    """Outcome of :meth:`LayerReader.read`.

    A failed read carries no entries; callers must leave their state untouched.
    """

    success: bool
    total: int = 0
    entries: list[LayerEntry] = Field(default_factory=list)
    message: str | None = None


class LayerReader:
    """Builds one :class:`LayerEntry` per layer.

    The entry title comes from the configured title property; the properties
    listed in ``copy_fields`` are copied into ``LayerEntry.attributes``. Anything
    that is not a :class:`Layer` makes the whole read fail.
    """

    def __init__(self, config: SyncConfig | None = None) -> None:
        self._config = config or SyncConfig()

    def read(self, data: Layer | Iterable[Any]) -> ReadResult:
        layers = [data] if isinstance(data, Layer) else self._as_list(data)
        if layers is None:
            return self._failure(f"cannot read {type(data).__name__} as layers")

        for position, layer in enumerate(layers):
            if not isinstance(layer, Layer):
                return self._failure(f"item {position} is a {type(layer).__name__}, not a Layer")

        entries = [self.read_layer(layer) for layer in layers]
        return ReadResult(success=True, total=len(entries), entries=entries)

    def read_layer(self, layer: Layer) -> LayerEntry:
        if not isinstance(layer, Layer):
            raise ReaderError(f"cannot read {type(layer).__name__} as a layer")
        title = layer.get(self._config.title_key)
        attributes = {name: layer.get(name) for name in self._config.copy_fields if layer.get(name) is not None}
        return LayerEntry(title="" if title is None else str(title), layer=layer, attributes=attributes)

    @staticmethod
    def _as_list(data: Any) -> list[Any] | None:
        if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
            return None
        return list(data)

    @staticmethod
    def _failure(message: str) -> ReadResult:
        logger.debug("read failed: %s", message)
        return ReadResult(success=False, message=message)
