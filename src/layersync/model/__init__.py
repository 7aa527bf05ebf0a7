"""Model side: layer entries and the store that holds them."""

from layersync.model.entry import LayerEntry
from layersync.model.pairs import EntryPairMap
from layersync.model.reader import LayerReader, ReadResult
from layersync.model.collection import EntryCollection
from layersync.model.store import LayerStore

__all__ = [
    "EntryCollection",
    "EntryPairMap",
    "LayerEntry",
    "LayerReader",
    "LayerStore",
    "ReadResult",
]
