"""Keep an ordered store of layer records in sync with a map's layer collection."""

__version__ = "0.3.0"

from layersync.contracts import (
    BindingError,
    CollectionEvent,
    ConfigError,
    DuplicateBindingError,
    LayerSyncError,
    Observable,
    Operation,
    PropertyChangeEvent,
    ReaderError,
    ScenarioError,
    ScenarioLoadError,
    Subscription,
    SyncConfig,
)
from layersync.model import EntryCollection, EntryPairMap, LayerEntry, LayerReader, LayerStore, ReadResult
from layersync.sync import Guard, GuardState, MapBinding
from layersync.sync.checks import is_in_sync, order_mismatches
from layersync.target import Layer, LayerCollection

__all__ = [
    "BindingError",
    "CollectionEvent",
    "ConfigError",
    "DuplicateBindingError",
    "EntryCollection",
    "EntryPairMap",
    "Guard",
    "GuardState",
    "Layer",
    "LayerCollection",
    "LayerEntry",
    "LayerReader",
    "LayerStore",
    "LayerSyncError",
    "MapBinding",
    "Observable",
    "Operation",
    "PropertyChangeEvent",
    "ReadResult",
    "ReaderError",
    "ScenarioError",
    "ScenarioLoadError",
    "Subscription",
    "SyncConfig",
    "__version__",
    "is_in_sync",
    "order_mismatches",
]
