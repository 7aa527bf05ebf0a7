"""Public contracts for layersync."""

from layersync.contracts.config import SyncConfig
from layersync.contracts.events import CollectionEvent, Observable, Operation, PropertyChangeEvent, Subscription
from layersync.contracts.exceptions import (
    BindingError,
    ConfigError,
    DuplicateBindingError,
    LayerSyncError,
    ReaderError,
    ScenarioError,
    ScenarioLoadError,
)

__all__ = [
    "BindingError",
    "CollectionEvent",
    "ConfigError",
    "DuplicateBindingError",
    "LayerSyncError",
    "Observable",
    "Operation",
    "PropertyChangeEvent",
    "ReaderError",
    "ScenarioError",
    "ScenarioLoadError",
    "Subscription",
    "SyncConfig",
]
