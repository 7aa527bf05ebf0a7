"""Bidirectional store/layer-collection synchronization."""

from layersync.sync.binding import MapBinding
from layersync.sync.guard import Guard, GuardState
from layersync.sync.model_to_target import ModelToTarget
from layersync.sync.subscriptions import LayerListeners
from layersync.sync.target_to_model import TargetToModel

__all__ = [
    "Guard",
    "GuardState",
    "LayerListeners",
    "MapBinding",
    "ModelToTarget",
    "TargetToModel",
]
