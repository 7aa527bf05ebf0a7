"""Scenario file contracts."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from layersync.contracts.config import SyncConfig


class StepAction(StrEnum):
    TARGET_ADD = "target.add"
    TARGET_INSERT = "target.insert"
    TARGET_REMOVE = "target.remove"
    TARGET_MOVE = "target.move"
    TARGET_SET = "target.set"
    TARGET_CLEAR = "target.clear"
    STORE_INSERT = "store.insert"
    STORE_REMOVE = "store.remove"
    STORE_MOVE = "store.move"
    STORE_SET = "store.set"
    STORE_CLEAR = "store.clear"
    STORE_LOAD = "store.load"
    STORE_REPLACE = "store.replace"
    BIND = "bind"
    UNBIND = "unbind"


_NEEDS_LAYER = {
    StepAction.TARGET_ADD,
    StepAction.TARGET_INSERT,
    StepAction.TARGET_REMOVE,
    StepAction.TARGET_MOVE,
    StepAction.TARGET_SET,
    StepAction.STORE_REMOVE,
    StepAction.STORE_MOVE,
    StepAction.STORE_SET,
    StepAction.STORE_REPLACE,
}
_NEEDS_INDEX = {StepAction.TARGET_INSERT, StepAction.TARGET_MOVE, StepAction.STORE_MOVE, StepAction.STORE_INSERT}
_NEEDS_KEY = {StepAction.TARGET_SET, StepAction.STORE_SET}
_NEEDS_LAYERS = {StepAction.STORE_INSERT, StepAction.STORE_LOAD}


class LayerSpec(BaseModel):
    key: str = Field(min_length=1)
    properties: dict[str, Any] = Field(default_factory=dict)


class ScenarioStep(BaseModel):
    action: StepAction
    layer: str | None = None
    layers: list[str] = Field(default_factory=list)
    index: int | None = Field(default=None, ge=0)
    key: str | None = None
    value: Any = None
    append: bool = False
    replacement: str | None = Field(default=None, alias="with")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def validate_arguments(self) -> ScenarioStep:
        action = self.action
        if action in _NEEDS_LAYER and not self.layer:
            raise ValueError(f"{action.value} requires 'layer'")
        if action in _NEEDS_INDEX and self.index is None:
            raise ValueError(f"{action.value} requires 'index'")
        if action in _NEEDS_KEY and not self.key:
            raise ValueError(f"{action.value} requires 'key'")
        if action in _NEEDS_LAYERS and not self.layers:
            raise ValueError(f"{action.value} requires a non-empty 'layers' list")
        if action is StepAction.STORE_REPLACE and not self.replacement:
            raise ValueError("store.replace requires 'with'")
        return self


class Scenario(BaseModel):
    """A scripted sequence of mutations replayed against a bound store.

    Attributes:
        name: Label shown in reports.
        config: Sync settings for the store.
        layers: Every layer the scenario refers to, by key.
        initial: Keys of the layers present in the collection before binding.
        steps: Mutations applied after binding, in order.
    """

    name: str = "scenario"
    config: SyncConfig = Field(default_factory=SyncConfig)
    layers: list[LayerSpec] = Field(default_factory=list)
    initial: list[str] = Field(default_factory=list)
    steps: list[ScenarioStep] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_layer_keys(self) -> Scenario:
        keys = [spec.key for spec in self.layers]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ValueError(f"duplicate layer keys: {', '.join(duplicates)}")

        known = set(keys)
        referenced = list(self.initial)
        for step in self.steps:
            referenced.extend(step.layers)
            referenced.extend(key for key in (step.layer, step.replacement) if key)
        unknown = sorted({key for key in referenced if key not in known})
        if unknown:
            raise ValueError(f"unknown layer keys: {', '.join(unknown)}")
        if len(set(self.initial)) != len(self.initial):
            raise ValueError("initial must not list a layer twice")
        return self
