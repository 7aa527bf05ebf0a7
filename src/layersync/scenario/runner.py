"""Replay a scenario against a store bound to a layer collection."""

from __future__ import annotations

import logging
from collections.abc import Callable

from pydantic import BaseModel, Field

from layersync.contracts.exceptions import LayerSyncError, ScenarioError
from layersync.model.entry import LayerEntry
from layersync.model.store import LayerStore
from layersync.scenario.models import Scenario, ScenarioStep, StepAction
from layersync.sync.checks import order_mismatches
from layersync.target.collection import LayerCollection
from layersync.target.layer import Layer

logger = logging.getLogger(__name__)

StepCallback = Callable[[int, ScenarioStep], None]


class ScenarioResult(BaseModel):
    name: str
    steps_run: int
    bound: bool
    store_titles: list[str] = Field(default_factory=list)
    target_titles: list[str] = Field(default_factory=list)
    mismatches: list[str] = Field(default_factory=list)

    @property
    def in_sync(self) -> bool:
        return not self.mismatches


class ScenarioRunner:
    """Builds the layers, binds a fresh store and applies every step.

    With ``check=True`` the collections are compared after every step taken
    while bound, and the first disagreement aborts the run with a
    :class:`ScenarioError`.
    """

    def __init__(self, scenario: Scenario, *, check: bool = False, on_step: StepCallback | None = None) -> None:
        self.scenario = scenario
        self.check = check
        self._on_step = on_step
        self.layers: dict[str, Layer] = {spec.key: Layer(spec.properties) for spec in scenario.layers}
        self.target = LayerCollection(self.layers[key] for key in scenario.initial)
        self.store = LayerStore(config=scenario.config)

    def run(self) -> ScenarioResult:
        self.store.bind_map(self.target)
        self._verify(None)

        for number, step in enumerate(self.scenario.steps):
            logger.debug("step %d: %s", number, step.action.value)
            try:
                self.apply(step)
            except (LayerSyncError, IndexError, KeyError, ValueError) as exc:
                raise ScenarioError(f"step {number} ({step.action.value}) failed: {exc}", step=number) from exc
            if self._on_step is not None:
                self._on_step(number, step)
            self._verify(number)

        title_key = self.store.config.title_key
        return ScenarioResult(
            name=self.scenario.name,
            steps_run=len(self.scenario.steps),
            bound=self.store.is_bound,
            store_titles=[entry.title for entry in self.store],
            target_titles=[_title(layer.get(title_key)) for layer in self.target],
            mismatches=order_mismatches(self.store, self.target) if self.store.is_bound else [],
        )

    def apply(self, step: ScenarioStep) -> None:
        action = step.action
        store = self.store
        target = self.target

        if action is StepAction.TARGET_ADD:
            target.push(self._layer(step.layer))
        elif action is StepAction.TARGET_INSERT:
            target.insert_at(step.index, self._layer(step.layer))
        elif action is StepAction.TARGET_REMOVE:
            if target.remove(self._layer(step.layer)) is None:
                raise ValueError(f"layer {step.layer!r} is not in the collection")
        elif action is StepAction.TARGET_MOVE:
            target.move(self._layer(step.layer), step.index)
        elif action is StepAction.TARGET_SET:
            self._layer(step.layer).set(step.key, step.value)
        elif action is StepAction.TARGET_CLEAR:
            target.clear()
        elif action is StepAction.STORE_INSERT:
            entries = [store.reader.read_layer(self._layer(key)) for key in step.layers]
            store.insert(step.index, entries)
        elif action is StepAction.STORE_REMOVE:
            store.remove(self._entry(step.layer))
        elif action is StepAction.STORE_MOVE:
            store.move(self._entry(step.layer), step.index)
        elif action is StepAction.STORE_SET:
            store.set_field(self._entry(step.layer), step.key, step.value)
        elif action is StepAction.STORE_CLEAR:
            store.remove_all()
        elif action is StepAction.STORE_LOAD:
            result = store.load_raw_data([self._layer(key) for key in step.layers], append=step.append)
            if not result.success:
                raise ScenarioError(f"reader rejected layers: {result.message}")
        elif action is StepAction.STORE_REPLACE:
            replacement = store.reader.read_layer(self._layer(step.replacement))
            store.replace_entry(self._entry(step.layer), replacement)
        elif action is StepAction.BIND:
            store.bind_map(target)
        elif action is StepAction.UNBIND:
            store.unbind_map()

    def _layer(self, key: str | None) -> Layer:
        if key is None or key not in self.layers:
            raise KeyError(f"unknown layer key: {key!r}")
        return self.layers[key]

    def _entry(self, key: str | None) -> LayerEntry:
        entry = self.store.get_by_layer(self._layer(key))
        if entry is None:
            raise ValueError(f"layer {key!r} has no entry in the store")
        return entry

    def _verify(self, step: int | None) -> None:
        if not self.check or not self.store.is_bound:
            return
        errors = order_mismatches(self.store, self.target)
        if errors:
            where = "after binding" if step is None else f"after step {step}"
            raise ScenarioError(f"collections out of sync {where}", step=step, errors=errors)


def _title(value: object) -> str:
    return "" if value is None else str(value)
