"""Scripted scenarios replayed against a bound store."""

from layersync.scenario.loader import load_scenario
from layersync.scenario.models import LayerSpec, Scenario, ScenarioStep, StepAction
from layersync.scenario.runner import ScenarioResult, ScenarioRunner

__all__ = [
    "LayerSpec",
    "Scenario",
    "ScenarioResult",
    "ScenarioRunner",
    "ScenarioStep",
    "StepAction",
    "load_scenario",
]
