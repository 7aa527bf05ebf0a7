from __future__ import annotations

import json
from pathlib import Path

import pytest

from layersync.contracts.exceptions import ConfigError, ScenarioLoadError
from layersync.scenario import StepAction, load_scenario


def write(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_scenario(tmp_path: Path) -> None:
    path = write(
        tmp_path,
        {
            "name": "demo",
            "config": {"title_key": "label"},
            "layers": [{"key": "a", "properties": {"label": "A"}}, {"key": "b"}],
            "initial": ["a"],
            "steps": [
                {"action": "target.add", "layer": "b"},
                {"action": "store.replace", "layer": "a", "with": "b"},
            ],
        },
    )

    scenario = load_scenario(path)

    assert scenario.name == "demo"
    assert scenario.config.title_key == "label"
    assert scenario.initial == ["a"]
    assert [step.action for step in scenario.steps] == [StepAction.TARGET_ADD, StepAction.STORE_REPLACE]
    assert scenario.steps[1].replacement == "b"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ScenarioLoadError, match="missing scenario file"):
        load_scenario(tmp_path / "nope.json")


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "scenario.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ScenarioLoadError, match="invalid JSON"):
        load_scenario(path)


@pytest.mark.parametrize(
    ("payload", "fragment"),
    [
        ({"steps": [{"action": "target.insert", "layer": "a"}], "layers": [{"key": "a"}]}, "requires 'index'"),
        ({"steps": [{"action": "target.set", "layer": "a", "index": 0}], "layers": [{"key": "a"}]}, "requires 'key'"),
        ({"steps": [{"action": "store.load"}]}, "non-empty 'layers'"),
        ({"steps": [{"action": "store.replace", "layer": "a"}], "layers": [{"key": "a"}]}, "requires 'with'"),
        ({"layers": [{"key": "a"}, {"key": "a"}]}, "duplicate layer keys"),
        ({"initial": ["ghost"]}, "unknown layer keys"),
        ({"layers": [{"key": "a"}], "initial": ["a", "a"]}, "must not list a layer twice"),
        ({"steps": [{"action": "explode"}]}, "validation failed"),
    ],
)
def test_invalid_scenarios(tmp_path: Path, payload: dict, fragment: str) -> None:
    with pytest.raises(ScenarioLoadError) as exc_info:
        load_scenario(write(tmp_path, payload))

    assert fragment in str(exc_info.value)


def test_invalid_sync_config_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="sync config validation failed"):
        load_scenario(write(tmp_path, {"config": {"title_key": ""}}))


def test_step_action_formats_as_its_value() -> None:
    assert str(StepAction.STORE_MOVE) == "store.move"
