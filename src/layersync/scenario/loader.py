"""Load a Scenario from JSON on disk."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from layersync.contracts.config import SyncConfig
from layersync.contracts.exceptions import ConfigError, ScenarioLoadError
from layersync.scenario.models import Scenario


def load_scenario(path: Path) -> Scenario:
    """Load and validate a scenario file.

    Raises:
        ScenarioLoadError: If the file is missing, unreadable, not JSON, or
            does not match the scenario schema.
        ConfigError: If the embedded ``config`` object is not a valid
            :class:`SyncConfig`.
    """
    if not path.exists():
        raise ScenarioLoadError(f"missing scenario file: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ScenarioLoadError(f"invalid JSON input: {exc}") from exc
    except OSError as exc:
        raise ScenarioLoadError(f"failed to read scenario file: {exc}") from exc

    if isinstance(payload, dict) and "config" in payload:
        try:
            SyncConfig.model_validate(payload["config"])
        except ValidationError as exc:
            raise ConfigError(f"sync config validation failed: {exc}") from exc

    try:
        return Scenario.model_validate(payload)
    except ValidationError as exc:
        raise ScenarioLoadError(f"scenario validation failed: {exc}") from exc
