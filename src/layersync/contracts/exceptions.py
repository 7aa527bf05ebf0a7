"""Exception hierarchy for layersync."""

from __future__ import annotations


class LayerSyncError(Exception):
    """Base exception for all layersync errors."""


class ConfigError(LayerSyncError):
    """Configuration loading or validation failure."""


class BindingError(LayerSyncError):
    """A store/collection binding cannot be established or kept."""


class DuplicateBindingError(BindingError):
    """An entry references a layer that is already paired with another entry."""

    def __init__(self, message: str, *, entry_id: str, bound_entry_id: str) -> None:
        super().__init__(message)
        self.entry_id = entry_id
        self.bound_entry_id = bound_entry_id


class ReaderError(LayerSyncError):
    """Raw layer data could not be turned into entries."""


class ScenarioLoadError(LayerSyncError):
    """Scenario file loading/parsing failure."""


class ScenarioError(LayerSyncError):
    """A scenario step failed or left the collections out of sync.

    Attributes:
        step: Zero-based index of the failing step, or ``None`` for setup.
        errors: Individual mismatch messages.
    """

    def __init__(self, message: str, *, step: int | None = None, errors: list[str] | None = None) -> None:
        self.step = step
        self.errors = errors or []
        if self.errors:
            joined = "\n".join(f"  - {e}" for e in self.errors)
            message = f"{message}:\n{joined}"
        super().__init__(message)
