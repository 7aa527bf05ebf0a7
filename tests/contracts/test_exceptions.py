"""Tests for the layersync exception hierarchy."""

from __future__ import annotations

from layersync.contracts.exceptions import (
    BindingError,
    ConfigError,
    DuplicateBindingError,
    LayerSyncError,
    ReaderError,
    ScenarioError,
    ScenarioLoadError,
)


class TestExceptionHierarchy:
    def test_all_exceptions_inherit_from_layer_sync_error(self) -> None:
        for exc_type in (BindingError, ConfigError, DuplicateBindingError, ReaderError, ScenarioError, ScenarioLoadError):
            assert issubclass(exc_type, LayerSyncError)

    def test_duplicate_binding_is_a_binding_error(self) -> None:
        assert issubclass(DuplicateBindingError, BindingError)

    def test_duplicate_binding_error_keeps_ids(self) -> None:
        exc = DuplicateBindingError("dup", entry_id="new", bound_entry_id="old")
        assert exc.entry_id == "new"
        assert exc.bound_entry_id == "old"
        assert str(exc) == "dup"

    def test_scenario_error_formats_errors(self) -> None:
        exc = ScenarioError("out of sync", step=2, errors=["first", "second"])
        message = str(exc)
        assert exc.step == 2
        assert message.startswith("out of sync:")
        assert "  - first" in message
        assert "  - second" in message

    def test_scenario_error_without_errors(self) -> None:
        exc = ScenarioError("failed")
        assert str(exc) == "failed"
        assert exc.step is None
        assert exc.errors == []
