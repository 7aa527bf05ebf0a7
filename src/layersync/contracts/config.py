"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class SyncConfig(BaseModel):
    """Settings shared by a store, its reader and the map binding.

    Attributes:
        title_key: Layer property mirrored into ``LayerEntry.title``.
        copy_fields: Layer properties copied into ``LayerEntry.attributes`` on import.
        bind_existing: Import the layers already present in a collection on bind.
    """

    title_key: str = "title"
    copy_fields: tuple[str, ...] = ("name", "visible", "opacity")
    bind_existing: bool = True

    model_config = {"frozen": True}

    @field_validator("title_key")
    @classmethod
    def validate_title_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title_key must be a non-empty property name")
        return value

    @field_validator("copy_fields")
    @classmethod
    def validate_copy_fields(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not name.strip() for name in value):
            raise ValueError("copy_fields must not contain empty property names")
        return value
