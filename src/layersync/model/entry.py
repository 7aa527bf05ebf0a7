"""Layer entry model."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from layersync.target.layer import Layer


class LayerEntry(BaseModel):
    """Store record describing one layer.

    The entry owns a reference to exactly one backing :class:`Layer`. Stores
    and the sync engine compare entries by identity, never by field values.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    title: str = ""
    layer: Layer = Field(exclude=True, repr=False)
    attributes: dict[str, Any] = Field(default_factory=dict)

    def get(self, name: str, default: Any = None) -> Any:
        if name in ("id", "title"):
            return getattr(self, name)
        return self.attributes.get(name, default)
