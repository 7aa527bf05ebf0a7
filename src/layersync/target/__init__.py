"""Target side: observable layers and their ordered collection."""

from layersync.target.collection import LayerCollection
from layersync.target.layer import Layer

__all__ = ["Layer", "LayerCollection"]
