"""Shared test fixtures for layersync tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from layersync import Layer, LayerCollection, LayerStore


@pytest.fixture
def layer_a() -> Layer:
    return Layer(title="A", name="a")


@pytest.fixture
def layer_b() -> Layer:
    return Layer(title="B", name="b")


@pytest.fixture
def layer_c() -> Layer:
    return Layer(title="C", name="c")


@pytest.fixture
def target(layer_a: Layer, layer_b: Layer, layer_c: Layer) -> LayerCollection:
    """A collection holding [A, B, C]."""
    return LayerCollection([layer_a, layer_b, layer_c])


@pytest.fixture
def store(target: LayerCollection) -> Iterator[LayerStore]:
    """A store bound to the [A, B, C] collection."""
    bound = LayerStore()
    bound.bind_map(target)
    yield bound
    bound.destroy()
