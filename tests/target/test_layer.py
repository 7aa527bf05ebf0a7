from __future__ import annotations

from layersync.contracts.events import PropertyChangeEvent
from layersync.target.layer import Layer
from tests.fakes.recorder import EventRecorder


def test_properties_from_mapping_and_kwargs() -> None:
    layer = Layer({"title": "Roads"}, opacity=0.5)

    assert layer.get("title") == "Roads"
    assert layer.get("opacity") == 0.5
    assert layer.get("missing", "default") == "default"
    assert layer.get_properties() == {"title": "Roads", "opacity": 0.5}


def test_set_fires_propertychange_with_old_value() -> None:
    layer = Layer(title="Roads")
    recorder = EventRecorder().watch(layer, "propertychange")

    layer.set("title", "Streets")

    (event,) = recorder.args("propertychange")[0]
    assert isinstance(event, PropertyChangeEvent)
    assert event.target is layer
    assert event.key == "title"
    assert event.old_value == "Roads"
    assert layer.get("title") == "Streets"


def test_set_same_value_fires_nothing() -> None:
    layer = Layer(title="Roads")
    recorder = EventRecorder().watch(layer, "propertychange")

    layer.set("title", "Roads")

    assert recorder.calls == []


def test_set_new_key_fires_with_none_old_value() -> None:
    layer = Layer()
    recorder = EventRecorder().watch(layer, "propertychange")

    layer.set("visible", False)

    (event,) = recorder.args("propertychange")[0]
    assert event.old_value is None


def test_set_properties_fires_once_per_changed_key() -> None:
    layer = Layer(title="Roads", visible=True)
    recorder = EventRecorder().watch(layer, "propertychange")

    layer.set_properties({"title": "Roads", "visible": False, "opacity": 1.0})

    assert [args[0].key for args in recorder.args("propertychange")] == ["visible", "opacity"]


def test_layers_with_equal_properties_are_distinct() -> None:
    first = Layer(title="Same")
    second = Layer(title="Same")

    assert first is not second
    assert first.uid != second.uid
    assert first != second


def test_repr_shows_every_property() -> None:
    layer = Layer(label="Roads", visible=True)

    assert repr(layer) == f"Layer(uid={layer.uid}, {{'label': 'Roads', 'visible': True}})"
