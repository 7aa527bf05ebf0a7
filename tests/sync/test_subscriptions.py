from __future__ import annotations

from layersync.contracts.events import PropertyChangeEvent
from layersync.sync.subscriptions import LayerListeners
from layersync.target.layer import Layer


def make_listeners() -> tuple[LayerListeners, list[PropertyChangeEvent]]:
    seen: list[PropertyChangeEvent] = []
    return LayerListeners(seen.append), seen


def test_listen_is_idempotent() -> None:
    listeners, seen = make_listeners()
    layer = Layer(title="A")

    assert listeners.listen(layer) is True
    assert listeners.listen(layer) is False
    layer.set("title", "B")

    assert len(listeners) == 1
    assert [event.key for event in seen] == ["title"]
    assert layer.listener_count("propertychange") == 1


def test_unlisten_detaches_only_that_layer() -> None:
    listeners, seen = make_listeners()
    first, second = Layer(title="A"), Layer(title="B")
    listeners.listen(first)
    listeners.listen(second)

    assert listeners.unlisten(first) is True
    assert listeners.unlisten(first) is False
    first.set("title", "X")
    second.set("title", "Y")

    assert [event.target for event in seen] == [second]
    assert not listeners.is_listening(first)
    assert listeners.is_listening(second)


def test_layers_with_equal_properties_are_tracked_separately() -> None:
    listeners, _ = make_listeners()
    first, second = Layer(title="same"), Layer(title="same")

    listeners.listen(first)

    assert not listeners.is_listening(second)


def test_unlisten_all() -> None:
    listeners, seen = make_listeners()
    layers = [Layer(title=name) for name in "ABC"]
    for layer in layers:
        listeners.listen(layer)

    listeners.unlisten_all()
    for layer in layers:
        layer.set("visible", False)

    assert len(listeners) == 0
    assert seen == []
    assert all(layer.listener_count() == 0 for layer in layers)
