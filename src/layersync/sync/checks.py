"""Consistency checks between a store and a layer collection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from layersync.target.collection import LayerCollection

if TYPE_CHECKING:
    from layersync.model.store import LayerStore


def order_mismatches(store: LayerStore, target: LayerCollection) -> list[str]:
    """List every way ``store`` and ``target`` disagree.

    Checks that each entry's layer is in the collection, that each layer has
    exactly one entry, that the two orders agree and that titles match.
    An empty list means the pair is in sync.
    """
    errors: list[str] = []
    title_key = store.config.title_key

    for entry in store:
        if entry.layer not in target:
            errors.append(f"entry {entry.id} ({entry.title!r}) has no layer in the collection")
        layer_title = entry.layer.get(title_key)
        if layer_title is not None and str(layer_title) != entry.title:
            errors.append(f"entry {entry.id} title {entry.title!r} != layer title {layer_title!r}")

    bound_layers = []
    for layer in target:
        if store.get_by_layer(layer) is None:
            errors.append(f"{layer!r} has no entry in the store")
        else:
            bound_layers.append(layer)

    store_layers = [entry.layer for entry in store if entry.layer in target]
    if any(a is not b for a, b in zip(store_layers, bound_layers)) or len(store_layers) != len(bound_layers):
        store_order = ", ".join(repr(entry.title) for entry in store)
        target_order = ", ".join(repr(layer.get(title_key)) for layer in target)
        errors.append(f"order differs: store [{store_order}] vs collection [{target_order}]")
    return errors


def is_in_sync(store: LayerStore, target: LayerCollection) -> bool:
    return not order_mismatches(store, target)
