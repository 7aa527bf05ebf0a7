"""Ordered entry storage backing a :class:`~layersync.model.store.LayerStore`."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from layersync.contracts.events import Observable
from layersync.model.entry import LayerEntry
from layersync.model.pairs import EntryPairMap


class EntryCollection(Observable):
    """Entries in store order, indexed by id and by backing layer.

    The only notification fired here is ``replace(key, old_entry, new_entry)``
    when the entry stored under ``key`` is swapped for another object. Every
    other change is announced by the owning store.
    """

    def __init__(self) -> None:
        super().__init__()
        self._items: list[LayerEntry] = []
        self._by_id: dict[str, LayerEntry] = {}
        self.pairs = EntryPairMap()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LayerEntry]:
        return iter(list(self._items))

    def items(self) -> list[LayerEntry]:
        return list(self._items)

    def get_at(self, index: int) -> LayerEntry:
        return self._items[index]

    def get(self, key: str) -> LayerEntry | None:
        return self._by_id.get(key)

    def index_of(self, entry: object) -> int:
        for index, candidate in enumerate(self._items):
            if candidate is entry:
                return index
        return -1

    def insert(self, index: int, entries: Iterable[LayerEntry]) -> list[LayerEntry]:
        if index < 0 or index > len(self._items):
            raise IndexError(f"insert index {index} out of range for {len(self._items)} entries")
        batch = list(entries)
        self._register(batch)
        self._items[index:index] = batch
        return batch

    def remove_at(self, index: int) -> LayerEntry:
        entry = self._items.pop(index)
        self._unregister(entry)
        return entry

    def replace(self, key: str, entry: LayerEntry) -> LayerEntry:
        old_entry = self._by_id.get(key)
        if old_entry is None:
            raise KeyError(key)
        if old_entry is entry:
            return old_entry
        index = self.index_of(old_entry)
        self._unregister(old_entry)
        try:
            self._register([entry])
        except Exception:
            self._register([old_entry])
            raise
        self._items[index] = entry
        self.fire("replace", key, old_entry, entry)
        return old_entry

    def set_all(self, entries: Iterable[LayerEntry]) -> list[LayerEntry]:
        """Swap the whole content without firing any notification."""
        batch = list(entries)
        previous = self.clear()
        try:
            self._register(batch)
        except Exception:
            self._register(previous)
            self._items = previous
            raise
        self._items = batch
        return previous

    def clear(self) -> list[LayerEntry]:
        removed = self._items
        self._items = []
        self._by_id.clear()
        self.pairs.clear()
        return removed

    def _register(self, batch: list[LayerEntry]) -> None:
        registered: list[LayerEntry] = []
        try:
            for entry in batch:
                if entry.id in self._by_id:
                    raise ValueError(f"duplicate entry id: {entry.id}")
                self.pairs.pair(entry)
                self._by_id[entry.id] = entry
                registered.append(entry)
        except Exception:
            for entry in registered:
                self._unregister(entry)
            raise

    def _unregister(self, entry: LayerEntry) -> None:
        self.pairs.release(entry)
        if self._by_id.get(entry.id) is entry:
            del self._by_id[entry.id]
