"""A store of layer entries that can be kept in sync with a layer collection."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from layersync.contracts.config import SyncConfig
from layersync.contracts.events import Observable, Operation
from layersync.model.collection import EntryCollection
from layersync.model.entry import LayerEntry
from layersync.model.reader import LayerReader, ReadResult
from layersync.sync.binding import MapBinding
from layersync.target.collection import LayerCollection
from layersync.target.layer import Layer

logger = logging.getLogger(__name__)


class LayerStore(Observable):
    """Ordered store of :class:`LayerEntry` records.

    Once bound to a :class:`LayerCollection` with :meth:`bind_map`, the store
    and the collection mirror each other: adding, removing or reordering on
    either side is replayed on the other, and titles are kept equal.

    Notifications (all synchronous):

    - ``load(store, entries, successful, add_records)``
    - ``clear(store, entries)``
    - ``add(store, entries, index)``
    - ``remove(store, entry, index)``
    - ``update(store, entry, operation, modified)``
    - ``bind(store, target)``

    The backing :attr:`data` additionally fires ``replace(key, old, new)``.
    """

    def __init__(
        self,
        entries: Iterable[LayerEntry] | None = None,
        *,
        target: LayerCollection | None = None,
        config: SyncConfig | None = None,
        reader: LayerReader | None = None,
    ) -> None:
        super().__init__()
        self.config = config or SyncConfig()
        self.reader = reader or LayerReader(self.config)
        self.data = EntryCollection()
        self.map: LayerCollection | None = None
        self.total_count = 0
        self._binding: MapBinding | None = None
        if entries is not None:
            self.data.insert(0, entries)
            self.total_count = len(self.data)
        if target is not None:
            self.bind_map(target)

    # -- reading ----------------------------------------------------------

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[LayerEntry]:
        return iter(self.data)

    @property
    def entries(self) -> list[LayerEntry]:
        return self.data.items()

    def get_count(self) -> int:
        return len(self.data)

    def get_at(self, index: int) -> LayerEntry:
        return self.data.get_at(index)

    def get_by_id(self, entry_id: str) -> LayerEntry | None:
        return self.data.get(entry_id)

    def index_of(self, entry: LayerEntry) -> int:
        return self.data.index_of(entry)

    def find_by(self, predicate: Callable[[LayerEntry], bool]) -> int:
        for index, entry in enumerate(self.data):
            if predicate(entry):
                return index
        return -1

    def get_by_layer(self, layer: Layer) -> LayerEntry | None:
        """Get the entry backed by ``layer``, or ``None`` if there is none."""
        return self.data.pairs.entry_for(layer)

    # -- mutation ---------------------------------------------------------

    def insert(self, index: int, entries: LayerEntry | Iterable[LayerEntry]) -> list[LayerEntry]:
        batch = self.data.insert(index, _as_entries(entries))
        if batch:
            self.fire("add", self, batch, index)
        return batch

    def add(self, entries: LayerEntry | Iterable[LayerEntry]) -> list[LayerEntry]:
        return self.insert(len(self.data), entries)

    def remove(self, entries: LayerEntry | Iterable[LayerEntry]) -> list[LayerEntry]:
        removed: list[LayerEntry] = []
        for entry in _as_entries(entries):
            index = self.data.index_of(entry)
            if index == -1:
                continue
            removed.append(self.remove_at(index))
        return removed

    def remove_at(self, index: int) -> LayerEntry:
        entry = self.data.remove_at(index)
        self.fire("remove", self, entry, index)
        return entry

    def remove_all(self, silent: bool = False) -> list[LayerEntry]:
        removed = self.data.clear()
        if not silent:
            self.fire("clear", self, removed)
        return removed

    def move(self, entry: LayerEntry, index: int) -> None:
        """Reorder ``entry`` to ``index`` as a remove followed by an insert."""
        current = self.data.index_of(entry)
        if current == -1:
            raise ValueError(f"entry {entry.id} is not in the store")
        if index < 0 or index >= len(self.data):
            raise IndexError(f"move index {index} out of range for {len(self.data)} entries")
        if current == index:
            return
        self.remove_at(current)
        self.insert(index, entry)

    def replace_entry(self, old_entry: LayerEntry, new_entry: LayerEntry) -> LayerEntry:
        """Put ``new_entry`` in the slot of ``old_entry``.

        The swap happens in :attr:`data` and is announced with its ``replace``
        notification, not with ``remove``/``add``.
        """
        if self.data.index_of(old_entry) == -1:
            raise ValueError(f"entry {old_entry.id} is not in the store")
        return self.data.replace(old_entry.id, new_entry)

    def replace_at(self, index: int, entry: LayerEntry) -> LayerEntry:
        return self.replace_entry(self.data.get_at(index), entry)

    def set_field(self, entry: LayerEntry, name: str, value: Any) -> bool:
        return self.set_fields(entry, {name: value})

    def set_fields(self, entry: LayerEntry, values: Mapping[str, Any]) -> bool:
        """Edit ``entry`` and fire one ``update`` with :attr:`Operation.EDIT`.

        Returns ``False`` (and fires nothing) when no value actually changed.
        """
        modified: list[str] = []
        for name, value in values.items():
            if name == "id":
                raise ValueError("entry id cannot be edited")
            if name == "title":
                if entry.title != value:
                    entry.title = value
                    modified.append(name)
            elif entry.attributes.get(name) != value or name not in entry.attributes:
                entry.attributes[name] = value
                modified.append(name)
        if not modified:
            return False
        self.fire("update", self, entry, Operation.EDIT, tuple(modified))
        return True

    def commit(self, entry: LayerEntry) -> None:
        self.fire("update", self, entry, Operation.COMMIT, ())

    def reject(self, entry: LayerEntry) -> None:
        self.fire("update", self, entry, Operation.REJECT, ())

    def notify_entry_changed(self, entry: LayerEntry) -> None:
        """Tell views that ``entry`` changed without naming any field."""
        self.fire("update", self, entry, Operation.EDIT, ())

    # -- loading ----------------------------------------------------------

    def load_entries(self, entries: Iterable[LayerEntry], add_records: bool = False) -> list[LayerEntry]:
        """Load ``entries``, replacing the current content unless ``add_records``.

        Fires a single ``load`` notification; the replaced entries are dropped
        silently.
        """
        batch = _as_entries(entries)
        if add_records:
            self.data.insert(len(self.data), batch)
        else:
            self.data.set_all(batch)
        self.fire("load", self, batch, True, add_records)
        return batch

    def load_raw_data(self, data: Any, append: bool = False) -> ReadResult:
        """Read raw layers with :attr:`reader` and load the resulting entries.

        A failed read leaves the store untouched and fires nothing.
        """
        result = self.reader.read(data)
        if not result.success:
            logger.warning("Ignoring raw data the reader rejected: %s", result.message)
            return result
        self.total_count = result.total
        self.load_entries(result.entries, add_records=append)
        return result

    # -- map binding ------------------------------------------------------

    @property
    def is_bound(self) -> bool:
        return self._binding is not None

    def bind_map(self, target: LayerCollection) -> None:
        """Bind this store to ``target``; both are then kept in sync.

        Only the first bind counts: while bound, binding again (to the same or
        another collection) changes nothing.
        """
        if self._binding is not None:
            if target is self.map:
                logger.debug("Store already bound to this layer collection")
            else:
                logger.warning("Store already bound to another layer collection; unbind it first")
            return

        binding = MapBinding(self, target, config=self.config)
        self.map = target
        self._binding = binding
        binding.attach()
        logger.info("Bound store to layer collection (%d entries, %d layers)", len(self.data), len(target))
        self.fire("bind", self, target)

    def unbind_map(self) -> None:
        """Detach every listener installed by :meth:`bind_map`. Safe to repeat."""
        binding = self._binding
        self._binding = None
        self.map = None
        if binding is None:
            return
        binding.detach()
        logger.info("Unbound store from layer collection")

    def destroy(self) -> None:
        self.unbind_map()
        self.data.clear()
        self.data.clear_listeners()
        self.clear_listeners()


def _as_entries(entries: LayerEntry | Iterable[LayerEntry]) -> list[LayerEntry]:
    if isinstance(entries, LayerEntry):
        return [entries]
    return list(entries)
