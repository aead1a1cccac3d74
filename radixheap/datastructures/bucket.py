from __future__ import annotations
from operator import itemgetter
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from .entry_array import EntryArray

V = TypeVar("V")

Entry = Tuple[int, V]

_by_key = itemgetter(0)


class Bucket(Generic[V]):
    """Unordered store for the entries of one distance class.

    The bucket caches its minimum entry so that peeking is O(1). Among
    entries with equal keys the first one inserted stays the minimum.
    """

    __slots__ = ("_distance_class", "_entries", "_top")

    def __init__(self, distance_class: int, capacity: int = 0) -> None:
        self._distance_class = distance_class
        self._entries: EntryArray[Entry] = EntryArray(capacity)
        self._top: Optional[Entry] = None

    @property
    def distance_class(self) -> int:
        return self._distance_class

    @property
    def min_entry(self) -> Optional[Entry]:
        """The cached minimum entry, or None when the bucket is empty."""
        return self._top

    def insert(self, key: int, value: V) -> None:
        """Append an entry and refresh the cached minimum (O(1) amortized)."""
        entry = (key, value)
        self._entries.append(entry)
        # strict less-than: an equal key never displaces the current minimum
        if self._top is None or key < self._top[0]:
            self._top = entry

    def extract_min(self) -> Optional[Entry]:
        """Remove and return the minimum entry (O(bucket size)).

        Returns None on an empty bucket; the owning heap never asks for that.
        """
        top = self._top
        if top is None:
            return None
        self._entries.remove(top)
        # min() keeps the first of several equal keys
        self._top = min(self._entries, key=_by_key) if self._entries else None
        return top

    def drain(self) -> List[Entry]:
        """Hand back every entry in insertion order and empty the bucket."""
        self._top = None
        return self._entries.drain()

    def clear(self) -> None:
        self._entries.clear()
        self._top = None

    def entries(self) -> List[Entry]:
        return self._entries.to_list()

    def capacity(self) -> int:
        return self._entries.capacity()

    def is_empty(self) -> bool:
        return len(self._entries) == 0

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return len(self._entries) != 0

    def __iter__(self) -> Iterator[Entry]:
        # snapshot
        return iter(self._entries.to_list())

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Bucket({self._distance_class}, {self._entries.to_list()!r})"
