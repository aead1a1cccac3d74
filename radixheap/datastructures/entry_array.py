from __future__ import annotations
import ctypes
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class EntryArray(Generic[T]):
    """A growable array of heap entries backed by a raw ``py_object`` buffer.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list),
      so the allocated capacity is observable and can be reserved up front.
    • Capacity doubles when full, starting at `_INITIAL_CAPACITY` from zero.
    • Capacity never shrinks; `clear()` and `drain()` keep the buffer.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    _INITIAL_CAPACITY = 4

    def __init__(self, capacity: int = 0, it: Optional[Iterable[T]] = None) -> None:
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._capacity = capacity
        self._buf = self._make_array(capacity)
        self._size = 0

        if it is not None:
            for v in it:
                self.append(v)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        return (capacity * ctypes.py_object)()

    def _resize(self, new_capacity: int) -> None:
        """Move live items into a fresh buffer of `new_capacity` slots."""
        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]
        self._buf = new_buf
        self._capacity = new_capacity

    def _grow_if_full(self) -> None:
        if self._size >= self._capacity:
            self._resize(self._capacity * 2 if self._capacity > 0 else self._INITIAL_CAPACITY)

    def _normalize_index(self, idx: int) -> int:
        if idx < 0:
            idx += self._size
        if idx < 0 or idx >= self._size:
            raise IndexError("entry index out of range")
        return idx

    # --------------------------------- API -----------------------------------

    def append(self, entry: T) -> None:
        """Append `entry` to the end. Amortized O(1)."""
        self._grow_if_full()
        self._buf[self._size] = entry
        self._size += 1

    def remove(self, entry: T) -> None:
        """Remove the first occurrence of `entry`, preserving order. O(n).

        Raises:
            ValueError: if `entry` is not present.
        """
        for i in range(self._size):
            item = self._buf[i]
            if item is entry or item == entry:
                for j in range(i, self._size - 1):
                    self._buf[j] = self._buf[j + 1]
                self._buf[self._size - 1] = None
                self._size -= 1
                return
        raise ValueError(f"{entry!r} not in EntryArray")

    def drain(self) -> List[T]:
        """Return every entry in order and leave the array empty."""
        out = self.to_list()
        self.clear()
        return out

    def clear(self) -> None:
        """Remove all items. Keeps capacity to avoid churn on re-use."""
        for i in range(self._size):
            self._buf[i] = None
        self._size = 0

    def capacity(self) -> int:
        return self._capacity

    def to_list(self) -> List[T]:
        return [self._buf[i] for i in range(self._size)]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Yield items from left to right."""
        for i in range(self._size):
            yield self._buf[i]  # type: ignore[misc]

    def __getitem__(self, idx: int) -> T:
        return self._buf[self._normalize_index(idx)]  # type: ignore[return-value]

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"EntryArray({self.to_list()!r}, capacity={self._capacity})"
