from __future__ import annotations
import logging
import operator
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .bucket import Bucket

V = TypeVar("V")

logger = logging.getLogger(__name__)

# Keys are unsigned integers of this width.
KEY_BITS = 32
NUM_BUCKETS = KEY_BITS + 1
MIN_KEY = 0
MAX_KEY = (1 << KEY_BITS) - 1


class InvalidKeyError(ValueError):
    """Raised when a key is outside the key range or below the heap's baseline."""

    def __init__(self, key: int, baseline: int, reason: str = "key smaller than last extracted key") -> None:
        super().__init__(f"invalid key {key}: {reason} (baseline={baseline})")
        self.key = key
        self.baseline = baseline


def distance_class(key: int, baseline: int) -> int:
    """Index of the bucket that holds `key` relative to `baseline`.

    0 when the two are equal, otherwise the 1-based position of the highest
    differing bit, i.e. ``KEY_BITS - leading_zeros(key ^ baseline)``.
    """
    return (key ^ baseline).bit_length()


class RadixHeap(Generic[V]):
    """A monotone priority queue over 32-bit unsigned keys.

    Extracted keys never decrease, and a key may only be inserted if it is
    no smaller than the last extracted key (the *baseline*). Entries live in
    33 buckets indexed by their distance class from the baseline; each
    extraction from a non-zero bucket advances the baseline and pushes the
    rest of that bucket down into smaller classes. An entry can move down at
    most KEY_BITS times, so extraction is amortized O(KEY_BITS).
    """

    __slots__ = ("_buckets", "_baseline", "_size")

    def __init__(self, capacity: Optional[int] = None, it: Optional[Iterable[Tuple[int, V]]] = None) -> None:
        hint = capacity or 0
        # Every bucket gets the full hint; it is not split between them
        self._buckets: List[Bucket[V]] = [Bucket(i, hint) for i in range(NUM_BUCKETS)]
        self._baseline: int = MIN_KEY
        self._size: int = 0
        if it is not None:
            self.extend(it)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _first_nonempty(self) -> int:
        for i, bucket in enumerate(self._buckets):
            if not bucket.is_empty():
                return i
        raise AssertionError("no non-empty bucket in a non-empty heap")

    def _redistribute(self, index: int) -> None:
        """Re-insert what is left of bucket `index` relative to the new baseline."""
        scratch = self._buckets[index].drain()
        self._buckets[index] = Bucket(index)
        for key, value in scratch:
            target = distance_class(key, self._baseline)
            assert target < index, "redistributed entry did not move down"
            self._buckets[target].insert(key, value)
        logger.debug("redistributed %d entries from bucket %d (baseline=%d)", len(scratch), index, self._baseline)

    # -----------------------------
    # Public API
    # -----------------------------
    @property
    def baseline(self) -> int:
        """Key of the most recently extracted entry (MIN_KEY before any)."""
        return self._baseline

    def insert(self, key: int, value: V) -> None:
        """Insert an entry; raises InvalidKeyError if `key` is out of range or below the baseline."""
        key = operator.index(key)
        if key < MIN_KEY or key > MAX_KEY:
            raise InvalidKeyError(key, self._baseline, f"outside [{MIN_KEY}, {MAX_KEY}]")
        if key < self._baseline:
            raise InvalidKeyError(key, self._baseline)
        self._buckets[distance_class(key, self._baseline)].insert(key, value)
        self._size += 1

    def extend(self, pairs: Iterable[Tuple[int, V]]) -> None:
        """Insert each (key, value) pair in order, stopping at the first failure."""
        for key, value in pairs:
            self.insert(key, value)

    def extract_min(self) -> Optional[Tuple[int, V]]:
        """Remove and return the entry with the smallest key, or None if empty."""
        if self._size == 0:
            return None
        index = self._first_nonempty()
        bucket = self._buckets[index]
        top = bucket.extract_min()
        assert top is not None
        if index > 0:
            self._baseline = top[0]
            if not bucket.is_empty():
                self._redistribute(index)
        self._size -= 1
        return top

    def peek_min(self) -> Optional[Tuple[int, V]]:
        """Return the entry extract_min would return, without removing it."""
        if self._size == 0:
            return None
        return self._buckets[self._first_nonempty()].min_entry

    def drain(self) -> Iterator[Tuple[int, V]]:
        """Extract entries until the heap is empty, in non-decreasing key order."""
        while self._size:
            yield self.extract_min()  # type: ignore[misc]

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        """Total allocated slots across all buckets (diagnostic only)."""
        return sum(b.capacity() for b in self._buckets)

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Empty every bucket. The baseline is kept as the insertion floor."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0
        logger.debug("cleared heap (baseline=%d)", self._baseline)

    def copy(self) -> "RadixHeap[V]":
        """Return an independent heap with the same baseline and contents."""
        other: RadixHeap[V] = RadixHeap()
        other._baseline = self._baseline
        for bucket in self._buckets:
            for key, value in bucket:
                other._buckets[bucket.distance_class].insert(key, value)
        other._size = self._size
        return other

    # -----------------------------
    # Read-only projections
    # -----------------------------
    def iter_buckets(self) -> Iterator[Bucket[V]]:
        """Iterate over the buckets in index order (0 through KEY_BITS)."""
        return iter(list(self._buckets))

    def iter_entries(self) -> Iterator[Tuple[int, V]]:
        """Lazily yield entries in bucket order; not sorted by key."""
        for bucket in self.iter_buckets():
            yield from bucket

    def all_entries(self) -> List[Tuple[int, V]]:
        return list(self.iter_entries())

    def sorted_entries(self) -> List[Tuple[int, V]]:
        return sorted(self.iter_entries(), key=operator.itemgetter(0))

    def keys(self) -> List[int]:
        return [k for k, _ in self.sorted_entries()]

    def values(self) -> List[V]:
        return [v for _, v in self.sorted_entries()]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"RadixHeap(baseline={self._baseline}, entries={self.sorted_entries()!r})"
