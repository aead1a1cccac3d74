from .entry_array import EntryArray
from .bucket import Bucket
from .radix_heap import (
    KEY_BITS,
    MAX_KEY,
    MIN_KEY,
    NUM_BUCKETS,
    InvalidKeyError,
    RadixHeap,
    distance_class,
)

__all__ = [
    "EntryArray",
    "Bucket",
    "RadixHeap",
    "InvalidKeyError",
    "distance_class",
    "KEY_BITS",
    "NUM_BUCKETS",
    "MIN_KEY",
    "MAX_KEY",
]
