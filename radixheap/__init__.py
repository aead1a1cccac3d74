"""Monotone radix heap over 32-bit unsigned integer keys."""

from .datastructures import (
    KEY_BITS,
    MAX_KEY,
    MIN_KEY,
    NUM_BUCKETS,
    Bucket,
    InvalidKeyError,
    RadixHeap,
)

__version__ = "0.3.0"

__all__ = [
    "RadixHeap",
    "Bucket",
    "InvalidKeyError",
    "KEY_BITS",
    "NUM_BUCKETS",
    "MIN_KEY",
    "MAX_KEY",
]
