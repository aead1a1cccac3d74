import os
import sys

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from radixheap.datastructures.bucket import Bucket


def test_insert_tracks_minimum():
    b = Bucket(4)
    assert b.min_entry is None
    b.insert(12, "twelve")
    assert b.min_entry == (12, "twelve")
    b.insert(9, "nine")
    b.insert(15, "fifteen")
    assert b.min_entry == (9, "nine")
    assert len(b) == 3
    assert b.distance_class == 4


def test_equal_key_keeps_first_inserted_minimum():
    b = Bucket(3)
    b.insert(5, "first")
    b.insert(5, "second")
    assert b.min_entry == (5, "first")
    assert b.extract_min() == (5, "first")
    assert b.min_entry == (5, "second")


def test_extract_min_recomputes_from_remaining_entries():
    b = Bucket(5)
    for k, v in [(20, "a"), (17, "b"), (25, "c"), (17, "d")]:
        b.insert(k, v)
    assert b.extract_min() == (17, "b")
    assert b.min_entry == (17, "d")
    assert b.extract_min() == (17, "d")
    assert b.extract_min() == (20, "a")
    assert b.extract_min() == (25, "c")
    assert b.is_empty()
    assert b.min_entry is None


def test_extract_from_empty_bucket_returns_none():
    b = Bucket(0)
    assert b.extract_min() is None


def test_duplicate_pairs_removed_one_at_a_time():
    b = Bucket(2)
    b.insert(3, "x")
    b.insert(3, "x")
    assert b.extract_min() == (3, "x")
    assert len(b) == 1
    assert b.entries() == [(3, "x")]


def test_drain_clear_and_iteration():
    b = Bucket(6, capacity=16)
    b.insert(40, "p")
    b.insert(33, "q")
    assert list(b) == [(40, "p"), (33, "q")]
    assert b.drain() == [(40, "p"), (33, "q")]
    assert b.min_entry is None
    assert b.capacity() == 16
    b.insert(50, "r")
    b.clear()
    assert b.is_empty()
    assert b.min_entry is None
