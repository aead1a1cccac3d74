"""Timing and space benchmark for RadixHeap operations, written as CSV."""

from __future__ import annotations

import csv
import random
import statistics
import sys
import time
from typing import Callable, List, Tuple

from .datastructures import MAX_KEY, RadixHeap

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_keys(size: int, max_key: int = MAX_KEY) -> List[int]:
    """Generate a list of random keys of given size."""
    return [random.randint(0, max_key) for _ in range(size)]


def measure_operation_time(operation: Callable[[List[int]], RadixHeap], input_size: int, iterations: int = 5) -> Tuple[float, float]:
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_keys(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def measure_space(heap: RadixHeap) -> int:
    """Approximate bytes held by the heap: the object, its buckets and entries."""
    total = sys.getsizeof(heap)
    for bucket in heap.iter_buckets():
        total += sys.getsizeof(bucket)
        total += bucket.capacity() * sys.getsizeof(None)
        for key, value in bucket:
            total += sys.getsizeof((key, value)) + sys.getsizeof(key)
    return total


def measure_space_efficiency(operation: Callable[[List[int]], RadixHeap], input_size: int, iterations: int = 3) -> float:
    """Return average memory left in the heap after the operation (bytes)."""
    sizes = []
    for _ in range(iterations):
        heap = operation(generate_random_keys(input_size))
        sizes.append(measure_space(heap))
    return statistics.mean(sizes)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_insert(data: List[int]) -> RadixHeap:
    heap: RadixHeap[int] = RadixHeap()
    for i, key in enumerate(data):
        heap.insert(key, i)
    return heap


def bench_extract(data: List[int]) -> RadixHeap:
    heap = bench_insert(data)
    while heap:
        heap.extract_min()
    return heap


def bench_peek(data: List[int]) -> RadixHeap:
    heap = bench_insert(data)
    for _ in range(min(3, len(data))):
        heap.peek_min()
    return heap


OPERATIONS = {
    "insert": bench_insert,
    "extract": bench_extract,
    "peek": bench_peek,
}

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, rounds: int = 8) -> List[List[str]]:
    """Run exponential performance tests for RadixHeap operations."""
    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    rows: List[List[str]] = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size)
                avg_space = measure_space_efficiency(op_func, size)
                row = [str(size), op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                print(f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows
