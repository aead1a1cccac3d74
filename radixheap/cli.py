"""
Radix heap command-line interface.

Usage examples:
    python -m radixheap.cli demo
    python -m radixheap.cli sort 18 93 7 1 13 211
    python -m radixheap.cli --log-level DEBUG bench --path radix_heap_bench.csv --base 50 --rounds 6
"""

import argparse
import sys

from .benchmark import run_benchmarks
from .datastructures import InvalidKeyError, RadixHeap
from .log_config import configure_logging

# Entries inserted by the demo command
DEMO_ENTRIES = [
    (18, "of"),
    (93, "rust"),
    (7, "amazing"),
    (1, "hello"),
    (13, "world"),
    (211, "development"),
]


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_demo(args):
    """Walk through the basic heap operations on a small word list."""
    heap = RadixHeap(capacity=args.capacity, it=DEMO_ENTRIES)
    print(f"size={heap.size()} capacity={heap.capacity()}")
    print(" ".join(heap.values()))
    print(f"peek: {heap.peek_min()}")

    heap.extract_min()
    print(f"peek after extract: {heap.peek_min()}")

    for _ in range(heap.size() - 2):
        heap.extract_min()
    print(" ".join(heap.values()))

    heap.clear()
    print(f"cleared: empty={heap.is_empty()} baseline={heap.baseline}")
    return 0


def cmd_sort(args):
    """Print the given keys in extraction order."""
    heap = RadixHeap()
    for key in args.keys:
        heap.insert(key, None)
    print(" ".join(str(k) for k, _ in heap.drain()))
    return 0


def cmd_bench(args):
    """Benchmark insert/extract/peek and write the results as CSV."""
    run_benchmarks(args.path, base_input=args.base, rounds=args.rounds)
    return 0


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m radixheap.cli", description="Radix heap CLI")
    p.add_argument("--log-level", default=None, help="logging level (default: $RADIXHEAP_LOG_LEVEL or WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("demo", help="Run the basic usage walkthrough")
    s.add_argument("--capacity", type=int, default=8)
    s.set_defaults(func=cmd_demo)

    s = sub.add_parser("sort", help="Sort integer keys through the heap")
    s.add_argument("keys", type=int, nargs="+")
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("bench", help="Benchmark heap operations to CSV")
    s.add_argument("--path", required=True)
    s.add_argument("--base", type=int, default=100)
    s.add_argument("--rounds", type=int, default=8)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m radixheap.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        return args.func(args)
    except (InvalidKeyError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
