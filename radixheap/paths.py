"""
Single-source shortest paths on integer-weighted graphs.

Dijkstra expands nodes in non-decreasing distance order, which is exactly
the access pattern a radix heap supports: every key pushed is at least the
distance of the node being expanded, i.e. the heap's baseline.

A graph is a mapping ``node -> {neighbor: weight}`` with non-negative
integer weights.
"""

from __future__ import annotations

import logging
import operator
from typing import Dict, Hashable, List, Mapping, Tuple, TypeVar

from .datastructures import RadixHeap

N = TypeVar("N", bound=Hashable)

Graph = Mapping[N, Mapping[N, int]]

logger = logging.getLogger(__name__)


def shortest_paths(graph: Graph, source: N) -> Tuple[Dict[N, int], Dict[N, N]]:
    """
    Compute distances and predecessors for every node reachable from `source`.

    Returns the distance map (node -> cost from source) and a predecessor map
    for walking back to the source. The source itself has no predecessor.

    Raises:
        TypeError: if a weight is not an integer.
        ValueError: if a weight is negative.
        InvalidKeyError: if a path cost exceeds the heap's key range.
    """
    dist: Dict[N, int] = {source: 0}
    prev: Dict[N, N] = {}
    pq: RadixHeap[N] = RadixHeap()
    pq.insert(0, source)
    expanded = 0

    while pq:
        d_u, u = pq.extract_min()  # type: ignore[misc]

        # Skip outdated entries
        if d_u != dist.get(u):
            continue
        expanded += 1

        for v, w in graph.get(u, {}).items():
            w = operator.index(w)
            if w < 0:
                raise ValueError(f"negative edge weight {w} on {u!r} -> {v!r}")
            alt = d_u + w
            best = dist.get(v)
            if best is None or alt < best:
                pq.insert(alt, v)
                dist[v] = alt
                prev[v] = u

    logger.debug("expanded %d nodes from %r", expanded, source)
    return dist, prev


def shortest_path(graph: Graph, source: N, target: N) -> List[N]:
    """Node list from `source` to `target`, or an empty list if unreachable."""
    dist, prev = shortest_paths(graph, source)
    if target not in dist:
        return []
    path = [target]
    while path[-1] != source:
        path.append(prev[path[-1]])
    path.reverse()
    return path
