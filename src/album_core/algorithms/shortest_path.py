"""Shortest path over a lazily generated weighted graph.

Used by the rows planner, where the number of rows is not known upfront.
Nodes are small integers; ``neighbors(node)`` returns ``{neighbor: weight}``
with non-negative weights.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Optional

from ..settings import setting
from .heap import MinHeap

Neighbors = Callable[[int], Mapping[int, float]]


def _improves(
    stored: float,
    candidate: float,
    stored_prev: int,
    candidate_prev: int,
    tolerance: float,
) -> bool:
    """Strictly better, and either clearly better or from an earlier node."""
    if not stored > candidate:
        return False
    if candidate <= 0:
        return True
    return stored / candidate > 1.0 + tolerance or candidate_prev < stored_prev


def build_precedents(
    neighbors: Neighbors,
    start: int,
    end: int,
    tolerance: Optional[float] = None,
) -> Optional[Dict[int, int]]:
    """Return ``{node: predecessor}`` or ``None`` when ``end`` is unreachable."""
    if tolerance is None:
        tolerance = setting("row_tie_tolerance")

    precedents: Dict[int, int] = {}
    visited = set()
    best: Dict[int, float] = {start: 0.0}
    queue = MinHeap()
    queue.push(start, 0.0)

    while len(queue):
        node, weight = queue.pop_min_with_rank()
        if node in visited:
            continue
        visited.add(node)
        for neighbor, edge_weight in neighbors(node).items():
            if neighbor in visited:
                continue
            total = weight + edge_weight
            stored = best.get(neighbor)
            if stored is None or _improves(
                stored, total, precedents.get(neighbor, start), node, tolerance
            ):
                best[neighbor] = total
                precedents[neighbor] = node
                queue.push(neighbor, total)

    if end not in best:
        return None
    return precedents


def path_from_precedents(precedents: Mapping[int, int], start: int, end: int) -> List[int]:
    nodes = [end]
    node = end
    while node != start:
        node = precedents[node]
        nodes.append(node)
    nodes.reverse()
    return nodes


def find_shortest_path(
    neighbors: Neighbors,
    start: int,
    end: int,
    tolerance: Optional[float] = None,
) -> Optional[List[int]]:
    precedents = build_precedents(neighbors, start, end, tolerance)
    if precedents is None:
        return None
    return path_from_precedents(precedents, start, end)
