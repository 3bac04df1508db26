"""Shortest path constrained to an exact number of edges.

Layered dynamic programming: ``layers[h][node]`` holds the best
``(predecessor, cost)`` pair that reaches ``node`` in exactly ``h`` hops.
Used by the columns planner, where the column count is fixed.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..settings import setting

Edges = Sequence[Tuple[int, float]]
Neighbors = Callable[[int], Edges]
Layer = Dict[int, Tuple[int, float]]


class LayoutSearchError(RuntimeError):
    """Raised when the end node cannot be reached in the requested hops."""


def compute_layers(
    neighbors: Neighbors,
    path_length: int,
    start: int,
    end: int,
    tolerance: Optional[float] = None,
) -> List[Layer]:
    if tolerance is None:
        tolerance = setting("column_tie_tolerance")

    layers: List[Layer] = [{start: (start, 0.0)}]
    for length in range(path_length):
        current = layers[length]
        following: Layer = {}
        for node in sorted(current):
            if length > 0 and node == end:
                continue
            accumulated = current[node][1]
            for neighbor, weight in neighbors(node):
                total = accumulated + weight
                stored = following.get(neighbor)
                if stored is None:
                    following[neighbor] = (node, total)
                    continue
                stored_prev, stored_total = stored
                if stored_total > total and (
                    total <= 0
                    or stored_total / total > 1.0 + tolerance
                    or node < stored_prev
                ):
                    following[neighbor] = (node, total)
        layers.append(following)
    return layers


def reconstruct_path(layers: List[Layer], path_length: int, end: int) -> List[int]:
    if end not in layers[path_length]:
        raise LayoutSearchError(
            f"node {end} is not reachable in exactly {path_length} hops"
        )
    path = [end]
    node = end
    for length in range(path_length, 0, -1):
        node = layers[length][node][0]
        path.append(node)
    path.reverse()
    return path


def find_shortest_path_length_n(
    neighbors: Neighbors,
    path_length: int,
    start: int,
    end: int,
    tolerance: Optional[float] = None,
) -> List[int]:
    if path_length < 0:
        raise ValueError("path_length must be >= 0")
    layers = compute_layers(neighbors, path_length, start, end, tolerance)
    return reconstruct_path(layers, path_length, end)
