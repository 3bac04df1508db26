"""Justified rows planner.

Each row is scaled to span the full container width; the row partition is
the shortest path from boundary ``0`` to ``len(photos)`` where an edge
``(i, j)`` costs the squared deviation of the row height from the target,
weighted by the number of photos in the row.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional, Sequence

from .algorithms.shortest_path import find_shortest_path
from .models import Group, LayoutEntry, LayoutInstrumentation, LayoutOptions, PhotoLayout
from .settings import setting
from .units import ratio, round_value

logger = logging.getLogger(__name__)


def find_ideal_node_search(
    ratios: Sequence[float], container_width: float, target_row_height: float
) -> int:
    """Upper bound on photos per row: narrowest photos at target height, plus margin."""
    if not ratios:
        return int(setting("node_search_margin"))
    min_ratio = min(ratios)
    return int(
        round_value(container_width / target_row_height / min_ratio)
        + setting("node_search_margin")
    )


def common_height(
    ratios: Sequence[float], container_width: float, spacing: float, padding: float
) -> float:
    count = len(ratios)
    row_width = container_width - (count - 1) * spacing - 2 * padding * count
    return row_width / sum(ratios)


def row_cost(
    ratios: Sequence[float],
    container_width: float,
    target_row_height: float,
    spacing: float,
    padding: float,
) -> Optional[float]:
    height = common_height(ratios, container_width, spacing, padding)
    if height <= 0:
        return None
    return (height - target_row_height) ** 2 * len(ratios)


def make_row_neighbors(ratios: Sequence[float], options: LayoutOptions, limit: int):
    constraints = options.row_constraints
    start_offset = 1
    max_photos = math.inf
    if constraints is not None:
        start_offset = constraints.min_photos or 1
        if constraints.max_photos is not None:
            max_photos = constraints.max_photos
    end_offset = max_photos if options.full_graph_search else min(limit, max_photos)

    def neighbors(node: int) -> Dict[int, float]:
        results: Dict[int, float] = {}
        for end in range(node + start_offset, len(ratios) + 1):
            if end - node > end_offset:
                break
            cost = row_cost(
                ratios[node:end],
                options.container_width,
                options.target_row_height,
                options.spacing,
                options.padding,
            )
            if cost is None:
                break
            results[end] = cost
        return results

    return neighbors


def build_rows(
    photos: Sequence[Any],
    ratios: Sequence[float],
    path: Sequence[int],
    options: LayoutOptions,
) -> List[Group]:
    rows: List[Group] = []
    for start, end in zip(path, path[1:]):
        height = common_height(
            ratios[start:end], options.container_width, options.spacing, options.padding
        )
        count = end - start
        rows.append(
            [
                LayoutEntry(
                    photo=photos[index],
                    layout=PhotoLayout(
                        width=height * ratios[index],
                        height=height,
                        index=index,
                        photo_index=index - start,
                        photos_count=count,
                    ),
                )
                for index in range(start, end)
            ]
        )
    return rows


def _rows_layout(photos: Sequence[Any], options: LayoutOptions) -> Optional[List[Group]]:
    ratios = [ratio(photo) for photo in photos]
    if not ratios:
        return []
    limit = find_ideal_node_search(
        ratios, options.container_width, options.target_row_height
    )
    logger.debug("rows: %d photos, node search limit %d", len(ratios), limit)
    path = find_shortest_path(make_row_neighbors(ratios, options, limit), 0, len(ratios))
    if path is None:
        logger.debug("rows: no feasible partition for width %s", options.container_width)
        return None
    return build_rows(photos, ratios, path, options)


def compute_rows_layout(
    photos: Sequence[Any],
    options: LayoutOptions,
    instrumentation: Optional[LayoutInstrumentation] = None,
) -> Optional[List[Group]]:
    """Return rows of :class:`LayoutEntry` or ``None`` when no row fits."""
    if instrumentation is not None:
        instrumentation.start()
    result = _rows_layout(photos, options)
    if instrumentation is not None:
        instrumentation.finish(result)
    return result
