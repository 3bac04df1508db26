"""Greedy masonry planner: every photo drops into the lowest column."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from .columns import initial_columns, target_column_width
from .models import Group, LayoutEntry, LayoutInstrumentation, LayoutOptions, PhotoLayout
from .settings import setting
from .units import ratio

logger = logging.getLogger(__name__)


def shortest_column(heights: Sequence[float], epsilon: float) -> int:
    """Lowest column, earlier columns win unless beaten by more than ``epsilon``."""
    best = 0
    for index, height in enumerate(heights):
        if height < heights[best] - epsilon:
            best = index
    return best


def assign_columns(
    ratios: Sequence[float], columns: int, column_width: float, options: LayoutOptions
) -> List[List[int]]:
    epsilon = setting("masonry_epsilon")
    heights = [0.0] * columns
    assigned: List[List[int]] = [[] for _ in range(columns)]
    for index, value in enumerate(ratios):
        column = shortest_column(heights, epsilon)
        heights[column] += column_width / value + options.spacing + 2 * options.padding
        assigned[column].append(index)
    return assigned


def _masonry_layout(photos: Sequence[Any], options: LayoutOptions) -> Optional[List[Group]]:
    ratios = [ratio(photo) for photo in photos]
    columns = initial_columns(options, len(ratios))
    if columns == 0:
        return []

    column_width = target_column_width(options, columns)
    while column_width <= 0:
        if columns <= 1:
            logger.debug("masonry: no feasible layout for width %s", options.container_width)
            return None
        logger.debug("masonry: column width %.3f at %d columns, retrying with %d",
                     column_width, columns, columns - 1)
        columns -= 1
        column_width = target_column_width(options, columns)

    result: List[Group] = []
    for indices in assign_columns(ratios, columns, column_width, options):
        result.append(
            [
                LayoutEntry(
                    photo=photos[index],
                    layout=PhotoLayout(
                        width=column_width,
                        height=column_width / ratios[index],
                        index=index,
                        photo_index=position,
                        photos_count=len(indices),
                    ),
                )
                for position, index in enumerate(indices)
            ]
        )
    return result


def compute_masonry_layout(
    photos: Sequence[Any],
    options: LayoutOptions,
    instrumentation: Optional[LayoutInstrumentation] = None,
) -> Optional[List[Group]]:
    if instrumentation is not None:
        instrumentation.start()
    result = _masonry_layout(photos, options)
    if instrumentation is not None:
        instrumentation.finish(result)
    return result
