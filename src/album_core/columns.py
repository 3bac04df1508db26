"""Balanced columns planner.

The photo sequence is split into exactly ``columns`` contiguous columns
whose heights stay close to the average column height.  Each column then
gets its own width, proportional to the harmonic sum of its aspect ratios,
so that all columns end at the same height.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple

from .algorithms.shortest_path_n import find_shortest_path_length_n
from .models import (
    ColumnsLayout,
    Group,
    LayoutEntry,
    LayoutInstrumentation,
    LayoutOptions,
    PhotoLayout,
)
from .settings import setting
from .units import ratio

logger = logging.getLogger(__name__)


def target_column_width(options: LayoutOptions, columns: int) -> float:
    return (
        options.container_width
        - options.spacing * (columns - 1)
        - 2 * options.padding * columns
    ) / columns


def target_column_height(
    ratios: Sequence[float], options: LayoutOptions, columns: int, column_width: float
) -> float:
    total = sum(column_width / value for value in ratios)
    total += options.spacing * (len(ratios) - columns)
    total += 2 * options.padding * len(ratios)
    return total / columns


def make_column_neighbors(
    ratios: Sequence[float],
    options: LayoutOptions,
    column_width: float,
    column_height: float,
):
    cutoff = column_height * setting("column_cutoff_factor")
    count = len(ratios)

    def neighbors(node: int) -> List[Tuple[int, float]]:
        results: List[Tuple[int, float]] = []
        height = column_width / ratios[node] + 2 * options.padding
        for end in range(node + 1, count + 1):
            results.append((end, (column_height - height) ** 2))
            if (height > cutoff and not options.full_graph_search) or end == count:
                break
            height += column_width / ratios[end] + options.spacing + 2 * options.padding
        return results

    return neighbors


def column_widths(
    options: LayoutOptions, columns_gaps: Sequence[float], columns_ratios: Sequence[float]
) -> List[float]:
    """Split the container between columns in proportion to their ratios.

    Columns holding more photos spend more of their width on padding and
    spacing; ``adjusted`` moves that difference between columns so every
    photo keeps its aspect ratio.
    """
    count = len(columns_ratios)
    total_ratio = sum(columns_ratios)
    available = (
        options.container_width
        - (count - 1) * options.spacing
        - 2 * count * options.padding
    )
    widths: List[float] = []
    for gap, column_ratio in zip(columns_gaps, columns_ratios):
        adjusted = sum(
            (gap - other_gap) * other_ratio
            for other_gap, other_ratio in zip(columns_gaps, columns_ratios)
        )
        widths.append((available - adjusted) * column_ratio / total_ratio)
    return widths


def build_columns_model(
    photos: Sequence[Any],
    ratios: Sequence[float],
    path: Sequence[int],
    widths: Sequence[float],
) -> List[Group]:
    model: List[Group] = []
    for column, (start, end) in enumerate(zip(path, path[1:])):
        width = widths[column]
        model.append(
            [
                LayoutEntry(
                    photo=photos[index],
                    layout=PhotoLayout(
                        width=width,
                        height=width / ratios[index],
                        index=index,
                        photo_index=index - start,
                        photos_count=end - start,
                    ),
                )
                for index in range(start, end)
            ]
        )
    return model


def compute_columns_model(
    photos: Sequence[Any],
    ratios: Sequence[float],
    options: LayoutOptions,
    columns: int,
) -> ColumnsLayout:
    columns_gaps: List[float] = []
    columns_ratios: List[float] = []

    if len(ratios) <= columns:
        path = list(range(len(ratios) + 1))
        for value in ratios:
            columns_gaps.append(2 * options.padding)
            columns_ratios.append(value)
        average = sum(ratios) / len(ratios) if ratios else 1.0
        # padding columns requested through min_columns stay empty
        for _ in range(len(ratios), columns):
            columns_gaps.append(0.0)
            columns_ratios.append(average)
    else:
        width = target_column_width(options, columns)
        height = target_column_height(ratios, options, columns, width)
        neighbors = make_column_neighbors(ratios, options, width, height)
        path = find_shortest_path_length_n(neighbors, columns, 0, len(ratios))
        for start, end in zip(path, path[1:]):
            count = end - start
            columns_gaps.append(options.spacing * (count - 1) + 2 * options.padding * count)
            columns_ratios.append(1 / sum(1 / value for value in ratios[start:end]))

    widths = column_widths(options, columns_gaps, columns_ratios) if columns_ratios else []
    model = build_columns_model(photos, ratios, path, widths)
    for _ in range(len(model), len(widths)):
        model.append([])
    return ColumnsLayout(
        columns_model=model,
        columns_gaps=columns_gaps,
        columns_ratios=columns_ratios,
        columns_widths=widths,
    )


def is_feasible(layout: ColumnsLayout) -> bool:
    if any(width <= 0 for width in layout.columns_widths):
        return False
    return all(
        entry.layout.width > 0 and entry.layout.height > 0
        for column in layout.columns_model
        for entry in column
    )


def initial_columns(options: LayoutOptions, count: int) -> int:
    return min(options.columns, max(count, options.min_columns))


def _columns_layout(photos: Sequence[Any], options: LayoutOptions) -> Optional[ColumnsLayout]:
    ratios = [ratio(photo) for photo in photos]
    columns = initial_columns(options, len(ratios))
    if columns == 0:
        return ColumnsLayout(columns_model=[], columns_gaps=[], columns_ratios=[])

    while columns >= 1:
        # column widths add up to columns * target width
        if target_column_width(options, columns) > 0:
            layout = compute_columns_model(photos, ratios, options, columns)
            if is_feasible(layout):
                return layout
        logger.debug("columns: infeasible at %d columns, retrying with %d", columns, columns - 1)
        columns -= 1

    logger.debug("columns: no feasible layout for width %s", options.container_width)
    return None


def compute_columns_layout(
    photos: Sequence[Any],
    options: LayoutOptions,
    instrumentation: Optional[LayoutInstrumentation] = None,
) -> Optional[ColumnsLayout]:
    if instrumentation is not None:
        instrumentation.start()
    result = _columns_layout(photos, options)
    if instrumentation is not None:
        instrumentation.finish(result)
    return result
