from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Sequence

from .models import AlbumLayout, LayoutOptions


@dataclass(frozen=True)
class ValidationPolicy:
    rel_tol: float = 1e-9
    abs_tol: float = 1e-6


DEFAULT_VALIDATION_POLICY = ValidationPolicy()


def _close(a: float, b: float, policy: ValidationPolicy) -> bool:
    return math.isclose(a, b, rel_tol=policy.rel_tol, abs_tol=policy.abs_tol)


def covers_input(layout: AlbumLayout, photos: Sequence[Any]) -> bool:
    indices: List[int] = [entry.layout.index for entry in layout.entries()]
    if layout.kind == "masonry":
        # masonry interleaves photos across columns; order holds within a column
        for group in layout.groups:
            column = [entry.layout.index for entry in group]
            if column != sorted(column):
                return False
        indices.sort()
    if indices != list(range(len(photos))):
        return False
    return all(entry.photo is photos[entry.layout.index] for entry in layout.entries())


def has_positive_dimensions(layout: AlbumLayout) -> bool:
    return all(
        entry.layout.width > 0 and entry.layout.height > 0 for entry in layout.entries()
    )


def rows_fill_width(
    layout: AlbumLayout, options: LayoutOptions, policy: ValidationPolicy
) -> bool:
    for row in layout.groups:
        count = len(row)
        total = sum(entry.layout.width for entry in row)
        total += (count - 1) * options.spacing + 2 * options.padding * count
        if not _close(total, options.container_width, policy):
            return False
    return True


def columns_fill_width(
    layout: AlbumLayout, options: LayoutOptions, policy: ValidationPolicy
) -> bool:
    count = len(layout.columns_widths)
    if count == 0:
        return True
    if any(width < 0 for width in layout.columns_widths):
        return False
    total = sum(layout.columns_widths)
    total += (count - 1) * options.spacing + 2 * options.padding * count
    return _close(total, options.container_width, policy)


def layout_flags(
    layout: AlbumLayout,
    photos: Sequence[Any],
    options: LayoutOptions,
    policy: ValidationPolicy | None = None,
) -> set[str]:
    if policy is None:
        policy = DEFAULT_VALIDATION_POLICY
    flags: set[str] = set()

    if not covers_input(layout, photos):
        flags.add("coverage")
    if not has_positive_dimensions(layout):
        flags.add("non_positive_dimension")
    if layout.kind == "rows" and not rows_fill_width(layout, options, policy):
        flags.add("row_width_mismatch")
    if layout.kind != "rows" and not columns_fill_width(layout, options, policy):
        flags.add("column_width_mismatch")
    return flags


def is_sane(
    layout: AlbumLayout,
    photos: Sequence[Any],
    options: LayoutOptions,
    policy: ValidationPolicy | None = None,
) -> bool:
    return not layout_flags(layout, photos, options, policy)
