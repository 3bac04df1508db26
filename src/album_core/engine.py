from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from .columns import compute_columns_layout, initial_columns, target_column_width
from .masonry import compute_masonry_layout
from .models import AlbumLayout, LayoutInstrumentation, LayoutKind, LayoutOptions
from .rows import compute_rows_layout

logger = logging.getLogger(__name__)

LAYOUTS = ("rows", "columns", "masonry")


def compute_layout(
    photos: Sequence[Any],
    options: LayoutOptions,
    layout: LayoutKind = "rows",
    instrumentation: Optional[LayoutInstrumentation] = None,
) -> Optional[AlbumLayout]:
    """Compute an album layout, or ``None`` when the container is too narrow."""
    if layout not in LAYOUTS:
        raise ValueError(f"unknown layout {layout!r}, expected one of {LAYOUTS}")

    if layout == "rows":
        rows = compute_rows_layout(photos, options, instrumentation)
        if rows is None:
            return None
        return AlbumLayout(kind="rows", groups=rows)

    if layout == "columns":
        columns = compute_columns_layout(photos, options, instrumentation)
        if columns is None:
            return None
        requested = initial_columns(options, len(photos))
        if len(columns.columns_model) < requested:
            logger.debug(
                "columns: reduced from %d to %d", requested, len(columns.columns_model)
            )
        return AlbumLayout(
            kind="columns",
            groups=columns.columns_model,
            columns_gaps=columns.columns_gaps,
            columns_ratios=columns.columns_ratios,
            columns_widths=columns.columns_widths,
        )

    masonry = compute_masonry_layout(photos, options, instrumentation)
    if masonry is None:
        return None
    column_width = target_column_width(options, len(masonry)) if masonry else 0.0
    return AlbumLayout(
        kind="masonry",
        groups=masonry,
        columns_widths=[column_width] * len(masonry),
    )
