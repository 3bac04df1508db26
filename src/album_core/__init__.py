"""Justified photo album layout engine."""

from .algorithms import LayoutSearchError
from .columns import compute_columns_layout
from .engine import LAYOUTS, compute_layout
from .masonry import compute_masonry_layout
from .models import (
    AlbumLayout,
    ColumnConstraints,
    ColumnsLayout,
    LayoutEntry,
    LayoutInstrumentation,
    LayoutOptions,
    Photo,
    PhotoLayout,
    RowConstraints,
)
from .rows import compute_rows_layout
from .settings import load_settings
from .validation import is_sane, layout_flags

__all__ = [
    "Photo",
    "LayoutOptions",
    "RowConstraints",
    "ColumnConstraints",
    "LayoutInstrumentation",
    "PhotoLayout",
    "LayoutEntry",
    "ColumnsLayout",
    "AlbumLayout",
    "LAYOUTS",
    "compute_layout",
    "compute_rows_layout",
    "compute_columns_layout",
    "compute_masonry_layout",
    "LayoutSearchError",
    "load_settings",
    "layout_flags",
    "is_sane",
]
