from __future__ import annotations

import math
from typing import Any

Px = float


def ratio(photo: Any) -> float:
    """Return ``width / height`` of a photo-like object."""
    value = getattr(photo, "aspect_ratio", None)
    if value is None:
        if isinstance(photo, dict):
            width = photo.get("width")
            height = photo.get("height")
        else:
            width = getattr(photo, "width", None)
            height = getattr(photo, "height", None)
        if width is None or height is None:
            raise ValueError("photo must expose aspect_ratio or width/height")
        if height <= 0:
            raise ValueError("photo height must be > 0")
        value = width / height
    value = float(value)
    if not value > 0 or math.isinf(value):
        raise ValueError(f"invalid aspect ratio: {value!r}")
    return value


def round_value(value: float, ndigits: int = 0) -> float:
    """Round half away from zero for positive values (``round`` is banker's)."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def format_px(value: float, ndigits: int = 2) -> str:
    return f"{value:.{ndigits}f}px"
