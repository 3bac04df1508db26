from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from .models import AlbumLayout


def layout_to_dict(layout: AlbumLayout) -> Dict[str, Any]:
    """Collect a computed layout as a JSON-serialisable dict."""
    data: Dict[str, Any] = {
        "kind": layout.kind,
        "groups": [
            [
                {
                    "index": entry.layout.index,
                    "photoIndex": entry.layout.photo_index,
                    "photosCount": entry.layout.photos_count,
                    "width": entry.layout.width,
                    "height": entry.layout.height,
                }
                for entry in group
            ]
            for group in layout.groups
        ],
    }
    if layout.kind != "rows":
        data["columnsWidths"] = list(layout.columns_widths)
    if layout.kind == "columns":
        data["columnsGaps"] = list(layout.columns_gaps)
        data["columnsRatios"] = list(layout.columns_ratios)
    return data


def save_layout(path: str | Path, layout: AlbumLayout) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(layout_to_dict(layout), f, ensure_ascii=False, indent=2)


def load_layout_dict(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


__all__ = ["layout_to_dict", "save_layout", "load_layout_dict"]
