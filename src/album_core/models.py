from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Literal, Optional

from .units import Px

LayoutKind = Literal["rows", "columns", "masonry"]


@dataclass
class Photo:
    """Caller-owned photo dimensions."""

    width: Px
    height: Px
    key: str = ""

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("photo dimensions must be > 0")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


@dataclass(frozen=True)
class RowConstraints:
    min_photos: Optional[int] = None
    max_photos: Optional[int] = None

    def __post_init__(self) -> None:
        if self.min_photos is not None and self.min_photos < 1:
            raise ValueError("min_photos must be >= 1")
        if self.max_photos is not None and self.max_photos < 1:
            raise ValueError("max_photos must be >= 1")
        if (
            self.min_photos is not None
            and self.max_photos is not None
            and self.min_photos > self.max_photos
        ):
            raise ValueError("min_photos must not exceed max_photos")


@dataclass(frozen=True)
class ColumnConstraints:
    min_columns: Optional[int] = None

    def __post_init__(self) -> None:
        if self.min_columns is not None and self.min_columns < 0:
            raise ValueError("min_columns must be >= 0")


@dataclass(frozen=True)
class LayoutOptions:
    """Geometry of the album container."""

    container_width: Px
    spacing: Px = 0.0
    padding: Px = 0.0
    target_row_height: Px = 300.0
    columns: int = 3
    row_constraints: Optional[RowConstraints] = None
    column_constraints: Optional[ColumnConstraints] = None
    full_graph_search: bool = False

    def __post_init__(self) -> None:
        if self.container_width <= 0:
            raise ValueError("container_width must be > 0")
        if self.spacing < 0:
            raise ValueError("spacing must be >= 0")
        if self.padding < 0:
            raise ValueError("padding must be >= 0")
        if self.target_row_height <= 0:
            raise ValueError("target_row_height must be > 0")
        if self.columns < 1:
            raise ValueError("columns must be >= 1")

    @property
    def min_columns(self) -> int:
        if self.column_constraints is None:
            return 0
        return self.column_constraints.min_columns or 0


@dataclass(frozen=True)
class PhotoLayout:
    width: Px
    height: Px
    index: int
    photo_index: int
    photos_count: int


@dataclass(frozen=True)
class LayoutEntry:
    photo: Any
    layout: PhotoLayout


Group = List[LayoutEntry]


@dataclass
class ColumnsLayout:
    """Columns partition plus the per-column sizing terms."""

    columns_model: List[Group]
    columns_gaps: List[float]
    columns_ratios: List[float]
    columns_widths: List[float] = field(default_factory=list)


@dataclass
class AlbumLayout:
    kind: LayoutKind
    groups: List[Group]
    columns_gaps: List[float] = field(default_factory=list)
    columns_ratios: List[float] = field(default_factory=list)
    columns_widths: List[float] = field(default_factory=list)

    @property
    def photo_count(self) -> int:
        return sum(len(group) for group in self.groups)

    def entries(self) -> List[LayoutEntry]:
        return [entry for group in self.groups for entry in group]


@dataclass
class LayoutInstrumentation:
    """Optional timing/telemetry hooks around one layout computation."""

    on_start_layout_computation: Optional[Callable[[], None]] = None
    on_finish_layout_computation: Optional[Callable[[Any], None]] = None

    def start(self) -> None:
        if self.on_start_layout_computation is not None:
            self.on_start_layout_computation()

    def finish(self, result: Any) -> None:
        if self.on_finish_layout_computation is not None:
            self.on_finish_layout_computation(result)
