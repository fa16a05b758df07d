"""
schema/layout.py - Seat layout value objects v1.0

Defines the SeatLayout grid, the catalog Template wrapper, listing
summaries and builder output. All are immutable once constructed.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from seatmap.schema.enums import BusType

__all__ = [
    'FloorInfo',
    'SeatLayout',
    'Template',
    'TemplateSummary',
    'CustomTemplate',
]

LayoutMatrix = Tuple[Tuple[str, ...], ...]


def _freeze_matrix(layout: Sequence[Sequence[str]]) -> LayoutMatrix:
    return tuple(tuple(row) for row in layout)


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """First present key wins; accepts snake_case and camelCase spellings."""
    for key in keys:
        if key in data:
            return data[key]
    return default


# =============================================================================
# FLOOR INFO
# =============================================================================

@dataclass(frozen=True)
class FloorInfo:
    """
    Deck boundaries within a two-floor grid.

    Attributes:
        lower_floor_rows: Rows belonging to the lower deck, driver row included
        upper_floor_start: Row index of the first upper-deck seat row
    """
    lower_floor_rows: int
    upper_floor_start: int

    @classmethod
    def for_rows_per_floor(cls, rows_per_floor: int) -> "FloorInfo":
        """Boundaries for DRIVER + lower rows + FLOOR_2 + upper rows."""
        return cls(
            lower_floor_rows=rows_per_floor + 1,
            upper_floor_start=rows_per_floor + 2,
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "lower_floor_rows": self.lower_floor_rows,
            "upper_floor_start": self.upper_floor_start,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FloorInfo":
        return cls(
            lower_floor_rows=int(_pick(data, "lower_floor_rows", "lowerFloorRows")),
            upper_floor_start=int(_pick(data, "upper_floor_start", "upperFloorStart")),
        )


# =============================================================================
# SEAT LAYOUT
# =============================================================================

@dataclass(frozen=True)
class SeatLayout:
    """
    Rectangular seat map.

    Attributes:
        floors: Physical deck count (1 or 2)
        rows: Grid rows, marker rows included
        columns: Grid width
        layout: Row-major cell labels ("" for aisle/no-seat space)
        total_seats: Seat cells in the grid, sentinels excluded
        floor_info: Deck boundaries, two-floor layouts only
    """
    floors: int
    rows: int
    columns: int
    layout: LayoutMatrix
    total_seats: int
    floor_info: Optional[FloorInfo] = None

    def __post_init__(self):
        if not isinstance(self.layout, tuple) or any(not isinstance(r, tuple) for r in self.layout):
            object.__setattr__(self, "layout", _freeze_matrix(self.layout))

    @property
    def is_multi_floor(self) -> bool:
        return self.floors > 1

    def to_matrix(self) -> List[List[str]]:
        """Mutable copy of the grid."""
        return [list(row) for row in self.layout]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        data = {
            "floors": self.floors,
            "rows": self.rows,
            "columns": self.columns,
            "layout": self.to_matrix(),
            "total_seats": self.total_seats,
        }
        if self.floor_info is not None:
            data["floor_info"] = self.floor_info.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SeatLayout":
        """
        Deserialize from dictionary.

        Accepts the camelCase keys used by bus records (totalSeats,
        floorInfo). A missing seat total is counted from the grid.
        """
        from seatmap.generator.grid import count_seats

        layout = data["layout"]
        total = _pick(data, "total_seats", "totalSeats")
        floor_info = _pick(data, "floor_info", "floorInfo")

        return cls(
            floors=int(data["floors"]),
            rows=int(data["rows"]),
            columns=int(data["columns"]),
            layout=_freeze_matrix(layout),
            total_seats=int(total) if total is not None else count_seats(layout),
            floor_info=FloorInfo.from_dict(floor_info) if floor_info else None,
        )


class _LayoutView:
    """Read-through access to the wrapped SeatLayout's fields."""

    seat_layout: SeatLayout

    @property
    def floors(self) -> int:
        return self.seat_layout.floors

    @property
    def rows(self) -> int:
        return self.seat_layout.rows

    @property
    def columns(self) -> int:
        return self.seat_layout.columns

    @property
    def layout(self) -> LayoutMatrix:
        return self.seat_layout.layout

    @property
    def total_seats(self) -> int:
        return self.seat_layout.total_seats

    @property
    def floor_info(self) -> Optional[FloorInfo]:
        return self.seat_layout.floor_info


# =============================================================================
# TEMPLATES
# =============================================================================

@dataclass(frozen=True)
class TemplateSummary:
    """Catalog listing entry (no grid)."""
    id: str
    bus_type: BusType
    template_key: str
    name: str
    total_seats: int
    floors: int
    rows: int
    columns: int
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "bus_type": self.bus_type.value,
            "template_key": self.template_key,
            "name": self.name,
            "total_seats": self.total_seats,
            "floors": self.floors,
            "rows": self.rows,
            "columns": self.columns,
            "description": self.description,
        }


@dataclass(frozen=True)
class Template(_LayoutView):
    """Named, pre-built layout held by the template catalog."""
    template_key: str
    name: str
    bus_type: BusType
    description: str
    seat_layout: SeatLayout

    @property
    def template_id(self) -> str:
        return f"{self.bus_type.value}_{self.template_key}"

    def summary(self) -> TemplateSummary:
        return TemplateSummary(
            id=self.template_id,
            bus_type=self.bus_type,
            template_key=self.template_key,
            name=self.name,
            total_seats=self.total_seats,
            floors=self.floors,
            rows=self.rows,
            columns=self.columns,
            description=self.description,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "bus_type": self.bus_type.value,
            "template_key": self.template_key,
            "description": self.description,
        }
        data.update(self.seat_layout.to_dict())
        return data


@dataclass(frozen=True)
class CustomTemplate(_LayoutView):
    """Layout produced on demand by the custom template builder."""
    bus_type: BusType
    seat_layout: SeatLayout
    custom: bool = field(default=True)

    def to_dict(self) -> Dict[str, Any]:
        data = {"bus_type": self.bus_type.value}
        data.update(self.seat_layout.to_dict())
        data["custom"] = self.custom
        return data
