"""
validators.py - Seat layout validator v1.0

Checks any layout against the structural and business rules, whether it
came from the catalog, the builder or raw client input. Validation never
raises: every rule runs and every problem is reported in the returned
ValidationResult.

Rules run in a fixed order:
    1. floor rule (double_decker needs 2 floors, everything else 1)
    2. dimensions (row count, row type, row width)
    3. duplicate seat labels
    4. seat-count bounds
    5. declared total_seats matches the grid (only when declared)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union
import logging

from seatmap.config import LayoutLimits
from seatmap.generator.archetypes import (
    DEFAULT_REGISTRY,
    SINGLE_FLOOR_MESSAGE,
    ArchetypeRegistry,
)
from seatmap.generator.grid import count_seats, is_empty
from seatmap.schema.enums import BusType
from seatmap.schema.layout import CustomTemplate, SeatLayout, Template
from seatmap.schema.validation import ValidationCategory, ValidationResult

__all__ = [
    'DuplicateSeat',
    'validate_layout_dimensions',
    'check_duplicate_seats',
    'validate_seat_layout_for_bus_type',
]

logger = logging.getLogger(__name__)

LayoutInput = Union[SeatLayout, Template, CustomTemplate, Mapping[str, Any]]

_MISSING = object()


def _is_row_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _rows_of(layout: Any) -> List[Sequence[Any]]:
    """Rows that can be scanned; anything malformed is skipped."""
    if not _is_row_list(layout):
        return []
    return [row for row in layout if _is_row_list(row)]


# =============================================================================
# DIMENSIONS
# =============================================================================

def validate_layout_dimensions(layout: Any, rows: Any, columns: Any) -> ValidationResult:
    """
    Check that a layout is a rows x columns matrix.

    Args:
        layout: Candidate matrix
        rows: Expected row count
        columns: Expected width of every row

    Returns:
        ValidationResult with one issue per mismatch
    """
    result = ValidationResult(checked_rules=["dimensions"])
    category = ValidationCategory.DIMENSIONS

    if not _is_row_list(layout):
        result.add_error("layout_type", category, "Layout must be a list of rows")
        return result

    if len(layout) != rows:
        result.add_error(
            "row_count", category,
            f"Expected {rows} rows, got {len(layout)}",
        )

    for i, row in enumerate(layout):
        if not _is_row_list(row):
            result.add_error("row_type", category, f"Row {i} must be a list", row=i)
            continue
        if len(row) != columns:
            result.add_error(
                "column_count", category,
                f"Row {i}: expected {columns} columns, got {len(row)}",
                row=i,
            )

    return result


# =============================================================================
# DUPLICATES
# =============================================================================

@dataclass(frozen=True)
class DuplicateSeat:
    """A repeated label: where it first appeared and where it appeared again."""
    seat: str
    first_position: Tuple[int, int]
    position: Tuple[int, int]


def check_duplicate_seats(layout: Any) -> List[DuplicateSeat]:
    """
    Find repeated labels in a layout.

    Labels are compared after trimming whitespace. Each occurrence after
    the first is reported, so a label seen three times appears twice.
    Structural markers (DRIVER, FLOOR_2) are labels too and must be unique.
    """
    first_seen: Dict[str, Tuple[int, int]] = {}
    duplicates: List[DuplicateSeat] = []

    if not _is_row_list(layout):
        return duplicates

    for r, row in enumerate(layout):
        if not _is_row_list(row):
            continue
        for c, cell in enumerate(row):
            if is_empty(cell):
                continue
            label = str(cell).strip()
            if label in first_seen:
                duplicates.append(DuplicateSeat(label, first_seen[label], (r, c)))
            else:
                first_seen[label] = (r, c)

    return duplicates


# =============================================================================
# FULL VALIDATION
# =============================================================================

def _layout_fields(seat_layout: Any) -> Dict[str, Any]:
    if isinstance(seat_layout, (SeatLayout, Template, CustomTemplate)):
        return {
            "floors": seat_layout.floors,
            "rows": seat_layout.rows,
            "columns": seat_layout.columns,
            "layout": seat_layout.layout,
            "total_seats": seat_layout.total_seats,
        }

    if isinstance(seat_layout, Mapping):
        declared = seat_layout.get("total_seats", seat_layout.get("totalSeats", _MISSING))
        return {
            "floors": seat_layout.get("floors"),
            "rows": seat_layout.get("rows"),
            "columns": seat_layout.get("columns"),
            "layout": seat_layout.get("layout"),
            "total_seats": declared,
        }

    return {
        "floors": None,
        "rows": None,
        "columns": None,
        "layout": None,
        "total_seats": _MISSING,
    }


def validate_seat_layout_for_bus_type(
    seat_layout: LayoutInput,
    bus_type: Union[str, BusType, None],
    limits: Optional[LayoutLimits] = None,
    registry: Optional[ArchetypeRegistry] = None,
) -> ValidationResult:
    """
    Validate a layout against the rules for a bus type.

    Args:
        seat_layout: SeatLayout, Template, CustomTemplate or a plain mapping
            with floors, rows, columns, layout and optionally total_seats
        bus_type: Bus type the layout is meant for
        limits: Seat-count bounds (defaults to 1..200)
        registry: Archetype registry used for the floor rule

    Returns:
        ValidationResult; valid only if no rule failed
    """
    limits = limits if limits is not None else LayoutLimits()
    registry = registry if registry is not None else DEFAULT_REGISTRY

    fields = _layout_fields(seat_layout)
    layout = fields["layout"]
    result = ValidationResult()

    # 1. Floor rule
    result.checked_rules.append("floors")
    archetype = registry.get(bus_type)
    if archetype is not None:
        floor_error = archetype.check_floors(fields["floors"])
    elif fields["floors"] != 1:
        floor_error = SINGLE_FLOOR_MESSAGE
    else:
        floor_error = None
    if floor_error:
        result.add_error("floor_rule", ValidationCategory.FLOORS, floor_error)

    # 2. Dimensions
    result.merge(validate_layout_dimensions(layout, fields["rows"], fields["columns"]))

    # 3. Duplicates
    result.checked_rules.append("duplicates")
    duplicates = check_duplicate_seats(layout)
    if duplicates:
        labels = [d.seat for d in duplicates]
        positions = []
        for d in duplicates:
            positions.extend([d.first_position, d.position])
        result.add_error(
            "duplicate_seats", ValidationCategory.DUPLICATES,
            f"Duplicate seats found: {', '.join(labels)}",
            labels=labels,
            positions=positions,
        )

    # 4. Seat-count bounds
    result.checked_rules.append("seat_count")
    seat_count = count_seats(_rows_of(layout))
    if seat_count < limits.min_seats:
        noun = "seat" if limits.min_seats == 1 else "seats"
        result.add_error(
            "min_seats", ValidationCategory.SEAT_COUNT,
            f"Layout must have at least {limits.min_seats} {noun}",
        )
    if seat_count > limits.max_seats:
        result.add_error(
            "max_seats", ValidationCategory.SEAT_COUNT,
            f"Layout cannot have more than {limits.max_seats} seats",
        )

    # 5. Declared total
    declared = fields["total_seats"]
    if declared is not _MISSING and declared is not None:
        result.checked_rules.append("seat_total")
        if declared != seat_count:
            result.add_error(
                "seat_total", ValidationCategory.SEAT_TOTAL,
                f"Declared total_seats {declared} does not match {seat_count} seats in layout",
            )

    if not result.valid:
        bus_label = bus_type.value if isinstance(bus_type, BusType) else bus_type
        logger.debug(f"Layout for {bus_label} failed {result.error_count} check(s)")

    return result
