"""
generator/patterns.py - Seat layout pattern generators v1.0

One pure function per bus archetype. Same parameters always give the
same grid; nothing here performs I/O or keeps state.

Two-floor grids (double-decker and two-floor sleeper) share one shape:

    DRIVER   ''   ...      row 0
    LA1      LA2  ...      lower deck, rows 1..n
    FLOOR_2  ''   ...      row n+1
    UA1      UA2  ...      upper deck, rows n+2..2n+1
"""

from __future__ import annotations
from typing import Any, Iterable, List, Optional, Sequence, Union
import logging

from seatmap.errors import InvalidLayoutRequestError
from seatmap.generator.grid import (
    DRIVER,
    EMPTY,
    FLOOR_2,
    empty_position_set,
    marker_row,
    merge_layouts,
    row_letter,
    seat_label,
    warn_if_multi_letter,
)
from seatmap.schema.enums import AISLE_COLUMNS, LIMOUSINE_COLUMNS, LimousinePattern
from seatmap.schema.layout import FloorInfo, SeatLayout

__all__ = [
    'generate_seat_layout',
    'generate_aisle_layout',
    'generate_sleeper_layout',
    'generate_limousine_layout',
    'generate_double_decker',
]

logger = logging.getLogger(__name__)

BACK_ROW_SEATS = 5
SEATS_PER_AISLE_ROW = 4


# =============================================================================
# PARAMETER CHECKS
# =============================================================================

def _require_int(name: str, value: Any, source: str, minimum: int = 1) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise InvalidLayoutRequestError(
            f"{source}: {name} must be an integer >= {minimum}, got {value!r}",
            parameter=name,
        )
    return value


# =============================================================================
# PLAIN GRID
# =============================================================================

def generate_seat_layout(
    rows: int,
    columns: int,
    prefix: Optional[str] = None,
    empty_positions: Iterable[Sequence[int]] = (),
) -> List[List[str]]:
    """
    Generate a plain seat grid.

    Args:
        rows: Number of rows
        columns: Number of columns
        prefix: Prepended to each row letter ('L' gives LA1, LB1, ...)
        empty_positions: (row, column) cells to leave empty

    Returns:
        Row-major matrix of seat labels
    """
    _require_int("rows", rows, "plain grid")
    _require_int("columns", columns, "plain grid")

    try:
        empties = empty_position_set(empty_positions)
    except (TypeError, ValueError, IndexError) as e:
        raise InvalidLayoutRequestError(
            f"plain grid: empty positions must be (row, column) pairs: {e}",
            parameter="empty_positions",
        ) from e

    warn_if_multi_letter(rows, "plain grid")

    layout = []
    for row in range(rows):
        row_prefix = f"{prefix or ''}{row_letter(row)}"
        layout.append([
            EMPTY if (row, col) in empties else seat_label(row_prefix, col)
            for col in range(columns)
        ])
    return layout


# =============================================================================
# SEATER (2-AISLE-2)
# =============================================================================

def generate_aisle_layout(total_seats: int = 40, has_back_row: bool = False) -> SeatLayout:
    """
    Generate a 2-aisle-2 seater layout behind a driver row.

    The requested seat count is a hint: regular rows hold 4 seats each, so
    the result can hold fewer seats than requested. Callers must read
    ``total_seats`` from the returned layout.

    Args:
        total_seats: Requested seats, excluding the driver
        has_back_row: Append a full-width 5-seat back row

    Returns:
        SeatLayout, 5 columns wide
    """
    _require_int("total_seats", total_seats, "aisle layout", minimum=0)

    seats_for_rows = total_seats - BACK_ROW_SEATS if has_back_row else total_seats
    regular_rows = max(0, seats_for_rows // SEATS_PER_AISLE_ROW)

    warn_if_multi_letter(regular_rows + (1 if has_back_row else 0), "aisle layout")

    layout = [marker_row(DRIVER, AISLE_COLUMNS)]
    for row in range(regular_rows):
        p = row_letter(row)
        layout.append([
            seat_label(p, 0),   # left window
            seat_label(p, 1),   # left aisle
            EMPTY,              # aisle
            seat_label(p, 2),   # right aisle
            seat_label(p, 3),   # right window
        ])

    if has_back_row:
        p = row_letter(regular_rows)
        layout.append([seat_label(p, col) for col in range(BACK_ROW_SEATS)])

    actual_seats = regular_rows * SEATS_PER_AISLE_ROW + (BACK_ROW_SEATS if has_back_row else 0)
    if actual_seats != total_seats:
        logger.debug(
            f"Aisle layout: requested {total_seats} seats, generated {actual_seats}"
        )

    return SeatLayout(
        floors=1,
        rows=len(layout),
        columns=AISLE_COLUMNS,
        layout=layout,
        total_seats=actual_seats,
    )


# =============================================================================
# TWO-FLOOR GRIDS
# =============================================================================

def _two_floor_layout(rows_per_floor: int, columns: int) -> SeatLayout:
    lower = [marker_row(DRIVER, columns)]
    lower.extend(generate_seat_layout(rows_per_floor, columns, prefix="L"))

    upper = [marker_row(FLOOR_2, columns)]
    upper.extend(generate_seat_layout(rows_per_floor, columns, prefix="U"))

    return SeatLayout(
        floors=2,
        rows=rows_per_floor * 2 + 2,
        columns=columns,
        layout=merge_layouts(lower, upper),
        total_seats=rows_per_floor * columns * 2,
        floor_info=FloorInfo.for_rows_per_floor(rows_per_floor),
    )


# =============================================================================
# SLEEPER
# =============================================================================

def generate_sleeper_layout(rows: int, floors: int = 1, columns: int = 2) -> SeatLayout:
    """
    Generate a sleeper layout.

    Args:
        rows: Berth rows (per floor when floors == 2)
        floors: 1 or 2
        columns: Berths per row

    Returns:
        SeatLayout; two-floor layouts carry floor_info
    """
    _require_int("rows", rows, "sleeper layout")
    _require_int("columns", columns, "sleeper layout")
    if floors not in (1, 2):
        raise InvalidLayoutRequestError(
            f"sleeper layout: floors must be 1 or 2, got {floors!r}",
            parameter="floors",
        )

    if floors == 2:
        return _two_floor_layout(rows, columns)

    return SeatLayout(
        floors=1,
        rows=rows,
        columns=columns,
        layout=generate_seat_layout(rows, columns),
        total_seats=rows * columns,
    )


# =============================================================================
# LIMOUSINE
# =============================================================================

def generate_limousine_layout(
    rows: int = 8,
    pattern: Union[str, LimousinePattern] = LimousinePattern.STANDARD,
) -> SeatLayout:
    """
    Generate a limousine layout behind a driver row.

    Args:
        rows: Seat rows, excluding the driver row
        pattern: 'vip' (1-1, 3 columns) or 'standard' (2-1, 4 columns)

    Returns:
        SeatLayout with rows + 1 grid rows
    """
    _require_int("rows", rows, "limousine layout")
    try:
        pattern = LimousinePattern(pattern)
    except ValueError as e:
        raise InvalidLayoutRequestError(
            f"limousine layout: unknown pattern {pattern!r}",
            parameter="pattern",
            recovery_hint="Use 'vip' or 'standard'",
        ) from e

    warn_if_multi_letter(rows, "limousine layout")

    columns = LIMOUSINE_COLUMNS[pattern]
    layout = [marker_row(DRIVER, columns)]

    for row in range(rows):
        p = row_letter(row)
        if pattern == LimousinePattern.VIP:
            layout.append([seat_label(p, 0), EMPTY, seat_label(p, 1)])
        else:
            layout.append([seat_label(p, 0), seat_label(p, 1), EMPTY, seat_label(p, 2)])

    seats_per_row = 2 if pattern == LimousinePattern.VIP else 3

    return SeatLayout(
        floors=1,
        rows=rows + 1,
        columns=columns,
        layout=layout,
        total_seats=rows * seats_per_row,
    )


# =============================================================================
# DOUBLE-DECKER
# =============================================================================

def generate_double_decker(rows_per_floor: int = 6, columns: int = 4) -> SeatLayout:
    """
    Generate a double-decker layout.

    Args:
        rows_per_floor: Seat rows on each deck
        columns: Seats per row

    Returns:
        SeatLayout with 2 * rows_per_floor + 2 grid rows and floor_info
    """
    _require_int("rows_per_floor", rows_per_floor, "double-decker layout")
    _require_int("columns", columns, "double-decker layout")
    return _two_floor_layout(rows_per_floor, columns)
