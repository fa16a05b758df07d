"""
generator/grid.py - Grid primitives v1.0

Row lettering, seat-label formatting and the small set of matrix helpers
shared by every layout generator and by the validator.

A layout matrix is a list of rows, each a list of cell strings. A cell is
either a seat label, the empty marker, or one of the structural sentinels.
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Set, Tuple
import logging

__all__ = [
    'EMPTY',
    'DRIVER',
    'FLOOR_2',
    'SENTINELS',
    'SINGLE_LETTER_ROWS',
    'row_letter',
    'seat_label',
    'warn_if_multi_letter',
    'marker_row',
    'empty_position_set',
    'is_empty',
    'is_sentinel',
    'is_seat',
    'count_seats',
    'get_all_seats',
    'get_seat_position',
    'transpose_layout',
    'mirror_layout',
    'merge_layouts',
]

logger = logging.getLogger(__name__)

Cell = str
Matrix = List[List[Cell]]


# =============================================================================
# MARKERS
# =============================================================================

EMPTY = ""
DRIVER = "DRIVER"
FLOOR_2 = "FLOOR_2"

SENTINELS = frozenset({DRIVER, FLOOR_2})

SINGLE_LETTER_ROWS = 26


# =============================================================================
# LABELS
# =============================================================================

def row_letter(index: int) -> str:
    """
    Letter(s) for a zero-based row index.

    0 -> 'A', 25 -> 'Z', then spreadsheet style: 26 -> 'AA', 27 -> 'AB'.
    """
    if index < 0:
        raise ValueError(f"Row index must be non-negative, got {index}")

    letters = ""
    n = index + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def seat_label(row_prefix: str, column: int) -> str:
    """Label for a zero-based column within a row: ('B', 0) -> 'B1'."""
    return f"{row_prefix}{column + 1}"


def warn_if_multi_letter(rows: int, source: str) -> None:
    """Log when a generator runs past single-letter row labels."""
    if rows > SINGLE_LETTER_ROWS:
        logger.warning(
            f"{source}: {rows} rows exceed the {SINGLE_LETTER_ROWS} single-letter "
            f"row labels; rows from index {SINGLE_LETTER_ROWS} use multi-letter prefixes"
        )


def marker_row(sentinel: str, columns: int) -> List[Cell]:
    """Structural row: sentinel in the first cell, empty fill after."""
    return [sentinel] + [EMPTY] * (columns - 1)


# =============================================================================
# CELL CLASSIFICATION
# =============================================================================

def is_empty(cell: object) -> bool:
    """True for None and blank strings."""
    if cell is None:
        return True
    if isinstance(cell, str):
        return cell.strip() == ""
    return False


def is_sentinel(cell: object) -> bool:
    return isinstance(cell, str) and cell.strip() in SENTINELS


def is_seat(cell: object) -> bool:
    """True for a bookable seat label (non-empty, non-sentinel)."""
    return not is_empty(cell) and not is_sentinel(cell)


# =============================================================================
# MATRIX QUERIES
# =============================================================================

def count_seats(layout: Iterable[Sequence[object]]) -> int:
    """Count seat cells, skipping empty cells and sentinels."""
    return sum(1 for row in layout for cell in row if is_seat(cell))


def get_all_seats(layout: Iterable[Sequence[object]]) -> List[str]:
    """All seat labels in row-major order."""
    return [str(cell) for row in layout for cell in row if is_seat(cell)]


def get_seat_position(
    layout: Sequence[Sequence[object]],
    seat_number: str,
) -> Optional[Tuple[int, int]]:
    """(row, column) of the first cell holding ``seat_number``, or None."""
    for r, row in enumerate(layout):
        for c, cell in enumerate(row):
            if cell == seat_number:
                return r, c
    return None


# =============================================================================
# MATRIX TRANSFORMS
# =============================================================================

def transpose_layout(layout: Sequence[Sequence[Cell]]) -> Matrix:
    """Swap rows and columns. Rows must all be the same length."""
    if not layout:
        return []
    return [list(column) for column in zip(*layout)]


def mirror_layout(layout: Sequence[Sequence[Cell]]) -> Matrix:
    """Reverse every row (left/right mirror)."""
    return [list(reversed(row)) for row in layout]


def merge_layouts(*layouts: Sequence[Sequence[Cell]]) -> Matrix:
    """Stack layouts top to bottom, e.g. lower deck then upper deck."""
    merged: Matrix = []
    for layout in layouts:
        merged.extend(list(row) for row in layout)
    return merged


def empty_position_set(
    positions: Iterable[Sequence[int]],
) -> Set[Tuple[int, int]]:
    """Normalize (row, col) pairs into a set for membership checks."""
    return {(int(p[0]), int(p[1])) for p in positions}
