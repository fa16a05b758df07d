"""
seatmap/generator - Seat layout generation package.

Provides grid primitives, one pattern generator per bus archetype and the
archetype registry used for dispatch.
"""

from seatmap.generator.grid import (
    EMPTY,
    DRIVER,
    FLOOR_2,
    row_letter,
    count_seats,
    get_all_seats,
    get_seat_position,
    transpose_layout,
    mirror_layout,
    merge_layouts,
)
from seatmap.generator.patterns import (
    generate_seat_layout,
    generate_aisle_layout,
    generate_sleeper_layout,
    generate_limousine_layout,
    generate_double_decker,
)
from seatmap.generator.archetypes import (
    SeatLayoutArchetype,
    ArchetypeRegistry,
    build_default_registry,
    DEFAULT_REGISTRY,
)

__all__ = [
    # Grid
    'EMPTY',
    'DRIVER',
    'FLOOR_2',
    'row_letter',
    'count_seats',
    'get_all_seats',
    'get_seat_position',
    'transpose_layout',
    'mirror_layout',
    'merge_layouts',
    # Patterns
    'generate_seat_layout',
    'generate_aisle_layout',
    'generate_sleeper_layout',
    'generate_limousine_layout',
    'generate_double_decker',
    # Archetypes
    'SeatLayoutArchetype',
    'ArchetypeRegistry',
    'build_default_registry',
    'DEFAULT_REGISTRY',
]
