"""
schema/enums.py - Seat layout enumerations.

Bus archetypes, the seating patterns each archetype understands, and the
fixed grid widths those patterns produce.
"""

from enum import Enum


class BusType(Enum):
    """Physical bus archetype."""
    SEATER = "seater"
    SLEEPER = "sleeper"
    LIMOUSINE = "limousine"
    DOUBLE_DECKER = "double_decker"

    @classmethod
    def values(cls):
        return [t.value for t in cls]


class SeaterPattern(Enum):
    """Seater layouts: plain grid or 2-aisle-2."""
    STANDARD = "standard"
    AISLE = "aisle"


class LimousinePattern(Enum):
    """Limousine layouts."""
    VIP = "vip"              # 1-1, wide aisle
    STANDARD = "standard"    # 2-1


AISLE_COLUMNS = 5

LIMOUSINE_COLUMNS = {
    LimousinePattern.VIP: 3,
    LimousinePattern.STANDARD: 4,
}
