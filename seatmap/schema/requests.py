"""
schema/requests.py - Custom layout request models v1.0

One request model per bus archetype. Unknown fields are rejected, so a
request such as a patterned double-decker fails at parse time. Dimensions
the generator fixes (limousine width, aisle width, deck count) are accepted
from the operator UI and ignored.
"""

from __future__ import annotations
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from seatmap.schema.enums import (
    LimousinePattern,
    SeaterPattern,
)

__all__ = [
    'SeaterLayoutRequest',
    'SleeperLayoutRequest',
    'LimousineLayoutRequest',
    'DoubleDeckerLayoutRequest',
    'LayoutRequest',
    'normalize_request_keys',
]

# camelCase keys sent by the operator UI
_KEY_ALIASES = {
    "busType": "bus_type",
    "emptyPositions": "empty_positions",
    "rowsPerFloor": "rows",
}


def normalize_request_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Map UI spellings to model field names and drop null values.

    Null values are treated as "not provided" so model defaults apply.
    """
    normalized: Dict[str, Any] = {}
    for key, value in data.items():
        if value is None:
            continue
        normalized[_KEY_ALIASES.get(key, key)] = value
    return normalized


# =============================================================================
# BASE
# =============================================================================

class _LayoutRequestBase(BaseModel):
    """Fields shared by every archetype."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    rows: int = Field(..., ge=1, description="Seat rows (per floor for two-floor layouts)")


# =============================================================================
# ARCHETYPE REQUESTS
# =============================================================================

class SeaterLayoutRequest(_LayoutRequestBase):
    """
    Seater bus: 2-aisle-2 with a driver row when pattern is "aisle",
    otherwise a plain grid.

    Seater layouts have one floor and the aisle layout is always 5 columns
    wide, so floors (and columns, for aisle) are accepted and ignored.
    """

    bus_type: Literal["seater"] = "seater"
    columns: Optional[int] = Field(None, ge=1, description="Grid width (plain grid)")
    floors: Optional[int] = Field(None, description="Ignored; seater layouts have one floor")
    pattern: str = Field(SeaterPattern.STANDARD.value, description='"aisle" or any plain-grid pattern')
    empty_positions: List[Tuple[int, int]] = Field(
        default_factory=list,
        description="(row, column) cells left empty (plain grid)",
    )

    @field_validator("pattern", mode="before")
    @classmethod
    def pattern_value(cls, value: Any) -> Any:
        if isinstance(value, SeaterPattern):
            return value.value
        return value

    @property
    def is_aisle(self) -> bool:
        return self.pattern == SeaterPattern.AISLE.value

    @model_validator(mode="after")
    def check_pattern_parameters(self) -> "SeaterLayoutRequest":
        if self.is_aisle:
            if self.empty_positions:
                raise ValueError("empty_positions only applies to the plain seater grid")
        elif self.columns is None:
            raise ValueError("columns is required for the plain seater grid")
        return self


class SleeperLayoutRequest(_LayoutRequestBase):
    """Sleeper bus, one or two floors of berths."""

    bus_type: Literal["sleeper"] = "sleeper"
    columns: int = Field(2, ge=1, description="Berths per row")
    floors: Literal[1, 2] = 1


class LimousineLayoutRequest(_LayoutRequestBase):
    """Limousine: VIP 1-1 or standard 2-1 seating behind a driver row.

    The pattern fixes the width, so columns and floors are ignored.
    """

    bus_type: Literal["limousine"] = "limousine"
    pattern: LimousinePattern = LimousinePattern.STANDARD
    columns: Optional[int] = Field(None, description="Ignored; the pattern sets the width")
    floors: Optional[int] = Field(None, description="Ignored; limousines have one floor")


class DoubleDeckerLayoutRequest(_LayoutRequestBase):
    """Double-decker: identical lower and upper decks.

    The generator always builds two floors, so floors is ignored.
    """

    bus_type: Literal["double_decker"] = "double_decker"
    columns: int = Field(4, ge=1, description="Seats per row")
    floors: Optional[int] = Field(None, description="Ignored; double-deckers have two floors")


LayoutRequest = Union[
    SeaterLayoutRequest,
    SleeperLayoutRequest,
    LimousineLayoutRequest,
    DoubleDeckerLayoutRequest,
]
