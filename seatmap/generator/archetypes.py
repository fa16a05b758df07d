"""
generator/archetypes.py - Bus archetype registry v1.0

One SeatLayoutArchetype per bus type. An archetype owns its request model,
its generator dispatch and its floor rule; the builder and the validator
look archetypes up by BusType instead of switching on strings.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Type, Union
import logging

from pydantic import BaseModel, ValidationError

from seatmap.errors import InvalidLayoutRequestError, UnsupportedBusTypeError
from seatmap.generator.grid import count_seats
from seatmap.generator.patterns import (
    generate_aisle_layout,
    generate_double_decker,
    generate_limousine_layout,
    generate_seat_layout,
    generate_sleeper_layout,
)
from seatmap.schema.enums import BusType, LimousinePattern
from seatmap.schema.layout import SeatLayout
from seatmap.schema.requests import (
    DoubleDeckerLayoutRequest,
    LimousineLayoutRequest,
    SeaterLayoutRequest,
    SleeperLayoutRequest,
    normalize_request_keys,
)

__all__ = [
    'SeatLayoutArchetype',
    'SeaterArchetype',
    'SleeperArchetype',
    'LimousineArchetype',
    'DoubleDeckerArchetype',
    'ArchetypeRegistry',
    'resolve_bus_type',
    'build_default_registry',
    'DEFAULT_REGISTRY',
]

logger = logging.getLogger(__name__)

SINGLE_FLOOR_MESSAGE = "Non-double-decker bus must have 1 floor"


def resolve_bus_type(bus_type: Union[str, BusType, None]) -> Optional[BusType]:
    """BusType for a string or enum value, or None if unknown."""
    if isinstance(bus_type, BusType):
        return bus_type
    try:
        return BusType(bus_type)
    except ValueError:
        return None


def _summarize_validation_error(e: ValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": [str(p) for p in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in e.errors()
    ]


# =============================================================================
# BASE ARCHETYPE
# =============================================================================

class SeatLayoutArchetype(ABC):
    """Base class for bus archetypes."""

    bus_type: BusType
    request_model: Type[BaseModel]
    required_floors: int = 1
    floor_rule_message: str = SINGLE_FLOOR_MESSAGE

    def parse_request(self, data: Union[BaseModel, Mapping[str, Any]]) -> BaseModel:
        """
        Parse loose input into this archetype's request model.

        Raises:
            InvalidLayoutRequestError: if fields are missing, out of range,
                or do not apply to this archetype
        """
        if isinstance(data, self.request_model):
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_none=True)

        payload = normalize_request_keys(data)
        payload["bus_type"] = self.bus_type.value

        try:
            return self.request_model.model_validate(payload)
        except ValidationError as e:
            field_errors = _summarize_validation_error(e)
            logger.warning(
                f"Rejected {self.bus_type.value} layout request: {len(field_errors)} field error(s)"
            )
            raise InvalidLayoutRequestError(
                f"Invalid {self.bus_type.value} layout request",
                field_errors=field_errors,
                bus_type=self.bus_type.value,
            ) from e

    def check_floors(self, floors: Any) -> Optional[str]:
        """Floor-rule violation message, or None if the count is allowed."""
        if floors != self.required_floors:
            return self.floor_rule_message
        return None

    def check_capacity(self, request: BaseModel, max_seats: int) -> None:
        """
        Reject a request whose layout would hold more than max_seats seats.

        Runs before generation so oversized grids are never allocated.

        Raises:
            InvalidLayoutRequestError: if the seat capacity exceeds max_seats
        """
        capacity = self.seat_capacity(request)
        if capacity > max_seats:
            logger.warning(
                f"Rejected {self.bus_type.value} layout request: "
                f"{capacity} seats exceeds the maximum of {max_seats}"
            )
            raise InvalidLayoutRequestError(
                f"Requested {self.bus_type.value} layout holds {capacity} seats, "
                f"more than the maximum of {max_seats}",
                field_errors=[{"loc": ["rows"], "msg": f"at most {max_seats} seats allowed"}],
                bus_type=self.bus_type.value,
                seat_capacity=capacity,
            )

    @abstractmethod
    def seat_capacity(self, request: BaseModel) -> int:
        """Seats the generated layout will hold, computed without generating it."""
        pass

    @abstractmethod
    def generate(self, request: BaseModel) -> SeatLayout:
        """Generate a layout from a parsed request."""
        pass


# =============================================================================
# ARCHETYPES
# =============================================================================

class SeaterArchetype(SeatLayoutArchetype):
    """Seater bus: plain grid with optional gaps, or 2-aisle-2."""

    bus_type = BusType.SEATER
    request_model = SeaterLayoutRequest

    def seat_capacity(self, request: SeaterLayoutRequest) -> int:
        if request.is_aisle:
            return request.rows * 4
        empty = {
            (row, col) for row, col in request.empty_positions
            if 0 <= row < request.rows and 0 <= col < request.columns
        }
        return request.rows * request.columns - len(empty)

    def generate(self, request: SeaterLayoutRequest) -> SeatLayout:
        if request.is_aisle:
            return generate_aisle_layout(total_seats=request.rows * 4)

        grid = generate_seat_layout(
            request.rows,
            request.columns,
            empty_positions=request.empty_positions,
        )
        return SeatLayout(
            floors=1,
            rows=request.rows,
            columns=request.columns,
            layout=grid,
            total_seats=count_seats(grid),
        )


class SleeperArchetype(SeatLayoutArchetype):
    """Sleeper bus, one or two floors of berths."""

    bus_type = BusType.SLEEPER
    request_model = SleeperLayoutRequest

    def seat_capacity(self, request: SleeperLayoutRequest) -> int:
        return request.rows * request.columns * request.floors

    def generate(self, request: SleeperLayoutRequest) -> SeatLayout:
        return generate_sleeper_layout(
            request.rows,
            floors=request.floors,
            columns=request.columns,
        )


class LimousineArchetype(SeatLayoutArchetype):
    bus_type = BusType.LIMOUSINE
    request_model = LimousineLayoutRequest

    def seat_capacity(self, request: LimousineLayoutRequest) -> int:
        per_row = 2 if request.pattern == LimousinePattern.VIP else 3
        return request.rows * per_row

    def generate(self, request: LimousineLayoutRequest) -> SeatLayout:
        return generate_limousine_layout(request.rows, pattern=request.pattern)


class DoubleDeckerArchetype(SeatLayoutArchetype):
    """Double-decker: the only archetype with two floors."""

    bus_type = BusType.DOUBLE_DECKER
    request_model = DoubleDeckerLayoutRequest
    required_floors = 2
    floor_rule_message = "Double decker bus must have 2 floors"

    def seat_capacity(self, request: DoubleDeckerLayoutRequest) -> int:
        return request.rows * request.columns * 2

    def generate(self, request: DoubleDeckerLayoutRequest) -> SeatLayout:
        return generate_double_decker(request.rows, columns=request.columns)


# =============================================================================
# REGISTRY
# =============================================================================

class ArchetypeRegistry:
    """
    Typed map from BusType to archetype.

    Lookups accept either a BusType or its string value.
    """

    def __init__(self):
        self._archetypes: Dict[BusType, SeatLayoutArchetype] = {}

    def register(self, archetype: SeatLayoutArchetype) -> None:
        """Register an archetype, replacing any previous one for its bus type."""
        self._archetypes[archetype.bus_type] = archetype

    def get(self, bus_type: Union[str, BusType, None]) -> Optional[SeatLayoutArchetype]:
        """Get archetype by bus type, or None if unknown."""
        resolved = resolve_bus_type(bus_type)
        if resolved is None:
            return None
        return self._archetypes.get(resolved)

    def require(self, bus_type: Union[str, BusType, None]) -> SeatLayoutArchetype:
        """
        Get archetype by bus type.

        Raises:
            UnsupportedBusTypeError: if no archetype handles the bus type
        """
        archetype = self.get(bus_type)
        if archetype is None:
            raw = bus_type.value if isinstance(bus_type, BusType) else bus_type
            raise UnsupportedBusTypeError(raw, supported=self.bus_types())
        return archetype

    def bus_types(self) -> List[str]:
        return [t.value for t in self._archetypes]

    def __contains__(self, bus_type: object) -> bool:
        return self.get(bus_type) is not None

    def __len__(self) -> int:
        return len(self._archetypes)


def build_default_registry() -> ArchetypeRegistry:
    """Registry with the four built-in archetypes."""
    registry = ArchetypeRegistry()
    for archetype in (
        SeaterArchetype(),
        SleeperArchetype(),
        LimousineArchetype(),
        DoubleDeckerArchetype(),
    ):
        registry.register(archetype)
    return registry


DEFAULT_REGISTRY = build_default_registry()
