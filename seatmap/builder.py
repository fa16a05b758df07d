"""
builder.py - Custom seat layout builder v1.0

Turns an operator's loose dimensions (bus type, rows, columns, floors,
pattern, empty positions) into a layout by dispatching to the archetype
registered for the bus type. The generated layout is authoritative: the
returned dimensions and floor count come from the generator, not from the
request.
"""

from __future__ import annotations
from typing import Any, Mapping, Optional, Tuple, Union
import logging

from pydantic import BaseModel

from seatmap.config import LayoutLimits
from seatmap.errors import InvalidLayoutRequestError
from seatmap.generator.archetypes import (
    DEFAULT_REGISTRY,
    ArchetypeRegistry,
    SeatLayoutArchetype,
)
from seatmap.schema.layout import CustomTemplate

__all__ = [
    'parse_layout_request',
    'build_custom_template',
]

logger = logging.getLogger(__name__)

RequestInput = Union[BaseModel, Mapping[str, Any]]


def _requested_bus_type(request: RequestInput) -> Any:
    if isinstance(request, BaseModel):
        return getattr(request, "bus_type", None)
    if isinstance(request, Mapping):
        if "busType" in request:
            return request["busType"]
        return request.get("bus_type")
    raise InvalidLayoutRequestError(
        f"Layout request must be a mapping, got {type(request).__name__}",
    )


def parse_layout_request(
    request: RequestInput,
    registry: Optional[ArchetypeRegistry] = None,
) -> Tuple[SeatLayoutArchetype, BaseModel]:
    """
    Resolve the archetype for a request and parse the request into its model.

    Raises:
        UnsupportedBusTypeError: if the bus type is missing or unknown
        InvalidLayoutRequestError: if the parameters do not fit the archetype
    """
    registry = registry if registry is not None else DEFAULT_REGISTRY
    archetype = registry.require(_requested_bus_type(request))
    return archetype, archetype.parse_request(request)


def build_custom_template(
    request: RequestInput,
    registry: Optional[ArchetypeRegistry] = None,
    limits: Optional[LayoutLimits] = None,
) -> CustomTemplate:
    """
    Build a custom layout from operator input.

    Args:
        request: Mapping with busType/bus_type, rows, columns, floors,
            pattern and emptyPositions/empty_positions, or a parsed
            request model
        registry: Archetype registry (defaults to the built-in one)
        limits: Seat-count bounds; requests above max_seats are rejected
            before generation (defaults to 1..200)

    Returns:
        CustomTemplate flagged custom=True

    Raises:
        UnsupportedBusTypeError: if the bus type is missing or unknown
        InvalidLayoutRequestError: if the parameters do not fit the archetype
            or the layout would exceed limits.max_seats
    """
    limits = limits if limits is not None else LayoutLimits()
    archetype, parsed = parse_layout_request(request, registry)
    archetype.check_capacity(parsed, limits.max_seats)
    seat_layout = archetype.generate(parsed)

    logger.info(
        f"Built custom {archetype.bus_type.value} layout: "
        f"{seat_layout.rows}x{seat_layout.columns}, {seat_layout.total_seats} seats"
    )

    return CustomTemplate(bus_type=archetype.bus_type, seat_layout=seat_layout)
