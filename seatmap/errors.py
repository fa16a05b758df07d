"""
errors.py - Seat layout error taxonomy v1.0

Structured caller errors for layout generation and template building.
Validation failures are not exceptions; see schema/validation.py.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
from enum import Enum

__all__ = [
    'SeatLayoutErrorCategory',
    'SeatLayoutError',
    'UnsupportedBusTypeError',
    'InvalidLayoutRequestError',
]


class SeatLayoutErrorCategory(Enum):
    """Categories of caller errors."""
    BUS_TYPE = "bus_type"      # Bus type not known to the engine
    REQUEST = "request"        # Malformed or inconsistent request parameters


# =============================================================================
# BASE ERROR CLASS
# =============================================================================

class SeatLayoutError(Exception):
    """
    Base class for seat layout caller errors.

    Carries an error code for programmatic handling, a human-readable
    message, a recovery hint and free-form details for API responses.
    """

    code: str = "SEAT_000"
    category: SeatLayoutErrorCategory = SeatLayoutErrorCategory.REQUEST

    def __init__(
        self,
        message: str = "",
        *,
        recovery_hint: str = "",
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Seat layout error"
        self.recovery_hint = recovery_hint
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
        }

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.recovery_hint:
            parts.append(f"Hint: {self.recovery_hint}")
        return " ".join(parts)


# =============================================================================
# SPECIFIC ERROR TYPES
# =============================================================================

class UnsupportedBusTypeError(SeatLayoutError):
    """Bus type has no registered layout archetype."""

    code = "SEAT_001"
    category = SeatLayoutErrorCategory.BUS_TYPE

    def __init__(self, bus_type: Any, supported: Optional[List[str]] = None, **kwargs):
        self.bus_type = bus_type
        hint = ""
        if supported:
            hint = f"Use one of: {', '.join(supported)}"

        super().__init__(
            message=f"Unsupported bus type: {bus_type}",
            recovery_hint=hint,
            bus_type=bus_type,
            **kwargs,
        )


class InvalidLayoutRequestError(SeatLayoutError):
    """Layout request parameters are missing, out of range, or contradictory."""

    code = "SEAT_002"
    category = SeatLayoutErrorCategory.REQUEST

    def __init__(
        self,
        message: str,
        field_errors: Optional[List[Dict[str, Any]]] = None,
        **kwargs,
    ):
        self.field_errors = field_errors or []
        super().__init__(
            message=message,
            field_errors=self.field_errors,
            **kwargs,
        )
