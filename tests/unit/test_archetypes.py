"""
tests/unit/test_archetypes.py - Archetype registry and request model tests
"""

import pytest

from seatmap.errors import InvalidLayoutRequestError, UnsupportedBusTypeError
from seatmap.generator.archetypes import (
    ArchetypeRegistry,
    DoubleDeckerArchetype,
    SeaterArchetype,
    resolve_bus_type,
)
from seatmap.schema.enums import BusType, LimousinePattern, SeaterPattern
from seatmap.schema.requests import (
    DoubleDeckerLayoutRequest,
    SeaterLayoutRequest,
    normalize_request_keys,
)


# =============================================================================
# REGISTRY TESTS
# =============================================================================

class TestArchetypeRegistry:
    """Tests for ArchetypeRegistry."""

    def test_default_registry_covers_every_bus_type(self, registry):
        assert len(registry) == 4
        assert sorted(registry.bus_types()) == sorted(BusType.values())

    @pytest.mark.parametrize("bus_type", ["seater", BusType.SEATER])
    def test_lookup_by_string_or_enum(self, registry, bus_type):
        assert registry.get(bus_type).bus_type == BusType.SEATER

    def test_unknown_bus_type(self, registry):
        assert registry.get("minibus") is None
        assert "minibus" not in registry
        assert "sleeper" in registry

    def test_require_raises_for_unknown(self, registry):
        with pytest.raises(UnsupportedBusTypeError) as exc_info:
            registry.require("minibus")
        assert exc_info.value.message == "Unsupported bus type: minibus"
        assert "double_decker" in exc_info.value.recovery_hint

    def test_require_raises_for_missing(self, registry):
        with pytest.raises(UnsupportedBusTypeError):
            registry.require(None)

    def test_register_replaces(self):
        registry = ArchetypeRegistry()
        first = SeaterArchetype()
        second = SeaterArchetype()
        registry.register(first)
        registry.register(second)
        assert len(registry) == 1
        assert registry.get("seater") is second

    def test_resolve_bus_type(self):
        assert resolve_bus_type("double_decker") is BusType.DOUBLE_DECKER
        assert resolve_bus_type("DOUBLE_DECKER") is None
        assert resolve_bus_type(None) is None


# =============================================================================
# FLOOR RULE TESTS
# =============================================================================

class TestFloorRule:
    """Tests for SeatLayoutArchetype.check_floors."""

    def test_double_decker_needs_two(self, registry):
        archetype = registry.get("double_decker")
        assert archetype.check_floors(2) is None
        assert archetype.check_floors(1) == "Double decker bus must have 2 floors"

    @pytest.mark.parametrize("bus_type", ["seater", "sleeper", "limousine"])
    def test_others_need_one(self, registry, bus_type):
        archetype = registry.get(bus_type)
        assert archetype.check_floors(1) is None
        assert archetype.check_floors(2) == "Non-double-decker bus must have 1 floor"


# =============================================================================
# REQUEST PARSING TESTS
# =============================================================================

class TestRequestParsing:
    """Tests for per-archetype request models."""

    def test_normalize_camel_case_and_nulls(self):
        assert normalize_request_keys({
            "busType": "seater",
            "emptyPositions": [[0, 0]],
            "pattern": None,
        }) == {"bus_type": "seater", "empty_positions": [[0, 0]]}

    def test_seater_defaults(self):
        request = SeaterArchetype().parse_request({"rows": 4, "columns": 4})
        assert isinstance(request, SeaterLayoutRequest)
        assert request.pattern == SeaterPattern.STANDARD.value
        assert not request.is_aisle
        assert request.empty_positions == []

    def test_seater_standard_needs_columns(self):
        with pytest.raises(InvalidLayoutRequestError):
            SeaterArchetype().parse_request({"rows": 4})

    def test_seater_aisle_rejects_empty_positions(self):
        with pytest.raises(InvalidLayoutRequestError):
            SeaterArchetype().parse_request({
                "rows": 4,
                "pattern": "aisle",
                "emptyPositions": [[1, 1]],
            })

    def test_seater_aisle_ignores_columns(self):
        archetype = SeaterArchetype()
        layout = archetype.generate(archetype.parse_request({"rows": 4, "columns": 4, "pattern": "aisle"}))
        assert layout.columns == 5
        assert layout.total_seats == 16

    def test_seater_enum_pattern(self):
        request = SeaterArchetype().parse_request(SeaterLayoutRequest(rows=2, pattern=SeaterPattern.AISLE))
        assert request.is_aisle

    def test_seater_other_pattern_is_plain_grid(self):
        request = SeaterArchetype().parse_request({"rows": 2, "columns": 3, "pattern": "custom"})
        assert not request.is_aisle
        assert SeaterArchetype().generate(request).layout == (("A1", "A2", "A3"), ("B1", "B2", "B3"))

    def test_double_decker_rejects_pattern(self):
        with pytest.raises(InvalidLayoutRequestError) as exc_info:
            DoubleDeckerArchetype().parse_request({"rows": 6, "pattern": "vip"})
        locs = [e["loc"] for e in exc_info.value.field_errors]
        assert ["pattern"] in locs

    def test_double_decker_ignores_requested_floors(self, registry):
        archetype = registry.require("double_decker")
        layout = archetype.generate(archetype.parse_request({"rows": 6, "floors": 1}))
        assert layout.floors == 2

    def test_limousine_ignores_columns(self, registry):
        archetype = registry.require("limousine")
        request = archetype.parse_request({"rows": 4, "pattern": "vip", "columns": 2, "floors": 1})
        assert request.pattern == LimousinePattern.VIP
        assert archetype.generate(request).columns == 3

    def test_rows_must_be_positive(self, registry):
        with pytest.raises(InvalidLayoutRequestError):
            registry.require("sleeper").parse_request({"rows": 0})

    def test_parsed_request_passes_through(self):
        request = DoubleDeckerLayoutRequest(rows=3)
        assert DoubleDeckerArchetype().parse_request(request) is request

    def test_field_errors_are_serializable(self, registry):
        with pytest.raises(InvalidLayoutRequestError) as exc_info:
            registry.require("sleeper").parse_request({"rows": "many"})
        for err in exc_info.value.field_errors:
            assert set(err) == {"loc", "msg"}
            assert all(isinstance(p, str) for p in err["loc"])


# =============================================================================
# GENERATION TESTS
# =============================================================================

class TestArchetypeGenerate:
    """Tests for archetype generator dispatch."""

    def test_seater_grid_counts_from_grid(self):
        archetype = SeaterArchetype()
        layout = archetype.generate(archetype.parse_request({
            "rows": 2, "columns": 2, "empty_positions": [[0, 0], [9, 9]],
        }))
        assert layout.total_seats == 3
        assert layout.layout[0] == ("", "A2")

    def test_seater_aisle_uses_four_seats_per_row(self):
        archetype = SeaterArchetype()
        layout = archetype.generate(archetype.parse_request({"rows": 10, "pattern": "aisle"}))
        assert layout.total_seats == 40
        assert layout.columns == 5
        assert layout.rows == 11

    def test_double_decker(self, registry):
        archetype = registry.require(BusType.DOUBLE_DECKER)
        layout = archetype.generate(archetype.parse_request({"rows": 5, "columns": 4}))
        assert layout.floors == 2
        assert layout.total_seats == 40


# =============================================================================
# CAPACITY TESTS
# =============================================================================

class TestSeatCapacity:
    """Capacity computed up front matches the generated layout."""

    @pytest.mark.parametrize("bus_type,data", [
        ("seater", {"rows": 4, "columns": 3, "empty_positions": [[0, 0], [0, 0], [7, 7]]}),
        ("seater", {"rows": 9, "pattern": "aisle"}),
        ("sleeper", {"rows": 6, "floors": 2, "columns": 3}),
        ("limousine", {"rows": 9, "pattern": "vip"}),
        ("limousine", {"rows": 11}),
        ("double_decker", {"rows": 6, "columns": 4}),
    ])
    def test_matches_generated_total(self, registry, bus_type, data):
        archetype = registry.require(bus_type)
        request = archetype.parse_request(data)
        assert archetype.seat_capacity(request) == archetype.generate(request).total_seats

    def test_check_capacity_rejects_oversized_grid(self, registry):
        archetype = registry.require("seater")
        request = archetype.parse_request({"rows": 3000, "columns": 3000})
        with pytest.raises(InvalidLayoutRequestError) as exc_info:
            archetype.check_capacity(request, 200)
        assert exc_info.value.details["seat_capacity"] == 9_000_000

    def test_check_capacity_allows_limit(self, registry):
        archetype = registry.require("double_decker")
        archetype.check_capacity(archetype.parse_request({"rows": 25, "columns": 4}), 200)
