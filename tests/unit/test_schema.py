"""
tests/unit/test_schema.py - Layout value object tests
"""

import pytest

from seatmap.schema.enums import BusType
from seatmap.schema.layout import CustomTemplate, FloorInfo, SeatLayout, Template
from seatmap.schema.validation import ValidationCategory, ValidationResult


# =============================================================================
# SEAT LAYOUT TESTS
# =============================================================================

class TestSeatLayout:
    """Tests for SeatLayout."""

    def test_lists_are_frozen(self):
        layout = SeatLayout(floors=1, rows=1, columns=2, layout=[["A1", "A2"]], total_seats=2)
        assert layout.layout == (("A1", "A2"),)
        assert layout.to_matrix() == [["A1", "A2"]]

    def test_hashable(self):
        layout = SeatLayout(floors=1, rows=1, columns=1, layout=[["A1"]], total_seats=1)
        assert len({layout, layout}) == 1

    def test_from_dict_camel_case(self):
        layout = SeatLayout.from_dict({
            "floors": 2,
            "rows": 4,
            "columns": 1,
            "layout": [["DRIVER"], ["LA1"], ["FLOOR_2"], ["UA1"]],
            "totalSeats": 2,
            "floorInfo": {"lowerFloorRows": 2, "upperFloorStart": 3},
        })
        assert layout.is_multi_floor
        assert layout.total_seats == 2
        assert layout.floor_info == FloorInfo(lower_floor_rows=2, upper_floor_start=3)

    def test_from_dict_counts_missing_total(self):
        layout = SeatLayout.from_dict({
            "floors": 1, "rows": 1, "columns": 3,
            "layout": [["DRIVER", "", "A1"]],
        })
        assert layout.total_seats == 1

    def test_to_dict_omits_floor_info_for_single_floor(self):
        data = SeatLayout(floors=1, rows=1, columns=1, layout=[["A1"]], total_seats=1).to_dict()
        assert "floor_info" not in data

    def test_dict_round_trip_with_floor_info(self):
        original = SeatLayout(
            floors=2, rows=4, columns=1,
            layout=[["DRIVER"], ["LA1"], ["FLOOR_2"], ["UA1"]],
            total_seats=2,
            floor_info=FloorInfo.for_rows_per_floor(1),
        )
        assert SeatLayout.from_dict(original.to_dict()) == original


# =============================================================================
# TEMPLATE TESTS
# =============================================================================

class TestTemplates:
    """Tests for Template and CustomTemplate."""

    @pytest.fixture
    def seat_layout(self):
        return SeatLayout(floors=1, rows=1, columns=2, layout=[["A1", "A2"]], total_seats=2)

    def test_template_exposes_layout_fields(self, seat_layout):
        template = Template("tiny", "Tiny", BusType.SEATER, "Two seats", seat_layout)
        assert template.template_id == "seater_tiny"
        assert template.rows == 1
        assert template.total_seats == 2
        assert template.layout == (("A1", "A2"),)

    def test_summary(self, seat_layout):
        summary = Template("tiny", "Tiny", BusType.SEATER, "Two seats", seat_layout).summary()
        assert summary.id == "seater_tiny"
        assert summary.to_dict()["bus_type"] == "seater"

    def test_custom_template_flag(self, seat_layout):
        custom = CustomTemplate(bus_type=BusType.LIMOUSINE, seat_layout=seat_layout)
        assert custom.custom is True
        assert custom.to_dict()["custom"] is True
        assert custom.to_dict()["bus_type"] == "limousine"


# =============================================================================
# VALIDATION RESULT TESTS
# =============================================================================

class TestValidationResult:

    def test_empty_is_valid(self):
        result = ValidationResult()
        assert result.valid
        assert result.errors == []

    def test_merge_keeps_order(self):
        first = ValidationResult(checked_rules=["floors"])
        first.add_error("a", ValidationCategory.FLOORS, "first")
        second = ValidationResult(checked_rules=["dimensions"])
        second.add_error("b", ValidationCategory.DIMENSIONS, "second", row=0)
        first.merge(second)
        assert first.errors == ["first", "second"]
        assert first.checked_rules == ["floors", "dimensions"]
        assert first.get_issues_by_category(ValidationCategory.DIMENSIONS)[0].row == 0
