"""
tests/unit/test_catalog.py - Template catalog tests
"""

import pytest

from seatmap.catalog import (
    TemplateCatalog,
    get_default_catalog,
    get_template,
    get_templates_by_bus_type,
    list_all_templates,
)
from seatmap.generator.grid import count_seats
from seatmap.schema.enums import BusType
from seatmap.validators import validate_seat_layout_for_bus_type

EXPECTED_TEMPLATES = {
    ("seater", "small"): (16, 1, 4, 4),
    ("seater", "medium"): (24, 1, 6, 4),
    ("seater", "standard"): (40, 1, 11, 5),
    ("seater", "large"): (45, 1, 12, 5),
    ("sleeper", "standard"): (20, 1, 10, 2),
    ("sleeper", "large"): (30, 1, 15, 2),
    ("sleeper", "doubleDecker"): (40, 2, 22, 2),
    ("limousine", "vip9"): (18, 1, 10, 3),
    ("limousine", "standard22"): (33, 1, 12, 4),
    ("limousine", "premium16"): (16, 1, 8, 3),
    ("double_decker", "standard"): (80, 2, 22, 4),
    ("double_decker", "large"): (104, 2, 28, 4),
}


# =============================================================================
# CONTENT TESTS
# =============================================================================

class TestDefaultTemplates:
    """Tests for the built-in template set."""

    def test_template_count(self, catalog):
        assert len(catalog) == len(EXPECTED_TEMPLATES)

    @pytest.mark.parametrize("key,expected", list(EXPECTED_TEMPLATES.items()))
    def test_template_shape(self, catalog, key, expected):
        bus_type, template_key = key
        total, floors, rows, columns = expected
        template = catalog.get(bus_type, template_key)
        assert template is not None
        assert (template.total_seats, template.floors, template.rows, template.columns) == (
            total, floors, rows, columns,
        )

    @pytest.mark.parametrize("key", list(EXPECTED_TEMPLATES))
    def test_templates_are_self_consistent(self, catalog, key):
        template = catalog.get(*key)
        assert count_seats(template.layout) == template.total_seats
        assert len(template.layout) == template.rows
        assert all(len(row) == template.columns for row in template.layout)

    @pytest.mark.parametrize("key", [k for k in EXPECTED_TEMPLATES if k != ("sleeper", "doubleDecker")])
    def test_templates_pass_validation_for_own_bus_type(self, catalog, key):
        template = catalog.get(*key)
        result = validate_seat_layout_for_bus_type(template, template.bus_type)
        assert result.valid, result.errors

    def test_two_floor_sleeper_needs_double_decker_rules(self, catalog):
        template = catalog.get("sleeper", "doubleDecker")
        assert not validate_seat_layout_for_bus_type(template, "sleeper").valid
        assert validate_seat_layout_for_bus_type(template, "double_decker").valid

    def test_premium_limousine_grid(self, catalog):
        template = catalog.get("limousine", "premium16")
        assert template.layout[0] == ("A1", "", "A2")
        assert template.layout[7] == ("H1", "", "H2")

    def test_two_floor_templates_carry_floor_info(self, catalog):
        template = catalog.get("double_decker", "standard")
        assert template.floor_info.lower_floor_rows == 11
        assert template.floor_info.upper_floor_start == 12
        assert catalog.get("seater", "small").floor_info is None


# =============================================================================
# LOOKUP TESTS
# =============================================================================

class TestCatalogLookup:
    """Tests for list_all, get_by_bus_type and get."""

    def test_list_all_summaries(self, catalog):
        summaries = catalog.list_all()
        assert len(summaries) == 12
        ids = {s.id for s in summaries}
        assert "seater_standard" in ids
        assert "double_decker_large" in ids
        assert "sleeper_doubleDecker" in ids

    def test_summary_fields(self, catalog):
        summary = next(s for s in catalog.list_all() if s.id == "limousine_vip9")
        data = summary.to_dict()
        assert data["bus_type"] == "limousine"
        assert data["template_key"] == "vip9"
        assert data["total_seats"] == 18
        assert "layout" not in data

    @pytest.mark.parametrize("bus_type", ["sleeper", BusType.SLEEPER])
    def test_get_by_bus_type(self, catalog, bus_type):
        templates = catalog.get_by_bus_type(bus_type)
        assert set(templates) == {"standard", "large", "doubleDecker"}

    def test_unknown_bus_type_gives_empty_mapping(self, catalog):
        assert dict(catalog.get_by_bus_type("minibus")) == {}
        assert dict(catalog.get_by_bus_type(None)) == {}

    def test_missing_template_gives_none(self, catalog):
        assert catalog.get("seater", "huge") is None
        assert catalog.get("minibus", "small") is None

    def test_bus_types(self, catalog):
        assert catalog.bus_types() == ["seater", "sleeper", "limousine", "double_decker"]


# =============================================================================
# IMMUTABILITY TESTS
# =============================================================================

class TestCatalogImmutability:
    """The catalog cannot be changed once built."""

    def test_mapping_is_read_only(self, catalog):
        templates = catalog.get_by_bus_type("seater")
        with pytest.raises(TypeError):
            templates["tiny"] = templates["small"]

    def test_template_is_frozen(self, catalog):
        template = catalog.get("seater", "small")
        with pytest.raises(AttributeError):
            template.name = "changed"

    def test_layout_is_tuple(self, catalog):
        layout = catalog.get("seater", "small").layout
        assert isinstance(layout, tuple)
        assert all(isinstance(row, tuple) for row in layout)

    def test_input_mapping_changes_do_not_leak(self, catalog):
        small = catalog.get("seater", "small")
        source = {BusType.SEATER: {"small": small}}
        built = TemplateCatalog(source)
        source[BusType.SEATER]["other"] = small
        assert set(built.get_by_bus_type("seater")) == {"small"}


# =============================================================================
# MODULE-LEVEL OPERATION TESTS
# =============================================================================

class TestModuleOperations:
    """Tests for the catalog-defaulting module functions."""

    def test_default_catalog_is_shared(self):
        assert get_default_catalog() is get_default_catalog()

    def test_list_all_templates_defaults(self):
        assert len(list_all_templates()) == 12

    def test_injected_catalog(self):
        empty = TemplateCatalog({})
        assert list_all_templates(empty) == []
        assert dict(get_templates_by_bus_type("seater", catalog=empty)) == {}
        assert get_template("seater", "small", catalog=empty) is None

    def test_get_template_defaults(self):
        assert get_template("double_decker", "large").total_seats == 104
