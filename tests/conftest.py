"""
Seatmap Test Configuration and Fixtures

Shared catalog, registry, config and layout fixtures.
"""

import pytest

from seatmap.catalog import build_default_catalog
from seatmap.config import LayoutLimits, SeatmapConfig
from seatmap.generator.archetypes import build_default_registry


@pytest.fixture
def catalog():
    """Freshly built default template catalog."""
    return build_default_catalog()


@pytest.fixture
def registry():
    """Archetype registry with the four built-in bus types."""
    return build_default_registry()


@pytest.fixture
def limits():
    return LayoutLimits()


@pytest.fixture
def config():
    """Default config, independent of SEATMAP_* variables in the environment."""
    return SeatmapConfig()


@pytest.fixture
def seater_layout_dict():
    """A valid 2x2 seater layout as a client would send it."""
    return {
        "floors": 1,
        "rows": 2,
        "columns": 2,
        "layout": [["A1", "A2"], ["B1", "B2"]],
        "totalSeats": 4,
    }


@pytest.fixture
def broken_layout_dict():
    """
    Seater layout that breaks every rule at once:
    two floors, short row 1, duplicate A1.
    """
    return {
        "floors": 2,
        "rows": 2,
        "columns": 2,
        "layout": [["A1", "A2"], ["A1"]],
    }
