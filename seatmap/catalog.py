"""
catalog.py - Seat layout template catalog v1.0

Named, pre-built layouts for each bus type. The catalog is built once from
the pattern generators, so every template's declared dimensions and seat
total match its grid. After construction nothing in it can be mutated.
"""

from __future__ import annotations
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union
import logging

from seatmap.generator.grid import EMPTY, count_seats, row_letter, seat_label
from seatmap.generator.patterns import (
    generate_aisle_layout,
    generate_double_decker,
    generate_limousine_layout,
    generate_seat_layout,
    generate_sleeper_layout,
)
from seatmap.generator.archetypes import resolve_bus_type
from seatmap.schema.enums import BusType, LimousinePattern
from seatmap.schema.layout import SeatLayout, Template, TemplateSummary

__all__ = [
    'TemplateCatalog',
    'build_default_catalog',
    'get_default_catalog',
    'list_all_templates',
    'get_templates_by_bus_type',
    'get_template',
]

logger = logging.getLogger(__name__)

_EMPTY_MAPPING: Mapping[str, Template] = MappingProxyType({})


# =============================================================================
# CATALOG
# =============================================================================

class TemplateCatalog:
    """
    Read-only store of layout templates, grouped by bus type.

    Lookups never raise: unknown bus types and template keys give an
    empty mapping or None.
    """

    def __init__(self, templates: Mapping[BusType, Mapping[str, Template]]):
        self._templates: Mapping[BusType, Mapping[str, Template]] = MappingProxyType({
            bus_type: MappingProxyType(dict(group))
            for bus_type, group in templates.items()
        })

    def list_all(self) -> List[TemplateSummary]:
        """Summaries of every template, grouped by bus type in catalog order."""
        return [
            template.summary()
            for group in self._templates.values()
            for template in group.values()
        ]

    def get_by_bus_type(self, bus_type: Union[str, BusType, None]) -> Mapping[str, Template]:
        """Templates for a bus type keyed by template key."""
        resolved = resolve_bus_type(bus_type)
        if resolved is None:
            return _EMPTY_MAPPING
        return self._templates.get(resolved, _EMPTY_MAPPING)

    def get(
        self,
        bus_type: Union[str, BusType, None],
        template_key: str,
    ) -> Optional[Template]:
        """Get a template by bus type and key."""
        return self.get_by_bus_type(bus_type).get(template_key)

    def bus_types(self) -> List[str]:
        return [t.value for t in self._templates]

    def __len__(self) -> int:
        return sum(len(group) for group in self._templates.values())


# =============================================================================
# DEFAULT TEMPLATES
# =============================================================================

def _grid_layout(rows: int, columns: int) -> SeatLayout:
    grid = generate_seat_layout(rows, columns)
    return SeatLayout(
        floors=1,
        rows=rows,
        columns=columns,
        layout=grid,
        total_seats=count_seats(grid),
    )


def _premium_limousine_layout(rows: int) -> SeatLayout:
    # 1-1 seating without a driver row; seat numbers skip the aisle.
    grid = [
        [seat_label(row_letter(r), 0), EMPTY, seat_label(row_letter(r), 1)]
        for r in range(rows)
    ]
    return SeatLayout(
        floors=1,
        rows=rows,
        columns=3,
        layout=grid,
        total_seats=count_seats(grid),
    )


def _template(
    bus_type: BusType,
    key: str,
    name: str,
    description: str,
    seat_layout: SeatLayout,
) -> Template:
    return Template(
        template_key=key,
        name=name,
        bus_type=bus_type,
        description=description,
        seat_layout=seat_layout,
    )


def build_default_catalog() -> TemplateCatalog:
    """Build the built-in template set."""
    seater = BusType.SEATER
    sleeper = BusType.SLEEPER
    limousine = BusType.LIMOUSINE
    double_decker = BusType.DOUBLE_DECKER

    templates: Dict[BusType, Dict[str, Template]] = {
        seater: {
            "small": _template(
                seater, "small", "16-seat seater",
                "Small 16-seat coach for short routes",
                _grid_layout(4, 4),
            ),
            "medium": _template(
                seater, "medium", "24-seat seater",
                "Standard 24-seat coach",
                _grid_layout(6, 4),
            ),
            "standard": _template(
                seater, "standard", "40-seat seater with aisle",
                "40-seat coach with a centre aisle",
                generate_aisle_layout(40),
            ),
            "large": _template(
                seater, "large", "45-seat seater",
                "Large 45-seat coach with a full-width back row",
                generate_aisle_layout(45, has_back_row=True),
            ),
        },
        sleeper: {
            "standard": _template(
                sleeper, "standard", "20-berth sleeper",
                "Standard single-floor sleeper with 20 berths",
                generate_sleeper_layout(10, floors=1, columns=2),
            ),
            "large": _template(
                sleeper, "large", "30-berth sleeper",
                "Large single-floor sleeper with 30 berths for long routes",
                generate_sleeper_layout(15, floors=1, columns=2),
            ),
            "doubleDecker": _template(
                sleeper, "doubleDecker", "40-berth two-floor sleeper",
                "Two-floor sleeper with 40 berths",
                generate_sleeper_layout(10, floors=2, columns=2),
            ),
        },
        limousine: {
            "vip9": _template(
                limousine, "vip9", "VIP limousine",
                "VIP limousine, 1-1 seating with a wide aisle",
                generate_limousine_layout(9, LimousinePattern.VIP),
            ),
            "standard22": _template(
                limousine, "standard22", "Standard limousine",
                "Standard limousine, 2-1 seating",
                generate_limousine_layout(11, LimousinePattern.STANDARD),
            ),
            "premium16": _template(
                limousine, "premium16", "Premium 16-seat limousine",
                "Premium limousine with 16 seats and an open centre aisle",
                _premium_limousine_layout(8),
            ),
        },
        double_decker: {
            "standard": _template(
                double_decker, "standard", "80-seat double-decker",
                "Double-decker with 40 seats on each deck",
                generate_double_decker(10, columns=4),
            ),
            "large": _template(
                double_decker, "large", "104-seat double-decker",
                "Large double-decker with 52 seats on each deck",
                generate_double_decker(13, columns=4),
            ),
        },
    }

    catalog = TemplateCatalog(templates)
    logger.debug(f"Built template catalog: {len(catalog)} templates")
    return catalog


@lru_cache(maxsize=1)
def get_default_catalog() -> TemplateCatalog:
    """Shared default catalog, built on first use."""
    return build_default_catalog()


def _catalog_or_default(catalog: Optional[TemplateCatalog]) -> TemplateCatalog:
    return catalog if catalog is not None else get_default_catalog()


# =============================================================================
# MODULE-LEVEL OPERATIONS
# =============================================================================

def list_all_templates(catalog: Optional[TemplateCatalog] = None) -> List[TemplateSummary]:
    return _catalog_or_default(catalog).list_all()


def get_templates_by_bus_type(
    bus_type: Union[str, BusType, None],
    catalog: Optional[TemplateCatalog] = None,
) -> Mapping[str, Template]:
    return _catalog_or_default(catalog).get_by_bus_type(bus_type)


def get_template(
    bus_type: Union[str, BusType, None],
    template_key: str,
    catalog: Optional[TemplateCatalog] = None,
) -> Optional[Template]:
    return _catalog_or_default(catalog).get(bus_type, template_key)
