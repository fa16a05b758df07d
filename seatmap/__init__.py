"""
seatmap - Bus seat layout engine.

Provides:
- Seat layout generators per bus archetype
- Template catalog of pre-built layouts
- Custom layout builder
- Layout validation against structural and business rules
- REST API endpoints for layout operations
"""

__version__ = "1.0.0"

# Schema
from seatmap.schema import (
    BusType,
    SeaterPattern,
    LimousinePattern,
    FloorInfo,
    SeatLayout,
    Template,
    TemplateSummary,
    CustomTemplate,
    ValidationIssue,
    ValidationResult,
)

# Errors
from seatmap.errors import (
    SeatLayoutError,
    UnsupportedBusTypeError,
    InvalidLayoutRequestError,
)

# Generators
from seatmap.generator import (
    generate_seat_layout,
    generate_aisle_layout,
    generate_sleeper_layout,
    generate_limousine_layout,
    generate_double_decker,
    count_seats,
    get_all_seats,
    get_seat_position,
    transpose_layout,
    mirror_layout,
    merge_layouts,
)

# Catalog
from seatmap.catalog import (
    TemplateCatalog,
    build_default_catalog,
    get_default_catalog,
    list_all_templates,
    get_templates_by_bus_type,
    get_template,
)

# Builder and validator
from seatmap.builder import build_custom_template
from seatmap.validators import (
    validate_layout_dimensions,
    check_duplicate_seats,
    validate_seat_layout_for_bus_type,
)

__all__ = [
    '__version__',
    # Schema
    'BusType',
    'SeaterPattern',
    'LimousinePattern',
    'FloorInfo',
    'SeatLayout',
    'Template',
    'TemplateSummary',
    'CustomTemplate',
    'ValidationIssue',
    'ValidationResult',
    # Errors
    'SeatLayoutError',
    'UnsupportedBusTypeError',
    'InvalidLayoutRequestError',
    # Generators
    'generate_seat_layout',
    'generate_aisle_layout',
    'generate_sleeper_layout',
    'generate_limousine_layout',
    'generate_double_decker',
    'count_seats',
    'get_all_seats',
    'get_seat_position',
    'transpose_layout',
    'mirror_layout',
    'merge_layouts',
    # Catalog
    'TemplateCatalog',
    'build_default_catalog',
    'get_default_catalog',
    'list_all_templates',
    'get_templates_by_bus_type',
    'get_template',
    # Builder and validator
    'build_custom_template',
    'validate_layout_dimensions',
    'check_duplicate_seats',
    'validate_seat_layout_for_bus_type',
]
