"""
seatmap/schema - Seat layout schema package.

Provides value objects for layouts and templates, bus type enums,
validation results and the typed custom-layout requests.
"""

from seatmap.schema.enums import (
    BusType,
    SeaterPattern,
    LimousinePattern,
    AISLE_COLUMNS,
    LIMOUSINE_COLUMNS,
)
from seatmap.schema.layout import (
    FloorInfo,
    SeatLayout,
    Template,
    TemplateSummary,
    CustomTemplate,
)
from seatmap.schema.validation import (
    ValidationCategory,
    ValidationIssue,
    ValidationResult,
)
from seatmap.schema.requests import (
    SeaterLayoutRequest,
    SleeperLayoutRequest,
    LimousineLayoutRequest,
    DoubleDeckerLayoutRequest,
    LayoutRequest,
    normalize_request_keys,
)

__all__ = [
    # Enums
    'BusType',
    'SeaterPattern',
    'LimousinePattern',
    'AISLE_COLUMNS',
    'LIMOUSINE_COLUMNS',
    # Layout
    'FloorInfo',
    'SeatLayout',
    'Template',
    'TemplateSummary',
    'CustomTemplate',
    # Validation
    'ValidationCategory',
    'ValidationIssue',
    'ValidationResult',
    # Requests
    'SeaterLayoutRequest',
    'SleeperLayoutRequest',
    'LimousineLayoutRequest',
    'DoubleDeckerLayoutRequest',
    'LayoutRequest',
    'normalize_request_keys',
]
