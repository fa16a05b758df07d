"""
api_endpoints.py - Seat layout REST API routes v1.0

FastAPI endpoints for seat layout templates, custom layouts and validation.

Endpoints:
- GET  /api/v1/buses/seat-layout/templates - List all templates
- GET  /api/v1/buses/seat-layout/templates/{bus_type} - Templates for a bus type
- GET  /api/v1/buses/seat-layout/templates/{bus_type}/{template_key} - One template
- POST /api/v1/buses/seat-layout/build - Build a custom layout
- POST /api/v1/buses/seat-layout/validate - Validate a layout for a bus type
"""

from typing import Any, Dict, List, Optional
import logging

from fastapi import APIRouter, Body, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from seatmap.builder import build_custom_template
from seatmap.catalog import TemplateCatalog, get_default_catalog
from seatmap.config import LayoutLimits
from seatmap.errors import SeatLayoutError, UnsupportedBusTypeError
from seatmap.generator.archetypes import DEFAULT_REGISTRY, ArchetypeRegistry
from seatmap.validators import validate_seat_layout_for_bus_type

__all__ = [
    'create_seat_layout_router',
    'TemplateListResponse',
    'BusTypeTemplatesResponse',
    'TemplateResponse',
    'BuildResponse',
    'ValidateRequest',
    'ValidationResponse',
]

logger = logging.getLogger(__name__)


# =============================================================================
# REQUEST/RESPONSE MODELS
# =============================================================================

class TemplateListResponse(BaseModel):
    """All catalog templates, without grids."""
    templates: List[Dict[str, Any]]
    total: int


class BusTypeTemplatesResponse(BaseModel):
    """Templates for one bus type, keyed by template key."""
    bus_type: str
    templates: Dict[str, Dict[str, Any]]


class TemplateResponse(BaseModel):
    template: Dict[str, Any]


class BuildResponse(BaseModel):
    """Response from custom layout building."""
    seat_layout: Dict[str, Any]
    message: str = ""


class ValidateRequest(BaseModel):
    """Layout to validate; accepts seatLayout/busType as sent by the UI."""
    model_config = ConfigDict(populate_by_name=True)

    seat_layout: Optional[Dict[str, Any]] = Field(None, alias="seatLayout")
    bus_type: Optional[str] = Field(None, alias="busType")


class ValidationResponse(BaseModel):
    """Response from validation operation."""
    valid: bool
    errors: List[str]
    issues: List[Dict[str, Any]] = []


# =============================================================================
# ROUTER FACTORY
# =============================================================================

def create_seat_layout_router(
    catalog: Optional[TemplateCatalog] = None,
    limits: Optional[LayoutLimits] = None,
    registry: Optional[ArchetypeRegistry] = None,
) -> APIRouter:
    """
    Create FastAPI router for seat layout endpoints.

    Args:
        catalog: Template catalog (defaults to the shared built-in catalog)
        limits: Seat-count bounds for building and validation
        registry: Archetype registry used by the builder and validator

    Returns:
        FastAPI APIRouter
    """
    if catalog is None:
        catalog = get_default_catalog()
    if registry is None:
        registry = DEFAULT_REGISTRY

    router = APIRouter(
        prefix="/api/v1/buses/seat-layout",
        tags=["seat-layout"],
    )

    # =========================================================================
    # TEMPLATE ENDPOINTS
    # =========================================================================

    @router.get("/templates", response_model=TemplateListResponse)
    async def list_templates() -> TemplateListResponse:
        """List every catalog template as a summary."""
        templates = [s.to_dict() for s in catalog.list_all()]
        return TemplateListResponse(templates=templates, total=len(templates))

    @router.get("/templates/{bus_type}", response_model=BusTypeTemplatesResponse)
    async def get_templates_for_bus_type(bus_type: str) -> BusTypeTemplatesResponse:
        """
        Get all templates for a bus type.

        Args:
            bus_type: seater, sleeper, limousine or double_decker

        Returns:
            Templates keyed by template key
        """
        if bus_type not in registry:
            error = UnsupportedBusTypeError(bus_type, supported=registry.bus_types())
            raise HTTPException(status_code=400, detail=error.to_dict())

        templates = catalog.get_by_bus_type(bus_type)
        return BusTypeTemplatesResponse(
            bus_type=bus_type,
            templates={key: t.to_dict() for key, t in templates.items()},
        )

    @router.get("/templates/{bus_type}/{template_key}", response_model=TemplateResponse)
    async def get_template(bus_type: str, template_key: str) -> TemplateResponse:
        template = catalog.get(bus_type, template_key)
        if template is None:
            raise HTTPException(
                status_code=404,
                detail=f"Template not found: {bus_type}/{template_key}",
            )
        return TemplateResponse(template=template.to_dict())

    # =========================================================================
    # BUILD ENDPOINT
    # =========================================================================

    @router.post("/build", response_model=BuildResponse)
    async def build_layout(request: Dict[str, Any] = Body(...)) -> BuildResponse:
        """
        Build a custom layout.

        The body carries busType plus the dimensions the bus type needs
        (rows, columns, floors, pattern, emptyPositions).

        Returns:
            Generated layout flagged custom=True
        """
        try:
            template = build_custom_template(request, registry=registry, limits=limits)
        except SeatLayoutError as e:
            logger.warning(f"Custom layout rejected: {e}")
            raise HTTPException(status_code=400, detail=e.to_dict())
        except Exception as e:
            logger.error(f"Custom layout build failed: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        return BuildResponse(
            seat_layout=template.to_dict(),
            message="Seat layout built",
        )

    # =========================================================================
    # VALIDATION ENDPOINT
    # =========================================================================

    @router.post("/validate", response_model=ValidationResponse)
    async def validate_layout(request: ValidateRequest) -> ValidationResponse:
        """
        Validate a layout against the rules for a bus type.

        Rule failures are reported in the body with status 200; only a
        missing seatLayout or busType is a 400.
        """
        if not request.seat_layout or not request.bus_type:
            raise HTTPException(
                status_code=400,
                detail="seatLayout and busType are required",
            )

        result = validate_seat_layout_for_bus_type(
            request.seat_layout,
            request.bus_type,
            limits=limits,
            registry=registry,
        )
        return ValidationResponse(
            valid=result.valid,
            errors=result.errors,
            issues=[i.to_dict() for i in result.issues],
        )

    return router
