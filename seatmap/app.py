"""
app.py - Seat layout API application v1.0

Builds the FastAPI application: CORS, the seat layout router and a health
check. The template catalog is built here, before any request is served.
"""

from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from seatmap.api_endpoints import create_seat_layout_router
from seatmap.catalog import TemplateCatalog, build_default_catalog
from seatmap.config import SeatmapConfig, get_config

__all__ = ['create_app']

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[SeatmapConfig] = None,
    catalog: Optional[TemplateCatalog] = None,
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        config: Application config (defaults to get_config())
        catalog: Template catalog (defaults to a freshly built default catalog)

    Returns:
        FastAPI application instance
    """
    if config is None:
        config = get_config()
    if catalog is None:
        catalog = build_default_catalog()

    app = FastAPI(
        title="Seatmap API",
        description="Bus seat layout templates, builder and validator",
        version=config.version,
        docs_url=config.api.docs_url if config.api.enable_docs else None,
        redoc_url="/redoc" if config.api.enable_docs else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_seat_layout_router(catalog=catalog, limits=config.limits))
    logger.info(f"Seat layout router wired: {len(catalog)} templates")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": config.version,
            "templates": len(catalog),
        }

    return app
