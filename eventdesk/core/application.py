"""Application factory for creating and configuring the FastAPI application.

This module provides a factory function to create a properly configured FastAPI application
with all necessary middleware, exception handlers, and routers registered.
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from eventdesk.adapters.api import api_router
from eventdesk.core.config.settings import settings
from eventdesk.core.handlers import register_exception_handlers
from eventdesk.core.lifecycle import create_lifespan_manager
from eventdesk.core.middleware import configure_middleware


def create_application() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Consultation booking and contact inquiry backend for an events business.",
        lifespan=create_lifespan_manager(),
        default_response_class=JSONResponse,
    )

    # Configure middleware
    configure_middleware(app)

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(api_router, prefix="/api")

    return app
