"""FastAPI application for RehabROM."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rehab_rom import __version__
from rehab_rom.api.middleware import APIKeyMiddleware, RequestLoggingMiddleware
from rehab_rom.api.routes import health, postop, rom
from rehab_rom.config import get_settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="RehabROM API",
        description="Anatomical ROM constraints and postoperative phase engine",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(RequestLoggingMiddleware)

    if settings.has_api_key:
        app.add_middleware(APIKeyMiddleware, api_key=settings.api_key)

    # Include routers
    app.include_router(health.router, tags=["health"])
    app.include_router(rom.router, prefix="/api/v1", tags=["rom"])
    app.include_router(postop.router, prefix="/api/v1", tags=["postop"])

    # Exception handlers
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc) if settings.debug_mode else None,
            },
        )

    return app
