"""Health check endpoints."""

from fastapi import APIRouter, Request

from rehab_rom import __version__
from rehab_rom.config import get_settings
from rehab_rom.constraints import ANATOMICAL_ROM_LIMITS
from rehab_rom.postop import POST_OP_ROM_BY_SURGERY

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """Basic health check."""
    return {
        "status": "healthy",
        "service": "rehab-rom",
        "rom_limits": len(ANATOMICAL_ROM_LIMITS),
        "surgery_protocols": len(POST_OP_ROM_BY_SURGERY),
    }


@router.get("/health/live")
async def liveness_check() -> dict:
    """Liveness check - basic process health."""
    return {"status": "alive"}


@router.get("/api-info")
async def api_info(request: Request) -> dict:
    """API information for frontend integration."""
    base_url = str(request.base_url).rstrip("/")

    return {
        "name": "RehabROM API",
        "version": __version__,
        "description": "Anatomical ROM constraints and postoperative phase engine",
        "base_url": base_url,
        "openapi_url": f"{base_url}/openapi.json",
        "docs_url": f"{base_url}/docs",
        "endpoints": {
            "rom": {
                "limits": "/api/v1/rom/limits",
                "limit": "/api/v1/rom/limits/{movement}",
                "validate": "/api/v1/rom/validate",
                "validate_all": "/api/v1/rom/validate-all",
                "activities": "/api/v1/rom/activities",
                "functional": "/api/v1/rom/functional",
            },
            "postop": {
                "surgeries": "/api/v1/postop/surgeries",
                "phase": "/api/v1/postop/{surgery_type}/phase",
                "guide": "/api/v1/postop/{surgery_type}/guide",
                "validate": "/api/v1/postop/validate",
            },
        },
        "authentication": {
            "type": "api_key",
            "header": "X-API-Key",
            "required": get_settings().has_api_key,
        },
    }
