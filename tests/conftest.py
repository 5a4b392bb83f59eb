"""Pytest configuration and fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rehab_rom.config import get_settings
from rehab_rom.models.rom import JointMovement, Severity, ValidationResult


SEVERITY_RANK = {
    None: 0,
    Severity.MILD: 1,
    Severity.MODERATE: 2,
    Severity.SEVERE: 3,
}


def severity_rank(result: ValidationResult) -> int:
    """Order verdicts from unremarkable (0) to severe (3)."""
    return SEVERITY_RANK[result.severity]


@pytest.fixture
def knee_flexion():
    return JointMovement.KNEE_FLEXION


@pytest.fixture
def full_walking_rom():
    """Current ROM that meets every walking requirement exactly."""
    return {
        "hipFlexion": 30,
        "hipExtension": 10,
        "kneeFlexion": 60,
        "ankleDorsiflexion": 10,
        "anklePlantarflexion": 20,
    }


@pytest.fixture
def fresh_settings():
    """Clear the cached settings before and after a test that changes env."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def api_client():
    """Test client with the ROM and postop routers mounted."""
    from rehab_rom.api.routes import health, postop, rom

    app = FastAPI()
    app.include_router(health.router)
    app.include_router(rom.router, prefix="/api/v1")
    app.include_router(postop.router, prefix="/api/v1")
    return TestClient(app)
