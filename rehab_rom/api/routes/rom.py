"""Anatomical ROM endpoints.

Movement identifiers are accepted as plain strings so an unknown movement
gets the same permissive verdict as the engine gives it, instead of a 422.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field, FiniteFloat

from rehab_rom.constraints import (
    ANATOMICAL_ROM_LIMITS,
    check_functional_rom,
    get_age_adjusted_rom,
    get_rom_limit,
    list_activities,
    validate_all_angles,
    validate_joint_angle,
)
from rehab_rom.models.rom import FunctionalROMCheck, ROMLimit, ValidationResult

router = APIRouter(prefix="/rom", tags=["rom"])


class AngleValidationRequest(BaseModel):
    """A single measured joint angle."""

    movement: str = Field(..., description="Joint movement, e.g. 'kneeFlexion'")
    angle: FiniteFloat = Field(..., description="Measured angle in degrees")
    age: Optional[int] = Field(None, ge=0, le=120, description="Patient age for age-adjusted norms")


class BatchValidationRequest(BaseModel):
    """Named angles from pose estimation, e.g. {'leftKnee': 120}."""

    angles: dict[str, FiniteFloat]
    age: Optional[int] = Field(None, ge=0, le=120)


class FunctionalCheckRequest(BaseModel):
    activity: str = Field(..., description="Activity, e.g. 'walking' or 'tieShoes'")
    current_rom: dict[str, FiniteFloat] = Field(default_factory=dict)


@router.get("/limits")
async def list_limits() -> dict[str, ROMLimit]:
    """All anatomical ROM limits keyed by movement."""
    return {movement.value: limit for movement, limit in ANATOMICAL_ROM_LIMITS.items()}


@router.get("/limits/{movement}")
async def get_limit(
    movement: str,
    age: Optional[int] = Query(None, ge=0, le=120),
) -> ROMLimit:
    """Anatomical limit for one movement, age-adjusted when age is given."""
    limit = get_rom_limit(movement) if age is None else get_age_adjusted_rom(movement, age)
    if limit is None:
        raise HTTPException(status_code=404, detail=f"Unknown movement: {movement}")
    return limit


@router.post("/validate")
async def validate_angle(request: AngleValidationRequest) -> ValidationResult:
    return validate_joint_angle(request.movement, request.angle, age=request.age)


@router.post("/validate-all")
async def validate_angles(request: BatchValidationRequest) -> dict[str, ValidationResult]:
    """Validate every named angle that maps to a known movement."""
    return validate_all_angles(request.angles, age=request.age)


@router.get("/activities")
async def activities() -> list[str]:
    return list_activities()


@router.post("/functional")
async def functional_check(request: FunctionalCheckRequest) -> FunctionalROMCheck:
    """Check whether current ROM is sufficient for an everyday activity."""
    return check_functional_rom(request.activity, request.current_rom)
