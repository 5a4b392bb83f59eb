"""Postoperative protocol endpoints."""

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field, FiniteFloat

from rehab_rom.models.postop import PostOpROMPhase
from rehab_rom.models.rom import ValidationResult
from rehab_rom.postop import (
    POST_OP_ROM_BY_SURGERY,
    generate_post_op_exercise_guide,
    get_post_op_phase,
    validate_post_op_rom,
)

router = APIRouter(prefix="/postop", tags=["postop"])


class SurgerySummary(BaseModel):
    surgery_type: str
    phases: int
    total_weeks: int


class PostOpValidationRequest(BaseModel):
    """A measured angle for a patient recovering from surgery."""

    surgery_type: str = Field(..., description="Surgery, e.g. 'acl_reconstruction'")
    weeks_post_op: FiniteFloat = Field(..., description="Weeks since surgery")
    movement: str = Field(..., description="Joint movement, e.g. 'kneeFlexion'")
    angle: FiniteFloat = Field(..., description="Measured angle in degrees")


class GuideResponse(BaseModel):
    surgery_type: str
    weeks_post_op: float
    guide: str


@router.get("/surgeries")
async def list_surgeries() -> list[SurgerySummary]:
    """Surgeries with a postoperative protocol."""
    return [
        SurgerySummary(
            surgery_type=surgery.value,
            phases=len(phases),
            total_weeks=phases[-1].week_range.max,
        )
        for surgery, phases in POST_OP_ROM_BY_SURGERY.items()
    ]


@router.get("/{surgery_type}/phase")
async def current_phase(
    surgery_type: str,
    weeks: float = Query(..., allow_inf_nan=False, description="Weeks since surgery"),
) -> PostOpROMPhase:
    """Active protocol phase for a surgery at the given week."""
    phase = get_post_op_phase(surgery_type, weeks)
    if phase is None:
        raise HTTPException(status_code=404, detail=f"Unknown surgery type: {surgery_type}")
    return phase


@router.get("/{surgery_type}/guide")
async def exercise_guide(
    surgery_type: str,
    weeks: float = Query(..., allow_inf_nan=False, description="Weeks since surgery"),
) -> GuideResponse:
    """Markdown exercise guide for the active phase."""
    return GuideResponse(
        surgery_type=surgery_type,
        weeks_post_op=weeks,
        guide=generate_post_op_exercise_guide(surgery_type, weeks),
    )


@router.post("/validate")
async def validate_angle(request: PostOpValidationRequest) -> ValidationResult:
    return validate_post_op_rom(
        request.surgery_type,
        request.weeks_post_op,
        request.movement,
        request.angle,
    )
