"""Postoperative protocol models."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from rehab_rom.models.rom import JointMovement


class SurgeryType(str, Enum):
    """Surgeries with a phased postoperative ROM protocol."""

    ACL_RECONSTRUCTION = "acl_reconstruction"
    TKR = "tkr"  # Total knee replacement
    THR = "thr"  # Total hip replacement
    ACHILLES_REPAIR = "achilles_repair"
    ROTATOR_CUFF_REPAIR = "rotator_cuff_repair"
    BANKART_REPAIR = "bankart_repair"
    MPFL_RECONSTRUCTION = "mpfl_reconstruction"
    MENISCUS_REPAIR = "meniscus_repair"
    HIP_ARTHROSCOPY = "hip_arthroscopy"
    ANKLE_FRACTURE_ORIF = "ankle_fracture_orif"
    LUMBAR_FUSION = "lumbar_fusion"
    CERVICAL_FUSION = "cervical_fusion"

    @classmethod
    def lookup(cls, value: SurgeryType | str) -> Optional[SurgeryType]:
        """Resolve a surgery identifier, returning None when it is unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class WeekRange(BaseModel):
    """Inclusive range of weeks after surgery."""

    model_config = ConfigDict(frozen=True)

    min: int
    max: int

    def contains(self, weeks: float) -> bool:
        return self.min <= weeks <= self.max


class PhaseROMLimit(BaseModel):
    """Ceiling for one movement during a postoperative phase."""

    model_config = ConfigDict(frozen=True)

    # Negative values mean the joint must be held short of neutral
    max: int
    weight_bearing: bool = False
    resistance_allowed: bool = False


class PostOpROMPhase(BaseModel):
    """A time-bounded stage of a surgery-specific recovery protocol."""

    model_config = ConfigDict(frozen=True)

    phase: int = Field(..., ge=1, le=5)
    name: str
    week_range: WeekRange
    rom_limits: Mapping[JointMovement, PhaseROMLimit] = Field(
        default_factory=dict, validate_default=True
    )
    restrictions: tuple[str, ...] = ()
    goals: tuple[str, ...] = ()

    @field_validator("rom_limits", mode="after")
    @classmethod
    def _read_only_limits(
        cls, value: Mapping[JointMovement, PhaseROMLimit]
    ) -> Mapping[JointMovement, PhaseROMLimit]:
        return MappingProxyType(dict(value))

    @field_serializer("rom_limits")
    def _serialize_limits(
        self, value: Mapping[JointMovement, PhaseROMLimit]
    ) -> dict[JointMovement, PhaseROMLimit]:
        return dict(value)
