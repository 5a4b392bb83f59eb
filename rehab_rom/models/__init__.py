"""Data models for RehabROM."""

from rehab_rom.models.rom import (
    FunctionalROMCheck,
    JointMovement,
    ROMLimit,
    Severity,
    ValidationResult,
)
from rehab_rom.models.postop import (
    PhaseROMLimit,
    PostOpROMPhase,
    SurgeryType,
    WeekRange,
)

__all__ = [
    "FunctionalROMCheck",
    "JointMovement",
    "ROMLimit",
    "Severity",
    "ValidationResult",
    # Postoperative protocol models
    "PhaseROMLimit",
    "PostOpROMPhase",
    "SurgeryType",
    "WeekRange",
]
