"""Range-of-motion models: joint movements, anatomical limits and verdicts."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class JointMovement(str, Enum):
    """Joint movements with a known anatomical range."""

    # Elbow
    ELBOW_FLEXION = "elbowFlexion"
    ELBOW_EXTENSION = "elbowExtension"

    # Shoulder
    SHOULDER_FLEXION = "shoulderFlexion"
    SHOULDER_EXTENSION = "shoulderExtension"
    SHOULDER_ABDUCTION = "shoulderAbduction"
    SHOULDER_ADDUCTION = "shoulderAdduction"
    SHOULDER_INTERNAL_ROTATION = "shoulderInternalRotation"
    SHOULDER_EXTERNAL_ROTATION = "shoulderExternalRotation"

    # Hip
    HIP_FLEXION = "hipFlexion"
    HIP_EXTENSION = "hipExtension"
    HIP_ABDUCTION = "hipAbduction"
    HIP_ADDUCTION = "hipAdduction"
    HIP_INTERNAL_ROTATION = "hipInternalRotation"
    HIP_EXTERNAL_ROTATION = "hipExternalRotation"

    # Knee
    KNEE_FLEXION = "kneeFlexion"
    KNEE_EXTENSION = "kneeExtension"

    # Ankle
    ANKLE_DORSIFLEXION = "ankleDorsiflexion"
    ANKLE_PLANTARFLEXION = "anklePlantarflexion"
    ANKLE_INVERSION = "ankleInversion"
    ANKLE_EVERSION = "ankleEversion"

    # Lumbar spine
    LUMBAR_FLEXION = "lumbarFlexion"
    LUMBAR_EXTENSION = "lumbarExtension"
    LUMBAR_LATERAL_FLEXION = "lumbarLateralFlexion"
    LUMBAR_ROTATION = "lumbarRotation"

    # Thoracic spine
    THORACIC_FLEXION = "thoracicFlexion"
    THORACIC_EXTENSION = "thoracicExtension"
    THORACIC_ROTATION = "thoracicRotation"

    # Cervical spine
    CERVICAL_FLEXION = "cervicalFlexion"
    CERVICAL_EXTENSION = "cervicalExtension"
    CERVICAL_LATERAL_FLEXION = "cervicalLateralFlexion"
    CERVICAL_ROTATION = "cervicalRotation"

    @classmethod
    def lookup(cls, value: JointMovement | str) -> Optional[JointMovement]:
        """Resolve a movement identifier, returning None when it is unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class Severity(str, Enum):
    """How far a measured angle is outside the expected range."""

    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class ROMLimit(BaseModel):
    """Anatomical range of motion for one joint movement, in degrees."""

    model_config = ConfigDict(frozen=True)

    min: int = 0
    max: int
    warning: int = Field(..., description="Near end-range threshold below max")
    hypermobility: int = Field(..., description="Above this the angle suggests hypermobility")
    description: str

    @model_validator(mode="after")
    def _check_bands(self) -> ROMLimit:
        if not 0 <= self.warning < self.max < self.hypermobility:
            raise ValueError(
                f"ROM bands must satisfy 0 <= warning < max < hypermobility "
                f"(got warning={self.warning}, max={self.max}, "
                f"hypermobility={self.hypermobility})"
            )
        return self


class ValidationResult(BaseModel):
    """Verdict for a single joint angle measurement."""

    valid: bool
    severity: Optional[Severity] = None
    warning: Optional[str] = None
    corrected_angle: Optional[float] = None
    recommendation: Optional[str] = None


class FunctionalROMCheck(BaseModel):
    """Whether the current ROM is enough to perform an everyday activity."""

    sufficient: bool
    deficits: list[str] = Field(default_factory=list)
