"""Joint angle validation against anatomical ROM limits.

Measured angles are graded into four nested bands, checked from the outside
in because hypermobility > max > warning:

  |angle| > hypermobility  -> invalid, severe (possible hypermobility)
  |angle| > max            -> invalid, moderate (likely measurement error)
  |angle| > warning        -> valid, mild (near end-range)
  otherwise                -> valid

Movements without a known limit are unconstrained and always valid.
"""
from __future__ import annotations

import logging
from typing import Optional

from rehab_rom.constraints.age import get_age_adjusted_rom
from rehab_rom.constraints.rom_limits import get_rom_limit
from rehab_rom.models.rom import JointMovement, Severity, ValidationResult

logger = logging.getLogger(__name__)


# Pose-estimation angle names -> joint movements
_ANGLE_NAME_TO_MOVEMENT: dict[str, JointMovement] = {
    # Elbow
    "leftElbow": JointMovement.ELBOW_FLEXION,
    "rightElbow": JointMovement.ELBOW_FLEXION,
    # Shoulder
    "leftShoulderFlexion": JointMovement.SHOULDER_FLEXION,
    "rightShoulderFlexion": JointMovement.SHOULDER_FLEXION,
    "leftShoulderAbduction": JointMovement.SHOULDER_ABDUCTION,
    "rightShoulderAbduction": JointMovement.SHOULDER_ABDUCTION,
    # Hip
    "leftHip": JointMovement.HIP_FLEXION,
    "rightHip": JointMovement.HIP_FLEXION,
    # Knee
    "leftKnee": JointMovement.KNEE_FLEXION,
    "rightKnee": JointMovement.KNEE_FLEXION,
    # Ankle
    "leftAnkle": JointMovement.ANKLE_DORSIFLEXION,
    "rightAnkle": JointMovement.ANKLE_DORSIFLEXION,
}


def _movement_label(movement: JointMovement | str) -> str:
    return movement.value if isinstance(movement, JointMovement) else str(movement)


def validate_joint_angle(
    movement: JointMovement | str,
    angle: float,
    age: Optional[int] = None,
) -> ValidationResult:
    """Validate a measured joint angle against anatomical limits.

    Args:
        movement: Joint movement identifier.
        angle: Measured angle in degrees. The sign is ignored.
        age: Optional patient age; when given, the age-adjusted limit is used.

    Returns:
        ValidationResult with severity, warning and recommendation when the
        angle is near or beyond the normal range.
    """
    limits = get_rom_limit(movement) if age is None else get_age_adjusted_rom(movement, age)
    if limits is None:
        logger.debug("No ROM limit for %s, treating as unconstrained", movement)
        return ValidationResult(valid=True)

    label = _movement_label(movement)
    abs_angle = abs(angle)

    if abs_angle > limits.hypermobility:
        logger.info(
            "%s at %.1f° exceeds hypermobility threshold %s°",
            label, abs_angle, limits.hypermobility,
        )
        return ValidationResult(
            valid=False,
            severity=Severity.SEVERE,
            warning=(
                f"{label} indikerar hypermobilitet "
                f"({abs_angle:.1f}° > {limits.hypermobility}°)"
            ),
            corrected_angle=limits.max,
            recommendation="Kontrollera mätning eller utred hypermobilitet",
        )

    if abs_angle > limits.max:
        logger.info("%s at %.1f° exceeds anatomical max %s°", label, abs_angle, limits.max)
        return ValidationResult(
            valid=False,
            severity=Severity.MODERATE,
            warning=f"{label} överskrider anatomisk gräns ({abs_angle:.1f}° > {limits.max}°)",
            corrected_angle=limits.max,
            recommendation="Värdet kan vara mätfel - verifiera position",
        )

    if abs_angle > limits.warning:
        return ValidationResult(
            valid=True,
            severity=Severity.MILD,
            warning=f"{label} nära end-range ({abs_angle:.1f}°)",
            recommendation="Normal ROM, men nära maximal rörlighet",
        )

    return ValidationResult(valid=True)


def map_angle_name_to_movement(angle_name: str) -> Optional[JointMovement]:
    """Map a pose-estimation angle name such as ``leftKnee`` to a movement."""
    return _ANGLE_NAME_TO_MOVEMENT.get(angle_name)


def validate_all_angles(
    angles: dict[str, float],
    age: Optional[int] = None,
) -> dict[str, ValidationResult]:
    """Validate every named angle that maps to a known movement.

    Names without a mapping are skipped and do not appear in the result.
    """
    results: dict[str, ValidationResult] = {}

    for name, angle in angles.items():
        movement = map_angle_name_to_movement(name)
        if movement is not None:
            results[name] = validate_joint_angle(movement, angle, age=age)

    return results
