"""Joint angle validation against postoperative phase ceilings.

A phase only restricts the movements it lists. Lookups go phase ceiling,
then the generic anatomical limits, then unconstrained. Exceeding a phase
ceiling is always severe: it is a tissue-protection limit, not a norm.
"""
from __future__ import annotations

import logging

from rehab_rom.constraints.validator import validate_joint_angle
from rehab_rom.models.postop import SurgeryType
from rehab_rom.models.rom import JointMovement, Severity, ValidationResult
from rehab_rom.postop.phases import get_post_op_phase

logger = logging.getLogger(__name__)


def validate_post_op_rom(
    surgery_type: SurgeryType | str,
    weeks_post_op: float,
    movement: JointMovement | str,
    angle: float,
) -> ValidationResult:
    """Validate a measured angle against the active postoperative phase.

    Args:
        surgery_type: Surgery the patient had.
        weeks_post_op: Weeks since surgery.
        movement: Joint movement identifier.
        angle: Measured angle in degrees. The sign is ignored.

    Returns:
        ValidationResult; invalid and severe when the phase ceiling is exceeded.
    """
    phase = get_post_op_phase(surgery_type, weeks_post_op)
    if phase is None:
        return ValidationResult(valid=True)

    resolved = JointMovement.lookup(movement)
    limit = phase.rom_limits.get(resolved) if resolved is not None else None
    if limit is None:
        return validate_joint_angle(movement, angle)

    abs_angle = abs(angle)
    if abs_angle > limit.max:
        logger.info(
            "%s at %.1f° exceeds phase %d ceiling %s° for %s",
            resolved.value, abs_angle, phase.phase, limit.max, surgery_type,
        )
        return ValidationResult(
            valid=False,
            severity=Severity.SEVERE,
            warning=(
                f"{resolved.value} överskrider postoperativ begränsning för fas "
                f"{phase.phase} ({phase.name}): {abs_angle:.1f}° > {limit.max}°"
            ),
            corrected_angle=limit.max,
            recommendation=(
                f"Begränsa rörelsen till max {limit.max}° i denna fas. "
                "Kontakta fysioterapeut om osäkerhet."
            ),
        )

    return ValidationResult(valid=True)
