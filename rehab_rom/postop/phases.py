"""Resolve the active postoperative phase for a patient."""
from __future__ import annotations

import logging
from typing import Optional

from rehab_rom.models.postop import PostOpROMPhase, SurgeryType
from rehab_rom.postop.protocols import get_protocol

logger = logging.getLogger(__name__)


def get_post_op_phase(
    surgery_type: SurgeryType | str,
    weeks_post_op: float,
) -> Optional[PostOpROMPhase]:
    """Get the protocol phase a patient is in, by weeks since surgery.

    Week ranges are inclusive at both ends, so a boundary week belongs to the
    earlier phase. Patients further out than the last phase stay on the last
    phase's rules; weeks before the first phase (negative values) resolve to
    phase 1.

    Returns:
        The active phase, or None when the surgery has no protocol.
    """
    phases = get_protocol(surgery_type)
    if not phases:
        logger.debug("No postoperative protocol for %r", surgery_type)
        return None

    if weeks_post_op < phases[0].week_range.min:
        return phases[0]

    for phase in phases:
        if phase.week_range.contains(weeks_post_op):
            return phase

    return phases[-1]
