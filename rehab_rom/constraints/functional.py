"""Functional ROM requirements for everyday activities.

Minimum angles needed to perform common activities of daily living, based on
Ryu et al. and Magee's functional analyses.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from rehab_rom.models.rom import FunctionalROMCheck, JointMovement

logger = logging.getLogger(__name__)

M = JointMovement

_REQUIREMENTS: dict[str, dict[JointMovement, int]] = {
    "walking": {
        M.HIP_FLEXION: 30,
        M.HIP_EXTENSION: 10,
        M.KNEE_FLEXION: 60,
        M.ANKLE_DORSIFLEXION: 10,
        M.ANKLE_PLANTARFLEXION: 20,
    },
    "stairsUp": {
        M.HIP_FLEXION: 65,
        M.KNEE_FLEXION: 85,
        M.ANKLE_DORSIFLEXION: 15,
    },
    "stairsDown": {
        M.HIP_FLEXION: 35,
        M.KNEE_FLEXION: 90,
        M.ANKLE_DORSIFLEXION: 20,
    },
    "sitToStand": {
        M.HIP_FLEXION: 95,
        M.KNEE_FLEXION: 105,
        M.ANKLE_DORSIFLEXION: 15,
    },
    "tieShoes": {
        M.HIP_FLEXION: 120,
        M.KNEE_FLEXION: 115,
        M.LUMBAR_FLEXION: 40,
    },
    # Reaching a high shelf
    "reachOverhead": {
        M.SHOULDER_FLEXION: 160,
        M.SHOULDER_ABDUCTION: 160,
        M.ELBOW_FLEXION: 30,
    },
    "combHair": {
        M.SHOULDER_FLEXION: 130,
        M.SHOULDER_ABDUCTION: 80,
        M.SHOULDER_EXTERNAL_ROTATION: 45,
        M.ELBOW_FLEXION: 140,
    },
    "eatWithFork": {
        M.SHOULDER_FLEXION: 45,
        M.ELBOW_FLEXION: 130,
        M.SHOULDER_INTERNAL_ROTATION: 30,
    },
}

FUNCTIONAL_ROM_REQUIREMENTS: Mapping[str, Mapping[JointMovement, int]] = MappingProxyType(
    {activity: MappingProxyType(reqs) for activity, reqs in _REQUIREMENTS.items()}
)


def list_activities() -> list[str]:
    return list(FUNCTIONAL_ROM_REQUIREMENTS)


def check_functional_rom(
    activity: str,
    current_rom: Mapping[str, float],
) -> FunctionalROMCheck:
    """Check whether the current ROM is sufficient for an activity.

    Movements missing from ``current_rom`` count as 0°. Deficits are listed in
    the order the activity defines its requirements. An unknown activity has
    no requirements and is reported as sufficient.
    """
    requirements = FUNCTIONAL_ROM_REQUIREMENTS.get(activity)
    if requirements is None:
        logger.debug("No functional ROM requirements for activity %r", activity)
        return FunctionalROMCheck(sufficient=True)

    deficits: list[str] = []
    for movement, required in requirements.items():
        current = current_rom.get(movement.value) or 0
        if current < required:
            deficits.append(f"{movement.value}: {current:.0f}° (behöver {required}°)")

    return FunctionalROMCheck(sufficient=not deficits, deficits=deficits)
