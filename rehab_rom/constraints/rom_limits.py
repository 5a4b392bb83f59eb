"""Anatomical range-of-motion limits.

Normal, near end-range and hypermobility thresholds per joint movement,
based on AAOS norm data, Gerhardt & Russe reference values and Kapandji's
functional anatomy (see also Magee, Orthopedic Physical Assessment).

A movement missing from the table means no constraint is known; lookups
return None rather than raising.
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from rehab_rom.models.rom import JointMovement, ROMLimit

_DEFAULT_ROM_MAX = 180
_UNKNOWN_DESCRIPTION = "Okänd rörelse"


# ── Anatomical ROM Reference Table ───────────────────────────────────────────

_ROM_LIMITS: dict[JointMovement, ROMLimit] = {
    # Elbow
    JointMovement.ELBOW_FLEXION: ROMLimit(
        max=150,
        warning=145,
        hypermobility=160,
        description="Armbågsböjning - normalt 0-150°",
    ),
    JointMovement.ELBOW_EXTENSION: ROMLimit(
        max=10,
        warning=5,
        hypermobility=15,
        description="Armbågssträckning (hyperextension) - normalt 0-10°",
    ),

    # Shoulder
    JointMovement.SHOULDER_FLEXION: ROMLimit(
        max=180,
        warning=170,
        hypermobility=190,
        description="Axelböjning framåt - normalt 0-180°",
    ),
    JointMovement.SHOULDER_EXTENSION: ROMLimit(
        max=60,
        warning=55,
        hypermobility=70,
        description="Axelsträckning bakåt - normalt 0-60°",
    ),
    JointMovement.SHOULDER_ABDUCTION: ROMLimit(
        max=180,
        warning=170,
        hypermobility=190,
        description="Axelabduktion (ut från kroppen) - normalt 0-180°",
    ),
    JointMovement.SHOULDER_ADDUCTION: ROMLimit(
        max=50,
        warning=45,
        hypermobility=60,
        description="Axeladduktion (mot kroppen) - normalt 0-50°",
    ),
    JointMovement.SHOULDER_INTERNAL_ROTATION: ROMLimit(
        max=70,
        warning=65,
        hypermobility=85,
        description="Axel inåtrotation - normalt 0-70°",
    ),
    JointMovement.SHOULDER_EXTERNAL_ROTATION: ROMLimit(
        max=90,
        warning=85,
        hypermobility=100,
        description="Axel utåtrotation - normalt 0-90°",
    ),

    # Hip
    JointMovement.HIP_FLEXION: ROMLimit(
        max=130,
        warning=120,
        hypermobility=145,
        description="Höftböjning - normalt 0-130° (knä böjt)",
    ),
    JointMovement.HIP_EXTENSION: ROMLimit(
        max=30,
        warning=25,
        hypermobility=40,
        description="Höftsträckning - normalt 0-30°",
    ),
    JointMovement.HIP_ABDUCTION: ROMLimit(
        max=45,
        warning=40,
        hypermobility=55,
        description="Höftabduktion - normalt 0-45°",
    ),
    JointMovement.HIP_ADDUCTION: ROMLimit(
        max=30,
        warning=25,
        hypermobility=40,
        description="Höftadduktion - normalt 0-30°",
    ),
    JointMovement.HIP_INTERNAL_ROTATION: ROMLimit(
        max=45,
        warning=40,
        hypermobility=55,
        description="Höft inåtrotation - normalt 0-45°",
    ),
    JointMovement.HIP_EXTERNAL_ROTATION: ROMLimit(
        max=45,
        warning=40,
        hypermobility=55,
        description="Höft utåtrotation - normalt 0-45°",
    ),

    # Knee
    JointMovement.KNEE_FLEXION: ROMLimit(
        max=140,
        warning=135,
        hypermobility=155,
        description="Knäböjning - normalt 0-140°",
    ),
    JointMovement.KNEE_EXTENSION: ROMLimit(
        max=10,
        warning=5,
        hypermobility=15,
        description="Knästräckning (hyperextension) - normalt 0-10°",
    ),

    # Ankle
    JointMovement.ANKLE_DORSIFLEXION: ROMLimit(
        max=25,
        warning=20,
        hypermobility=30,
        description="Fotled dorsalflexion - normalt 0-25°",
    ),
    JointMovement.ANKLE_PLANTARFLEXION: ROMLimit(
        max=50,
        warning=45,
        hypermobility=60,
        description="Fotled plantarflexion - normalt 0-50°",
    ),
    JointMovement.ANKLE_INVERSION: ROMLimit(
        max=35,
        warning=30,
        hypermobility=45,
        description="Fotled inversion - normalt 0-35°",
    ),
    JointMovement.ANKLE_EVERSION: ROMLimit(
        max=20,
        warning=15,
        hypermobility=25,
        description="Fotled eversion - normalt 0-20°",
    ),

    # Lumbar spine
    JointMovement.LUMBAR_FLEXION: ROMLimit(
        max=60,
        warning=55,
        hypermobility=75,
        description="Ländrygg flexion - normalt 0-60°",
    ),
    JointMovement.LUMBAR_EXTENSION: ROMLimit(
        max=25,
        warning=20,
        hypermobility=35,
        description="Ländrygg extension - normalt 0-25°",
    ),
    JointMovement.LUMBAR_LATERAL_FLEXION: ROMLimit(
        max=25,
        warning=20,
        hypermobility=35,
        description="Ländrygg sidoböjning - normalt 0-25°",
    ),
    JointMovement.LUMBAR_ROTATION: ROMLimit(
        max=10,
        warning=8,
        hypermobility=15,
        description="Ländrygg rotation - normalt 0-10°",
    ),

    # Thoracic spine
    JointMovement.THORACIC_FLEXION: ROMLimit(
        max=40,
        warning=35,
        hypermobility=50,
        description="Bröstrygg flexion - normalt 0-40°",
    ),
    JointMovement.THORACIC_EXTENSION: ROMLimit(
        max=20,
        warning=15,
        hypermobility=25,
        description="Bröstrygg extension - normalt 0-20°",
    ),
    JointMovement.THORACIC_ROTATION: ROMLimit(
        max=35,
        warning=30,
        hypermobility=45,
        description="Bröstrygg rotation - normalt 0-35°",
    ),

    # Cervical spine
    JointMovement.CERVICAL_FLEXION: ROMLimit(
        max=50,
        warning=45,
        hypermobility=60,
        description="Nacke flexion - normalt 0-50°",
    ),
    JointMovement.CERVICAL_EXTENSION: ROMLimit(
        max=60,
        warning=55,
        hypermobility=70,
        description="Nacke extension - normalt 0-60°",
    ),
    JointMovement.CERVICAL_LATERAL_FLEXION: ROMLimit(
        max=45,
        warning=40,
        hypermobility=55,
        description="Nacke sidoböjning - normalt 0-45°",
    ),
    JointMovement.CERVICAL_ROTATION: ROMLimit(
        max=80,
        warning=75,
        hypermobility=90,
        description="Nacke rotation - normalt 0-80°",
    ),
}

ANATOMICAL_ROM_LIMITS: Mapping[JointMovement, ROMLimit] = MappingProxyType(_ROM_LIMITS)


def get_rom_limit(movement: JointMovement | str) -> Optional[ROMLimit]:
    """Look up the anatomical limit for a movement, or None when unknown."""
    resolved = JointMovement.lookup(movement)
    if resolved is None:
        return None
    return ANATOMICAL_ROM_LIMITS.get(resolved)


def get_rom_description(movement: JointMovement | str) -> str:
    limit = get_rom_limit(movement)
    return limit.description if limit else _UNKNOWN_DESCRIPTION


def get_rom_max(movement: JointMovement | str) -> int:
    """Upper bound of the normal range, 180° when the movement is unknown."""
    limit = get_rom_limit(movement)
    return limit.max if limit else _DEFAULT_ROM_MAX
