"""Age-adjusted ROM norms.

Range of motion typically declines by roughly 0.5-1° per year after the age
of 25. The adjustment here is the conservative end of that: 0.5 % of the
normal maximum per year, never more than 30 % in total.
"""
from __future__ import annotations

import math
from typing import Optional

from rehab_rom.constraints.rom_limits import get_rom_limit
from rehab_rom.models.rom import JointMovement, ROMLimit

AGE_ADJUSTMENT_CUTOFF = 25
REDUCTION_PER_YEAR = 0.005
MIN_REDUCTION_FACTOR = 0.7


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def age_reduction_factor(age: int) -> float:
    """Multiplier applied to max/warning for a patient of the given age."""
    if age <= AGE_ADJUSTMENT_CUTOFF:
        return 1.0
    factor = 1 - (age - AGE_ADJUSTMENT_CUTOFF) * REDUCTION_PER_YEAR
    return max(MIN_REDUCTION_FACTOR, factor)


def get_age_adjusted_rom(movement: JointMovement | str, age: int) -> Optional[ROMLimit]:
    """Scale a movement's normal and warning bounds down for older patients.

    Hypermobility and the minimum are left untouched. Returns None when the
    movement has no anatomical limit.

    Args:
        movement: Joint movement identifier.
        age: Patient age in years.

    Returns:
        The base limit for ages up to 25, otherwise a new adjusted ROMLimit.
    """
    base = get_rom_limit(movement)
    if base is None:
        return None

    if age <= AGE_ADJUSTMENT_CUTOFF:
        return base

    factor = age_reduction_factor(age)
    return base.model_copy(
        update={
            "max": _round_half_up(base.max * factor),
            "warning": _round_half_up(base.warning * factor),
        }
    )
