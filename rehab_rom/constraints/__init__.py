"""Anatomical ROM constraints - limits, age adjustment, validation, function."""

from rehab_rom.constraints.rom_limits import (
    ANATOMICAL_ROM_LIMITS,
    get_rom_description,
    get_rom_limit,
    get_rom_max,
)
from rehab_rom.constraints.age import get_age_adjusted_rom
from rehab_rom.constraints.validator import (
    map_angle_name_to_movement,
    validate_all_angles,
    validate_joint_angle,
)
from rehab_rom.constraints.functional import (
    FUNCTIONAL_ROM_REQUIREMENTS,
    check_functional_rom,
    list_activities,
)

__all__ = [
    "ANATOMICAL_ROM_LIMITS",
    "get_rom_description",
    "get_rom_limit",
    "get_rom_max",
    "get_age_adjusted_rom",
    "map_angle_name_to_movement",
    "validate_all_angles",
    "validate_joint_angle",
    "FUNCTIONAL_ROM_REQUIREMENTS",
    "check_functional_rom",
    "list_activities",
]
