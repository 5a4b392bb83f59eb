"""Postoperative ROM phasing - protocols, phase resolution, validation, guides."""

from rehab_rom.postop.protocols import POST_OP_ROM_BY_SURGERY, get_protocol, list_surgery_types
from rehab_rom.postop.phases import get_post_op_phase
from rehab_rom.postop.validator import validate_post_op_rom
from rehab_rom.postop.guide import generate_post_op_exercise_guide

__all__ = [
    "POST_OP_ROM_BY_SURGERY",
    "get_protocol",
    "list_surgery_types",
    "get_post_op_phase",
    "validate_post_op_rom",
    "generate_post_op_exercise_guide",
]
