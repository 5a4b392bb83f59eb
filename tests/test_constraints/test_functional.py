"""Tests for functional ROM sufficiency checks."""

from rehab_rom.constraints.functional import (
    FUNCTIONAL_ROM_REQUIREMENTS,
    check_functional_rom,
    list_activities,
)
from rehab_rom.constraints.rom_limits import ANATOMICAL_ROM_LIMITS
from rehab_rom.models.rom import JointMovement


class TestRequirementTable:
    def test_activities(self):
        assert list_activities() == [
            "walking",
            "stairsUp",
            "stairsDown",
            "sitToStand",
            "tieShoes",
            "reachOverhead",
            "combHair",
            "eatWithFork",
        ]

    def test_requirements_within_anatomical_max(self):
        for requirements in FUNCTIONAL_ROM_REQUIREMENTS.values():
            for movement, required in requirements.items():
                assert required <= ANATOMICAL_ROM_LIMITS[movement].max

    def test_tie_shoes(self):
        assert dict(FUNCTIONAL_ROM_REQUIREMENTS["tieShoes"]) == {
            JointMovement.HIP_FLEXION: 120,
            JointMovement.KNEE_FLEXION: 115,
            JointMovement.LUMBAR_FLEXION: 40,
        }


class TestCheckFunctionalROM:
    def test_sufficient_when_requirements_met(self, full_walking_rom):
        result = check_functional_rom("walking", full_walking_rom)
        assert result.sufficient
        assert result.deficits == []

    def test_deficits_in_requirement_order(self):
        result = check_functional_rom("walking", {"hipFlexion": 40, "kneeFlexion": 50})

        assert not result.sufficient
        assert result.deficits == [
            "hipExtension: 0° (behöver 10°)",
            "kneeFlexion: 50° (behöver 60°)",
            "ankleDorsiflexion: 0° (behöver 10°)",
            "anklePlantarflexion: 0° (behöver 20°)",
        ]

    def test_current_rounded_to_whole_degrees(self):
        result = check_functional_rom("tieShoes", {"hipFlexion": 119.6, "kneeFlexion": 120, "lumbarFlexion": 45})
        assert result.deficits == ["hipFlexion: 120° (behöver 120°)"]

    def test_accepts_enum_keys(self, full_walking_rom):
        rom = {JointMovement(key): value for key, value in full_walking_rom.items()}
        assert check_functional_rom("walking", rom).sufficient

    def test_unknown_activity_is_sufficient(self):
        result = check_functional_rom("skiing", {})
        assert result.sufficient
        assert result.deficits == []
