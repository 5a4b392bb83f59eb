"""Tests for joint angle validation against anatomical limits."""

import pytest

from rehab_rom.constraints.rom_limits import ANATOMICAL_ROM_LIMITS
from rehab_rom.constraints.validator import (
    map_angle_name_to_movement,
    validate_all_angles,
    validate_joint_angle,
)
from rehab_rom.models.rom import JointMovement, Severity, ValidationResult
from tests.conftest import severity_rank


class TestKneeFlexionBands:
    def test_normal_range(self):
        assert validate_joint_angle("kneeFlexion", 100) == ValidationResult(valid=True)

    def test_near_end_range(self):
        result = validate_joint_angle("kneeFlexion", 138)
        assert result.valid
        assert result.severity == Severity.MILD
        assert result.warning == "kneeFlexion nära end-range (138.0°)"
        assert result.recommendation == "Normal ROM, men nära maximal rörlighet"
        assert result.corrected_angle is None

    def test_beyond_max(self):
        result = validate_joint_angle("kneeFlexion", 150)
        assert not result.valid
        assert result.severity == Severity.MODERATE
        assert result.corrected_angle == 140
        assert result.warning == "kneeFlexion överskrider anatomisk gräns (150.0° > 140°)"
        assert result.recommendation == "Värdet kan vara mätfel - verifiera position"

    def test_hypermobility(self):
        result = validate_joint_angle("kneeFlexion", 160)
        assert not result.valid
        assert result.severity == Severity.SEVERE
        assert result.corrected_angle == 140
        assert result.warning == "kneeFlexion indikerar hypermobilitet (160.0° > 155°)"
        assert result.recommendation == "Kontrollera mätning eller utred hypermobilitet"

    def test_exactly_at_warning_is_normal(self):
        assert validate_joint_angle("kneeFlexion", 135).severity is None

    def test_exactly_at_max_is_mild(self):
        result = validate_joint_angle("kneeFlexion", 140)
        assert result.valid
        assert result.severity == Severity.MILD

    def test_exactly_at_hypermobility_is_moderate(self):
        assert validate_joint_angle("kneeFlexion", 155).severity == Severity.MODERATE

    def test_enum_and_string_identifiers_agree(self):
        assert validate_joint_angle(JointMovement.KNEE_FLEXION, 150) == validate_joint_angle(
            "kneeFlexion", 150
        )


class TestFailOpen:
    def test_unknown_movement_is_valid(self):
        assert validate_joint_angle("wristFlexion", 500) == ValidationResult(valid=True)

    def test_unknown_movement_with_age_is_valid(self):
        assert validate_joint_angle("wristFlexion", 500, age=70) == ValidationResult(valid=True)


class TestProperties:
    @pytest.mark.parametrize("movement", list(JointMovement))
    def test_severity_is_monotonic(self, movement):
        limit = ANATOMICAL_ROM_LIMITS[movement]
        angles = [step * 0.5 for step in range(int((limit.hypermobility + 10) * 2))]
        ranks = [severity_rank(validate_joint_angle(movement, a)) for a in angles]

        assert all(a <= b for a, b in zip(ranks, ranks[1:]))
        assert set(ranks) == {0, 1, 2, 3}

    @pytest.mark.parametrize("movement", list(JointMovement))
    def test_sign_symmetry(self, movement):
        limit = ANATOMICAL_ROM_LIMITS[movement]
        for angle in (0, limit.warning + 0.5, limit.max + 1, limit.hypermobility + 1):
            assert validate_joint_angle(movement, angle) == validate_joint_angle(movement, -angle)

    def test_repeated_calls_are_equal(self):
        first = validate_joint_angle("shoulderFlexion", 185)
        second = validate_joint_angle("shoulderFlexion", 185)
        assert first == second
        assert first is not second

    @pytest.mark.parametrize("movement", list(JointMovement))
    def test_invalid_verdicts_correct_to_max(self, movement):
        limit = ANATOMICAL_ROM_LIMITS[movement]
        for angle in (limit.max + 1, limit.hypermobility + 1):
            assert validate_joint_angle(movement, angle).corrected_angle == limit.max


class TestAgeAdjustedValidation:
    def test_age_lowers_thresholds(self):
        # Age 65: factor 0.8, knee max 112, warning 108
        result = validate_joint_angle("kneeFlexion", 120, age=65)
        assert not result.valid
        assert result.severity == Severity.MODERATE
        assert result.corrected_angle == 112

    def test_same_angle_normal_for_young_patient(self):
        assert validate_joint_angle("kneeFlexion", 120, age=20).severity is None

    def test_hypermobility_threshold_not_age_adjusted(self):
        assert validate_joint_angle("kneeFlexion", 150, age=90).severity == Severity.MODERATE
        assert validate_joint_angle("kneeFlexion", 156, age=90).severity == Severity.SEVERE


class TestAngleNameMapping:
    @pytest.mark.parametrize(
        "name,movement",
        [
            ("leftElbow", JointMovement.ELBOW_FLEXION),
            ("rightShoulderAbduction", JointMovement.SHOULDER_ABDUCTION),
            ("leftShoulderFlexion", JointMovement.SHOULDER_FLEXION),
            ("rightHip", JointMovement.HIP_FLEXION),
            ("leftKnee", JointMovement.KNEE_FLEXION),
            ("rightAnkle", JointMovement.ANKLE_DORSIFLEXION),
        ],
    )
    def test_known_names(self, name, movement):
        assert map_angle_name_to_movement(name) == movement

    def test_unknown_name(self):
        assert map_angle_name_to_movement("leftWrist") is None


class TestValidateAllAngles:
    def test_validates_mapped_angles(self):
        results = validate_all_angles({"leftKnee": 150, "rightKnee": 90, "leftElbow": 148})

        assert results["leftKnee"].severity == Severity.MODERATE
        assert results["rightKnee"] == ValidationResult(valid=True)
        assert results["leftElbow"].severity == Severity.MILD

    def test_skips_unmapped_names(self):
        results = validate_all_angles({"leftWrist": 300, "leftHip": 10})
        assert list(results) == ["leftHip"]

    def test_passes_age_through(self):
        results = validate_all_angles({"leftKnee": 120}, age=65)
        assert results["leftKnee"].severity == Severity.MODERATE

    def test_empty_input(self):
        assert validate_all_angles({}) == {}
