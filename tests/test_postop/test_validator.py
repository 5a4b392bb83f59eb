"""Tests for postoperative ROM validation."""

from rehab_rom.constraints.validator import validate_joint_angle
from rehab_rom.models.rom import Severity, ValidationResult
from rehab_rom.postop.validator import validate_post_op_rom


class TestPhaseCeiling:
    def test_acl_phase_1_knee_flexion_exceeded(self):
        result = validate_post_op_rom("acl_reconstruction", 1, "kneeFlexion", 100)

        assert not result.valid
        assert result.severity == Severity.SEVERE
        assert result.corrected_angle == 90
        assert result.warning == (
            "kneeFlexion överskrider postoperativ begränsning för fas 1 "
            "(Akut/Skyddsfas): 100.0° > 90°"
        )
        assert result.recommendation == (
            "Begränsa rörelsen till max 90° i denna fas. Kontakta fysioterapeut om osäkerhet."
        )

    def test_within_ceiling(self):
        assert validate_post_op_rom("acl_reconstruction", 1, "kneeFlexion", 80) == ValidationResult(
            valid=True
        )

    def test_at_ceiling_is_valid(self):
        assert validate_post_op_rom("acl_reconstruction", 1, "kneeFlexion", 90).valid

    def test_small_overshoot_is_still_severe(self):
        result = validate_post_op_rom("tkr", 4, "kneeFlexion", 111)
        assert result.severity == Severity.SEVERE
        assert result.corrected_angle == 110

    def test_negative_angle_uses_magnitude(self):
        result = validate_post_op_rom("acl_reconstruction", 1, "kneeFlexion", -100)
        assert result.severity == Severity.SEVERE

    def test_zero_ceiling(self):
        assert validate_post_op_rom("thr", 3, "hipInternalRotation", 0).valid
        assert validate_post_op_rom("thr", 3, "hipInternalRotation", 5).severity == Severity.SEVERE

    def test_equinus_ceiling_rejects_any_angle(self):
        # Achilles phase 1 holds the ankle in plantarflexion
        result = validate_post_op_rom("achilles_repair", 1, "ankleDorsiflexion", 0)
        assert not result.valid
        assert result.corrected_angle == -20

    def test_later_phase_allows_more(self):
        assert validate_post_op_rom("acl_reconstruction", 8, "kneeFlexion", 130).valid

    def test_beyond_protocol_uses_last_phase(self):
        result = validate_post_op_rom("acl_reconstruction", 80, "kneeFlexion", 152)
        assert result.severity == Severity.SEVERE
        assert result.corrected_angle == 150


class TestFallback:
    def test_unrestricted_movement_uses_anatomical_limits(self):
        result = validate_post_op_rom("acl_reconstruction", 1, "hipFlexion", 125)
        assert result == validate_joint_angle("hipFlexion", 125)
        assert result.severity == Severity.MILD

    def test_movement_dropped_from_later_phase_uses_anatomical_limits(self):
        # kneeExtension is only restricted in ACL phases 1-2
        result = validate_post_op_rom("acl_reconstruction", 8, "kneeExtension", 12)
        assert result.severity == Severity.MODERATE

    def test_unknown_surgery_is_valid(self):
        result = validate_post_op_rom("knee_arthroscopy", 1, "kneeFlexion", 170)
        assert result == ValidationResult(valid=True)

    def test_unknown_movement_is_valid(self):
        result = validate_post_op_rom("acl_reconstruction", 1, "wristFlexion", 170)
        assert result == ValidationResult(valid=True)
