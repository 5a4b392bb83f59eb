"""Tests for the postoperative exercise guide."""

from rehab_rom.postop.guide import NO_PROTOCOL_MESSAGE, generate_post_op_exercise_guide


class TestExerciseGuide:
    def test_acl_phase_1(self):
        guide = generate_post_op_exercise_guide("acl_reconstruction", 1)

        assert guide.startswith("# Postoperativ fas 1: Akut/Skyddsfas\n\n")
        assert "**Vecka 0-2 efter operation**\n" in guide
        assert "- Knäböjning - normalt 0-140°: max 90°\n" in guide
        assert "- Knästräckning (hyperextension) - normalt 0-10°: max 0°\n" in guide
        assert "- ⚠️ Kryckor med partiell belastning\n" in guide
        assert "- ✅ Flexion till 90°\n" in guide

    def test_section_order(self):
        guide = generate_post_op_exercise_guide("thr", 3)

        rom = guide.index("## ROM-begränsningar")
        restrictions = guide.index("## Restriktioner")
        goals = guide.index("## Mål för denna fas")
        assert rom < restrictions < goals

    def test_weight_bearing_and_resistance_flags(self):
        guide = generate_post_op_exercise_guide("acl_reconstruction", 8)
        assert "- Knäböjning - normalt 0-140°: max 135° (viktbärande OK) (motstånd OK)\n" in guide

    def test_weight_bearing_only(self):
        guide = generate_post_op_exercise_guide("tkr", 4)
        assert "max 110° (viktbärande OK)\n" in guide

    def test_restrictions_and_goals_in_order(self):
        guide = generate_post_op_exercise_guide("lumbar_fusion", 2)
        assert guide.index("Ingen böjning, lyft, vridning (BLT)") < guide.index("Max lyft 2-3 kg")
        assert guide.index("Skydda fusion") < guide.index("Promenad")

    def test_beyond_protocol_shows_last_phase(self):
        guide = generate_post_op_exercise_guide("acl_reconstruction", 100)
        assert guide.startswith("# Postoperativ fas 5: Full återgång")

    def test_unknown_surgery(self):
        assert generate_post_op_exercise_guide("knee_arthroscopy", 3) == NO_PROTOCOL_MESSAGE

    def test_ends_with_newline(self):
        assert generate_post_op_exercise_guide("bankart_repair", 10).endswith("\n")
