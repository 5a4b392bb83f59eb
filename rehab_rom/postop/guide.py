"""Patient-facing exercise guide for a postoperative phase."""
from __future__ import annotations

from rehab_rom.constraints.rom_limits import get_rom_limit
from rehab_rom.models.postop import SurgeryType
from rehab_rom.postop.phases import get_post_op_phase

NO_PROTOCOL_MESSAGE = "Ingen postoperativ information tillgänglig för denna kirurgi."


def generate_post_op_exercise_guide(surgery_type: SurgeryType | str, weeks_post_op: float) -> str:
    """Render the active phase's ROM ceilings, restrictions and goals as markdown."""
    phase = get_post_op_phase(surgery_type, weeks_post_op)
    if phase is None:
        return NO_PROTOCOL_MESSAGE

    lines = [
        f"# Postoperativ fas {phase.phase}: {phase.name}",
        "",
        f"**Vecka {phase.week_range.min}-{phase.week_range.max} efter operation**",
        "",
        "## ROM-begränsningar",
    ]

    for movement, limit in phase.rom_limits.items():
        anatomical = get_rom_limit(movement)
        desc = anatomical.description if anatomical else movement.value
        line = f"- {desc}: max {limit.max}°"
        if limit.weight_bearing:
            line += " (viktbärande OK)"
        if limit.resistance_allowed:
            line += " (motstånd OK)"
        lines.append(line)

    lines += ["", "## Restriktioner"]
    lines += [f"- ⚠️ {restriction}" for restriction in phase.restrictions]

    lines += ["", "## Mål för denna fas"]
    lines += [f"- ✅ {goal}" for goal in phase.goals]

    return "\n".join(lines) + "\n"
