"""Postoperative ROM protocols per surgery.

Allowed range of motion by week after surgery, to keep exercise from loading
healing tissue too early. Based on AAOS Clinical Practice Guidelines, the
MOON Consortium ACL protocol and institutional protocols from leading
orthopaedic centres.

Each surgery's phases are numbered from 1 and their week ranges are
contiguous: a phase starts on the week the previous one ends.
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from rehab_rom.models.postop import PhaseROMLimit, PostOpROMPhase, SurgeryType, WeekRange
from rehab_rom.models.rom import JointMovement

M = JointMovement


def _limit(max_deg: int, weight_bearing: bool, resistance_allowed: bool) -> PhaseROMLimit:
    return PhaseROMLimit(
        max=max_deg,
        weight_bearing=weight_bearing,
        resistance_allowed=resistance_allowed,
    )


def _weeks(start: int, end: int) -> WeekRange:
    return WeekRange(min=start, max=end)


_PROTOCOLS: dict[SurgeryType, list[PostOpROMPhase]] = {
    # ── ACL reconstruction ───────────────────────────────────────────────────
    SurgeryType.ACL_RECONSTRUCTION: [
        PostOpROMPhase(
            phase=1,
            name="Akut/Skyddsfas",
            week_range=_weeks(0, 2),
            rom_limits={
                M.KNEE_FLEXION: _limit(90, False, False),
                M.KNEE_EXTENSION: _limit(0, False, False),
            },
            restrictions=[
                "Ingen aktiv knäextension sista 30°",
                "Kryckor med partiell belastning",
                "Ortos låst 0° vid gång",
            ],
            goals=["Full extension (0°)", "Flexion till 90°", "Kontroll av svullnad"],
        ),
        PostOpROMPhase(
            phase=2,
            name="Tidig mobilisering",
            week_range=_weeks(2, 6),
            rom_limits={
                M.KNEE_FLEXION: _limit(120, True, False),
                M.KNEE_EXTENSION: _limit(0, True, False),
            },
            restrictions=[
                "Ingen öppen kinetisk kedja extension",
                "Full belastning OK",
                "Undvik djupa knäböj",
            ],
            goals=["Flexion 120°", "Normal gång utan hälta", "Aktiv quadricepskontroll"],
        ),
        PostOpROMPhase(
            phase=3,
            name="Styrka & kontroll",
            week_range=_weeks(6, 12),
            rom_limits={M.KNEE_FLEXION: _limit(135, True, True)},
            restrictions=[
                "Ingen löpning",
                "Ingen pivoting/vridning",
                "Gradvis ökning av motstånd",
            ],
            goals=["Full ROM", "Symmetrisk styrka 70%", "Cykling utan smärta"],
        ),
        PostOpROMPhase(
            phase=4,
            name="Funktion & återgång",
            week_range=_weeks(12, 24),
            rom_limits={M.KNEE_FLEXION: _limit(145, True, True)},
            restrictions=["Gradvis återgång till sport", "Undvik kontaktsport"],
            goals=["Löpning", "Hopp", "Sportspecifik träning"],
        ),
        PostOpROMPhase(
            phase=5,
            name="Full återgång",
            week_range=_weeks(24, 52),
            rom_limits={M.KNEE_FLEXION: _limit(150, True, True)},
            restrictions=["Individuell bedömning för kontaktsport"],
            goals=["Symmetrisk styrka 90%", "Klarat funktionstest", "Full sport"],
        ),
    ],

    # ── Total knee replacement ───────────────────────────────────────────────
    SurgeryType.TKR: [
        PostOpROMPhase(
            phase=1,
            name="Akut postop",
            week_range=_weeks(0, 2),
            rom_limits={
                M.KNEE_FLEXION: _limit(90, True, False),
                M.KNEE_EXTENSION: _limit(0, True, False),
            },
            restrictions=["Kryckor/rullator", "Trombosprofylax", "Is och elevation"],
            goals=["Flexion 90°", "Full extension", "Självständig transfer"],
        ),
        PostOpROMPhase(
            phase=2,
            name="Tidig rehab",
            week_range=_weeks(2, 6),
            rom_limits={M.KNEE_FLEXION: _limit(110, True, False)},
            restrictions=["Undvik höga stolen", "Ingen djup böjning"],
            goals=["Flexion 110°", "Trappgång", "Gång utan hjälpmedel (6v)"],
        ),
        PostOpROMPhase(
            phase=3,
            name="Framsteg",
            week_range=_weeks(6, 12),
            rom_limits={M.KNEE_FLEXION: _limit(120, True, True)},
            restrictions=["Ingen löpning", "Undvik stötbelastning"],
            goals=["Flexion 120°", "Normal gång", "ADL självständigt"],
        ),
    ],

    # ── Total hip replacement (posterior approach) ───────────────────────────
    SurgeryType.THR: [
        PostOpROMPhase(
            phase=1,
            name="Akut postop (posterior approach)",
            week_range=_weeks(0, 6),
            rom_limits={
                M.HIP_FLEXION: _limit(90, True, False),
                M.HIP_INTERNAL_ROTATION: _limit(0, True, False),
                M.HIP_ADDUCTION: _limit(0, True, False),
            },
            restrictions=[
                "INGEN flexion >90°",
                "INGEN inåtrotation",
                "INGEN adduktion över medellinjen",
                "Sov med kudde mellan benen",
                "Högt toalettsits",
            ],
            goals=["Säker gång med hjälpmedel", "Följa höftrestriktioner"],
        ),
        PostOpROMPhase(
            phase=2,
            name="Gradvis frihet",
            week_range=_weeks(6, 12),
            rom_limits={
                M.HIP_FLEXION: _limit(110, True, True),
                M.HIP_INTERNAL_ROTATION: _limit(20, True, False),
            },
            restrictions=["Fortsatt försiktighet", "Undvik extrema positioner"],
            goals=["Gång utan hjälpmedel", "Trappor", "Gradvis normalisering"],
        ),
        PostOpROMPhase(
            phase=3,
            name="Full aktivitet",
            week_range=_weeks(12, 26),
            rom_limits={M.HIP_FLEXION: _limit(130, True, True)},
            restrictions=["Undvik kontaktsport", "Undvik löpning på asfalt"],
            goals=["Full ROM", "Cykling", "Simning", "Golf"],
        ),
    ],

    # ── Achilles tendon repair ───────────────────────────────────────────────
    SurgeryType.ACHILLES_REPAIR: [
        PostOpROMPhase(
            phase=1,
            name="Immobilisering",
            week_range=_weeks(0, 2),
            rom_limits={
                # Held in equinus: dorsiflexion capped below neutral
                M.ANKLE_DORSIFLEXION: _limit(-20, False, False),
                M.ANKLE_PLANTARFLEXION: _limit(30, False, False),
            },
            restrictions=[
                "Gips/ortos i equinus (plantarflexion)",
                "Icke-viktbärande",
                "Kryckor",
            ],
            goals=["Skydda reparationen", "Kontroll av svullnad"],
        ),
        PostOpROMPhase(
            phase=2,
            name="Tidig mobilisering",
            week_range=_weeks(2, 6),
            rom_limits={
                M.ANKLE_DORSIFLEXION: _limit(0, False, False),
                M.ANKLE_PLANTARFLEXION: _limit(30, False, False),
            },
            restrictions=["Gradvis minskning av equinus", "Partiell belastning från vecka 4"],
            goals=["Neutral fotposition vecka 6", "Kontrollerad ROM"],
        ),
        PostOpROMPhase(
            phase=3,
            name="Belastning",
            week_range=_weeks(6, 12),
            rom_limits={
                M.ANKLE_DORSIFLEXION: _limit(10, True, False),
                M.ANKLE_PLANTARFLEXION: _limit(40, True, False),
            },
            restrictions=["Full belastning i skor", "Ingen löpning", "Ingen hopp"],
            goals=["Normal gång", "Gradvis ökad dorsalflexion"],
        ),
        PostOpROMPhase(
            phase=4,
            name="Styrka",
            week_range=_weeks(12, 24),
            rom_limits={
                M.ANKLE_DORSIFLEXION: _limit(20, True, True),
                M.ANKLE_PLANTARFLEXION: _limit(50, True, True),
            },
            restrictions=["Gradvis återgång till löpning (16v)", "Undvik plyometri initialt"],
            goals=["Full ROM", "Tåhävning på ett ben", "Jogging"],
        ),
    ],

    # ── Rotator cuff repair ──────────────────────────────────────────────────
    SurgeryType.ROTATOR_CUFF_REPAIR: [
        PostOpROMPhase(
            phase=1,
            name="Skyddsfas",
            week_range=_weeks(0, 6),
            rom_limits={
                M.SHOULDER_FLEXION: _limit(90, False, False),
                M.SHOULDER_ABDUCTION: _limit(60, False, False),
                M.SHOULDER_EXTERNAL_ROTATION: _limit(30, False, False),
            },
            restrictions=[
                "Slynga/immobilisering 4-6 veckor",
                "Endast passiv ROM",
                "Ingen aktiv lyftning",
                "Sov på rygg eller frisk sida",
            ],
            goals=["Passiv ROM", "Smärtkontroll", "Pendelövningar"],
        ),
        PostOpROMPhase(
            phase=2,
            name="Tidig aktiv",
            week_range=_weeks(6, 12),
            rom_limits={
                M.SHOULDER_FLEXION: _limit(140, False, False),
                M.SHOULDER_ABDUCTION: _limit(120, False, False),
                M.SHOULDER_EXTERNAL_ROTATION: _limit(45, False, False),
            },
            restrictions=[
                "Aktiv-assisterad ROM",
                "Ingen belastning",
                "Undvik lyft bakom rygg",
            ],
            goals=["Aktiv ROM", "Scapulär kontroll"],
        ),
        PostOpROMPhase(
            phase=3,
            name="Styrka",
            week_range=_weeks(12, 24),
            rom_limits={
                M.SHOULDER_FLEXION: _limit(180, False, True),
                M.SHOULDER_ABDUCTION: _limit(180, False, True),
            },
            restrictions=["Gradvis styrketräning", "Undvik tung overhead initialt"],
            goals=["Full ROM", "Isometrisk styrka", "Gradvis motstånd"],
        ),
    ],

    # ── Bankart repair (shoulder instability) ────────────────────────────────
    SurgeryType.BANKART_REPAIR: [
        PostOpROMPhase(
            phase=1,
            name="Immobilisering",
            week_range=_weeks(0, 4),
            rom_limits={
                M.SHOULDER_EXTERNAL_ROTATION: _limit(0, False, False),
                M.SHOULDER_ABDUCTION: _limit(45, False, False),
            },
            restrictions=["Slynga 4 veckor", "Ingen extern rotation", "Ingen abduktion"],
            goals=["Skydda reparationen", "Pendelövningar OK"],
        ),
        PostOpROMPhase(
            phase=2,
            name="Tidig ROM",
            week_range=_weeks(4, 8),
            rom_limits={
                M.SHOULDER_FLEXION: _limit(120, False, False),
                M.SHOULDER_EXTERNAL_ROTATION: _limit(30, False, False),
            },
            restrictions=["Gradvis ökad ER", "Ingen belastning"],
            goals=["Kontrollerad ROM-ökning"],
        ),
        PostOpROMPhase(
            phase=3,
            name="Styrka",
            week_range=_weeks(8, 16),
            rom_limits={
                M.SHOULDER_FLEXION: _limit(180, False, True),
                M.SHOULDER_EXTERNAL_ROTATION: _limit(60, False, True),
            },
            restrictions=["Gradvis styrka", "Undvik kastposition"],
            goals=["Full ROM", "Rotatorkuffstyrka"],
        ),
    ],

    # ── MPFL reconstruction (patellar instability) ───────────────────────────
    SurgeryType.MPFL_RECONSTRUCTION: [
        PostOpROMPhase(
            phase=1,
            name="Skyddsfas",
            week_range=_weeks(0, 2),
            rom_limits={M.KNEE_FLEXION: _limit(60, True, False)},
            restrictions=["Ortos 0-60°", "Partiell belastning", "Kryckor"],
            goals=["Svullnadskontroll", "Quad-aktivering"],
        ),
        PostOpROMPhase(
            phase=2,
            name="Tidig mobilisering",
            week_range=_weeks(2, 6),
            rom_limits={M.KNEE_FLEXION: _limit(90, True, False)},
            restrictions=["Gradvis ökad flexion", "Undvik lateral stress"],
            goals=["Flexion 90°", "Normal gång"],
        ),
        PostOpROMPhase(
            phase=3,
            name="Framsteg",
            week_range=_weeks(6, 12),
            rom_limits={M.KNEE_FLEXION: _limit(120, True, True)},
            restrictions=["Undvik pivoting", "Gradvis styrka"],
            goals=["Full ROM", "Trappgång", "Cykling"],
        ),
    ],

    # ── Meniscus repair ──────────────────────────────────────────────────────
    SurgeryType.MENISCUS_REPAIR: [
        PostOpROMPhase(
            phase=1,
            name="Skyddsfas",
            week_range=_weeks(0, 4),
            rom_limits={M.KNEE_FLEXION: _limit(90, False, False)},
            restrictions=["Icke-viktbärande 4 veckor", "Ortos 0-90°", "Ingen djup böjning"],
            goals=["Skydda reparationen", "Quad-kontroll"],
        ),
        PostOpROMPhase(
            phase=2,
            name="Tidig belastning",
            week_range=_weeks(4, 8),
            rom_limits={M.KNEE_FLEXION: _limit(120, True, False)},
            restrictions=["Partiell → full belastning", "Undvik djup knäböj"],
            goals=["Gradvis ROM", "Normal gång"],
        ),
        PostOpROMPhase(
            phase=3,
            name="Funktion",
            week_range=_weeks(8, 16),
            rom_limits={M.KNEE_FLEXION: _limit(135, True, True)},
            restrictions=["Undvik vridning", "Gradvis löpning från vecka 12"],
            goals=["Full ROM", "Styrka", "Jogging"],
        ),
    ],

    # ── Hip arthroscopy ──────────────────────────────────────────────────────
    SurgeryType.HIP_ARTHROSCOPY: [
        PostOpROMPhase(
            phase=1,
            name="Akut",
            week_range=_weeks(0, 2),
            rom_limits={M.HIP_FLEXION: _limit(90, True, False)},
            restrictions=["Partiell belastning", "Undvik djup flexion", "Undvik rotation"],
            goals=["Svullnadskontroll", "Smärtkontroll"],
        ),
        PostOpROMPhase(
            phase=2,
            name="Framsteg",
            week_range=_weeks(2, 6),
            rom_limits={M.HIP_FLEXION: _limit(110, True, False)},
            restrictions=["Full belastning", "Undvik extrema positioner"],
            goals=["Normal gång", "Grundläggande styrka"],
        ),
        PostOpROMPhase(
            phase=3,
            name="Styrka",
            week_range=_weeks(6, 12),
            rom_limits={M.HIP_FLEXION: _limit(130, True, True)},
            restrictions=["Gradvis ökad belastning"],
            goals=["Full ROM", "Styrka", "Cykling/simning"],
        ),
    ],

    # ── Ankle fracture ORIF ──────────────────────────────────────────────────
    SurgeryType.ANKLE_FRACTURE_ORIF: [
        PostOpROMPhase(
            phase=1,
            name="Immobilisering",
            week_range=_weeks(0, 6),
            rom_limits={M.ANKLE_DORSIFLEXION: _limit(0, False, False)},
            restrictions=["Gips/ortos", "Icke-viktbärande 6 veckor", "Kryckor"],
            goals=["Frakturläkning", "Svullnadskontroll"],
        ),
        PostOpROMPhase(
            phase=2,
            name="Tidig mobilisering",
            week_range=_weeks(6, 10),
            rom_limits={
                M.ANKLE_DORSIFLEXION: _limit(10, True, False),
                M.ANKLE_PLANTARFLEXION: _limit(30, True, False),
            },
            restrictions=["Gradvis belastning i ortos", "Undvik ojämn mark"],
            goals=["Partiell belastning", "ROM-återhämtning"],
        ),
        PostOpROMPhase(
            phase=3,
            name="Full belastning",
            week_range=_weeks(10, 16),
            rom_limits={
                M.ANKLE_DORSIFLEXION: _limit(20, True, True),
                M.ANKLE_PLANTARFLEXION: _limit(45, True, True),
            },
            restrictions=["Undvik löpning till vecka 12", "Gradvis balansträning"],
            goals=["Normal gång", "Full ROM", "Styrka"],
        ),
    ],

    # ── Lumbar fusion ────────────────────────────────────────────────────────
    SurgeryType.LUMBAR_FUSION: [
        PostOpROMPhase(
            phase=1,
            name="Skyddsfas",
            week_range=_weeks(0, 6),
            rom_limits={
                M.LUMBAR_FLEXION: _limit(20, True, False),
                M.LUMBAR_EXTENSION: _limit(0, True, False),
                M.LUMBAR_ROTATION: _limit(5, True, False),
            },
            restrictions=[
                "Ingen böjning, lyft, vridning (BLT)",
                "Max lyft 2-3 kg",
                "Loggroll-teknik vid säng",
                "Undvik sittande >30 min",
            ],
            goals=["Skydda fusion", "Grundläggande mobilitet", "Promenad"],
        ),
        PostOpROMPhase(
            phase=2,
            name="Gradvis aktivitet",
            week_range=_weeks(6, 12),
            rom_limits={
                M.LUMBAR_FLEXION: _limit(30, True, False),
                M.LUMBAR_EXTENSION: _limit(10, True, False),
            },
            restrictions=["Fortsatt försiktighet", "Max lyft 5 kg", "Undvik repetitiv böjning"],
            goals=["Ökad gångsträcka", "Grundläggande core-aktivering"],
        ),
        PostOpROMPhase(
            phase=3,
            name="Funktion",
            week_range=_weeks(12, 26),
            rom_limits={M.LUMBAR_FLEXION: _limit(45, True, True)},
            restrictions=["Gradvis ökning", "Undvik högrisk-aktiviteter"],
            goals=["ADL självständigt", "Återgång arbete (kontorsjobb)"],
        ),
    ],

    # ── Cervical fusion ──────────────────────────────────────────────────────
    SurgeryType.CERVICAL_FUSION: [
        PostOpROMPhase(
            phase=1,
            name="Immobilisering",
            week_range=_weeks(0, 6),
            rom_limits={
                M.CERVICAL_FLEXION: _limit(10, False, False),
                M.CERVICAL_EXTENSION: _limit(5, False, False),
                M.CERVICAL_ROTATION: _limit(15, False, False),
            },
            restrictions=["Halskrage", "Ingen lyft >2 kg", "Undvik bilkörning"],
            goals=["Skydda fusion", "Grundläggande ADL"],
        ),
        PostOpROMPhase(
            phase=2,
            name="Gradvis frihet",
            week_range=_weeks(6, 12),
            rom_limits={
                M.CERVICAL_FLEXION: _limit(30, False, False),
                M.CERVICAL_ROTATION: _limit(45, False, False),
            },
            restrictions=["Av krage", "Fortsatt försiktighet"],
            goals=["Ökad ROM", "Posturala övningar"],
        ),
        PostOpROMPhase(
            phase=3,
            name="Funktion",
            week_range=_weeks(12, 26),
            rom_limits={
                M.CERVICAL_FLEXION: _limit(45, False, True),
                M.CERVICAL_ROTATION: _limit(70, False, True),
            },
            restrictions=["Undvik kontaktsport", "Undvik extrem extension"],
            goals=["Funktionell ROM", "Styrka", "Återgång arbete"],
        ),
    ],
}

POST_OP_ROM_BY_SURGERY: Mapping[SurgeryType, tuple[PostOpROMPhase, ...]] = MappingProxyType(
    {surgery: tuple(phases) for surgery, phases in _PROTOCOLS.items()}
)


def list_surgery_types() -> list[SurgeryType]:
    return list(POST_OP_ROM_BY_SURGERY)


def get_protocol(surgery_type: SurgeryType | str) -> Optional[tuple[PostOpROMPhase, ...]]:
    """All phases for a surgery in order, or None when the surgery is unknown."""
    surgery = SurgeryType.lookup(surgery_type)
    if surgery is None:
        return None
    return POST_OP_ROM_BY_SURGERY.get(surgery)
