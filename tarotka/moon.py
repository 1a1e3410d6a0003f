# -*- coding: utf-8 -*-
"""
Moon phase calculation based on the mean synodic month (~29.53 days).

Used by the moon spread: the phase is sent along with the card as context for
the reading.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

REFERENCE_NEW_MOON = datetime(2000, 1, 6, 18, 14, tzinfo=timezone.utc)
SYNODIC_MONTH = 29.53058867  # days

# Upper bound (lunar age in days) of each phase; the last one wraps to new moon.
_PHASE_BOUNDS = (1.845, 5.536, 9.228, 12.919, 16.61, 20.302, 23.993, 27.685)


@dataclass(frozen=True)
class PhaseData:
    name: str
    icon: str
    theme: str
    description: str
    energy: str


@dataclass(frozen=True)
class MoonPhaseInfo:
    name: str
    icon: str
    theme: str
    description: str
    energy: str
    percentage: float   # 0 to 1
    age: float          # 0 to 29.53


MOON_PHASES: List[PhaseData] = [
    PhaseData("Novoluní", "🌑", "začátky, záměr, tichá touha",
              "Energie je nízká, ale plodná. Pocity jsou jemné, plány se formují pod povrchem.",
              "Dobrý čas se ptát: Co chci pěstovat, i když ještě nejsem připravený jednat?"),
    PhaseData("Dorůstající srpek", "🌒", "naděje, první kroky, zvědavost",
              "Hybnost se probouzí. Emoce se posouvají dopředu, i když sebevědomí zaostává.",
              "Podporuj jemné činy a malé závazky."),
    PhaseData("První čtvrť", "🌓", "napětí, volba, úsilí",
              "Vnitřní tření je teď normální. Můžeš cítit tlak rozhodnout se nebo bránit svůj směr.",
              "Růst vyžaduje zapojení, ne dokonalost."),
    PhaseData("Dorůstající měsíc", "🌔", "zdokonalování, soustředění, úprava",
              "Energie roste a povědomí zostřuje. Vidíš, co ještě potřebuje doladění.",
              "Poslouchej pozorně, upravuj odvážně."),
    PhaseData("Úplněk", "🌕", "vyvrcholení, jasnost, emoční vrchol",
              "Pocity jsou zesílené. Pravdy vyplouvají na povrch, i když jsou nepohodlné.",
              "To, co je teď viditelné, už nelze ignorovat."),
    PhaseData("Ubývající měsíc", "🌖", "integrace, hledání smyslu",
              "Vrchol už pominul. Emoce se usazují do porozumění.",
              "Dobré pro reflexi, vděčnost a upřímné rozhovory."),
    PhaseData("Poslední čtvrť", "🌗", "uvolnění, přehodnocení, stanovení hranic",
              "Energie se obrací dovnitř. Můžeš být připravený pustit to, co tě vyčerpává.",
              "Čištění je produktivní, ne pasivní."),
    PhaseData("Ubývající srpek", "🌘", "odpočinek, uzavření, odevzdání",
              "Citlivost se zvyšuje, energie klesá. Psychika touží po klidu.",
              "Konce připravují půdu pro nové záměry."),
]


def _phase_index(age: float) -> int:
    for idx, bound in enumerate(_PHASE_BOUNDS):
        if age < bound:
            return idx
    return 0


def get_moon_phase(when: Optional[datetime] = None) -> MoonPhaseInfo:
    """Phase of the moon at `when` (now if None; naive datetimes are taken as UTC)."""
    when = when or datetime.now(timezone.utc)
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)

    diff_days = (when - REFERENCE_NEW_MOON).total_seconds() / 86400.0
    age = diff_days % SYNODIC_MONTH  # Python's % is already non-negative here
    phase = MOON_PHASES[_phase_index(age)]
    return MoonPhaseInfo(
        name=phase.name,
        icon=phase.icon,
        theme=phase.theme,
        description=phase.description,
        energy=phase.energy,
        percentage=age / SYNODIC_MONTH,
        age=age,
    )


def get_moon_context(when: Optional[datetime] = None) -> str:
    """Condensed moon context for reading prompts."""
    phase = get_moon_phase(when)
    return (
        f"Aktuální fáze měsíce: {phase.icon} {phase.name}\n"
        f"Téma: {phase.theme}\n"
        f"{phase.description}\n"
        f"{phase.energy}"
    )
