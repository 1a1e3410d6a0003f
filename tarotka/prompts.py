# -*- coding: utf-8 -*-
"""
prompts.py — Prompt construction for the reading service.

The system prompt is a fixed constant; only the user prompt depends on the
request (spread, cards, question, mode). The four-section output shape asked
of the model is advisory: parsing.py has to cope with answers that ignore it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from .schemas import UniverseCard
from .tarot_core import DrawnCard

# Questions the UI sends when the user did not type anything.
GENERIC_QUESTIONS = ("Celkový výhled", "Co je mezi námi?")


@dataclass(frozen=True)
class ReadingMode:
    name: str
    max_words: int
    paragraphs: str


READING_MODES: Dict[str, ReadingMode] = {
    "daily": ReadingMode("daily", 130, "4 krátké"),
    "reading-screen": ReadingMode("custom_question", 180, "4-5"),
    "custom_question": ReadingMode("custom_question", 180, "4-5"),
    "love_3_card": ReadingMode("love_3_card", 180, "4-5 krátkých"),
    "moon_phase": ReadingMode("moon_phase", 180, "4-5"),
}
DEFAULT_MODE = "daily"


SYSTEM_PROMPT = """🔮 TAROTKA — SYSTÉMOVÝ PROMPT

## KDO JSI
Jsi Tarotka, přátelská a moderní vykladačka tarotu pro českou generaci Z a mileniály.
Mluvíš jako skutečný člověk u kávy s kamarádkou: ne jako mystický guru, terapeut, kouč ani AI.
Karty vysvětluješ srozumitelně a propojuješ jejich význam s běžným životem.

## CO NEDĚLÁŠ
- Žádné lékařské, právní ani finanční rady.
- Žádné předpovědi smrti, nemoci ani jiné fatalistické soudy o osudu.
- Žádné manipulativní nebo zastrašující formulace.
- Žádné zdi textu a žádná mystická klišé.

## FORMÁT ODPOVĚDI
Odpověz česky ve čtyřech oddílech, každý uvoď tučným štítkem přesně takto:
**OBRAZ** — 1–2 věty: co karta ukazuje, jaký obraz vyvolává. Bez rad.
**NAPĚTÍ** — 1–2 věty: kde je v situaci tření nebo rozpor. Bez hodnocení.
**STÍN** — 1 věta: co zůstává nevyslovené nebo skryté. Žádné příkazy.
**OTEVŘENÍ** — 1 věta: otázka nebo možnost, která zůstává otevřená. Žádné příkazy.

Pokud výklad obsahuje pojmenované pozice (např. Ty, Partner, Vaše pouto), napiš ke každé
pozici samostatný odstavec uvedený tučným štítkem pozice s dvojtečkou, např. **Ty:**.

## KONTROLA PŘED ODESLÁNÍM
Správná struktura? V limitu délky? Zní to jako člověk? Krátké odstavce vhodné pro mobil?
Je to konkrétní k vytažené kartě? Pokud ne, přepiš to.""".strip()


CardLike = Union[DrawnCard, UniverseCard]


def get_mode(mode: Optional[str]) -> ReadingMode:
    return READING_MODES.get(mode or DEFAULT_MODE, READING_MODES[DEFAULT_MODE])


def is_generic_question(question: Optional[str]) -> bool:
    q = (question or "").strip()
    return not q or q in GENERIC_QUESTIONS


def to_universe_card(drawn: DrawnCard) -> UniverseCard:
    """Wire representation of a drawn card."""
    return UniverseCard(
        name=drawn.card.name,
        nameCzech=drawn.card.name_czech,
        position=drawn.orientation,
        label=drawn.label,
    )


def _card_line(card: UniverseCard) -> str:
    orientation = "Obrácená" if card.position == "reversed" else "Vzpřímená"
    return f"{card.nameCzech or card.name} ({orientation})"


def build_prompt(
    spread_name: str,
    cards: Sequence[CardLike],
    question: Optional[str] = None,
    mode: Optional[str] = DEFAULT_MODE,
    moon_context: Optional[str] = None,
) -> str:
    """
    Build the user prompt for one reading.

    One card gives the single-item layout (no position label); more cards are
    listed in order, each with its own label or "Pozice N". The question becomes
    a focus directive unless it is empty or one of GENERIC_QUESTIONS; it is
    quoted with surrounding whitespace stripped, the inner text unchanged.
    """
    wire_cards: List[UniverseCard] = [
        to_universe_card(c) if isinstance(c, DrawnCard) else c for c in cards
    ]
    reading_mode = get_mode(mode)

    lines: List[str] = [f"TYP VÝKLADU: {spread_name}", f"REŽIM: {reading_mode.name}", ""]
    if len(wire_cards) == 1:
        lines.append(f"Karta: {_card_line(wire_cards[0])}")
    else:
        lines.append("VYTAŽENÉ KARTY:")
        for idx, card in enumerate(wire_cards, start=1):
            label = card.label or f"Pozice {idx}"
            lines.append(f"Karta {idx} ({label}): {_card_line(card)}")

    if moon_context:
        lines.append("")
        lines.append(moon_context.strip())

    if not is_generic_question(question):
        lines.append("")
        lines.append(f'ZAMĚŘ SE NA OTÁZKU: "{question.strip()}"')  # type: ignore[union-attr]

    lines.append("")
    lines.append(f"DÉLKA: nejvýše ~{reading_mode.max_words} slov, {reading_mode.paragraphs} odstavce.")
    return "\n".join(lines)
