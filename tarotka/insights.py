# -*- coding: utf-8 -*-
"""Insights derived from the progress record, rendered as short microcopy."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .progress import ProgressRecord
from .tarot_core import CARD_REGISTRY, Card, find_card

JOURNAL_THRESHOLD = 5
STREAK_THRESHOLD = 3
FAVORITE_MIN_COUNT = 3          # a favorite must have been saved more than twice
MAX_RENDERED = 3


@dataclass(frozen=True)
class Insight:
    type: str                   # "Milestone" | "Journal" | "Streak" | "Favorite"
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class InsightOutput:
    type: str                   # an Insight type, or "Default"
    text: str


Microcopy = Dict[str, Callable[[Dict[str, Any]], str]]

SOFT_MICROCOPY: Microcopy = {
    "Milestone": lambda p: (
        f"{p['progress']}/{len(CARD_REGISTRY)} — pomalu odkrýváš celý obraz."
        if p.get("progress") else "Pomalu odkrýváš celý obraz."
    ),
    "Favorite": lambda p: (
        f"{p['card']} se objevuje často — všímáš si jeho poselství?"
        if p.get("card") else "Tato karta se objevuje často — všímáš si jejího poselství?"
    ),
    "Streak": lambda p: (
        f"{p['days']} dní v rytmu — krásně si držíš svoji cestu."
        if p.get("days") else "Pokračuješ krásně ve svém rytmu."
    ),
    "Journal": lambda p: (
        f"{p['entries']} zápisů — krásně nasloucháš sama sobě."
        if p.get("entries") else "Krásně nasloucháš sama sobě."
    ),
}

GENZ_MICROCOPY: Microcopy = {
    "Milestone": lambda p: (
        f"{p['progress']}/{len(CARD_REGISTRY)} — sbíráš je jak Pokémony 😎"
        if p.get("progress") else "Postupuješ jak legenda ✨"
    ),
    "Favorite": lambda p: (
        f"{p['card']} tě doslova stalkuje 👀"
        if p.get("card") else "Tahle karta tě fakt miluje 👀"
    ),
    "Streak": lambda p: (
        f"{p['days']} dní v řadě — consistency queen 👑"
        if p.get("days") else "Ten vibe si držíš fest dobře 👑"
    ),
    "Journal": lambda p: (
        f"{p['entries']} zápisů — terapeutka by měla radost 💅"
        if p.get("entries") else "Main character energy 💫"
    ),
}

MICROCOPY: Dict[str, Microcopy] = {"soft": SOFT_MICROCOPY, "genz": GENZ_MICROCOPY}

DEFAULT_OUTPUTS = (
    InsightOutput("Default", "Vytáhni svou první kartu!"),
    InsightOutput("Default", "Pravidelné čtení ti odhalí tajemství."),
)


def favorite_card_id(record: ProgressRecord) -> Optional[str]:
    """Most frequent card over the journal history; ties go to the first one saved."""
    counts = Counter(entry.card_id for entry in record.journal_history)
    if not counts:
        return None
    # Counter keeps insertion order, and max() returns the first maximal item.
    card_id, count = max(counts.items(), key=lambda kv: kv[1])
    return card_id if count >= FAVORITE_MIN_COUNT else None


def derive_insights(
    record: ProgressRecord,
    lookup: Callable[[str], Optional[Card]] = find_card,
) -> List[Insight]:
    """Qualifying insights, oldest kind first."""
    insights: List[Insight] = []

    if record.journal_entries >= JOURNAL_THRESHOLD:
        insights.append(Insight("Journal", {"entries": record.journal_entries}))

    if record.streak_days >= STREAK_THRESHOLD:
        insights.append(Insight("Streak", {"days": record.streak_days}))

    fav_id = favorite_card_id(record)
    if fav_id is not None:
        card = lookup(fav_id)
        insights.append(Insight("Favorite", {"card": card.display_name if card else fav_id}))

    return insights


def render_insights(insights: List[Insight], style: str = "soft") -> List[InsightOutput]:
    """Render the last three insights with the style's microcopy, or the defaults."""
    if not insights:
        return list(DEFAULT_OUTPUTS)
    dictionary = MICROCOPY.get(style, SOFT_MICROCOPY)
    return [
        InsightOutput(i.type, dictionary[i.type](i.payload))
        for i in insights[-MAX_RENDERED:]
    ]


def get_insights(record: ProgressRecord) -> List[InsightOutput]:
    return render_insights(derive_insights(record), record.user_microcopy_style)
