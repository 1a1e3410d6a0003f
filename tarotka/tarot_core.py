# -*- coding: utf-8 -*-
"""
tarot_core.py — Core Tarot mechanisms (catalog / spreads / draw)

Responsibilities:
- Assemble the 78-card catalog from the five suit subsets under tarotka/data
  and normalize them into one record shape (suit tag, localized name, image key)
- Define spreads (daily / love / finance / body / moon / decision / week)
- Draw single cards with a uniformly random orientation, and sequences of
  cards without replacement (each draw excludes the cards drawn before it)
- Provide reproducible randomness (seed can be int or str; str will be hashed)
- Public API: list_spreads / get_spread / get_card / find_card / cards_by_suit /
  remaining_ids / draw_card / draw_sequence / make_rng

Note:
- This module only implements Tarot mechanics and is UI/LLM agnostic.
  Higher orchestration lives in logic.py.
"""

from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Literal, Optional, Tuple, Union

import structlog

from .data.cups import CUPS
from .data.major_arcana import MAJOR_ARCANA
from .data.pentacles import PENTACLES
from .data.swords import SWORDS
from .data.wands import WANDS

logger = structlog.get_logger(__name__)


# =========================
# Types & Error classes
# =========================

class TarotCoreError(Exception):
    """Base class for tarot-core errors."""


class InvalidSpreadError(TarotCoreError):
    """Raised when a spread id is not registered."""


class InvalidParameterError(TarotCoreError):
    """Raised when an input parameter is invalid."""


Orientation = Literal["upright", "reversed"]
Suit = Literal["Major Arcana", "Cups", "Pentacles", "Wands", "Swords"]

SUITS: Tuple[str, ...] = ("Major Arcana", "Cups", "Pentacles", "Wands", "Swords")
ORIENTATIONS: Tuple[str, ...] = ("upright", "reversed")


@dataclass(frozen=True)
class Card:
    """Card definition (normalized catalog record)."""
    id: str                  # e.g., "major_00_the_fool", "minor_cups_ace"
    number: int
    name: str                # e.g., "The Fool", "Ace of Cups"
    name_czech: str          # e.g., "Blázen", "Eso pohárů"
    keywords: Tuple[str, ...]
    meaning_upright: str
    meaning_reversed: Optional[str]
    suit: Suit
    image_name: str

    @property
    def display_name(self) -> str:
        return self.name_czech or self.name


@dataclass(frozen=True)
class DrawnCard:
    """A card together with the orientation it was drawn in."""
    card: Card
    orientation: Orientation
    label: Optional[str] = None   # position label within a spread, e.g. "Ty"

    @property
    def is_reversed(self) -> bool:
        return self.orientation == "reversed"

    @property
    def meaning(self) -> str:
        """Static catalog meaning for this orientation."""
        if self.is_reversed and self.card.meaning_reversed:
            return self.card.meaning_reversed
        return self.card.meaning_upright


@dataclass(frozen=True)
class SpreadDef:
    """Spread definition."""
    id: str
    name: str
    labels: Tuple[str, ...]
    mode: str                # reading mode tag sent to the reading service

    @property
    def size(self) -> int:
        return len(self.labels)


# =========================
# Spread registry
# =========================

SPREAD_REGISTRY: Dict[str, SpreadDef] = {
    "daily": SpreadDef("daily", "Karta dne", ("Karta dne",), "daily"),
    "love": SpreadDef("love", "Láska a vztahy", ("Ty", "Partner", "Vaše pouto"), "love_3_card"),
    "finance": SpreadDef("finance", "Finance", ("Dnes", "Výzva", "Výsledek"), "reading-screen"),
    "body": SpreadDef("body", "Tělo a mysl", ("Tělo", "Mysl", "Duch"), "reading-screen"),
    "moon": SpreadDef("moon", "Měsíční fáze", ("Vzkaz luny",), "moon_phase"),
    "decision": SpreadDef("decision", "Rozhodnutí", ("Cesta A", "Cesta B", "Rada"), "reading-screen"),
    "week": SpreadDef("week", "7 dní", ("Po", "Út", "St", "Čt", "Pá", "So", "Ne"), "reading-screen"),
}


def list_spreads() -> List[SpreadDef]:
    """Return all available spreads."""
    return list(SPREAD_REGISTRY.values())


def get_spread(spread_id: str) -> SpreadDef:
    """Get a single spread definition; raise if not registered."""
    if spread_id not in SPREAD_REGISTRY:
        raise InvalidSpreadError(f"Spread '{spread_id}' is not registered.")
    return SPREAD_REGISTRY[spread_id]


# =========================
# Catalog (78 cards, five suits)
# =========================

def _normalize(records: List[Dict[str, Any]], suit: str) -> List[Card]:
    """
    Bring one independently authored suit subset into the canonical Card shape.

    Subsets differ: some omit the suit tag, some spell the localized name
    `czechName`, some have no image key. Missing fields are derived here once
    so read sites never coalesce fields themselves.
    """
    cards: List[Card] = []
    for rec in records:
        cards.append(Card(
            id=rec["id"],
            number=int(rec["number"]),
            name=rec["name"],
            name_czech=rec.get("nameCzech") or rec.get("czechName") or rec["name"],
            keywords=tuple(rec.get("keywords", ())),
            meaning_upright=rec["meaningUpright"],
            meaning_reversed=rec.get("meaningReversed"),
            suit=rec.get("suit") or suit,  # type: ignore[arg-type]
            image_name=rec.get("imageName") or rec["id"],
        ))
    return cards


def _build_catalog() -> List[Card]:
    """Build the catalog in a stable order: Major, Cups, Pentacles, Wands, Swords."""
    registry: List[Card] = []
    for records, suit in (
        (MAJOR_ARCANA, "Major Arcana"),
        (CUPS, "Cups"),
        (PENTACLES, "Pentacles"),
        (WANDS, "Wands"),
        (SWORDS, "Swords"),
    ):
        registry.extend(_normalize(records, suit))

    assert len(registry) == 78, f"Catalog size should be 78, got {len(registry)}"
    assert len({c.id for c in registry}) == len(registry), "Card ids must be unique"
    assert all(c.suit in SUITS for c in registry), "Unknown suit in catalog"
    return registry


CARD_REGISTRY: Tuple[Card, ...] = tuple(_build_catalog())
CARD_ID_INDEX: Dict[str, int] = {c.id: idx for idx, c in enumerate(CARD_REGISTRY)}  # quick lookup by id
_CARD_NAME_INDEX: Dict[str, int] = {c.name.lower(): idx for idx, c in enumerate(CARD_REGISTRY)}


def get_card(card_id: str) -> Card:
    """Return the card with this id; raise if unknown."""
    idx = CARD_ID_INDEX.get(card_id)
    if idx is None:
        raise InvalidParameterError(f"Unknown card id: {card_id}")
    return CARD_REGISTRY[idx]


def find_card(key: str) -> Optional[Card]:
    """Look a card up by id or canonical name (case-insensitive). None when unknown."""
    idx = CARD_ID_INDEX.get(key)
    if idx is None:
        idx = _CARD_NAME_INDEX.get(key.strip().lower())
    return CARD_REGISTRY[idx] if idx is not None else None


def cards_by_suit(suit: str) -> List[Card]:
    if suit not in SUITS:
        raise InvalidParameterError(f"Unknown suit: {suit}")
    return [c for c in CARD_REGISTRY if c.suit == suit]


def remaining_ids(exclude: Iterable[str]) -> List[str]:
    """Ids of every catalog card not named in `exclude` (ids or names)."""
    excluded = _resolve_ids(exclude)
    return [c.id for c in CARD_REGISTRY if c.id not in excluded]


def _resolve_ids(keys: Iterable[str]) -> set:
    ids = set()
    for key in keys:
        card = find_card(key)
        if card is not None:
            ids.add(card.id)
    return ids


# =========================
# RNG
# =========================

def _norm_seed(seed: Optional[Union[int, str]]) -> Optional[int]:
    """
    Normalize seed to int. If str, hash with sha256 and take the first 8 bytes
    as an unsigned 64-bit integer. None stays None.
    """
    if seed is None:
        return None
    if isinstance(seed, int):
        return seed
    if isinstance(seed, str):
        h = hashlib.sha256(seed.encode("utf-8")).digest()
        return int.from_bytes(h[:8], byteorder="big", signed=False)
    raise InvalidParameterError("seed must be int | str | None")


def make_rng(seed: Optional[Union[int, str]] = None) -> random.Random:
    """Random generator for draws; seeded draws are reproducible."""
    return random.Random(_norm_seed(seed))


# =========================
# Draw
# =========================

def draw_card(
    pool: Optional[Iterable[str]] = None,
    *,
    exclude: Optional[Iterable[str]] = None,
    rng: Optional[random.Random] = None,
    orientation_prob: float = 0.5,
    label: Optional[str] = None,
) -> DrawnCard:
    """
    Draw one card and give it a random orientation.

    Args:
        pool: card ids (or canonical names) to sample from; None means the full catalog.
              Entries unknown to the catalog are dropped.
        exclude: ids (or names) removed from the active pool.
        rng: random generator (see make_rng); module-level randomness when None.
        orientation_prob: probability of a reversed card in [0, 1].
        label: position label to attach to the drawn card.

    When filtering leaves nothing to draw from, the full unfiltered catalog is
    used instead. That can return a card listed in `exclude`.
    """
    if not (0.0 <= float(orientation_prob) <= 1.0):
        raise InvalidParameterError("orientation_prob must be within [0.0, 1.0]")
    rng = rng or random.Random()

    candidates: List[Card] = list(CARD_REGISTRY)
    if pool is not None:
        wanted = _resolve_ids(pool)
        candidates = [c for c in candidates if c.id in wanted]
    if exclude is not None:
        excluded = _resolve_ids(exclude)
        candidates = [c for c in candidates if c.id not in excluded]

    if not candidates:
        logger.warning("draw_pool_exhausted", fallback_size=len(CARD_REGISTRY))
        candidates = list(CARD_REGISTRY)

    card = rng.choice(candidates)
    orient: Orientation = "reversed" if rng.random() < float(orientation_prob) else "upright"
    return DrawnCard(card=card, orientation=orient, label=label)


def draw_sequence(
    count: int,
    pool: Optional[Iterable[str]] = None,
    *,
    rng: Optional[random.Random] = None,
    orientation_prob: float = 0.5,
    labels: Optional[Iterable[str]] = None,
) -> List[DrawnCard]:
    """
    Draw `count` cards without replacement.

    Every draw after the first excludes all cards drawn so far, so the cards are
    pairwise distinct as long as the (pool of the) catalog is large enough.
    """
    if not isinstance(count, int) or count <= 0:
        raise InvalidParameterError("count must be a positive integer")
    label_list = list(labels) if labels is not None else []
    if label_list and len(label_list) != count:
        raise InvalidParameterError(f"Expected {count} labels, got {len(label_list)}")

    rng = rng or random.Random()
    pool_list = list(pool) if pool is not None else None
    drawn: List[DrawnCard] = []
    for idx in range(count):
        drawn.append(draw_card(
            pool_list,
            exclude=[d.card.id for d in drawn],
            rng=rng,
            orientation_prob=orientation_prob,
            label=label_list[idx] if label_list else None,
        ))
    return drawn


def draw_spread(
    spread_id: str,
    seed: Optional[Union[int, str]] = None,
    orientation_prob: float = 0.5,
) -> List[DrawnCard]:
    """Draw one distinct card per position of a registered spread."""
    spread = get_spread(spread_id)
    return draw_sequence(
        spread.size,
        rng=make_rng(seed),
        orientation_prob=orientation_prob,
        labels=spread.labels,
    )
