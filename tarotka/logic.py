"""
logic.py — Orchestration layer that ties tarot_core mechanics to UI/API needs.

Responsibilities:
- Provide a single high-level entry point `perform_reading(...)` for the UI.
- Draw the spread's cards without repeats, send them to the reading service,
  and parse the answer into one meaning per spread position.
- Return a fully structured JSON-like dict that the UI can consume directly.
- Save a drawn card into the user's journal (`save_reading(...)`).

Notes:
- Image assets are expected under: ./assets/cards/{image_name}.png
- Request-level failures (service unreachable, misconfigured) are reported in
  the result's "error" block; per-position parsing failures only replace that
  position's meaning with MEANING_UNAVAILABLE.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

import structlog

from . import tarot_core
from .moon import get_moon_context
from .parsing import MEANING_UNAVAILABLE, parse
from .progress import JournalEntry, ProgressStore
from .prompts import to_universe_card
from .schemas import ReadingRequest
from .universe import ServiceUnavailableError, UniverseClient

logger = structlog.get_logger(__name__)


# -----------------------------------------------------------------------------
# Paths & utilities
# -----------------------------------------------------------------------------

# Project root (resolve relative to this file)
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
CARD_ASSETS_DIR = os.path.join(_PROJECT_ROOT, "assets", "cards")


def get_card_image_path(image_name: str, ext: str = "png") -> str:
    """
    Build a file path to a card image:
      ./assets/cards/{image_name}.png

    The function returns the path string regardless of whether the file exists.
    """
    return os.path.join(CARD_ASSETS_DIR, f"{image_name}.{ext}")


def serialize_drawn(drawn: tarot_core.DrawnCard, index: int, image_ext: str = "png") -> Dict[str, Any]:
    card = drawn.card
    return {
        "card_id": card.id,
        "card_name": card.name,
        "card_name_czech": card.name_czech,
        "suit": card.suit,
        "keywords": list(card.keywords),
        "orientation": drawn.orientation,
        "label": drawn.label,
        "index": index,
        "static_meaning": drawn.meaning,
        "image_path": get_card_image_path(card.image_name, ext=image_ext),
    }


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def build_request(
    spread: tarot_core.SpreadDef,
    drawn: List[tarot_core.DrawnCard],
    question: Optional[str] = None,
    when: Optional[datetime] = None,
) -> ReadingRequest:
    """Wire request for a drawn spread; the moon spread carries the current phase."""
    return ReadingRequest(
        spreadName=spread.name,
        cards=[to_universe_card(d) for d in drawn],
        question=question,
        mode=spread.mode,
        moonPhase=get_moon_context(when) if spread.id == "moon" else None,
    )


def perform_reading(
    spread: str = "daily",
    question: Optional[str] = None,
    *,
    client: Optional[UniverseClient] = None,
    seed: Optional[Union[int, str]] = None,
    orientation_prob: float = 0.5,
    when: Optional[datetime] = None,
    image_ext: str = "png",
) -> Dict[str, Any]:
    """
    Perform a tarot reading through the reading service.

    Args:
        spread: Spread id (see tarot_core.SPREAD_REGISTRY).
        question: User's question (None/empty/generic means no focus directive).
        client: Reading service client, left open for reuse. When None a
                UniverseClient is created for this call and closed afterwards.
        seed: Reproducibility seed for the draw (int or str).
        orientation_prob: Probability for a reversed orientation, [0, 1].
        when: Reference time for the moon spread (now when None).
        image_ext: Card image file extension (default "png").

    Returns:
        A JSON-serializable dict:

        {
          "meta": {"spread": str, "spread_name": str, "mode": str, "question": str|null},
          "cards": [{card_id, card_name, card_name_czech, suit, keywords,
                     orientation, label, index, static_meaning, image_path}, ...],
          "meanings": [str, ...],        # one per card, same order
          "error": null | {"message": str, "debug": str|null}
        }
    """
    spread_def = tarot_core.get_spread(spread)
    drawn = tarot_core.draw_sequence(
        spread_def.size,
        rng=tarot_core.make_rng(seed),
        orientation_prob=orientation_prob,
        labels=spread_def.labels,
    )
    request = build_request(spread_def, drawn, question=question, when=when)

    result: Dict[str, Any] = {
        "meta": {
            "spread": spread_def.id,
            "spread_name": spread_def.name,
            "mode": spread_def.mode,
            "question": question or None,
        },
        "cards": [serialize_drawn(d, idx, image_ext) for idx, d in enumerate(drawn)],
        "meanings": [MEANING_UNAVAILABLE] * len(drawn),
        "error": None,
    }

    try:
        if client is None:
            with UniverseClient() as own_client:
                answer = own_client.send(request)
        else:
            answer = client.send(request)
    except ServiceUnavailableError as e:
        logger.warning("reading_failed", spread=spread_def.id, debug=e.debug)
        result["error"] = {"message": e.message, "debug": e.debug}
        return result

    result["meanings"] = parse(answer, list(spread_def.labels))
    return result


def save_reading(
    store: ProgressStore,
    drawn: tarot_core.DrawnCard,
    note: Optional[str] = None,
    when: Optional[datetime] = None,
) -> JournalEntry:
    """Record a drawn card in the journal and the draw history."""
    when = when or datetime.now(timezone.utc)
    entry = JournalEntry(
        id=str(int(when.timestamp() * 1000)),
        card_id=drawn.card.id,
        position=drawn.orientation,
        date=when.isoformat(),
        note=note,
    )
    store.append_journal_history(entry)
    store.add_journal_entry()
    store.add_draw(drawn.card.id)
    return entry
