"""Tests for the card catalog, spreads and the draw engine."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from tarotka import tarot_core
from tarotka.tarot_core import (
    CARD_REGISTRY,
    SUITS,
    InvalidParameterError,
    InvalidSpreadError,
    draw_card,
    draw_sequence,
    draw_spread,
    find_card,
    get_card,
    make_rng,
    remaining_ids,
)

CATALOG_SIZE = 78
MINOR_SUIT_SIZE = 14
MAJOR_SIZE = 22


def test_catalog_size_and_unique_ids() -> None:
    assert len(CARD_REGISTRY) == CATALOG_SIZE
    assert len({c.id for c in CARD_REGISTRY}) == CATALOG_SIZE


def test_catalog_suits_are_normalized() -> None:
    counts = Counter(c.suit for c in CARD_REGISTRY)
    assert set(counts) == set(SUITS)
    assert counts["Major Arcana"] == MAJOR_SIZE
    for suit in ("Cups", "Pentacles", "Wands", "Swords"):
        assert counts[suit] == MINOR_SUIT_SIZE


def test_catalog_order_starts_with_major_arcana() -> None:
    assert CARD_REGISTRY[0].id == "major_00_the_fool"
    assert CARD_REGISTRY[MAJOR_SIZE].suit == "Cups"


def test_localized_name_and_image_key_are_filled_in() -> None:
    # cups are authored with `czechName`, wands without image keys
    ace_of_cups = get_card("minor_cups_ace")
    assert ace_of_cups.name_czech == "Eso pohárů"
    ten_of_wands = get_card("minor_wands_10")
    assert ten_of_wands.name_czech == "Desítka holí"
    assert ten_of_wands.image_name == "minor_wands_10"
    assert all(c.name_czech for c in CARD_REGISTRY)


def test_optional_reversed_meaning_falls_back_to_upright() -> None:
    card = get_card("minor_cups_6")
    assert card.meaning_reversed is None
    drawn = tarot_core.DrawnCard(card=card, orientation="reversed")
    assert drawn.meaning == card.meaning_upright


def test_find_card_by_id_or_name() -> None:
    assert find_card("major_01_the_magician").name_czech == "Mág"
    assert find_card("the magician").id == "major_01_the_magician"
    assert find_card("no such card") is None


def test_get_card_unknown_raises() -> None:
    with pytest.raises(InvalidParameterError):
        get_card("minor_cups_99")


def test_draw_returns_catalog_member_and_valid_orientation() -> None:
    rng = random.Random(7)
    for _ in range(200):
        drawn = draw_card(rng=rng)
        assert drawn.card in CARD_REGISTRY
        assert drawn.orientation in ("upright", "reversed")


def test_orientation_is_roughly_even() -> None:
    rng = random.Random(42)
    reversed_count = sum(draw_card(rng=rng).is_reversed for _ in range(2000))
    assert 850 < reversed_count < 1150


def test_draw_restricted_to_pool() -> None:
    pool = ["minor_swords_ace", "minor_swords_2", "not-a-card"]
    rng = random.Random(1)
    for _ in range(50):
        assert draw_card(pool, rng=rng).card.id in {"minor_swords_ace", "minor_swords_2"}


def test_pool_accepts_card_names() -> None:
    drawn = draw_card(["The Sun"], rng=random.Random(3))
    assert drawn.card.id == "major_19_the_sun"


def test_empty_pool_falls_back_to_full_catalog() -> None:
    drawn = draw_card(["unknown-1", "unknown-2"], rng=random.Random(5))
    assert drawn.card in CARD_REGISTRY


def test_exclusion_emptying_pool_falls_back_to_full_catalog() -> None:
    pool = ["major_17_the_star"]
    drawn = draw_card(pool, exclude=pool, rng=random.Random(9))
    assert drawn.card in CARD_REGISTRY


def test_sequential_exclusion_gives_distinct_cards() -> None:
    rng = make_rng("love-spread")
    first = draw_card(rng=rng)
    second = draw_card(remaining_ids([first.card.id]), rng=rng)
    third = draw_card(remaining_ids([first.card.name, second.card.name]), rng=rng)
    assert len({first.card.id, second.card.id, third.card.id}) == 3


def test_draw_sequence_without_replacement() -> None:
    for seed in range(30):
        cards = draw_sequence(7, rng=random.Random(seed))
        assert len({d.card.id for d in cards}) == 7


def test_draw_sequence_small_pool_reintroduces_cards() -> None:
    pool = ["minor_cups_2", "minor_cups_3"]
    cards = draw_sequence(3, pool, rng=random.Random(0))
    assert {d.card.id for d in cards[:2]} == set(pool)
    assert cards[2].card in CARD_REGISTRY


def test_draw_sequence_label_count_mismatch() -> None:
    with pytest.raises(InvalidParameterError):
        draw_sequence(3, labels=["Ty", "Partner"])


def test_seeded_draws_are_reproducible() -> None:
    a = draw_spread("week", seed="demo-user-001")
    b = draw_spread("week", seed="demo-user-001")
    assert [(d.card.id, d.orientation) for d in a] == [(d.card.id, d.orientation) for d in b]


def test_draw_spread_attaches_labels() -> None:
    cards = draw_spread("love", seed=11)
    assert [d.label for d in cards] == ["Ty", "Partner", "Vaše pouto"]


def test_unknown_spread_raises() -> None:
    with pytest.raises(InvalidSpreadError):
        tarot_core.get_spread("celtic_cross")


def test_invalid_orientation_probability() -> None:
    with pytest.raises(InvalidParameterError):
        draw_card(orientation_prob=1.5)


def test_cards_by_suit() -> None:
    wands = tarot_core.cards_by_suit("Wands")
    assert len(wands) == MINOR_SUIT_SIZE
    assert wands[0].id == "minor_wands_ace"
    with pytest.raises(InvalidParameterError):
        tarot_core.cards_by_suit("Coins")
