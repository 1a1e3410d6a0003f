"""Tests for reading prompt construction."""

from __future__ import annotations

import pytest

from tarotka.prompts import (
    GENERIC_QUESTIONS,
    SYSTEM_PROMPT,
    build_prompt,
    get_mode,
    to_universe_card,
)
from tarotka.schemas import UniverseCard
from tarotka.tarot_core import DrawnCard, get_card

FOCUS = "ZAMĚŘ SE NA OTÁZKU"


def _love_cards():
    return [
        UniverseCard(name="Ten of Wands", nameCzech="Desítka holí", position="upright", label="Ty"),
        UniverseCard(name="Four of Cups", nameCzech="Čtyřka pohárů", position="reversed", label="Partner"),
        UniverseCard(name="Two of Cups", nameCzech="Dvojka pohárů", position="upright", label="Vaše pouto"),
    ]


@pytest.mark.parametrize("question", list(GENERIC_QUESTIONS) + ["", "   ", None, "  Celkový výhled  "])
def test_generic_or_empty_question_has_no_focus_directive(question) -> None:
    prompt = build_prompt("Láska a vztahy", _love_cards(), question, "love_3_card")
    assert FOCUS not in prompt


def test_custom_question_appears_once_verbatim() -> None:
    question = "Ozve se mi do konce měsíce?"
    prompt = build_prompt("Láska a vztahy", _love_cards(), question, "love_3_card")
    assert prompt.count(question) == 1
    assert f'{FOCUS}: "{question}"' in prompt


def test_multi_item_lists_cards_in_order_with_labels() -> None:
    prompt = build_prompt("Láska a vztahy", _love_cards(), None, "love_3_card")
    lines = [l for l in prompt.splitlines() if l.startswith("Karta ")]
    assert lines == [
        "Karta 1 (Ty): Desítka holí (Vzpřímená)",
        "Karta 2 (Partner): Čtyřka pohárů (Obrácená)",
        "Karta 3 (Vaše pouto): Dvojka pohárů (Vzpřímená)",
    ]
    assert "TYP VÝKLADU: Láska a vztahy" in prompt


def test_multi_item_generates_position_labels() -> None:
    cards = [UniverseCard(name="The Sun"), UniverseCard(name="The Moon", position="reversed")]
    prompt = build_prompt("Bez názvu", cards, None, "reading-screen")
    assert "Karta 1 (Pozice 1): The Sun (Vzpřímená)" in prompt
    assert "Karta 2 (Pozice 2): The Moon (Obrácená)" in prompt


def test_single_item_has_no_label() -> None:
    card = UniverseCard(name="The Fool", nameCzech="Blázen", position="upright", label="Karta dne")
    prompt = build_prompt("Karta dne", [card], None, "daily")
    assert "Karta: Blázen (Vzpřímená)" in prompt
    assert "Karta 1" not in prompt
    assert "(Karta dne)" not in prompt


def test_drawn_cards_are_accepted() -> None:
    drawn = DrawnCard(card=get_card("major_18_the_moon"), orientation="reversed", label="Vzkaz luny")
    wire = to_universe_card(drawn)
    assert wire.nameCzech == "Měsíc" and wire.position == "reversed" and wire.label == "Vzkaz luny"
    prompt = build_prompt("Měsíční fáze", [drawn], None, "moon_phase", moon_context="Aktuální fáze měsíce: 🌕 Úplněk")
    assert "Karta: Měsíc (Obrácená)" in prompt
    assert "Úplněk" in prompt


def test_unknown_mode_falls_back_to_daily() -> None:
    assert get_mode("tarot-v9").name == "daily"
    assert get_mode(None).name == "daily"


def test_system_prompt_is_fixed_and_names_four_sections() -> None:
    for label in ("**OBRAZ**", "**NAPĚTÍ**", "**STÍN**", "**OTEVŘENÍ**"):
        assert label in SYSTEM_PROMPT
    prompt = build_prompt("Finance", _love_cards(), "Co s penězi?", "reading-screen")
    assert SYSTEM_PROMPT not in prompt


def test_question_is_quoted_without_surrounding_whitespace() -> None:
    prompt = build_prompt("Láska a vztahy", _love_cards(), "  Ozve se  mi?\n", "love_3_card")
    assert f'{FOCUS}: "Ozve se  mi?"' in prompt
