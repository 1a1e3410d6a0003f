"""Tests for insight derivation and microcopy rendering."""

from __future__ import annotations

from tarotka.insights import (
    DEFAULT_OUTPUTS,
    Insight,
    derive_insights,
    favorite_card_id,
    get_insights,
    render_insights,
)
from tarotka.progress import JournalEntry, ProgressRecord
from tarotka.tarot_core import CARD_REGISTRY


def _history(*card_ids: str):
    return [
        JournalEntry(id=str(i), card_id=cid, position="upright", date="2026-10-19T08:00:00")
        for i, cid in enumerate(card_ids)
    ]


def test_journal_threshold_only() -> None:
    record = ProgressRecord(journal_entries=5)
    assert derive_insights(record) == [Insight("Journal", {"entries": 5})]


def test_empty_record_renders_defaults() -> None:
    record = ProgressRecord()
    assert derive_insights(record) == []
    outputs = get_insights(record)
    assert [o.text for o in outputs] == [
        "Vytáhni svou první kartu!",
        "Pravidelné čtení ti odhalí tajemství.",
    ]
    assert outputs == list(DEFAULT_OUTPUTS)


def test_below_thresholds_gives_nothing() -> None:
    record = ProgressRecord(journal_entries=4, streak_days=2,
                            journal_history=_history("major_08_strength", "major_08_strength"))
    assert derive_insights(record) == []


def test_streak_threshold() -> None:
    assert derive_insights(ProgressRecord(streak_days=3)) == [Insight("Streak", {"days": 3})]


def test_favorite_needs_more_than_two() -> None:
    record = ProgressRecord(journal_history=_history(*["major_17_the_star"] * 3))
    assert derive_insights(record) == [Insight("Favorite", {"card": "Hvězda"})]


def test_favorite_tie_goes_to_first_encountered() -> None:
    record = ProgressRecord(journal_history=_history(
        "minor_cups_ace", "major_19_the_sun", "major_19_the_sun",
        "minor_cups_ace", "major_19_the_sun", "minor_cups_ace",
    ))
    assert favorite_card_id(record) == "minor_cups_ace"


def test_draw_history_alone_yields_no_insight() -> None:
    ids = [c.id for c in CARD_REGISTRY[:12]]
    assert derive_insights(ProgressRecord(draw_history=ids)) == []
    record = ProgressRecord(journal_entries=5, draw_history=ids[:10])
    assert derive_insights(record) == [Insight("Journal", {"entries": 5})]


def test_all_three_kinds_are_rendered_in_order() -> None:
    record = ProgressRecord(
        journal_entries=6,
        streak_days=4,
        draw_history=[c.id for c in CARD_REGISTRY[:10]],
        journal_history=_history(*["major_00_the_fool"] * 3),
    )
    outputs = render_insights(derive_insights(record), "soft")
    assert [o.type for o in outputs] == ["Journal", "Streak", "Favorite"]
    assert outputs[0].text == "6 zápisů — krásně nasloucháš sama sobě."
    assert outputs[2].text == "Blázen se objevuje často — všímáš si jeho poselství?"


def test_genz_style() -> None:
    record = ProgressRecord(streak_days=7, user_microcopy_style="genz")
    assert [o.text for o in get_insights(record)] == ["7 dní v řadě — consistency queen 👑"]


def test_unknown_favorite_id_keeps_raw_id() -> None:
    record = ProgressRecord(journal_history=_history(*["retired_card"] * 3))
    assert derive_insights(record) == [Insight("Favorite", {"card": "retired_card"})]


def test_render_keeps_only_last_three() -> None:
    insights = [
        Insight("Milestone", {"progress": 10}),
        Insight("Journal", {"entries": 5}),
        Insight("Streak", {"days": 3}),
        Insight("Favorite", {"card": "Mág"}),
    ]
    outputs = render_insights(insights, "genz")
    assert [o.type for o in outputs] == ["Journal", "Streak", "Favorite"]
    assert outputs[2].text == "Mág tě doslova stalkuje 👀"
