from datetime import datetime, timedelta, timezone

from tarotka.moon import MOON_PHASES, REFERENCE_NEW_MOON, SYNODIC_MONTH, get_moon_context, get_moon_phase


def test_reference_date_is_new_moon() -> None:
    phase = get_moon_phase(REFERENCE_NEW_MOON)
    assert phase.name == "Novoluní"
    assert phase.age == 0


def test_half_cycle_is_full_moon() -> None:
    phase = get_moon_phase(REFERENCE_NEW_MOON + timedelta(days=14.77))
    assert phase.name == "Úplněk"
    assert 0.49 < phase.percentage < 0.51


def test_cycles_repeat() -> None:
    a = get_moon_phase(REFERENCE_NEW_MOON + timedelta(days=3))
    b = get_moon_phase(REFERENCE_NEW_MOON + timedelta(days=3 + 10 * SYNODIC_MONTH))
    assert a.name == b.name == "Dorůstající srpek"


def test_dates_before_reference() -> None:
    phase = get_moon_phase(REFERENCE_NEW_MOON - timedelta(days=1))
    assert phase.name == "Novoluní"
    assert 0 <= phase.age < SYNODIC_MONTH


def test_naive_datetime_is_utc() -> None:
    naive = datetime(2024, 3, 25, 12, 0)
    assert get_moon_phase(naive) == get_moon_phase(naive.replace(tzinfo=timezone.utc))


def test_context_lines() -> None:
    context = get_moon_context(REFERENCE_NEW_MOON)
    first, theme, description, energy = context.split("\n")
    assert first == "Aktuální fáze měsíce: 🌑 Novoluní"
    assert theme == f"Téma: {MOON_PHASES[0].theme}"
    assert (description, energy) == (MOON_PHASES[0].description, MOON_PHASES[0].energy)
