"""Tests for the reading service endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.main import NO_CARDS_ANSWER, UNAVAILABLE_ANSWER, app
from tarotka import llm

LOVE_REQUEST = {
    "spreadName": "Láska a vztahy",
    "mode": "love_3_card",
    "question": "Ozve se mi do konce měsíce?",
    "cards": [
        {"name": "Ten of Wands", "nameCzech": "Desítka holí", "position": "upright", "label": "Ty"},
        {"name": "Four of Cups", "nameCzech": "Čtyřka pohárů", "position": "reversed", "label": "Partner"},
        {"name": "Two of Cups", "nameCzech": "Dvojka pohárů", "position": "upright", "label": "Vaše pouto"},
    ],
}


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def captured(monkeypatch):
    calls = []

    def fake_chat(prompt, system=None, model=None, temperature=None):
        calls.append({"prompt": prompt, "system": system})
        return "**Ty:** A\n**Partner:** B\n**Vaše pouto:** C"

    monkeypatch.setattr(llm, "chat", fake_chat)
    return calls


def test_health(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["version"] == "0.2.0"


def test_spreads_listing(client) -> None:
    spreads = {s["id"]: s for s in client.get("/v1/spreads").json()["spreads"]}
    assert spreads["love"]["labels"] == ["Ty", "Partner", "Vaše pouto"]
    assert spreads["love"]["mode"] == "love_3_card"
    assert spreads["daily"]["labels"] == ["Karta dne"]


def test_reading_success(client, captured) -> None:
    r = client.post("/api/chat", json=LOVE_REQUEST)
    assert r.status_code == 200
    assert r.json() == {"answer": "**Ty:** A\n**Partner:** B\n**Vaše pouto:** C"}

    prompt = captured[0]["prompt"]
    assert "Karta 2 (Partner): Čtyřka pohárů (Obrácená)" in prompt
    assert prompt.count("Ozve se mi do konce měsíce?") == 1
    assert "**OTEVŘENÍ**" in captured[0]["system"]


def test_moon_context_reaches_prompt(client, captured) -> None:
    body = {
        "spreadName": "Měsíční fáze",
        "mode": "moon_phase",
        "moonPhase": "Aktuální fáze měsíce: 🌕 Úplněk",
        "cards": [{"name": "The Moon", "nameCzech": "Měsíc", "position": "upright"}],
    }
    assert client.post("/api/chat", json=body).status_code == 200
    assert "Aktuální fáze měsíce: 🌕 Úplněk" in captured[0]["prompt"]


def test_no_cards_is_rejected(client, captured) -> None:
    r = client.post("/api/chat", json={"spreadName": "Karta dne", "cards": []})
    assert r.status_code == 400
    assert r.json()["answer"] == NO_CARDS_ANSWER
    assert captured == []


def test_missing_token(client, monkeypatch) -> None:
    monkeypatch.setattr(llm, "GEMINI_TOKEN", None)
    r = client.post("/api/chat", json=LOVE_REQUEST)
    assert r.status_code == 500
    assert "GEMINI_TOKEN" in r.json()["error"]
    assert r.json()["answer"] == UNAVAILABLE_ANSWER


def test_upstream_failure(client, monkeypatch) -> None:
    def boom(prompt, system=None, model=None, temperature=None):
        raise TimeoutError("upstream timed out")

    monkeypatch.setattr(llm, "chat", boom)
    r = client.post("/api/chat", json=LOVE_REQUEST)
    assert r.status_code == 502
    assert r.json()["error"] == "TimeoutError: upstream timed out"


def test_empty_model_answer(client, monkeypatch) -> None:
    monkeypatch.setattr(llm, "chat", lambda prompt, system=None: "   ")
    r = client.post("/api/chat", json=LOVE_REQUEST)
    assert r.status_code == 502
    assert r.json()["answer"] == UNAVAILABLE_ANSWER
