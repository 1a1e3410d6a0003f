from types import SimpleNamespace

import pytest

from tarotka import llm


class _NoQuickText:
    """Mimics a response whose aggregated .text accessor raises."""

    def __init__(self, parts):
        self.candidates = [SimpleNamespace(content=SimpleNamespace(parts=parts))]

    @property
    def text(self):
        raise ValueError("no simple text part")


def test_extract_text_prefers_quick_accessor() -> None:
    assert llm._extract_text(SimpleNamespace(text="**OBRAZ** Klid.")) == "**OBRAZ** Klid."


def test_extract_text_joins_candidate_parts() -> None:
    resp = _NoQuickText([SimpleNamespace(text="První"), SimpleNamespace(text=None), SimpleNamespace(text="Druhá")])
    assert llm._extract_text(resp) == "První\nDruhá"


def test_chat_requires_token(monkeypatch) -> None:
    monkeypatch.setattr(llm, "GEMINI_TOKEN", None)
    with pytest.raises(llm.ConfigurationError):
        llm.chat("prompt")
