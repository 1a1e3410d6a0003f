"""Wire models shared by the reading service (api/main.py) and its client (universe.py)."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class UniverseCard(BaseModel):
    name: str
    nameCzech: Optional[str] = None
    position: Literal["upright", "reversed"] = "upright"
    label: Optional[str] = None   # e.g. "Ty", "Partner", "Minulost"


class ReadingRequest(BaseModel):
    spreadName: str = ""
    cards: List[UniverseCard] = Field(default_factory=list)
    question: Optional[str] = None
    mode: str = "daily"
    moonPhase: Optional[str] = Field(None, description="Moon phase context for moon readings")


class ReadingAnswer(BaseModel):
    answer: str


class ReadingError(BaseModel):
    error: str
    answer: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    has_gemini_token: bool
