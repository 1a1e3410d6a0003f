# -*- coding: utf-8 -*-
"""
progress.py — Persisted user progress (journal, streak, draw history, style).

ProgressStore is an explicit state container: consumers get a store instance
and change it only through its named methods. Each mutation writes the whole
record to the storage backend before it returns. A single local writer is
assumed.
"""

from __future__ import annotations

import copy
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Literal, Optional, Union

import structlog
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

load_dotenv()
STORAGE_KEY = "tarotka-progress"
DATA_DIR = os.getenv("TAROTKA_DATA_DIR", str(Path.home() / ".tarotka"))

MicrocopyStyle = Literal["soft", "genz"]
MICROCOPY_STYLES = ("soft", "genz")

logger = structlog.get_logger(__name__)


# =========================
# Record
# =========================

class JournalEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    card_id: str = Field(alias="cardId")
    position: Literal["upright", "reversed"]
    date: str                      # ISO 8601
    note: Optional[str] = None


class ProgressRecord(BaseModel):
    """Serialized under one storage key with camelCase field names."""
    model_config = ConfigDict(populate_by_name=True)

    journal_entries: int = Field(0, ge=0, alias="journalEntries")
    streak_days: int = Field(0, ge=0, alias="streakDays")
    draw_history: List[str] = Field(default_factory=list, alias="drawHistory")
    journal_history: List[JournalEntry] = Field(default_factory=list, alias="journalHistory")
    user_microcopy_style: MicrocopyStyle = Field("soft", alias="userMicrocopyStyle")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, raw: str) -> "ProgressRecord":
        return cls.model_validate_json(raw)


# =========================
# Storage backends
# =========================

class MemoryStorage:
    """Key/value storage kept in a dict (tests, ephemeral sessions)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage:
    """
    Key/value storage with one `<key>.json` file per key in `directory`.

    Writes go to a temporary file first and replace the target, so a crash
    mid-write leaves the previous blob intact.
    """

    def __init__(self, directory: Union[str, Path, None] = None):
        self.directory = Path(directory or DATA_DIR)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp, self._path(key))
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise


# =========================
# Store
# =========================

class ProgressStore:
    def __init__(self, storage=None, key: str = STORAGE_KEY):
        self.storage = storage if storage is not None else JsonFileStorage()
        self.key = key
        self._record = self._load()

    def _load(self) -> ProgressRecord:
        raw = self.storage.get(self.key)
        if raw is None:
            return ProgressRecord()
        try:
            return ProgressRecord.from_json(raw)
        except ValidationError as e:
            # The unreadable blob is replaced on the next mutation.
            logger.warning("progress_record_invalid", key=self.key, errors=e.error_count())
            return ProgressRecord()

    def _persist(self) -> None:
        self.storage.set(self.key, self._record.to_json())

    @property
    def record(self) -> ProgressRecord:
        """Snapshot of the current record; changing it does not touch the store."""
        return copy.deepcopy(self._record)

    # ---- mutations ----

    def add_journal_entry(self) -> None:
        self._record.journal_entries += 1
        self._persist()

    def increase_streak(self) -> None:
        self._record.streak_days += 1
        self._persist()

    def reset_streak(self) -> None:
        self._record.streak_days = 0
        self._persist()

    def add_draw(self, card_id: str) -> None:
        self._record.draw_history.append(card_id)
        self._persist()

    def append_journal_history(self, entry: Union[JournalEntry, dict]) -> None:
        if not isinstance(entry, JournalEntry):
            entry = JournalEntry.model_validate(entry)
        self._record.journal_history.append(entry)
        self._persist()

    def update_entry_note(self, entry_id: str, text: str) -> None:
        """Set the note of a journal entry; unknown ids are ignored."""
        for entry in self._record.journal_history:
            if entry.id == entry_id:
                entry.note = text
                self._persist()
                return
        logger.debug("journal_entry_not_found", entry_id=entry_id)

    def set_style(self, style: str) -> None:
        if style not in MICROCOPY_STYLES:
            raise ValueError(f"Unknown microcopy style: {style!r}")
        self._record.user_microcopy_style = style  # type: ignore[assignment]
        self._persist()
