"""
Progress marker persistence.

Only the most recently completed session is kept; every completion
overwrites the previous record. The record is informational (shown as a
hint in the menu) and is never read back into session logic.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol, Union

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from .models import Mode


class ProgressRecord(BaseModel):
    """Summary of the last completed session."""

    mode: Mode
    level: int
    correct: list[Union[bool, list[bool]]] = Field(default_factory=list)
    completed_at: datetime = Field(default_factory=datetime.now)

    @property
    def correct_count(self) -> int:
        total = 0
        for flag in self.correct:
            if isinstance(flag, list):
                total += sum(1 for f in flag if f)
            elif flag:
                total += 1
        return total

    @property
    def graded_count(self) -> int:
        return sum(len(f) if isinstance(f, list) else 1 for f in self.correct)


class ProgressStore(Protocol):
    """Key-value slot holding one ProgressRecord."""

    def get(self) -> Optional[ProgressRecord]:
        ...

    def set(self, record: ProgressRecord) -> None:
        ...


class MemoryProgressStore:
    """In-process store; nothing survives the interpreter."""

    def __init__(self, record: Optional[ProgressRecord] = None):
        self._record = record

    def get(self) -> Optional[ProgressRecord]:
        return self._record

    def set(self, record: ProgressRecord) -> None:
        self._record = record


class JsonProgressStore:
    """
    Stores the progress record as a single JSON file.

    A missing or corrupt file reads as "no progress yet".
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def get(self) -> Optional[ProgressRecord]:
        if not self.path.exists():
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return ProgressRecord.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable progress file {self.path}: {e}")
            return None

    def set(self, record: ProgressRecord) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(record.model_dump_json(indent=2))
        logger.debug(f"Saved progress to {self.path}")
