"""
Question bank: read-only mapping from mode to its ordered question pool.

The bank is loaded once before any session starts. Records that fail
validation are skipped so that one bad entry does not take a whole mode down.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from importlib import resources
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from .errors import BankLoadError
from .models import Mode, Question, parse_question


class QuestionBank:
    """Immutable collection of question pools keyed by mode."""

    def __init__(self, pools: Mapping[Mode | str, Sequence[Question]] | None = None):
        self._pools: dict[Mode, tuple[Question, ...]] = {}
        for mode, questions in (pools or {}).items():
            self._pools[Mode(mode)] = tuple(questions)
        self.rejected: list[str] = []

    def pool(self, mode: Mode | str) -> tuple[Question, ...]:
        """Questions for a mode, in bank order. Missing modes are empty."""
        try:
            return self._pools.get(Mode(mode), ())
        except ValueError:
            return ()

    def modes(self) -> list[Mode]:
        return [mode for mode in Mode if self._pools.get(mode)]

    def counts_by_level(self, mode: Mode | str) -> dict[int, int]:
        counts: dict[int, int] = {}
        for question in self.pool(mode):
            counts[question.level] = counts.get(question.level, 0) + 1
        return dict(sorted(counts.items()))

    def __len__(self) -> int:
        return sum(len(pool) for pool in self._pools.values())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QuestionBank":
        """Build a bank from raw ``{mode: [record, ...]}`` data."""
        pools: dict[Mode, list[Question]] = {}
        rejected: list[str] = []

        for key, records in data.items():
            try:
                mode = Mode(key)
            except ValueError:
                logger.warning(f"Ignoring unknown mode '{key}' in question bank")
                continue

            if not isinstance(records, list):
                logger.warning(f"Ignoring mode '{key}': expected a list of questions")
                rejected.append(f"{key}: not a list")
                continue

            pool = pools.setdefault(mode, [])
            for position, record in enumerate(records):
                if not isinstance(record, dict):
                    rejected.append(f"{key}[{position}]: not an object")
                    logger.warning(f"Skipping {key}[{position}]: not an object")
                    continue
                try:
                    pool.append(parse_question(mode, record))
                except ValidationError as e:
                    rejected.append(f"{key}[{position}]: {e.error_count()} validation error(s)")
                    logger.warning(f"Skipping {key}[{position}]: {e.errors()[0]['msg']}")

        bank = cls(pools)
        bank.rejected = rejected
        logger.debug(f"Loaded question bank with {len(bank)} questions")
        return bank

    @classmethod
    def from_file(cls, path: Path | str) -> "QuestionBank":
        """Load a bank from a JSON file."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise BankLoadError(f"Cannot load question bank {path}: {e}") from e

        if not isinstance(data, dict):
            raise BankLoadError(f"Question bank {path} must be a JSON object keyed by mode")
        return cls.from_dict(data)

    @classmethod
    def load_default(cls) -> "QuestionBank":
        """Load the sample bank shipped with the package."""
        source = resources.files("econ_quiz.data").joinpath("questions.json")
        with resources.as_file(source) as path:
            return cls.from_file(path)
