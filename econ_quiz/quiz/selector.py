"""
Question selection for a session.

Levels are cumulative: choosing level 2 also draws level 1 questions.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from loguru import logger

from .models import Question


def eligible(pool: Sequence[Question], level: int) -> list[Question]:
    """Questions at or below the selected level, in pool order."""
    return [q for q in pool if q.level == level or q.level < level]


def select(
    pool: Sequence[Question],
    level: int,
    rng: random.Random | None = None,
) -> list[Question]:
    """
    Build the ordered question list for one session.

    Falls back to the whole pool when nothing is eligible at ``level`` so a
    non-empty bank never yields an empty session. The result is a shuffled
    copy; ``pool`` itself is never reordered.
    """
    working = eligible(pool, level)
    if not working and pool:
        logger.warning(f"No questions at level <= {level}; using all {len(pool)} questions")
        working = list(pool)

    (rng or random).shuffle(working)
    return working
