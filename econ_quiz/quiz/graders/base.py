"""
Base protocol and types for answer graders.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Protocol

TOKEN_SPLIT = re.compile(r"\W+", re.ASCII)


@dataclass
class GradeResult:
    """Result of grading one submitted answer."""
    correct: bool
    matched: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    feedback: str = ""
    correct_answer: str = ""


def as_text(answer: Any) -> str:
    """Coerce a raw submission to text; ``None`` becomes empty."""
    if answer is None:
        return ""
    return answer if isinstance(answer, str) else str(answer)


def is_blank(answer: Any) -> bool:
    return not as_text(answer).strip()


def tokenize(text: str) -> list[str]:
    """Lower-cased word tokens, split on runs of non-ASCII-word characters."""
    return [token for token in TOKEN_SPLIT.split(text.lower()) if token]


class Grader(Protocol):
    """Protocol for grading rules."""

    def check(self, question: Any, answer: Any) -> GradeResult:
        """Score ``answer`` against ``question``. Never raises on bad input."""
        ...
