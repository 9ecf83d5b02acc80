"""
Answer graders for quiz sessions.

Each grading rule has its own module with a ``check()`` method. Question
kinds map onto rules through ``MODE_RULES``; case-study parts are always
graded by token overlap.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any

from ..models import CaseSubQuestion, Mode
from .base import GradeResult

if TYPE_CHECKING:
    from .base import Grader


class GradingRule(str, Enum):
    """Supported grading rules."""
    KEYWORD = "keyword"
    NUMERIC = "numeric"
    EXACT = "exact"
    TOKEN_OVERLAP = "token_overlap"


# Grader registry - populated by @register decorator
GRADERS: dict[GradingRule, "Grader"] = {}

MODE_RULES: dict[Mode, GradingRule] = {
    Mode.DIAGRAM: GradingRule.KEYWORD,
    Mode.ESSAY: GradingRule.KEYWORD,
    Mode.CALCULATION: GradingRule.NUMERIC,
    Mode.FLASH: GradingRule.EXACT,
}


def register(rule: GradingRule):
    """Decorator to register a grader."""
    def decorator(cls):
        GRADERS[rule] = cls()
        return cls
    return decorator


def rule_for(question: Any) -> GradingRule | None:
    """Grading rule for a question or case-study part."""
    if isinstance(question, CaseSubQuestion):
        return GradingRule.TOKEN_OVERLAP
    mode = getattr(question, "mode", None)
    if mode is None:
        return None
    return MODE_RULES.get(Mode(mode))


def get_grader(rule: str | GradingRule) -> "Grader | None":
    """Get the grader for a rule."""
    if isinstance(rule, str):
        try:
            rule = GradingRule(rule.lower())
        except ValueError:
            return None
    return GRADERS.get(rule)


def grade(question: Any, answer: Any) -> GradeResult:
    """
    Grade a submitted answer.

    Malformed answers grade as incorrect. A whole case question has no rule
    of its own; its parts must be graded one by one.
    """
    rule = rule_for(question)
    grader = get_grader(rule) if rule else None
    if grader is None:
        raise TypeError(f"No grading rule for {type(question).__name__}")
    return grader.check(question, answer)


# Import graders to trigger registration
from . import keyword
from . import numeric
from . import exact
from . import token_overlap

__all__ = [
    "GRADERS",
    "GradeResult",
    "GradingRule",
    "MODE_RULES",
    "get_grader",
    "grade",
    "register",
    "rule_for",
]
