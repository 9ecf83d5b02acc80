"""
Numeric grader for calculation answers.

Answers within 1% of the expected value are accepted. An expected value of
zero therefore needs an exact answer. Only the leading number of a submission
is read, so "101 dollars" and "12%" grade as 101 and 12.
"""

import math
import re
from typing import Any

from . import GradingRule, register
from .base import GradeResult, as_text

RELATIVE_TOLERANCE = 0.01

LEADING_NUMBER = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def parse_number(raw: Any) -> float | None:
    """Parse the leading number of a submitted answer; ``None`` when there is none."""
    match = LEADING_NUMBER.match(as_text(raw))
    if not match:
        return None
    number = float(match.group(1))
    if not math.isfinite(number):
        return None
    return number


def within_tolerance(value: float, expected: float, tolerance: float = RELATIVE_TOLERANCE) -> bool:
    return abs(value - expected) <= abs(expected) * tolerance


def format_number(value: float) -> str:
    return f"{value:g}"


@register(GradingRule.NUMERIC)
class NumericGrader:
    """Grader for calculation questions."""

    def check(self, question: Any, answer: Any) -> GradeResult:
        expected = float(question.answer)
        value = parse_number(answer)
        is_correct = value is not None and within_tolerance(value, expected)

        return GradeResult(
            correct=is_correct,
            feedback="Correct!" if is_correct else f"Incorrect. Correct answer: {format_number(expected)}",
            correct_answer=format_number(expected),
        )
