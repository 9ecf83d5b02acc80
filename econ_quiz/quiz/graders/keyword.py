"""
Keyword grader for diagram and essay answers.

A keyword counts when it appears anywhere in the answer, ignoring case.
Half the keyword list (rounded up) is enough to pass.
"""

import math
from typing import Any

from . import GradingRule, register
from .base import GradeResult, as_text, is_blank


def required_matches(total: int) -> int:
    return math.ceil(total / 2)


@register(GradingRule.KEYWORD)
class KeywordGrader:
    """Grader for keyword-based questions."""

    def check(self, question: Any, answer: Any) -> GradeResult:
        keywords = list(question.keywords)
        text = as_text(answer).lower()

        matched: list[str] = []
        missing: list[str] = []
        for kw in keywords:
            if not is_blank(text) and kw.lower() in text:
                matched.append(kw)
            else:
                missing.append(kw)

        is_correct = not is_blank(text) and len(matched) >= required_matches(len(keywords))

        return GradeResult(
            correct=is_correct,
            matched=matched,
            missing=missing,
            feedback="Correct!" if is_correct else self._feedback(missing),
            correct_answer=", ".join(keywords),
        )

    def _feedback(self, missing: list[str]) -> str:
        if not missing:
            return "Incorrect. Write out your explanation."
        return "Incorrect. Missing keywords: " + ", ".join(missing)
