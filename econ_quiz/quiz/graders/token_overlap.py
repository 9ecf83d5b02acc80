"""
Token overlap grader for case-study parts.

A single word shared with the reference answer is enough to pass.
"""

from typing import Any

from . import GradingRule, register
from .base import GradeResult, as_text, tokenize


@register(GradingRule.TOKEN_OVERLAP)
class TokenOverlapGrader:
    """Grader for case-study sub-questions."""

    def check(self, question: Any, answer: Any) -> GradeResult:
        reference = question.answer
        submitted = set(tokenize(as_text(answer)))

        matched: list[str] = []
        for token in tokenize(reference):
            if token in submitted and token not in matched:
                matched.append(token)

        is_correct = bool(matched)
        return GradeResult(
            correct=is_correct,
            matched=matched,
            feedback="Correct!" if is_correct else f"Incorrect. A sample correct answer: {reference}",
            correct_answer=reference,
        )
