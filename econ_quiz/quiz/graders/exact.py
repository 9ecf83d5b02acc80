"""
Exact match grader for flashcards.

Case-insensitive, ignoring surrounding whitespace.
"""

from typing import Any

from . import GradingRule, register
from .base import GradeResult, as_text, is_blank


@register(GradingRule.EXACT)
class ExactGrader:
    """Grader for flashcard questions."""

    def check(self, question: Any, answer: Any) -> GradeResult:
        correct_answer = question.answer
        user_answer = as_text(answer)
        is_correct = not is_blank(user_answer) and self._grade(user_answer, correct_answer)

        return GradeResult(
            correct=is_correct,
            feedback="Correct!" if is_correct else f"Incorrect. Correct answer: {correct_answer}",
            correct_answer=correct_answer,
        )

    def _grade(self, user_answer: str, correct: str) -> bool:
        return user_answer.strip().lower() == correct.strip().lower()
