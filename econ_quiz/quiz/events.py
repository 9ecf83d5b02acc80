"""
Session events consumed by the presentation layer.

Subclass ``SessionListener`` and override the hooks you need; the core
never renders anything itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .graders import GradeResult
    from .models import CaseSubQuestion, Question
    from .summary import Report


class SessionListener:
    """No-op listener."""

    def on_question_ready(self, question: "Question", index: int, total: int) -> None:
        pass

    def on_sub_question_ready(self, sub_question: "CaseSubQuestion", index: int) -> None:
        pass

    def on_feedback(self, result: "GradeResult") -> None:
        pass

    def on_session_complete(self, report: "Report") -> None:
        pass
