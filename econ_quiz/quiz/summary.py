"""
Session summary: score, timing and targeted revision suggestions.

Case studies are scored per part: every part whose answer shared at least
one word with the reference answer counts as one correct response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable

from .graders.numeric import parse_number, within_tolerance
from .models import Mode

if TYPE_CHECKING:
    from .session import Session


class ReportStatus(str, Enum):
    ALL_CORRECT = "all_correct"
    NEEDS_REVISION = "needs_revision"


@dataclass
class Suggestion:
    """One targeted revision hint."""
    question_index: int
    topic: str
    message: str
    sub_index: int | None = None


@dataclass
class TopicStats:
    attempted: int = 0
    correct: int = 0


@dataclass
class Report:
    """Aggregated result of a completed session."""
    mode: Mode
    level: int
    attempted: int
    correct_count: int
    total_time_seconds: float
    suggestions: list[Suggestion] = field(default_factory=list)
    status: ReportStatus = ReportStatus.ALL_CORRECT
    graded: int = 0
    average_time_seconds: float = 0.0
    topics: dict[str, TopicStats] = field(default_factory=dict)

    @property
    def all_correct(self) -> bool:
        return self.status is ReportStatus.ALL_CORRECT

    @property
    def accuracy(self) -> float:
        return self.correct_count / self.graded if self.graded else 0.0


class SummaryReporter:
    """Builds a Report from a finished Session."""

    def summarize(self, session: "Session") -> Report:
        mode = Mode(session.mode)
        topics = self._topic_stats(session)

        if mode is Mode.CASE:
            correct_count = sum(1 for parts in session.matched for found in parts if found)
            graded = sum(len(parts) for parts in session.matched)
        else:
            correct_count = sum(1 for flag in session.correct if flag is True)
            graded = len(session.correct)

        suggestions = SUGGESTERS[mode](session)
        total_time = (session.ended_at - session.started_at) if session.ended_at is not None else 0.0
        average = sum(session.times) / len(session.times) if session.times else 0.0

        return Report(
            mode=mode,
            level=session.level,
            attempted=len(session.questions),
            correct_count=correct_count,
            total_time_seconds=total_time,
            suggestions=suggestions,
            status=ReportStatus.NEEDS_REVISION if suggestions else ReportStatus.ALL_CORRECT,
            graded=graded,
            average_time_seconds=average,
            topics=topics,
        )

    def _topic_stats(self, session: "Session") -> dict[str, TopicStats]:
        topics: dict[str, TopicStats] = {}
        for question, flag in zip(session.questions, session.correct):
            stats = topics.setdefault(question.topic or "General", TopicStats())
            flags = flag if isinstance(flag, list) else [flag]
            stats.attempted += len(flags)
            stats.correct += sum(1 for f in flags if f)
        return topics


def _keyword_suggestions(session: "Session") -> list[Suggestion]:
    suggestions = []
    for idx, question in enumerate(session.questions):
        found = session.matched[idx] if idx < len(session.matched) else []
        missed = [kw for kw in question.keywords if kw not in found]
        if missed:
            message = f"Question {idx + 1} ({question.topic}): review concepts - missing keywords: {', '.join(missed)}"
        elif idx < len(session.correct) and not session.correct[idx]:
            # blank answer to a question without keywords
            message = f"Question {idx + 1} ({question.topic}): review concepts - no answer given."
        else:
            continue
        suggestions.append(Suggestion(question_index=idx, topic=question.topic, message=message))
    return suggestions


def _calculation_suggestions(session: "Session") -> list[Suggestion]:
    suggestions = []
    for idx, question in enumerate(session.questions):
        answer = session.answers[idx] if idx < len(session.answers) else ""
        value = parse_number(answer)
        if value is None or not within_tolerance(value, question.answer):
            suggestions.append(Suggestion(
                question_index=idx,
                topic=question.topic,
                message=f"Question {idx + 1} ({question.topic}): practise the calculation steps shown in the solution.",
            ))
    return suggestions


def _case_suggestions(session: "Session") -> list[Suggestion]:
    suggestions = []
    for idx, question in enumerate(session.questions):
        parts = session.matched[idx] if idx < len(session.matched) else []
        for sub_idx, _ in enumerate(question.sub_questions):
            found = parts[sub_idx] if sub_idx < len(parts) else []
            if not found:
                suggestions.append(Suggestion(
                    question_index=idx,
                    sub_index=sub_idx,
                    topic=question.topic,
                    message=f"Case Q{idx + 1} Part {sub_idx + 1}: revisit this topic - answer may lack key elements.",
                ))
    return suggestions


def _flash_suggestions(session: "Session") -> list[Suggestion]:
    suggestions = []
    for idx, question in enumerate(session.questions):
        if idx >= len(session.correct) or not session.correct[idx]:
            suggestions.append(Suggestion(
                question_index=idx,
                topic=question.topic,
                message=f"Flashcard {idx + 1} ({question.topic}): review this definition.",
            ))
    return suggestions


SUGGESTERS: dict[Mode, Callable[["Session"], list[Suggestion]]] = {
    Mode.DIAGRAM: _keyword_suggestions,
    Mode.ESSAY: _keyword_suggestions,
    Mode.CALCULATION: _calculation_suggestions,
    Mode.CASE: _case_suggestions,
    Mode.FLASH: _flash_suggestions,
}
