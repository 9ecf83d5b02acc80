"""
Quiz Session: question flow for one play-through.

The controller owns the Session it creates. Every submission is graded,
recorded and followed by a transition:

    AWAITING_QUESTION(i) --submit--> AWAITING_QUESTION(i+1) | COMPLETED
    AWAITING_QUESTION(i) --submit--> AWAITING_SUB_QUESTION(i, 0)      (case mode)
    AWAITING_SUB_QUESTION(i, j) --submit_sub--> (i, j+1) | next question

Case-study parts are buffered until the last part is answered and then
committed as one entry, so the parallel records always have equal length.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from loguru import logger

from .bank import QuestionBank
from .errors import InvalidStateError
from .events import SessionListener
from .graders import GradeResult, grade
from .graders.base import as_text
from .models import CaseQuestion, CaseSubQuestion, Mode, Question
from .progress_store import ProgressRecord, ProgressStore
from .selector import select
from .summary import Report, SummaryReporter


class Phase(str, Enum):
    AWAITING_QUESTION = "awaiting_question"
    AWAITING_SUB_QUESTION = "awaiting_sub_question"
    COMPLETED = "completed"


@dataclass(frozen=True)
class SessionState:
    """Position of the controller in the question flow."""
    phase: Phase
    index: int = 0
    sub_index: Optional[int] = None

    @property
    def is_completed(self) -> bool:
        return self.phase is Phase.COMPLETED


@dataclass
class Session:
    """
    Results of one play-through.

    ``answers``, ``correct``, ``times`` and ``matched`` are indexed by
    question position. For case mode the entries of ``answers``, ``correct``
    and ``matched`` are lists indexed by part.
    """
    mode: Mode
    level: int
    questions: list[Question]
    started_at: float
    ended_at: Optional[float] = None
    answers: list[Any] = field(default_factory=list)
    correct: list[Any] = field(default_factory=list)
    times: list[float] = field(default_factory=list)
    matched: list[Any] = field(default_factory=list)
    last_timestamp: Optional[float] = None

    def __post_init__(self):
        if self.last_timestamp is None:
            self.last_timestamp = self.started_at

    @property
    def recorded(self) -> int:
        return len(self.times)

    @property
    def is_complete(self) -> bool:
        return self.ended_at is not None


@dataclass
class _CaseProgress:
    answers: list[str] = field(default_factory=list)
    correct: list[bool] = field(default_factory=list)
    matched: list[list[str]] = field(default_factory=list)


class SessionController:
    """
    Drives a Session from mode/level selection to the final report.

    Starting a new session drops the previous one. A completed session
    accepts no further submissions.
    """

    def __init__(
        self,
        bank: QuestionBank,
        store: Optional[ProgressStore] = None,
        listener: Optional[SessionListener] = None,
        reporter: Optional[SummaryReporter] = None,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
    ):
        self.bank = bank
        self.store = store
        self.listener = listener or SessionListener()
        self.reporter = reporter or SummaryReporter()
        self.clock = clock
        self.rng = rng

        self._session: Optional[Session] = None
        self._state: Optional[SessionState] = None
        self._pending: Optional[_CaseProgress] = None
        self._report: Optional[Report] = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def state(self) -> Optional[SessionState]:
        return self._state

    @property
    def report(self) -> Optional[Report]:
        return self._report

    @property
    def current_question(self) -> Optional[Question]:
        if self._session is None or self._state is None or self._state.is_completed:
            return None
        return self._session.questions[self._state.index]

    @property
    def current_sub_question(self) -> Optional[CaseSubQuestion]:
        if self._state is None or self._state.phase is not Phase.AWAITING_SUB_QUESTION:
            return None
        question = self.current_question
        return question.sub_questions[self._state.sub_index]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self, mode: Mode | str, level: int) -> Session:
        """Begin a new session, replacing any current one."""
        mode = Mode(mode)
        questions = select(self.bank.pool(mode), level, self.rng)
        now = self.clock()

        self._session = Session(mode=mode, level=level, questions=questions, started_at=now)
        self._pending = None
        self._report = None
        logger.debug(f"Session started: mode={mode.value} level={level} questions={len(questions)}")

        if not questions:
            self._complete()
        else:
            self._enter_question(0)
        return self._session

    def submit(self, answer: Any) -> Optional[GradeResult]:
        """
        Answer the current top-level question.

        In case mode the answer only acknowledges the case material; the
        parts are answered with ``submit_sub`` and nothing is graded here.
        """
        session, state = self._require(Phase.AWAITING_QUESTION, "submit")
        question = session.questions[state.index]

        if session.mode is Mode.CASE:
            self._pending = _CaseProgress()
            self._enter_sub_question(state.index, 0)
            return None

        result = grade(question, answer)
        self._record(as_text(answer), result.correct, result.matched)
        logger.debug(f"Question {state.index + 1}/{len(session.questions)} correct={result.correct}")
        self.listener.on_feedback(result)
        self._advance(state.index)
        return result

    def submit_sub(self, answer: Any) -> GradeResult:
        """Answer the current part of a case study."""
        session, state = self._require(Phase.AWAITING_SUB_QUESTION, "submit_sub")
        question = session.questions[state.index]
        part = question.sub_questions[state.sub_index]

        result = grade(part, answer)
        self._pending.answers.append(as_text(answer))
        self._pending.correct.append(result.correct)
        self._pending.matched.append(result.matched)
        logger.debug(f"Case {state.index + 1} part {state.sub_index + 1} matched={result.matched}")

        self.listener.on_feedback(result)
        self._enter_sub_question(state.index, state.sub_index + 1)
        return result

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require(self, phase: Phase, action: str) -> tuple[Session, SessionState]:
        if self._session is None or self._state is None:
            raise InvalidStateError(f"Cannot {action}: no session started")
        if self._state.phase is not phase:
            raise InvalidStateError(f"Cannot {action} while {self._state.phase.value}")
        return self._session, self._state

    def _enter_question(self, index: int) -> None:
        self._state = SessionState(Phase.AWAITING_QUESTION, index)
        self.listener.on_question_ready(self._session.questions[index], index, len(self._session.questions))

    def _enter_sub_question(self, index: int, sub_index: int) -> None:
        question: CaseQuestion = self._session.questions[index]
        if sub_index < len(question.sub_questions):
            self._state = SessionState(Phase.AWAITING_SUB_QUESTION, index, sub_index)
            self.listener.on_sub_question_ready(question.sub_questions[sub_index], sub_index)
            return

        pending, self._pending = self._pending or _CaseProgress(), None
        self._record(pending.answers, pending.correct, pending.matched)
        self._advance(index)

    def _record(self, answer: Any, correct: Any, matched: Any) -> None:
        session = self._session
        now = self.clock()
        session.answers.append(answer)
        session.correct.append(correct)
        session.matched.append(matched)
        session.times.append(now - session.last_timestamp)
        session.last_timestamp = now

    def _advance(self, index: int) -> None:
        if index + 1 < len(self._session.questions):
            self._enter_question(index + 1)
        else:
            self._complete()

    def _complete(self) -> None:
        session = self._session
        session.ended_at = self.clock()
        self._state = SessionState(Phase.COMPLETED, len(session.questions))
        self._report = self.reporter.summarize(session)

        if self.store is not None:
            try:
                self.store.set(ProgressRecord(
                    mode=session.mode,
                    level=session.level,
                    correct=list(session.correct),
                ))
            except OSError as e:
                logger.warning(f"Could not save progress: {e}")

        logger.info(
            f"Session complete: {self._report.correct_count}/{self._report.graded} correct "
            f"in {self._report.total_time_seconds:.1f}s"
        )
        self.listener.on_session_complete(self._report)
