"""
Quiz core: question flow, grading and reporting.

Components:
- bank: read-only question pools keyed by mode
- selector: level filter and shuffle for a session
- graders: grading rules (keyword, numeric, exact, token overlap)
- session: state machine driving one play-through
- summary: session report and revision suggestions
- progress_store: last-session progress marker
"""

from .bank import QuestionBank
from .errors import BankLoadError, InvalidStateError
from .events import SessionListener
from .graders import GradeResult, GradingRule, grade
from .models import (
    CalculationQuestion,
    CaseQuestion,
    CaseSubQuestion,
    DiagramQuestion,
    EssayQuestion,
    FlashQuestion,
    Mode,
    Question,
)
from .progress_store import JsonProgressStore, MemoryProgressStore, ProgressRecord, ProgressStore
from .selector import select
from .session import Phase, Session, SessionController, SessionState
from .summary import Report, ReportStatus, Suggestion, SummaryReporter, TopicStats

__all__ = [
    "BankLoadError",
    "CalculationQuestion",
    "CaseQuestion",
    "CaseSubQuestion",
    "DiagramQuestion",
    "EssayQuestion",
    "FlashQuestion",
    "GradeResult",
    "GradingRule",
    "InvalidStateError",
    "JsonProgressStore",
    "MemoryProgressStore",
    "Mode",
    "Phase",
    "ProgressRecord",
    "ProgressStore",
    "Question",
    "QuestionBank",
    "Report",
    "ReportStatus",
    "Session",
    "SessionController",
    "SessionListener",
    "SessionState",
    "Suggestion",
    "SummaryReporter",
    "TopicStats",
    "grade",
    "select",
]
