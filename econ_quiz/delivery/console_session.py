"""
Interactive console session.

ConsoleListener renders controller events; run_session() collects answers
and feeds them to the controller until the session completes.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

from rich.console import Console
from rich.prompt import Prompt

from ..quiz.events import SessionListener
from ..quiz.graders import GradeResult
from ..quiz.models import CaseSubQuestion, DiagramQuestion, Mode, Question
from ..quiz.session import Phase, SessionController
from ..quiz.summary import Report
from . import visuals as ui

Ask = Callable[[str], str]


class ConsoleListener(SessionListener):
    """Prints each session event to a rich console."""

    def __init__(self, console: Console, feedback_delay: float = 0.0):
        self.console = console
        self.feedback_delay = feedback_delay
        self._question: Optional[Question] = None

    def on_question_ready(self, question: Question, index: int, total: int) -> None:
        self._question = question
        self.console.print()
        self.console.print(ui.render_progress(index, total))
        self.console.print(ui.render_question_panel(question))

    def on_sub_question_ready(self, sub_question: CaseSubQuestion, index: int) -> None:
        total = len(getattr(self._question, "sub_questions", ())) or index + 1
        self.console.print(ui.render_sub_question_panel(sub_question, index, total))

    def on_feedback(self, result: GradeResult) -> None:
        self.console.print(ui.render_feedback_panel(result))

        # Diagram questions always reveal the model answer
        question = self._question
        if question is not None and (isinstance(question, DiagramQuestion) or not result.correct):
            solution = ui.render_solution_panel(question)
            if solution is not None:
                self.console.print(solution)

        if self.feedback_delay > 0:
            time.sleep(self.feedback_delay)

    def on_session_complete(self, report: Report) -> None:
        self.console.print()
        self.console.print(ui.render_session_summary(report))


def prompt_asker(console: Console) -> Ask:
    """Free-text answer prompt on ``console``."""
    def ask(prompt: str) -> str:
        return Prompt.ask(f"[cyan]{prompt}[/cyan]", console=console, default="", show_default=False)
    return ask


def run_session(
    controller: SessionController,
    mode: Mode | str,
    level: int,
    ask: Ask,
) -> Report:
    """Play one session to completion and return its report."""
    controller.start(mode, level)

    while not controller.state.is_completed:
        state = controller.state
        if state.phase is Phase.AWAITING_SUB_QUESTION:
            controller.submit_sub(ask(f"Q{state.sub_index + 1} answer"))
        elif controller.session.mode is Mode.CASE:
            ask("Press Enter to start the case questions")
            controller.submit("")
        else:
            controller.submit(ask(ui.ANSWER_PROMPTS[controller.session.mode]))

    return controller.report
