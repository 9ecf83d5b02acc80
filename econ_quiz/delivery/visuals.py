"""
Console visual components for quiz sessions.

Panels for each question mode, answer feedback and the session summary.
"""

from __future__ import annotations

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from ..quiz.graders import GradeResult
from ..quiz.graders.numeric import format_number
from ..quiz.models import (
    CalculationQuestion,
    CaseQuestion,
    CaseSubQuestion,
    DiagramQuestion,
    EssayQuestion,
    FlashQuestion,
    Mode,
    Question,
)
from ..quiz.progress_store import ProgressRecord
from ..quiz.summary import Report

# =============================================================================
# COLOR THEME
# =============================================================================

QUIZ_THEME = {
    "primary": "#1976D2",  # Button blue - main accent
    "heading": "#1E3A8A",  # Navy - titles
    "success": "#2E7D32",  # Green - correct answers
    "error": "#D32F2F",  # Red - incorrect
    "warning": "#F9A825",  # Amber - hints and suggestions
    "dim": "#6B7280",  # Gray - secondary text
    "table_header": "#E7EEF5",
}

STYLES = {
    "primary": Style(color=QUIZ_THEME["primary"], bold=True),
    "heading": Style(color=QUIZ_THEME["heading"], bold=True),
    "success": Style(color=QUIZ_THEME["success"], bold=True),
    "error": Style(color=QUIZ_THEME["error"], bold=True),
    "warning": Style(color=QUIZ_THEME["warning"]),
    "dim": Style(color=QUIZ_THEME["dim"]),
}

MODE_COLORS = {
    Mode.DIAGRAM: "cyan",
    Mode.CALCULATION: "magenta",
    Mode.ESSAY: "blue",
    Mode.CASE: "yellow",
    Mode.FLASH: "green",
}

ANSWER_PROMPTS = {
    Mode.DIAGRAM: "Write your explanation",
    Mode.CALCULATION: "Enter your answer",
    Mode.ESSAY: "Outline your answer",
    Mode.FLASH: "Answer",
}


def render_progress(index: int, total: int, width: int = 30) -> Text:
    """Progress bar with a 1-based ``n/total`` counter."""
    ratio = index / total if total else 0.0
    filled = int(round(width * ratio))

    bar = Text()
    bar.append("█" * filled, style=STYLES["primary"])
    bar.append("░" * (width - filled), style=STYLES["dim"])
    bar.append(f"  {min(index + 1, total)}/{total}", style=STYLES["dim"])
    return bar


def _labelled(label: str, body: str) -> Text:
    text = Text()
    text.append(f"{label}: ", style=STYLES["heading"])
    text.append(body)
    return text


def render_data_table(rows: list[dict] | tuple[dict, ...]) -> Table | None:
    """Tabulate case-study data; column order follows the first row."""
    if not rows:
        return None

    keys = list(rows[0].keys())
    table = Table(box=box.SIMPLE_HEAVY, header_style=STYLES["heading"])
    for key in keys:
        table.add_column(key[:1].upper() + key[1:].replace("_", " "))
    for row in rows:
        table.add_row(*(str(row.get(key, "")) for key in keys))
    return table


def render_question_panel(question: Question) -> Panel:
    """Mode-specific question panel."""
    mode = Mode(question.mode)
    parts: list = []

    if isinstance(question, DiagramQuestion):
        parts.append(_labelled("Context", question.context))
        parts.append(_labelled("Task", question.prompt))
    elif isinstance(question, EssayQuestion):
        parts.append(_labelled("Command Term", question.command_term or "-"))
        parts.append(_labelled("Topic", question.topic))
        if question.context:
            parts.append(_labelled("Context", question.context))
        parts.append(_labelled("Question", question.prompt))
    elif isinstance(question, CalculationQuestion):
        parts.append(Text(question.prompt))
        if question.data:
            data = ", ".join(f"{k} = {format_number(v)}" for k, v in question.data.items())
            parts.append(_labelled("Data", data))
    elif isinstance(question, CaseQuestion):
        parts.append(_labelled("Context", question.context))
        parts.append(_labelled("Background", question.background_text))
        table = render_data_table(question.table)
        if table is not None:
            parts.append(table)
    elif isinstance(question, FlashQuestion):
        parts.append(Text("Flashcard Question:", style=STYLES["heading"]))
        parts.append(Text(question.question))

    title = Text(mode.label.upper(), style=Style(color=MODE_COLORS[mode], bold=True))
    if question.topic and not isinstance(question, EssayQuestion):
        title.append(f"  {question.topic}", style=STYLES["dim"])

    return Panel(
        Group(*parts),
        title=title,
        title_align="left",
        border_style=MODE_COLORS[mode],
        box=box.HEAVY,
        padding=(1, 2),
    )


def render_sub_question_panel(sub_question: CaseSubQuestion, index: int, total: int) -> Panel:
    return Panel(
        Text(sub_question.prompt),
        title=f"[bold yellow]Q{index + 1} of {total}[/bold yellow]",
        title_align="left",
        border_style="yellow",
        box=box.ROUNDED,
        padding=(0, 2),
    )


def render_feedback_panel(result: GradeResult) -> Panel:
    """Correct/incorrect panel with the grader's feedback line."""
    color = QUIZ_THEME["success"] if result.correct else QUIZ_THEME["error"]
    status = "CORRECT" if result.correct else "INCORRECT"
    icon = "✓" if result.correct else "✗"

    content = Text()
    content.append(f"{icon} {status}", style=Style(color=color, bold=True))
    if not result.correct and result.feedback:
        content.append("\n\n")
        content.append(result.feedback, style=STYLES["dim"])
    if result.matched:
        content.append("\n\nMatched: ", style=STYLES["dim"])
        content.append(", ".join(result.matched))

    return Panel(content, border_style=Style(color=color), box=box.HEAVY, padding=(0, 2))


def render_solution_panel(question: Question) -> Panel | None:
    """Expected diagram and explanation, when the question carries them."""
    expected = getattr(question, "expected_diagram", "")
    explanation = getattr(question, "solution_explanation", "")
    if not expected and not explanation:
        return None

    parts = []
    if expected:
        parts.append(_labelled("Expected Diagram", expected))
    if explanation:
        parts.append(_labelled("Explanation", explanation))

    return Panel(
        Group(*parts),
        title="[bold]Solution[/bold]",
        border_style=QUIZ_THEME["dim"],
        box=box.ROUNDED,
        padding=(0, 2),
    )


def render_session_summary(report: Report) -> Panel:
    """End-of-session summary with revision suggestions."""
    stats = Text()
    stats.append("SESSION COMPLETE\n\n", style=STYLES["heading"])
    stats.append(f"Mode: {report.mode.value}\n")
    stats.append(f"Difficulty level: {report.level}\n")
    stats.append(f"Questions attempted: {report.attempted}\n")
    stats.append(f"Correct responses: {report.correct_count}", style=STYLES["success"])
    if report.graded:
        stats.append(f"  ({report.accuracy:.0%})", style=STYLES["dim"])
    stats.append(f"\nTotal time: {report.total_time_seconds:.1f} s\n")

    parts: list = [stats]

    if len(report.topics) > 1:
        topics = Table(box=box.SIMPLE, header_style=STYLES["heading"])
        topics.add_column("Topic")
        topics.add_column("Correct", justify="right")
        for topic, topic_stats in report.topics.items():
            topics.add_row(topic, f"{topic_stats.correct}/{topic_stats.attempted}")
        parts.append(topics)

    parts.append(Text("Suggested areas for revision:", style=STYLES["heading"]))
    if report.all_correct:
        parts.append(Text("Great work! No major weaknesses detected.", style=STYLES["success"]))
    else:
        for suggestion in report.suggestions:
            parts.append(Text(f"• {suggestion.message}", style=STYLES["warning"]))

    border = QUIZ_THEME["success"] if report.all_correct else QUIZ_THEME["warning"]
    return Panel(
        Group(*parts),
        title="[bold]Session Summary[/bold]",
        border_style=Style(color=border),
        box=box.HEAVY,
        padding=(1, 2),
    )


def render_progress_hint(record: ProgressRecord | None) -> Text:
    """One-line reminder of the last completed session."""
    if record is None:
        return Text("No progress recorded yet.", style=STYLES["dim"])

    text = Text("Last session: ", style=STYLES["dim"])
    text.append(f"{record.mode.value} mode, level {record.level}", style=STYLES["primary"])
    text.append(f" - {record.correct_count}/{record.graded_count} correct", style=STYLES["dim"])
    text.append(f" ({record.completed_at:%Y-%m-%d %H:%M})", style=STYLES["dim"])
    return text
