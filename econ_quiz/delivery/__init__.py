"""
Console delivery for quiz sessions.

- visuals: rich panels for questions, feedback and summaries
- console_session: listener that renders session events, and the answer loop
"""

from .console_session import ConsoleListener, prompt_asker, run_session

__all__ = [
    "ConsoleListener",
    "prompt_asker",
    "run_session",
]
