"""
econ-quiz: terminal revision quiz for an economics course.

Components:
- quiz: question bank, selection, grading, session flow and reporting
- delivery: rich console rendering of session events
- cli: typer entry point
"""

__version__ = "1.0.0"
