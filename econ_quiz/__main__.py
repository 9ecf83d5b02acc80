"""
Entry point for running econ-quiz as a module.

Usage:
    python -m econ_quiz play
    python -m econ_quiz --help
"""
from .cli.main import run

if __name__ == "__main__":
    run()
