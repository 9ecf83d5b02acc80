"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run without errors and produce output.
They don't validate correctness deeply - just that commands work.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

# Project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


def run_cli_command(
    args: list[str],
    data_dir: Path,
    stdin: str = "",
    timeout: int = 30,
) -> tuple[int, str, str]:
    """
    Run a CLI command and return exit code, stdout, stderr.

    Args:
        args: Arguments after 'python -m econ_quiz.cli.main'
        data_dir: Directory used for the progress file
        stdin: Text fed to interactive prompts
        timeout: Maximum time to wait

    Returns:
        Tuple of (exit_code, stdout, stderr)
    """
    env = {
        **os.environ,
        "ECON_QUIZ_DATA_DIR": str(data_dir),
        "ECON_QUIZ_FEEDBACK_DELAY_SECONDS": "0",
        "COLUMNS": "120",
    }
    result = subprocess.run(
        [sys.executable, "-m", "econ_quiz.cli.main", *args],
        cwd=PROJECT_ROOT,
        input=stdin,
        capture_output=True,
        text=True,
        timeout=timeout,
        env=env,
    )

    return result.returncode, result.stdout, result.stderr


class TestCLIHelp:
    """Test that help commands work."""

    def test_main_help(self, tmp_path):
        """Main help should list the commands."""
        code, stdout, stderr = run_cli_command(["--help"], tmp_path)

        assert code == 0, f"Help failed: {stderr}"
        assert "play" in stdout
        assert "validate-bank" in stdout

    def test_play_help(self, tmp_path):
        code, stdout, stderr = run_cli_command(["play", "--help"], tmp_path)

        assert code == 0, f"Help failed: {stderr}"
        assert "--mode" in stdout
        assert "--level" in stdout


class TestCLICommands:
    """Test non-interactive commands."""

    def test_modes(self, tmp_path):
        code, stdout, stderr = run_cli_command(["modes"], tmp_path)

        assert code == 0, f"modes failed: {stderr}"
        assert "calculation" in stdout
        assert "Flashcard Mode" in stdout

    def test_progress_empty(self, tmp_path):
        code, stdout, _ = run_cli_command(["progress"], tmp_path)

        assert code == 0
        assert "No progress recorded yet" in stdout

    def test_validate_packaged_bank(self, tmp_path):
        bank = PROJECT_ROOT / "econ_quiz" / "data" / "questions.json"
        code, stdout, stderr = run_cli_command(["validate-bank", str(bank)], tmp_path)

        assert code == 0, f"validate-bank failed: {stderr}"
        assert "questions valid" in stdout

    def test_validate_bank_with_bad_record(self, tmp_path):
        bank = tmp_path / "bank.json"
        bank.write_text(json.dumps({"flash": [{"level": 1, "question": "Q?"}]}), encoding="utf-8")
        code, stdout, _ = run_cli_command(["validate-bank", str(bank)], tmp_path)

        assert code == 1
        assert "rejected" in stdout

    def test_validate_missing_bank(self, tmp_path):
        code, stdout, _ = run_cli_command(["validate-bank", str(tmp_path / "nope.json")], tmp_path)

        assert code == 1
        assert "Cannot load question bank" in stdout


class TestCLIPlay:
    """Test a full scripted session."""

    def test_play_flash_writes_progress(self, tmp_path):
        bank = tmp_path / "bank.json"
        bank.write_text(json.dumps({
            "flash": [{"level": 1, "topic": "Basics", "question": "Q?", "answer": "Demand"}],
        }), encoding="utf-8")

        code, stdout, stderr = run_cli_command(
            ["play", "--mode", "flash", "--level", "1", "--bank", str(bank)],
            tmp_path,
            stdin="demand\n",
        )

        assert code == 0, f"play failed: {stderr}"
        assert "Session Summary" in stdout
        record = json.loads((tmp_path / "progress.json").read_text(encoding="utf-8"))
        assert record["mode"] == "flash"
        assert record["correct"] == [True]

        code, stdout, _ = run_cli_command(["progress"], tmp_path)
        assert "flash mode, level 1" in stdout
