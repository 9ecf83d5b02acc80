"""
Unit tests for question bank loading.
"""

import json

import pytest
from pydantic import ValidationError

from econ_quiz.quiz import (
    BankLoadError,
    CalculationQuestion,
    CaseQuestion,
    FlashQuestion,
    Mode,
    QuestionBank,
)
from econ_quiz.quiz.models import parse_question


class TestParseQuestion:
    """Test record validation."""

    def test_camel_case_fields(self):
        question = parse_question("diagram", {
            "level": 1,
            "topic": "Supply",
            "prompt": "Draw it",
            "keywords": ["supply"],
            "expectedDiagram": "S shifts left",
            "solutionExplanation": "Because",
        })
        assert question.mode == "diagram"
        assert question.expected_diagram == "S shifts left"
        assert question.keywords == ("supply",)

    def test_numeric_answer_string_is_coerced(self):
        question = parse_question(Mode.CALCULATION, {"level": 1, "prompt": "TR?", "answer": "100"})
        assert isinstance(question, CalculationQuestion)
        assert question.answer == 100.0

    def test_questions_are_immutable(self):
        question = parse_question("flash", {"level": 1, "question": "Q?", "answer": "A"})
        with pytest.raises(ValidationError):
            question.answer = "B"


class TestQuestionBank:
    """Test QuestionBank."""

    def test_from_dict(self, bank):
        assert len(bank) == 6
        assert all(isinstance(q, FlashQuestion) for q in bank.pool(Mode.FLASH))
        assert isinstance(bank.pool("case")[0], CaseQuestion)
        assert len(bank.pool("case")[0].sub_questions) == 2

    def test_pool_preserves_order(self, bank):
        assert [q.level for q in bank.pool(Mode.FLASH)] == [1, 2, 3]

    def test_missing_mode_is_empty(self, bank):
        assert bank.pool(Mode.ESSAY) == ()
        assert bank.pool("crossword") == ()

    def test_counts_by_level(self, bank):
        assert bank.counts_by_level("calculation") == {1: 1, 2: 1}

    def test_modes(self, bank):
        assert bank.modes() == [Mode.CALCULATION, Mode.CASE, Mode.FLASH]

    def test_invalid_records_skipped(self):
        bank = QuestionBank.from_dict({
            "flash": [
                {"level": 1, "question": "Q?", "answer": "A"},
                {"level": 1, "question": "No answer"},
                "not a record",
            ],
        })
        assert len(bank.pool(Mode.FLASH)) == 1
        assert len(bank.rejected) == 2

    def test_unknown_mode_ignored(self):
        bank = QuestionBank.from_dict({"crossword": [{"level": 1}]})
        assert len(bank) == 0
        assert bank.rejected == []

    def test_from_file(self, tmp_path, sample_bank_data):
        path = tmp_path / "bank.json"
        path.write_text(json.dumps(sample_bank_data), encoding="utf-8")
        assert len(QuestionBank.from_file(path)) == 6

    def test_missing_file(self, tmp_path):
        with pytest.raises(BankLoadError):
            QuestionBank.from_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bank.json"
        path.write_text("[1, 2", encoding="utf-8")
        with pytest.raises(BankLoadError):
            QuestionBank.from_file(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "bank.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(BankLoadError):
            QuestionBank.from_file(path)

    def test_packaged_bank_loads_cleanly(self):
        bank = QuestionBank.load_default()
        assert bank.rejected == []
        assert bank.modes() == list(Mode)
