"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from econ_quiz.quiz import (  # noqa: E402
    CalculationQuestion,
    CaseQuestion,
    CaseSubQuestion,
    DiagramQuestion,
    EssayQuestion,
    FlashQuestion,
    QuestionBank,
)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


class FakeClock:
    """Manually advanced clock for timing assertions."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def diagram_question():
    return DiagramQuestion(
        level=1,
        topic="Demand and supply",
        context="A frost destroys the coffee harvest.",
        prompt="Explain the effect on the coffee market.",
        keywords=("supply", "shift left", "price", "quantity"),
        expected_diagram="Supply shifts left.",
        solution_explanation="Lower output raises the price.",
    )


@pytest.fixture
def essay_question():
    return EssayQuestion(
        level=2,
        topic="Opportunity cost",
        command_term="Explain",
        prompt="Explain opportunity cost.",
        keywords=("scarcity", "choice", "next best alternative", "forgone"),
    )


@pytest.fixture
def calculation_question():
    return CalculationQuestion(
        level=1,
        topic="Total revenue",
        prompt="Calculate total revenue.",
        data={"price": 4, "quantity": 25},
        answer=100,
    )


@pytest.fixture
def flash_question():
    return FlashQuestion(
        level=1,
        topic="Basic concepts",
        question="Willingness and ability to buy at each price?",
        answer="Demand",
    )


@pytest.fixture
def case_question():
    return CaseQuestion(
        level=1,
        topic="Agricultural markets",
        context="Wheat farmers",
        background_text="Prices have fallen after record harvests.",
        table=({"year": "2024", "price": 220},),
        sub_questions=(
            CaseSubQuestion(prompt="Define a minimum price.", answer="A legal price floor above equilibrium."),
            CaseSubQuestion(prompt="Why did incomes fall?", answer="Demand is price inelastic."),
        ),
    )


@pytest.fixture
def sample_bank_data():
    """Raw bank data in the camelCase file format."""
    return {
        "flash": [
            {"level": 1, "topic": "Basic concepts", "question": "Q1?", "answer": "Demand"},
            {"level": 2, "topic": "Market structures", "question": "Q2?", "answer": "Monopoly"},
            {"level": 3, "topic": "Trade", "question": "Q3?", "answer": "Trade"},
        ],
        "calculation": [
            {"level": 1, "topic": "Revenue", "prompt": "TR?", "data": {"p": 4, "q": 25}, "answer": "100"},
            {"level": 2, "topic": "Multiplier", "prompt": "k?", "data": {"mpc": 0.8}, "answer": 5},
        ],
        "case": [
            {
                "level": 1,
                "topic": "Trade",
                "context": "Steel tariffs",
                "backgroundText": "A 25% tariff on steel.",
                "subQuestions": [
                    {"prompt": "Define a tariff.", "answer": "A tax on imports."},
                    {"prompt": "Effect on consumers?", "answer": "Higher prices."},
                ],
            }
        ],
    }


@pytest.fixture
def bank(sample_bank_data):
    return QuestionBank.from_dict(sample_bank_data)
