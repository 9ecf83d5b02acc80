"""
Question types for the revision quiz.

Questions are immutable and tagged by ``mode``. Bank files use camelCase keys
(``expectedDiagram``, ``subQuestions``); both spellings are accepted.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class Mode(str, Enum):
    """Question modes offered by the quiz."""
    DIAGRAM = "diagram"
    CALCULATION = "calculation"
    ESSAY = "essay"
    CASE = "case"
    FLASH = "flash"

    @property
    def label(self) -> str:
        return MODE_TITLES[self]


MODE_TITLES = {
    Mode.DIAGRAM: "Diagram Mode",
    Mode.CALCULATION: "Calculation Mode",
    Mode.ESSAY: "Paper 1 - Essay Mode",
    Mode.CASE: "Paper 2 - Case Study Mode",
    Mode.FLASH: "Flashcard Mode",
}


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class _BaseQuestion(_Record):
    level: int = Field(ge=0)
    topic: str = ""


class DiagramQuestion(_BaseQuestion):
    mode: Literal["diagram"] = "diagram"
    context: str = ""
    prompt: str
    keywords: tuple[str, ...] = ()
    expected_diagram: str = ""
    solution_explanation: str = ""


class EssayQuestion(_BaseQuestion):
    mode: Literal["essay"] = "essay"
    command_term: str = ""
    context: str = ""
    prompt: str
    keywords: tuple[str, ...] = ()
    expected_diagram: str = ""
    solution_explanation: str = ""


class CalculationQuestion(_BaseQuestion):
    mode: Literal["calculation"] = "calculation"
    prompt: str
    data: dict[str, float] = Field(default_factory=dict)
    answer: float
    solution_explanation: str = ""


class CaseSubQuestion(_Record):
    """One part of a case study; ``answer`` is the reference answer."""
    prompt: str
    answer: str


class CaseQuestion(_BaseQuestion):
    mode: Literal["case"] = "case"
    context: str = ""
    background_text: str = ""
    table: tuple[dict[str, Any], ...] = ()
    sub_questions: tuple[CaseSubQuestion, ...] = ()


class FlashQuestion(_BaseQuestion):
    mode: Literal["flash"] = "flash"
    question: str
    answer: str


Question = Annotated[
    Union[DiagramQuestion, EssayQuestion, CalculationQuestion, CaseQuestion, FlashQuestion],
    Field(discriminator="mode"),
]

KeywordQuestion = Union[DiagramQuestion, EssayQuestion]

question_adapter: TypeAdapter[Question] = TypeAdapter(Question)


def parse_question(mode: Mode | str, record: dict[str, Any]) -> Question:
    """Validate a raw bank record as a question of the given mode."""
    mode = Mode(mode)
    return question_adapter.validate_python({**record, "mode": mode.value})
