"""Quiz document validation.

A quiz document is a JSON object ``{"quiz": [question, ...]}``. The models
below describe the shape the practice engine relies on; anything outside that
shape is rejected before a session is touched.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
    model_validator,
)

from models import Answer, Quiz, QuizQuestion

log = logging.getLogger(__name__)

AnswerField = Union[StrictStr, List[StrictStr], Dict[StrictStr, StrictStr]]


class QuizValidationError(ValueError):
    """Raised when a quiz document does not satisfy the shape contract."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        question_id: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        self.question_id = question_id

    def __str__(self) -> str:
        details = []
        if self.field:
            details.append(f"field '{self.field}'")
        if self.question_id is not None:
            details.append(f"question {self.question_id}")
        if not details:
            return self.message
        return f"{self.message} ({', '.join(details)})"

    def to_payload(self) -> dict[str, object]:
        return {
            "message": self.message,
            "field": self.field,
            "questionId": self.question_id,
        }


def _frozen(values: Optional[List[str]]) -> Optional[Tuple[str, ...]]:
    return tuple(values) if values is not None else None


def _frozen_answer(answer: Any) -> Answer:
    if isinstance(answer, dict):
        return MappingProxyType(dict(answer))
    if isinstance(answer, list):
        return tuple(answer)
    return answer


class QuestionRecord(BaseModel):
    """One question record of a quiz document."""

    id: StrictInt
    type: StrictStr
    question: Optional[StrictStr] = None
    sentence: Optional[StrictStr] = None
    statement: Optional[StrictStr] = None
    instruction: Optional[StrictStr] = None
    options: Optional[List[StrictStr]] = None
    headings: Optional[List[StrictStr]] = None
    paragraphs: Optional[List[StrictStr]] = None
    answer: AnswerField
    explanation: Optional[StrictStr] = None

    @field_validator("type")
    @classmethod
    def type_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("type must not be empty")
        return value

    @model_validator(mode="after")
    def has_content(self) -> "QuestionRecord":
        has_text = any(
            value is not None for value in (self.question, self.sentence, self.statement)
        )
        has_matching = self.headings is not None and self.paragraphs is not None
        if not has_text and not has_matching:
            raise ValueError(
                "question needs question, sentence or statement text, "
                "or both headings and paragraphs"
            )
        return self

    def to_question(self) -> QuizQuestion:
        return QuizQuestion(
            id=self.id,
            type=self.type,
            answer=_frozen_answer(self.answer),
            question=self.question,
            sentence=self.sentence,
            statement=self.statement,
            instruction=self.instruction,
            options=_frozen(self.options),
            headings=_frozen(self.headings),
            paragraphs=_frozen(self.paragraphs),
            explanation=self.explanation,
        )


class QuizDocument(BaseModel):
    quiz: List[QuestionRecord]


def _raw_question_id(payload: dict[str, Any], index: object) -> int | None:
    questions = payload.get("quiz")
    if not isinstance(questions, list) or not isinstance(index, int):
        return None
    if index >= len(questions):
        return None
    record = questions[index]
    question_id = record.get("id") if isinstance(record, dict) else None
    if isinstance(question_id, int) and not isinstance(question_id, bool):
        return question_id
    return None


def _to_validation_error(
    payload: dict[str, Any], exc: ValidationError
) -> QuizValidationError:
    error = exc.errors()[0]
    loc = list(error.get("loc", ()))
    message = error.get("msg", "Invalid quiz document")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]

    if len(loc) >= 2 and loc[0] == "quiz":
        question_id = _raw_question_id(payload, loc[1])
        field = None
        if len(loc) > 2:
            field = str(loc[2])
        elif error.get("type") == "value_error":
            # missing content is reported on the record, not on a field
            field = "question"
        return QuizValidationError(message, field=field, question_id=question_id)
    return QuizValidationError(message, field=str(loc[0]) if loc else None)


def parse_quiz(payload: object) -> Quiz:
    """Validate a parsed quiz document and build a :class:`Quiz`.

    Raises:
        QuizValidationError: naming the first offending field and question id.
    """
    if not isinstance(payload, dict):
        raise QuizValidationError("Quiz document must be an object")
    try:
        document = QuizDocument.model_validate(payload)
    except ValidationError as exc:
        error = _to_validation_error(payload, exc)
        log.warning("Rejected quiz document: %s", error)
        raise error from exc

    seen: set[int] = set()
    for record in document.quiz:
        if record.id in seen:
            error = QuizValidationError(
                "Duplicate question id", field="id", question_id=record.id
            )
            log.warning("Rejected quiz document: %s", error)
            raise error
        seen.add(record.id)
    return Quiz(tuple(record.to_question() for record in document.quiz))
