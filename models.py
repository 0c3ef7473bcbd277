from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence, Tuple, Union


MULTIPLE_CHOICE = "Multiple Choice"
SHORT_ANSWER = "Short-Answer Questions"
GAP_FILL = "Completion Tasks (Gap-fill)"
IDENTIFYING_INFORMATION = "Identifying Information/Views"
MATCHING = "Matching Tasks"

QUESTION_TYPES = (
    MULTIPLE_CHOICE,
    SHORT_ANSWER,
    GAP_FILL,
    IDENTIFYING_INFORMATION,
    MATCHING,
)

TRUE_FALSE_NOT_GIVEN = ("True", "False", "Not Given")

# str for short answers, a tuple for choice questions, heading -> label for matching
Answer = Union[str, Sequence[str], Mapping[str, str]]


def paragraph_label(paragraph: str) -> str:
    """Return the label of a matching-task paragraph ("Paragraph A: ..." -> "Paragraph A")."""
    return paragraph.split(":")[0]


@dataclass(frozen=True)
class QuizQuestion:
    id: int
    type: str
    answer: Answer
    question: str | None = None
    sentence: str | None = None
    statement: str | None = None
    instruction: str | None = None
    options: Sequence[str] | None = None
    headings: Sequence[str] | None = None
    paragraphs: Sequence[str] | None = None
    explanation: str | None = None

    @property
    def prompt(self) -> str:
        return self.question or self.sentence or self.statement or ""

    @property
    def is_multi_select(self) -> bool:
        return (
            self.type == MULTIPLE_CHOICE
            and isinstance(self.answer, (list, tuple))
            and len(self.answer) > 1
        )

    @property
    def paragraph_labels(self) -> List[str]:
        return [paragraph_label(paragraph) for paragraph in self.paragraphs or []]

    def choices(self) -> List[str]:
        """Fixed answer choices offered for this question type, if any."""
        if self.type == IDENTIFYING_INFORMATION:
            return list(TRUE_FALSE_NOT_GIVEN)
        if self.type == MATCHING:
            return self.paragraph_labels
        return []


@dataclass(frozen=True)
class Quiz:
    questions: Tuple[QuizQuestion, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "questions", tuple(self.questions))

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self):
        return iter(self.questions)

    def __getitem__(self, index: int) -> QuizQuestion:
        return self.questions[index]

    def find(self, question_id: int) -> QuizQuestion | None:
        return next((q for q in self.questions if q.id == question_id), None)

    def count_by_type(self) -> Mapping[str, int]:
        counts: Dict[str, int] = {}
        for question in self.questions:
            counts[question.type] = counts.get(question.type, 0) + 1
        return counts
