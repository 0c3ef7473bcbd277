from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from matching import is_correct
from models import Quiz
from session import QuizSession

STATUS_CORRECT = "correct"
STATUS_INCORRECT = "incorrect"
STATUS_SKIPPED = "skipped"


@dataclass(frozen=True)
class QuestionOutcome:
    question_number: int
    status: str
    question_id: int


@dataclass(frozen=True)
class ScoreReport:
    correct_count: int
    total_count: int
    percentage: int
    per_question: List[QuestionOutcome] = field(default_factory=list)

    @property
    def answered_count(self) -> int:
        return sum(1 for item in self.per_question if item.status != STATUS_SKIPPED)

    @property
    def incorrect_count(self) -> int:
        return sum(1 for item in self.per_question if item.status == STATUS_INCORRECT)

    @property
    def skipped_count(self) -> int:
        return sum(1 for item in self.per_question if item.status == STATUS_SKIPPED)


def percent(correct: int, total: int) -> int:
    """Whole-number percentage, halves rounded up; 0 for an empty quiz."""
    if total <= 0:
        return 0
    return math.floor(100 * correct / total + 0.5)


def compute_report(quiz: Quiz, session: QuizSession) -> ScoreReport:
    """Grade every question of ``quiz`` against the session's answers."""
    outcomes: List[QuestionOutcome] = []
    correct = 0
    for number, question in enumerate(quiz, start=1):
        if question.id not in session.answers:
            status = STATUS_SKIPPED
        elif is_correct(question.answer, session.answers[question.id]):
            status = STATUS_CORRECT
            correct += 1
        else:
            status = STATUS_INCORRECT
        outcomes.append(QuestionOutcome(number, status, question.id))

    total = len(quiz)
    return ScoreReport(
        correct_count=correct,
        total_count=total,
        percentage=percent(correct, total),
        per_question=outcomes,
    )
