from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from document import parse_quiz
from matching import is_correct
from models import Answer, Quiz, QuizQuestion
from shuffle import build_option_orders

log = logging.getLogger(__name__)


@dataclass
class QuizSession:
    """State of one practice attempt at a loaded quiz.

    Navigation, answer recording, submission and reset are the only mutators.
    Grading never changes the session.
    """

    quiz: Quiz = field(default_factory=Quiz)
    current_index: int = 0
    answers: Dict[int, Answer] = field(default_factory=dict)
    option_orders: Dict[int, List[str]] = field(default_factory=dict)
    submitted: bool = False
    show_answer: bool = False
    rng: random.Random | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.option_orders:
            self.option_orders = build_option_orders(self.quiz, self.rng)

    @classmethod
    def from_document(
        cls,
        document: Quiz | Mapping[str, object],
        rng: random.Random | None = None,
    ) -> "QuizSession":
        session = cls(rng=rng)
        session.load_quiz(document)
        return session

    # -- lifecycle -------------------------------------------------------

    def load_quiz(self, document: Quiz | Mapping[str, object]) -> None:
        """Replace the active quiz and start a fresh attempt.

        Raw documents are validated first; a QuizValidationError leaves the
        session exactly as it was.
        """
        quiz = document if isinstance(document, Quiz) else parse_quiz(document)
        self.quiz = quiz
        self._restart()
        log.debug("Loaded quiz with %d questions", len(quiz))

    def reset(self) -> None:
        """Retry the same quiz: clear answers, reshuffle and go back to the start."""
        self._restart()
        log.debug("Session reset")

    def _restart(self) -> None:
        self.current_index = 0
        self.answers = {}
        self.option_orders = build_option_orders(self.quiz, self.rng)
        self.submitted = False
        self.show_answer = False

    def submit(self) -> None:
        if self.submitted:
            return
        self.submitted = True
        log.debug("Session submitted with %d answers", len(self.answers))

    # -- navigation ------------------------------------------------------

    def go_to(self, index: int) -> bool:
        """Move the cursor to ``index``; out-of-range requests are ignored."""
        if not 0 <= index < len(self.quiz):
            return False
        self.current_index = index
        self.show_answer = False
        return True

    def go_to_number(self, number: int) -> bool:
        return self.go_to(number - 1)

    def next(self) -> bool:
        return self.go_to(self.current_index + 1)

    def previous(self) -> bool:
        return self.go_to(self.current_index - 1)

    @property
    def has_previous(self) -> bool:
        return self.current_index > 0

    @property
    def has_next(self) -> bool:
        return self.current_index < len(self.quiz) - 1

    # -- answers ---------------------------------------------------------

    def record_answer(self, question_id: int, value: Answer) -> None:
        # shape is only checked when grading
        self.answers[question_id] = value

    def answer_current(self, value: Answer) -> None:
        question = self.current_question
        if question is not None:
            self.record_answer(question.id, value)

    def clear_answer(self, question_id: int) -> None:
        self.answers.pop(question_id, None)

    def toggle_answer(self) -> bool:
        self.show_answer = not self.show_answer
        return self.show_answer

    @property
    def answered_count(self) -> int:
        # answers may be stored under ids the quiz does not contain
        return sum(1 for question in self.quiz if question.id in self.answers)

    # -- current question ------------------------------------------------

    @property
    def current_question(self) -> QuizQuestion | None:
        if not self.quiz.questions:
            return None
        return self.quiz[self.current_index]

    @property
    def current_options(self) -> List[str]:
        question = self.current_question
        if question is None:
            return []
        return self.options_for(question)

    @property
    def current_answer(self) -> Answer | None:
        question = self.current_question
        if question is None:
            return None
        return self.answers.get(question.id)

    def options_for(self, question: QuizQuestion) -> List[str]:
        """Options in display order: the session's shuffle when there is one."""
        if question.id in self.option_orders:
            return self.option_orders[question.id]
        return list(question.options or [])

    def check(self, question: QuizQuestion) -> bool:
        return is_correct(question.answer, self.answers.get(question.id))

    def check_current(self) -> bool:
        question = self.current_question
        if question is None:
            return False
        return self.check(question)
