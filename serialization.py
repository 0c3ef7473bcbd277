from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from models import Answer, QuizQuestion
from scoring import ScoreReport, compute_report
from session import QuizSession


def _answer_value(value: Answer | None) -> Any:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return dict(value)
    return list(value)


def serialize_question(
    question: QuizQuestion,
    session: QuizSession,
    reveal: bool = False,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": question.id,
        "type": question.type,
        "instruction": question.instruction,
        "question": question.question,
        "sentence": question.sentence,
        "statement": question.statement,
        "options": session.options_for(question),
        "multiSelect": question.is_multi_select,
        "choices": question.choices(),
        "headings": list(question.headings or []),
        "paragraphs": list(question.paragraphs or []),
    }
    if reveal:
        payload["answer"] = _answer_value(question.answer)
        payload["explanation"] = question.explanation
    return payload


def serialize_report(report: ScoreReport) -> dict[str, Any]:
    return {
        "correctCount": report.correct_count,
        "totalCount": report.total_count,
        "percentage": report.percentage,
        "answeredCount": report.answered_count,
        "incorrectCount": report.incorrect_count,
        "skippedCount": report.skipped_count,
        "perQuestion": [
            {
                "questionNumber": item.question_number,
                "status": item.status,
                "questionId": item.question_id,
            }
            for item in report.per_question
        ],
    }


def serialize_feedback(session: QuizSession) -> dict[str, Any]:
    """Immediate feedback for the current question."""
    question = session.current_question
    if question is None:
        return {"questionId": None, "answered": False, "correct": False}
    return {
        "questionId": question.id,
        "answered": question.id in session.answers,
        "correct": session.check(question),
        "answer": _answer_value(question.answer),
        "userAnswer": _answer_value(session.answers.get(question.id)),
        "explanation": question.explanation,
    }


def serialize_session(session_id: str, session: QuizSession) -> dict[str, Any]:
    question = session.current_question
    reveal = session.show_answer or session.submitted
    payload: dict[str, Any] = {
        "sessionId": session_id,
        "currentIndex": session.current_index,
        "questionNumber": session.current_index + 1 if question else 0,
        "totalQuestions": len(session.quiz),
        "answeredCount": session.answered_count,
        "submitted": session.submitted,
        "showAnswer": session.show_answer,
        "hasPrevious": session.has_previous,
        "hasNext": session.has_next,
        "question": serialize_question(question, session, reveal) if question else None,
        "userAnswer": _answer_value(session.current_answer),
    }
    if session.submitted:
        payload["report"] = serialize_report(compute_report(session.quiz, session))
    return payload


def serialize_metadata(quiz_id: str, payload: dict[str, Any]) -> dict[str, Any]:
    questions = payload.get("quiz", [])
    return {
        "id": quiz_id,
        "title": payload.get("title") or quiz_id,
        "questionCount": len(questions) if isinstance(questions, list) else 0,
    }
