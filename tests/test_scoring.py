from scoring import (
    STATUS_CORRECT,
    STATUS_INCORRECT,
    STATUS_SKIPPED,
    compute_report,
    percent,
)
from session import QuizSession


def _four_question_document() -> dict:
    return {
        "quiz": [
            {"id": 1, "type": "Short-Answer Questions", "question": "1+1?", "answer": "two"},
            {"id": 2, "type": "Multiple Choice", "question": "Pick B", "options": ["A", "B"], "answer": ["B"]},
            {"id": 3, "type": "Identifying Information/Views", "statement": "Sky is blue", "answer": "True"},
            {
                "id": 4,
                "type": "Matching Tasks",
                "headings": ["H1"],
                "paragraphs": ["Paragraph A: text"],
                "answer": {"H1": "Paragraph A"},
            },
        ]
    }


def test_three_of_four_correct() -> None:
    session = QuizSession.from_document(_four_question_document())
    session.record_answer(1, " Two ")
    session.record_answer(2, "B")
    session.record_answer(3, "True")
    session.record_answer(4, {"H1": "Paragraph B"})

    report = compute_report(session.quiz, session)
    assert report.correct_count == 3
    assert report.total_count == 4
    assert report.percentage == 75
    assert [item.status for item in report.per_question] == [
        STATUS_CORRECT,
        STATUS_CORRECT,
        STATUS_CORRECT,
        STATUS_INCORRECT,
    ]
    assert [item.question_number for item in report.per_question] == [1, 2, 3, 4]


def test_unanswered_question_is_skipped_not_incorrect() -> None:
    session = QuizSession.from_document(_four_question_document())
    session.record_answer(1, "three")

    report = compute_report(session.quiz, session)
    statuses = {item.question_id: item.status for item in report.per_question}
    assert statuses == {
        1: STATUS_INCORRECT,
        2: STATUS_SKIPPED,
        3: STATUS_SKIPPED,
        4: STATUS_SKIPPED,
    }
    assert report.answered_count == 1
    assert report.incorrect_count == 1
    assert report.skipped_count == 3
    assert report.percentage == 0


def test_blank_answer_counts_as_incorrect() -> None:
    session = QuizSession.from_document(_four_question_document())
    session.record_answer(1, "")
    report = compute_report(session.quiz, session)
    assert report.per_question[0].status == STATUS_INCORRECT


def test_empty_quiz_scores_zero() -> None:
    session = QuizSession.from_document({"quiz": []})
    report = compute_report(session.quiz, session)
    assert report.total_count == 0
    assert report.correct_count == 0
    assert report.percentage == 0
    assert report.per_question == []


def test_report_is_pure() -> None:
    session = QuizSession.from_document(_four_question_document())
    session.record_answer(2, ["B"])
    answers_before = dict(session.answers)

    first = compute_report(session.quiz, session)
    second = compute_report(session.quiz, session)
    assert first == second
    assert session.answers == answers_before
    assert not session.submitted


def test_percent_rounds_half_up() -> None:
    assert percent(1, 8) == 13
    assert percent(1, 3) == 33
    assert percent(2, 3) == 67
    assert percent(5, 5) == 100
    assert percent(0, 0) == 0
