import random

from serialization import serialize_feedback, serialize_metadata, serialize_session
from session import QuizSession


def test_session_view_hides_answer_until_revealed(quiz_document) -> None:
    session = QuizSession.from_document(quiz_document, rng=random.Random(1))
    view = serialize_session("abc", session)

    assert view["sessionId"] == "abc"
    assert view["questionNumber"] == 1
    assert view["totalQuestions"] == 5
    assert view["hasPrevious"] is False
    assert view["hasNext"] is True
    assert "answer" not in view["question"]
    assert view["question"]["options"] == session.option_orders[1]
    assert "report" not in view

    session.toggle_answer()
    view = serialize_session("abc", session)
    assert view["question"]["answer"] == ["Paris"]
    assert view["question"]["explanation"].startswith("Paris")


def test_session_view_includes_report_after_submit(quiz_document) -> None:
    session = QuizSession.from_document(quiz_document)
    session.record_answer(1, "Paris")
    session.submit()
    view = serialize_session("abc", session)
    assert view["report"]["correctCount"] == 1
    assert view["report"]["totalCount"] == 5
    assert view["report"]["percentage"] == 20
    assert view["report"]["perQuestion"][1] == {
        "questionNumber": 2,
        "status": "skipped",
        "questionId": 2,
    }
    assert "answer" in view["question"]


def test_matching_question_view(quiz_document) -> None:
    session = QuizSession.from_document(quiz_document)
    session.go_to(4)
    session.answer_current({"Heading 1": "Paragraph A"})
    view = serialize_session("abc", session)
    assert view["question"]["choices"] == ["Paragraph A", "Paragraph B"]
    assert view["question"]["headings"] == ["Heading 1", "Heading 2"]
    assert view["userAnswer"] == {"Heading 1": "Paragraph A"}


def test_empty_session_view() -> None:
    session = QuizSession.from_document({"quiz": []})
    view = serialize_session("empty", session)
    assert view["question"] is None
    assert view["questionNumber"] == 0
    assert serialize_feedback(session)["answered"] is False


def test_feedback(quiz_document) -> None:
    session = QuizSession.from_document(quiz_document)
    session.go_to(2)
    session.answer_current(" paris")
    feedback = serialize_feedback(session)
    assert feedback == {
        "questionId": 3,
        "answered": True,
        "correct": True,
        "answer": "Paris",
        "userAnswer": " paris",
        "explanation": None,
    }


def test_metadata(quiz_document) -> None:
    assert serialize_metadata("reading", quiz_document) == {
        "id": "reading",
        "title": "Reading practice",
        "questionCount": 5,
    }
    assert serialize_metadata("bare", {"quiz": []})["title"] == "bare"
