"""Practice session endpoints."""
from fastapi import APIRouter, Body, HTTPException, Response

from api.models import AnswerPayload, NavigateRequest
from api.services import session_service
from scoring import compute_report
from serialization import serialize_feedback, serialize_report, serialize_session

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post("", status_code=201)
def create_session(
    payload: dict[str, object] = Body(...),
) -> dict[str, object]:
    """Load a quiz document into a new session."""
    session_id, stored = session_service.create_session(payload)
    return serialize_session(session_id, stored.session)


@router.get("/{session_id}")
def get_session(session_id: str) -> dict[str, object]:
    """Get the current state of a session."""
    stored = session_service.get_session(session_id)
    return serialize_session(session_id, stored.session)


@router.delete("/{session_id}", status_code=204)
def delete_session(session_id: str) -> Response:
    """Exit a session."""
    if not session_service.delete_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return Response(status_code=204)


@router.post("/{session_id}/navigate")
def navigate(session_id: str, payload: NavigateRequest) -> dict[str, object]:
    """Move the cursor; requests outside the quiz are ignored."""
    session = session_service.get_session(session_id).session
    if payload.index is not None:
        session.go_to(payload.index)
    elif payload.direction == "next":
        session.next()
    else:
        session.previous()
    return serialize_session(session_id, session)


@router.put("/{session_id}/answers/{question_id}")
def record_answer(
    session_id: str,
    question_id: int,
    payload: AnswerPayload,
) -> dict[str, object]:
    """Record or replace the answer to a question."""
    session = session_service.get_session(session_id).session
    session.record_answer(question_id, payload.value)
    return serialize_session(session_id, session)


@router.delete("/{session_id}/answers/{question_id}")
def clear_answer(session_id: str, question_id: int) -> dict[str, object]:
    """Forget the answer to a question."""
    session = session_service.get_session(session_id).session
    session.clear_answer(question_id)
    return serialize_session(session_id, session)


@router.get("/{session_id}/check")
def check_current(session_id: str) -> dict[str, object]:
    """Immediate feedback for the current question."""
    session = session_service.get_session(session_id).session
    return serialize_feedback(session)


@router.post("/{session_id}/reveal")
def toggle_reveal(session_id: str) -> dict[str, object]:
    """Show or hide the answer of the current question."""
    session = session_service.get_session(session_id).session
    session.toggle_answer()
    return serialize_session(session_id, session)


@router.post("/{session_id}/submit")
def submit(session_id: str) -> dict[str, object]:
    """Submit the attempt."""
    stored = session_service.submit_session(session_id)
    payload = serialize_session(session_id, stored.session)
    payload["submittedAt"] = stored.submitted_at
    return payload


@router.post("/{session_id}/reset")
def reset(session_id: str) -> dict[str, object]:
    """Retry the quiz from the start."""
    stored = session_service.reset_session(session_id)
    return serialize_session(session_id, stored.session)


@router.get("/{session_id}/report")
def get_report(session_id: str) -> dict[str, object]:
    """Score the session as it stands."""
    session = session_service.get_session(session_id).session
    return serialize_report(compute_report(session.quiz, session))
