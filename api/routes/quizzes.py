"""Quiz library endpoints."""
from fastapi import APIRouter

from api.services import quiz_service, session_service
from api.utils import validate_id, validate_quiz_exists
from serialization import serialize_session

router = APIRouter(prefix="/api/quizzes", tags=["quizzes"])


@router.get("")
def list_quizzes() -> list[dict[str, object]]:
    """List quizzes stored in the library."""
    return quiz_service.list_quizzes()


@router.post("/{quiz_id}/sessions", status_code=201)
def start_quiz_session(quiz_id: str) -> dict[str, object]:
    """Open a practice session for a library quiz."""
    quiz_id = validate_id("quizId", quiz_id)
    validate_quiz_exists(quiz_id)
    payload = quiz_service.load_quiz_payload(quiz_id)
    session_id, stored = session_service.create_session(payload, quiz_id=quiz_id)
    return serialize_session(session_id, stored.session)
