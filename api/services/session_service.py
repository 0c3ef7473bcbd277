"""In-memory store of practice sessions."""
import logging
import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass

from fastapi import HTTPException

from api import config
from api.utils import utc_now
from document import QuizValidationError
from session import QuizSession

log = logging.getLogger(__name__)


@dataclass
class StoredSession:
    session: QuizSession
    quiz_id: str | None
    created_at: str
    submitted_at: str | None = None


_sessions: "OrderedDict[str, StoredSession]" = OrderedDict()
_lock = threading.Lock()


def create_session(
    document: dict[str, object],
    quiz_id: str | None = None,
) -> tuple[str, StoredSession]:
    """Validate ``document`` and open a new practice session for it."""
    try:
        session = QuizSession.from_document(document)
    except QuizValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.to_payload()) from exc

    session_id = uuid.uuid4().hex
    stored = StoredSession(session=session, quiz_id=quiz_id, created_at=utc_now())
    with _lock:
        _sessions[session_id] = stored
        while len(_sessions) > config.MAX_SESSIONS:
            evicted_id, _ = _sessions.popitem(last=False)
            log.info(f"Evicted session {evicted_id}")
    log.info(
        f"Created session {session_id} with {len(session.quiz)} questions"
    )
    return session_id, stored


def get_session(session_id: str) -> StoredSession:
    """Get stored session or raise 404."""
    with _lock:
        stored = _sessions.get(session_id)
    if stored is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return stored


def submit_session(session_id: str) -> StoredSession:
    """Submit the attempt; repeated submits keep the first timestamp."""
    stored = get_session(session_id)
    if not stored.session.submitted:
        stored.session.submit()
        stored.submitted_at = utc_now()
    return stored


def reset_session(session_id: str) -> StoredSession:
    """Start the attempt over with the same quiz."""
    stored = get_session(session_id)
    stored.session.reset()
    stored.submitted_at = None
    return stored


def delete_session(session_id: str) -> bool:
    """Remove a session; returns False when it did not exist."""
    with _lock:
        stored = _sessions.pop(session_id, None)
    if stored is None:
        return False
    log.info(f"Closed session {session_id}")
    return True


def clear_sessions() -> None:
    with _lock:
        _sessions.clear()
