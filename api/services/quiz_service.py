"""Service layer for the on-disk quiz library."""
import logging

from fastapi import HTTPException

from api.config import DATA_DIR, QUIZ_FILENAME
from api.utils import quiz_path, read_json_file
from document import QuizValidationError
from serialization import serialize_metadata

log = logging.getLogger(__name__)


def load_quiz_payload(quiz_id: str) -> dict[str, object]:
    """Load quiz document from the library."""
    path = quiz_path(quiz_id)
    if not path.exists():
        raise HTTPException(status_code=404, detail="Quiz not found")
    try:
        payload = read_json_file(path)
    except QuizValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.to_payload()) from exc
    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=422,
            detail=QuizValidationError("Quiz document must be an object").to_payload(),
        )
    return payload


def list_quizzes() -> list[dict[str, object]]:
    """List library quizzes that can be read."""
    quizzes = []
    for quiz_directory in sorted(DATA_DIR.iterdir()):
        if not quiz_directory.is_dir():
            continue
        payload_file = quiz_directory / QUIZ_FILENAME
        if not payload_file.exists():
            continue
        try:
            payload = read_json_file(payload_file)
        except (QuizValidationError, OSError) as exc:
            log.warning(f"Skipping unreadable quiz {quiz_directory.name}: {exc}")
            continue
        if not isinstance(payload, dict):
            continue
        quizzes.append(serialize_metadata(quiz_directory.name, payload))
    return quizzes
