"""Application configuration and constants."""
import os
from pathlib import Path


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Directories
DATA_DIR = Path(os.environ.get("QUIZ_DATA_DIR", Path.cwd() / "data" / "quizzes"))
DATA_DIR.mkdir(parents=True, exist_ok=True)

QUIZ_FILENAME = "quiz.json"

# Sessions
MAX_SESSIONS = max(1, _parse_int_env("QUIZ_MAX_SESSIONS", 256))

# Server
HOST = os.environ.get("QUIZ_HOST", "127.0.0.1")
PORT = _parse_int_env("QUIZ_PORT", 8000)
