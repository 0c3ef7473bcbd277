"""Path utilities for the quiz library."""
from pathlib import Path

from api.config import DATA_DIR, QUIZ_FILENAME


def quiz_dir(quiz_id: str) -> Path:
    """Get directory for quiz."""
    return DATA_DIR / quiz_id


def quiz_path(quiz_id: str) -> Path:
    """Get path to quiz document JSON."""
    return quiz_dir(quiz_id) / QUIZ_FILENAME
