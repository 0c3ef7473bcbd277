"""Validation utilities."""
from pathlib import Path

from fastapi import HTTPException

from api.utils.paths import quiz_path


def validate_id(name: str, value: str) -> str:
    """Validate ID string (no path traversal)."""
    if not isinstance(value, str):
        raise HTTPException(status_code=400, detail=f"{name} is required")
    cleaned = value.strip()
    if not cleaned:
        raise HTTPException(status_code=400, detail=f"{name} is required")
    if cleaned in {".", ".."}:
        raise HTTPException(status_code=400, detail=f"Invalid {name}")
    if Path(cleaned).name != cleaned or "/" in cleaned or "\\" in cleaned:
        raise HTTPException(status_code=400, detail=f"Invalid {name}")
    return cleaned


def validate_quiz_exists(quiz_id: str) -> None:
    """Validate that quiz exists."""
    if not quiz_path(quiz_id).exists():
        raise HTTPException(status_code=404, detail="Quiz not found")
