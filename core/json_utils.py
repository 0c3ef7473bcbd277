"""JSON utilities for quiz documents."""
import json
from pathlib import Path

from document import QuizValidationError


def json_dump(payload: object) -> str:
    """Serialize object to pretty JSON string."""
    return json.dumps(payload, ensure_ascii=False, indent=2)


def json_load(data: str) -> object:
    """Deserialize JSON text, reporting syntax errors as document errors."""
    try:
        return json.loads(data)
    except json.JSONDecodeError as exc:
        raise QuizValidationError(
            f"Invalid JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}"
        ) from exc


def read_json_file(path: Path) -> object:
    """Read and parse a JSON document."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise QuizValidationError(
            f"Quiz file is not valid UTF-8 (byte {exc.start})"
        ) from exc
    return json_load(text)


def write_json_file(path: Path, payload: object) -> None:
    """Write object as JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json_dump(payload), encoding="utf-8")
