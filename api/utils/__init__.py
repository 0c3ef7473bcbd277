"""Utility modules."""
from core.json_utils import (
    json_dump,
    json_load,
    read_json_file,
    write_json_file,
)
from api.utils.paths import quiz_dir, quiz_path
from api.utils.time_utils import utc_now
from api.utils.validation import validate_id, validate_quiz_exists

__all__ = [
    "json_dump",
    "json_load",
    "read_json_file",
    "write_json_file",
    "quiz_dir",
    "quiz_path",
    "utc_now",
    "validate_id",
    "validate_quiz_exists",
]
