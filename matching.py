"""Answer comparison for every answer shape a quiz can hold.

Reference and submitted answers are compared by their runtime shape, never by
the question's declared type, so a document pairing e.g. a "Matching Tasks"
tag with a string answer is graded instead of failing.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str)


def _mapping_matches(reference: Mapping, submitted: object) -> bool:
    if not isinstance(submitted, Mapping):
        return False
    if len(reference) != len(submitted):
        return False
    return all(
        key in submitted and submitted[key] == value
        for key, value in reference.items()
    )


def _sequence_matches(reference: Sequence, submitted: object) -> bool:
    if _is_sequence(submitted):
        # length + containment, duplicates are not counted
        return len(reference) == len(submitted) and all(
            item in submitted for item in reference
        )
    if isinstance(submitted, str):
        # single-select questions submit the chosen option as a plain string
        return len(reference) == 1 and reference[0] == submitted
    return False


def _text_matches(reference: str, submitted: object) -> bool:
    if not isinstance(submitted, str):
        return False
    return submitted.strip().lower() == reference.lower()


def is_correct(reference: object, submitted: object) -> bool:
    """Return True when ``submitted`` matches the ``reference`` answer.

    An absent or blank submission is never correct. Shape mismatches between
    the two values are treated as incorrect rather than raising.
    """
    if submitted is None or submitted == "":
        return False
    if isinstance(reference, Mapping):
        return _mapping_matches(reference, submitted)
    if _is_sequence(reference):
        return _sequence_matches(reference, submitted)
    if isinstance(reference, str):
        return _text_matches(reference, submitted)
    return False
