"""Pydantic models."""
from api.models.sessions import AnswerPayload, NavigateRequest

__all__ = [
    "AnswerPayload",
    "NavigateRequest",
]
