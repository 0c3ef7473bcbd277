"""API route modules."""
from api.routes import quizzes, sessions

__all__ = ["quizzes", "sessions"]
