"""Main FastAPI application with modularized routes."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import quizzes, sessions
from core.logging_setup import setup_console_logging

setup_console_logging()

app = FastAPI(title="Quiz Practice API")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
def health() -> dict[str, str]:
    """Health check."""
    return {"status": "ok"}


# Include routers
app.include_router(quizzes.router)
app.include_router(sessions.router)
