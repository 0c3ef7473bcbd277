"""Shared fixtures for quiz practice tests."""
import os
import tempfile

import pytest

# the API config creates its data directory on import
os.environ.setdefault("QUIZ_DATA_DIR", tempfile.mkdtemp(prefix="quiz_data_"))


@pytest.fixture
def quiz_document() -> dict:
    """One question of every kind, as a quiz editor would export it."""
    return {
        "title": "Reading practice",
        "quiz": [
            {
                "id": 1,
                "type": "Multiple Choice",
                "question": "What is the capital of France?",
                "options": ["Berlin", "Paris", "Madrid", "Rome"],
                "answer": ["Paris"],
                "explanation": "Paris has been the capital since 987.",
            },
            {
                "id": 2,
                "type": "Multiple Choice",
                "instruction": "Choose TWO letters.",
                "question": "Which are primary colours?",
                "options": ["Red", "Green", "Blue", "Orange"],
                "answer": ["Red", "Blue"],
            },
            {
                "id": 3,
                "type": "Completion Tasks (Gap-fill)",
                "sentence": "The Seine flows through ____.",
                "answer": "Paris",
            },
            {
                "id": 4,
                "type": "Identifying Information/Views",
                "statement": "The Louvre is the largest art museum in the world.",
                "answer": "True",
            },
            {
                "id": 5,
                "type": "Matching Tasks",
                "headings": ["Heading 1", "Heading 2"],
                "paragraphs": [
                    "Paragraph A: Early history of the city.",
                    "Paragraph B: Modern architecture.",
                ],
                "answer": {"Heading 1": "Paragraph A", "Heading 2": "Paragraph B"},
            },
        ],
    }
