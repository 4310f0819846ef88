from __future__ import annotations

import json

import pytest

from hygiene.randomness import SeededRandomSource


@pytest.fixture
def seeded_source():
    """A deterministic randomness source so generated values are repeatable."""
    return SeededRandomSource(20240611)


@pytest.fixture
def quiz_records():
    """Quiz records in the shape lesson files use, including the camelCase key."""
    return [
        {
            "question": "Which password is strongest?",
            "options": ["password1", "Tr0ub4dor&3", "hunter2"],
            "correct_index": 1,
        },
        {
            "question": "Should you reuse passwords?",
            "options": ["Yes", "No"],
            "correctIndex": 1,
        },
        {
            "question": "Pick the duplicate that is marked correct",
            "options": ["Same", "Same", "Other"],
            "correct_index": 1,
        },
    ]


@pytest.fixture
def quiz_file(tmp_path, quiz_records):
    """A quiz JSON file on disk wrapped in a top-level 'quizzes' object."""
    path = tmp_path / "lesson.json"
    path.write_text(json.dumps({"quizzes": quiz_records}), encoding="utf-8")
    return path
