"""
Pytest configuration and shared fixtures.
"""

import sys
import os

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from challenge_report.models import QuestionAttempt, ReportInput


@pytest.fixture
def sample_attempts():
    """Three attempts, the first with a question longer than its column."""
    return [
        QuestionAttempt(
            question_text="What is the sum of all prime numbers between ten and fifty?",
            given_answer="311",
            correct_answer="311",
            score=3,
            time_taken_ms=45250,
        ),
        QuestionAttempt(
            question_text="12 x 12",
            given_answer="124",
            correct_answer="144",
            score=-3,
            time_taken_ms=8900,
        ),
        QuestionAttempt(
            question_text="Square root of 81",
            given_answer="",
            correct_answer="9",
            score=0,
            time_taken_ms=999,
        ),
    ]


@pytest.fixture
def sample_report(sample_attempts):
    """Report input for a typical finished session."""
    return ReportInput(
        username="amina",
        school_reg_no="SCH-042",
        total_time_ms=12345,
        attempts=sample_attempts,
    )


@pytest.fixture
def sample_session_data():
    """Session record as saved by the quiz runner."""
    return {
        "username": "amina",
        "schoolRegNo": "SCH-042",
        "totalTime": 55149,
        "attempts": [
            {
                "questionText": "12 + 30",
                "givenAnswer": "42",
                "correctAnswer": "42",
                "score": 3,
                "timeTaken": 8400,
            },
            {
                "questionText": "7 x 8",
                "givenAnswer": "54",
                "correctAnswer": "56",
                "score": -3,
                "timeTaken": 46749,
            },
        ],
    }
