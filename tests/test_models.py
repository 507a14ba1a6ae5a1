"""
Unit tests for data models.
"""

import pytest

from challenge_report.exceptions import ReportIOError
from challenge_report.models import (
    QuestionAttempt,
    ReportInput,
    ExportResult,
)


class TestQuestionAttempt:
    """Tests for QuestionAttempt dataclass."""

    def test_creation(self):
        """Test basic attempt creation."""
        attempt = QuestionAttempt(
            question_text="12 + 30",
            given_answer="42",
            correct_answer="42",
            score=3,
            time_taken_ms=8400,
        )

        assert attempt.question_text == "12 + 30"
        assert attempt.given_answer == "42"
        assert attempt.correct_answer == "42"
        assert attempt.score == 3
        assert attempt.time_taken_ms == 8400

    def test_time_taken_seconds_discards_fraction(self):
        """Test millisecond to second conversion."""
        attempt = QuestionAttempt("q", "a", "a", 1, time_taken_ms=8999)
        assert attempt.time_taken_seconds == 8

    def test_is_immutable(self):
        """Test that attempts cannot be modified."""
        attempt = QuestionAttempt("q", "a", "a", 1, 1000)

        with pytest.raises(AttributeError):
            attempt.score = 5

    def test_negative_time_rejected(self):
        """Test that negative durations are rejected."""
        with pytest.raises(ValueError, match="time_taken_ms"):
            QuestionAttempt("q", "a", "a", 1, time_taken_ms=-1)


class TestReportInput:
    """Tests for ReportInput dataclass."""

    def test_total_time_seconds(self):
        """Test that 12345 ms is reported as 12 seconds."""
        report = ReportInput("amina", "SCH-042", total_time_ms=12345)
        assert report.total_time_seconds == 12

    def test_zero_time(self):
        """Test zero duration."""
        report = ReportInput("amina", "SCH-042", total_time_ms=0)
        assert report.total_time_seconds == 0

    def test_attempts_stored_as_tuple(self, sample_attempts):
        """Test that attempts are frozen and keep their order."""
        report = ReportInput("amina", "SCH-042", 0, sample_attempts)

        assert isinstance(report.attempts, tuple)
        assert list(report.attempts) == sample_attempts

        sample_attempts.clear()
        assert len(report.attempts) == 3

    def test_default_attempts_empty(self):
        """Test default attempt list."""
        report = ReportInput("amina", "SCH-042", 0)
        assert report.attempts == ()

    def test_total_score(self, sample_report):
        """Test score total across attempts."""
        assert sample_report.total_score == 0  # 3 - 3 + 0

    def test_negative_total_time_rejected(self):
        """Test that negative total time is rejected."""
        with pytest.raises(ValueError, match="total_time_ms"):
            ReportInput("amina", "SCH-042", total_time_ms=-5)


class TestExportResult:
    """Tests for ExportResult dataclass."""

    def test_success(self):
        """Test result without an error."""
        result = ExportResult(filepath="report.pdf")

        assert result.success is True
        result.raise_for_error()  # no-op

    def test_failure(self):
        """Test result carrying an error."""
        error = ReportIOError("cannot open", "missing/report.pdf")
        result = ExportResult(filepath="missing/report.pdf", error=error)

        assert result.success is False
        with pytest.raises(ReportIOError):
            result.raise_for_error()
