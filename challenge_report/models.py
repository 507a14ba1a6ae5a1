"""
Data models for the Challenge Report package.

This module contains dataclasses representing answered questions,
the session data passed to renderers, and export results.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .exceptions import ReportError


def _check_duration(name: str, value: int) -> None:
    """Reject negative durations."""
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class QuestionAttempt:
    """
    Represents one answered question from a challenge session.

    Attributes:
        question_text: The question as shown to the participant
        given_answer: Answer entered by the participant
        correct_answer: Expected answer
        score: Marks awarded for this question
        time_taken_ms: Time spent on the question in milliseconds
    """
    question_text: str
    given_answer: str
    correct_answer: str
    score: int
    time_taken_ms: int = 0

    def __post_init__(self):
        _check_duration("time_taken_ms", self.time_taken_ms)

    @property
    def time_taken_seconds(self) -> int:
        """Time taken in whole seconds (fraction discarded)."""
        return self.time_taken_ms // 1000


@dataclass(frozen=True)
class ReportInput:
    """
    Everything needed to render a challenge report.

    Attributes:
        username: Participant username
        school_reg_no: School registration number of the participant
        total_time_ms: Total time for the challenge in milliseconds
        attempts: Question attempts in the order they were asked
    """
    username: str
    school_reg_no: str
    total_time_ms: int
    attempts: Sequence[QuestionAttempt] = field(default_factory=tuple)

    def __post_init__(self):
        _check_duration("total_time_ms", self.total_time_ms)
        # Freeze whatever sequence the caller handed over
        object.__setattr__(self, "attempts", tuple(self.attempts))

    @property
    def total_time_seconds(self) -> int:
        """Total time in whole seconds (fraction discarded)."""
        return self.total_time_ms // 1000

    @property
    def total_score(self) -> int:
        """Sum of the scores of all attempts."""
        return sum(a.score for a in self.attempts)


@dataclass
class ExportResult:
    """
    Outcome of writing a report file.

    Attributes:
        filepath: Destination path of the export
        error: None on success, otherwise the failure that stopped the export
    """
    filepath: str
    error: Optional[ReportError] = None

    @property
    def success(self) -> bool:
        """True when the file was written completely."""
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the carried error, if any."""
        if self.error is not None:
            raise self.error

