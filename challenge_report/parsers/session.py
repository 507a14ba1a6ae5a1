"""
Parser for challenge session files.

The quiz runner saves each finished session as a JSON record with
the participant details and the list of answered questions. Both the
runner's camelCase keys and snake_case keys are accepted.
"""

import json
from typing import Any, Dict, Sequence

from ..models import QuestionAttempt, ReportInput


class SessionParser:
    """
    Parser for challenge session JSON.

    Expected format:
        {
            "username": "amina",
            "schoolRegNo": "SCH-042",
            "totalTime": 95000,
            "attempts": [
                {
                    "questionText": "12 + 30",
                    "givenAnswer": "42",
                    "correctAnswer": "42",
                    "score": 3,
                    "timeTaken": 8400
                }
            ]
        }

    "totalTime" may be omitted, in which case the attempt times are summed.
    """

    # field name -> accepted keys, first match wins
    SESSION_KEYS = {
        'username': ('username',),
        'school_reg_no': ('schoolRegNo', 'school_reg_no'),
        'total_time_ms': ('totalTime', 'total_time_ms'),
        'attempts': ('attempts', 'questionAttempts'),
    }
    ATTEMPT_KEYS = {
        'question_text': ('questionText', 'question_text'),
        'given_answer': ('givenAnswer', 'given_answer'),
        'correct_answer': ('correctAnswer', 'correct_answer'),
        'score': ('score',),
        'time_taken_ms': ('timeTaken', 'time_taken_ms'),
    }

    def parse_file(self, filepath: str) -> ReportInput:
        """
        Load a session from a JSON file.

        Args:
            filepath: Path to the session file

        Returns:
            ReportInput built from the file

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not valid JSON or misses fields
        """
        with open(filepath, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"{filepath} is not valid JSON: {e}") from e
        return self.parse(data)

    def parse(self, data: Dict[str, Any]) -> ReportInput:
        """
        Build a ReportInput from a decoded session record.

        Raises:
            ValueError: If a required field is missing or malformed
        """
        if not isinstance(data, dict):
            raise ValueError("Session data must be a JSON object")

        raw_attempts = self._lookup(data, 'attempts', default=[])
        if not isinstance(raw_attempts, list):
            raise ValueError("'attempts' must be a list")
        attempts = [self._parse_attempt(a, i) for i, a in enumerate(raw_attempts, 1)]

        total_time = self._lookup(data, 'total_time_ms', default=None)
        if total_time is None:
            total_time = sum(a.time_taken_ms for a in attempts)

        return ReportInput(
            username=str(self._lookup(data, 'username')),
            school_reg_no=str(self._lookup(data, 'school_reg_no')),
            total_time_ms=self._to_int(total_time, 'totalTime'),
            attempts=attempts,
        )

    def _parse_attempt(self, raw: Any, index: int) -> QuestionAttempt:
        """Parse a single attempt record."""
        if not isinstance(raw, dict):
            raise ValueError(f"Attempt #{index} must be a JSON object")

        where = f"attempt #{index}"
        return QuestionAttempt(
            question_text=str(self._lookup(raw, 'question_text', where=where, keys=self.ATTEMPT_KEYS)),
            given_answer=str(self._lookup(raw, 'given_answer', where=where, keys=self.ATTEMPT_KEYS, default='')),
            correct_answer=str(self._lookup(raw, 'correct_answer', where=where, keys=self.ATTEMPT_KEYS)),
            score=self._to_int(
                self._lookup(raw, 'score', where=where, keys=self.ATTEMPT_KEYS, default=0),
                f"{where} score"),
            time_taken_ms=self._to_int(
                self._lookup(raw, 'time_taken_ms', where=where, keys=self.ATTEMPT_KEYS, default=0),
                f"{where} timeTaken"),
        )

    _MISSING = object()

    def _lookup(self, data: Dict[str, Any], field: str, where: str = "session",
                keys: Dict[str, Sequence[str]] = None, default: Any = _MISSING) -> Any:
        """Return the value stored under any of the accepted keys for field.

        A null value counts as absent.
        """
        candidates: Sequence[str] = (keys or self.SESSION_KEYS)[field]
        for key in candidates:
            if data.get(key) is not None:
                return data[key]
        if default is self._MISSING:
            raise ValueError(f"Missing '{candidates[0]}' in {where}")
        return default

    @staticmethod
    def _to_int(value: Any, name: str) -> int:
        """Convert a whole number (int or integral float/string) to int."""
        if isinstance(value, bool):
            raise ValueError(f"{name} must be a whole number, got {value!r}")
        if isinstance(value, int):
            return value
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"{name} must be a whole number, got {value!r}")
        if not number.is_integer():
            raise ValueError(f"{name} must be a whole number, got {value!r}")
        return int(number)

