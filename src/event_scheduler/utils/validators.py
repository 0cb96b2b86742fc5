"""Reusable validation utilities."""

from event_scheduler.config import Config

_DIGITS = "0123456789"


def _shape_matches(text: str, length: int, separators: dict) -> bool:
    """Check fixed-width text: separator chars at given positions, digits elsewhere."""
    if not isinstance(text, str) or len(text) != length:
        return False

    for index, char in enumerate(text):
        expected = separators.get(index)
        if expected is not None:
            if char != expected:
                return False
        elif char not in _DIGITS:
            return False

    return True


class InputValidator:
    """Centralized input validation for event fields."""

    @staticmethod
    def validate_date(date: str) -> bool:
        """
        Check that a date has the YYYY-MM-DD shape.

        Only the shape is checked, so "2024-13-99" is accepted.
        """
        return _shape_matches(date, Config.DATE_LENGTH, {4: "-", 7: "-"})

    @staticmethod
    def validate_time(time: str) -> bool:
        """
        Check that a time has the HH:MM shape.

        Only the shape is checked, so "25:99" is accepted.
        """
        return _shape_matches(time, Config.TIME_LENGTH, {2: ":"})


validate_date = InputValidator.validate_date
validate_time = InputValidator.validate_time
