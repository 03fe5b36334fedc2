"""Validation of user-supplied regular expressions."""

import re


class InvalidPatternError(ValueError):
    """Raised when a search pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        """Initialize with the rejected pattern and the compiler's reason."""
        super().__init__(f"Invalid regex pattern: {reason}")
        self.pattern = pattern
        self.reason = reason


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern`` or raise InvalidPatternError."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e
