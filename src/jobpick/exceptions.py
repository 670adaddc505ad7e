"""Custom exceptions for jobpick."""

from __future__ import annotations


class JobpickError(Exception):
    """Base exception for all jobpick errors."""

    pass


class ValidationError(JobpickError):
    """Raised when input validation fails."""

    pass


class InvalidIntervalError(ValidationError):
    """Raised when a task does not describe a valid interval (start must be < end)."""

    def __init__(self, index: int, start: object, end: object, reason: str | None = None):
        self.index = index
        self.start = start
        self.end = end
        detail = reason or "start must be before end"
        super().__init__(f"Invalid interval at index {index}: [{start}, {end}) - {detail}")


class SelectionLimitError(JobpickError):
    """Raised when a task set is too large for the exhaustive selector."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"Exhaustive selection refused for {size} tasks (limit is {limit}); "
            "use the greedy selector or raise exhaustive.max_tasks"
        )


class ParseError(JobpickError):
    """Raised when a task file cannot be parsed."""

    pass
