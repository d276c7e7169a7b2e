"""Errors raised by the task domain and its mappers."""

from typing import Any


class TaskError(Exception):
    """Base class for every error raised by the task package."""


class TaskValidationError(TaskError, ValueError):
    """Raised when task data violates a domain invariant.

    Attributes:
        field: Name of the offending domain attribute (e.g. "title")
        message: Human-readable description of the failed invariant
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ExhaustiveMappingError(TaskError, TypeError):
    """Raised when an enum value outside the known set reaches a mapping function.

    Both status enumerations are closed, so this signals drift between the
    domain and the transport schema rather than a runtime condition.
    """

    def __init__(self, value: Any, target: str) -> None:
        self.value = value
        self.target = target
        super().__init__(f"No {target} counterpart for {value!r}")
