"""Task domain models."""

from app.task.domain.errors import ExhaustiveMappingError, TaskError, TaskValidationError
from app.task.domain.task import Task
from app.task.domain.task_status import TaskStatus

__all__ = [
    "ExhaustiveMappingError",
    "Task",
    "TaskError",
    "TaskStatus",
    "TaskValidationError",
]
