"""Task lifecycle status enumeration."""

from enum import StrEnum


class TaskStatus(StrEnum):
    """Represents the lifecycle status of a task.

    No transition rules are enforced here; any status may follow any other.

    Attributes:
        NEW: Task has been created and not yet started
        IN_PROGRESS: Task is being worked on
        DONE: Task has been completed
        CANCELED: Task was abandoned before completion
    """

    NEW = "NEW"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    CANCELED = "CANCELED"
