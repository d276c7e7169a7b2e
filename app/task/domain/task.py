"""Task domain model."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import uuid6

from app.task.domain.errors import TaskValidationError
from app.task.domain.task_status import TaskStatus
from app.task.utils.time_conversion import offset_datetime_to_instant


@dataclass(frozen=True)
class Task:
    """The business-owned representation of a task.

    Instances are immutable and validate themselves on construction, so an
    invalid task is never observable. Every "update" goes through
    ``with_changes`` which builds a new instance and re-runs all invariants.

    Attributes:
        id: Unique task identifier
        title: Task title (must not be blank)
        created_at: Creation instant (timezone-aware, normalized to UTC)
        updated_at: Last modification instant (timezone-aware, normalized to UTC)
        status: Lifecycle status
        author_id: Identifier of the user who created the task
        description: Optional free-form description
        assignee_ids: Identifiers of assigned users (empty when unassigned)
        priority: Optional priority, strictly positive when set
        planned_time: Optional planned effort, non-negative when set
        actual_time: Optional spent effort, non-negative when set
    """

    id: str
    title: str
    created_at: datetime
    updated_at: datetime
    status: TaskStatus
    author_id: str
    description: str | None = None
    assignee_ids: tuple[str, ...] = ()
    priority: int | None = None
    planned_time: int | None = None
    actual_time: int | None = None

    def __post_init__(self) -> None:
        """Validate task invariants."""
        if not self.title or not self.title.strip():
            raise TaskValidationError("title", "Task title cannot be blank")
        if self.priority is not None and self.priority <= 0:
            raise TaskValidationError("priority", "Priority must be positive")
        if self.planned_time is not None and self.planned_time < 0:
            raise TaskValidationError("planned_time", "Planned time cannot be negative")
        if self.actual_time is not None and self.actual_time < 0:
            raise TaskValidationError("actual_time", "Actual time cannot be negative")
        # A bare string is iterable and would be split into characters
        if self.assignee_ids is None or isinstance(self.assignee_ids, (str, bytes)):
            raise TaskValidationError(
                "assignee_ids", "Assignee ids must be a collection of strings"
            )

        # Frozen: normalized values have to bypass __setattr__
        object.__setattr__(self, "created_at", _as_utc_instant("created_at", self.created_at))
        object.__setattr__(self, "updated_at", _as_utc_instant("updated_at", self.updated_at))
        object.__setattr__(self, "assignee_ids", tuple(self.assignee_ids))

    @classmethod
    def create(
        cls,
        title: str,
        author_id: str,
        description: str | None = None,
        assignee_ids: Iterable[str] = (),
        priority: int | None = None,
        planned_time: int | None = None,
        now: datetime | None = None,
    ) -> Task:
        """Create a brand-new task with a generated id.

        Args:
            title: Task title
            author_id: Identifier of the creating user
            description: Optional description
            assignee_ids: Identifiers of assigned users
            priority: Optional priority
            planned_time: Optional planned effort
            now: Creation instant (defaults to the current UTC time)

        Returns:
            Task in NEW status with created_at == updated_at

        Raises:
            TaskValidationError: If any invariant is violated
        """
        timestamp = now or datetime.now(UTC)
        return cls(
            id=str(uuid6.uuid7()),
            title=title,
            created_at=timestamp,
            updated_at=timestamp,
            status=TaskStatus.NEW,
            author_id=author_id,
            description=description,
            assignee_ids=assignee_ids,
            priority=priority,
            planned_time=planned_time,
        )

    def with_changes(self, **changes: Any) -> Task:
        """Return a copy of this task with the given fields replaced.

        ``dataclasses.replace`` goes through ``__init__``, so the copy is
        validated exactly like a freshly constructed task. ``updated_at`` is
        not refreshed automatically.

        Raises:
            TaskValidationError: If the resulting task violates an invariant
        """
        return dataclasses.replace(self, **changes)

    def with_status(self, status: TaskStatus, updated_at: datetime) -> Task:
        """Return a copy of this task moved to ``status``.

        Args:
            status: New lifecycle status
            updated_at: Modification instant supplied by the caller
        """
        return self.with_changes(status=status, updated_at=updated_at)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "status": self.status.name,
            "author_id": self.author_id,
            "assignee_ids": list(self.assignee_ids),
            "priority": self.priority,
            "planned_time": self.planned_time,
            "actual_time": self.actual_time,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        """
        Rebuild a task from the output of ``to_dict``.

        Args:
            data: Serialized task.

        Returns:
            Validated Task instance.

        Raises:
            KeyError: If a required key or status name is missing.
            TaskValidationError: If the data violates an invariant.
        """
        return cls(
            id=data["id"],
            title=data["title"],
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
            status=TaskStatus[data["status"]],
            author_id=data["author_id"],
            description=data.get("description"),
            assignee_ids=tuple(data.get("assignee_ids") or ()),
            priority=data.get("priority"),
            planned_time=data.get("planned_time"),
            actual_time=data.get("actual_time"),
        )


def _as_utc_instant(field: str, value: datetime) -> datetime:
    try:
        return offset_datetime_to_instant(value)
    except ValueError as error:
        raise TaskValidationError(field, f"{field} must be timezone-aware") from error
