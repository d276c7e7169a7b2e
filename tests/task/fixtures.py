"""Shared builders for task tests."""

from datetime import UTC, datetime
from typing import Any

from app.task.domain.task import Task
from app.task.domain.task_status import TaskStatus
from app.task.transport.task_model import Status, Task as TransportTask

CREATED_AT = datetime(2023, 11, 30, 10, 0, 0, tzinfo=UTC)
UPDATED_AT = datetime(2023, 11, 30, 11, 0, 0, tzinfo=UTC)


def make_domain_task(**overrides: Any) -> Task:
    """Build the full sample domain task, with optional field overrides."""
    fields: dict[str, Any] = {
        "id": "task-123",
        "title": "Test Task",
        "description": "A sample task",
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
        "status": TaskStatus.IN_PROGRESS,
        "author_id": "author-456",
        "assignee_ids": ("user-789", "user-101"),
        "priority": 2,
        "planned_time": 3600,
        "actual_time": 1800,
    }
    fields.update(overrides)
    return Task(**fields)


def make_minimal_task(**overrides: Any) -> Task:
    """Build a domain task with only the required fields set."""
    fields: dict[str, Any] = {
        "id": "test-1",
        "title": "Test",
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
        "status": TaskStatus.NEW,
        "author_id": "author-1",
    }
    fields.update(overrides)
    return Task(**fields)


def make_transport_task(**overrides: Any) -> TransportTask:
    """Build the full sample transport task, with optional field overrides."""
    fields: dict[str, Any] = {
        "id": "task-123",
        "title": "Test Task",
        "description": "A sample task",
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
        "status": Status.done,
        "author_id": "author-456",
        "assignee_ids": ["user-789", "user-101"],
        "priority": 2,
        "planned_time": 3600,
        "actual_time": 1800,
    }
    fields.update(overrides)
    return TransportTask(**fields)
