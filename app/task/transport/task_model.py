"""
Transport models for the Task resource.

Mirrors the ``Task`` component of the bundled ``openapi.json``: camelCase field
names, nullable collections, lower-case status spelling and offset-qualified
timestamps. The shape is owned by the contract, so no business rules live here.
"""

from enum import Enum

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


class Status(str, Enum):
    """Task status as spelled by the API contract."""

    new = "new"
    in_progress = "in_progress"
    done = "done"
    canceled = "canceled"


class Task(BaseModel):
    """Task as exchanged at the HTTP boundary."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    description: str | None = None
    created_at: AwareDatetime = Field(alias="createdAt")
    updated_at: AwareDatetime = Field(alias="updatedAt")
    status: Status
    author_id: str = Field(alias="authorId")
    assignee_ids: tuple[str, ...] | None = Field(default=None, alias="assigneeIds")
    priority: int | None = None
    planned_time: int | None = Field(default=None, alias="plannedTime")
    actual_time: int | None = Field(default=None, alias="actualTime")
