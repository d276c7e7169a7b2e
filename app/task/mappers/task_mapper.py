"""
Mapping between the domain Task and the transport Task.

Both directions are pure functions. Status translation is an explicit
``match`` over each closed enum so that adding a member on either side is
reported by the type checker until the table is extended.
"""

import logging
from collections.abc import Iterable
from typing import Never, NoReturn

from app.task.domain.errors import ExhaustiveMappingError
from app.task.domain.task import Task as DomainTask
from app.task.domain.task_status import TaskStatus as DomainTaskStatus
from app.task.transport.task_model import Status as TransportStatus
from app.task.transport.task_model import Task as TransportTask
from app.task.utils.time_conversion import (
    instant_to_offset_datetime,
    offset_datetime_to_instant,
)

logger = logging.getLogger(__name__)


# Domain -> Transport


def to_transport(task: DomainTask) -> TransportTask:
    """
    Convert a domain task to its transport representation.

    An empty assignee tuple becomes ``None``; timestamps are emitted at +00:00.

    Args:
        task: Valid domain task.

    Returns:
        Immutable transport task.
    """
    logger.debug("Mapping domain task %s to transport", task.id)
    return TransportTask(
        id=task.id,
        title=task.title,
        description=task.description,
        created_at=instant_to_offset_datetime(task.created_at),
        updated_at=instant_to_offset_datetime(task.updated_at),
        status=status_to_transport(task.status),
        author_id=task.author_id,
        assignee_ids=task.assignee_ids or None,
        priority=task.priority,
        planned_time=task.planned_time,
        actual_time=task.actual_time,
    )


def status_to_transport(status: DomainTaskStatus) -> TransportStatus:
    """Translate a domain status to the contract's spelling."""
    match status:
        case DomainTaskStatus.NEW:
            return TransportStatus.new
        case DomainTaskStatus.IN_PROGRESS:
            return TransportStatus.in_progress
        case DomainTaskStatus.DONE:
            return TransportStatus.done
        case DomainTaskStatus.CANCELED:
            return TransportStatus.canceled
        case _:
            _unmapped(status, TransportStatus.__name__)


def to_transport_list(tasks: Iterable[DomainTask]) -> list[TransportTask]:
    """Convert domain tasks to transport tasks, preserving order."""
    return [to_transport(task) for task in tasks]


# Transport -> Domain


def to_domain(task: TransportTask) -> DomainTask:
    """
    Convert a transport task to a validated domain task.

    A ``None`` assignee list becomes an empty tuple; timestamps are collapsed
    to UTC instants (the incoming offset is discarded).

    Args:
        task: Transport task, typically parsed from a request body.

    Returns:
        Domain task.

    Raises:
        TaskValidationError: If the values violate a domain invariant.
    """
    logger.debug("Mapping transport task %s to domain", task.id)
    return DomainTask(
        id=task.id,
        title=task.title,
        description=task.description,
        created_at=offset_datetime_to_instant(task.created_at),
        updated_at=offset_datetime_to_instant(task.updated_at),
        status=status_to_domain(task.status),
        author_id=task.author_id,
        assignee_ids=tuple(task.assignee_ids or ()),
        priority=task.priority,
        planned_time=task.planned_time,
        actual_time=task.actual_time,
    )


def status_to_domain(status: TransportStatus) -> DomainTaskStatus:
    """Translate a contract status to the domain enum."""
    match status:
        case TransportStatus.new:
            return DomainTaskStatus.NEW
        case TransportStatus.in_progress:
            return DomainTaskStatus.IN_PROGRESS
        case TransportStatus.done:
            return DomainTaskStatus.DONE
        case TransportStatus.canceled:
            return DomainTaskStatus.CANCELED
        case _:
            _unmapped(status, DomainTaskStatus.__name__)


def to_domain_list(tasks: Iterable[TransportTask]) -> list[DomainTask]:
    """Convert transport tasks to domain tasks, preserving order."""
    return [to_domain(task) for task in tasks]


def _unmapped(value: Never, target: str) -> NoReturn:
    # Typed Never: reachable only if a status enum grew a member
    raise ExhaustiveMappingError(value, target)
