"""Task resource: domain model, transport model and the mapping between them."""

from app.task.domain import (
    ExhaustiveMappingError,
    Task,
    TaskError,
    TaskStatus,
    TaskValidationError,
)
from app.task.mappers import to_domain, to_transport
from app.task.transport import ContractMismatchError, TransportConfig, TransportContract

__all__ = [
    "ContractMismatchError",
    "ExhaustiveMappingError",
    "Task",
    "TaskError",
    "TaskStatus",
    "TaskValidationError",
    "TransportConfig",
    "TransportContract",
    "to_domain",
    "to_transport",
]
