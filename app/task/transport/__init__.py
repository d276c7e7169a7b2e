"""Transport layer: models mirroring the external API contract."""

from app.task.transport.config import TransportConfig
from app.task.transport.contract import ContractMismatchError, TransportContract
from app.task.transport.task_model import Status, Task

__all__ = [
    "ContractMismatchError",
    "Status",
    "Task",
    "TransportConfig",
    "TransportContract",
]
