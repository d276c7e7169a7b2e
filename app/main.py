"""
Task mapping demo.

Parses a transport task (JSON body as it would arrive over HTTP), maps it to
the domain, applies a status transition and maps it back.

Usage:
    python -m app.main                 # use the built-in sample payload
    python -m app.main payload.json    # map a payload from a file
"""

import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from app.task import TaskError, TaskStatus, TransportContract, to_domain, to_transport
from app.task.transport import Status, Task

logger = logging.getLogger(__name__)

SAMPLE_PAYLOAD = {
    "id": "task-123",
    "title": "Test Task",
    "description": "A sample task",
    "createdAt": "2023-11-30T13:00:00+03:00",
    "updatedAt": "2023-11-30T11:00:00Z",
    "status": "new",
    "authorId": "author-456",
    "assigneeIds": ["user-789", "user-101"],
    "priority": 2,
    "plannedTime": 3600,
    "actualTime": None,
}


def run(raw: str) -> str:
    """
    Map a raw JSON payload through the domain and back.

    Args:
        raw: JSON document following the Task schema.

    Returns:
        JSON document of the updated task.

    Raises:
        pydantic.ValidationError: If the payload does not follow the schema.
        TaskError: If the payload violates a domain invariant.
    """
    inbound = Task.model_validate_json(raw)
    task = to_domain(inbound)
    logger.info("Received task %s (%s): %s", task.id, task.status, task.title)

    started = task.with_status(TaskStatus.IN_PROGRESS, updated_at=datetime.now(UTC))
    logger.info("Task %s moved to %s", started.id, started.status)

    outbound = to_transport(started)
    return outbound.model_dump_json(by_alias=True, indent=2)


def main(argv: list[str]) -> int:
    """Entry point; returns the process exit code."""
    try:
        TransportContract.load().ensure_matches(Task, Status)
    except (OSError, KeyError) as error:
        logger.error("Cannot load the transport contract: %s", error)
        return 3
    except TaskError as error:
        logger.error("Transport model is out of date: %s", error)
        return 3

    if len(argv) > 1:
        try:
            raw = Path(argv[1]).read_text(encoding="utf-8")
        except OSError as error:
            logger.error("Cannot read payload %s: %s", argv[1], error)
            return 4
    else:
        raw = json.dumps(SAMPLE_PAYLOAD)

    try:
        print(run(raw))
    except ValidationError as error:
        logger.error("Payload does not follow the Task schema:\n%s", error)
        return 2
    except TaskError as error:
        logger.error("Invalid task: %s", error)
        return 1
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    sys.exit(main(sys.argv))
