"""
Task Mapping Example

This example demonstrates how to:
1. Create a domain task and update it immutably
2. Map it to the transport model and serialize it as a response body
3. Parse a request body and map it back to the domain
4. Handle validation errors raised by domain construction
"""

import logging
from datetime import UTC, datetime

from app.task import Task, TaskStatus, TaskValidationError, to_domain, to_transport
from app.task.transport import Task as TransportTask


def main() -> None:
    """Main execution function."""
    print("=" * 60)
    print("Task Mapping Example")
    print("=" * 60)

    # 1. Create and update
    task = Task.create(
        title="Write release notes",
        author_id="author-456",
        assignee_ids=["user-789"],
        priority=1,
        planned_time=3600,
        now=datetime(2023, 11, 30, 10, 0, tzinfo=UTC),
    )
    done = task.with_changes(
        status=TaskStatus.DONE,
        actual_time=2700,
        updated_at=datetime(2023, 11, 30, 11, 0, tzinfo=UTC),
    )
    print(f"\nDomain task: {done.id} [{done.status}] {done.title}")

    # 2. Domain -> transport -> JSON
    body = to_transport(done).model_dump_json(by_alias=True, indent=2)
    print(f"\nResponse body:\n{body}")

    # 3. JSON -> transport -> domain
    parsed = to_domain(TransportTask.model_validate_json(body))
    print(f"\nRound trip equal: {parsed == done}")

    # 4. Invariant violations surface from domain construction
    blank = TransportTask.model_validate_json(body.replace('"Write release notes"', '"   "'))
    try:
        to_domain(blank)
    except TaskValidationError as error:
        print(f"\nRejected payload: field={error.field} message={error}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")
    main()
