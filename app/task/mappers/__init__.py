"""Mappers between the task domain and transport models."""

from app.task.mappers.task_mapper import (
    status_to_domain,
    status_to_transport,
    to_domain,
    to_domain_list,
    to_transport,
    to_transport_list,
)

__all__ = [
    "status_to_domain",
    "status_to_transport",
    "to_domain",
    "to_domain_list",
    "to_transport",
    "to_transport_list",
]
