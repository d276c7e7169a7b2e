"""Time conversion utilities shared by the task mappers."""

from app.task.utils.time_conversion import (
    instant_to_offset_datetime,
    offset_datetime_to_instant,
)

__all__ = [
    "instant_to_offset_datetime",
    "offset_datetime_to_instant",
]
