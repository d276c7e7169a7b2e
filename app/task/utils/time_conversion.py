"""
Time conversion helpers.

The domain keeps absolute instants while the transport schema carries
offset-qualified local times. Both are modelled as timezone-aware
``datetime`` values; these helpers pin down which offset each side uses.
"""

from datetime import UTC, datetime


def instant_to_offset_datetime(instant: datetime) -> datetime:
    """
    Express an absolute instant as an offset-qualified time at UTC.

    Args:
        instant: Timezone-aware datetime.

    Returns:
        Datetime for the same instant whose offset is always +00:00.

    Raises:
        ValueError: If ``instant`` is naive.

    Example:
        instant_to_offset_datetime(datetime(2023, 11, 30, 10, 30, 45, tzinfo=UTC))
        # Returns: 2023-11-30T10:30:45+00:00
    """
    _require_aware(instant)
    return instant.astimezone(UTC)


def offset_datetime_to_instant(value: datetime) -> datetime:
    """
    Collapse an offset-qualified time to its absolute instant.

    The incoming offset is discarded; the result is normalized to UTC.
    For a +00:00 input this is the exact inverse of
    ``instant_to_offset_datetime``.

    Args:
        value: Timezone-aware datetime with any offset.

    Returns:
        UTC datetime for the same instant.

    Raises:
        ValueError: If ``value`` is naive.

    Example:
        offset_datetime_to_instant(datetime.fromisoformat("2023-11-30T13:30:45+03:00"))
        # Returns: 2023-11-30T10:30:45+00:00
    """
    _require_aware(value)
    return value.astimezone(UTC)


def _require_aware(value: datetime) -> None:
    # astimezone() on a naive value would silently assume the local zone
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"Expected a timezone-aware datetime, got naive {value.isoformat()}")
