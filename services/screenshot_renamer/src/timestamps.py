"""Capture timestamp resolution for matched screenshots."""

from datetime import datetime

from .exceptions import MissingTimestampError
from .models import CaptureTimestamp, MatchedPattern


def timestamp_from_datetime(value: datetime) -> CaptureTimestamp:
    """Truncate a datetime to a capture timestamp."""
    return CaptureTimestamp(
        year=value.year,
        month=value.month,
        day=value.day,
        hour=value.hour,
        minute=value.minute,
        second=value.second,
    )


def timestamp_from_mtime(mtime: float) -> CaptureTimestamp:
    """Convert a POSIX modification time to a capture timestamp in local time.

    Args:
        mtime: Seconds since the epoch, as found in ``os.stat_result.st_mtime``

    Returns:
        Local wall-clock capture timestamp

    """
    return timestamp_from_datetime(datetime.fromtimestamp(mtime))


def resolve_timestamp(match: MatchedPattern, mtime: CaptureTimestamp | None) -> CaptureTimestamp:
    """Pick the capture timestamp for a matched screenshot.

    Dated names carry their own timestamp and ``mtime`` is ignored. Sequential
    names have none, so the modification time is used.

    Args:
        match: Classified file name
        mtime: Local modification time of the file, if known

    Returns:
        The capture timestamp to name the file by

    Raises:
        MissingTimestampError: If a sequential name has no modification time

    """
    if match.timestamp is not None:
        return match.timestamp

    if mtime is None:
        raise MissingTimestampError(match.name, {"pattern": match.pattern.value})

    return mtime
