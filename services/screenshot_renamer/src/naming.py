"""Canonical English screenshot names."""

import re

from .models import CaptureTimestamp

CANONICAL_PREFIX = "Screenshot"

CANONICAL_NAME = re.compile(
    rf"^{CANONICAL_PREFIX} ([0-9]{{4}})-([0-9]{{2}})-([0-9]{{2}}) ([0-9]{{2}})([0-9]{{2}})([0-9]{{2}})\.[^.\s]+\Z",
)


def build_name(timestamp: CaptureTimestamp, extension: str) -> str:
    """Build ``Screenshot YYYY-MM-DD HHMMSS.<ext>`` for a capture timestamp.

    Args:
        timestamp: Capture time of the screenshot
        extension: File extension, with or without the leading dot

    Returns:
        The canonical file name

    """
    ext = extension.removeprefix(".")
    return (
        f"{CANONICAL_PREFIX} "
        f"{timestamp.year:04d}-{timestamp.month:02d}-{timestamp.day:02d} "
        f"{timestamp.hour:02d}{timestamp.minute:02d}{timestamp.second:02d}.{ext}"
    )


def is_canonical(name: str) -> bool:
    """Check whether a file name is already in canonical form, with in-range date and time."""
    match = CANONICAL_NAME.match(name)
    if match is None:
        return False
    return CaptureTimestamp(*(int(group) for group in match.groups())).is_valid()
