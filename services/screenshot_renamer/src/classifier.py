"""Rename decisions for screenshot candidates.

Everything here is pure: no filesystem access, no clock reads, no logging.
The driver supplies modification times and applies the collision policy.
"""

from .exceptions import MissingTimestampError
from .models import (
    AlreadyCanonical,
    Candidate,
    CaptureTimestamp,
    ErrorKind,
    NoMatch,
    Rename,
    RenameDecision,
    RenameError,
)
from .naming import build_name, is_canonical
from .patterns import classify
from .timestamps import resolve_timestamp


def decide(candidate: Candidate) -> RenameDecision:
    """Decide what a candidate file should be renamed to.

    Args:
        candidate: File name with its extension and optional local mtime

    Returns:
        ``AlreadyCanonical`` for names already in English form, ``NoMatch`` for
        anything that is not a localized screenshot, ``RenameError`` when a
        sequential screenshot has no mtime, otherwise ``Rename``

    """
    if is_canonical(candidate.name):
        return AlreadyCanonical()

    match = classify(candidate.name)
    if match is None:
        return NoMatch()

    try:
        timestamp = resolve_timestamp(match, candidate.mtime)
    except MissingTimestampError as e:
        return RenameError(kind=ErrorKind.MISSING_TIMESTAMP, message=str(e))

    target = build_name(timestamp, candidate.extension or match.extension)
    if target == candidate.name:
        return AlreadyCanonical()

    return Rename(to=target)


def decide_name(name: str, mtime: CaptureTimestamp | None = None) -> RenameDecision:
    """Convenience function to decide for a bare file name."""
    return decide(Candidate.from_name(name, mtime))
