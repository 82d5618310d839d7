"""Data models for screenshot classification and rename decisions."""

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath


class ScreenshotPattern(Enum):
    """Naming conventions used by the Japanese-locale screenshot tools."""

    DATED_SPACED = "dated_spaced"  # スクリーンショット 2026-02-13 123456.png
    DATED_UNDERSCORED = "dated_underscored"  # スクリーンショット_20260213_123456.png
    SEQUENTIAL = "sequential"  # スクリーンショット (1).png


class ErrorKind(Enum):
    """Kinds of per-candidate failures reported to the driver."""

    MISSING_TIMESTAMP = "missing_timestamp"


@dataclass(frozen=True)
class CaptureTimestamp:
    """Capture time of a screenshot, down to the second."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    def is_valid(self) -> bool:
        """Check that every field lies within its calendar/clock range.

        Only digit ranges are checked; day 31 is accepted for every month.
        """
        return (
            0 <= self.year <= 9999
            and 1 <= self.month <= 12
            and 1 <= self.day <= 31
            and 0 <= self.hour <= 23
            and 0 <= self.minute <= 59
            and 0 <= self.second <= 59
        )


@dataclass(frozen=True)
class MatchedPattern:
    """Result of matching a file name against a screenshot pattern."""

    pattern: ScreenshotPattern
    name: str
    extension: str
    timestamp: CaptureTimestamp | None = None


@dataclass(frozen=True)
class Candidate:
    """A file name being evaluated for rename."""

    name: str
    extension: str
    mtime: CaptureTimestamp | None = None

    @classmethod
    def from_name(cls, name: str, mtime: CaptureTimestamp | None = None) -> "Candidate":
        """Build a candidate from a base name, splitting off its extension."""
        return cls(name=name, extension=PurePath(name).suffix, mtime=mtime)


@dataclass(frozen=True)
class NoMatch:
    """Name follows no known screenshot convention; leave it alone."""


@dataclass(frozen=True)
class AlreadyCanonical:
    """Name already has the canonical English form."""


@dataclass(frozen=True)
class Rename:
    """Name should become ``to``."""

    to: str


@dataclass(frozen=True)
class RenameError:
    """Candidate matched but no target name could be derived."""

    kind: ErrorKind
    message: str = ""


RenameDecision = NoMatch | AlreadyCanonical | Rename | RenameError
