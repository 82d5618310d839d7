"""Pattern definitions and matching logic for localized screenshot names."""

import re
from typing import ClassVar

from .models import CaptureTimestamp, MatchedPattern, ScreenshotPattern

# "Screenshot" as written by the Japanese-locale Snipping Tool
LOCALIZED_PREFIX = "スクリーンショット"

# Extension is kept verbatim, so no IGNORECASE and ASCII digits only
_EXTENSION = r"(?P<extension>\.[^.\s]+)"


class ScreenshotPatternMatcher:
    """Matches file names against the fixed set of localized screenshot patterns."""

    # Tried in order; the first pattern whose regex matches wins
    PATTERNS: ClassVar[list[tuple[ScreenshotPattern, str]]] = [
        (
            ScreenshotPattern.DATED_SPACED,
            rf"^{LOCALIZED_PREFIX} (?P<year>[0-9]{{4}})-(?P<month>[0-9]{{2}})-(?P<day>[0-9]{{2}}) "
            rf"(?P<hour>[0-9]{{2}})(?P<minute>[0-9]{{2}})(?P<second>[0-9]{{2}}){_EXTENSION}\Z",
        ),
        (
            ScreenshotPattern.DATED_UNDERSCORED,
            rf"^{LOCALIZED_PREFIX}_(?P<year>[0-9]{{4}})(?P<month>[0-9]{{2}})(?P<day>[0-9]{{2}})_"
            rf"(?P<hour>[0-9]{{2}})(?P<minute>[0-9]{{2}})(?P<second>[0-9]{{2}}){_EXTENSION}\Z",
        ),
        (
            ScreenshotPattern.SEQUENTIAL,
            rf"^{LOCALIZED_PREFIX}(?: \([0-9]+\))?{_EXTENSION}\Z",
        ),
    ]

    def __init__(self) -> None:
        """Compile the screenshot patterns."""
        self._compiled: list[tuple[ScreenshotPattern, re.Pattern[str]]] = [
            (pattern, re.compile(regex)) for pattern, regex in self.PATTERNS
        ]

    def classify(self, name: str) -> MatchedPattern | None:
        """Classify a base file name into one of the screenshot patterns.

        Args:
            name: File name without its directory

        Returns:
            The matched pattern with any embedded timestamp, or None when the
            name carries no localized prefix or its digit groups are malformed

        """
        if not name.startswith(LOCALIZED_PREFIX):
            return None

        for pattern, regex in self._compiled:
            match = regex.match(name)
            if match is None:
                continue

            if pattern is ScreenshotPattern.SEQUENTIAL:
                return MatchedPattern(pattern=pattern, name=name, extension=match.group("extension"))

            timestamp = self._timestamp_from_match(match)
            if timestamp is None:
                # A dated name with out-of-range digits cannot also be sequential
                return None
            return MatchedPattern(
                pattern=pattern,
                name=name,
                extension=match.group("extension"),
                timestamp=timestamp,
            )

        return None

    @staticmethod
    def _timestamp_from_match(match: re.Match[str]) -> CaptureTimestamp | None:
        try:
            timestamp = CaptureTimestamp(
                year=int(match.group("year")),
                month=int(match.group("month")),
                day=int(match.group("day")),
                hour=int(match.group("hour")),
                minute=int(match.group("minute")),
                second=int(match.group("second")),
            )
        except (IndexError, ValueError):
            return None
        return timestamp if timestamp.is_valid() else None


_matcher = ScreenshotPatternMatcher()


def classify(name: str) -> MatchedPattern | None:
    """Convenience function to classify a file name."""
    return _matcher.classify(name)
