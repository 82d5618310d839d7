"""Exceptions raised by the screenshot renamer."""

from typing import Any


class ScreenshotRenamerError(Exception):
    """Base exception for screenshot renamer errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize screenshot renamer error.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.details = details or {}


class MissingTimestampError(ScreenshotRenamerError):
    """Raised when a sequential screenshot has no modification time to name it by."""

    def __init__(
        self,
        name: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize missing timestamp error.

        Args:
            name: File name that needed a modification time
            details: Additional error details
        """
        message = f"no modification time available for '{name}'"
        error_details = details or {}
        error_details["name"] = name
        super().__init__(message, error_details)
        self.name = name


class DirectoryUnreadableError(ScreenshotRenamerError):
    """Raised when the screenshots directory cannot be listed."""

    def __init__(
        self,
        directory: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize directory unreadable error.

        Args:
            directory: Directory that could not be read
            reason: Underlying OS error message
            details: Additional error details
        """
        message = f"failed to read screenshot directory '{directory}': {reason}"
        error_details = details or {}
        error_details["directory"] = directory
        error_details["reason"] = reason
        super().__init__(message, error_details)
        self.directory = directory
