"""File scanner module for listing screenshot candidates."""

import os
from pathlib import Path

import structlog

from .exceptions import DirectoryUnreadableError
from .models import Candidate
from .timestamps import timestamp_from_mtime

logger = structlog.get_logger()


class FileScanner:
    """Lists the files of a screenshots directory as rename candidates."""

    def scan_directory(self, directory: Path) -> list[Candidate]:
        """List the regular files directly inside a directory.

        Args:
            directory: Directory path to scan

        Returns:
            One candidate per file, sorted by name

        Raises:
            DirectoryUnreadableError: If the directory cannot be listed

        """
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            raise DirectoryUnreadableError(str(directory), e.strerror or str(e)) from e

        candidates: list[Candidate] = []
        for entry in entries:
            try:
                if not entry.is_file():
                    continue
            except OSError as e:
                logger.error("Failed to read screenshot file entry", path=entry.path, error=str(e))
                continue

            candidate = self.get_candidate(Path(entry.path))
            if candidate is not None:
                candidates.append(candidate)

        logger.debug("Scan completed", directory=str(directory), files=len(candidates))
        return candidates

    def get_candidate(self, file_path: Path) -> Candidate | None:
        """Build a candidate for a single file.

        Args:
            file_path: Path to the file

        Returns:
            The candidate, or None if the name is not valid Unicode. A file
            whose modification time cannot be read gets ``mtime=None``.

        """
        name = file_path.name
        if not self.is_valid_name(name):
            logger.error("Failed to convert file name to string", name=repr(name))
            return None

        try:
            mtime = timestamp_from_mtime(file_path.stat().st_mtime)
        except (OSError, ValueError, OverflowError) as e:
            # ValueError/OverflowError: mtime outside what the platform's local time can represent
            logger.warning("Could not read modification time", path=str(file_path), error=str(e))
            mtime = None

        return Candidate.from_name(name, mtime)

    @staticmethod
    def is_valid_name(name: str) -> bool:
        """Check that a name decoded from the filesystem is proper Unicode.

        Undecodable bytes surface as lone surrogates, which cannot be encoded.
        """
        try:
            name.encode("utf-8")
        except UnicodeEncodeError:
            return False
        return True

    def list_names(self, directory: Path) -> set[str]:
        """Return the names of all entries in a directory, for collision checks."""
        try:
            return set(os.listdir(directory))
        except OSError as e:
            raise DirectoryUnreadableError(str(directory), e.strerror or str(e)) from e
