"""Pytest configuration and fixtures."""

import os
from datetime import datetime
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@pytest.fixture
def screenshots_dir(tmp_path: Path) -> Path:
    """Create an empty screenshots directory."""
    directory = tmp_path / "Screenshots"
    directory.mkdir()
    return directory


@pytest.fixture
def make_file(screenshots_dir: Path):
    """Create a file in the screenshots directory, optionally with a local mtime."""

    def _make_file(name: str, mtime: datetime | None = None, content: bytes = b"png") -> Path:
        path = screenshots_dir / name
        path.write_bytes(content)
        if mtime is not None:
            stamp = mtime.timestamp()
            os.utime(path, (stamp, stamp))
        return path

    return _make_file
