"""Unit tests for configuration and the command line entry point."""

import logging
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog

from services.screenshot_renamer.src.config import Settings, default_log_file, get_settings
from services.screenshot_renamer.src.main import build_parser, main

CANONICAL = "Screenshot 2026-02-13 123456.png"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep settings independent of the developer's environment and .env file."""
    for var in [
        "SCREENSHOT_RENAMER_SCREENSHOTS_DIR",
        "SCREENSHOT_RENAMER_LOG_FILE",
        "SCREENSHOT_RENAMER_WATCH",
        "SCREENSHOT_RENAMER_DRY_RUN",
        "SCREENSHOT_RENAMER_LOG_LEVEL",
        "SCREENSHOT_RENAMER_SETTLE_DELAY",
    ]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def restore_logging():
    """Undo the process-wide logging setup done by main()."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    structlog.reset_defaults()


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self):
        """Test default settings."""
        settings = Settings()
        assert settings.screenshots_dir == Path.home() / "Pictures" / "Screenshots"
        assert settings.log_file.name == "screenshot-renamer.log"
        assert settings.watch is False
        assert settings.dry_run is False
        assert settings.log_level == "INFO"
        assert settings.settle_delay == 0.2

    def test_environment_variables(self, monkeypatch, tmp_path):
        """Test that prefixed environment variables are respected."""
        monkeypatch.setenv("SCREENSHOT_RENAMER_SCREENSHOTS_DIR", str(tmp_path))
        monkeypatch.setenv("SCREENSHOT_RENAMER_WATCH", "true")
        monkeypatch.setenv("SCREENSHOT_RENAMER_LOG_LEVEL", "debug")

        settings = Settings()
        assert settings.screenshots_dir == tmp_path
        assert settings.watch is True
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        """Test that unknown log levels are rejected."""
        monkeypatch.setenv("SCREENSHOT_RENAMER_LOG_LEVEL", "chatty")
        with pytest.raises(ValueError, match="Unsupported log level"):
            Settings()

    def test_overrides_win_over_environment(self, monkeypatch, tmp_path):
        """Test that command line values override the environment, and None does not."""
        monkeypatch.setenv("SCREENSHOT_RENAMER_DRY_RUN", "true")
        settings = get_settings(screenshots_dir=tmp_path, dry_run=None, watch=True)

        assert settings.screenshots_dir == tmp_path
        assert settings.dry_run is True
        assert settings.watch is True

    def test_default_log_file_uses_local_app_data(self, monkeypatch, tmp_path):
        """Test that LOCALAPPDATA decides the log location when set."""
        monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))
        assert default_log_file() == tmp_path / "screenshot-renamer" / "screenshot-renamer.log"


class TestCommandLine:
    """Test suite for the command line entry point."""

    def test_parser_flags(self):
        """Test that all flags parse."""
        args = build_parser().parse_args(
            ["--screenshots-dir", "shots", "--log-file", "out.log", "--watch", "--dry-run"],
        )
        assert args.screenshots_dir == Path("shots")
        assert args.log_file == Path("out.log")
        assert args.watch is True
        assert args.dry_run is True

    def test_parser_defaults_defer_to_settings(self):
        """Test that unset flags stay None so settings can fill them in."""
        args = build_parser().parse_args([])
        assert args.screenshots_dir is None
        assert args.watch is None
        assert args.dry_run is None

    def test_main_renames_and_logs(self, screenshots_dir, make_file, tmp_path, restore_logging):
        """Test a one-shot run end to end."""
        make_file("スクリーンショット (1).png", mtime=datetime(2026, 2, 13, 12, 34, 56))
        log_file = tmp_path / "logs" / "renamer.log"

        exit_code = main(["--screenshots-dir", str(screenshots_dir), "--log-file", str(log_file)])

        assert exit_code == 0
        assert (screenshots_dir / CANONICAL).exists()
        assert "Renamed" in log_file.read_text(encoding="utf-8")

    def test_main_dry_run(self, screenshots_dir, make_file, tmp_path, restore_logging):
        """Test that --dry-run leaves files in place."""
        make_file("スクリーンショット_20260213_123456.png")
        log_file = tmp_path / "renamer.log"

        exit_code = main(["--screenshots-dir", str(screenshots_dir), "--log-file", str(log_file), "--dry-run"])

        assert exit_code == 0
        assert not (screenshots_dir / CANONICAL).exists()
        assert "Rename (dry run)" in log_file.read_text(encoding="utf-8")

    def test_main_missing_directory(self, tmp_path, restore_logging):
        """Test that an unreadable screenshots directory exits with 1."""
        log_file = tmp_path / "renamer.log"

        exit_code = main(["--screenshots-dir", str(tmp_path / "missing"), "--log-file", str(log_file)])

        assert exit_code == 1
        assert "failed to read screenshot directory" in log_file.read_text(encoding="utf-8")

    def test_main_log_file_unwritable(self, screenshots_dir, tmp_path, capsys):
        """Test that a log file that cannot be opened exits with 1 and reports on stderr."""
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("file in the way")

        exit_code = main(["--screenshots-dir", str(screenshots_dir), "--log-file", str(blocker / "renamer.log")])

        assert exit_code == 1
        assert "failed to open log file" in capsys.readouterr().err

    @patch("services.screenshot_renamer.src.main.DirectoryWatcher")
    def test_main_watch_mode(self, mock_watcher_cls, screenshots_dir, tmp_path, restore_logging):
        """Test that --watch scans first, then hands over to the watcher."""
        exit_code = main(
            ["--screenshots-dir", str(screenshots_dir), "--log-file", str(tmp_path / "r.log"), "--watch"],
        )

        assert exit_code == 0
        mock_watcher_cls.assert_called_once()
        assert mock_watcher_cls.call_args.kwargs["settle_delay"] == 0.2
        mock_watcher_cls.return_value.run.assert_called_once()
