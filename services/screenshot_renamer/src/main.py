"""Main entry point for the Screenshot Renamer."""

import argparse
import sys
from pathlib import Path

import structlog
from dotenv import load_dotenv
from pydantic import ValidationError

from .config import APP_NAME, APP_VERSION, Settings, get_settings
from .exceptions import ScreenshotRenamerError
from .logging_config import configure_logging
from .renamer import ScreenshotRenamer
from .watcher import DirectoryWatcher

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Rename Japanese-locale screenshots to 'Screenshot YYYY-MM-DD HHMMSS.<ext>'",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("--screenshots-dir", type=Path, default=None, help="Screenshots directory")
    parser.add_argument("--log-file", type=Path, default=None, help="Log file path")
    parser.add_argument(
        "--watch",
        action="store_true",
        default=None,
        help="Watch for changes and automatically rename",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="Dry run (log what would be renamed without actually renaming)",
    )
    return parser


def run(settings: Settings) -> None:
    """Scan the screenshots directory once, then keep watching if asked to.

    Raises:
        ScreenshotRenamerError: If the initial scan cannot read the directory

    """
    directory = settings.screenshots_dir.expanduser().absolute()
    renamer = ScreenshotRenamer(directory, dry_run=settings.dry_run)
    renamer.scan()

    if settings.watch:
        watcher = DirectoryWatcher(renamer, settle_delay=settings.settle_delay)
        watcher.run()


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Process exit code

    """
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings(
            screenshots_dir=args.screenshots_dir,
            log_file=args.log_file,
            watch=args.watch,
            dry_run=args.dry_run,
        )
    except ValidationError as e:
        print(f"invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        configure_logging(settings.log_file, settings.log_level)
    except OSError as e:
        print(f'failed to open log file "{settings.log_file}": {e}', file=sys.stderr)
        return 1

    logger.info(
        "Starting Screenshot Renamer",
        version=APP_VERSION,
        screenshots_dir=str(settings.screenshots_dir),
        watch=settings.watch,
        dry_run=settings.dry_run,
    )

    try:
        run(settings)
    except ScreenshotRenamerError as e:
        logger.error(str(e), **e.details)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
