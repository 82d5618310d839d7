"""Watchdog event handler for monitoring the screenshots directory."""

import queue
from pathlib import Path

import structlog
from watchdog.events import FileSystemEvent, FileSystemEventHandler

logger = structlog.get_logger()


class ScreenshotEventHandler(FileSystemEventHandler):
    """Queues the paths of files that appeared or changed.

    Runs on the watchdog observer thread; it never renames anything itself so
    that all renames happen one at a time on the consuming thread.
    """

    def __init__(self, events: "queue.Queue[Path]") -> None:
        """Initialize the event handler.

        Args:
            events: Queue that receives changed file paths

        """
        super().__init__()
        self.events = events

    @staticmethod
    def _to_path(path: str | bytes) -> Path:
        path_str = path if isinstance(path, str) else path.decode("utf-8", errors="surrogateescape")
        return Path(path_str)

    def on_created(self, event: FileSystemEvent) -> None:
        """Handle file creation events.

        Args:
            event: FileSystemEvent object containing event details

        """
        if not event.is_directory:
            logger.debug("File created", path=event.src_path)
            self.events.put(self._to_path(event.src_path))

    def on_modified(self, event: FileSystemEvent) -> None:
        """Handle file modification events.

        Args:
            event: FileSystemEvent object containing event details

        """
        if not event.is_directory:
            logger.debug("File modified", path=event.src_path)
            self.events.put(self._to_path(event.src_path))

    def on_moved(self, event: FileSystemEvent) -> None:
        """Handle file move/rename events; the destination is what needs naming.

        Args:
            event: FileSystemEvent object containing event details

        """
        if not event.is_directory:
            logger.debug("File moved", old_path=event.src_path, new_path=event.dest_path)
            self.events.put(self._to_path(event.dest_path))
