"""Watch mode: rename screenshots as they appear."""

import queue
import signal
import time
from pathlib import Path
from typing import Any

import structlog
from watchdog.observers import Observer

from .exceptions import ScreenshotRenamerError
from .renamer import RenameOutcome, ScreenshotRenamer
from .watchdog_handler import ScreenshotEventHandler

logger = structlog.get_logger()


class DirectoryWatcher:
    """Blocking pull loop over change notifications for one directory.

    The observer thread only queues paths; the loop pulls them one at a time
    and hands them to the renamer, so renames never race each other.
    """

    def __init__(
        self,
        renamer: ScreenshotRenamer,
        settle_delay: float = 0.2,
        poll_interval: float = 1.0,
    ) -> None:
        """Initialize the watcher.

        Args:
            renamer: Renamer bound to the watched directory
            settle_delay: Seconds to wait after a notification so the writer can finish
            poll_interval: Seconds between observer health checks while idle

        """
        self.renamer = renamer
        self.directory: Path = renamer.directory
        self.settle_delay = settle_delay
        self.poll_interval = poll_interval
        self.events: queue.Queue[Path] = queue.Queue()
        self.handler = ScreenshotEventHandler(self.events)
        self.observer: Any | None = None
        self.running = False
        self.shutdown_timeout = 10  # seconds to wait for the observer to stop

    def start(self) -> None:
        """Schedule and start the watchdog observer (non-recursive)."""
        self.observer = Observer()
        self.observer.schedule(self.handler, str(self.directory), recursive=False)
        self.observer.start()
        self.running = True
        logger.info("Watching directory for changes", path=str(self.directory))

    def run(self) -> None:
        """Watch until SIGINT/SIGTERM or until the observer cannot be kept alive."""
        signal.signal(signal.SIGTERM, self._handle_shutdown)
        signal.signal(signal.SIGINT, self._handle_shutdown)

        self.start()
        try:
            while self.running:
                path = self.next_event()
                if path is None:
                    self._check_observer()
                    continue

                if self.settle_delay:
                    time.sleep(self.settle_delay)
                for changed in self._drain(path):
                    self.process(changed)
        finally:
            self.stop()

        logger.info("Watcher stopped", path=str(self.directory))

    def next_event(self) -> Path | None:
        """Block for the next changed path; None when the poll interval elapses."""
        try:
            return self.events.get(timeout=self.poll_interval)
        except queue.Empty:
            return None

    def _drain(self, first: Path) -> list[Path]:
        """Collect queued paths behind ``first``, once each, in arrival order."""
        paths = {first: None}
        while True:
            try:
                paths.setdefault(self.events.get_nowait(), None)
            except queue.Empty:
                break
        return list(paths)

    def process(self, path: Path) -> RenameOutcome | None:
        """Process one changed path; errors are logged and the loop carries on."""
        if path.parent.resolve() != self.directory.resolve():
            return None
        try:
            return self.renamer.process_path(path)
        except ScreenshotRenamerError as e:
            logger.error("Watch error", path=str(path), error=str(e), **e.details)
        except OSError as e:
            logger.error("Watch error", path=str(path), error=str(e))
        return None

    def _check_observer(self) -> None:
        if self.observer is None or self.observer.is_alive():
            return

        logger.error("Observer thread died unexpectedly")
        try:
            self.start()
            logger.info("Observer restarted successfully")
        except OSError as restart_error:
            logger.error("Failed to restart observer", error=str(restart_error))
            self.running = False

    def _handle_shutdown(self, signum: int, frame: Any) -> None:
        """Handle shutdown signals gracefully."""
        logger.info("Shutdown signal received", signal=signum)
        self.running = False

    def stop(self) -> None:
        """Stop and join the observer."""
        self.running = False
        if self.observer and self.observer.is_alive():
            self.observer.stop()
            self.observer.join(timeout=self.shutdown_timeout)
            if self.observer.is_alive():
                logger.warning("Observer did not stop within timeout", timeout=self.shutdown_timeout)
