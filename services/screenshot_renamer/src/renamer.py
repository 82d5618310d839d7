"""Applies rename decisions to a screenshots directory."""

from dataclasses import dataclass, field
from pathlib import Path

import structlog

from .classifier import decide
from .conflicts import resolve_collision
from .file_scanner import FileScanner
from .models import AlreadyCanonical, Candidate, NoMatch, Rename, RenameDecision, RenameError

logger = structlog.get_logger()


@dataclass
class RenameOutcome:
    """What happened to one file."""

    source: Path
    decision: RenameDecision
    destination: Path | None = None
    renamed: bool = False
    error: str | None = None


@dataclass
class ScanReport:
    """Outcomes of one pass over the screenshots directory."""

    outcomes: list[RenameOutcome] = field(default_factory=list)

    @property
    def renamed(self) -> int:
        """Files renamed, or that would be renamed in a dry run."""
        return sum(1 for o in self.outcomes if o.destination is not None and o.error is None)

    @property
    def skipped(self) -> int:
        """Files left alone because they need no rename."""
        return sum(1 for o in self.outcomes if isinstance(o.decision, NoMatch | AlreadyCanonical))

    @property
    def failed(self) -> int:
        """Files that matched but could not be renamed."""
        return sum(1 for o in self.outcomes if o.error is not None)


class ScreenshotRenamer:
    """Renames localized screenshots in a single directory to canonical names."""

    def __init__(self, directory: Path, dry_run: bool = False, scanner: FileScanner | None = None) -> None:
        """Initialize the renamer.

        Args:
            directory: Screenshots directory
            dry_run: Log decisions without renaming anything
            scanner: FileScanner used to list the directory

        """
        self.directory = directory
        self.dry_run = dry_run
        self.scanner = scanner or FileScanner()

    def scan(self) -> ScanReport:
        """Process every file in the directory once.

        One failing file never stops the scan.

        Raises:
            DirectoryUnreadableError: If the directory cannot be listed

        """
        candidates = self.scanner.scan_directory(self.directory)
        existing = self.scanner.list_names(self.directory)

        report = ScanReport()
        for candidate in candidates:
            report.outcomes.append(self._apply(candidate, existing))

        logger.info(
            "Scan completed",
            directory=str(self.directory),
            renamed=report.renamed,
            skipped=report.skipped,
            failed=report.failed,
            dry_run=self.dry_run,
        )
        return report

    def process_path(self, path: Path) -> RenameOutcome | None:
        """Process a single changed file, as reported by the directory watcher.

        Args:
            path: Path of the file that changed

        Returns:
            The outcome, or None if the path is gone or is not a regular file

        Raises:
            DirectoryUnreadableError: If the directory cannot be listed

        """
        if not path.is_file():
            logger.debug("Skipping vanished or non-file path", path=str(path))
            return None

        candidate = self.scanner.get_candidate(path)
        if candidate is None:
            return None

        existing = self.scanner.list_names(self.directory)
        return self._apply(candidate, existing)

    def _apply(self, candidate: Candidate, existing: set[str]) -> RenameOutcome:
        """Decide and apply the rename for one candidate, updating ``existing``."""
        source = self.directory / candidate.name
        decision = decide(candidate)

        if isinstance(decision, NoMatch | AlreadyCanonical):
            logger.debug("Skipping", name=candidate.name, reason=type(decision).__name__)
            return RenameOutcome(source=source, decision=decision)

        if isinstance(decision, RenameError):
            logger.error(
                "Failed to determine new file name",
                name=candidate.name,
                kind=decision.kind.value,
                error=decision.message,
            )
            return RenameOutcome(source=source, decision=decision, error=decision.message)

        return self._rename(source, decision, existing)

    def _rename(self, source: Path, decision: Rename, existing: set[str]) -> RenameOutcome:
        final_name = resolve_collision(decision.to, existing)
        destination = self.directory / final_name

        if final_name != decision.to:
            logger.warning(
                "Destination already exists, using suffixed name",
                wanted=decision.to,
                using=final_name,
            )

        if self.dry_run:
            logger.info("Rename (dry run)", old_path=str(source), new_path=str(destination))
            existing.add(final_name)
            return RenameOutcome(source=source, decision=decision, destination=destination)

        try:
            # Another process may have created it since the directory was listed
            if destination.exists():
                raise FileExistsError(f"destination already exists: {destination}")
            source.rename(destination)
        except OSError as e:
            logger.error(
                "Failed to rename",
                old_path=str(source),
                new_path=str(destination),
                error=str(e),
            )
            return RenameOutcome(source=source, decision=decision, destination=destination, error=str(e))

        existing.discard(source.name)
        existing.add(final_name)
        logger.info("Renamed", old_path=str(source), new_path=str(destination))
        return RenameOutcome(source=source, decision=decision, destination=destination, renamed=True)
