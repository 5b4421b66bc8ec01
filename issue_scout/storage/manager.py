"""Storage of rendered report files."""

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from ..report.markdown import MarkdownFile

logger = logging.getLogger(__name__)


class ReportWriteError(RuntimeError):
    """Raised when the report cannot be written to disk."""


class ReportWriter:
    """Writes report files below a destination directory."""

    def __init__(self, destination: str | Path = "."):
        """Initialize report writer.

        Args:
            destination: Directory holding README.md and the issues/ directory
        """
        self.destination = Path(destination)

    @property
    def issues_dir(self) -> Path:
        return self.destination / "issues"

    def clear_issues_dir(self) -> None:
        """Remove the issues directory left over from a previous run.

        Raises:
            ReportWriteError: If the directory exists but cannot be removed
        """
        if not self.issues_dir.exists():
            return

        logger.info("Removing old issues directory: %s", self.issues_dir)
        try:
            shutil.rmtree(self.issues_dir)
        except OSError as e:
            raise ReportWriteError(
                f"Failed to remove issues directory {self.issues_dir}: {e}"
            ) from e

    def write_file(self, file: MarkdownFile) -> Path:
        """Write a single file, creating parent directories as needed.

        Raises:
            ReportWriteError: If the file cannot be written
        """
        try:
            file.path.parent.mkdir(parents=True, exist_ok=True)
            file.path.write_text(file.content, encoding="utf-8")
        except OSError as e:
            raise ReportWriteError(f"Failed to save {file.path}: {e}") from e

        logger.debug("Saved %s", file.path)
        return file.path

    def save(self, files: Iterable[MarkdownFile]) -> list[Path]:
        """Replace the previous report with the given files.

        Returns:
            Paths of the written files
        """
        self.clear_issues_dir()
        saved_paths = [self.write_file(file) for file in files]
        logger.info("Saved %d files to %s", len(saved_paths), self.destination)
        return saved_paths
