"""Discovery of documents in the year/month/day content tree."""

import re
from dataclasses import dataclass, field
from pathlib import Path

from .logging_config import create_execution_logger
from .models import DocumentFailure

YEAR_PATTERN = re.compile(r"^[0-9]{4}$")


class ScanError(OSError):
    """Raised when the content root itself cannot be read."""


@dataclass
class ScanResult:
    """Documents found by a scan, in stable lexicographic order."""

    paths: list[Path] = field(default_factory=list)
    failures: list[DocumentFailure] = field(default_factory=list)


def _sorted_entries(directory: Path) -> list[Path]:
    return sorted(
        (entry for entry in directory.iterdir() if not entry.name.startswith(".")),
        key=lambda entry: entry.name,
    )


class PathScanner:
    """Walks <root>/<year>/<month>/<day>/<document>."""

    def __init__(self, root: str | Path, execution_id: str | None = None):
        self.root = Path(root)
        self.logger = create_execution_logger("scanner", execution_id)

    def scan(self) -> ScanResult:
        """Enumerate every document file under the year directories.

        Returns:
            ScanResult with document paths and unreadable-directory failures

        Raises:
            ScanError: If the root directory cannot be listed
        """
        try:
            top_level = _sorted_entries(self.root)
        except OSError as e:
            self.logger.error(
                f"Cannot read content root {self.root}: {e}", error=str(e)
            )
            raise ScanError(f"Cannot read content root {self.root}: {e}") from e

        result = ScanResult()
        year_dirs = [
            entry
            for entry in top_level
            if YEAR_PATTERN.match(entry.name) and entry.is_dir()
        ]
        for year_dir in year_dirs:
            for month_dir in self._subdirectories(year_dir, result):
                for day_dir in self._subdirectories(month_dir, result):
                    result.paths.extend(self._files(day_dir, result))

        self.logger.info(
            f"Scan found {len(result.paths)} documents in {len(year_dirs)} year directories",
            documents_found=len(result.paths),
        )
        return result

    def _list(self, directory: Path, result: ScanResult) -> list[Path]:
        try:
            return _sorted_entries(directory)
        except OSError as e:
            relative = directory.relative_to(self.root).as_posix()
            result.failures.append(DocumentFailure(path=relative, error=str(e)))
            self.logger.log_document_processing(
                relative, "unreadable directory", success=False, error=str(e)
            )
            return []

    def _subdirectories(self, directory: Path, result: ScanResult) -> list[Path]:
        return [entry for entry in self._list(directory, result) if entry.is_dir()]

    def _files(self, directory: Path, result: ScanResult) -> list[Path]:
        return [entry for entry in self._list(directory, result) if entry.is_file()]


def scan_documents(root: str | Path, execution_id: str | None = None) -> ScanResult:
    """Scan a content root with a one-off PathScanner."""
    return PathScanner(root, execution_id).scan()
