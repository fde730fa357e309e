"""src/tagrename/features/rename/usecases/processing_types.py
Where: Rename feature usecases layer.
What: Shared enums and dataclasses for the rename flow.
Why: Keep the runner lean by centralising type definitions.
"""

from __future__ import annotations

import time
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from tagrename.shared.file_record import FileRecord


class ProcessingEvent(StrEnum):
    """Structured event identifiers for rename logs."""

    DIRECTORY_START = "rename.directory.start"
    DIRECTORY_COMPLETE = "rename.directory.complete"
    DIRECTORY_NO_FILES = "rename.directory.no_files"
    FILE_RENAME = "rename.file.rename"
    FILE_PLAN = "rename.file.plan"
    FILE_UNCHANGED = "rename.file.unchanged"
    FILE_SKIP_MISSING_TITLE = "rename.file.skip.missing_title"
    FILE_SKIP_NOT_AUDIO = "rename.file.skip.not_audio"
    FILE_TARGET_COLLISION = "rename.file.collision"


class RenameStatus(StrEnum):
    """Outcome of handling one audio file."""

    RENAMED = "renamed"
    PLANNED = "planned"
    UNCHANGED = "unchanged"
    SKIPPED_MISSING_TITLE = "skipped_missing_title"


@dataclass(slots=True)
class RenameResult:
    """Result of handling a single audio file."""

    source_path: Path
    status: RenameStatus
    target_path: Path | None = None
    dry_run: bool = False
    record: FileRecord | None = None

    @property
    def skipped(self) -> bool:
        return self.status is RenameStatus.SKIPPED_MISSING_TITLE


@dataclass(slots=True)
class RenameLogContext:
    """Timing and counters for a directory rename run."""

    directory: Path
    total_files: int
    dry_run: bool
    recursive: bool
    start_time: float = field(default_factory=time.perf_counter)

    def duration_seconds(self) -> float:
        """Return the elapsed run time in seconds."""

        return time.perf_counter() - self.start_time

    def start_extra(self) -> dict[str, Any]:
        return {
            "directory": str(self.directory),
            "total_files": self.total_files,
            "dry_run": self.dry_run,
            "recursive": self.recursive,
        }

    def summary_extra(self, results: Iterable[RenameResult]) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        counts = Counter(result.status for result in results)
        return {
            "directory": str(self.directory),
            "total_files": self.total_files,
            "renamed": counts[RenameStatus.RENAMED],
            "planned": counts[RenameStatus.PLANNED],
            "unchanged": counts[RenameStatus.UNCHANGED],
            "skipped": counts[RenameStatus.SKIPPED_MISSING_TITLE],
            "dry_run": self.dry_run,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = [
    "ProcessingEvent",
    "RenameLogContext",
    "RenameResult",
    "RenameStatus",
]
