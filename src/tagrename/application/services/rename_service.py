"""Application service for renaming music files.

This layer turns UI input into a single request object and wires the
pipeline collaborators, so front ends do not reach into feature internals.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import final

from tagrename.config.settings import DEFAULT_MAX_WORKERS
from tagrename.features.metadata.usecases.metadata_reader import ProgressCallback, RecordReader
from tagrename.features.rename.usecases.directory_runner import Renamer, run_directory_renaming
from tagrename.features.rename.usecases.processing_types import RenameResult
from tagrename.platform.filesystem import ensure_directory_exists, rename_file


@dataclass(frozen=True)
class RenameRequest:
    """Input parameters for a rename run.

    Attributes:
        directory: Directory whose audio files are renamed in place.
        recursive: Include subdirectories.
        dry_run: If True, performs no file mutations.
        keep_extension: Keep each file's current suffix instead of the sniffed one.
        max_workers: Threads used for metadata reads.
    """

    directory: Path
    recursive: bool = False
    dry_run: bool = False
    keep_extension: bool = False
    max_workers: int = DEFAULT_MAX_WORKERS


@final
class RenameMusicService:
    """Application service that orchestrates renaming music files."""

    def __init__(
        self,
        *,
        reader: RecordReader | None = None,
        renamer: Renamer | None = None,
    ) -> None:
        """Create a service with overridable collaborators.

        Tests can inject light-weight doubles while production code relies on
        mutagen and the real filesystem.
        """

        self._reader: RecordReader | None = reader
        self._renamer: Renamer = renamer or rename_file

    def rename_directory(
        self,
        request: RenameRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> list[RenameResult]:
        """Rename the audio files described by ``request``.

        Args:
            request: Rename operation parameters.
            progress_callback: Called as ``(completed, total, path)`` while tags are read.

        Returns:
            One RenameResult per audio file.
        """
        directory = ensure_directory_exists(request.directory)
        return run_directory_renaming(
            directory,
            recursive=request.recursive,
            dry_run=request.dry_run,
            keep_extension=request.keep_extension,
            max_workers=request.max_workers,
            reader=self._reader,
            renamer=self._renamer,
            progress_callback=progress_callback,
        )


__all__ = ["RenameMusicService", "RenameRequest"]
