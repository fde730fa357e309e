"""src/tagrename/features/rename/usecases/directory_runner.py
What: Enumerate, read, aggregate and rename the audio files of one directory.
Why: Keep the whole pipeline in one place so every front end shares its rules.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection
from pathlib import Path
from typing import Any

from tagrename.config.settings import DEFAULT_MAX_WORKERS
from tagrename.features.metadata.usecases.metadata_reader import (
    ProgressCallback,
    RecordReader,
    read_records,
)
from tagrename.features.organization.domain.album_aggregate import AlbumAggregate
from tagrename.features.path.usecases.renamer import FileNameGenerator
from tagrename.platform.filesystem import list_regular_files, rename_file
from tagrename.platform.logging import logger
from tagrename.shared.file_record import FileRecord

from .processing_types import ProcessingEvent, RenameLogContext, RenameResult, RenameStatus

Renamer = Callable[[Path, Path], object]


def log_event(
    level: int,
    event: ProcessingEvent,
    message: str,
    *message_args: object,
    **context: Any,
) -> None:
    """Log ``message`` with ``processing_event`` and ``context`` as record extras."""

    extra: dict[str, Any] = {"processing_event": event.value}
    for key, value in context.items():
        extra[key] = str(value) if isinstance(value, Path) else value
    logger.log(level, message, *message_args, extra=extra, stacklevel=2)


def rename_record(
    record: FileRecord,
    generator: FileNameGenerator,
    *,
    dry_run: bool = False,
    renamer: Renamer = rename_file,
    sequence: int | None = None,
    total: int | None = None,
    source_root: Path | None = None,
    pending_sources: Collection[Path] = (),
) -> RenameResult:
    """Rename one file in place, or report why it was left alone.

    ``pending_sources`` holds files of the same run that are not renamed yet.
    A target equal to one of them is still used, but logged as a collision.
    """

    context: dict[str, Any] = {
        "sequence": sequence,
        "total_files": total,
        "source_path": record.path,
        "source_base_path": source_root,
    }

    if not record.has_title:
        log_event(
            logging.WARNING,
            ProcessingEvent.FILE_SKIP_MISSING_TITLE,
            "Skipping file (missing title): %s",
            record.path,
            **context,
        )
        return RenameResult(
            source_path=record.path,
            status=RenameStatus.SKIPPED_MISSING_TITLE,
            dry_run=dry_run,
            record=record,
        )

    target = record.path.with_name(generator.generate(record))
    context["target_path"] = target

    if target != record.path and target in pending_sources:
        log_event(
            logging.WARNING,
            ProcessingEvent.FILE_TARGET_COLLISION,
            "Target %s of %s is a file that has not been renamed yet",
            target.name,
            record.path,
            **context,
        )

    if target == record.path:
        status = RenameStatus.UNCHANGED
        log_event(
            logging.DEBUG,
            ProcessingEvent.FILE_UNCHANGED,
            "File already named: %s",
            record.path,
            **context,
        )
    elif dry_run:
        status = RenameStatus.PLANNED
        log_event(
            logging.INFO,
            ProcessingEvent.FILE_PLAN,
            "Would rename %s -> %s",
            record.path,
            target.name,
            **context,
        )
    else:
        _ = renamer(record.path, target)
        status = RenameStatus.RENAMED
        log_event(
            logging.INFO,
            ProcessingEvent.FILE_RENAME,
            "Renamed %s -> %s",
            record.path,
            target.name,
            **context,
        )

    return RenameResult(
        source_path=record.path,
        status=status,
        target_path=target,
        dry_run=dry_run,
        record=record,
    )


def run_directory_renaming(
    directory: Path,
    *,
    recursive: bool = False,
    dry_run: bool = False,
    keep_extension: bool = False,
    max_workers: int = DEFAULT_MAX_WORKERS,
    reader: RecordReader | None = None,
    renamer: Renamer = rename_file,
    progress_callback: ProgressCallback | None = None,
) -> list[RenameResult]:
    """Rename every audio file in ``directory`` from its tags.

    All metadata is read before the first rename, because the padding width
    of any track depends on every other track of its album.

    Args:
        directory: Directory holding the files.
        recursive: Include files in subdirectories.
        dry_run: Compute names without touching the filesystem.
        keep_extension: Keep each file's current suffix instead of the sniffed one.
        max_workers: Threads used for metadata reads.
        reader: Override for the per-file metadata reader.
        renamer: Override for the filesystem rename.
        progress_callback: Called as ``(completed, total, path)`` while reading.

    Returns:
        list[RenameResult]: One result per audio file, in path order.

    Raises:
        NotADirectoryError: If ``directory`` is not a directory.
        Exception: Any read or rename failure; the run stops at the first one.
    """
    source_root = directory.resolve()
    files = list_regular_files(source_root, recursive=recursive)

    records: list[FileRecord] = []
    for path, record in zip(
        files,
        read_records(
            files,
            reader=reader,
            keep_extension=keep_extension,
            max_workers=max_workers,
            progress_callback=progress_callback,
        ),
    ):
        if record is None:
            log_event(
                logging.DEBUG,
                ProcessingEvent.FILE_SKIP_NOT_AUDIO,
                "Ignoring non-audio file: %s",
                path,
                source_path=path,
                source_base_path=source_root,
            )
            continue
        records.append(record)

    if not records:
        log_event(
            logging.WARNING,
            ProcessingEvent.DIRECTORY_NO_FILES,
            "No audio files found in %s",
            source_root,
            directory=source_root,
            total_files=0,
            dry_run=dry_run,
        )
        return []

    stats = RenameLogContext(
        directory=source_root,
        total_files=len(records),
        dry_run=dry_run,
        recursive=recursive,
    )
    log_event(
        logging.INFO,
        ProcessingEvent.DIRECTORY_START,
        "Renaming %d audio files in %s (dry_run=%s)",
        len(records),
        source_root,
        dry_run,
        **stats.start_extra(),
    )

    generator = FileNameGenerator(AlbumAggregate.from_records(records))
    pending = {record.path for record in records}
    results: list[RenameResult] = []
    for index, record in enumerate(records, start=1):
        pending.discard(record.path)
        results.append(
            rename_record(
                record,
                generator,
                dry_run=dry_run,
                renamer=renamer,
                sequence=index,
                total=len(records),
                source_root=source_root,
                pending_sources=pending,
            )
        )

    log_event(
        logging.INFO,
        ProcessingEvent.DIRECTORY_COMPLETE,
        "Finished renaming in %s",
        source_root,
        **stats.summary_extra(results),
    )
    return results


__all__ = ["Renamer", "log_event", "rename_record", "run_directory_renaming"]
