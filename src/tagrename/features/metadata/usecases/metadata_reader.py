"""
Summary: Read FileRecords for many files concurrently, preserving input order.
Why: Metadata reads are independent I/O and dominate the run time on large folders.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path

from tagrename.config.settings import DEFAULT_MAX_WORKERS
from tagrename.shared.file_record import FileRecord

from .extraction.track_metadata_extractor import MetadataExtractor

RecordReader = Callable[[Path], FileRecord | None]
ProgressCallback = Callable[[int, int, Path], None]


def read_records(
    paths: Sequence[Path],
    *,
    reader: RecordReader | None = None,
    keep_extension: bool = False,
    max_workers: int = DEFAULT_MAX_WORKERS,
    progress_callback: ProgressCallback | None = None,
) -> list[FileRecord | None]:
    """Read every path on a thread pool.

    Args:
        paths: Files to read.
        reader: Callable turning a path into a record; defaults to ``MetadataExtractor.extract``.
        keep_extension: Forwarded to the default reader.
        max_workers: Thread pool size.
        progress_callback: Called as ``(completed, total, path)`` in input order.

    Returns:
        One entry per path, in the same order; None marks a non-audio file.

    Raises:
        Exception: The first error raised by a read, after the pool has shut down.
    """
    read: RecordReader = reader or partial(MetadataExtractor.extract, keep_extension=keep_extension)
    total = len(paths)
    records: list[FileRecord | None] = []
    if total == 0:
        return records

    with ThreadPoolExecutor(
        max_workers=max(1, min(max_workers, total)),
        thread_name_prefix="tag-reader",
    ) as executor:
        futures = [executor.submit(read, path) for path in paths]
        for index, (path, future) in enumerate(zip(paths, futures), start=1):
            records.append(future.result())
            if progress_callback is not None:
                progress_callback(index, total, path)

    return records


__all__ = ["ProgressCallback", "RecordReader", "read_records"]
