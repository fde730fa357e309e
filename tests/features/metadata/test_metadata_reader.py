"""Tests for concurrent metadata reading."""

import threading
from pathlib import Path

import pytest

from tagrename.features.metadata.usecases.metadata_reader import read_records
from tagrename.shared.file_record import FileRecord


def _record(path: Path) -> FileRecord | None:
    if path.suffix == ".txt":
        return None
    return FileRecord(path=path, file_extension=path.suffix, title=path.stem)


def test_results_follow_input_order() -> None:
    """Records come back in the order of the input paths."""

    paths = [Path(f"/music/{name}") for name in ("c.mp3", "a.txt", "b.flac", "d.opus")]

    records = read_records(paths, reader=_record, max_workers=4)

    assert [record.path if record else None for record in records] == [
        paths[0],
        None,
        paths[2],
        paths[3],
    ]


def test_reads_run_on_worker_threads() -> None:
    """Reads are dispatched to the thread pool."""

    thread_names: set[str] = set()

    def _reader(path: Path) -> FileRecord:
        thread_names.add(threading.current_thread().name)
        return FileRecord(path=path, file_extension=".mp3", title="x")

    _ = read_records([Path(f"/m/{i}.mp3") for i in range(5)], reader=_reader, max_workers=2)

    assert thread_names
    assert all(name.startswith("tag-reader") for name in thread_names)


def test_progress_callback_reports_each_file() -> None:
    """The callback sees a running count and the total."""

    calls: list[tuple[int, int, Path]] = []
    paths = [Path("/m/1.mp3"), Path("/m/2.mp3")]

    _ = read_records(
        paths,
        reader=_record,
        progress_callback=lambda done, total, path: calls.append((done, total, path)),
    )

    assert calls == [(1, 2, paths[0]), (2, 2, paths[1])]


def test_empty_input_returns_empty_list() -> None:
    assert read_records([], reader=_record) == []


def test_reader_error_propagates() -> None:
    """A failing read aborts the whole run."""

    def _failing(path: Path) -> FileRecord:
        raise OSError(f"cannot read {path}")

    with pytest.raises(OSError, match="cannot read"):
        _ = read_records([Path("/m/1.mp3")], reader=_failing)
