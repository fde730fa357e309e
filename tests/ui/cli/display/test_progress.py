"""Tests for progress display functionality."""

from collections.abc import Callable
from pathlib import Path

from pytest_mock import MockerFixture

from tagrename.application.services.rename_service import RenameRequest
from tagrename.features.rename.usecases import RenameResult, RenameStatus
from tagrename.ui.cli.display.progress import ProgressDisplay


class _FakeService:
    """Service double that reports progress for two files."""

    def __init__(self) -> None:
        self.callbacks: list[object] = []

    def rename_directory(
        self,
        request: RenameRequest,
        progress_callback: Callable[[int, int, Path], None] | None = None,
    ) -> list[RenameResult]:
        self.callbacks.append(progress_callback)
        if progress_callback is not None:
            progress_callback(1, 2, request.directory / "a.mp3")
            progress_callback(2, 2, request.directory / "b.mp3")
        return [RenameResult(source_path=request.directory / "a.mp3", status=RenameStatus.RENAMED)]


def test_run_with_service_drives_progress_bar(mocker: MockerFixture) -> None:
    progress_cls = mocker.patch("tagrename.ui.cli.display.progress.Progress")
    progress = progress_cls.return_value.__enter__.return_value
    service = _FakeService()

    results = ProgressDisplay().run_with_service(service, RenameRequest(directory=Path("/music")))

    assert [r.status for r in results] == [RenameStatus.RENAMED]
    progress.add_task.assert_called_once()
    assert progress.add_task.call_args.kwargs["total"] == 2
    assert progress.update.call_count == 2
    assert progress.update.call_args.kwargs["completed"] == 2


def test_run_with_service_quiet_skips_progress(mocker: MockerFixture) -> None:
    progress_cls = mocker.patch("tagrename.ui.cli.display.progress.Progress")
    service = _FakeService()

    _ = ProgressDisplay().run_with_service(service, RenameRequest(directory=Path("/music")), quiet=True)

    progress_cls.assert_not_called()
    assert service.callbacks == [None]
