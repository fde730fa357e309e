"""Tests for the directory rename command."""

from pathlib import Path

from pytest_mock import MockerFixture

from tagrename.application.services.rename_service import RenameMusicService, RenameRequest
from tagrename.ui.cli.args.options import RenameArgs
from tagrename.ui.cli.commands import DirectoryCommand


def _args(directory: Path, **overrides: object) -> RenameArgs:
    values: dict[str, object] = {
        "directory": directory,
        "recursive": False,
        "dry_run": False,
        "keep_extension": False,
        "jobs": 4,
        "verbose": False,
        "quiet": True,
        "log_file": None,
    }
    values.update(overrides)
    return RenameArgs(**values)  # type: ignore[arg-type]


def test_command_builds_request_from_args(tmp_path: Path, mocker: MockerFixture) -> None:
    app = mocker.Mock(spec=RenameMusicService)
    app.rename_directory.return_value = []

    command = DirectoryCommand(
        _args(tmp_path, recursive=True, dry_run=True, keep_extension=True, jobs=2),
        app=app,
    )
    results = command.execute()

    assert results == []
    assert command.request == RenameRequest(
        directory=tmp_path,
        recursive=True,
        dry_run=True,
        keep_extension=True,
        max_workers=2,
    )
    app.rename_directory.assert_called_once_with(command.request)


def test_command_shows_results(tmp_path: Path, mocker: MockerFixture) -> None:
    app = mocker.Mock(spec=RenameMusicService)
    app.rename_directory.return_value = []
    command = DirectoryCommand(_args(tmp_path, quiet=False), app=app)
    show = mocker.patch.object(command.result_display, "show_results")
    _ = mocker.patch.object(command.progress_display, "run_with_service", return_value=[])

    _ = command.execute()

    show.assert_called_once_with([], base_path=tmp_path.resolve(), quiet=False)
