"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from tagrename.config.settings import DEFAULT_MAX_WORKERS
from tagrename.ui.cli.args import ArgumentParser, RenameArgs


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    """Keep argument tests from reconfiguring the real logger."""
    return mocker.patch("tagrename.ui.cli.args.parser.setup_logger")


def test_create_parser() -> None:
    """Parser should expose the positional directory and every option."""

    parser = ArgumentParser.create_parser()

    args: Namespace = parser.parse_args(["music"])
    assert args.directory == "music"
    assert args.directory_option is None
    assert not args.recursive
    assert args.jobs == DEFAULT_MAX_WORKERS

    all_flags = parser.parse_args(
        ["-d", "music", "-r", "-n", "-k", "-j", "4", "--verbose", "--log-file", "run.log"]
    )
    assert all_flags.directory_option == "music"
    assert all_flags.recursive and all_flags.dry_run and all_flags.keep_extension
    assert all_flags.jobs == 4
    assert all_flags.verbose and not all_flags.quiet
    assert all_flags.log_file == "run.log"


def test_process_args_positional_directory(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    args = ArgumentParser.process_args([str(tmp_path)])

    assert isinstance(args, RenameArgs)
    assert args.directory == tmp_path
    assert not args.recursive
    assert not args.dry_run
    assert args.log_file is None
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO


def test_directory_option_overrides_positional(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    chosen = tmp_path / "chosen"
    chosen.mkdir()

    args = ArgumentParser.process_args([str(tmp_path / "ignored"), "-d", str(chosen), "-r"])

    assert args.directory == chosen
    assert args.recursive


def test_process_args_logging_levels(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    """--verbose and --quiet select the console level; --log-file adds a file."""

    _ = ArgumentParser.process_args([str(tmp_path), "--verbose"])
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG

    log_file = tmp_path / "rename.log"
    args = ArgumentParser.process_args([str(tmp_path), "--quiet", "--log-file", str(log_file)])
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR
    assert mock_setup_logger.call_args.kwargs["log_file"] == log_file
    assert args.quiet
    assert args.log_file == log_file


def test_verbose_and_quiet_are_exclusive(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args([str(tmp_path), "--verbose", "--quiet"])
    assert exc_info.value.code == 2


def test_missing_directory_prints_usage_and_exits_1(
    capsys: pytest.CaptureFixture[str], mock_setup_logger: MagicMock
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args([])

    assert exc_info.value.code == 1
    assert "usage: tagrename" in capsys.readouterr().out
    mock_setup_logger.assert_not_called()


def test_help_exits_0(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args(["-h"])

    assert exc_info.value.code == 0
    assert "--recursive" in capsys.readouterr().out


def test_nonexistent_directory_exits_1(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args([str(tmp_path / "missing")])
    assert exc_info.value.code == 1


def test_file_instead_of_directory_exits_1(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    song = tmp_path / "song.mp3"
    song.touch()

    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args([str(song)])
    assert exc_info.value.code == 1


@pytest.mark.parametrize("jobs", ["0", "-2"])
def test_non_positive_jobs_exit_1(tmp_path: Path, mock_setup_logger: MagicMock, jobs: str) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args([str(tmp_path), "--jobs", jobs])
    assert exc_info.value.code == 1
