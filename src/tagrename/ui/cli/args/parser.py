"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from tagrename.config.settings import DEFAULT_MAX_WORKERS
from tagrename.platform.logging import logger, setup_logger
from tagrename.ui.cli.args.options import RenameArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="tagrename",
            description=(
                "Rename audio files after their embedded title, track and disc "
                "numbers, e.g. '1.03. Title.flac'."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "directory",
            nargs="?",
            type=str,
            help="Path to the directory containing audio files",
            metavar="DIRECTORY",
        )
        _ = parser.add_argument(
            "-d",
            "--directory",
            dest="directory_option",
            type=str,
            help="Path to the directory containing audio files (overrides DIRECTORY)",
            metavar="DIRECTORY",
        )
        _ = parser.add_argument(
            "-r",
            "--recursive",
            action="store_true",
            help="Process files in subdirectories recursively",
        )
        _ = parser.add_argument(
            "-n",
            "--dry-run",
            action="store_true",
            help="Show the new names without renaming anything",
        )
        _ = parser.add_argument(
            "-k",
            "--keep-extension",
            action="store_true",
            help="Keep each file's current extension instead of the detected one",
        )
        _ = parser.add_argument(
            "-j",
            "--jobs",
            type=int,
            default=DEFAULT_MAX_WORKERS,
            help=f"Number of files whose tags are read in parallel (default: {DEFAULT_MAX_WORKERS})",
            metavar="N",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        _ = parser.add_argument(
            "--log-file",
            type=str,
            help="Also write a detailed log to this file",
            metavar="PATH",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> RenameArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            RenameArgs: Processed command line arguments.

        Raises:
            SystemExit: If the directory is missing or invalid, or an option is out of range.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        raw_directory: str | None = parsed_args.directory_option or parsed_args.directory
        if not raw_directory:
            parser.print_help()
            sys.exit(1)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        log_file = Path(parsed_args.log_file) if parsed_args.log_file else None
        _ = setup_logger(log_file=log_file, console_level=log_level)

        directory = Path(raw_directory).expanduser()
        if not directory.is_dir():
            logger.error("Directory does not exist or is not a directory: %s", directory)
            sys.exit(1)

        jobs: int = parsed_args.jobs
        if jobs <= 0:
            logger.error("Jobs must be a positive integer; received %s", jobs)
            sys.exit(1)

        return RenameArgs(
            directory=directory,
            recursive=parsed_args.recursive,
            dry_run=parsed_args.dry_run,
            keep_extension=parsed_args.keep_extension,
            jobs=jobs,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            log_file=log_file,
        )
