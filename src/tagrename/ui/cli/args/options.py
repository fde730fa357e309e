"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class RenameArgs:
    """Validated command line arguments for a rename run."""

    directory: Path
    recursive: bool
    dry_run: bool
    keep_extension: bool
    jobs: int
    verbose: bool
    quiet: bool
    log_file: Path | None


__all__ = ["RenameArgs"]
