"""Rich console output for the CLI."""

from tagrename.ui.cli.display.progress import ProgressDisplay
from tagrename.ui.cli.display.result import ResultDisplay

__all__ = ["ProgressDisplay", "ResultDisplay"]
