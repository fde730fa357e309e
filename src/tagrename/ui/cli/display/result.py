"""src/tagrename/ui/cli/display/result.py
What: Render user-facing summaries after a rename run.
Why: Keep console output formatting consistent across dry and real runs.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from tagrename.features.rename.usecases.processing_types import RenameResult, RenameStatus


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_results(
        self,
        results: list[RenameResult],
        *,
        base_path: Path | None = None,
        quiet: bool = False,
    ) -> None:
        """Display rename results.

        Args:
            results: List of rename results.
            base_path: Directory the paths are shown relative to.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        if any(result.status is RenameStatus.PLANNED for result in results):
            self._show_plan(results, base_path)

        counts = Counter(result.status for result in results)
        self.console.print("\n[bold]Rename Summary:[/bold]")
        self.console.print(f"Audio files found: {len(results)}")
        if counts[RenameStatus.PLANNED]:
            self.console.print(f"[cyan]Would rename: {counts[RenameStatus.PLANNED]}[/cyan]")
        else:
            self.console.print(f"[green]Renamed: {counts[RenameStatus.RENAMED]}[/green]")
        self.console.print(f"Already named: {counts[RenameStatus.UNCHANGED]}")

        skipped = [result for result in results if result.skipped]
        if not skipped:
            return

        self.console.print(f"[yellow]Skipped (missing title): {len(skipped)}[/yellow]")
        for result in skipped:
            self.console.print(
                f"[yellow]  • {escape(self._display_path(result.source_path, base_path))}[/yellow]",
                highlight=False,
            )

    def _show_plan(self, results: list[RenameResult], base_path: Path | None) -> None:
        table = Table(title="Planned renames (dry run)", show_lines=False)
        table.add_column("Current name", style="white")
        table.add_column("New name", style="cyan")
        for result in results:
            if result.status is not RenameStatus.PLANNED or result.target_path is None:
                continue
            table.add_row(
                Text(self._display_path(result.source_path, base_path)),
                Text(result.target_path.name),
            )
        self.console.print(table)

    @staticmethod
    def _display_path(path: Path, base_path: Path | None) -> str:
        if base_path is None:
            return str(path)
        try:
            return str(path.relative_to(base_path))
        except ValueError:
            return str(path)


__all__ = ["ResultDisplay"]
