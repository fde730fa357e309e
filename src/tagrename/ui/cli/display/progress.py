"""Progress display functionality for CLI."""

from pathlib import Path
from typing import Any, Callable, Protocol, final, runtime_checkable

from rich.console import Console
from rich.progress import Progress, TaskID

from tagrename.application.services.rename_service import RenameRequest
from tagrename.features.rename.usecases.processing_types import RenameResult
from tagrename.platform.logging import WhitePathRichHandler, logger


@runtime_checkable
class RenameServiceLike(Protocol):
    """Protocol for application services that rename a directory with progress."""

    def rename_directory(
        self,
        request: RenameRequest,
        progress_callback: Callable[[int, int, Path], None] | None = None,
    ) -> list[RenameResult]:
        ...


@final
class ProgressDisplay:
    """Handles progress display in CLI."""

    def run_with_service(
        self,
        app: RenameServiceLike,
        request: RenameRequest,
        *,
        quiet: bool = False,
    ) -> list[RenameResult]:
        """Run a rename via the application service with a tag-reading progress bar.

        Args:
            app: Application service instance used to orchestrate the run.
            request: Rename operation parameters.
            quiet: Skip the progress bar entirely.

        Returns:
            List of rename results.
        """
        if quiet:
            return app.rename_directory(request)

        progress_console: Console | None = None
        for handler in logger.handlers:
            if isinstance(handler, WhitePathRichHandler):
                progress_console = handler.console
                break

        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        with Progress(**progress_kwargs) as progress:
            task_id: TaskID | None = None

            def _cb(processed: int, total: int, current_file: Path) -> None:
                nonlocal task_id
                _ = current_file
                if task_id is None:
                    task_id = progress.add_task("[cyan]Reading tags...", total=total)
                progress.update(
                    task_id,
                    completed=processed,
                    description=f"[cyan]Reading tags... {processed}/{total}",
                )

            return app.rename_directory(request, _cb)
