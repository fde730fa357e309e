"""src/tagrename/ui/cli/commands/directory.py
What: Execute rename runs for a directory via the CLI.
Why: Bridge parsed arguments with the application service and the displays.
"""

from tagrename.application.services.rename_service import RenameMusicService, RenameRequest
from tagrename.features.rename.usecases.processing_types import RenameResult
from tagrename.ui.cli.args.options import RenameArgs
from tagrename.ui.cli.display.progress import ProgressDisplay
from tagrename.ui.cli.display.result import ResultDisplay


class DirectoryCommand:
    """Command for renaming the audio files of a directory."""

    args: RenameArgs
    app: RenameMusicService
    request: RenameRequest
    progress_display: ProgressDisplay
    result_display: ResultDisplay

    def __init__(self, args: RenameArgs, app: RenameMusicService | None = None) -> None:
        self.args = args
        self.app = app or RenameMusicService()
        self.request = RenameRequest(
            directory=args.directory,
            recursive=args.recursive,
            dry_run=args.dry_run,
            keep_extension=args.keep_extension,
            max_workers=args.jobs,
        )
        self.progress_display = ProgressDisplay()
        self.result_display = ResultDisplay()

    def execute(self) -> list[RenameResult]:
        """Execute the directory rename command.

        Returns:
            List of rename results.
        """
        results = self.progress_display.run_with_service(
            self.app,
            self.request,
            quiet=self.args.quiet,
        )
        self.result_display.show_results(
            results,
            base_path=self.args.directory.resolve(),
            quiet=self.args.quiet,
        )
        return results
