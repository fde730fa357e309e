"""Command execution package for CLI."""

from tagrename.ui.cli.commands.directory import DirectoryCommand

__all__ = ["DirectoryCommand"]
