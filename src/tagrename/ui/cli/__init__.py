"""Command line interface package; ``main`` is the console script target."""

from tagrename.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
