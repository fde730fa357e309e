"""Command line argument handling package."""

from tagrename.ui.cli.args.options import RenameArgs
from tagrename.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "RenameArgs"]
