"""
Summary: Public surface for file name generation helpers.
Why: Keep a single import path for the rename orchestration and tests.
"""

from .filename import FileNameGenerator

__all__ = ["FileNameGenerator"]
