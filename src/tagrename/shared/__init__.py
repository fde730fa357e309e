# Where: tagrename.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Encourage consistent reuse of the per-file record across features.

"""Shared cross-cutting types exposed at the package level."""

from .file_record import FileRecord

__all__ = ["FileRecord"]
