# Where: tagrename.shared.file_record
# What: Canonical FileRecord dataclass describing one audio file and its tags.
# Why: Centralize the per-file representation passed between pipeline stages.

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class FileRecord:
    """Tags and detected type of a single audio file."""

    path: Path
    file_extension: str
    title: str | None = None
    album: str | None = None
    track_number: int | None = None
    track_total: int | None = None
    disc_number: int | None = None
    disc_total: int | None = None
    mime_type: str | None = None

    @property
    def has_title(self) -> bool:
        """Whether the record carries a title usable as a file name."""
        return bool(self.title and self.title.strip())


__all__ = ["FileRecord"]
