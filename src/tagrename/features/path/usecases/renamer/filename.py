"""
Summary: Build "[disc.][track. ]title.ext" file names from records and album maxima.
Why: Keep naming rules reusable without depending on the rename orchestration.
"""

from __future__ import annotations

from typing import final

from tagrename.config.settings import DISC_NUMBER_SEPARATOR, TRACK_NUMBER_SEPARATOR
from tagrename.features.organization.domain.album_aggregate import AlbumAggregate
from tagrename.features.path.domain.padding import padding_width
from tagrename.features.path.domain.sanitizer import Sanitizer
from tagrename.shared.file_record import FileRecord


@final
class FileNameGenerator:
    """Generate file names for the records of one run.

    Prefixes are gated on the album maxima: a disc prefix needs more than one
    disc in the album, a track prefix more than one track. Records without an
    album therefore receive the bare title.
    """

    aggregate: AlbumAggregate

    def __init__(self, aggregate: AlbumAggregate) -> None:
        self.aggregate = aggregate

    def disc_prefix(self, record: FileRecord) -> str:
        maxima = self.aggregate.get(record.album)
        if record.disc_number is None or maxima.disc <= 1:
            return ""
        return f"{record.disc_number}{DISC_NUMBER_SEPARATOR}"

    def track_prefix(self, record: FileRecord) -> str:
        maxima = self.aggregate.get(record.album)
        if record.track_number is None or maxima.track <= 1:
            return ""
        width = padding_width(maxima.track)
        return f"{str(record.track_number).zfill(width)}{TRACK_NUMBER_SEPARATOR}"

    def generate(self, record: FileRecord) -> str:
        """Return the new file name (no directory) for ``record``.

        Raises:
            ValueError: If the record has no usable title.
        """
        if record.title is None or not record.has_title:
            raise ValueError(f"Cannot name file without a title: {record.path}")

        title = Sanitizer.sanitize_title(record.title)
        return f"{self.disc_prefix(record)}{self.track_prefix(record)}{title}{record.file_extension}"


__all__ = ["FileNameGenerator"]
