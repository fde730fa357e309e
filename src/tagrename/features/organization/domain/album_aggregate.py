"""
Summary: Track the largest track and disc numbers seen per album.
Why: Padding width and prefix gating depend on every file of the album.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import final

from tagrename.shared.file_record import FileRecord


@dataclass(frozen=True, slots=True)
class AlbumMaxima:
    """Largest track and disc numbers (or totals) recorded for one album."""

    track: int = 0
    disc: int = 0


_EMPTY = AlbumMaxima()


@final
class AlbumAggregate:
    """Mapping of album title to AlbumMaxima, built once per run.

    Albums are keyed by their bare title, so two different albums sharing a
    title (by different artists, say) end up in one entry.
    """

    def __init__(self) -> None:
        self._albums: dict[str, AlbumMaxima] = {}

    @classmethod
    def from_records(cls, records: Iterable[FileRecord | None]) -> AlbumAggregate:
        """Build an aggregate from records; None entries and album-less records are ignored."""
        aggregate = cls()
        for record in records:
            if record is not None:
                aggregate.register(record)
        return aggregate

    def register(self, record: FileRecord) -> None:
        """Fold one record's track/disc numbers and totals into its album maxima."""
        if not record.album:
            return

        current = self._albums.get(record.album, _EMPTY)
        self._albums[record.album] = AlbumMaxima(
            track=max(current.track, record.track_total or 0, record.track_number or 0),
            disc=max(current.disc, record.disc_total or 0, record.disc_number or 0),
        )

    def get(self, album: str | None) -> AlbumMaxima:
        """Return the maxima for ``album``; unknown or missing albums yield zeros."""
        if not album:
            return _EMPTY
        return self._albums.get(album, _EMPTY)

    def __contains__(self, album: object) -> bool:
        return album in self._albums

    def __len__(self) -> int:
        return len(self._albums)


__all__ = ["AlbumAggregate", "AlbumMaxima"]
