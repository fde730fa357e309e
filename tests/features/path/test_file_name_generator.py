"""
Summary: Verify disc/track prefixes, padding and extensions of generated names.
Why: File names must sort correctly within each album.
"""

from pathlib import Path

import pytest

from tagrename.features.organization.domain.album_aggregate import AlbumAggregate
from tagrename.features.path.usecases.renamer import FileNameGenerator
from tagrename.shared.file_record import FileRecord


def _record(name: str = "x.mp3", **fields: object) -> FileRecord:
    fields.setdefault("file_extension", ".mp3")
    return FileRecord(path=Path("/music") / name, **fields)  # type: ignore[arg-type]


def _generator(*records: FileRecord) -> FileNameGenerator:
    return FileNameGenerator(AlbumAggregate.from_records(records))


class TestFileNameGenerator:
    """Test cases for FileNameGenerator."""

    def test_track_prefix_uses_two_digit_floor(self) -> None:
        record = _record(title="Song", album="Album", track_number=3, track_total=12)

        assert _generator(record).generate(record) == "03. Song.mp3"

    def test_album_uses_max_digits_over_min_two(self) -> None:
        """When any track has 3 digits, pad all tracks in the album to 3 digits."""
        first = _record("a.mp3", title="First", album="Long", track_number=7)
        last = _record("b.mp3", title="Last", album="Long", track_number=103)
        generator = _generator(first, last)

        assert generator.generate(first) == "007. First.mp3"
        assert generator.generate(last) == "103. Last.mp3"

    def test_album_total_drives_width(self) -> None:
        record = _record(title="Song", album="Box", track_number=7, track_total=150)

        assert _generator(record).generate(record) == "007. Song.mp3"

    def test_no_album_means_no_prefix(self) -> None:
        record = _record(title="Song", track_number=7, disc_number=1, disc_total=2)

        assert _generator(record).generate(record) == "Song.mp3"

    def test_single_track_album_has_no_prefix(self) -> None:
        record = _record(title="Single", album="Single", track_number=1, track_total=1)

        assert _generator(record).generate(record) == "Single.mp3"

    def test_disc_prefix_for_multi_disc_album(self) -> None:
        disc1 = _record("a.flac", title="Opening", album="Double", track_number=1,
                        track_total=10, disc_number=1, disc_total=2, file_extension=".flac")
        disc2 = _record("b.flac", title="Closing", album="Double", track_number=10,
                        track_total=10, disc_number=2, disc_total=2, file_extension=".flac")
        generator = _generator(disc1, disc2)

        assert generator.generate(disc1) == "1.01. Opening.flac"
        assert generator.generate(disc2) == "2.10. Closing.flac"

    def test_disc_prefix_inferred_from_other_track(self) -> None:
        """A disc number above one elsewhere in the album enables the prefix."""
        disc1 = _record("a.mp3", title="A", album="Two", track_number=1, disc_number=1)
        disc2 = _record("b.mp3", title="B", album="Two", track_number=2, disc_number=2)

        assert _generator(disc1, disc2).generate(disc1) == "1.01. A.mp3"

    def test_single_disc_has_no_disc_prefix(self) -> None:
        record = _record(title="Song", album="Album", track_number=2, track_total=9,
                         disc_number=1, disc_total=1)

        assert _generator(record).generate(record) == "02. Song.mp3"

    def test_missing_track_number_keeps_disc_prefix_only(self) -> None:
        other = _record("a.mp3", title="A", album="Set", track_number=4, disc_number=2)
        record = _record("b.mp3", title="Hidden", album="Set", disc_number=2)

        assert _generator(other, record).generate(record) == "2.Hidden.mp3"

    def test_track_zero_is_kept(self) -> None:
        record = _record(title="Pregap", album="Album", track_number=0, track_total=12)

        assert _generator(record).generate(record) == "00. Pregap.mp3"

    def test_title_is_sanitized(self) -> None:
        record = _record(title="  AC/DC: Live?  ", album="Album", track_number=1, track_total=3)

        assert _generator(record).generate(record) == "01. AC⁄DCː Live？.mp3"

    def test_extension_is_preserved_verbatim(self) -> None:
        record = _record(title="Song", file_extension=".FLAC")

        assert _generator(record).generate(record) == "Song.FLAC"

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_missing_title_raises(self, title: str | None) -> None:
        record = _record(title=title)

        with pytest.raises(ValueError, match="without a title"):
            _ = _generator(record).generate(record)

    def test_generation_is_stable(self) -> None:
        """Same tags produce the same name regardless of the current file name."""
        before = _record("random name.mp3", title="Song", album="A", track_number=3, track_total=12)
        after = _record("03. Song.mp3", title="Song", album="A", track_number=3, track_total=12)

        assert _generator(before).generate(before) == _generator(after).generate(after)
