"""Format-specific metadata extractors.

Where: src/tagrename/features/metadata/usecases/extraction/format_extractors.py
What: Define concrete extractors for each tag container mutagen exposes.
Why: Separate format logic from the facade to simplify future maintenance and extensions.
"""

from __future__ import annotations

from typing import Any, ClassVar, cast

from ._base_extractors import BaseAudioExtractor
from ._tag_utils import parse_tuple_numbers, safe_get_first

__all__ = [
    "Id3Extractor",
    "VorbisCommentExtractor",
    "Mp4Extractor",
    "ApeExtractor",
    "AsfExtractor",
]


class Id3Extractor(BaseAudioExtractor):
    """Extractor for ID3 frames (MP3, AIFF, WAVE, DSF, DSDIFF, TrueAudio)."""

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "TIT2",
        "album": "TALB",
        "track": "TRCK",
        "disc": "TPOS",
        "track_total": "",
        "disc_total": "",
    }

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        frame = tags.get(key)
        if frame is None:
            return None
        text = getattr(frame, "text", None)
        if isinstance(text, (list, tuple)):
            return safe_get_first(cast(list[object], text))
        return str(text) if text is not None else None


class VorbisCommentExtractor(BaseAudioExtractor):
    """Extractor for Vorbis comments (FLAC, Ogg Vorbis, Opus, Ogg FLAC, Speex)."""

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "title",
        "album": "album",
        "track": "tracknumber",
        "disc": "discnumber",
        "track_total": "tracktotal",
        "disc_total": "disctotal",
    }

    # Both spellings are common in the wild.
    _ALIASES: ClassVar[dict[str, tuple[str, ...]]] = {
        "tracktotal": ("tracktotal", "totaltracks"),
        "disctotal": ("disctotal", "totaldiscs"),
    }

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        for candidate in self._ALIASES.get(key, (key,)):
            value = safe_get_first(cast(list[object] | None, tags.get(candidate)))
            if value is not None:
                return value
        return None


class Mp4Extractor(BaseAudioExtractor):
    """Extractor for M4A/AAC files using MP4 atoms."""

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "\xa9nam",
        "album": "\xa9alb",
        "track": "trkn",
        "disc": "disk",
        "track_total": "",
        "disc_total": "",
    }

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        if key in ("trkn", "disk"):
            value = cast(list[tuple[int, int]] | None, tags.get(key))
            if not value:
                return None
            num, total = parse_tuple_numbers(data=value)
            return f"{'' if num is None else num}/{'' if total is None else total}"
        return safe_get_first(cast(list[object] | None, tags.get(key)))


class ApeExtractor(BaseAudioExtractor):
    """Extractor for APEv2 tags (Monkey's Audio, WavPack, Musepack, OptimFROG)."""

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "Title",
        "album": "Album",
        "track": "Track",
        "disc": "Disc",
        "track_total": "",
        "disc_total": "",
    }

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        value = tags.get(key)
        if value is None:
            return None
        # Multiple APE values are NUL separated.
        return str(value).split("\0")[0]


class AsfExtractor(BaseAudioExtractor):
    """Extractor for Windows Media (ASF) attributes."""

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "Title",
        "album": "WM/AlbumTitle",
        "track": "WM/TrackNumber",
        "disc": "WM/PartOfSet",
        "track_total": "",
        "disc_total": "",
    }

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        return safe_get_first(cast(list[object] | None, tags.get(key)))
