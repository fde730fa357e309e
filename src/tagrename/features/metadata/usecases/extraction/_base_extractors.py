"""Shared base classes for metadata extractors.

Where: src/tagrename/features/metadata/usecases/extraction/_base_extractors.py
What: Define abstract base classes that encapsulate shared tag handling logic.
Why: Let each tag format describe only its key names and value access.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar, override

from mutagen import FileType

from tagrename.platform.logging import logger
from tagrename.shared.file_record import FileRecord

from ._tag_utils import parse_int, parse_slash_separated

__all__ = [
    "AudioFormatExtractor",
    "BaseAudioExtractor",
]


class AudioFormatExtractor(abc.ABC):
    """Abstract base class for audio metadata extractors."""

    @abc.abstractmethod
    def extract_metadata(
        self,
        audio: FileType,
        file_path: Path,
        *,
        file_extension: str,
        mime_type: str | None = None,
    ) -> FileRecord:
        """Build a FileRecord from an already opened mutagen file."""
        raise NotImplementedError


class BaseAudioExtractor(AudioFormatExtractor, abc.ABC):
    """Base class for extractors driven by a field-to-tag-key mapping."""

    # Empty strings mark fields the format does not store separately.
    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "",
        "album": "",
        "track": "",
        "disc": "",
        "track_total": "",
        "disc_total": "",
    }

    @abc.abstractmethod
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        """Get the first text value stored under ``key``."""
        raise NotImplementedError

    def _field(self, tags: Any, field: str) -> str | None:
        key = self.TAG_MAPPING.get(field, "")
        if not key or tags is None:
            return None
        return self._get_tag_value(tags, key)

    @override
    def extract_metadata(
        self,
        audio: FileType,
        file_path: Path,
        *,
        file_extension: str,
        mime_type: str | None = None,
    ) -> FileRecord:
        tags = audio.tags
        logger.debug("Reading %s tags from %s", type(tags).__name__, file_path)

        try:
            title = self._field(tags, "title")
            album = self._field(tags, "album")

            track_number, track_total = parse_slash_separated(self._field(tags, "track"))
            if track_total is None:
                track_total = parse_int(self._field(tags, "track_total"))

            disc_number, disc_total = parse_slash_separated(self._field(tags, "disc"))
            if disc_total is None:
                disc_total = parse_int(self._field(tags, "disc_total"))
        except Exception as exc:
            logger.error(
                "Failed to read %s tags from %s: %s",
                self.__class__.__name__.replace("Extractor", ""),
                file_path,
                exc,
            )
            raise

        record = FileRecord(
            path=file_path,
            file_extension=file_extension,
            title=title,
            album=album or None,
            track_number=track_number,
            track_total=track_total,
            disc_number=disc_number,
            disc_total=disc_total,
            mime_type=mime_type,
        )
        logger.debug("Extracted metadata: %s", record)
        return record
