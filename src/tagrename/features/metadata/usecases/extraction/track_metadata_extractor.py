"""Audio file metadata extraction functionality.

Where: src/tagrename/features/metadata/usecases/extraction/track_metadata_extractor.py
What: Provide the MetadataExtractor facade that sniffs a file and routes to a tag extractor.
Why: Offer a slim orchestration layer between mutagen and the rename pipeline.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Final, NamedTuple

import mutagen
from mutagen import FileType, MutagenError
from mutagen.aac import AAC
from mutagen.ac3 import AC3
from mutagen.aiff import AIFF
from mutagen.asf import ASF
from mutagen.dsdiff import DSDIFF
from mutagen.dsf import DSF
from mutagen.flac import FLAC
from mutagen.monkeysaudio import MonkeysAudio
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4, AtomError, Atoms
from mutagen.musepack import Musepack
from mutagen.oggflac import OggFLAC
from mutagen.oggopus import OggOpus
from mutagen.oggspeex import OggSpeex
from mutagen.oggvorbis import OggVorbis
from mutagen.optimfrog import OptimFROG
from mutagen.smf import SMF
from mutagen.tak import TAK
from mutagen.trueaudio import TrueAudio
from mutagen.wave import WAVE
from mutagen.wavpack import WavPack

from tagrename.platform.logging import logger
from tagrename.shared.file_record import FileRecord

from ._base_extractors import AudioFormatExtractor
from .format_extractors import (
    ApeExtractor,
    AsfExtractor,
    Id3Extractor,
    Mp4Extractor,
    VorbisCommentExtractor,
)

__all__ = ["AudioFormat", "MetadataExtractor"]


MPEG_LAYER_EXTENSIONS: Final[dict[int, str]] = {1: ".mp1", 2: ".mp2", 3: ".mp3"}

# Major brands that mark an MP4 file as audio regardless of its other tracks.
MP4_AUDIO_BRANDS: Final[dict[bytes, str]] = {
    b"M4A ": ".m4a",
    b"M4B ": ".m4b",
    b"M4P ": ".m4p",
}


class AudioFormat(NamedTuple):
    """A mutagen file class, its canonical extension and its tag extractor."""

    file_class: type[FileType]
    extension: str
    extractor: AudioFormatExtractor | None


def _mp4_layout(file_path: Path) -> tuple[bytes, frozenset[bytes]]:
    """Return the major brand and the track handler types of an MP4 file."""
    brand = b""
    handlers: set[bytes] = set()
    with file_path.open("rb") as fileobj:
        atoms = Atoms(fileobj)
        if b"ftyp" in atoms:
            ok, data = atoms[b"ftyp"].read(fileobj)
            if ok:
                brand = data[:4]
        if b"moov" in atoms:
            for trak in atoms[b"moov"].findall(b"trak"):
                try:
                    hdlr = trak[b"mdia", b"hdlr"]
                except KeyError:
                    continue
                ok, data = hdlr.read(fileobj)
                if ok:
                    handlers.add(data[8:12])
    return brand, frozenset(handlers)


class MetadataExtractor:
    """Facade class for sniffing audio files and extracting their tags.

    The format is decided from file content by mutagen's header scoring, so a
    mislabelled file still receives the extension of what it really is. MPEG
    audio is refined by its layer and MP4 by its brand and track handlers.
    """

    _id3: ClassVar[AudioFormatExtractor] = Id3Extractor()
    _vorbis: ClassVar[AudioFormatExtractor] = VorbisCommentExtractor()
    _ape: ClassVar[AudioFormatExtractor] = ApeExtractor()

    # mutagen's bare APEv2File and ID3FileType only report
    # application/octet-stream, so they never pass the audio gate.
    FORMATS: ClassVar[tuple[AudioFormat, ...]] = (
        AudioFormat(MP3, ".mp3", _id3),
        AudioFormat(FLAC, ".flac", _vorbis),
        AudioFormat(MP4, ".m4a", Mp4Extractor()),
        AudioFormat(OggOpus, ".opus", _vorbis),
        AudioFormat(OggVorbis, ".ogg", _vorbis),
        AudioFormat(OggFLAC, ".oga", _vorbis),
        AudioFormat(OggSpeex, ".spx", _vorbis),
        AudioFormat(DSF, ".dsf", _id3),
        AudioFormat(DSDIFF, ".dff", _id3),
        AudioFormat(AIFF, ".aif", _id3),
        AudioFormat(WAVE, ".wav", _id3),
        AudioFormat(TrueAudio, ".tta", _id3),
        AudioFormat(MonkeysAudio, ".ape", _ape),
        AudioFormat(WavPack, ".wv", _ape),
        AudioFormat(Musepack, ".mpc", _ape),
        AudioFormat(OptimFROG, ".ofr", _ape),
        AudioFormat(TAK, ".tak", _ape),
        AudioFormat(ASF, ".wma", AsfExtractor()),
        AudioFormat(AAC, ".aac", None),
        AudioFormat(AC3, ".ac3", None),
        AudioFormat(SMF, ".mid", None),
    )

    @classmethod
    def lookup_format(cls, audio: FileType) -> AudioFormat | None:
        """Return the registered format for an opened mutagen file, if any."""
        for audio_format in cls.FORMATS:
            if isinstance(audio, audio_format.file_class):
                return audio_format
        return None

    @staticmethod
    def audio_mime_type(audio: FileType) -> str | None:
        """Return the first ``audio/*`` MIME type mutagen reports, or None."""
        for mime in audio.mime:
            if mime.startswith("audio/"):
                return mime
        return None

    @staticmethod
    def mpeg_extension(audio: MP3) -> str:
        """Return ``.mp1``, ``.mp2`` or ``.mp3`` after the MPEG audio layer."""
        layer = getattr(audio.info, "layer", 3)
        return MPEG_LAYER_EXTENSIONS.get(layer, ".mp3")

    @staticmethod
    def mp4_audio_extension(file_path: Path) -> str | None:
        """Return the extension of an MP4 audio file.

        An audio brand (``M4A``, ``M4B``, ``M4P``) wins. Otherwise a file with
        a video track is a movie.

        Returns:
            str | None: The extension, or None when the file has no sound
            track or is a video.
        """
        try:
            brand, handlers = _mp4_layout(file_path)
        except AtomError as exc:
            raise MutagenError(f"{file_path}: {exc}") from exc

        if b"soun" not in handlers:
            return None
        if brand in MP4_AUDIO_BRANDS:
            return MP4_AUDIO_BRANDS[brand]
        if b"vide" in handlers:
            return None
        return ".m4a"

    @staticmethod
    def _open_file(file_path: Path) -> FileType | None:
        try:
            return mutagen.File(file_path)
        except MutagenError as exc:
            logger.error("Failed to parse %s: %s", file_path, exc)
            if "No such file" in str(exc):
                raise FileNotFoundError(str(exc)) from exc
            raise

    @classmethod
    def extract(cls, file_path: Path, *, keep_extension: bool = False) -> FileRecord | None:
        """Extract a FileRecord from an audio file.

        Args:
            file_path: Path to the candidate file.
            keep_extension: Reuse the path's own suffix instead of the sniffed one.

        Returns:
            FileRecord | None: The record, or None when the file is not audio.

        Raises:
            MutagenError: If mutagen recognises the file but cannot parse it.
        """
        audio = cls._open_file(file_path)
        if audio is None:
            return None

        mime_type = cls.audio_mime_type(audio)
        if mime_type is None:
            return None

        audio_format = cls.lookup_format(audio)
        extension = audio_format.extension if audio_format is not None else None
        if isinstance(audio, MP3):
            extension = cls.mpeg_extension(audio)
        elif isinstance(audio, MP4):
            extension = cls.mp4_audio_extension(file_path)
            if extension is None:
                logger.debug("Skipping %s: MP4 file without audio-only content", file_path)
                return None

        if keep_extension or extension is None:
            extension = file_path.suffix

        if audio_format is None or audio_format.extractor is None:
            logger.debug("No tag extractor for %s (%s)", file_path, type(audio).__name__)
            return FileRecord(path=file_path, file_extension=extension, mime_type=mime_type)

        return audio_format.extractor.extract_metadata(
            audio,
            file_path,
            file_extension=extension,
            mime_type=mime_type,
        )
