"""
Summary: Public surface for metadata extraction modules.
Why: Provide a stable import path for orchestrators and tests.
"""

from .format_extractors import (
    ApeExtractor,
    AsfExtractor,
    Id3Extractor,
    Mp4Extractor,
    VorbisCommentExtractor,
)
from .track_metadata_extractor import AudioFormat, MetadataExtractor

__all__ = [
    "AudioFormat",
    "MetadataExtractor",
    "Id3Extractor",
    "VorbisCommentExtractor",
    "Mp4Extractor",
    "ApeExtractor",
    "AsfExtractor",
]
