"""
Summary: Public surface of the metadata feature.
Why: Let orchestrators import extraction and reading from one place.
"""

from .usecases.extraction import MetadataExtractor
from .usecases.metadata_reader import read_records

__all__ = ["MetadataExtractor", "read_records"]
