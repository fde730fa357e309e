"""
Summary: Public surface of the path naming feature.
Why: Group sanitizing, padding and file name generation behind one import path.
"""

from .domain.padding import padding_width
from .domain.sanitizer import Sanitizer
from .usecases.renamer import FileNameGenerator

__all__ = ["FileNameGenerator", "Sanitizer", "padding_width"]
