"""
Summary: Replace reserved filesystem characters in titles with Unicode look-alikes.
Why: Keep track titles readable in file names on every common filesystem.
"""

from typing import ClassVar, final

from tagrename.config.settings import RESERVED_CHARACTER_REPLACEMENTS


@final
class Sanitizer:
    """Sanitize track titles for use as file name components."""

    # One translate table so each character is mapped exactly once; a
    # substitute inserted for one character is never matched again.
    TRANSLATION_TABLE: ClassVar[dict[int, str]] = {
        ord(reserved): replacement for reserved, replacement in RESERVED_CHARACTER_REPLACEMENTS
    }

    @classmethod
    def sanitize_title(cls, title: str) -> str:
        """Sanitize a track title.

        Args:
            title: Raw title from the file's tags.

        Returns:
            str: The title with surrounding whitespace removed and every
            reserved character (``: < > " / \\ | ? *``) replaced by its
            look-alike. Text without reserved characters is returned as is.
        """
        return title.strip().translate(cls.TRANSLATION_TABLE)


__all__ = ["Sanitizer"]
