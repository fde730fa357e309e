"""Tag utility helpers.

Where: src/tagrename/features/metadata/usecases/extraction/_tag_utils.py
What: Provide pure helper routines for parsing numeric tags and picking tag values.
Why: Share parsing rules between the per-format extractors.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "safe_get_first",
    "parse_int",
    "parse_slash_separated",
    "parse_tuple_numbers",
]


def safe_get_first(data: Sequence[object] | None, default: str | None = None) -> str | None:
    """Safely get the first element of a tag value list as a string."""
    if not data:
        return default
    first = data[0]
    return str(first) if first is not None else default


def parse_int(value: str | None) -> int | None:
    """Parse a non-negative integer tag, returning None when absent or malformed."""
    if value is None:
        return None
    text = value.strip()
    return int(text) if text.isdecimal() else None


def parse_slash_separated(value: str | None) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Zero is kept as a real value; only missing or non-numeric parts map to None.

    Returns a tuple (number, total).
    """
    if not value:
        return None, None
    parts: list[str] = value.split(sep="/")
    num = parse_int(parts[0])
    total = parse_int(parts[1]) if len(parts) > 1 else None
    return num, total


def parse_tuple_numbers(data: Sequence[tuple[int, int]] | None) -> tuple[int | None, int | None]:
    """Parse MP4 ``trkn``/``disk`` tuples; the MP4 atom stores 'absent' as zero."""
    if data:
        first: tuple[int, int] = data[0]
        num: int | None = first[0] if first[0] != 0 else None
        total: int | None = first[1] if first[1] != 0 else None
        return num, total
    return None, None
