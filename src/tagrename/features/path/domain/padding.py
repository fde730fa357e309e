"""
Summary: Compute the zero-padding width for track numbers within an album.
Why: Padded numbers make lexicographic and numeric file order agree.
"""

from tagrename.config.settings import MIN_PADDING_WIDTH


def padding_width(max_value: int, minimum: int = MIN_PADDING_WIDTH) -> int:
    """Return ``max(ceil(log10(max_value + 1)), minimum)``.

    Computed by counting digits, which equals ``ceil(log10(n + 1))`` for
    every non-negative integer.

    Args:
        max_value: Largest number that has to fit. Negative values count as 0.
        minimum: Floor for the width.

    Returns:
        int: Number of digits to pad to.
    """
    digits = len(str(max_value)) if max_value > 0 else 0
    return max(digits, minimum)


__all__ = ["padding_width"]
