"""Where: src/tagrename/config/settings.py
What: Runtime defaults for renaming, padding, concurrency and logging.
Why: Keep tunable constants in one typed module; the tool reads no config file.
"""

from __future__ import annotations

import os
from typing import Final

# File name layout ------------------------------------------------------------

# Minimum number of digits used for zero-padded track numbers.
MIN_PADDING_WIDTH: Final[int] = 2

# Separator placed after a zero-padded track number ("03. Title").
TRACK_NUMBER_SEPARATOR: Final[str] = ". "

# Separator placed after the (unpadded) disc number ("2.03. Title").
DISC_NUMBER_SEPARATOR: Final[str] = "."

# Reserved filesystem characters and the look-alike used in their place.
# Order matters only for display; each pair is applied independently.
RESERVED_CHARACTER_REPLACEMENTS: Final[tuple[tuple[str, str], ...]] = (
    (":", "ː"),
    ("<", "﹤"),
    (">", "﹥"),
    ('"', "“"),
    ("/", "⁄"),
    ("\\", "∖"),
    ("|", "⼁"),
    ("?", "？"),
    ("*", "﹡"),
)


# Concurrency -----------------------------------------------------------------

# Metadata reads are I/O bound; mirror ThreadPoolExecutor's own default.
DEFAULT_MAX_WORKERS: Final[int] = min(32, (os.cpu_count() or 1) + 4)


# Logging ---------------------------------------------------------------------

LOGGER_NAME: Final[str] = "tagrename"
LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUP_COUNT: Final[int] = 5
FILE_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


__all__ = [
    "MIN_PADDING_WIDTH",
    "TRACK_NUMBER_SEPARATOR",
    "DISC_NUMBER_SEPARATOR",
    "RESERVED_CHARACTER_REPLACEMENTS",
    "DEFAULT_MAX_WORKERS",
    "LOGGER_NAME",
    "LOG_FILE_MAX_BYTES",
    "LOG_FILE_BACKUP_COUNT",
    "FILE_LOG_FORMAT",
]
