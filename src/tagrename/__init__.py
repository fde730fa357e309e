"""tagrename: rename audio files after their embedded tags."""

__version__ = "0.1.0"
