"""Shared pytest fixtures for tagrename tests."""

from __future__ import annotations

import struct
from collections.abc import Callable
from pathlib import Path

import pytest
from mutagen.flac import FLAC

FlacFactory = Callable[..., Path]


def _streaminfo_block() -> bytes:
    """Return a last-block STREAMINFO header plus body for a silent 44.1 kHz stream."""

    sample_rate, channels, bits_per_sample, total_samples = 44100, 2, 16, 0
    packed = (
        (sample_rate << 44)
        | ((channels - 1) << 41)
        | ((bits_per_sample - 1) << 36)
        | total_samples
    )
    body = (
        struct.pack(">HH", 4096, 4096)
        + (0).to_bytes(3, "big")
        + (0).to_bytes(3, "big")
        + packed.to_bytes(8, "big")
        + bytes(16)
    )
    header = bytes([0x80]) + len(body).to_bytes(3, "big")
    return header + body


@pytest.fixture
def make_flac() -> FlacFactory:
    """Create a minimal FLAC file carrying the given Vorbis comments."""

    def _make(path: Path, **tags: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(b"fLaC" + _streaminfo_block())
        if tags:
            audio = FLAC(path)
            for key, value in tags.items():
                audio[key] = value
            audio.save()
        return path

    return _make
