"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

from pathlib import Path


def ensure_directory_exists(directory: Path) -> Path:
    """Return ``directory`` if it is an existing folder, raise otherwise."""

    if not directory.exists():
        raise FileNotFoundError(f"Directory does not exist: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
    return directory


def list_regular_files(directory: Path, *, recursive: bool = False) -> list[Path]:
    """List regular files below ``directory`` as absolute paths.

    Args:
        directory: Directory to scan.
        recursive: Descend into subdirectories when True.

    Returns:
        list[Path]: Files sorted by path so runs are reproducible.
    """
    root = ensure_directory_exists(directory).resolve()
    candidates = root.rglob("*") if recursive else root.iterdir()
    return sorted(path for path in candidates if path.is_file())


def rename_file(source: Path, target: Path) -> Path:
    """Rename ``source`` to ``target``, replacing any file already at ``target``."""

    return source.replace(target)


__all__ = ["ensure_directory_exists", "list_regular_files", "rename_file"]
