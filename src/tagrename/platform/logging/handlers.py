"""Rich console handler for structured rename events.

Where: platform/logging/handlers.py
What: Render ``processing_event`` log records with icons, colours and compact paths.
Why: Keep per-file output readable when renaming large directory trees.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


def _pure_path(raw: str) -> PurePath:
    return PureWindowsPath(raw) if "\\" in raw else PurePosixPath(raw)


def _relative_or_none(path: PurePath, base: PurePath) -> PurePath | None:
    """Return ``path`` relative to ``base``, or None when it is outside or equal."""
    try:
        relative = path.relative_to(base)
    except ValueError:
        return None
    return relative if relative.parts else None


class WhitePathRichHandler(RichHandler):
    """Rich handler that displays file paths in white with magenta separators."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "rename.directory.start": ("🚀", "cyan"),
        "rename.directory.complete": ("✅", "green"),
        "rename.directory.no_files": ("ℹ️", "yellow"),
        "rename.file.rename": ("📦", "magenta"),
        "rename.file.plan": ("📝", "blue"),
        "rename.file.unchanged": ("✔️", "green"),
        "rename.file.skip.missing_title": ("⚠️", "yellow"),
        "rename.file.skip.not_audio": ("↪️", "dim"),
        "rename.file.collision": ("⚠️", "red"),
    }
    _FILE_LABELS: ClassVar[dict[str, str]] = {
        "rename.file.rename": "Renamed ",
        "rename.file.plan": "Would rename ",
        "rename.file.unchanged": "Already named ",
        "rename.file.skip.missing_title": "Skipped (missing title) ",
        "rename.file.skip.not_audio": "Ignored non-audio ",
        "rename.file.collision": "Target is a pending file ",
    }
    _EVENTS_WITH_TARGET: ClassVar[frozenset[str]] = frozenset(
        {"rename.file.rename", "rename.file.plan", "rename.file.collision"}
    )
    _SUMMARY_COUNTERS: ClassVar[tuple[str, ...]] = ("renamed", "planned", "unchanged", "skipped")
    _MAX_SEGMENTS: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.update(
            show_time=False,
            show_path=False,
            show_level=False,
            rich_tracebacks=True,
            markup=False,
        )
        super().__init__(*args, **kwargs)

    def format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with coloured separators, keeping only its last segments.

        Args:
            path: Absolute or relative path string.
            base: Directory to show ``path`` relative to, when it lies beneath it.

        Returns:
            Text: ``path`` with white segments and magenta separators; long
            paths keep their last four segments behind ``…``.
        """
        pure = _pure_path(path)
        if base:
            relative = _relative_or_none(pure, _pure_path(base))
            if relative is not None:
                pure = relative

        windows = isinstance(pure, PureWindowsPath)
        separator = "\\" if windows else "/"
        segments = [part for part in pure.parts if part and part != pure.anchor]
        if len(segments) > self._MAX_SEGMENTS:
            segments = ["…", *segments[-self._MAX_SEGMENTS:]]

        root = ""
        if pure.anchor:
            root = pure.anchor.rstrip("\\/") + separator if windows else separator

        text = Text(root + separator.join(segments) or ".")
        text.stylize(Style(color="white"))
        _ = text.highlight_regex(r"[\\/…]" if windows else r"[/…]", Style(color="magenta"))
        return text

    def _render_directory_event(self, event: str, record: logging.LogRecord) -> Text:
        body = Text()
        details: list[str] = []
        if event == "rename.directory.start":
            _ = body.append("Directory start")
            total_files = getattr(record, "total_files", None)
            if isinstance(total_files, int):
                details.append(f"files={total_files}")
            if getattr(record, "recursive", False):
                details.append("recursive")
            if getattr(record, "dry_run", False):
                details.append("dry-run")
        elif event == "rename.directory.complete":
            _ = body.append("Directory complete")
            for key in self._SUMMARY_COUNTERS:
                value = getattr(record, key, None)
                if isinstance(value, int):
                    details.append(f"{key}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                details.append(f"duration={duration:.2f}s")
        else:
            _ = body.append("No audio files")

        if details:
            _ = body.append(f" [{', '.join(details)}]")
        directory = getattr(record, "directory", None)
        if directory:
            _ = body.append(" @ ")
            _ = body.append_text(self.format_path(str(directory)))
        return body

    def _render_file_event(self, event: str, record: logging.LogRecord) -> Text:
        body = Text()
        sequence = getattr(record, "sequence", None)
        total_files = getattr(record, "total_files", None)
        if isinstance(sequence, int) and sequence > 0:
            counter = str(sequence)
            if isinstance(total_files, int) and total_files > 0:
                counter += f"/{total_files}"
            _ = body.append(f"[{counter}] ")
        _ = body.append(self._FILE_LABELS.get(event, ""))

        base = getattr(record, "source_base_path", None)
        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self.format_path(str(source_path), base=base))
        target_path = getattr(record, "target_path", None)
        if target_path and event in self._EVENTS_WITH_TARGET:
            _ = body.append(" → ")
            _ = body.append_text(self.format_path(str(target_path), base=base))
        return body

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render rename events with an icon; other records render as usual."""
        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return super().render_message(record, message)

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        if event.startswith("rename.directory"):
            body = self._render_directory_event(event, record)
        else:
            body = self._render_file_event(event, record)
        body.style = Style(color=color)

        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append_text(body)
        return text


__all__ = ["WhitePathRichHandler"]
