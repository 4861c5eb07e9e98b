"""Session-scoped caches for file content and parsed method ranges."""

from __future__ import annotations

import logging
from pathlib import Path

from parse.method_ranges import MethodRange, parse_method_ranges

logger = logging.getLogger(__name__)


class FileContentCache:
    """Read-through cache of line-split file content.

    Failed reads are remembered as ``None`` so a missing or unreadable file is
    only touched once per session. Two threads populating the same entry at
    once both store identical content, so no locking is done.
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir
        self._lines: dict[str, list[str] | None] = {}
        self.reads = 0

    def _full_path(self, path: str) -> Path:
        candidate = Path(path)
        if self._base_dir is None or candidate.is_absolute():
            return candidate
        return self._base_dir / candidate

    def get(self, path: str) -> list[str] | None:
        if path in self._lines:
            return self._lines[path]

        self.reads += 1
        try:
            content = self._full_path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Cannot read %s: %s", path, exc)
            lines = None
        else:
            lines = content.split("\n")

        self._lines[path] = lines
        return lines

    def __contains__(self, path: object) -> bool:
        return path in self._lines

    def __len__(self) -> int:
        return len(self._lines)


class SessionCache:
    """Caches shared by every resolution in one session."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self.files = FileContentCache(base_dir)
        self._ranges: dict[str, list[MethodRange] | None] = {}

    def method_ranges(self, path: str) -> list[MethodRange] | None:
        """Return parsed method ranges for a file, or None if it is unreadable."""
        if path in self._ranges:
            return self._ranges[path]

        lines = self.files.get(path)
        ranges = parse_method_ranges(lines) if lines is not None else None
        self._ranges[path] = ranges
        return ranges


__all__ = ["FileContentCache", "SessionCache"]
