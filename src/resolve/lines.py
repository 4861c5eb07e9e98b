"""Conversion of method-relative ATC lines to file-relative lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from parse.method_ranges import MethodRange

CLASS_SOURCE_SUFFIX = ".clas.abap"


def supports_method_lines(path: str) -> bool:
    """Return True when ATC reports lines in this file relative to a method."""
    return path.lower().endswith(CLASS_SOURCE_SUFFIX)


def _pick_range(
    relative_line: int,
    ranges: Sequence[MethodRange],
    method_name: str | None,
) -> MethodRange | None:
    if method_name:
        wanted = method_name.lower()
        for method_range in ranges:
            if method_range.name == wanted:
                return method_range

    if len(ranges) == 1:
        return ranges[0]

    # min() keeps the first of equal lengths, so ties go to source order.
    candidates = [r for r in ranges if r.length >= relative_line]
    if not candidates:
        return None
    return min(candidates, key=lambda r: r.length)


def resolve_line(
    relative_line: int,
    path: str,
    ranges: Sequence[MethodRange] | None,
    method_name: str | None = None,
) -> int:
    """Convert a method-relative line into a file-relative line.

    The method is chosen by name when a hint is given and matches, otherwise
    the only method of the file, otherwise the smallest method that is long
    enough to contain the line. When nothing applies the line is returned
    unchanged.

    Args:
        relative_line: 1-based line counted from the METHOD statement.
        path: Repository-relative path of the file.
        ranges: Parsed method ranges of the file (None if unreadable).
        method_name: Optional method name hint from the ATC location.

    Returns:
        1-based line number within the file.
    """
    if not supports_method_lines(path) or not ranges:
        return relative_line

    method_range = _pick_range(relative_line, ranges, method_name)
    if method_range is None:
        return relative_line
    return method_range.start_line + relative_line - 1


__all__ = ["CLASS_SOURCE_SUFFIX", "resolve_line", "supports_method_lines"]
