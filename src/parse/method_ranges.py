"""METHOD/ENDMETHOD range extraction for ABAP class sources."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

_METHOD_BEGIN = re.compile(r"^\s*METHOD\s+([\w~]+)", re.IGNORECASE)
_METHOD_END = re.compile(r"^\s*ENDMETHOD", re.IGNORECASE)


@dataclass(frozen=True)
class MethodRange:
    """A method implementation block located in a source file.

    ``start_line`` is the 1-based line of the METHOD statement and ``length``
    counts every line up to and including ENDMETHOD.
    """

    name: str
    start_line: int
    length: int

    @property
    def end_line(self) -> int:
        return self.start_line + self.length - 1


def parse_method_ranges(lines: Sequence[str]) -> list[MethodRange]:
    """Return method implementation ranges in source order.

    Only line-leading METHOD and ENDMETHOD statements are recognized. A second
    METHOD statement before the pending one is closed replaces it, and a
    METHOD without a matching ENDMETHOD produces no range.

    Args:
        lines: File content split into lines.

    Returns:
        List of MethodRange objects ordered by start line.
    """
    ranges: list[MethodRange] = []
    current_method: str | None = None
    method_start = 0

    for index, line in enumerate(lines, start=1):
        begin = _METHOD_BEGIN.match(line)
        if begin:
            if current_method is not None:
                logger.debug(
                    "METHOD %s at line %d replaces unclosed METHOD %s at line %d",
                    begin.group(1),
                    index,
                    current_method,
                    method_start,
                )
            current_method = begin.group(1).lower()
            method_start = index
            continue

        if current_method is not None and _METHOD_END.match(line):
            ranges.append(
                MethodRange(
                    name=current_method,
                    start_line=method_start,
                    length=index - method_start + 1,
                )
            )
            current_method = None

    if current_method is not None:
        logger.debug(
            "Dropping unclosed METHOD %s at line %d", current_method, method_start
        )

    return ranges


__all__ = ["MethodRange", "parse_method_ranges"]
