"""Helpers for ATC location URIs.

ATC reports a finding location in one of two shapes::

    /sap/bc/adt/oo/classes/zcl_foo/methods/my_method#start=21,0
    /sap/bc/adt/oo/classes/zcl_foo/source/main#type=CLAS%2FOM;name=MY_METHOD;start=21
"""

from __future__ import annotations

import re
from urllib.parse import unquote

_START_LINE = re.compile(r"start=(\d+)")
_METHOD_SEGMENT = re.compile(r"/methods/([\w~]+)", re.IGNORECASE)
_NAME_PARAM = re.compile(r"[;?&]name=([\w~]+)", re.IGNORECASE)

DEFAULT_START_LINE = 1


def extract_start_line(location: str | None) -> int:
    """Return the method-relative line from a location URI (default 1)."""
    if not location:
        return DEFAULT_START_LINE
    match = _START_LINE.search(location)
    if match is None:
        return DEFAULT_START_LINE
    line = int(match.group(1))
    return line if line >= 1 else DEFAULT_START_LINE


def extract_method_name(location: str | None) -> str | None:
    """Return the lower-cased method name hint carried by a location URI."""
    if not location:
        return None
    # Interface method names carry "~", which ADT may percent-encode.
    decoded = unquote(location)
    match = _METHOD_SEGMENT.search(decoded) or _NAME_PARAM.search(decoded)
    return match.group(1).lower() if match else None


__all__ = ["DEFAULT_START_LINE", "extract_method_name", "extract_start_line"]
