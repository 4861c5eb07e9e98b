"""Utility functions for artifact serialization."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import orjson

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def _to_dict(obj: object) -> object:
    """Convert object to dict for JSON serialization."""
    from dataclasses import asdict, is_dataclass

    if hasattr(obj, "model_dump"):
        return obj.model_dump(exclude_none=True)
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    return obj


def _write_json_list(path: Path, records: Sequence[object]) -> None:
    payload = [_to_dict(rec) for rec in records]
    path.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2))


def _load_json(path: Path) -> Any:
    """Load a JSON document."""
    return orjson.loads(path.read_bytes())
