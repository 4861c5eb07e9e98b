"""Loading of ATC findings exported as JSON."""

from __future__ import annotations

from typing import TYPE_CHECKING

import orjson
from pydantic import ValidationError

from artifacts.models.findings import AtcResult, Finding
from artifacts.utils import _load_json

if TYPE_CHECKING:
    from pathlib import Path


class FindingsInputError(Exception):
    """Raised when a findings file cannot be read or is not a valid export."""


def load_atc_result(path: Path) -> AtcResult:
    """Load an ATC result from JSON.

    The file may contain either a full result object with a ``findings``
    list or a bare list of findings.
    """
    try:
        data = _load_json(path)
    except OSError as e:
        msg = f"Cannot read findings from {path}: {e}"
        raise FindingsInputError(msg) from e
    except orjson.JSONDecodeError as e:
        msg = f"Invalid JSON in {path}: {e}"
        raise FindingsInputError(msg) from e

    try:
        if isinstance(data, list):
            findings = [Finding.model_validate(item) for item in data]
            return AtcResult(findings=findings, total_findings=len(findings))
        if isinstance(data, dict):
            result = AtcResult.model_validate(data)
            if not result.total_findings:
                result.total_findings = len(result.findings)
            return result
    except ValidationError as e:
        msg = f"Invalid findings in {path}: {e}"
        raise FindingsInputError(msg) from e

    msg = f"Invalid findings in {path}: expected a JSON object or array"
    raise FindingsInputError(msg)


__all__ = ["FindingsInputError", "load_atc_result"]
