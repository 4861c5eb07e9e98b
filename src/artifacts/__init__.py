"""Report generation entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from rules.config import LocateConfig


def generate_code_quality_report(
    *,
    root: Path,
    findings_path: Path,
    out_file: Path | None = None,
    config: LocateConfig | None = None,
    max_workers: int | None = None,
) -> dict[str, object]:
    """Generate the report via lazy import to avoid package import cycles."""
    from artifacts.write import (
        generate_code_quality_report as _generate_code_quality_report,
    )

    return _generate_code_quality_report(
        root=root,
        findings_path=findings_path,
        out_file=out_file,
        config=config,
        max_workers=max_workers,
    )


__all__ = ["generate_code_quality_report"]
