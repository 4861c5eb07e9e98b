from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from artifacts.load import load_atc_result
from artifacts.report import build_report
from artifacts.utils import _write_json_list
from resolve.finding_resolver import create_finding_resolver
from rules.config import load_config
from rules.folder_logic import ABAPGIT_XML, FolderLogic, render_abapgit_xml

if TYPE_CHECKING:
    from collections.abc import Sequence

    from artifacts.models.code_quality import CodeQualityIssue
    from rules.config import LocateConfig

logger = logging.getLogger(__name__)


class ReportWriteError(Exception):
    """Raised when an output artifact cannot be persisted."""


def write_code_quality_report(
    path: Path, issues: Sequence[CodeQualityIssue]
) -> Path:
    """Write a GitLab Code Quality report.

    Args:
        path: Destination file; parent directories are created
        issues: Report entries in output order

    Returns:
        The path written.

    Raises:
        ReportWriteError: If the report cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        _write_json_list(path, issues)
    except OSError as e:
        msg = f"Cannot write report to {path}: {e}"
        raise ReportWriteError(msg) from e

    logger.info("Code Quality report with %d issues written to %s", len(issues), path)
    return path


def write_repo_metadata(repo_root: Path, folder_logic: FolderLogic) -> Path:
    """Write .abapgit.xml declaring the folder logic used for the repository."""
    abapgit_xml_path = Path(repo_root) / ABAPGIT_XML
    try:
        abapgit_xml_path.write_text(render_abapgit_xml(folder_logic), encoding="utf-8")
    except OSError as e:
        msg = f"Cannot write {abapgit_xml_path}: {e}"
        raise ReportWriteError(msg) from e

    logger.debug(
        "Declared folder logic %s in %s",
        folder_logic.declared_value,
        abapgit_xml_path,
    )
    return abapgit_xml_path


def generate_code_quality_report(
    *,
    root: Path,
    findings_path: Path,
    out_file: Path | None = None,
    config: LocateConfig | None = None,
    max_workers: int | None = None,
) -> dict[str, object]:
    """Resolve ATC findings against a repository and write the report.

    Args:
        root: Root directory of the abapGit repository
        findings_path: JSON export of the ATC run
        out_file: Report destination (default: config report_file under root)
        config: Optional configuration; loaded from root when omitted
        max_workers: Optional override of the configured concurrency bound

    Returns:
        Dictionary with counts and the report path.
    """
    if config is None:
        config = load_config(root)

    if out_file is None:
        out_file = root / config.report_file

    result = load_atc_result(findings_path)

    resolver = create_finding_resolver(
        root,
        config.src_dir,
        extensions=config.extensions,
        respect_gitignore=config.respect_gitignore,
    )
    issues = build_report(
        result.findings,
        resolver,
        src_dir=config.src_dir,
        max_workers=max_workers or config.max_workers,
    )
    write_code_quality_report(out_file, issues)

    indexed_paths = set(resolver.index.paths.values())
    resolved_count = sum(1 for issue in issues if issue.location.path in indexed_paths)
    return {
        "issue_count": len(issues),
        "resolved_count": resolved_count,
        "indexed_files": len(resolver.index),
        "collision_count": len(resolver.index.collisions),
        "report": str(out_file),
    }


__all__ = [
    "ReportWriteError",
    "generate_code_quality_report",
    "write_code_quality_report",
    "write_repo_metadata",
]
