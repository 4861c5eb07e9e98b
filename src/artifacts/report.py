"""GitLab Code Quality report construction from ATC findings.

Two transformations are applied to every finding:

1. Path resolution. ATC knows objects, not files. The source tree index finds
   the real file regardless of folder logic; when it cannot, a PREFIX-style
   path (``src/clas/zcl_foo.clas.abap``) is reported instead.
2. Line conversion. For class methods ATC counts lines from the METHOD
   statement. The method is located in the file to get the file-relative
   line. Unresolved findings keep the ATC line.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from artifacts.models.code_quality import (
    CodeQualityIssue,
    IssueLocation,
    LineSpan,
    Severity,
)
from parse.location import extract_method_name, extract_start_line

if TYPE_CHECKING:
    from collections.abc import Sequence

    from artifacts.models.findings import Finding
    from resolve.finding_resolver import FindingResolver

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8

_SEVERITY_BY_PRIORITY: dict[int, Severity] = {
    1: "blocker",
    2: "major",
    3: "minor",
}


def severity_for(priority: int) -> Severity:
    """Map an ATC priority to a Code Quality severity."""
    return _SEVERITY_BY_PRIORITY.get(priority, "info")


def fingerprint(check_id: str, object_name: str, line: int) -> str:
    return f"{check_id}-{object_name}-{line}"


def prefix_fallback_path(finding: Finding, src_dir: str = "src") -> str:
    """Return the PREFIX-style path used when a finding cannot be resolved."""
    object_type = finding.object_type.lower()
    object_name = finding.object_name.lower()
    relative = f"{object_type}/{object_name}.{object_type}.abap"
    base = src_dir.strip("/")
    if base in ("", "."):
        return relative
    return f"{base}/{relative}"


def build_issue(
    finding: Finding,
    resolver: FindingResolver,
    src_dir: str = "src",
) -> CodeQualityIssue:
    """Build the report entry for one finding."""
    atc_line = extract_start_line(finding.location)
    method_name = extract_method_name(finding.location)

    try:
        resolved = resolver.resolve(
            finding.object_type, finding.object_name, atc_line, method_name
        )
    except Exception:
        logger.exception(
            "Resolver failed for %s %s, using fallback location",
            finding.object_type,
            finding.object_name,
        )
        resolved = None

    if resolved is None:
        path, line = prefix_fallback_path(finding, src_dir), atc_line
    else:
        path, line = resolved.path, resolved.line

    return CodeQualityIssue(
        description=finding.message_text,
        check_name=finding.check_title or finding.check_id,
        fingerprint=fingerprint(finding.check_id, finding.object_name, line),
        severity=severity_for(finding.priority),
        location=IssueLocation(path=path, lines=LineSpan(begin=line, end=line)),
        method=method_name,
        atc_location=finding.location or None,
    )


def build_report(
    findings: Sequence[Finding],
    resolver: FindingResolver,
    *,
    src_dir: str = "src",
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> list[CodeQualityIssue]:
    """Resolve a batch of findings into report entries.

    Findings are resolved concurrently with at most ``max_workers`` threads.
    The returned list follows the order of ``findings``.
    """
    if not findings:
        return []

    # For small batches, process sequentially to avoid overhead
    if max_workers <= 1 or len(findings) <= 3:
        return [build_issue(finding, resolver, src_dir) for finding in findings]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(build_issue, finding, resolver, src_dir)
            for finding in findings
        ]
        return [future.result() for future in futures]


__all__ = [
    "DEFAULT_MAX_WORKERS",
    "build_issue",
    "build_report",
    "fingerprint",
    "prefix_fallback_path",
    "severity_for",
]
