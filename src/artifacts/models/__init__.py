"""Model namespace for ATC input and report output schemas."""

from artifacts.models.code_quality import (
    CodeQualityIssue,
    IssueLocation,
    LineSpan,
    Severity,
)
from artifacts.models.findings import AtcResult, Finding

__all__ = [
    "AtcResult",
    "CodeQualityIssue",
    "Finding",
    "IssueLocation",
    "LineSpan",
    "Severity",
]
