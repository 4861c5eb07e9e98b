"""GitLab Code Quality report models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Severity = Literal["blocker", "major", "minor", "info"]


class LineSpan(BaseModel):
    begin: int
    end: int


class IssueLocation(BaseModel):
    """Where an issue is reported in the repository."""

    path: str
    lines: LineSpan


class CodeQualityIssue(BaseModel):
    """One entry of a GitLab Code Quality report."""

    description: str
    check_name: str
    fingerprint: str
    severity: Severity
    location: IssueLocation
    method: str | None = Field(
        default=None, description="Method name hint taken from the ATC location"
    )
    atc_location: str | None = Field(
        default=None, description="Raw ATC location URI"
    )


__all__ = ["CodeQualityIssue", "IssueLocation", "LineSpan", "Severity"]
