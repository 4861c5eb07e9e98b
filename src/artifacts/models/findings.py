"""ATC finding models.

Findings arrive as JSON exported from an ATC run, using the camelCase keys
of the ADT API (``checkId``, ``objectType``, ...).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Finding(BaseModel):
    """A single ATC finding, flattened with its object information."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    check_id: str
    check_title: str = ""
    message_id: str | None = None
    priority: int
    message_text: str = ""
    object_uri: str | None = None
    object_type: str
    object_name: str
    location: str | None = None
    finding_uri: str | None = None


class AtcResult(BaseModel):
    """Summary of an ATC run."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    check_variant: str = ""
    total_findings: int = 0
    error_count: int = 0
    warning_count: int = 0
    info_count: int = 0
    findings: list[Finding] = Field(default_factory=list)


__all__ = ["AtcResult", "Finding"]
