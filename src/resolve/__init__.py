"""Finding location resolution."""

from resolve.cache import FileContentCache, SessionCache
from resolve.finding_resolver import (
    AbapGitFindingResolver,
    FindingResolver,
    PassThroughResolver,
    ResolvedLocation,
    create_finding_resolver,
    expected_filename,
)
from resolve.lines import resolve_line, supports_method_lines

__all__ = [
    "AbapGitFindingResolver",
    "FileContentCache",
    "FindingResolver",
    "PassThroughResolver",
    "ResolvedLocation",
    "SessionCache",
    "create_finding_resolver",
    "expected_filename",
    "resolve_line",
    "supports_method_lines",
]
