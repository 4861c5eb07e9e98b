"""Resolution of ATC object references to files in an abapGit checkout.

ATC identifies a finding by object type and name plus a line counted from
the start of the method. abapGit stores the same object as
``<name>.<type>.abap`` somewhere below the source directory, at a location
that depends on the repository's folder logic. The resolver bridges the two.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from resolve.cache import SessionCache
from resolve.lines import resolve_line, supports_method_lines
from scan.files import DEFAULT_EXTENSIONS
from scan.index import SourceIndex, build_source_index

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedLocation:
    """Repository-relative file path and 1-based file-relative line."""

    path: str
    line: int


class FindingResolver(Protocol):
    def resolve(
        self,
        object_type: str,
        object_name: str,
        relative_line: int,
        method_name: str | None = None,
    ) -> ResolvedLocation | None: ...


def expected_filename(object_type: str, object_name: str, suffix: str = "abap") -> str:
    """Return the abapGit file name of an object's main source."""
    return f"{object_name.lower()}.{object_type.lower()}.{suffix}"


class PassThroughResolver:
    """Resolver that never finds anything; callers keep the raw ATC data."""

    def resolve(
        self,
        object_type: str,
        object_name: str,
        relative_line: int,
        method_name: str | None = None,
    ) -> ResolvedLocation | None:
        return None


class AbapGitFindingResolver:
    """Resolves findings against an indexed abapGit source tree."""

    def __init__(
        self,
        index: SourceIndex,
        cache: SessionCache,
    ) -> None:
        self.index = index
        self.cache = cache

    def resolve(
        self,
        object_type: str,
        object_name: str,
        relative_line: int,
        method_name: str | None = None,
    ) -> ResolvedLocation | None:
        """Resolve one finding.

        Returns None when no file for the object is indexed. A file that
        cannot be read or parsed keeps the ATC line unchanged.
        """
        resolved_path = self.index.lookup(expected_filename(object_type, object_name))
        if resolved_path is None:
            return None

        ranges = (
            self.cache.method_ranges(resolved_path)
            if supports_method_lines(resolved_path)
            else None
        )
        line = resolve_line(relative_line, resolved_path, ranges, method_name)
        return ResolvedLocation(path=resolved_path, line=line)


def create_finding_resolver(
    repo_root: Path | str = ".",
    src_dir: str = "src",
    *,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    respect_gitignore: bool = False,
) -> AbapGitFindingResolver:
    """Create a resolver for one session.

    Scans ``repo_root / src_dir`` once to build the filename index; file
    content and parsed method ranges are cached for the resolver's lifetime.

    Example:
        >>> resolver = create_finding_resolver("/path/to/repo")
        >>> resolver.resolve("CLAS", "ZCL_MY_CLASS", 21, "my_method")
        ResolvedLocation(path='src/zpackage/zcl_my_class.clas.abap', line=38)
    """
    root = Path(repo_root)
    index = build_source_index(
        root,
        src_dir,
        extensions=extensions,
        respect_gitignore=respect_gitignore,
    )
    if len(index):
        logger.info("Finding resolver: %d files indexed from %s", len(index), src_dir)
    return AbapGitFindingResolver(index, SessionCache(root))


__all__ = [
    "AbapGitFindingResolver",
    "FindingResolver",
    "PassThroughResolver",
    "ResolvedLocation",
    "create_finding_resolver",
    "expected_filename",
]
