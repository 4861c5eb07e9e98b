"""Filename index over an abapGit source tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from scan.files import DEFAULT_EXTENSIONS, find_source_files

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexCollision:
    """A file left out of the index because its basename was already taken."""

    filename: str
    kept: str
    discarded: str


@dataclass(frozen=True)
class SourceIndex:
    """Bare filename -> repository-relative POSIX path."""

    root: str
    paths: Mapping[str, str] = field(default_factory=dict)
    collisions: tuple[IndexCollision, ...] = field(default_factory=tuple)

    def lookup(self, filename: str) -> str | None:
        return self.paths.get(filename)

    def __len__(self) -> int:
        return len(self.paths)

    def __contains__(self, filename: object) -> bool:
        return filename in self.paths


def build_source_index(
    repo_root: Path,
    src_dir: str = "src",
    *,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    respect_gitignore: bool = False,
) -> SourceIndex:
    """Index every source file below ``repo_root / src_dir`` by basename.

    Files are visited in lexicographic order of their relative path and the
    first file seen for a basename wins. Later files with the same basename
    are reported in ``collisions``. A missing or unreadable source directory
    yields an empty index.
    """
    scan_root = repo_root / src_dir
    paths: dict[str, str] = {}
    collisions: list[IndexCollision] = []

    if not scan_root.is_dir():
        logger.info("Source directory %s does not exist, index is empty", scan_root)
        return SourceIndex(root=src_dir)

    try:
        files = list(
            find_source_files(
                scan_root,
                extensions=extensions,
                gitignore_root=repo_root if respect_gitignore else None,
            )
        )
    except OSError as exc:
        logger.warning("Cannot scan %s: %s", scan_root, exc)
        return SourceIndex(root=src_dir)

    for file_path in files:
        relative_path = file_path.relative_to(repo_root).as_posix()
        name = file_path.name
        kept = paths.setdefault(name, relative_path)
        if kept != relative_path:
            collisions.append(
                IndexCollision(filename=name, kept=kept, discarded=relative_path)
            )
            logger.warning(
                "Duplicate file name %s: keeping %s, ignoring %s",
                name,
                kept,
                relative_path,
            )

    return SourceIndex(root=src_dir, paths=paths, collisions=tuple(collisions))


__all__ = ["IndexCollision", "SourceIndex", "build_source_index"]
