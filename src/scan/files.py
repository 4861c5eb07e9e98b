"""File scanning utilities for abapGit source trees."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator
    from pathlib import Path

DEFAULT_EXTENSIONS: tuple[str, ...] = (".abap", ".xml")


def _should_include_file(
    path: Path,
    directory: Path,
    extensions: tuple[str, ...],
    gitignore_matches: Callable[[str], bool] | None,
) -> bool:
    """Check if a file should be included based on all filtering rules."""
    if not path.name.lower().endswith(extensions):
        return False

    if not path.is_file() or path.is_symlink():
        return False

    if not _is_within_root(path, directory):
        return False

    return gitignore_matches is None or not gitignore_matches(str(path))


def _is_within_root(path: Path, root: Path) -> bool:
    """Return True when the resolved path stays within the resolved root."""
    try:
        root_resolved = root.resolve()
        path_resolved = path.resolve()
    except OSError:
        return False

    try:
        path_resolved.relative_to(root_resolved)
    except ValueError:
        return False

    return True


def _build_gitignore_matcher(repo_root: Path) -> Callable[[str], bool] | None:
    gitignore_path = repo_root / ".gitignore"
    if gitignore_path.is_file():
        return cast("Callable[[str], bool]", parse_gitignore(gitignore_path))
    return None


def find_source_files(
    directory: Path,
    *,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    gitignore_root: Path | None = None,
) -> Iterator[Path]:
    """Find serialized ABAP files below a directory.

    Args:
        directory: Directory to search recursively
        extensions: File name suffixes to include (case-insensitive)
        gitignore_root: Repository root whose .gitignore should filter the
            results; None disables filtering

    Yields:
        Path objects for each matching file, sorted lexicographically by
        relative path for deterministic ordering.

    Raises:
        OSError: If the directory cannot be enumerated.
    """
    suffixes = tuple(ext.lower() for ext in extensions)
    gitignore_matches = (
        _build_gitignore_matcher(gitignore_root) if gitignore_root else None
    )

    matched_files = [
        path
        for path in directory.rglob("*")
        if _should_include_file(path, directory, suffixes, gitignore_matches)
    ]

    matched_files.sort(key=lambda p: p.relative_to(directory).as_posix())

    yield from matched_files


__all__ = ["DEFAULT_EXTENSIONS", "_should_include_file", "find_source_files"]
