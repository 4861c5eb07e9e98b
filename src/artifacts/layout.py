"""Placement of serialized objects in an abapGit repository.

An import resolves the folder logic once, places every object with it, and
finally declares that same folder logic in ``.abapgit.xml``. The folder
logic travels on the returned ImportPlan so concurrent imports never share
it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from artifacts.write import write_repo_metadata
from resolve.finding_resolver import expected_filename
from rules.folder_logic import FolderLogic, resolve_repo_folder_logic
from rules.package_dir import package_dir

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

PACKAGE_FILENAME = "package.devc.xml"


@dataclass(frozen=True)
class ObjectRef:
    """An object to be placed, with its package hierarchy (root first).

    ``suffix`` is the extension of the object's main file: ``abap`` for source
    objects, ``xml`` for objects serialized as metadata only.
    """

    object_type: str
    object_name: str
    package_path: tuple[str, ...]
    suffix: str = "abap"


@dataclass(frozen=True)
class PlannedFile:
    object_type: str
    object_name: str
    path: str


@dataclass(frozen=True)
class ImportPlan:
    folder_logic: FolderLogic
    files: tuple[PlannedFile, ...] = field(default_factory=tuple)


def object_dir(
    src_dir: str,
    package_path: Sequence[str],
    folder_logic: FolderLogic,
) -> str:
    """Return the repository-relative directory holding a package's objects."""
    sub_dir = package_dir(package_path, folder_logic)
    base = src_dir.strip("/")
    if base == ".":
        base = ""
    if not sub_dir:
        return base
    return f"{base}/{sub_dir}" if base else sub_dir


def object_file_path(
    src_dir: str,
    package_path: Sequence[str],
    folder_logic: FolderLogic,
    object_type: str,
    object_name: str,
    suffix: str = "abap",
) -> str:
    """Return the repository-relative path of an object's main file.

    Packages are always serialized as ``package.devc.xml`` in their own
    directory.
    """
    directory = object_dir(src_dir, package_path, folder_logic)
    if object_type.upper() == "DEVC":
        filename = PACKAGE_FILENAME
    else:
        filename = expected_filename(object_type, object_name, suffix)
    return f"{directory}/{filename}" if directory else filename


def plan_import(
    repo_root: Path,
    objects: Iterable[ObjectRef],
    *,
    override: object = None,
    configured: object = None,
    src_dir: str = "src",
) -> ImportPlan:
    """Resolve the folder logic for ``repo_root`` and place every object."""
    folder_logic = resolve_repo_folder_logic(
        repo_root, override=override, configured=configured
    )
    files = tuple(
        PlannedFile(
            object_type=obj.object_type,
            object_name=obj.object_name,
            path=object_file_path(
                src_dir,
                obj.package_path,
                folder_logic,
                obj.object_type,
                obj.object_name,
                obj.suffix,
            ),
        )
        for obj in objects
    )
    return ImportPlan(folder_logic=folder_logic, files=files)


def finish_import(repo_root: Path, folder_logic: FolderLogic) -> Path:
    """Declare the folder logic an import used; returns the metadata path."""
    return write_repo_metadata(repo_root, folder_logic)


__all__ = [
    "PACKAGE_FILENAME",
    "ImportPlan",
    "ObjectRef",
    "PlannedFile",
    "finish_import",
    "object_dir",
    "object_file_path",
    "plan_import",
]
