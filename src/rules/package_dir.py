"""Package hierarchy to directory mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rules.folder_logic import FolderLogic

if TYPE_CHECKING:
    from collections.abc import Sequence


def _strip_parent_prefix(name: str, parent: str) -> str:
    prefix = f"{parent}_"
    return name[len(prefix) :] if name.startswith(prefix) else name


def package_dir(package_path: Sequence[str], folder_logic: FolderLogic) -> str:
    """Return the directory of a package relative to the source root.

    Args:
        package_path: Package hierarchy from the root package down to the
            object's package (e.g. ``["ZROOT", "ZROOT_CHILD"]``)
        folder_logic: Folder logic in effect for the repository

    Returns:
        "/"-separated directory; "" means the source root itself.

    Examples:
        >>> package_dir(["ZROOT", "ZROOT_CHILD"], FolderLogic.PREFIX)
        'child'
        >>> package_dir(["ZROOT", "ZROOT_CHILD"], FolderLogic.FULL)
        'zroot_child'
        >>> package_dir(["ZROOT", "ZROOT_CHILD"], FolderLogic.FULL_WITH_ROOT)
        'zroot/zroot_child'
    """
    if not package_path:
        return ""

    if folder_logic is FolderLogic.FULL_WITH_ROOT:
        return "/".join(name.lower() for name in package_path)

    # PREFIX and FULL both place the root package directly in the source root.
    if folder_logic is FolderLogic.FULL:
        parts = [name.lower() for name in package_path[1:]]
    else:
        parts = [
            _strip_parent_prefix(package_path[i], package_path[i - 1]).lower()
            for i in range(1, len(package_path))
        ]
    return "/".join(parts)


__all__ = ["package_dir"]
