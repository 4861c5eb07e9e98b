from __future__ import annotations

import pytest

from rules.folder_logic import FolderLogic
from rules.package_dir import package_dir

HIERARCHY = ["ZROOT", "ZROOT_CHILD", "ZROOT_CHILD_DEEP"]


def test_prefix_strips_parent_prefixes() -> None:
    assert package_dir(HIERARCHY, FolderLogic.PREFIX) == "child/deep"


def test_full_uses_full_names_below_root() -> None:
    assert package_dir(HIERARCHY, FolderLogic.FULL) == "zroot_child/zroot_child_deep"


def test_full_with_root_includes_root() -> None:
    assert (
        package_dir(HIERARCHY, FolderLogic.FULL_WITH_ROOT)
        == "zroot/zroot_child/zroot_child_deep"
    )


@pytest.mark.parametrize("folder_logic", [FolderLogic.PREFIX, FolderLogic.FULL])
def test_root_package_maps_to_source_root(folder_logic: FolderLogic) -> None:
    assert package_dir(["ZROOT"], folder_logic) == ""


def test_root_package_with_root_folder() -> None:
    assert package_dir(["ZROOT"], FolderLogic.FULL_WITH_ROOT) == "zroot"


@pytest.mark.parametrize("folder_logic", list(FolderLogic))
def test_empty_hierarchy_maps_to_source_root(folder_logic: FolderLogic) -> None:
    assert package_dir([], folder_logic) == ""


def test_prefix_keeps_names_without_parent_prefix() -> None:
    hierarchy = ["ZROOT", "ZOTHER", "ZOTHER_SUB"]

    assert package_dir(hierarchy, FolderLogic.PREFIX) == "zother/sub"


def test_prefix_requires_underscore_after_parent_name() -> None:
    assert package_dir(["ZROOT", "ZROOTX"], FolderLogic.PREFIX) == "zrootx"
