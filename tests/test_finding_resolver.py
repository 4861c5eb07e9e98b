from __future__ import annotations

from typing import TYPE_CHECKING

from resolve.cache import SessionCache
from resolve.finding_resolver import (
    AbapGitFindingResolver,
    PassThroughResolver,
    ResolvedLocation,
    create_finding_resolver,
    expected_filename,
)
from scan.index import build_source_index

if TYPE_CHECKING:
    from pathlib import Path

CALC_PATH = "src/zdemo_core/zcl_demo_calc.clas.abap"


def test_expected_filename_is_lower_case() -> None:
    assert expected_filename("CLAS", "ZCL_FOO") == "zcl_foo.clas.abap"
    assert expected_filename("intf", "/abc/if_x") == "/abc/if_x.intf.abap"
    assert expected_filename("DTEL", "ZDE_X", "xml") == "zde_x.dtel.xml"


def test_resolves_method_by_name(abapgit_repo: Path) -> None:
    resolver = create_finding_resolver(abapgit_repo)

    location = resolver.resolve("CLAS", "ZCL_DEMO_CALC", 5, "describe")

    assert location == ResolvedLocation(path=CALC_PATH, line=31)


def test_resolves_without_hint_using_smallest_fitting_method(
    abapgit_repo: Path,
) -> None:
    resolver = create_finding_resolver(abapgit_repo)

    assert resolver.resolve("CLAS", "ZCL_DEMO_CALC", 3) == ResolvedLocation(
        path=CALC_PATH, line=23
    )
    assert resolver.resolve("CLAS", "ZCL_DEMO_CALC", 6) == ResolvedLocation(
        path=CALC_PATH, line=32
    )


def test_single_method_class(abapgit_repo: Path) -> None:
    resolver = create_finding_resolver(abapgit_repo)

    location = resolver.resolve("CLAS", "ZCL_DEMO_SINGLE", 2)

    assert location == ResolvedLocation(
        path="src/zdemo_util/zcl_demo_single.clas.abap", line=8
    )


def test_non_class_lines_are_unchanged(abapgit_repo: Path) -> None:
    resolver = create_finding_resolver(abapgit_repo)

    location = resolver.resolve("INTF", "ZIF_DEMO", 3, "describe")

    assert location == ResolvedLocation(
        path="src/zdemo_util/zif_demo.intf.abap", line=3
    )


def test_unknown_object_is_absent(abapgit_repo: Path) -> None:
    resolver = create_finding_resolver(abapgit_repo)

    assert resolver.resolve("PROG", "ZMISSING", 7) is None


def test_missing_source_root_resolves_nothing(tmp_path: Path) -> None:
    resolver = create_finding_resolver(tmp_path)

    assert len(resolver.index) == 0
    assert resolver.resolve("CLAS", "ZCL_DEMO_CALC", 5, "describe") is None


def test_unreadable_indexed_file_keeps_line(abapgit_repo: Path) -> None:
    resolver = create_finding_resolver(abapgit_repo)
    (abapgit_repo / CALC_PATH).unlink()

    location = resolver.resolve("CLAS", "ZCL_DEMO_CALC", 5, "describe")

    assert location == ResolvedLocation(path=CALC_PATH, line=5)


def test_repeated_resolution_hits_cache(abapgit_repo: Path) -> None:
    index = build_source_index(abapgit_repo)
    cache = SessionCache(abapgit_repo)
    resolver = AbapGitFindingResolver(index, cache)

    first = resolver.resolve("CLAS", "ZCL_DEMO_CALC", 5, "describe")
    reads_after_first = cache.files.reads
    second = resolver.resolve("CLAS", "ZCL_DEMO_CALC", 5, "describe")

    assert first == second
    assert reads_after_first == 1
    assert cache.files.reads == 1


def test_non_class_files_are_not_read(abapgit_repo: Path) -> None:
    index = build_source_index(abapgit_repo)
    cache = SessionCache(abapgit_repo)
    resolver = AbapGitFindingResolver(index, cache)

    resolver.resolve("INTF", "ZIF_DEMO", 3)

    assert cache.files.reads == 0


def test_pass_through_resolver_never_resolves() -> None:
    assert PassThroughResolver().resolve("CLAS", "ZCL_DEMO_CALC", 5) is None


def test_interface_method_hint_selects_matching_implementation(
    tmp_path: Path,
) -> None:
    source_dir = tmp_path / "src"
    source_dir.mkdir()
    (source_dir / "zcl_a.clas.abap").write_text(
        "METHOD zif_x~one.\n"
        "  WRITE 1.\n"
        "ENDMETHOD.\n"
        "METHOD zif_x~two.\n"
        "  WRITE 2.\n"
        "ENDMETHOD.\n",
        encoding="utf-8",
    )
    resolver = create_finding_resolver(tmp_path)

    location = resolver.resolve("CLAS", "ZCL_A", 2, "zif_x~two")

    assert location == ResolvedLocation(path="src/zcl_a.clas.abap", line=5)
