from __future__ import annotations

from typing import TYPE_CHECKING

from parse.method_ranges import MethodRange
from resolve.cache import FileContentCache, SessionCache

if TYPE_CHECKING:
    from pathlib import Path


def test_file_content_is_read_once(tmp_path: Path) -> None:
    source = tmp_path / "zcl_a.clas.abap"
    source.write_text("METHOD a.\nENDMETHOD.\n", encoding="utf-8")
    cache = FileContentCache(tmp_path)

    first = cache.get("zcl_a.clas.abap")
    source.write_text("changed\n", encoding="utf-8")
    second = cache.get("zcl_a.clas.abap")

    assert first == ["METHOD a.", "ENDMETHOD.", ""]
    assert second is first
    assert cache.reads == 1


def test_failed_read_is_memoized(tmp_path: Path) -> None:
    cache = FileContentCache(tmp_path)

    assert cache.get("missing.clas.abap") is None
    (tmp_path / "missing.clas.abap").write_text("METHOD a.\n", encoding="utf-8")
    assert cache.get("missing.clas.abap") is None

    assert cache.reads == 1
    assert "missing.clas.abap" in cache


def test_undecodable_file_is_absent(tmp_path: Path) -> None:
    (tmp_path / "bad.clas.abap").write_bytes(b"\xff\xfe\xfa")
    cache = FileContentCache(tmp_path)

    assert cache.get("bad.clas.abap") is None


def test_absolute_paths_ignore_base_dir(tmp_path: Path) -> None:
    source = tmp_path / "abs.clas.abap"
    source.write_text("x\n", encoding="utf-8")
    cache = FileContentCache(tmp_path / "elsewhere")

    assert cache.get(str(source)) == ["x", ""]


def test_method_ranges_are_parsed_once(tmp_path: Path) -> None:
    (tmp_path / "zcl_a.clas.abap").write_text(
        "CLASS zcl_a IMPLEMENTATION.\n  METHOD a.\n  ENDMETHOD.\nENDCLASS.\n",
        encoding="utf-8",
    )
    session = SessionCache(tmp_path)

    first = session.method_ranges("zcl_a.clas.abap")
    second = session.method_ranges("zcl_a.clas.abap")

    assert first == [MethodRange(name="a", start_line=2, length=2)]
    assert second is first
    assert session.files.reads == 1


def test_method_ranges_of_unreadable_file(tmp_path: Path) -> None:
    session = SessionCache(tmp_path)

    assert session.method_ranges("nope.clas.abap") is None
    assert session.method_ranges("nope.clas.abap") is None
    assert session.files.reads == 1
