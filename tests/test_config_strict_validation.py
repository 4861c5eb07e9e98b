from __future__ import annotations

from pathlib import Path

import pytest

from rules.config import ConfigError, load_config


def _write_config(repo_root: Path, toml_content: str) -> None:
    (repo_root / "abaplocate.toml").write_text(toml_content, encoding="utf-8")


def test_unknown_top_level_key_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "bogus_key = true")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_toml_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "src_dir = ")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


@pytest.mark.parametrize("src_dir", ["", "/abs/src", "../outside", "~/src"])
def test_src_dir_outside_repo_rejected(tmp_path: Path, src_dir: str) -> None:
    _write_config(tmp_path, f'src_dir = "{src_dir}"')

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_max_workers_must_be_positive(tmp_path: Path) -> None:
    _write_config(tmp_path, "max_workers = 0")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_empty_extensions_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "extensions = []")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_valid_config_accepted(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
src_dir = "abap/"
folder_logic = "full"
extensions = ["abap", ".xml"]
max_workers = 2
respect_gitignore = false
""".strip(),
    )

    config = load_config(tmp_path)

    assert config.src_dir == "abap"
    assert config.folder_logic == "full"
    assert config.extensions == [".abap", ".xml"]
    assert config.max_workers == 2
    assert config.respect_gitignore is False


def test_unrecognized_folder_logic_is_kept_for_lenient_resolution(
    tmp_path: Path,
) -> None:
    _write_config(tmp_path, 'folder_logic = "sideways"')

    assert load_config(tmp_path).folder_logic == "sideways"


def test_empty_config_accepted(tmp_path: Path) -> None:
    _write_config(tmp_path, "")

    config = load_config(tmp_path)

    assert config.src_dir == "src"
    assert config.report_file == "gl-code-quality-report.json"
    assert config.folder_logic is None
    assert config.extensions == [".abap", ".xml"]


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path).max_workers == 8
