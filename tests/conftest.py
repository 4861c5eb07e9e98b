from __future__ import annotations

import shutil
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def abapgit_repo(tmp_path: Path) -> Path:
    """A FULL folder logic abapGit checkout copied to a scratch directory."""
    repo_root = tmp_path / "repo"
    shutil.copytree(FIXTURES / "abapgit_repo", repo_root)
    return repo_root


@pytest.fixture
def findings_file(tmp_path: Path) -> Path:
    target = tmp_path / "atc_findings.json"
    shutil.copyfile(FIXTURES / "atc_findings.json", target)
    return target
