"""abapGit folder logic: parsing, precedence and repository declaration."""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

ABAPGIT_XML = ".abapgit.xml"

_DECLARED_FOLDER_LOGIC = re.compile(
    r"<FOLDER_LOGIC>\s*([^<]+?)\s*</FOLDER_LOGIC>", re.IGNORECASE
)


class FolderLogic(str, Enum):
    """How a package hierarchy maps to directories below the source root."""

    PREFIX = "prefix"
    FULL = "full"
    FULL_WITH_ROOT = "full-with-root"

    @property
    def declared_value(self) -> str:
        """Literal written to .abapgit.xml.

        abapGit only knows PREFIX and FULL, so FULL_WITH_ROOT is declared as
        FULL.
        """
        return "PREFIX" if self is FolderLogic.PREFIX else "FULL"


DEFAULT_FOLDER_LOGIC = FolderLogic.PREFIX


def parse_folder_logic(value: object) -> FolderLogic | None:
    """Parse an option or config value; unknown values yield None."""
    if isinstance(value, FolderLogic):
        return value
    if not isinstance(value, str):
        return None
    try:
        return FolderLogic(value.strip().lower())
    except ValueError:
        return None


def parse_declared_folder_logic(xml_content: str) -> FolderLogic | None:
    """Extract the folder logic declared in .abapgit.xml content."""
    match = _DECLARED_FOLDER_LOGIC.search(xml_content)
    if match is None:
        return None

    declared = match.group(1).strip().upper()
    if declared == "PREFIX":
        return FolderLogic.PREFIX
    if declared == "FULL":
        return FolderLogic.FULL
    return None


def read_declared_folder_logic(repo_root: Path) -> FolderLogic | None:
    """Read the folder logic declared by an existing repository, if any."""
    abapgit_xml_path = repo_root / ABAPGIT_XML
    if not abapgit_xml_path.is_file():
        return None

    try:
        xml_content = abapgit_xml_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", abapgit_xml_path, exc)
        return None

    return parse_declared_folder_logic(xml_content)


def resolve_folder_logic(
    override: object = None,
    declared: FolderLogic | None = None,
    configured: object = None,
) -> FolderLogic:
    """Pick the folder logic for one import or export operation.

    Precedence, highest first: explicit override (command line), the
    declaration of the existing repository, the configured project default,
    then PREFIX. Values that do not parse are skipped.
    """
    for source, candidate in (
        ("override", parse_folder_logic(override)),
        ("repository", declared),
        ("config", parse_folder_logic(configured)),
    ):
        if candidate is not None:
            logger.debug("Folder logic %s taken from %s", candidate.value, source)
            return candidate

    return DEFAULT_FOLDER_LOGIC


def resolve_repo_folder_logic(
    repo_root: Path,
    override: object = None,
    configured: object = None,
) -> FolderLogic:
    """Resolve folder logic using the declaration found in ``repo_root``."""
    return resolve_folder_logic(
        override=override,
        declared=read_declared_folder_logic(repo_root),
        configured=configured,
    )


def render_abapgit_xml(folder_logic: FolderLogic) -> str:
    """Render .abapgit.xml repository metadata declaring ``folder_logic``."""
    return f"""<?xml version="1.0" encoding="utf-8"?>
<asx:abap xmlns:asx="http://www.sap.com/abapxml" version="1.0">
 <asx:values>
  <DATA>
   <MASTER_LANGUAGE>E</MASTER_LANGUAGE>
   <STARTING_FOLDER>/src/</STARTING_FOLDER>
   <FOLDER_LOGIC>{folder_logic.declared_value}</FOLDER_LOGIC>
  </DATA>
 </asx:values>
</asx:abap>
"""


__all__ = [
    "ABAPGIT_XML",
    "DEFAULT_FOLDER_LOGIC",
    "FolderLogic",
    "parse_declared_folder_logic",
    "parse_folder_logic",
    "read_declared_folder_logic",
    "render_abapgit_xml",
    "resolve_folder_logic",
    "resolve_repo_folder_logic",
]
