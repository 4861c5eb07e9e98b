"""Repository layout rules for abapGit checkouts."""

from rules.config import (
    ConfigError,
    LocateConfig,
    load_config,
)
from rules.folder_logic import (
    FolderLogic,
    parse_folder_logic,
    resolve_folder_logic,
    resolve_repo_folder_logic,
)
from rules.package_dir import package_dir

__all__ = [
    "ConfigError",
    "FolderLogic",
    "LocateConfig",
    "load_config",
    "package_dir",
    "parse_folder_logic",
    "resolve_folder_logic",
    "resolve_repo_folder_logic",
]
