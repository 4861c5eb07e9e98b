from __future__ import annotations

from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from scan.files import DEFAULT_EXTENSIONS

CONFIG_FILENAME = "abaplocate.toml"

DEFAULT_REPORT_FILE = "gl-code-quality-report.json"


class LocateConfig(BaseModel):
    """Configuration for finding resolution and repository layout."""

    model_config = ConfigDict(extra="forbid")

    src_dir: str = Field(
        default="src",
        description="Source directory of the abapGit repository",
    )
    report_file: str = Field(
        default=DEFAULT_REPORT_FILE,
        description="Default path of the GitLab Code Quality report",
    )
    folder_logic: str | None = Field(
        default=None,
        description=(
            "Project default folder logic (prefix, full, full-with-root); "
            "unrecognized values fall back to the next precedence level"
        ),
    )
    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="File suffixes indexed below src_dir",
    )
    max_workers: int = Field(
        default=8,
        ge=1,
        description="Upper bound on concurrent finding resolutions",
    )
    respect_gitignore: bool = Field(
        default=True,
        description="Skip files matched by the repository's root .gitignore",
    )

    @field_validator("src_dir", mode="before")
    @classmethod
    def validate_src_dir(cls, v: Any) -> Any:
        """Reject source directories that leave the repository root.

        Note: this runs in `mode="before"` so we can report a clear error
        message using the raw TOML value.
        """
        if not isinstance(v, str) or not v.strip():
            msg = "src_dir must be a non-empty relative path"
            raise ValueError(msg)

        src_path = Path(v)
        if src_path.is_absolute() or v.startswith("~") or ".." in src_path.parts:
            msg = f"src_dir '{v}' must be a relative path within the repo root"
            raise ValueError(msg)

        return v.strip().strip("/")

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: list[str]) -> list[str]:
        if not v:
            msg = "extensions must not be empty"
            raise ValueError(msg)
        return [ext if ext.startswith(".") else f".{ext}" for ext in v]


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def load_config(root: Path) -> LocateConfig:
    """Load configuration from abaplocate.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return LocateConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return LocateConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
