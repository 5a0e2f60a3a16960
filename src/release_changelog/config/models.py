"""Configuration models.

``ChangelogConfig`` holds the formatting knobs. ``ActionSettings`` reads
the GitHub Actions step environment; inputs arrive as
``INPUT_<NAME>`` variables with the input name upper-cased and its
hyphens kept.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from release_changelog.core.formatter import DEFAULT_HIDDEN_PREFIXES
from release_changelog.vcs.git import DEFAULT_LOG_FORMAT, HEAD


class ChangelogConfig(BaseModel):
    """How history is queried and which entries are suppressed."""

    log_format: str = Field(
        default=DEFAULT_LOG_FORMAT,
        description="git --pretty=format template, one bullet per commit",
    )
    hidden_prefixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_HIDDEN_PREFIXES),
        description="Bullet prefixes (case-insensitive) that never reach the changelog",
    )
    head_ref: str = Field(default=HEAD, description="Symbolic ref used when no current version is given")

    @field_validator("hidden_prefixes")
    @classmethod
    def _lower_prefixes(cls, value: list[str]) -> list[str]:
        return [prefix.strip().lower() for prefix in value if prefix.strip()]


class ActionSettings(BaseSettings):
    """Inputs and paths provided by the GitHub Actions runner."""

    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore")

    previous_version: str | None = Field(default=None, validation_alias="INPUT_PREVIOUS-VERSION")
    current_version: str | None = Field(default=None, validation_alias="INPUT_CURRENT-VERSION")
    workspace: Path | None = Field(default=None, validation_alias="GITHUB_WORKSPACE")
    output_path: Path | None = Field(default=None, validation_alias="GITHUB_OUTPUT")
    changelog: ChangelogConfig = Field(default_factory=ChangelogConfig)

    @field_validator("previous_version", "current_version", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: object) -> object:
        if value is None:
            return None
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("workspace", "output_path", mode="before")
    @classmethod
    def _blank_path_is_absent(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def repo_path(self) -> Path:
        return self.workspace or Path.cwd()
