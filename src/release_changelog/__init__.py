"""release-changelog: bulleted release changelogs from git history."""

from __future__ import annotations

from release_changelog.core.changelog import agenerate_changelog, generate_changelog
from release_changelog.exceptions import (
    ChangelogInputError,
    InvalidVersionFormatError,
    MissingPreviousReleaseError,
    VersionOrderError,
)

__version__ = "1.0.0"

__all__ = [
    "ChangelogInputError",
    "InvalidVersionFormatError",
    "MissingPreviousReleaseError",
    "VersionOrderError",
    "__version__",
    "agenerate_changelog",
    "generate_changelog",
]
