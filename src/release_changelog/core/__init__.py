"""Core business logic for release-changelog.

This module contains the fundamental building blocks:
- Semantic version parsing and precedence
- Commit range resolution
- Commit log normalization
- Changelog orchestration
"""

from __future__ import annotations

from release_changelog.core.changelog import agenerate_changelog, generate_changelog
from release_changelog.core.formatter import DEFAULT_HIDDEN_PREFIXES, format_changelog
from release_changelog.core.resolver import (
    CommitRange,
    find_last_stable_version,
    find_prerelease_series_start,
    resolve_range,
)
from release_changelog.core.version import Version, clean_version, is_prerelease

__all__ = [
    "DEFAULT_HIDDEN_PREFIXES",
    # Range
    "CommitRange",
    # Version
    "Version",
    # Changelog
    "agenerate_changelog",
    "clean_version",
    "find_last_stable_version",
    "find_prerelease_series_start",
    # Formatting
    "format_changelog",
    "generate_changelog",
    "is_prerelease",
    "resolve_range",
]
