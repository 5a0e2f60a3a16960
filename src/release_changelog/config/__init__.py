"""Configuration management for release-changelog."""

from __future__ import annotations

from release_changelog.config.loader import load_settings
from release_changelog.config.models import (
    DEFAULT_HIDDEN_PREFIXES,
    ActionSettings,
    ChangelogConfig,
)

__all__ = [
    "DEFAULT_HIDDEN_PREFIXES",
    "ActionSettings",
    "ChangelogConfig",
    "load_settings",
]
