"""Command line interface for release-changelog."""

from __future__ import annotations

from release_changelog.cli.main import app, run

__all__ = ["app", "run"]
