"""Version control access for release-changelog."""

from __future__ import annotations

from release_changelog.vcs.git import DEFAULT_LOG_FORMAT, HEAD, GitRepository

__all__ = ["DEFAULT_LOG_FORMAT", "HEAD", "GitRepository"]
