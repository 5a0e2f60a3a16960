"""Changelog generation from git history.

This module ties range resolution, the ``git log`` query and bullet
normalization together. Version errors are the caller's to fix and are
always raised; any other failure yields an empty changelog so that a
release is never blocked on its notes.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from release_changelog.core.formatter import format_changelog
from release_changelog.core.resolver import resolve_range
from release_changelog.exceptions import ChangelogInputError
from release_changelog.vcs.git import GitRepository

if TYPE_CHECKING:
    from release_changelog.config.models import ChangelogConfig

logger = logging.getLogger(__name__)


def generate_changelog(
    previous_version: str | None,
    current_version: str | None,
    repo: GitRepository | Path | str | None = None,
    config: ChangelogConfig | None = None,
) -> str:
    """Generate a bulleted changelog between two versions.

    Args:
        previous_version: Last released version; None or "" starts from the first commit
        current_version: Version being released; None, "" or "HEAD" means HEAD
        repo: Repository, or a path to one (defaults to the working directory)
        config: Formatting configuration

    Returns:
        Newline-joined bullets, or "" when there are no changes or the
        history could not be read

    Raises:
        InvalidVersionFormatError: If a supplied version is not a semantic version
        VersionOrderError: If previous is newer than current
        MissingPreviousReleaseError: If previous has no tag but other releases exist
    """
    if config is None:
        from release_changelog.config.models import ChangelogConfig

        config = ChangelogConfig()

    if repo is None or isinstance(repo, (str, Path)):
        repo = GitRepository(repo)

    try:
        commit_range = resolve_range(repo, previous_version, current_version, config.head_ref)
        raw_log = repo.log_range(commit_range.from_ref, commit_range.target_ref, config.log_format)
        return format_changelog(raw_log, config.hidden_prefixes)
    except ChangelogInputError:
        raise
    except Exception as e:
        logger.debug("Changelog generation failed, returning empty changelog: %s", e)
        return ""


async def agenerate_changelog(
    previous_version: str | None,
    current_version: str | None,
    repo: GitRepository | Path | str | None = None,
    config: ChangelogConfig | None = None,
) -> str:
    """Async variant of generate_changelog, run in a worker thread."""
    return await asyncio.to_thread(
        generate_changelog, previous_version, current_version, repo, config
    )
