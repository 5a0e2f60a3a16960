"""Commit range resolution.

Turns two optional version strings into the ``from..target`` range that
is handed to ``git log``:

- versions are validated and cleaned (``v1.2.0`` -> ``1.2.0``)
- previous must not be newer than current
- a missing current version means ``HEAD``
- a missing previous version means the repository's first commit
- a previous version without a tag is only accepted for a first release
- shipping a stable release after prereleases starts the range at the
  first prerelease of the series
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from release_changelog.core.version import (
    Version,
    clean_version,
    is_prerelease,
    is_stable_version,
)
from release_changelog.exceptions import MissingPreviousReleaseError, VersionOrderError
from release_changelog.vcs.git import HEAD

if TYPE_CHECKING:
    from release_changelog.vcs.git import GitRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitRange:
    """A ``from_ref..target_ref`` history range."""

    from_ref: str
    target_ref: str

    def __str__(self) -> str:
        return f"{self.from_ref}..{self.target_ref}"


def normalize_input(value: str | None) -> str | None:
    """Collapse empty and whitespace-only input to None.

    Present values are returned as supplied so errors can quote them.
    """
    if value is None or not value.strip():
        return None
    return value


def validate_version_order(previous: str | None, current: str | None, head_ref: str = HEAD) -> None:
    """Ensure previous does not come after current.

    Skipped when either side is absent or current is the symbolic head.

    Raises:
        VersionOrderError: If previous is strictly newer than current
    """
    if not previous or not current or current == head_ref:
        return
    if Version.parse(previous) > Version.parse(current):
        raise VersionOrderError(previous, current)


def find_last_stable_version(tags: Iterable[str], below: Version | None = None) -> Version | None:
    """Return the highest stable version among tags, optionally below a bound."""
    stable = [
        version
        for version in (Version.try_parse(tag) for tag in tags)
        if version is not None
        and version.is_stable
        and (below is None or version < below)
    ]
    return max(stable, default=None)


def find_prerelease_series_start(
    tags: Iterable[str], target: Version
) -> tuple[Version, str] | None:
    """Find the first prerelease published after the last stable release.

    Tags that are not semantic versions are ignored. Only versions below
    target count, so an existing target tag does not shift the bounds.

    Args:
        tags: Raw tag names
        target: The stable version being released

    Returns:
        The earliest prerelease between the last stable release and target
        together with its tag name, or None when there is no earlier stable
        release or no such prerelease
    """
    tags = list(tags)
    last_stable = find_last_stable_version(tags, below=target)
    if last_stable is None:
        return None

    series = [
        (version, tag)
        for version, tag in ((Version.try_parse(tag), tag) for tag in tags)
        if version is not None
        and version.is_prerelease
        and last_stable < version < target
    ]
    return min(series, key=lambda pair: pair[0], default=None)


def _other_release_tags(tags: Iterable[str], raw_current: str | None, current: str | None) -> list[str]:
    others = []
    for tag in tags:
        if raw_current is not None and tag == raw_current.strip():
            continue
        if tag == current:
            continue
        version = Version.try_parse(tag)
        if current is not None and version is not None and str(version) == current:
            continue
        others.append(tag)
    return others


def resolve_range(
    repo: GitRepository,
    previous_version: str | None,
    current_version: str | None,
    head_ref: str = HEAD,
) -> CommitRange:
    """Resolve the history range to build a changelog from.

    Args:
        repo: Repository to query
        previous_version: Last released version, or None/"" for none
        current_version: Version being released, ``"HEAD"``, or None/"" for HEAD
        head_ref: Symbolic ref standing in for an unreleased current version

    Returns:
        The resolved CommitRange

    Raises:
        InvalidVersionFormatError: If a supplied version is not a semantic version
        VersionOrderError: If previous is newer than current
        MissingPreviousReleaseError: If previous has no tag but other releases exist
        GitError: If a repository query fails
    """
    raw_previous = normalize_input(previous_version)
    raw_current = normalize_input(current_version)

    previous = clean_version(raw_previous) if raw_previous else None
    if raw_current is None or raw_current.strip() == head_ref:
        current = None
    else:
        current = clean_version(raw_current)

    validate_version_order(previous, current, head_ref)

    target_ref = current or head_ref

    if previous is None:
        from_ref = repo.first_commit()
        logger.info("No previous version, starting from first commit %s", from_ref)
        return CommitRange(from_ref, target_ref)

    if not repo.ref_exists(previous):
        others = _other_release_tags(repo.list_tags(), raw_current, current)
        if others:
            raise MissingPreviousReleaseError(previous)
        from_ref = repo.first_commit()
        logger.info(
            "Previous version %s not tagged and no other releases exist, "
            "treating as first release from %s",
            previous,
            from_ref,
        )
        return CommitRange(from_ref, target_ref)

    from_ref = previous
    if is_prerelease(previous) and is_stable_version(current):
        series_start = find_prerelease_series_start(repo.list_tags(), Version.parse(current))
        if series_start is not None and series_start[0] < Version.parse(previous):
            # The tag name, not the cleaned version, is what git resolves
            from_ref = series_start[1]
            logger.info(
                "Promoting %s to stable %s, including all changes since %s",
                previous,
                current,
                from_ref,
            )

    return CommitRange(from_ref, target_ref)
