"""Exception hierarchy for release-changelog.

Only the ``ChangelogInputError`` family escapes ``generate_changelog``.
Everything else is absorbed at the orchestration boundary and turned
into an empty changelog.
"""

from __future__ import annotations


class ReleaseChangelogError(Exception):
    """Base exception for all release-changelog errors."""


class ChangelogInputError(ReleaseChangelogError):
    """A caller-supplied version is unusable.

    These errors are caller-correctable and are always propagated.
    """


class InvalidVersionFormatError(ChangelogInputError):
    """A supplied version string is not a valid semantic version."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Invalid version format: {version}")


class VersionOrderError(ChangelogInputError):
    """The previous version is newer than the current version."""

    def __init__(self, previous: str, current: str) -> None:
        self.previous = previous
        self.current = current
        super().__init__(
            f"Previous version ({previous}) is newer than current version ({current})"
        )


class MissingPreviousReleaseError(ChangelogInputError):
    """The previous version has no tag, but other releases exist."""

    def __init__(self, previous: str) -> None:
        self.previous = previous
        super().__init__(
            f"Previous version {previous} not found, and this is not the first release"
        )


class GitError(ReleaseChangelogError):
    """A git command failed."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        self.stderr = stderr
        super().__init__(message)


class ConfigError(ReleaseChangelogError):
    """Settings could not be loaded."""
