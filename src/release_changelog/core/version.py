"""Semantic version parsing and precedence.

Versions follow Semantic Versioning 2.0.0: ``MAJOR.MINOR.PATCH`` with
optional ``-prerelease`` and ``+build`` parts. Input may carry a leading
``v`` (``v1.2.3``), which is stripped when cleaning.

Precedence rules:
- major, minor and patch compare numerically
- a prerelease sorts below its release (``1.0.0-rc.1 < 1.0.0``)
- prerelease identifiers compare left to right; numeric identifiers
  compare numerically and sort below alphanumeric ones; a shorter set
  of identifiers sorts first when all preceding ones are equal
- build metadata is ignored
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

from release_changelog.exceptions import InvalidVersionFormatError

_NUM = r"0|[1-9]\d*"
_PRE_ID = r"0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*"

SEMVER_PATTERN = re.compile(
    rf"^(?P<major>{_NUM})\.(?P<minor>{_NUM})\.(?P<patch>{_NUM})"
    rf"(?:-(?P<prerelease>(?:{_PRE_ID})(?:\.(?:{_PRE_ID}))*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)

# Characters stripped from the front of a version before parsing
_LEADING_JUNK = "=v"


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Dot-separated prerelease identifiers, e.g. ``("rc", 1)``
        build: Dot-separated build metadata identifiers
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str | int, ...] = ()
    build: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string, accepting a leading ``v``.

        Args:
            text: Raw version string such as ``"v1.2.3-rc.1"``

        Returns:
            Parsed Version

        Raises:
            InvalidVersionFormatError: If text is not a semantic version
        """
        match = SEMVER_PATTERN.match(text.strip().lstrip(_LEADING_JUNK))
        if not match:
            raise InvalidVersionFormatError(text)

        prerelease: tuple[str | int, ...] = ()
        if match.group("prerelease"):
            prerelease = tuple(
                int(part) if part.isdigit() else part
                for part in match.group("prerelease").split(".")
            )

        build: tuple[str, ...] = ()
        if match.group("build"):
            build = tuple(match.group("build").split("."))

        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=prerelease,
            build=build,
        )

    @classmethod
    def try_parse(cls, text: str) -> Version | None:
        """Parse a version string, returning None when it is not valid."""
        try:
            return cls.parse(text)
        except InvalidVersionFormatError:
            return None

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    @property
    def is_stable(self) -> bool:
        return not self.prerelease

    def _precedence(self) -> tuple:
        if not self.prerelease:
            # A release outranks any of its prereleases
            return (self.major, self.minor, self.patch, (1,))
        identifiers = tuple(
            (0, part, "") if isinstance(part, int) else (1, 0, part) for part in self.prerelease
        )
        return (self.major, self.minor, self.patch, (0, identifiers))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence() == other._precedence()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __hash__(self) -> int:
        return hash(self._precedence())

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(str(part) for part in self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


def clean_version(text: str) -> str:
    """Validate a version string and return its canonical form.

    Args:
        text: Raw version such as ``"v1.0.0"``

    Returns:
        Canonical version string without the ``v`` prefix, e.g. ``"1.0.0"``

    Raises:
        InvalidVersionFormatError: If text is not a semantic version
    """
    return str(Version.parse(text))


def is_prerelease(text: str | None) -> bool:
    """Check whether a version string carries a prerelease component.

    Invalid or empty input is never a prerelease.
    """
    if not text:
        return False
    version = Version.try_parse(text)
    return version is not None and version.is_prerelease


def is_stable_version(text: str | None) -> bool:
    """Check whether a version string is a valid, non-prerelease version."""
    if not text:
        return False
    version = Version.try_parse(text)
    return version is not None and version.is_stable
