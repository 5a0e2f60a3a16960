"""Commit log normalization.

Turns the raw ``git log --pretty=format:"* %s"`` output into one clean
bullet per entry:

- blank lines are dropped
- ``**`` loses one marker and ``+`` becomes ``*``
- a line without a marker continues the previous emitted bullet
- ``*text`` gets a space after the marker
- empty bullets are dropped
- bullets whose text starts with a hidden prefix are dropped
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

BULLET = "*"
DEFAULT_HIDDEN_PREFIXES = ("hide:", "bump version")


def normalize_marker(line: str) -> str:
    """Rewrite alternate bullet markers to a single ``*``."""
    if line.startswith("**"):
        line = line[1:]
    if line.startswith("+"):
        line = BULLET + line[1:]
    return line


def is_hidden(entry: str, hidden_prefixes: Iterable[str] = DEFAULT_HIDDEN_PREFIXES) -> bool:
    """Check whether a bullet's text starts with a suppression prefix.

    Args:
        entry: A bullet line starting with ``*``
        hidden_prefixes: Lower-case prefixes to suppress

    Returns:
        True if the entry must not appear in the changelog
    """
    body = entry[len(BULLET):].strip().lower()
    return any(body.startswith(prefix) for prefix in hidden_prefixes)


def _fold_line(
    entries: tuple[str, ...],
    raw_line: str,
    hidden_prefixes: tuple[str, ...],
) -> tuple[str, ...]:
    line = raw_line.strip()
    if not line:
        return entries

    line = normalize_marker(line)

    if not line.startswith(BULLET):
        # Continuation of the last emitted bullet
        if not entries:
            return entries
        return (*entries[:-1], f"{entries[-1]} {line}")

    if not line.startswith(BULLET + " "):
        line = line.replace(BULLET, BULLET + " ", 1)

    if line.strip() == BULLET:
        return entries
    if is_hidden(line, hidden_prefixes):
        return entries
    return (*entries, line)


def format_changelog(
    raw_text: str,
    hidden_prefixes: Iterable[str] = DEFAULT_HIDDEN_PREFIXES,
) -> str:
    """Format raw log output as a newline-joined bullet list.

    Entries keep their original order. The result has no trailing newline
    and is empty when nothing survives filtering.

    Args:
        raw_text: Raw multi-line log output
        hidden_prefixes: Case-insensitive bullet prefixes to drop

    Returns:
        The changelog
    """
    prefixes = tuple(prefix.lower() for prefix in hidden_prefixes)
    entries = reduce(
        lambda acc, line: _fold_line(acc, line, prefixes),
        raw_text.split("\n"),
        (),
    )
    return "\n".join(entries)
