"""Tests for commit log normalization."""

from __future__ import annotations

from release_changelog.core.formatter import (
    format_changelog,
    is_hidden,
    normalize_marker,
)


def _lines(*lines: str) -> str:
    return "\n".join(lines)


class TestFormatChangelog:
    """Tests for format_changelog()."""

    def test_single_commit(self):
        """A single well-formed bullet passes through."""
        assert format_changelog("* feat: add new feature") == "* feat: add new feature"

    def test_multiple_commits_keep_order(self):
        """Entries keep their log order."""
        raw = _lines(
            "* feat: add new feature",
            "* fix: resolve bug in login",
            "* chore: update dependencies",
        )

        assert format_changelog(raw) == raw

    def test_empty_input(self):
        """Empty log output yields an empty changelog."""
        assert format_changelog("") == ""
        assert format_changelog("\n\n  \n") == ""

    def test_blank_lines_dropped(self):
        """Blank and whitespace-only lines are ignored."""
        raw = _lines("* feat: one", "", "   ", "* fix: two", "")

        assert format_changelog(raw) == _lines("* feat: one", "* fix: two")

    def test_hidden_commits_filtered(self):
        """hide: and bump version entries are dropped in any case."""
        raw = _lines(
            "* feat: add new feature",
            "* hide: secret change",
            "* fix: resolve bug",
            "* BUMP VERSION: 1.0.1",
            "* bump version to 1.0.2",
            "* HIDE: another secret",
        )

        assert format_changelog(raw) == _lines("* feat: add new feature", "* fix: resolve bug")

    def test_hidden_commits_filtered_after_normalization(self):
        """Malformed bullets are filtered by their text, not their markup."""
        raw = _lines("* feat: keep", "*hide: no space", "+ Bump version 2.0.0", "** hide: double")

        assert format_changelog(raw) == "* feat: keep"

    def test_custom_hidden_prefixes(self):
        """Hidden prefixes are configurable and case-insensitive."""
        raw = _lines("* feat: keep", "* WIP: drop", "* hide: keep now")

        assert format_changelog(raw, hidden_prefixes=["wip"]) == _lines(
            "* feat: keep", "* hide: keep now"
        )

    def test_multi_line_commit_message(self):
        """Continuation lines merge into the previous bullet."""
        raw = _lines("* fix: handle multiple", "line", "commit message")

        assert format_changelog(raw) == "* fix: handle multiple line commit message"

    def test_continuation_trimmed(self):
        """Continuation lines are trimmed before joining."""
        raw = _lines("* fix: first", "   second part   ", "* feat: next")

        assert format_changelog(raw) == _lines("* fix: first second part", "* feat: next")

    def test_leading_continuation_dropped(self):
        """A continuation with no bullet before it is dropped."""
        raw = _lines("orphan text", "* feat: real entry")

        assert format_changelog(raw) == "* feat: real entry"

    def test_continuation_after_hidden_joins_last_emitted(self):
        """A hidden bullet never becomes the target of a continuation."""
        raw = _lines("* feat: visible", "* hide: secret", "tail")

        assert format_changelog(raw) == "* feat: visible tail"

    def test_empty_bullets_dropped(self):
        """Bullets with no text are removed."""
        raw = _lines(
            "* feat: normal commit",
            "*    ",
            "* feat: another commit",
            "*",
            "* fix: final commit",
        )

        assert format_changelog(raw) == _lines(
            "* feat: normal commit",
            "* feat: another commit",
            "* fix: final commit",
        )

    def test_malformed_bullets(self):
        """Bullet markup is normalized to '* '."""
        raw = _lines(
            "* feat: normal commit",
            "*feat: missing space",
            "** fix: double asterisk",
            " * chore: leading space",
            "+ feat: plus instead of asterisk",
            "* fix: normal commit",
        )

        assert format_changelog(raw) == _lines(
            "* feat: normal commit",
            "* feat: missing space",
            "* fix: double asterisk",
            "* chore: leading space",
            "* feat: plus instead of asterisk",
            "* fix: normal commit",
        )

    def test_special_characters_preserved(self):
        """Commit text is never altered beyond bullet markup."""
        raw = _lines(
            "* ✨ feat: add sparkles",
            '* fix: handle "double quotes"',
            "* feat: handle 'single quotes'",
            "* fix: handle <html> & [markdown] symbols",
            "* feat(scope): handle parentheses (like this)",
            "* fix: handle $ ^ & * special chars",
            "* fix: handle backslashes \\ and slashes /",
            "* feat: handle Unicode — em dash and … ellipsis",
        )

        assert format_changelog(raw) == raw

    def test_no_trailing_newline(self):
        """The result has no trailing newline."""
        assert not format_changelog("* feat: a\n* fix: b\n").endswith("\n")

    def test_idempotent(self):
        """Formatting formatted output changes nothing."""
        raw = _lines("*feat: a", "more", "** fix: b", "+ chore: c", "*", "* hide: x")
        once = format_changelog(raw)

        assert format_changelog(once) == once


class TestHelpers:
    """Tests for the line helpers."""

    def test_normalize_marker(self):
        """Double and plus markers become a single asterisk."""
        assert normalize_marker("** fix: y") == "* fix: y"
        assert normalize_marker("+ feat: z") == "* feat: z"
        assert normalize_marker("*feat: x") == "*feat: x"
        assert normalize_marker("plain") == "plain"

    def test_is_hidden(self):
        """is_hidden looks at the bullet text only."""
        assert is_hidden("* hide: x")
        assert is_hidden("* Bump Version 1.2.3")
        assert not is_hidden("* feat: hide: later in text")
