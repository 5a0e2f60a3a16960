"""Shared test fixtures."""

from __future__ import annotations

import shutil
import subprocess
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from release_changelog.vcs.git import GitRepository

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def mock_repo() -> MagicMock:
    """Create a mock GitRepository where every queried ref exists."""
    repo = MagicMock(spec=GitRepository)
    repo.ref_exists.return_value = True
    repo.list_tags.return_value = []
    repo.first_commit.return_value = "abc123"
    repo.log_range.return_value = ""
    return repo


def _git(path: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=path,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def git_repo(tmp_path: Path):
    """Create a real git repository with a commit helper.

    Yields a ``(path, commit)`` pair where ``commit(message, tag=None)``
    records an empty commit and optionally tags it.
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    _git(tmp_path, "init", "-q")
    _git(tmp_path, "config", "user.email", "test@test.com")
    _git(tmp_path, "config", "user.name", "Test")
    _git(tmp_path, "config", "commit.gpgsign", "false")
    _git(tmp_path, "config", "tag.gpgsign", "false")

    def commit(message: str, tag: str | None = None) -> str:
        _git(tmp_path, "commit", "-q", "--allow-empty", "-m", message)
        if tag:
            _git(tmp_path, "tag", tag)
        return _git(tmp_path, "rev-parse", "HEAD")

    yield tmp_path, commit


@pytest.fixture(autouse=True)
def clean_runner_env(monkeypatch: pytest.MonkeyPatch):
    """Remove GitHub Actions variables that leak in when tests run in CI."""
    for name in (
        "INPUT_PREVIOUS-VERSION",
        "INPUT_CURRENT-VERSION",
        "GITHUB_WORKSPACE",
        "GITHUB_OUTPUT",
    ):
        monkeypatch.delenv(name, raising=False)
