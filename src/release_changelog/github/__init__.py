"""GitHub Actions integration."""

from __future__ import annotations

from release_changelog.github.actions import run_action, set_failed, set_output

__all__ = ["run_action", "set_failed", "set_output"]
