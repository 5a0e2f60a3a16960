"""Implementation of the 'action' command.

Runs as a GitHub Actions step: inputs come from the runner environment
and the changelog is published as the ``changelog`` step output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from release_changelog.config import load_settings
from release_changelog.exceptions import ConfigError
from release_changelog.github.actions import run_action, set_failed

if TYPE_CHECKING:
    from rich.console import Console


def run_action_command(console: Console, err_console: Console) -> None:
    """Run the action command, exiting non-zero when the step failed."""
    try:
        settings = load_settings()
    except ConfigError as e:
        set_failed(str(e))
        err_console.print(f"[red]Error loading settings:[/] {e}")
        raise SystemExit(1) from e

    exit_code = run_action(settings, console, err_console)
    if exit_code:
        raise SystemExit(exit_code)
