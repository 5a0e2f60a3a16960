"""GitHub Actions step integration.

Reads the step inputs, generates the changelog, publishes it as the
``changelog`` output and marks the step failed on version errors. The
workflow command formats follow the runner's documented syntax.
"""

from __future__ import annotations

import logging
import sys
import uuid
from typing import TYPE_CHECKING

from release_changelog.core.changelog import generate_changelog
from release_changelog.exceptions import ChangelogInputError

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from release_changelog.config.models import ActionSettings

logger = logging.getLogger(__name__)

OUTPUT_NAME = "changelog"


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _delimiter_for(value: str) -> str:
    while True:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter not in value:
            return delimiter


def set_output(name: str, value: str, output_path: Path | None = None) -> None:
    """Publish a step output.

    With an output file, a multi-line ``name<<DELIMITER`` block is appended
    to it. Without one, the output is skipped with a warning.

    Args:
        name: Output name
        value: Output value, possibly multi-line or empty
        output_path: Path from ``GITHUB_OUTPUT``
    """
    if output_path is None:
        logger.warning("GITHUB_OUTPUT is not set, skipping output %s", name)
        return

    delimiter = _delimiter_for(value)
    with open(output_path, "a", encoding="utf-8") as handle:
        handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    logger.debug("Wrote output %s to %s", name, output_path)


def set_failed(message: str) -> None:
    """Emit an error annotation for the current step."""
    sys.stderr.write(f"::error::{escape_data(message)}\n")


def run_action(settings: ActionSettings, console: Console, err_console: Console) -> int:
    """Run the changelog step.

    Args:
        settings: Step inputs and runner paths
        console: Console for standard output
        err_console: Console for error output

    Returns:
        Process exit code: 0 on success, 1 when the step failed
    """
    try:
        changelog = generate_changelog(
            settings.previous_version,
            settings.current_version,
            repo=settings.repo_path,
            config=settings.changelog,
        )
    except ChangelogInputError as e:
        set_failed(str(e))
        err_console.print(f"[red]Error:[/] {e}")
        return 1

    try:
        set_output(OUTPUT_NAME, changelog, settings.output_path)
    except OSError as e:
        set_failed(f"Could not write step output: {e}")
        err_console.print(f"[red]Error writing output:[/] {e}")
        return 1

    if changelog:
        console.print(f"[green]Generated changelog[/] ({len(changelog.splitlines())} entries)")
    else:
        console.print("[yellow]No changes found, changelog is empty.[/]")
    return 0
