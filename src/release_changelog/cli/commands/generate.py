"""Implementation of the 'generate' and 'range' commands.

Both commands work on a local checkout. 'generate' prints or writes the
changelog; 'range' only shows which history range would be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from release_changelog.core.changelog import generate_changelog
from release_changelog.core.resolver import resolve_range
from release_changelog.exceptions import ChangelogInputError, GitError
from release_changelog.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console


def run_generate(
    path: str | None,
    previous_version: str | None,
    current_version: str | None,
    output: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the generate command.

    Args:
        path: Optional path to the repository
        previous_version: Last released version
        current_version: Version being released
        output: Optional file to write the changelog to
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    try:
        changelog = generate_changelog(
            previous_version, current_version, repo=GitRepository(project_path)
        )
    except ChangelogInputError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    if output:
        try:
            Path(output).write_text(changelog + "\n" if changelog else "", encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]Error writing {output}:[/] {e}")
            raise SystemExit(1) from e
        console.print(f"[green]✓[/] Wrote changelog to [cyan]{output}[/]")
        return

    if not changelog:
        err_console.print("[yellow]No changes found.[/]")
        return

    # Plain print so bullets are not treated as markup
    console.print(changelog, markup=False, highlight=False)


def run_range(
    path: str | None,
    previous_version: str | None,
    current_version: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the range command."""
    project_path = Path(path) if path else Path.cwd()
    repo = GitRepository(project_path)

    try:
        commit_range = resolve_range(repo, previous_version, current_version)
    except ChangelogInputError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e
    except GitError as e:
        err_console.print(f"[red]Git error:[/] {e}")
        if e.stderr:
            err_console.print(e.stderr.strip(), style="red", markup=False)
        raise SystemExit(1) from e

    console.print(str(commit_range), markup=False, highlight=False)
