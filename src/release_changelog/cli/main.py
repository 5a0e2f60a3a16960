"""Command line interface for release-changelog."""

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from release_changelog import __version__

app = typer.Typer(
    name="release-changelog",
    no_args_is_help=True,
    help="Generate release changelogs from git history.",
)

console = Console()
err_console = Console(stderr=True)

PreviousOption = Annotated[
    Optional[str],
    typer.Option("--previous-version", "-p", help="Last released version (default: first commit)"),
]
CurrentOption = Annotated[
    Optional[str],
    typer.Option("--current-version", "-c", help="Version being released (default: HEAD)"),
]
RepoOption = Annotated[
    Optional[str],
    typer.Option("--repo", "-r", help="Path to the git repository (default: current directory)"),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")]


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"release-changelog {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = False,
) -> None:
    """Generate release changelogs from git history."""


@app.command()
def generate(
    previous_version: PreviousOption = None,
    current_version: CurrentOption = None,
    repo: RepoOption = None,
    output: Annotated[
        Optional[str], typer.Option("--output", "-o", help="Write the changelog to a file")
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the changelog between two versions."""
    from release_changelog.cli.commands.generate import run_generate

    _setup_logging(verbose)
    run_generate(repo, previous_version, current_version, output, console, err_console)


@app.command(name="range")
def show_range(
    previous_version: PreviousOption = None,
    current_version: CurrentOption = None,
    repo: RepoOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the resolved history range without querying the log."""
    from release_changelog.cli.commands.generate import run_range

    _setup_logging(verbose)
    run_range(repo, previous_version, current_version, console, err_console)


@app.command()
def action(verbose: VerboseOption = False) -> None:
    """Run as a GitHub Actions step."""
    from release_changelog.cli.commands.action import run_action_command

    _setup_logging(verbose)
    run_action_command(console, err_console)


def run() -> None:
    app()
