"""Git repository queries.

All history access goes through ``GitRepository``. Each method runs one
git command as a subprocess and returns its output; failures are raised
as ``GitError``. The repository is only ever read.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from release_changelog.exceptions import GitError

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "* %s"
HEAD = "HEAD"


class GitRepository:
    """Read-only view of a git repository.

    Args:
        path: Working tree to run git commands in
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path else Path.cwd()

    def __repr__(self) -> str:
        return f"GitRepository({str(self.path)!r})"

    def _run(self, *args: str) -> str:
        """Run a git command and return its stdout.

        Raises:
            GitError: If git is missing or the command exits non-zero
        """
        command = ["git", *args]
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                cwd=self.path,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout

    def list_tags(self) -> list[str]:
        """List every tag name in the repository (possibly empty)."""
        output = self._run("tag", "-l")
        return [line.strip() for line in output.splitlines() if line.strip()]

    def ref_exists(self, ref: str) -> bool:
        """Check whether ref resolves to an object.

        Only an unknown ref yields False; a missing git binary still raises.
        """
        try:
            self._run("rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}")
        except GitError as e:
            if isinstance(e.__cause__, subprocess.CalledProcessError):
                return False
            raise
        return True

    def first_commit(self, ref: str = HEAD) -> str:
        """Return the hash of the oldest commit reachable from ref.

        A history with several roots yields the first one git lists.
        """
        output = self._run("rev-list", "--max-parents=0", ref)
        roots = output.split()
        if not roots:
            raise GitError(f"No root commit reachable from {ref}")
        return roots[0]

    def log_range(self, from_ref: str, target_ref: str, fmt: str = DEFAULT_LOG_FORMAT) -> str:
        """Return ``git log from_ref..target_ref`` rendered with fmt.

        Args:
            from_ref: Exclusive start of the range
            target_ref: Inclusive end of the range
            fmt: ``--pretty=format:`` template, one entry per commit

        Returns:
            Raw log text
        """
        return self._run("log", f"{from_ref}..{target_ref}", f"--pretty=format:{fmt}")
