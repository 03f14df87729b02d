"""
Git client implementation for gy_commit.

Only three Git operations are needed: the staged diff, the unstaged
diff, and ``git commit -m``. All of them go through
:func:`gy_commit.vcs.process.run_command` so that unit tests can mock a
single seam.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from gy_commit.vcs import process
from gy_commit.vcs.process import CommandResult


logger = logging.getLogger(__name__)
# Attach a null handler so nothing is printed until the CLI configures
# logging. Records still propagate to the root logger once it has handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class GitError(Exception):
    """Raised when a Git command fails or cannot be started."""

    pass


class GitClient:
    """Client for interacting with the Git repository in ``repo_root``.

    ``repo_root`` defaults to the current working directory, which lets
    Git itself decide whether we are inside a repository.
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = repo_root

    def _run(self, args: List[str]) -> CommandResult:
        """Run a Git command and raise :class:`GitError` on failure."""
        full_cmd = ["git"] + args
        try:
            result = process.run_command(full_cmd, cwd=self.repo_root)
        except OSError as exc:
            logger.debug("Failed to start git: %s", exc)
            raise GitError(f"Failed to run git: {exc}") from exc

        if not result.ok:
            logger.debug(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip())
        return result

    # ------------------------------------------------------------------
    # Diffs
    # ------------------------------------------------------------------
    def get_staged_diff(self) -> str:
        """Return the diff of changes staged for the next commit."""
        return self._run(["diff", "--staged"]).stdout

    def get_unstaged_diff(self) -> str:
        """Return the diff of tracked changes not yet staged."""
        return self._run(["diff"]).stdout

    # ------------------------------------------------------------------
    # Committing
    # ------------------------------------------------------------------
    def commit(self, message: str) -> str:
        """Create a commit with the given message.

        The message is passed as a single ``-m`` argument, so multi-line
        messages survive unchanged. Returns Git's standard output.

        Raises
        ------
        GitError
            If ``git commit`` exits with a non-zero status.
        """
        return self._run(["commit", "-m", message]).stdout
