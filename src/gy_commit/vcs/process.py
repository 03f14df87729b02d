"""
Thin wrapper around :func:`subprocess.run`.

Every external program gy launches (``git`` for diffs and commits, the
operator's editor) goes through :func:`run_command`, so the rest of the
code only sees a :class:`CommandResult` and tests can patch a single
function instead of :mod:`subprocess`.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass
class CommandResult:
    """Exit status and captured output of a finished command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(
    args: List[str],
    cwd: Optional[Union[str, Path]] = None,
    capture: bool = True,
) -> CommandResult:
    """Run ``args`` and block until the process exits.

    Parameters
    ----------
    args : List[str]
        Program and arguments. No shell is involved.
    cwd : str or Path, optional
        Working directory for the child process.
    capture : bool, optional
        When True (the default) stdout and stderr are captured and
        decoded as UTF-8, replacing undecodable bytes. When False the
        child inherits the terminal, which is what an interactive
        editor needs; the returned output fields are then empty.

    Raises
    ------
    OSError
        If the program cannot be started at all (e.g. it is not on
        ``PATH``). Callers translate this into their own error type.
    """
    logger.debug("Executing command: %s", " ".join(args))
    if not capture:
        completed = subprocess.run(args, cwd=cwd)
        return CommandResult(returncode=completed.returncode)

    completed = subprocess.run(
        args,
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    return CommandResult(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
