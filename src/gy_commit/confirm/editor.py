"""
Editing a message in the operator's external editor.

The message is written to a fixed file in the system temp directory,
the editor named by ``$EDITOR`` (``vi`` if unset) is started on it with
the terminal attached, and the file is read back once the editor exits.
"""

from __future__ import annotations

import logging
import os
import shlex
import tempfile
from pathlib import Path
from typing import List, Mapping, Optional

from gy_commit.vcs import process


logger = logging.getLogger(__name__)
# Attach a null handler so nothing is printed until the CLI configures
# logging. Records still propagate to the root logger once it has handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


EDITOR_ENV_VAR = "EDITOR"
DEFAULT_EDITOR = "vi"
MESSAGE_FILENAME = "gy_commit_msg.txt"


class EditorError(Exception):
    """Raised when the editor cannot be started or exits with failure."""

    pass


def default_message_path() -> Path:
    return Path(tempfile.gettempdir()) / MESSAGE_FILENAME


class ExternalEditor:
    """Round-trip a message through a full-screen editor.

    Parameters
    ----------
    environ : Mapping[str, str], optional
        Environment to read ``EDITOR`` from. Defaults to :data:`os.environ`.
    path : Path, optional
        File the message is written to. Defaults to
        ``<tempdir>/gy_commit_msg.txt``.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, path: Optional[Path] = None) -> None:
        self.environ = os.environ if environ is None else environ
        self.path = path if path is not None else default_message_path()

    def command(self) -> List[str]:
        """Return the editor command line, e.g. ``["code", "--wait"]``."""
        editor = self.environ.get(EDITOR_ENV_VAR) or DEFAULT_EDITOR
        return shlex.split(editor) or [DEFAULT_EDITOR]

    def edit(self, message: str) -> str:
        """Open ``message`` in the editor and return the saved text, trimmed.

        Raises
        ------
        EditorError
            If ``$EDITOR`` cannot be parsed, the file cannot be written or
            read back as UTF-8, the editor cannot be started, or it exits
            with a non-zero status.
        """
        try:
            cmd = self.command() + [str(self.path)]
        except ValueError as exc:
            raise EditorError(f"Cannot parse ${EDITOR_ENV_VAR}: {exc}") from exc

        try:
            self._write_message(message)
            try:
                result = process.run_command(cmd, capture=False)
            except OSError as exc:
                raise EditorError(f"Failed to start editor '{cmd[0]}': {exc}") from exc
            if not result.ok:
                raise EditorError(f"Editor '{cmd[0]}' exited with status {result.returncode}")
            return self.path.read_text(encoding="utf-8").strip()
        except UnicodeDecodeError as exc:
            raise EditorError(f"Message file {self.path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise EditorError(f"Failed to edit message file {self.path}: {exc}") from exc
        finally:
            self._cleanup()

    def _write_message(self, message: str) -> None:
        # The path is fixed and shared; never follow or reuse whatever is there.
        self._cleanup()
        flags = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_NOFOLLOW", 0)
        fd = os.open(self.path, flags, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(message)

    def _cleanup(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.debug("Could not remove %s: %s", self.path, exc)
