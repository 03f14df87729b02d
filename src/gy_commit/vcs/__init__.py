"""
Version control system (VCS) integration.

This package contains the :class:`GitClient` used to read staged and
unstaged diffs and to create the final commit, plus the small process
runner it (and the external editor) is built on.
"""

from .git_client import GitClient, GitError  # noqa: F401
from .process import CommandResult, run_command  # noqa: F401
