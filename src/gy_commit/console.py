"""
Operator-facing output helpers.

Progress lines, warnings and errors go to stderr, leaving stdout for
message text and git output.
"""

from __future__ import annotations

import time

import click


class ProgressIndicator:
    """Print ``message...`` while a blocking call runs, then a status mark."""

    def __init__(self, message: str, err: bool = True) -> None:
        self.message = message
        self.err = err
        self.start_time = 0.0

    def __enter__(self) -> "ProgressIndicator":
        self.start_time = time.time()
        click.echo(f"⠋ {self.message}...", nl=False, err=self.err)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        elapsed = time.time() - self.start_time
        mark = "✗" if exc_type is not None else "✓"
        click.echo(f"\r{mark} {self.message} (took {elapsed:.1f}s)", err=self.err)
        return False


def print_warning(message: str, indent: int = 0) -> None:
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}", err=True)


def print_error(message: str, indent: int = 0) -> None:
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)
