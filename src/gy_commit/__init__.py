"""
Top-level package for gy_commit.

This package exposes the main CLI entry point via the
``gy_commit.cli`` module.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
