#!/usr/bin/env python
"""
Thin wrapper script to invoke the gy CLI.

Running ``python gy.py`` is equivalent to running the ``gy`` console
script installed via ``pyproject.toml``.
"""

from gy_commit.cli import main


if __name__ == "__main__":
    main(prog_name="gy")
