# docmark:header:start
#
#   project      : DocMark
#   file         : __init__.py
#   file_relpath : src/docmark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""DocMark CLI package.

This package groups all Click command definitions and supporting utilities
for the DocMark command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        docmark = "docmark.cli.main:cli"

All subcommands live in [`docmark.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
