# docmark:header:start
#
#   project      : DocMark
#   file         : __main__.py
#   file_relpath : src/docmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Module entry point for running DocMark via ``python -m docmark``.

Delegates to :func:`docmark.cli.main.cli` so there is a single CLI entry point
regardless of how DocMark is launched.

Examples:
    Reflow comments in a file (dry run)::

        python -m docmark wrap Sources/App.swift
"""

from __future__ import annotations

from docmark.cli.main import cli

if __name__ == "__main__":
    cli()
