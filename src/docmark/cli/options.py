# docmark:header:start
#
#   project      : DocMark
#   file         : options.py
#   file_relpath : src/docmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Common CLI option utilities for the DocMark CLI.

This module centralizes reusable options (verbosity, color, config, rewrite
intent) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ParamSpec, TypeVar

import click

from docmark.cli.errors import DocmarkUsageError

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, otherwise the ``-v`` count.

    Raises:
        DocmarkUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DocmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress per-file messages.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` option."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable ANSI colors in program output.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config FILE`` (repeatable) and ``--no-config``."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore project config files (only use defaults and --config files).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_rewrite_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--apply`` and ``--diff`` for commands that rewrite files."""
    f = click.option(
        "--diff",
        is_flag=True,
        help="Show a unified diff of the changes.",
    )(f)
    f = click.option(
        "--apply",
        "apply_changes",
        is_flag=True,
        help="Write changes to the files (default is a dry run).",
    )(f)
    return f


def files_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the positional ``FILES`` argument (one or more paths)."""
    return click.argument(
        "files",
        nargs=-1,
        required=True,
        type=click.Path(dir_okay=False, path_type=str),
    )(f)
