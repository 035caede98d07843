# docmark:header:start
#
#   project      : DocMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""CLI test helpers for running DocMark in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click CLI, so relative file arguments resolve against it
and config discovery starts there. Tests create a ``docmark.toml`` with
``root = true`` in that directory (see `make_project`) so discovery never
reaches files outside the temporary tree.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from docmark.cli.exit_codes import ExitCode
from docmark.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def make_project(tmp_path: Path, config_text: str = "") -> Path:
    """Create an isolated project directory and return it.

    Args:
        tmp_path (Path): Pytest-provided temporary directory.
        config_text (str): Extra flat ``docmark.toml`` keys appended after ``root = true``.

    Returns:
        Path: The project directory.
    """
    project: Path = tmp_path / "proj"
    project.mkdir(exist_ok=True)
    (project / "docmark.toml").write_text("root = true\n" + config_text, encoding="utf-8")
    return project


def _argv(argv: Sequence[str], color: bool) -> list[str]:
    return list(argv) if color else ["--no-color", *argv]


def run_cli_in(tmp_path: Path, argv: Sequence[str], *, color: bool = False) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["wrap", "a.swift"]``.
        color (bool): Keep ANSI styling; by default ``--no-color`` is prepended so
            assertions can match plain text.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["wrap", "--apply", "a.swift"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, _argv(argv, color))
    finally:
        os.chdir(cwd)


def run_cli(argv: Sequence[str], *, color: bool = False) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not touch project files (``--help``,
    ``version``, ``config defaults``).
    """
    runner = CliRunner()
    return runner.invoke(cli, _argv(argv, color))


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that a dry run reported pending changes (code 2)."""
    # WOULD_CHANGE is a normal outcome, not a Click usage error.
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
    assert "Usage:" not in result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
