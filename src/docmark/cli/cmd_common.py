# docmark:header:start
#
#   project      : DocMark
#   file         : cmd_common.py
#   file_relpath : src/docmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Common command utilities for Click-based commands.

This module holds the plumbing shared by the subcommands: building the
effective configuration from the Click context, and the read/edit/report/write
loop of the rewriting commands (``wrap``, ``title-case``, ``convert``).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from docmark.cli.errors import DocmarkConfigError
from docmark.cli.exit_codes import ExitCode
from docmark.cli.io import read_document, write_document
from docmark.config.logging import get_logger
from docmark.config.model import Config, MutableConfig
from docmark.core.diagnostics import DiagnosticLevel
from docmark.utils.diff import make_patch

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping, Sequence

    from docmark.cli.console import ClickConsole
    from docmark.cli.io import Document

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the root context by the ``cli`` group."""
    return ctx.find_root().obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-1`` quiet, ``0`` default, ``>0`` verbose)."""
    obj: Any = ctx.find_root().obj or {}
    return int(obj.get("verbosity_level", 0))


def build_config(ctx: click.Context, overrides: Mapping[str, Any] | None = None) -> Config:
    """Build the effective configuration for a command.

    Layers the bundled defaults, discovered project files (unless
    ``--no-config``), explicit ``--config`` files and ``overrides``. Warnings
    are printed; errors abort with [`DocmarkConfigError`][docmark.cli.errors.DocmarkConfigError].

    Args:
        ctx (click.Context): Current Click context.
        overrides (Mapping[str, Any] | None): CLI values; None entries are ignored.

    Returns:
        Config: The frozen configuration.
    """
    obj: Any = ctx.find_root().obj or {}
    draft: MutableConfig = MutableConfig.load_merged(
        start=Path.cwd(),
        extra_files=[Path(p) for p in obj.get("config_paths", ())],
        use_project=not obj.get("no_config", False),
    )
    if overrides:
        draft.apply_cli_args(overrides)
    config: Config = draft.freeze()
    logger.debug("Effective config from %s", [str(p) for p in config.config_files])

    console = get_console(ctx)
    errors: list[str] = []
    for diag in config.diagnostics:
        if diag.level is DiagnosticLevel.ERROR:
            errors.append(diag.message)
        elif get_effective_verbosity(ctx) >= 0:
            console.warn(f"{diag.level.value}: {diag.message}")
    if errors:
        raise DocmarkConfigError("; ".join(errors))
    return config


def rewrite_files(
    ctx: click.Context,
    files: Iterable[str],
    transform: Callable[[Document], Sequence[str]],
    *,
    apply_changes: bool,
    show_diff: bool,
) -> None:
    """Run ``transform`` over every file and report, show or write the result.

    Exits with ``WOULD_CHANGE`` when a dry run found files to change, and with
    ``SUCCESS`` otherwise. Read and write failures raise the matching
    ``DocmarkError`` subclass.

    Args:
        ctx (click.Context): Current Click context.
        files (Iterable[str]): Paths given on the command line.
        transform (Callable[[Document], Sequence[str]]): Returns the new lines of a document.
        apply_changes (bool): Write changed files.
        show_diff (bool): Print a unified diff for changed files.
    """
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    n_changed: int = 0

    for name in files:
        doc: Document = read_document(name)
        updated: list[str] = list(transform(doc))
        if tuple(updated) == doc.lines:
            if vlevel > 0:
                console.print(f"{console.styled('unchanged', fg='green')}  {name}")
            continue

        n_changed += 1
        if show_diff:
            patch: str | None = make_patch(doc.lines, updated, path=name, eol=doc.eol)
            if patch is not None:
                console.print(patch.replace("\r\n", "\n"), nl=False)
        if apply_changes:
            write_document(doc, updated)
            if vlevel >= 0:
                console.print(f"{console.styled('updated', fg='cyan', bold=True)}  {name}")
        elif vlevel >= 0 and not show_diff:
            console.print(f"{console.styled('would change', fg='yellow', bold=True)}  {name}")

    logger.info("%d file(s) %s", n_changed, "updated" if apply_changes else "would change")
    if n_changed and not apply_changes:
        ctx.exit(ExitCode.WOULD_CHANGE)
    ctx.exit(ExitCode.SUCCESS)
