# docmark:header:start
#
#   project      : DocMark
#   file         : wrap.py
#   file_relpath : src/docmark/cli/commands/wrap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""DocMark `wrap` command.

Re-wraps ``//`` and ``///`` comment blocks to the configured width. Without
``--apply`` this is a dry run that exits with ``WOULD_CHANGE`` (2) when any
file would be rewritten.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docmark import api
from docmark.cli.cmd_common import build_config, rewrite_files
from docmark.cli.options import CONTEXT_SETTINGS, common_rewrite_options, files_argument
from docmark.comments.edits import apply_replace_edits

if TYPE_CHECKING:
    from docmark.cli.io import Document


@click.command(
    name="wrap",
    help="Re-wrap comment blocks in FILES.",
    context_settings=CONTEXT_SETTINGS,
)
@files_argument
@click.option(
    "--width",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum line width (never below 40). Defaults to `wrap_width` from config.",
)
@click.option(
    "--count-from-comment-start/--count-from-column-zero",
    "count_from_comment_start",
    default=None,
    help="Measure the width from the comment marker instead of column 0.",
)
@click.option(
    "--avoid-punctuation-breaks/--allow-punctuation-breaks",
    "avoid_punctuation_breaks",
    default=None,
    help="Never join a sentence-ending line with the next one.",
)
@common_rewrite_options
def wrap_command(
    *,
    files: tuple[str, ...],
    width: int | None,
    count_from_comment_start: bool | None,
    avoid_punctuation_breaks: bool | None,
    apply_changes: bool,
    diff: bool,
) -> None:
    """Re-wrap comment blocks."""
    ctx = click.get_current_context()
    config = build_config(
        ctx,
        {
            "wrap_width": width,
            "wrap_count_from_comment_start": count_from_comment_start,
            "avoid_punctuation_breaks": avoid_punctuation_breaks,
        },
    )

    def transform(doc: Document) -> list[str]:
        edits = api.compute_wrap_edits(doc.lines, eol=doc.eol, config=config)
        return apply_replace_edits(doc.lines, edits, doc.eol)

    rewrite_files(ctx, files, transform, apply_changes=apply_changes, show_diff=diff)
