# docmark:header:start
#
#   project      : DocMark
#   file         : convert.py
#   file_relpath : src/docmark/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""DocMark `convert` command: turn ``//`` comment lines into ``///`` doc comments."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docmark import api
from docmark.cli.cmd_common import rewrite_files
from docmark.cli.options import CONTEXT_SETTINGS, common_rewrite_options, files_argument
from docmark.comments.edits import apply_insert_edits

if TYPE_CHECKING:
    from docmark.cli.io import Document


@click.command(
    name="convert",
    help="Convert // comment lines in FILES into /// documentation comments.",
    context_settings=CONTEXT_SETTINGS,
)
@files_argument
@common_rewrite_options
def convert_command(*, files: tuple[str, ...], apply_changes: bool, diff: bool) -> None:
    """Convert line comments to doc comments."""
    ctx = click.get_current_context()

    def transform(doc: Document) -> list[str]:
        return apply_insert_edits(doc.lines, api.compute_convert_edits(doc.lines))

    rewrite_files(ctx, files, transform, apply_changes=apply_changes, show_diff=diff)
