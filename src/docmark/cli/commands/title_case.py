# docmark:header:start
#
#   project      : DocMark
#   file         : title_case.py
#   file_relpath : src/docmark/cli/commands/title_case.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""DocMark `title-case` command: title-case ``// MARK:`` section headers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docmark import api
from docmark.cli.cmd_common import rewrite_files
from docmark.cli.options import CONTEXT_SETTINGS, common_rewrite_options, files_argument
from docmark.comments.edits import apply_replace_edits

if TYPE_CHECKING:
    from docmark.cli.io import Document


@click.command(
    name="title-case",
    help="Title-case the // MARK: headers in FILES.",
    context_settings=CONTEXT_SETTINGS,
)
@files_argument
@common_rewrite_options
def title_case_command(*, files: tuple[str, ...], apply_changes: bool, diff: bool) -> None:
    """Title-case MARK headers."""
    ctx = click.get_current_context()

    def transform(doc: Document) -> list[str]:
        edits = api.compute_title_case_edits(doc.lines, doc.eol)
        return apply_replace_edits(doc.lines, edits, doc.eol)

    rewrite_files(ctx, files, transform, apply_changes=apply_changes, show_diff=diff)
