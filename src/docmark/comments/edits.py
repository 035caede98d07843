# docmark:header:start
#
#   project      : DocMark
#   file         : edits.py
#   file_relpath : src/docmark/comments/edits.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Host-side helpers that apply engine edits to a list of lines.

The engine only describes edits; applying them is the host's job. These helpers
are what the CLI (and the tests) use. Replacements are applied in descending
start-line order so earlier line numbers stay valid while later blocks change
size.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from docmark.comments.types import InsertEdit, ReplaceEdit


def apply_insert_edits(lines: Sequence[str], edits: Iterable[InsertEdit]) -> list[str]:
    """Return a copy of ``lines`` with every insertion applied.

    Insertions on the same line are applied right to left so columns refer to
    the original text.
    """
    result = list(lines)
    for edit in sorted(edits, key=lambda e: (e.line, e.column), reverse=True):
        text = result[edit.line]
        result[edit.line] = text[: edit.column] + edit.text + text[edit.column :]
    return result


def apply_replace_edits(
    lines: Sequence[str],
    edits: Iterable[ReplaceEdit],
    eol: str = "\n",
) -> list[str]:
    """Return a copy of ``lines`` with every replacement applied.

    Args:
        lines (Sequence[str]): Original document lines.
        edits (Iterable[ReplaceEdit]): Non-overlapping replacements.
        eol (str): The marker that joins lines inside ``ReplaceEdit.text``.

    Returns:
        list[str]: The updated lines.
    """
    result = list(lines)
    for edit in sorted(edits, key=lambda e: e.start_line, reverse=True):
        result[edit.start_line : edit.end_line + 1] = edit.text.split(eol)
    return result
