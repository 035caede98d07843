# docmark:header:start
#
#   project      : DocMark
#   file         : convert.py
#   file_relpath : src/docmark/comments/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Conversion of ``//`` line comments into ``///`` documentation comments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docmark.comments.lines import first_non_whitespace_index
from docmark.comments.types import InsertEdit
from docmark.config.logging import get_logger
from docmark.constants import DOC_PREFIX, LINE_PREFIX

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


def compute_convert_edits(lines: Sequence[str]) -> list[InsertEdit]:
    """Return one ``/`` insertion per whole-line ``//`` comment not already ``///``.

    Args:
        lines (Sequence[str]): Document lines (0-indexed, without end-of-line markers).

    Returns:
        list[InsertEdit]: Insertions placed immediately after the two slashes, in
            document order.
    """
    edits: list[InsertEdit] = []
    for line_no, text in enumerate(lines):
        start = first_non_whitespace_index(text)
        if start is None:
            continue
        rest = text[start:]
        if not rest.startswith(LINE_PREFIX) or rest.startswith(DOC_PREFIX):
            continue
        edits.append(InsertEdit(line=line_no, column=start + len(LINE_PREFIX), text="/"))
    logger.debug("Convert pass produced %d insertion(s)", len(edits))
    return edits
