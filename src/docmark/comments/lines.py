# docmark:header:start
#
#   project      : DocMark
#   file         : lines.py
#   file_relpath : src/docmark/comments/lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Line classification and comment block aggregation.

Two aggregation strategies are provided:

- [`iter_doc_blocks`][docmark.comments.lines.iter_doc_blocks] groups runs of
  ``///`` lines for span generation, so inline code and emphasis may continue
  across line boundaries within one documentation block.
- [`iter_comment_blocks`][docmark.comments.lines.iter_comment_blocks] groups
  whole-line ``//`` or ``///`` comments sharing prefix and indentation, which is
  the unit the reflow engine rewrites.

MARK detection is a per-line pattern evaluated independently of any block.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from docmark.comments.scanner import find_comment_start
from docmark.comments.types import (
    CommentBlock,
    CommentKind,
    CommentLine,
    LineClassification,
)
from docmark.config.logging import get_logger
from docmark.constants import DOC_PREFIX, LINE_PREFIX

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

logger = get_logger(__name__)

DOC_LINE_RE: re.Pattern[str] = re.compile(r"^(\s*)(///)(.*)$")
MARK_LINE_RE: re.Pattern[str] = re.compile(r"^(\s*)//\s*MARK:(?=\s|$|-)")
MARK_SEPARATOR_RE: re.Pattern[str] = re.compile(r"^(\s*)//\s*MARK:\s*-")


def first_non_whitespace_index(text: str) -> int | None:
    """Return the index of the first character that is not a space or tab."""
    for i, ch in enumerate(text):
        if ch not in " \t":
            return i
    return None


def is_doc_line(line: str) -> bool:
    """Return True for a ``///`` documentation comment line (span-generation pattern)."""
    return DOC_LINE_RE.match(line) is not None


def is_mark_line(line: str) -> bool:
    """Return True for ``// MARK:`` followed by whitespace, end of line or ``-``."""
    return MARK_LINE_RE.match(line) is not None


def is_mark_separator_line(line: str) -> bool:
    """Return True for ``// MARK: -`` section divider lines."""
    return MARK_SEPARATOR_RE.match(line) is not None


def classify_line(line: str) -> LineClassification:
    """Decide which kind of comment a line carries.

    Lines whose first non-blank characters are not a comment marker are scanned
    with [`find_comment_start`][docmark.comments.scanner.find_comment_start] so a
    trailing ``// comment`` after code is reported as a line comment.

    Args:
        line (str): One line of source text.

    Returns:
        LineClassification: The comment kind and the marker column.
    """
    start = first_non_whitespace_index(line)
    if start is None:
        return LineClassification(CommentKind.NONE)

    if line.startswith(DOC_PREFIX, start):
        return LineClassification(CommentKind.DOC, start)
    if is_mark_separator_line(line):
        return LineClassification(CommentKind.MARK_SEPARATOR, start)
    if is_mark_line(line):
        return LineClassification(CommentKind.MARK, start)
    if line.startswith(LINE_PREFIX, start):
        return LineClassification(CommentKind.LINE, start)

    column = find_comment_start(line)
    if column is None:
        return LineClassification(CommentKind.NONE)
    return LineClassification(CommentKind.LINE, column)


def parse_comment_line(line: str) -> CommentLine | None:
    """Split a whole-line comment into indentation, marker and remainder.

    ``///`` followed by a fourth ``/`` is not a doc comment, and ``//`` followed
    by a third ``/`` is not a line comment; such lines (and lines not starting
    with a marker) yield None.

    Args:
        line (str): One line of source text.

    Returns:
        CommentLine | None: The parts, or None for non-comment lines.
    """
    start = first_non_whitespace_index(line)
    if start is None:
        return None

    rest = line[start:]
    if rest.startswith(DOC_PREFIX) and not rest.startswith("////"):
        prefix = DOC_PREFIX
    elif rest.startswith(LINE_PREFIX) and not rest.startswith(DOC_PREFIX):
        prefix = LINE_PREFIX
    else:
        return None

    return CommentLine(
        indent=line[:start],
        prefix=prefix,
        after_prefix=line[start + len(prefix) :],
        original=line,
    )


def iter_doc_blocks(lines: Sequence[str]) -> Iterator[CommentBlock]:
    """Yield maximal runs of contiguous ``///`` lines.

    Non-matching lines are skipped individually; only documentation lines
    aggregate, because inline formatting may span their line boundaries.

    Args:
        lines (Sequence[str]): Document lines (0-indexed).

    Yields:
        CommentBlock: One block per run of doc comment lines.
    """
    i = 0
    n = len(lines)
    while i < n:
        m = DOC_LINE_RE.match(lines[i])
        if m is None:
            i += 1
            continue
        j = i + 1
        while j < n and DOC_LINE_RE.match(lines[j]):
            j += 1
        yield CommentBlock(
            prefix=DOC_PREFIX,
            indent=m.group(1),
            start_line=i,
            lines=tuple(lines[i:j]),
        )
        i = j


def iter_comment_blocks(lines: Sequence[str]) -> Iterator[CommentBlock]:
    """Yield reflow blocks of whole-line comments sharing prefix and indentation.

    A block's prefix and indentation are fixed by its first line; the first
    line with a different prefix, a different indentation or no comment marker
    ends the block (exclusive).

    Args:
        lines (Sequence[str]): Document lines (0-indexed).

    Yields:
        CommentBlock: One block per run of compatible comment lines.
    """
    i = 0
    n = len(lines)
    while i < n:
        first = parse_comment_line(lines[i])
        if first is None:
            i += 1
            continue

        j = i + 1
        while j < n:
            parts = parse_comment_line(lines[j])
            if parts is None or parts.prefix != first.prefix or parts.indent != first.indent:
                break
            j += 1

        logger.trace("Comment block %r at lines %d-%d", first.prefix, i, j - 1)
        yield CommentBlock(
            prefix=first.prefix,
            indent=first.indent,
            start_line=i,
            lines=tuple(lines[i:j]),
        )
        i = j
