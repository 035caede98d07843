# docmark:header:start
#
#   project      : DocMark
#   file         : caps_label.py
#   file_relpath : src/docmark/comments/caps_label.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Detection of all-caps callout labels and colon-terminated doc headings.

Both detectors are shared between span generation and reflow so that whatever
renders bold also acts as a paragraph boundary when wrapping.

Pass the text that begins immediately after the comment marker; for
``// NOTE: hi`` that is ``" NOTE: hi"``. Returned offsets index into that text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

CAPS_LABEL_RE: re.Pattern[str] = re.compile(r"^[A-Z0-9_]+(?:[ \t]+[A-Z0-9_]+)*$")
HEADING_RE: re.Pattern[str] = re.compile(r"^[A-Za-z0-9_]+(?:[ \t]+[A-Za-z0-9_]+)*$")
_HAS_UPPER_RE: re.Pattern[str] = re.compile(r"[A-Z]")


@dataclass(frozen=True)
class CapsLabelMatch:
    """An all-caps label such as ``NOTE`` in ``NOTE: text``.

    Attributes:
        label_start (int): Offset of the first label character.
        label_end (int): Offset just past the label, whitespace before the colon excluded.
        colon_index (int): Offset of the terminating colon.
        label_text (str): The label without the colon.
    """

    label_start: int
    label_end: int
    colon_index: int
    label_text: str


@dataclass(frozen=True)
class DocColonHeadingMatch:
    """A heading line such as ``Discussion:`` that ends with a colon.

    Attributes:
        heading_start (int): Offset of the first heading character.
        heading_end (int): Offset just past the heading, whitespace before the colon excluded.
        colon_index (int): Offset of the terminating colon.
        heading_text (str): The heading without the colon.
    """

    heading_start: int
    heading_end: int
    colon_index: int
    heading_text: str


def _skip_leading_space(text: str) -> int:
    pos = 0
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _trim_back(text: str, start: int, end: int) -> int:
    while end > start and text[end - 1].isspace():
        end -= 1
    return end


def find_leading_caps_label(after_prefix: str) -> CapsLabelMatch | None:
    """Detect an all-caps label at the start of comment text.

    The candidate runs from the first non-blank character to the first colon;
    it must contain an ``A-Z`` letter and consist of all-caps words separated by
    spaces or tabs.

    Args:
        after_prefix (str): Comment text following the ``//`` or ``///`` marker.

    Returns:
        CapsLabelMatch | None: The label bounds, or None when there is no label.
    """
    label_start = _skip_leading_space(after_prefix)
    if label_start >= len(after_prefix):
        return None

    colon_index = after_prefix.find(":", label_start)
    if colon_index == -1:
        return None

    label_end = _trim_back(after_prefix, label_start, colon_index)
    if label_end <= label_start:
        return None

    candidate = after_prefix[label_start:label_end]
    if not _HAS_UPPER_RE.search(candidate) or not CAPS_LABEL_RE.match(candidate):
        return None

    return CapsLabelMatch(
        label_start=label_start,
        label_end=label_end,
        colon_index=colon_index,
        label_text=candidate,
    )


def find_doc_colon_heading(after_prefix: str) -> DocColonHeadingMatch | None:
    """Detect a non-list section heading that ends with a colon.

    The last non-blank character must be the colon and everything before it must
    be plain words (letters, digits, underscores) separated by spaces or tabs.

    Args:
        after_prefix (str): Doc comment text following the ``///`` marker.

    Returns:
        DocColonHeadingMatch | None: The heading bounds, or None when the line is
            not a heading.
    """
    heading_start = _skip_leading_space(after_prefix)
    if heading_start >= len(after_prefix):
        return None

    end_trim = _trim_back(after_prefix, heading_start, len(after_prefix))
    if end_trim <= heading_start or after_prefix[end_trim - 1] != ":":
        return None

    colon_index = end_trim - 1
    heading_end = _trim_back(after_prefix, heading_start, colon_index)
    if heading_end <= heading_start:
        return None

    candidate = after_prefix[heading_start:heading_end]
    if not HEADING_RE.match(candidate):
        return None

    return DocColonHeadingMatch(
        heading_start=heading_start,
        heading_end=heading_end,
        colon_index=colon_index,
        heading_text=candidate,
    )
