# docmark:header:start
#
#   project      : DocMark
#   file         : doc_tags.py
#   file_relpath : src/docmark/comments/doc_tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Parser for documentation callout lines.

Two lexical forms are recognized against the text following ``///``:

1. ``- Parameter <name>: <description>`` (``Parameter`` matched case-insensitively).
2. ``- <word>: <description>``, where ``<word>`` is a documentation keyword
   (``Returns``, ``Throws``, ``Note``...) or, when it is not in the vocabulary,
   an implicit parameter name listed under ``- Parameters:``.

The parsed [`DocTagMatch`][docmark.comments.types.DocTagMatch] is reused by span
generation (keyword highlighting) and by reflow (description re-wrapping with
aligned continuation lines).
"""

from __future__ import annotations

import re
from typing import Final

from docmark.comments.types import DocTagMatch

DOC_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "attention",
        "author",
        "authors",
        "bug",
        "complexity",
        "copyright",
        "date",
        "experiment",
        "important",
        "invariant",
        "note",
        "parameter",
        "parameters",
        "postcondition",
        "precondition",
        "remark",
        "remarks",
        "requires",
        "returns",
        "seealso",
        "since",
        "tag",
        "throws",
        "todo",
        "version",
        "warning",
    }
)

SINGLE_PARAMETER_RE: re.Pattern[str] = re.compile(
    r"^(\s*-\s+)(Parameter)(\s+)(\w+)(\s*:\s*)(.*)", re.IGNORECASE
)
TAG_LINE_RE: re.Pattern[str] = re.compile(r"^(\s*-\s+)(\w+)(\s*:\s*)(.*)")


def is_doc_keyword(word: str) -> bool:
    """Return True when ``word`` (any case) is a documentation keyword."""
    return word.lower() in DOC_KEYWORDS


def parse_doc_tag(after_prefix: str) -> DocTagMatch | None:
    """Parse a documentation callout line.

    Args:
        after_prefix (str): The text immediately following ``///``, spacing included.

    Returns:
        DocTagMatch | None: The parsed tag, or None when the line is not a doc tag
            (callers fall back to generic text handling).
    """
    m = SINGLE_PARAMETER_RE.match(after_prefix)
    if m:
        list_prefix, keyword, space, name, colon, description = m.groups()
        head = list_prefix + keyword + space + name
        return DocTagMatch(
            structural_prefix=head + colon,
            list_prefix=list_prefix,
            description=description,
            tag_word=keyword.lower(),
            keyword_start=len(list_prefix),
            keyword_end=len(head) + colon.index(":") + 1,
            is_known_keyword=True,
        )

    m = TAG_LINE_RE.match(after_prefix)
    if m:
        list_prefix, word, colon, description = m.groups()
        head = list_prefix + word
        return DocTagMatch(
            structural_prefix=head + colon,
            list_prefix=list_prefix,
            description=description,
            tag_word=word.lower(),
            keyword_start=len(list_prefix),
            keyword_end=len(head) + colon.index(":") + 1,
            is_known_keyword=is_doc_keyword(word),
        )

    return None
