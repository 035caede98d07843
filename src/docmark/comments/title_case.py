# docmark:header:start
#
#   project      : DocMark
#   file         : title_case.py
#   file_relpath : src/docmark/comments/title_case.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Title-casing of ``// MARK:`` section headers.

For every MARK line the text after ``MARK:`` is split into an optional divider
portion (``- ``) and a title. Backtick-quoted parts of the title are kept
verbatim; every other word is title-cased:

- identifiers (tokens with a digit or underscore) and tokens that already hold
  uppercase letters are kept as written;
- ``@unchecked`` attributes are always normalized to lowercase, other ``@`` and
  ``#`` attributes are kept as written;
- interior minor words (``and``, ``of``, ``to``...) stay lowercase, while the
  first and last word of the title are always capitalized;
- hyphenated words only get their first segment capitalized.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from docmark.comments.types import ReplaceEdit
from docmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)

MINOR_WORDS: Final[frozenset[str]] = frozenset(
    {
        "a",
        "an",
        "the",
        "and",
        "but",
        "or",
        "nor",
        "for",
        "so",
        "yet",
        "as",
        "at",
        "by",
        "from",
        "in",
        "into",
        "of",
        "on",
        "onto",
        "over",
        "per",
        "to",
        "up",
        "via",
        "vs",
        "vs.",
        "with",
    }
)

MARK_HEADER_RE: re.Pattern[str] = re.compile(r"^(\s*//\s*MARK:)(?=\s|$|-)(.*)$")
SEPARATOR_RE: re.Pattern[str] = re.compile(r"^(\s*-?\s*)(.*?)(\s*)$")
CODE_SPLIT_RE: re.Pattern[str] = re.compile(r"(`[^`]*`)")
UNCHECKED_RE: re.Pattern[str] = re.compile(r"^@unchecked\b", re.IGNORECASE)
_IDENTIFIER_RE: re.Pattern[str] = re.compile(r"[0-9_]")
_UPPER_RE: re.Pattern[str] = re.compile(r"[A-Z]")


def _capitalize_first_letter(word: str) -> str:
    for i, ch in enumerate(word):
        if ch.isalpha():
            return word[:i] + ch.upper() + word[i + 1 :]
    return word


def title_case_word(word: str, *, is_first: bool, is_last: bool) -> str:
    """Return ``word`` cased for a title.

    Args:
        word (str): A single whitespace-free token.
        is_first (bool): Whether this is the first word of the title.
        is_last (bool): Whether this is the last word of the title.

    Returns:
        str: The cased token.
    """
    if UNCHECKED_RE.match(word):
        return UNCHECKED_RE.sub("@unchecked", word)
    if word.startswith(("@", "#")):
        return word
    if _IDENTIFIER_RE.search(word) or _UPPER_RE.search(word):
        return word
    if not (is_first or is_last) and word.lower() in MINOR_WORDS:
        return word
    if "-" in word:
        head, sep, tail = word.partition("-")
        return _capitalize_first_letter(head) + sep + tail
    return _capitalize_first_letter(word)


def title_case(title: str) -> str:
    """Title-case a MARK title, keeping backtick-quoted code verbatim.

    Args:
        title (str): The title text (without ``MARK:`` and divider).

    Returns:
        str: The title-cased text; whitespace is preserved.
    """
    # (is_code, text) pieces; code pieces count as words for first/last purposes.
    pieces: list[tuple[bool, str]] = []
    for part in CODE_SPLIT_RE.split(title):
        if not part:
            continue
        if CODE_SPLIT_RE.fullmatch(part):
            pieces.append((True, part))
        else:
            pieces.extend((False, tok) for tok in re.split(r"(\s+)", part) if tok)

    word_positions = [i for i, (_, tok) in enumerate(pieces) if not tok.isspace()]
    if not word_positions:
        return title
    first, last = word_positions[0], word_positions[-1]

    out: list[str] = []
    for i, (is_code, tok) in enumerate(pieces):
        if is_code or tok.isspace():
            out.append(tok)
        else:
            out.append(title_case_word(tok, is_first=i == first, is_last=i == last))
    return "".join(out)


def title_case_mark_line(line: str) -> str | None:
    """Return the title-cased form of a MARK line, or None when ``line`` is not one."""
    m = MARK_HEADER_RE.match(line)
    if m is None:
        return None
    head, remainder = m.groups()
    parts = SEPARATOR_RE.match(remainder)
    if parts is None:  # pragma: no cover - the pattern matches any string
        return line
    lead, title, trailing = parts.groups()
    return head + lead + title_case(title) + trailing


def compute_title_case_edits(lines: Sequence[str], eol: str = "\n") -> list[ReplaceEdit]:
    """Compute whole-line replacements that title-case every MARK header.

    Args:
        lines (Sequence[str]): Document lines (0-indexed, without end-of-line markers).
        eol (str): End-of-line marker of the document. Each edit replaces a single
            line, so the marker never appears inside the replacement text.

    Returns:
        list[ReplaceEdit]: One edit per changed MARK line, in document order.
    """
    edits: list[ReplaceEdit] = []
    for line_no, line in enumerate(lines):
        cased = title_case_mark_line(line)
        if cased is None or cased == line:
            continue
        logger.trace("Title-cased MARK line %d: %r -> %r", line_no, line, cased)
        edits.append(ReplaceEdit(start_line=line_no, end_line=line_no, text=cased))
    logger.debug("Title-case pass produced %d edit(s) (eol=%r)", len(edits), eol)
    return edits
