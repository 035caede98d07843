# docmark:header:start
#
#   project      : DocMark
#   file         : reflow.py
#   file_relpath : src/docmark/comments/reflow.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Structure-preserving reflow of ``//`` and ``///`` comment blocks.

Each block from [`iter_comment_blocks`][docmark.comments.lines.iter_comment_blocks]
is processed in a single pass with two modes ("in fenced code" and "in list")
and an accumulating paragraph buffer:

- fenced code (```` ``` ````) is copied verbatim;
- blank lines, tool directives and table/ASCII-art lines end the paragraph and
  are copied verbatim (blank lines become a bare prefix);
- doc tags (``- Returns: ...``) absorb their aligned continuation lines and are
  re-wrapped with continuation lines aligned under the bullet;
- doc headings (``Discussion:``) are hard boundaries;
- caps labels (``NOTE:``) start a new paragraph;
- list items switch to list mode, in which lines are copied verbatim;
- everything else is prose, greedily re-wrapped to the available width.

A block yields a [`ReplaceEdit`][docmark.comments.types.ReplaceEdit] only when
its wrapped form differs from the original lines.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from docmark.comments.caps_label import find_doc_colon_heading, find_leading_caps_label
from docmark.comments.doc_tags import parse_doc_tag
from docmark.comments.lines import iter_comment_blocks, parse_comment_line
from docmark.comments.types import CommentBlock, CommentLine, DocTagMatch, ReplaceEdit
from docmark.config.logging import get_logger
from docmark.constants import DOC_PREFIX, MIN_WRAP_WIDTH

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)

FENCE: str = "```"

DIRECTIVE_RE: re.Pattern[str] = re.compile(
    r"^(?:swiftlint(?::|\b)|swiftformat(?::|\b)|swift-format-ignore\b|clang-format\b"
    r"|sourcery:|(?-i:MARK:))",
    re.IGNORECASE,
)
ASCII_RULE_RE: re.Pattern[str] = re.compile(r"[-=]{4,}")
LIST_BULLET_RE: re.Pattern[str] = re.compile(r"^(\s*)([-*+])\s+")
LIST_NUMBER_RE: re.Pattern[str] = re.compile(r"^(\s*)(\d+)([.)])\s+")
SENTENCE_END_RE: re.Pattern[str] = re.compile(r"[.!?][\"'”’»)\]]*$")


# --- Recognizers (text after the comment marker, leading whitespace removed) ---


def is_fence_line(text: str) -> bool:
    """Return True for a Markdown code fence."""
    return text.startswith(FENCE)


def is_directive_line(text: str) -> bool:
    """Return True for a tool directive such as ``swiftlint:disable``."""
    return DIRECTIVE_RE.match(text) is not None


def is_table_or_ascii_art_line(text: str) -> bool:
    """Return True for table rows (two or more ``|``) and ``----``/``====`` rules."""
    return text.count("|") >= 2 or ASCII_RULE_RE.search(text) is not None


def is_list_item(text: str) -> bool:
    """Return True for a bullet (``-``, ``*``, ``+``) or numbered (``1.``, ``1)``) item."""
    return LIST_BULLET_RE.match(text) is not None or LIST_NUMBER_RE.match(text) is not None


def ends_sentence(fragment: str) -> bool:
    """Return True when ``fragment`` ends in ``.``, ``!`` or ``?`` plus optional closers."""
    return SENTENCE_END_RE.search(fragment.rstrip()) is not None


def clamp_width(max_width: int | None) -> int:
    """Clamp a requested width to the floor; missing or non-positive values become the floor."""
    try:
        width = int(max_width or 0)
    except (TypeError, ValueError):
        width = 0
    return max(MIN_WRAP_WIDTH, width)


def _starts_structure(text: str) -> bool:
    """Return True when a line beginning with ``text`` would not read back as prose."""
    return is_list_item(text) or is_fence_line(text) or is_directive_line(text)


def wrap_words(text: str, max_width: int) -> list[str]:
    """Greedily wrap ``text`` so no line exceeds ``max_width``, never splitting a token.

    Wrapped lines must read back as prose when wrapped again: a continuation line
    never begins with a list marker, fence or directive (the preceding word is
    carried down with it, which may leave that line over width), and separate
    tokens never put two ``|`` on one line.

    Args:
        text (str): The text to wrap; any whitespace separates tokens.
        max_width (int): Maximum line length (at least 1).

    Returns:
        list[str]: The wrapped lines; ``[""]`` for text without tokens.
    """
    width = max(1, int(max_width))
    tokens = text.split()
    if not tokens:
        return [""]

    lines: list[str] = []
    current: list[str] = []
    for index, token in enumerate(tokens):
        joined = " ".join(current)
        if not current or (
            len(joined) + 1 + len(token) <= width
            and joined.count("|") + token.count("|") < 2
        ):
            current.append(token)
            continue

        lookahead = tokens[index + 1 : index + 2]
        carried = [token]
        while len(current) > 1 and _starts_structure(" ".join([*carried, *lookahead])):
            if (current[-1] + " ".join(carried)).count("|") >= 2:
                break
            carried.insert(0, current.pop())
        lines.append(" ".join(current))
        current = carried
    lines.append(" ".join(current))
    return lines


# --- Block wrapping ---


@dataclass
class _BlockWriter:
    """Output buffer and policies for one block."""

    indent: str
    prefix: str
    max_width: int
    count_from_comment_start: bool
    avoid_punctuation_breaks: bool
    output: list[str] = field(default_factory=lambda: [])
    paragraph: list[str] = field(default_factory=lambda: [])

    @property
    def lead_width(self) -> int:
        """Columns taken before the comment text (indent counted unless disabled)."""
        return (0 if self.count_from_comment_start else len(self.indent)) + len(self.prefix)

    def emit(self, line: str) -> None:
        self.output.append(line)

    def emit_blank(self) -> None:
        self.output.append(self.indent + self.prefix)

    def add_to_paragraph(self, fragment: str) -> None:
        if (
            self.avoid_punctuation_breaks
            and self.paragraph
            and ends_sentence(self.paragraph[-1])
        ):
            self.flush_paragraph()
        self.paragraph.append(fragment)

    def flush_paragraph(self) -> None:
        if not self.paragraph:
            return
        available = max(1, self.max_width - (self.lead_width + 1))
        joined = " ".join(p.strip() for p in self.paragraph if p.strip())
        for line in wrap_words(joined, available):
            if line:
                self.output.append(f"{self.indent}{self.prefix} {line}")
            else:
                self.emit_blank()
        self.paragraph.clear()

    def emit_doc_tag(self, keyword_prefix: str, continuation_width: int, description: str) -> None:
        available = max(1, self.max_width - (self.lead_width + len(keyword_prefix)))
        head = f"{self.indent}{self.prefix}"
        if not description:
            self.output.append(head + keyword_prefix.rstrip())
            return
        wrapped = wrap_words(description, available)
        self.output.append(head + keyword_prefix + wrapped[0])
        continuation = " " * continuation_width
        for line in wrapped[1:]:
            self.output.append(head + continuation + line)


def _normalized_prefixes(tag: DocTagMatch) -> tuple[str, str]:
    """Return ``(keyword_prefix, list_prefix)`` with keyword whitespace normalized."""
    if not tag.is_known_keyword:
        return tag.structural_prefix, tag.list_prefix
    return " " + tag.structural_prefix.lstrip(), " " + tag.list_prefix.lstrip()


def continuation_widths(tag: DocTagMatch) -> list[int]:
    """Return the accepted continuation indents for a doc tag, longest first.

    Both description-aligned (legacy) and bullet-aligned continuations are
    accepted, each in original and whitespace-normalized form.
    """
    keyword_prefix, list_prefix = _normalized_prefixes(tag)
    widths: list[int] = []
    for candidate in (
        len(tag.structural_prefix),
        len(keyword_prefix),
        len(tag.list_prefix),
        len(list_prefix),
    ):
        if candidate not in widths:
            widths.append(candidate)
    return sorted(widths, reverse=True)


def _continuation_text(after: str, widths: Sequence[int]) -> str | None:
    """Return the text of ``after`` when it starts with an accepted run of spaces.

    ``widths`` is tried in order (longest first); the first width whose run of
    spaces prefixes ``after`` wins, so deeper-indented lines are absorbed too.
    """
    for width in widths:
        if len(after) < width or after[:width] != " " * width:
            continue
        remainder = after[width:]
        return remainder.strip() if remainder.strip() else None
    return None


def _is_hard_break(text: str) -> bool:
    return is_fence_line(text) or is_directive_line(text) or is_table_or_ascii_art_line(text)


def wrap_comment_block(
    block_lines: Sequence[str],
    max_width: int,
    *,
    count_from_comment_start: bool = False,
    avoid_punctuation_breaks: bool = False,
) -> list[str]:
    """Re-wrap one comment block.

    Args:
        block_lines (Sequence[str]): Lines of one block (same prefix and indentation).
        max_width (int): Maximum total line width (already clamped).
        count_from_comment_start (bool): Ignore the indentation when computing the
            available width.
        avoid_punctuation_breaks (bool): Start a new paragraph after a line ending
            a sentence instead of pulling the next line up.

    Returns:
        list[str]: The wrapped lines (equal to the input when nothing changes).
    """
    parsed = [parse_comment_line(line) for line in block_lines]
    if not parsed or any(p is None for p in parsed):
        return list(block_lines)
    parts: list[CommentLine] = [p for p in parsed if p is not None]

    first = parts[0]
    writer = _BlockWriter(
        indent=first.indent,
        prefix=first.prefix,
        max_width=max_width,
        count_from_comment_start=count_from_comment_start,
        avoid_punctuation_breaks=avoid_punctuation_breaks,
    )
    is_doc = first.prefix == DOC_PREFIX

    in_fence = False
    list_mode = False
    i = 0
    while i < len(parts):
        p = parts[i]
        after = p.after_prefix
        text = after.lstrip()
        i += 1

        if in_fence:
            writer.emit(p.original)
            if is_fence_line(text):
                in_fence = False
            continue

        if is_fence_line(text):
            writer.flush_paragraph()
            list_mode = False
            in_fence = True
            writer.emit(p.original)
            continue

        if not text.strip():
            writer.flush_paragraph()
            list_mode = False
            writer.emit_blank()
            continue

        if is_directive_line(text) or is_table_or_ascii_art_line(text):
            writer.flush_paragraph()
            list_mode = False
            writer.emit(p.original)
            continue

        if is_doc:
            tag = parse_doc_tag(after)
            if tag is not None:
                writer.flush_paragraph()
                list_mode = False
                i = _consume_doc_tag(writer, tag, parts, i)
                continue

            if find_doc_colon_heading(after) is not None and not is_list_item(text):
                writer.flush_paragraph()
                list_mode = False
                writer.emit(p.original)
                continue

        if find_leading_caps_label(after) is not None:
            writer.flush_paragraph()
            list_mode = False

        if is_list_item(text):
            writer.flush_paragraph()
            list_mode = True
            writer.emit(p.original)
            continue

        if list_mode:
            writer.emit(p.original)
            continue

        writer.add_to_paragraph(after[1:] if after.startswith(" ") else after)

    writer.flush_paragraph()
    return writer.output


def _consume_doc_tag(
    writer: _BlockWriter,
    tag: DocTagMatch,
    parts: Sequence[CommentLine],
    index: int,
) -> int:
    """Emit a doc tag and its absorbed continuation lines; return the next index."""
    widths = continuation_widths(tag)
    fragments: list[str] = []
    if tag.description.strip():
        fragments.append(tag.description.strip())

    while index < len(parts):
        after = parts[index].after_prefix
        text = after.lstrip()
        if not text.strip() or _is_hard_break(text) or is_list_item(text):
            break
        remainder = _continuation_text(after, widths)
        if remainder is None:
            break
        fragments.append(remainder)
        index += 1

    keyword_prefix, list_prefix = _normalized_prefixes(tag)
    writer.emit_doc_tag(keyword_prefix, len(list_prefix), " ".join(fragments))
    return index


def compute_wrap_edits(
    lines: Sequence[str],
    max_width: int | None,
    eol: str = "\n",
    count_from_comment_start: bool = False,
    avoid_punctuation_breaks: bool = False,
) -> list[ReplaceEdit]:
    """Compute replacement edits that re-wrap every comment block of a document.

    Args:
        lines (Sequence[str]): Document lines (0-indexed, without end-of-line markers).
        max_width (int | None): Requested maximum line width; clamped to a floor of 40.
        eol (str): End-of-line marker used to join replacement lines.
        count_from_comment_start (bool): Ignore indentation when computing widths.
        avoid_punctuation_breaks (bool): Keep sentence-ending lines as paragraph ends.

    Returns:
        list[ReplaceEdit]: One edit per changed block, in document order.
    """
    width = clamp_width(max_width)
    edits: list[ReplaceEdit] = []
    for block in iter_comment_blocks(lines):
        wrapped = wrap_comment_block(
            block.lines,
            width,
            count_from_comment_start=count_from_comment_start,
            avoid_punctuation_breaks=avoid_punctuation_breaks,
        )
        if tuple(wrapped) == block.lines:
            continue
        logger.debug(
            "Re-wrapped block %d-%d (%d -> %d lines)",
            block.start_line,
            block.end_line,
            len(block.lines),
            len(wrapped),
        )
        edits.append(_replace_block(block, wrapped, eol))
    return edits


def _replace_block(block: CommentBlock, wrapped: Sequence[str], eol: str) -> ReplaceEdit:
    return ReplaceEdit(start_line=block.start_line, end_line=block.end_line, text=eol.join(wrapped))
