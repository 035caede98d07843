# docmark:header:start
#
#   project      : DocMark
#   file         : spans.py
#   file_relpath : src/docmark/comments/spans.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Span generation for one document snapshot.

[`classify`][docmark.comments.spans.classify] walks the document once and
produces spans in three layers:

- **structural**: ``///`` markers, structural indentation and list prefixes,
  MARK separator lines;
- **emphasis**: plain text, inline code, emphasis and delimiters from the
  inline tokenizer (doc blocks), plus inline code inside plain ``//`` comments;
- **semantic**: doc-tag keywords, caps labels and doc headings, MARK titles.

Spans are returned sorted by line, then start column.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from docmark.comments.caps_label import find_doc_colon_heading, find_leading_caps_label
from docmark.comments.doc_tags import parse_doc_tag
from docmark.comments.inline import InlineState, scan_segment, tokenize_inline
from docmark.comments.lines import DOC_LINE_RE, classify_line, iter_doc_blocks
from docmark.comments.types import (
    CommentBlock,
    CommentKind,
    Span,
    SpanKind,
    TextSegment,
)
from docmark.config.logging import get_logger
from docmark.constants import DOC_PREFIX, LINE_PREFIX

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)

# Leading whitespace plus an optional list marker, drawn as structural indentation.
STRUCTURAL_PREFIX_RE: re.Pattern[str] = re.compile(r"^\s*(?:(?:[-*+]|\d+[.)])\s+)?")


def _caps_or_heading_span(line_no: int, base: int, after: str, *, doc: bool) -> Span | None:
    label = find_leading_caps_label(after)
    if label is not None:
        return Span(
            line_no,
            base + label.label_start,
            base + label.colon_index + 1,
            SpanKind.CAPS_LABEL,
        )
    if doc:
        heading = find_doc_colon_heading(after)
        if heading is not None:
            return Span(
                line_no,
                base + heading.heading_start,
                base + heading.colon_index + 1,
                SpanKind.CAPS_LABEL,
            )
    return None


def classify_doc_block(block: CommentBlock) -> list[Span]:
    """Produce spans for one run of ``///`` lines.

    Doc-tag lines contribute their structural prefix and keyword directly; their
    description, and the text of every other line, is fed to the inline
    tokenizer as one segment list so formatting continues across lines.

    Args:
        block (CommentBlock): A block from
            [`iter_doc_blocks`][docmark.comments.lines.iter_doc_blocks].

    Returns:
        list[Span]: Spans for all lines of the block (unsorted).
    """
    spans: list[Span] = []
    segments: list[TextSegment] = []

    for offset, line in enumerate(block.lines):
        line_no = block.start_line + offset
        m = DOC_LINE_RE.match(line)
        if m is None:  # pragma: no cover - blocks only hold doc lines
            continue
        slash_start = len(m.group(1))
        base = slash_start + len(DOC_PREFIX)
        after = m.group(3)
        spans.append(Span(line_no, slash_start, base, SpanKind.SLASH_MARKER))
        if not after:
            continue

        tag = parse_doc_tag(after)
        if tag is not None:
            if tag.keyword_start > 0:
                spans.append(
                    Span(line_no, base, base + tag.keyword_start, SpanKind.STRUCTURAL_INDENT)
                )
            spans.append(
                Span(
                    line_no,
                    base + tag.keyword_start,
                    base + tag.keyword_end,
                    SpanKind.DOC_KEYWORD,
                )
            )
            if tag.description:
                segments.append(
                    TextSegment(line_no, base + tag.description_start, tag.description)
                )
            continue

        prefix_match = STRUCTURAL_PREFIX_RE.match(after)
        prefix_len = prefix_match.end() if prefix_match else 0
        if prefix_len > 0:
            spans.append(Span(line_no, base, base + prefix_len, SpanKind.STRUCTURAL_INDENT))

        semantic = _caps_or_heading_span(line_no, base, after, doc=True)
        if semantic is not None:
            spans.append(semantic)

        if prefix_len < len(after):
            segments.append(TextSegment(line_no, base + prefix_len, after[prefix_len:]))

    spans.extend(tokenize_inline(segments))
    return spans


def classify_line_comment(
    line_no: int,
    line: str,
    comment_start: int,
    *,
    color_inline_code: bool,
) -> list[Span]:
    """Produce spans for a plain ``//`` comment (leading or trailing after code).

    Args:
        line_no (int): 0-based line index.
        line (str): The line text.
        comment_start (int): Column of the ``//`` marker.
        color_inline_code (bool): Whether to emit inline code spans.

    Returns:
        list[Span]: Caps-label and (optionally) inline code spans.
    """
    spans: list[Span] = []
    base = comment_start + len(LINE_PREFIX)
    after = line[base:]

    label = _caps_or_heading_span(line_no, base, after, doc=False)
    if label is not None:
        spans.append(label)

    if color_inline_code and "`" in after:
        state = InlineState(emphasis_enabled=False)
        scan_segment(TextSegment(line_no, base, after), state)
        spans.extend(s for s in state.finish() if s.kind is not SpanKind.PLAIN_TEXT)
    return spans


def classify_mark_line(
    line_no: int,
    line: str,
    comment_start: int,
    *,
    separator: bool,
    bold_mark_lines: bool,
    render_mark_separators: bool,
) -> list[Span]:
    """Produce spans for a ``// MARK:`` line."""
    spans: list[Span] = []
    if render_mark_separators and separator:
        spans.append(Span(line_no, comment_start, len(line), SpanKind.MARK_SEPARATOR))
    text_start = comment_start + len(LINE_PREFIX)
    if bold_mark_lines and text_start < len(line):
        spans.append(Span(line_no, text_start, len(line), SpanKind.MARK_BOLD))
    return spans


def classify(
    lines: Sequence[str],
    *,
    enabled: bool = True,
    bold_mark_lines: bool = True,
    render_mark_separators: bool = True,
    color_inline_code_in_comments: bool = True,
) -> list[Span]:
    """Produce all typed spans for one document snapshot.

    Args:
        lines (Sequence[str]): Document lines (0-indexed, without end-of-line markers).
        enabled (bool): When False, no spans are produced.
        bold_mark_lines (bool): Emit ``mark-bold`` spans for MARK lines.
        render_mark_separators (bool): Emit ``mark-separator`` spans for ``MARK: -`` lines.
        color_inline_code_in_comments (bool): Emit inline code spans inside plain
            ``//`` comments.

    Returns:
        list[Span]: Spans ordered by line and start column.
    """
    if not enabled:
        return []

    spans: list[Span] = []
    doc_lines: set[int] = set()

    for block in iter_doc_blocks(lines):
        doc_lines.update(range(block.start_line, block.end_line + 1))
        spans.extend(classify_doc_block(block))

    for line_no, line in enumerate(lines):
        if line_no in doc_lines:
            continue
        info = classify_line(line)
        if info.kind is CommentKind.NONE or info.comment_start is None:
            continue
        if info.kind in (CommentKind.MARK, CommentKind.MARK_SEPARATOR):
            spans.extend(
                classify_mark_line(
                    line_no,
                    line,
                    info.comment_start,
                    separator=info.kind is CommentKind.MARK_SEPARATOR,
                    bold_mark_lines=bold_mark_lines,
                    render_mark_separators=render_mark_separators,
                )
            )
        elif info.kind is CommentKind.LINE:
            spans.extend(
                classify_line_comment(
                    line_no,
                    line,
                    info.comment_start,
                    color_inline_code=color_inline_code_in_comments,
                )
            )

    spans.sort(key=lambda s: (s.line, s.start, s.end))
    logger.debug("Classified %d line(s) into %d span(s)", len(lines), len(spans))
    return spans
