# docmark:header:start
#
#   project      : DocMark
#   file         : inline.py
#   file_relpath : src/docmark/comments/inline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Inline tokenizer for backtick code spans and Markdown emphasis.

The tokenizer consumes the prefix-stripped text of one comment block as an
ordered list of line-local [`TextSegment`][docmark.comments.types.TextSegment]
records. A single [`InlineState`][docmark.comments.inline.InlineState]
accumulator is threaded through every segment, so code spans and emphasis
continue across line boundaries within the block.

Precedence per character:

1. An unescaped backtick toggles code mode and is emitted as a delimiter.
2. Outside code, an unescaped run of one to three identical ``*`` or ``_``
   characters is tested as an emphasis marker (3 = bold italic, 2 = bold,
   1 = italic). An ``_`` run between two alphanumerics is literal text.
3. Anything else accumulates into the current text run.

Only paired markers produce styled spans: when the block ends with code or
emphasis still open, every span buffered since the earliest unclosed opener
is dropped. A character preceded by an odd number of backslashes never opens
or closes anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from docmark.comments.types import EmphasisMarker, Span, SpanKind, TextSegment
from docmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = get_logger(__name__)

EMPHASIS_CHARS: str = "*_"
MAX_MARKER_LENGTH: int = 3


@dataclass
class InlineState:
    """Accumulator threaded through all segments of one block.

    Attributes:
        in_code (bool): Whether a backtick has opened an inline code span.
        code_checkpoint (int): Index into ``spans`` where the open code span began.
        stack (list[EmphasisMarker]): Open emphasis markers, innermost last.
        checkpoints (list[int]): Index into ``spans`` where each stack entry began.
        spans (list[Span]): Spans emitted so far, including provisional ones.
        emphasis_enabled (bool): When False, ``*`` and ``_`` are always literal
            (used for plain line comments, where only inline code is styled).
    """

    in_code: bool = False
    code_checkpoint: int = 0
    stack: list[EmphasisMarker] = field(default_factory=lambda: [])
    checkpoints: list[int] = field(default_factory=lambda: [])
    spans: list[Span] = field(default_factory=lambda: [])
    emphasis_enabled: bool = True

    @property
    def bold(self) -> bool:
        """Whether any open marker adds bold."""
        return any(m.adds_bold for m in self.stack)

    @property
    def italic(self) -> bool:
        """Whether any open marker adds italic."""
        return any(m.adds_italic for m in self.stack)

    def text_kind(self) -> SpanKind:
        """Return the span kind for text at the current position."""
        if self.in_code:
            return SpanKind.INLINE_CODE
        bold, italic = self.bold, self.italic
        if bold and italic:
            return SpanKind.BOLD_ITALIC
        if bold:
            return SpanKind.BOLD
        if italic:
            return SpanKind.ITALIC
        return SpanKind.PLAIN_TEXT

    def emit(self, line: int, start: int, end: int, kind: SpanKind) -> None:
        """Append a span, skipping empty ranges."""
        if end > start:
            self.spans.append(Span(line, start, end, kind))

    def toggle_code(self) -> None:
        """Open or close an inline code span (call before emitting the delimiter)."""
        if self.in_code:
            self.in_code = False
        else:
            self.in_code = True
            self.code_checkpoint = len(self.spans)

    def toggle_emphasis(self, marker: EmphasisMarker) -> None:
        """Close the top marker when it matches ``marker``, otherwise nest it."""
        if self.stack and self.stack[-1].marker == marker.marker:
            self.stack.pop()
            self.checkpoints.pop()
        else:
            self.stack.append(marker)
            self.checkpoints.append(len(self.spans))

    def finish(self) -> list[Span]:
        """Return the committed spans, dropping everything after an unclosed opener."""
        open_at: list[int] = list(self.checkpoints)
        if self.in_code:
            open_at.append(self.code_checkpoint)
        if not open_at:
            return list(self.spans)
        cut = min(open_at)
        logger.trace("Dropping %d span(s) after unterminated marker", len(self.spans) - cut)
        return self.spans[:cut]


def is_escaped(text: str, pos: int) -> bool:
    """Return True when ``text[pos]`` is preceded by an odd number of backslashes."""
    count = 0
    i = pos - 1
    while i >= 0 and text[i] == "\\":
        count += 1
        i -= 1
    return count % 2 == 1


def marker_for(run: str) -> EmphasisMarker:
    """Return the emphasis marker for a run of one to three ``*``/``_`` characters."""
    length = len(run)
    return EmphasisMarker(
        marker=run,
        adds_bold=length >= 2,
        adds_italic=length != 2,
    )


def _accepts_marker(text: str, start: int, end: int) -> bool:
    """Decide whether ``text[start:end]`` acts as an emphasis marker."""
    run = text[start:end]
    if len(run) > MAX_MARKER_LENGTH:
        return False

    before = text[start - 1] if start > 0 else ""
    after = text[end] if end < len(text) else ""

    # Identifiers like snake_case_name keep their underscores.
    return not (run[0] == "_" and before.isalnum() and after.isalnum())


def scan_segment(segment: TextSegment, state: InlineState) -> None:
    """Tokenize one line-local segment, appending spans to ``state``.

    Args:
        segment (TextSegment): The text to scan and its position.
        state (InlineState): The block-wide accumulator.
    """
    text = segment.text
    line = segment.line
    base = segment.start
    n = len(text)

    run_start = 0
    i = 0

    def flush(upto: int) -> None:
        state.emit(line, base + run_start, base + upto, state.text_kind())

    while i < n:
        ch = text[i]

        if ch == "`" and not is_escaped(text, i):
            flush(i)
            state.toggle_code()
            state.emit(line, base + i, base + i + 1, SpanKind.MARKDOWN_DELIMITER)
            i += 1
            run_start = i
            continue

        if (
            state.emphasis_enabled
            and not state.in_code
            and ch in EMPHASIS_CHARS
            and not is_escaped(text, i)
        ):
            end = i
            while end < n and text[end] == ch:
                end += 1
            if _accepts_marker(text, i, end):
                flush(i)
                state.toggle_emphasis(marker_for(text[i:end]))
                state.emit(line, base + i, base + end, SpanKind.MARKDOWN_DELIMITER)
                run_start = end
            i = end
            continue

        i += 1

    flush(n)


def tokenize_inline(
    segments: Iterable[TextSegment],
    state: InlineState | None = None,
) -> list[Span]:
    """Tokenize the ordered segments of one block into typed spans.

    Args:
        segments (Iterable[TextSegment]): The block's prefix-stripped text, in
            document order.
        state (InlineState | None): Accumulator to thread through the scan; a fresh
            one is created when omitted.

    Returns:
        list[Span]: Spans for text, inline code and delimiters, with spans after an
            unterminated opener removed.
    """
    state = state if state is not None else InlineState()
    for segment in segments:
        scan_segment(segment, state)
    return state.finish()
