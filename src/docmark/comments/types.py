# docmark:header:start
#
#   project      : DocMark
#   file         : types.py
#   file_relpath : src/docmark/comments/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Type definitions shared by the comment segmentation and reflow engine.

The engine never mutates text. It consumes a snapshot of document lines and
produces either typed [`Span`][docmark.comments.types.Span] records (for
rendering) or edit records ([`InsertEdit`][docmark.comments.types.InsertEdit],
[`ReplaceEdit`][docmark.comments.types.ReplaceEdit]) that a host applies.

Columns are 0-based character offsets into a single line; end columns are
exclusive, matching the line-relative addressing used by editors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SpanLayer(Enum):
    """Styling layer a span belongs to.

    Spans in the same layer never overlap on a line; spans from different layers
    may overlap (e.g. a caps label drawn bold on top of plain text).

    Members:
        STRUCTURAL: Comment markers, structural indentation and MARK separators.
        EMPHASIS: Text runs produced by the inline tokenizer.
        SEMANTIC: Keyword-level highlights (doc keywords, caps labels, MARK titles).
    """

    STRUCTURAL = "structural"
    EMPHASIS = "emphasis"
    SEMANTIC = "semantic"


class SpanKind(Enum):
    """Kind of a classified span.

    Members:
        SLASH_MARKER: The `///` marker of a doc comment line.
        STRUCTURAL_INDENT: Whitespace and list prefix preceding doc text or a doc tag.
        PLAIN_TEXT: Unstyled documentation prose.
        INLINE_CODE: Text between a matched pair of backticks.
        DOC_KEYWORD: A doc-tag keyword (``Returns:``, ``Parameter x:``) or parameter name.
        MARKDOWN_DELIMITER: A backtick or emphasis marker character run.
        BOLD: Text inside ``**...**`` or ``__...__``.
        ITALIC: Text inside ``*...*`` or ``_..._``.
        BOLD_ITALIC: Text carrying both bold and italic emphasis.
        CAPS_LABEL: An all-caps callout (``NOTE:``) or a colon-terminated doc heading.
        MARK_BOLD: The text of a ``// MARK:`` line after the ``//`` marker.
        MARK_SEPARATOR: A ``// MARK: -`` line that renders a section divider.
    """

    SLASH_MARKER = "slash-marker"
    STRUCTURAL_INDENT = "structural-indent"
    PLAIN_TEXT = "plain-text"
    INLINE_CODE = "inline-code"
    DOC_KEYWORD = "doc-keyword"
    MARKDOWN_DELIMITER = "markdown-delimiter"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold-italic"
    CAPS_LABEL = "caps-label"
    MARK_BOLD = "mark-bold"
    MARK_SEPARATOR = "mark-separator"

    @property
    def layer(self) -> SpanLayer:
        """Return the styling layer this kind is drawn in."""
        return _LAYER_BY_KIND[self]


_LAYER_BY_KIND: dict[SpanKind, SpanLayer] = {
    SpanKind.SLASH_MARKER: SpanLayer.STRUCTURAL,
    SpanKind.STRUCTURAL_INDENT: SpanLayer.STRUCTURAL,
    SpanKind.MARK_SEPARATOR: SpanLayer.STRUCTURAL,
    SpanKind.PLAIN_TEXT: SpanLayer.EMPHASIS,
    SpanKind.INLINE_CODE: SpanLayer.EMPHASIS,
    SpanKind.MARKDOWN_DELIMITER: SpanLayer.EMPHASIS,
    SpanKind.BOLD: SpanLayer.EMPHASIS,
    SpanKind.ITALIC: SpanLayer.EMPHASIS,
    SpanKind.BOLD_ITALIC: SpanLayer.EMPHASIS,
    SpanKind.DOC_KEYWORD: SpanLayer.SEMANTIC,
    SpanKind.CAPS_LABEL: SpanLayer.SEMANTIC,
    SpanKind.MARK_BOLD: SpanLayer.SEMANTIC,
}


@dataclass(frozen=True)
class Span:
    """A typed character range on one line.

    Attributes:
        line (int): 0-based line index.
        start (int): Start column (inclusive).
        end (int): End column (exclusive).
        kind (SpanKind): What the range represents.
    """

    line: int
    start: int
    end: int
    kind: SpanKind

    @property
    def layer(self) -> SpanLayer:
        """Return the styling layer of this span."""
        return self.kind.layer

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this span."""
        return {
            "line": self.line,
            "start": self.start,
            "end": self.end,
            "kind": self.kind.value,
            "layer": self.layer.value,
        }


@dataclass(frozen=True)
class EmphasisMarker:
    """An opened emphasis delimiter held on the inline tokenizer's stack.

    Attributes:
        marker (str): One of ``*``, ``**``, ``***``, ``_``, ``__`` (or ``___``).
        adds_bold (bool): Whether text inside the marker is bold.
        adds_italic (bool): Whether text inside the marker is italic.
    """

    marker: str
    adds_bold: bool
    adds_italic: bool


@dataclass(frozen=True)
class DocTagMatch:
    """Parsed form of a documentation callout line (``- Returns: ...``).

    Offsets are relative to the text passed to the parser (the text immediately
    following the ``///`` marker).

    Attributes:
        structural_prefix (str): Everything before the description, e.g.
            ``" - Parameter name: "``.
        list_prefix (str): Leading whitespace, dash and spacing, e.g. ``" - "``.
        description (str): The free text after the colon (may be empty).
        tag_word (str): The tag word, lowercased (``"returns"``, ``"parameter"``
            or an implicit parameter name).
        keyword_start (int): Offset of the tag word.
        keyword_end (int): Offset just past the terminating colon.
        is_known_keyword (bool): True when ``tag_word`` belongs to the documentation
            keyword vocabulary; False for implicit parameter names.
    """

    structural_prefix: str
    list_prefix: str
    description: str
    tag_word: str
    keyword_start: int
    keyword_end: int
    is_known_keyword: bool

    @property
    def description_start(self) -> int:
        """Offset of the description within the parsed text."""
        return len(self.structural_prefix)


@dataclass(frozen=True)
class TextSegment:
    """A line-local slice of prefix-stripped comment text fed to the inline tokenizer.

    Attributes:
        line (int): 0-based line index.
        start (int): Column of ``text[0]`` within the line.
        text (str): The text to tokenize.
    """

    line: int
    start: int
    text: str


class CommentKind(Enum):
    """Per-line comment classification.

    Members:
        NONE: The line carries no comment.
        LINE: A ``//`` comment (leading or trailing after code).
        DOC: A ``///`` documentation comment line.
        MARK: A ``// MARK:`` header line.
        MARK_SEPARATOR: A ``// MARK: -`` header line with a divider dash.
    """

    NONE = "none"
    LINE = "line"
    DOC = "doc"
    MARK = "mark"
    MARK_SEPARATOR = "mark-separator"


@dataclass(frozen=True)
class LineClassification:
    """Result of classifying one line.

    Attributes:
        kind (CommentKind): The comment kind.
        comment_start (int | None): Column of the comment marker, or None when
            ``kind`` is ``NONE``.
    """

    kind: CommentKind
    comment_start: int | None = None


@dataclass(frozen=True)
class CommentLine:
    """A whole-line comment split into its parts.

    Attributes:
        indent (str): Whitespace before the marker.
        prefix (str): ``"//"`` or ``"///"``.
        after_prefix (str): Everything after the marker, spacing included.
        original (str): The unmodified line.
    """

    indent: str
    prefix: str
    after_prefix: str
    original: str

    @property
    def text_start(self) -> int:
        """Column where ``after_prefix`` begins."""
        return len(self.indent) + len(self.prefix)


@dataclass(frozen=True)
class CommentBlock:
    """A maximal run of contiguous comment lines sharing prefix kind and indentation.

    Attributes:
        prefix (str): ``"//"`` or ``"///"``, fixed by the first line.
        indent (str): Indentation, fixed by the first line.
        start_line (int): Index of the first line of the block.
        lines (tuple[str, ...]): The raw lines of the block.
    """

    prefix: str
    indent: str
    start_line: int
    lines: tuple[str, ...]

    @property
    def end_line(self) -> int:
        """Index of the last line of the block (inclusive)."""
        return self.start_line + len(self.lines) - 1


@dataclass(frozen=True)
class InsertEdit:
    """Insert ``text`` at ``(line, column)``."""

    line: int
    column: int
    text: str


@dataclass(frozen=True)
class ReplaceEdit:
    """Replace lines ``start_line..end_line`` (inclusive) with ``text``.

    ``text`` joins the replacement lines with the caller's end-of-line marker
    and carries no trailing end-of-line.
    """

    start_line: int
    end_line: int
    text: str
