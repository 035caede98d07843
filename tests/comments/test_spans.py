# docmark:header:start
#
#   project      : DocMark
#   file         : test_spans.py
#   file_relpath : tests/comments/test_spans.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Tests for document classification into typed spans."""

from __future__ import annotations

from collections import defaultdict

from docmark.comments import classify
from docmark.comments.types import Span, SpanKind, SpanLayer

K = SpanKind


def _kinds(spans: list[Span]) -> list[tuple[int, int, int, SpanKind]]:
    return [(s.line, s.start, s.end, s.kind) for s in spans]


def test_doc_line_with_inline_code() -> None:
    """A doc line yields marker, indent and tokenized text."""
    spans = classify(["/// Returns the `value`."])
    assert _kinds(spans) == [
        (0, 0, 3, K.SLASH_MARKER),
        (0, 3, 4, K.STRUCTURAL_INDENT),
        (0, 4, 16, K.PLAIN_TEXT),
        (0, 16, 17, K.MARKDOWN_DELIMITER),
        (0, 17, 22, K.INLINE_CODE),
        (0, 22, 23, K.MARKDOWN_DELIMITER),
        (0, 23, 24, K.PLAIN_TEXT),
    ]


def test_doc_tag_keyword_and_description() -> None:
    """The keyword is semantic; the description is tokenized."""
    spans = classify(["/// - Parameter name: the `name`"])
    assert _kinds(spans) == [
        (0, 0, 3, K.SLASH_MARKER),
        (0, 3, 6, K.STRUCTURAL_INDENT),
        (0, 6, 21, K.DOC_KEYWORD),
        (0, 22, 26, K.PLAIN_TEXT),
        (0, 26, 27, K.MARKDOWN_DELIMITER),
        (0, 27, 31, K.INLINE_CODE),
        (0, 31, 32, K.MARKDOWN_DELIMITER),
    ]


def test_caps_label_in_line_comment() -> None:
    """`// NOTE:` yields a single caps-label span covering the colon."""
    assert _kinds(classify(["// NOTE: be careful"])) == [(0, 3, 8, K.CAPS_LABEL)]


def test_heading_only_in_doc_comments() -> None:
    """Colon headings are bold in doc comments but not in line comments."""
    doc = classify(["/// Discussion:"])
    assert (0, 4, 15, K.CAPS_LABEL) in _kinds(doc)
    assert classify(["// Discussion:"]) == []


def test_inline_code_in_trailing_line_comment() -> None:
    """Code after a trailing `//` is highlighted unless disabled."""
    line = "let x = 1 // uses `x`"
    assert _kinds(classify([line])) == [
        (0, 18, 19, K.MARKDOWN_DELIMITER),
        (0, 19, 20, K.INLINE_CODE),
        (0, 20, 21, K.MARKDOWN_DELIMITER),
    ]
    assert classify([line], color_inline_code_in_comments=False) == []


def test_line_comment_emphasis_is_not_styled() -> None:
    """Plain `//` comments only get inline code, never emphasis."""
    assert classify(["// **not bold**"]) == []


def test_mark_lines() -> None:
    """MARK separators and bold titles follow their toggles."""
    line = "// MARK: - Section"
    assert _kinds(classify([line])) == [
        (0, 0, 18, K.MARK_SEPARATOR),
        (0, 2, 18, K.MARK_BOLD),
    ]
    assert _kinds(classify([line], render_mark_separators=False)) == [(0, 2, 18, K.MARK_BOLD)]
    assert _kinds(classify([line], bold_mark_lines=False)) == [(0, 0, 18, K.MARK_SEPARATOR)]
    assert _kinds(classify(["// MARK: Section"])) == [(0, 2, 16, K.MARK_BOLD)]


def test_emphasis_across_doc_lines() -> None:
    """Bold opened on one doc line continues on the next."""
    spans = classify(["/// **bold", "/// still** done"])
    assert _kinds(spans) == [
        (0, 0, 3, K.SLASH_MARKER),
        (0, 3, 4, K.STRUCTURAL_INDENT),
        (0, 4, 6, K.MARKDOWN_DELIMITER),
        (0, 6, 10, K.BOLD),
        (1, 0, 3, K.SLASH_MARKER),
        (1, 3, 4, K.STRUCTURAL_INDENT),
        (1, 4, 9, K.BOLD),
        (1, 9, 11, K.MARKDOWN_DELIMITER),
        (1, 11, 16, K.PLAIN_TEXT),
    ]


def test_emphasis_pairs_with_inner_whitespace() -> None:
    """`*foo *` is italic and `** bold **` is bold in doc text."""
    assert _kinds(classify(["/// *foo *"]))[2:] == [
        (0, 4, 5, K.MARKDOWN_DELIMITER),
        (0, 5, 9, K.ITALIC),
        (0, 9, 10, K.MARKDOWN_DELIMITER),
    ]
    assert _kinds(classify(["/// ** bold **"]))[2:] == [
        (0, 4, 6, K.MARKDOWN_DELIMITER),
        (0, 6, 12, K.BOLD),
        (0, 12, 14, K.MARKDOWN_DELIMITER),
    ]


def test_unterminated_code_across_block_is_dropped() -> None:
    """A backtick never closed in the block produces no code span."""
    spans = classify(["/// `open", "/// text"])
    assert all(s.kind is not K.INLINE_CODE for s in spans)


def test_disabled_produces_nothing() -> None:
    """When disabled, classification yields no spans."""
    assert classify(["/// doc", "// MARK: - x"], enabled=False) == []


def test_spans_sorted_and_non_overlapping_per_layer() -> None:
    """Spans come sorted; spans of one layer never overlap on a line."""
    lines = [
        "// MARK: - Helpers",
        "/// Computes the **sum** of `a` and _b_.",
        "///",
        "/// - Parameters:",
        "///   - a: the first `Int`",
        "/// - Returns: The sum.",
        "func add(a: Int, b: Int) -> Int { a + b } // NOTE: `fast`",
    ]
    spans = classify(lines)
    assert spans == sorted(spans, key=lambda s: (s.line, s.start, s.end))

    by_layer: dict[tuple[int, SpanLayer], list[Span]] = defaultdict(list)
    for span in spans:
        assert 0 <= span.start < span.end <= len(lines[span.line])
        by_layer[(span.line, span.layer)].append(span)
    for group in by_layer.values():
        for left, right in zip(group, group[1:]):
            assert left.end <= right.start


def test_span_to_dict() -> None:
    """The JSON form carries kind and layer names."""
    span = Span(1, 2, 3, K.DOC_KEYWORD)
    assert span.to_dict() == {
        "line": 1,
        "start": 2,
        "end": 3,
        "kind": "doc-keyword",
        "layer": "semantic",
    }
