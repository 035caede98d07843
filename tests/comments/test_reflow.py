# docmark:header:start
#
#   project      : DocMark
#   file         : test_reflow.py
#   file_relpath : tests/comments/test_reflow.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Tests for structure-preserving comment reflow."""

from __future__ import annotations

from docmark.comments import compute_wrap_edits
from docmark.comments.doc_tags import parse_doc_tag
from docmark.comments.edits import apply_replace_edits
from docmark.comments.reflow import (
    clamp_width,
    continuation_widths,
    ends_sentence,
    is_directive_line,
    is_list_item,
    is_table_or_ascii_art_line,
    wrap_comment_block,
    wrap_words,
)
from docmark.comments.types import ReplaceEdit
from tests.conftest import parametrize

PROSE = (
    "This function computes the checksum of the buffer using the configured "
    "algorithm and returns it to the caller without modifying any state."
)


def test_wrap_words_greedy() -> None:
    """Words are packed greedily and never split."""
    assert wrap_words("aaa bbb ccc", 7) == ["aaa bbb", "ccc"]
    assert wrap_words("abcdefghij x", 5) == ["abcdefghij", "x"]
    assert wrap_words("   ", 10) == [""]


def test_wrap_words_keeps_markers_off_line_starts() -> None:
    """A list marker is carried down with the preceding word."""
    assert wrap_words("aaaa bbbb - cc", 10) == ["aaaa", "bbbb - cc"]
    assert wrap_words("aaaa bbbb 2. cc", 10) == ["aaaa", "bbbb 2. cc"]


def test_wrap_words_never_joins_two_pipes() -> None:
    """Separate tokens never put a second `|` on a line."""
    assert wrap_words("a | b c | d", 100) == ["a | b c", "| d"]
    assert wrap_words("a|b|c d", 100) == ["a|b|c", "d"]


@parametrize("width", list(range(40, 81, 4)))
def test_doc_tag_with_literal_marker_is_stable(width: int) -> None:
    """A `- Returns:` inside a description never becomes a new tag."""
    lines = [
        "/// - Note: the caller documents the result with - Returns: after the"
        " parameters and - Throws: last, as the guide explains at length"
    ]
    wrapped = apply_replace_edits(lines, compute_wrap_edits(lines, width))
    assert len(wrapped) > 1
    for line in wrapped[1:]:
        assert not is_list_item(line[len("///") :].strip())
    assert compute_wrap_edits(wrapped, width) == []


def test_doc_tag_with_single_pipes_is_stable() -> None:
    """A tag line and its continuation holding one `|` each never form a table row."""
    lines = ["/// - Returns: a | b", "///   c | d"]
    wrapped = wrap_comment_block(lines, 100)
    assert wrapped == ["/// - Returns: a | b c", "///   | d"]
    assert wrap_comment_block(wrapped, 100) == wrapped


@parametrize("requested, expected", [(None, 40), (0, 40), (-5, 40), (10, 40), (100, 100)])
def test_clamp_width(requested: int | None, expected: int) -> None:
    """Missing, non-positive and small widths are raised to the floor."""
    assert clamp_width(requested) == expected


def test_recognizers() -> None:
    """The paragraph-breaking predicates are independent and pure."""
    assert is_directive_line("swiftlint:disable line_length")
    assert is_directive_line("MARK: - x")
    assert not is_directive_line("mark: lowercase is prose")
    assert is_table_or_ascii_art_line("| a | b |")
    assert is_table_or_ascii_art_line("=====")
    assert not is_table_or_ascii_art_line("a | b")
    assert is_list_item("- item")
    assert is_list_item("12) item")
    assert not is_list_item("-item")
    assert ends_sentence('said "done."')
    assert not ends_sentence("e.g")


def test_prose_lines_are_joined() -> None:
    """Short prose lines are joined into one line when they fit."""
    edits = compute_wrap_edits(["// one two three", "// four five"], 100)
    assert edits == [ReplaceEdit(start_line=0, end_line=1, text="// one two three four five")]


def test_unchanged_block_produces_no_edit() -> None:
    """A block that round-trips to the same text yields no edit."""
    assert compute_wrap_edits(["// already fine", "", "/// also fine"], 100) == []


def test_long_prose_is_wrapped_within_width() -> None:
    """Every produced line respects the width, indentation included."""
    lines = ["    /// " + PROSE]
    edits = compute_wrap_edits(lines, 50)
    assert len(edits) == 1
    out = edits[0].text.split("\n")
    assert len(out) > 1
    assert all(line.startswith("    /// ") for line in out)
    assert all(len(line) <= 50 for line in out)
    assert " ".join(line[len("    /// ") :] for line in out) == PROSE


def test_count_from_comment_start_ignores_indent() -> None:
    """Counting from the comment start lets indented lines use more columns."""
    lines = ["        // " + " ".join(["aaaa"] * 8)]
    default = compute_wrap_edits(lines, 40)
    from_comment = compute_wrap_edits(lines, 40, count_from_comment_start=True)
    assert default[0].text.split("\n")[0] == "        // " + " ".join(["aaaa"] * 6)
    assert from_comment[0].text.split("\n")[0] == "        // " + " ".join(["aaaa"] * 7)


def test_width_is_clamped() -> None:
    """A tiny width behaves like the floor."""
    lines = ["// " + PROSE]
    assert compute_wrap_edits(lines, 5) == compute_wrap_edits(lines, 40)


def test_eol_joins_replacement_lines() -> None:
    """Replacement text uses the caller's end-of-line marker."""
    edits = compute_wrap_edits(["// a", "// b"], 100, "\r\n")
    assert edits[0].text == "// a b"
    edits = compute_wrap_edits(["// " + PROSE], 40, "\r\n")
    assert "\r\n" in edits[0].text
    assert "\n" not in edits[0].text.replace("\r\n", "")


def test_fenced_code_is_never_modified() -> None:
    """A block holding only a fenced section passes through at any width."""
    lines = [
        "/// ```",
        "/// let result = someFunction(withAVeryLongArgumentName: value, andAnother: other)",
        "///     .map { $0 }",
        "/// ```",
    ]
    for width in (1, 40, 60, 200):
        assert compute_wrap_edits(lines, width) == []


def test_list_items_pass_through() -> None:
    """A bulleted block is copied verbatim even when lines exceed the width."""
    lines = [
        "// - first item in the list that is definitely longer than forty",
        "// - second item",
    ]
    assert compute_wrap_edits(lines, 40) == []


def test_doc_tag_wraps_under_the_bullet() -> None:
    """A long `- Returns:` keeps the keyword and aligns continuations under the bullet."""
    prose = ("word " * 24).strip()
    assert len(prose) >= 119
    edits = compute_wrap_edits([f"/// - Returns: {prose}"], 60)
    out = edits[0].text.split("\n")
    assert len(out) >= 2
    assert out[0].startswith("/// - Returns: ")
    for line in out[1:]:
        assert line.startswith("///   word")
    assert all(len(line) <= 60 for line in out)


def test_doc_tag_absorbs_bullet_aligned_continuations() -> None:
    """Continuations aligned under the bullet are re-joined."""
    edits = compute_wrap_edits(["/// - Returns: alpha beta", "///   gamma delta"], 100)
    assert edits == [
        ReplaceEdit(start_line=0, end_line=1, text="/// - Returns: alpha beta gamma delta")
    ]


def test_doc_tag_absorbs_description_aligned_continuations() -> None:
    """Legacy continuations aligned under the description are re-joined."""
    lines = ["/// - Returns: alpha beta", "///" + " " * len(" - Returns: ") + "gamma"]
    edits = compute_wrap_edits(lines, 100)
    assert edits[0].text == "/// - Returns: alpha beta gamma"


def test_doc_tag_absorbs_over_indented_continuations() -> None:
    """A continuation indented deeper than any accepted width still joins the tag."""
    lines = ["/// - Returns: short text.", "///        deeper continuation text"]
    assert wrap_comment_block(lines, 80) == [
        "/// - Returns: short text. deeper continuation text"
    ]


def test_doc_tag_stops_at_shallow_lines() -> None:
    """A line indented less than the bullet is a new paragraph."""
    lines = ["/// - Returns: alpha", "/// beta"]
    assert wrap_comment_block(lines, 80) == lines


def test_continuation_widths_longest_first() -> None:
    """Accepted continuation widths are unique and ordered longest first."""
    tag = parse_doc_tag("   - Returns: x")
    assert tag is not None
    assert continuation_widths(tag) == [14, 12, 5, 3]


def test_implicit_parameter_continuations() -> None:
    """Implicit parameter entries keep their own nesting."""
    lines = ["/// - Parameters:", "///   - x: first", "///     value"]
    edits = compute_wrap_edits(lines, 100)
    assert edits == [
        ReplaceEdit(start_line=0, end_line=2, text="/// - Parameters:\n///   - x: first value")
    ]


def test_known_keyword_whitespace_is_normalized() -> None:
    """A recognized keyword gets exactly one space after the marker."""
    edits = compute_wrap_edits(["///   - Returns: x"], 100)
    assert edits[0].text == "/// - Returns: x"


def test_heading_is_a_hard_boundary() -> None:
    """Prose is not joined across a doc heading."""
    assert compute_wrap_edits(["/// intro", "/// Discussion:", "/// more"], 100) == []


def test_caps_label_starts_a_paragraph() -> None:
    """A caps label is never pulled up, but later lines may join it."""
    assert compute_wrap_edits(["// first line", "// NOTE: second"], 100) == []
    edits = compute_wrap_edits(["// NOTE: first", "// second"], 100)
    assert edits[0].text == "// NOTE: first second"


@parametrize(
    "lines",
    [
        ["// swiftlint:disable line_length", "// text"],
        ["// | a | b |", "// | c | d |"],
        ["// a", "//", "// b"],
        ["// ----------", "// title"],
    ],
)
def test_verbatim_lines_break_paragraphs(lines: list[str]) -> None:
    """Directives, tables, rules and blank lines are copied verbatim."""
    assert compute_wrap_edits(lines, 100) == []


def test_blank_comment_line_is_normalized() -> None:
    """A blank comment line becomes a bare prefix."""
    edits = compute_wrap_edits(["// a", "//   ", "// b"], 100)
    assert edits[0].text == "// a\n//\n// b"


def test_avoid_punctuation_breaks() -> None:
    """Sentence-ending lines stay paragraph ends when requested."""
    lines = ["// First sentence.", "// Second one"]
    assert compute_wrap_edits(lines, 100)[0].text == "// First sentence. Second one"
    assert compute_wrap_edits(lines, 100, avoid_punctuation_breaks=True) == []


def test_line_and_doc_blocks_are_separate() -> None:
    """`//` and `///` lines never merge."""
    assert compute_wrap_edits(["// a", "/// b"], 100) == []


def test_wrap_comment_block_returns_input_for_non_comments() -> None:
    """Lines that are not whole-line comments come back unchanged."""
    assert wrap_comment_block(["code"], 40) == ["code"]


def test_apply_then_rewrap_is_stable() -> None:
    """Applying the edits and wrapping again yields nothing new."""
    lines = [
        "struct S {",
        "    /// " + PROSE,
        "    /// - Parameter value: " + PROSE,
        "    /// - Returns: nothing",
        "    // " + PROSE,
        "}",
    ]
    wrapped = apply_replace_edits(lines, compute_wrap_edits(lines, 60))
    assert wrapped != lines
    assert compute_wrap_edits(wrapped, 60) == []
