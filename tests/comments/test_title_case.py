# docmark:header:start
#
#   project      : DocMark
#   file         : test_title_case.py
#   file_relpath : tests/comments/test_title_case.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Tests for MARK header title-casing."""

from __future__ import annotations

from docmark.comments import compute_title_case_edits
from docmark.comments.title_case import title_case_mark_line, title_case_word
from docmark.comments.types import ReplaceEdit
from tests.conftest import parametrize


@parametrize(
    "line, expected",
    [
        ("// MARK: - drag and drop", "// MARK: - Drag and Drop"),
        ("// MARK: - @Unchecked Sendable", "// MARK: - @unchecked Sendable"),
        ("// MARK: the end of it", "// MARK: The End of It"),
        ("// MARK: helpers for `fooBar` and `baz`", "// MARK: Helpers for `fooBar` and `baz`"),
        ("// MARK: setup_view v2 handling", "// MARK: setup_view v2 Handling"),
        ("// MARK: drag-and-drop support", "// MARK: Drag-and-drop Support"),
        ("// MARK: #available checks", "// MARK: #available Checks"),
        ("    // MARK: view lifecycle", "    // MARK: View Lifecycle"),
        ("// MARK: - hello  ", "// MARK: - Hello  "),
        ("// MARK: URLSession delegate", "// MARK: URLSession Delegate"),
        ("// MARK:", "// MARK:"),
        ("// MARK: -", "// MARK: -"),
    ],
)
def test_title_case_mark_line(line: str, expected: str) -> None:
    """MARK titles are title-cased with minor words, code and identifiers respected."""
    assert title_case_mark_line(line) == expected


def test_non_mark_lines_are_ignored() -> None:
    """Lines that are not MARK headers return None."""
    assert title_case_mark_line("// mark: lowercase") is None
    assert title_case_mark_line("let x = 1") is None


@parametrize(
    "word, is_first, is_last, expected",
    [
        ("of", False, False, "of"),
        ("of", True, False, "Of"),
        ("of", False, True, "Of"),
        ("vs.", False, False, "vs."),
        ("@UNCHECKED", False, False, "@unchecked"),
        ("@MainActor", False, False, "@MainActor"),
        ("iOS", False, False, "iOS"),
        ("(optional)", False, False, "(Optional)"),
    ],
)
def test_title_case_word(word: str, is_first: bool, is_last: bool, expected: str) -> None:
    """Single-word casing rules."""
    assert title_case_word(word, is_first=is_first, is_last=is_last) == expected


def test_edits_only_for_changed_lines() -> None:
    """One whole-line replacement per changed MARK line, in document order."""
    lines = [
        "// MARK: - Drag and Drop",
        "struct S {}",
        "// MARK: foo",
        "// mark: ignored",
        "    // MARK: - bar baz",
    ]
    assert compute_title_case_edits(lines) == [
        ReplaceEdit(start_line=2, end_line=2, text="// MARK: Foo"),
        ReplaceEdit(start_line=4, end_line=4, text="    // MARK: - Bar Baz"),
    ]


def test_no_edits_when_already_cased() -> None:
    """Already title-cased headers produce no edits."""
    assert compute_title_case_edits(["// MARK: - Drag and Drop"], "\r\n") == []
