# docmark:header:start
#
#   project      : DocMark
#   file         : test_caps_label.py
#   file_relpath : tests/comments/test_caps_label.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Tests for caps-label and doc-heading detection."""

from __future__ import annotations

from docmark.comments.caps_label import find_doc_colon_heading, find_leading_caps_label
from tests.conftest import parametrize


def test_caps_label_bounds() -> None:
    """`NOTE:` reports label bounds relative to the text after the marker."""
    m = find_leading_caps_label(" NOTE: hi")
    assert m is not None
    assert (m.label_start, m.label_end, m.colon_index) == (1, 5, 5)
    assert m.label_text == "NOTE"


def test_caps_label_multiword_with_space_before_colon() -> None:
    """Whitespace before the colon is excluded from the label."""
    m = find_leading_caps_label(" TODO FIXME : x")
    assert m is not None
    assert m.label_text == "TODO FIXME"
    assert (m.label_start, m.label_end, m.colon_index) == (1, 11, 12)


@parametrize("text", [" HTTP_2 API: x", "WARNING:", "\tV2:"])
def test_caps_label_accepts(text: str) -> None:
    """All-caps words with digits and underscores are labels."""
    assert find_leading_caps_label(text) is not None


@parametrize("text", [" Note: hi", " 123: x", " no colon", "", "   ", " : x", " NOTE-1: x"])
def test_caps_label_rejects(text: str) -> None:
    """Mixed case, digit-only, colon-less and punctuated candidates are not labels."""
    assert find_leading_caps_label(text) is None


def test_doc_heading_bounds() -> None:
    """A trailing colon after plain words is a heading."""
    m = find_doc_colon_heading(" Discussion:")
    assert m is not None
    assert (m.heading_start, m.heading_end, m.colon_index) == (1, 11, 11)
    assert m.heading_text == "Discussion"


def test_doc_heading_trims_whitespace() -> None:
    """Whitespace around the colon is tolerated and excluded from the heading."""
    m = find_doc_colon_heading(" Two Words  :  ")
    assert m is not None
    assert m.heading_text == "Two Words"
    assert m.colon_index == 12
    assert m.heading_end == 10


@parametrize("text", [" Discussion: more", " a-b:", " :", "", " - Returns:"])
def test_doc_heading_rejects(text: str) -> None:
    """Text after the colon, punctuation or a list marker disqualify a heading."""
    assert find_doc_colon_heading(text) is None
