# docmark:header:start
#
#   project      : DocMark
#   file         : __init__.py
#   file_relpath : src/docmark/comments/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Comment semantic segmentation and reflow engine.

All functions in this package are pure: they take a snapshot of document lines
and return spans or edits, never mutating their input.
"""

from __future__ import annotations

from docmark.comments.convert import compute_convert_edits
from docmark.comments.reflow import compute_wrap_edits
from docmark.comments.spans import classify
from docmark.comments.title_case import compute_title_case_edits
from docmark.comments.types import InsertEdit, ReplaceEdit, Span, SpanKind, SpanLayer

__all__ = [
    "InsertEdit",
    "ReplaceEdit",
    "Span",
    "SpanKind",
    "SpanLayer",
    "classify",
    "compute_convert_edits",
    "compute_title_case_edits",
    "compute_wrap_edits",
]
