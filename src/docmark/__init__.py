# docmark:header:start
#
#   project      : DocMark
#   file         : __init__.py
#   file_relpath : src/docmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""DocMark package.

DocMark classifies `//` and `///` comment text into typed spans for rendering,
and rewrites comment blocks (reflow, MARK title casing, `//` to `///`
conversion) as pure edit operations over a snapshot of document lines.
"""

from __future__ import annotations
