# docmark:header:start
#
#   project      : DocMark
#   file         : __init__.py
#   file_relpath : src/docmark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Core, UI-agnostic primitives shared across DocMark.

Included modules:

- ``diagnostics``
  Diagnostic types and helpers (levels, messages, aggregation) used to collect
  and report info, warnings, and errors raised while loading configuration.
"""

from __future__ import annotations
