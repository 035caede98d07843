# docmark:header:start
#
#   project      : DocMark
#   file         : scanner.py
#   file_relpath : src/docmark/comments/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Best-effort location of a ``//`` comment marker on a line of code.

A single left-to-right scan tracks whether it is inside a string literal, so a
``//`` inside ``"http://example.com"`` is ignored. Normal, raw (``#"..."#``)
and triple-quoted strings are recognized on the current line only;
string interpolation and strings spanning several lines are not modeled.
"""

from __future__ import annotations

from docmark.config.logging import get_logger

logger = get_logger(__name__)


def _hash_run(line: str, pos: int) -> int:
    """Return the number of consecutive ``#`` characters starting at ``pos``."""
    end = pos
    while end < len(line) and line[end] == "#":
        end += 1
    return end - pos


def find_comment_start(line: str) -> int | None:
    """Return the column of the first ``//`` outside a string literal.

    Args:
        line (str): One line of source text.

    Returns:
        int | None: Column of the first ``/`` of the marker, or None when the line
            has no comment outside string literals.
    """
    n = len(line)
    i = 0
    in_string = False
    raw_hashes = 0
    triple = False

    while i < n:
        ch = line[i]

        if not in_string:
            if line.startswith("//", i):
                return i
            if ch == "#":
                hashes = _hash_run(line, i)
                quote = i + hashes
                if quote < n and line[quote] == '"':
                    in_string = True
                    raw_hashes = hashes
                    triple = line.startswith('"""', quote)
                    i = quote + (3 if triple else 1)
                else:
                    i = quote
                continue
            if ch == '"':
                in_string = True
                raw_hashes = 0
                triple = line.startswith('"""', i)
                i += 3 if triple else 1
                continue
            i += 1
            continue

        if triple:
            if line.startswith('"""', i) and _hash_run(line, i + 3) == raw_hashes:
                in_string = False
                i += 3 + raw_hashes
            else:
                i += 1
        elif raw_hashes == 0:
            if ch == "\\":
                i += 2
            elif ch == '"':
                in_string = False
                i += 1
            else:
                i += 1
        else:
            # Raw strings do not escape; the closing quote needs the same hash count.
            if ch == '"' and line.startswith("#" * raw_hashes, i + 1):
                in_string = False
                i += 1 + raw_hashes
            else:
                i += 1

    if in_string:
        logger.trace("Unterminated string literal on line: %r", line)
    return None
