# docmark:header:start
#
#   project      : DocMark
#   file         : diff.py
#   file_relpath : src/docmark/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Unified diff generation and colorized preview.

Compares the original lines of a file with the lines after applying edits and
produces a unified diff for ``--diff`` output.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from docmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


def make_patch(
    current: Sequence[str],
    updated: Sequence[str],
    *,
    path: str,
    eol: str = "\n",
) -> str | None:
    """Return a unified diff between two line lists, or None when they are equal.

    Args:
        current (Sequence[str]): Original lines, without end-of-line markers.
        updated (Sequence[str]): Updated lines, without end-of-line markers.
        path (str): File name used in the diff headers.
        eol (str): End-of-line marker of the file; kept in the diff text.

    Returns:
        str | None: The diff text, or None when there is no difference.
    """
    patch_lines: list[str] = list(
        difflib.unified_diff(
            [line + eol for line in current],
            [line + eol for line in updated],
            fromfile=f"{path} (current)",
            tofile=f"{path} (updated)",
            n=3,
            lineterm=eol,
        )
    )
    if not patch_lines:
        logger.debug("No changes: %s", path)
        return None
    logger.trace("Patch (rendered):\n%s", render_patch(patch_lines))
    # Join exactly as produced by difflib. Do not introduce CRLF conversions.
    return "".join(patch_lines)


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): A unified diff as **either** a sequence of
            lines **or** a single multiline string.
        show_line_numbers (bool): Whether to prefix output with line numbers.

    Returns:
        str: The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\r\n") for line in patch]

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
