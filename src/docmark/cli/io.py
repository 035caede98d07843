# docmark:header:start
#
#   project      : DocMark
#   file         : io.py
#   file_relpath : src/docmark/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""File reading and writing for CLI commands.

Files are read as UTF-8 with newline translation disabled so the dominant
end-of-line marker can be detected and written back unchanged. A leading
UTF-8 BOM is stripped on read and re-attached on write, and a missing final
newline stays missing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from docmark.cli.errors import DocmarkEncodingError, DocmarkFileNotFoundError, DocmarkIOError
from docmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)

BOM: str = "\ufeff"
LINE_BREAK_RE: re.Pattern[str] = re.compile(r"\r\n|\n")


@dataclass(frozen=True)
class Document:
    """A text file split into lines.

    Attributes:
        path (Path): Where the text was read from.
        lines (tuple[str, ...]): Lines without end-of-line markers.
        eol (str): Dominant end-of-line marker (``"\\n"`` or ``"\\r\\n"``).
        ends_with_newline (bool): Whether the last line was terminated.
        leading_bom (bool): Whether the file started with a UTF-8 BOM.
    """

    path: Path
    lines: tuple[str, ...]
    eol: str
    ends_with_newline: bool
    leading_bom: bool = False

    def render(self, lines: Sequence[str]) -> str:
        """Join ``lines`` back into file text using this document's conventions."""
        text = self.eol.join(lines)
        if self.ends_with_newline and lines:
            text += self.eol
        return (BOM if self.leading_bom else "") + text


def detect_newline(text: str) -> str:
    r"""Return the dominant end-of-line marker of ``text``.

    ``"\r\n"`` wins only when it occurs more often than bare ``"\n"``; text
    without line breaks defaults to ``"\n"``.
    """
    crlf = text.count("\r\n")
    lf = text.count("\n") - crlf
    return "\r\n" if crlf > lf else "\n"


def split_document(path: Path, text: str) -> Document:
    """Split file text into a [`Document`][docmark.cli.io.Document]."""
    leading_bom = text.startswith(BOM)
    if leading_bom:
        text = text[len(BOM) :]
    eol = detect_newline(text)
    lines = LINE_BREAK_RE.split(text)
    ends_with_newline = len(lines) > 1 and lines[-1] == ""
    if ends_with_newline or text == "":
        lines = lines[:-1]
    return Document(
        path=path,
        lines=tuple(lines),
        eol=eol,
        ends_with_newline=ends_with_newline,
        leading_bom=leading_bom,
    )


def read_document(path: str | Path) -> Document:
    """Read a UTF-8 text file.

    Raises:
        DocmarkFileNotFoundError: If the file does not exist.
        DocmarkEncodingError: If the file is not valid UTF-8.
        DocmarkIOError: On any other read error.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8", newline="") as f:
            text = f.read()
    except FileNotFoundError as exc:
        raise DocmarkFileNotFoundError(f"File not found: {p}") from exc
    except UnicodeDecodeError as exc:
        raise DocmarkEncodingError(f"Cannot decode {p} as UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise DocmarkIOError(f"Cannot read {p}: {exc.strerror or exc}") from exc

    doc = split_document(p, text)
    logger.debug("Read %s: %d line(s), eol=%r", p, len(doc.lines), doc.eol)
    return doc


def write_document(doc: Document, lines: Sequence[str]) -> int:
    """Write ``lines`` to ``doc.path`` keeping its EOL, BOM and final-newline conventions.

    Returns:
        int: The number of UTF-8 bytes written.

    Raises:
        DocmarkIOError: If the file cannot be written.
    """
    text = doc.render(lines)
    try:
        with doc.path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as exc:
        raise DocmarkIOError(f"Cannot write {doc.path}: {exc.strerror or exc}") from exc
    n_bytes = len(text.encode("utf-8"))
    logger.debug("Wrote %d bytes to %s", n_bytes, doc.path)
    return n_bytes
