# docmark:header:start
#
#   project      : DocMark
#   file         : io.py
#   file_relpath : src/docmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Lightweight TOML I/O helpers for DocMark configuration.

This module centralizes **pure** helpers for reading and writing TOML used by
DocMark's configuration layer. Keeping these utilities separate avoids import
cycles and keeps the model classes small and focused.

Typical flow:
    1. Load defaults from the packaged resource (``load_defaults_dict``).
    2. Load project TOML files (``load_toml_dict``).
    3. Extract the DocMark table (``extract_docmark_table``) and inspect values
       with the typed getters.
    4. Serialize back to TOML when needed (``to_toml``), optionally nested under
       ``[tool.docmark]`` (``nest_toml_under_section``).

Notes:
    - Parsing and dumping use `toml`. `tomlkit` is only used by
      ``nest_toml_under_section`` to keep comments and whitespace of an existing
      document intact when wrapping it for inclusion into ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, TypeGuard

import toml
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.items import Table

from docmark.config.logging import get_logger
from docmark.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    PYPROJECT_TOML_NAME,
)

if TYPE_CHECKING:
    from pathlib import Path

    from docmark.config.logging import DocmarkLogger
    from docmark.core.diagnostics import DiagnosticLog

logger: DocmarkLogger = get_logger(__name__)

TomlTable = dict[str, Any]

# Name of the DocMark table in docmark.toml and of the tool subtable in pyproject.toml.
DOCMARK_SECTION: str = "docmark"
PYPROJECT_SECTION: str = "tool.docmark"

__all__: list[str] = [
    "DOCMARK_SECTION",
    "PYPROJECT_SECTION",
    "TomlTable",
    "is_toml_table",
    "get_table_value",
    "get_typed_value",
    "extract_docmark_table",
    "load_defaults_dict",
    "load_defaults_text",
    "load_toml_dict",
    "to_toml",
    "nest_toml_under_section",
]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        val (Any): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``val`` is a ``dict[str, Any]``.
    """
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_typed_value(
    table: TomlTable,
    key: str,
    expected: type,
    *,
    source: str,
    diagnostics: DiagnosticLog | None = None,
) -> Any | None:
    """Return ``table[key]`` when it has the expected type, otherwise None.

    Unlike lenient coercion, a present value of the wrong type is ignored and
    reported: ``bool`` is not accepted where an ``int`` is expected (and vice
    versa), and no value is converted to a string.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        expected (type): One of ``bool``, ``int`` or ``str``.
        source (str): Human-readable origin of the table, used in messages.
        diagnostics (DiagnosticLog | None): Log receiving a warning for wrongly typed values.

    Returns:
        Any | None: The value, or None when absent or wrongly typed.
    """
    if key not in table:
        return None
    value: Any = table[key]
    ok: bool = isinstance(value, expected)
    if expected is int and isinstance(value, bool):
        ok = False
    if ok:
        return value

    msg: str = (
        f"Ignoring {key}={value!r} in {source}: expected {expected.__name__}, "
        f"got {type(value).__name__}"
    )
    logger.warning(msg)
    if diagnostics is not None:
        diagnostics.add_warning(msg)
    return None


def extract_docmark_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the DocMark table of a parsed config file.

    ``pyproject.toml`` files carry it under ``[tool.docmark]``; any other file
    under ``[docmark]``. A ``docmark.toml`` without a ``[docmark]`` table is read
    as a flat document of DocMark keys.

    Args:
        data (TomlTable): Parsed TOML content.
        path (Path): The file the content was read from.

    Returns:
        TomlTable | None: The DocMark table, or None when a ``pyproject.toml``
            has no ``[tool.docmark]`` section.
    """
    if path.name == PYPROJECT_TOML_NAME:
        tool: TomlTable = get_table_value(data, "tool")
        if DOCMARK_SECTION not in tool:
            return None
        return get_table_value(tool, DOCMARK_SECTION)
    if DOCMARK_SECTION in data:
        return get_table_value(data, DOCMARK_SECTION)
    return data


def load_defaults_text() -> str:
    """Return the raw text of the packaged default configuration.

    Raises:
        RuntimeError: If the bundled default config resource cannot be read.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    logger.debug("Loading defaults from package resource: %s", resource)
    try:
        return resource.read_text(encoding="utf8")
    except OSError as exc:
        raise RuntimeError(
            f"Cannot read bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r}: {exc}"
        ) from exc


def load_defaults_dict() -> TomlTable:
    """Return the packaged default configuration as a Python dict.

    Returns:
        TomlTable: The parsed default configuration.

    Raises:
        RuntimeError: If the bundled default config resource cannot be read or
            parsed as TOML.
    """
    text: str = load_defaults_text()
    try:
        data: TomlTable = toml.loads(text)
    except toml.TomlDecodeError as exc:
        raise RuntimeError(
            f"Bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r} is invalid TOML: {exc}"
        ) from exc
    return data


def load_toml_dict(path: Path, diagnostics: DiagnosticLog | None = None) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``docmark.toml`` or ``pyproject.toml``).
        diagnostics (DiagnosticLog | None): Log receiving an error when the file
            cannot be read or parsed.

    Returns:
        TomlTable: The parsed TOML content, or an empty dict on failure.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    msg: str
    try:
        with path.open("r", encoding="utf-8") as f:
            return toml.load(f)
    except OSError as e:
        msg = f"Error loading TOML from {path}: {e}"
    except toml.TomlDecodeError as e:
        msg = f"Error decoding TOML from {path}: {e}"
    logger.error(msg)
    if diagnostics is not None:
        diagnostics.add_error(msg)
    return {}


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    return toml.dumps(toml_dict)


def nest_toml_under_section(toml_doc: str, section_keys: str) -> str:
    r"""Return a new TOML document nested under a dotted section path.

    Comments and whitespace attached to the keyed items of ``toml_doc`` are kept
    because tomlkit nodes are re-used when constructing the nested table; a
    leading comment block (the preamble) stays at the top of the document:

        nest_toml_under_section("# doc\nwrap_width = 80\n", "tool.docmark")

    yields::

        # doc
        [tool.docmark]
        wrap_width = 80

    Args:
        toml_doc (str): Original TOML document to nest.
        section_keys (str): Dotted section path such as ``"tool.docmark"``.

    Returns:
        str: The nested document.

    Raises:
        ValueError: If ``section_keys`` is empty or only contains dots.
        RuntimeError: If the TOML document cannot be parsed.
    """
    keys: list[str] = [k for k in section_keys.split(".") if k]
    if not keys:
        raise ValueError("section_keys must contain at least one non-empty component")

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(toml_doc)
    except TomlkitParseError as exc:
        raise RuntimeError(f"Error parsing TOML document: {exc}") from exc

    # Leading comments/whitespace stay above the new section header.
    start_index: int = len(doc.body)
    for i, (key, _) in enumerate(doc.body):
        if key is not None:
            start_index = i
            break

    new_doc: tomlkit.TOMLDocument = tomlkit.document()
    new_doc.body.extend(doc.body[:start_index])

    # A document holding only tables (e.g. `[docmark]`) nests without an empty
    # `[tool]` header of its own.
    only_tables: bool = bool(doc) and all(isinstance(v, Table) for _, v in doc.items())

    current_level: tomlkit.TOMLDocument | Table = new_doc
    for i, key in enumerate(keys):
        last: bool = i == len(keys) - 1
        table: Table = tomlkit.table(is_super_table=only_tables if last else True)
        current_level.add(key, table)
        current_level = table

    for item_key, item_value in doc.items():
        current_level.add(item_key, item_value)

    return new_doc.as_string()
