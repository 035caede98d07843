# docmark:header:start
#
#   project      : DocMark
#   file         : __init__.py
#   file_relpath : src/docmark/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Public DocMark API (stable surface).

This module exposes the four function families of the engine with
configuration applied, for hosts that want to run DocMark programmatically
without going through the CLI.

Configuration contract
----------------------
- Every function accepting ``config`` takes either a plain **mapping** with the
  keys of a ``[docmark]`` table, or a frozen [`Config`][docmark.config.model.Config].
  A mapping is layered over the bundled defaults; ``None`` means "defaults only"
  (no project discovery, so results never depend on the working directory).
- Explicit keyword arguments win over the configuration.

```python
from docmark import api

edits = api.compute_wrap_edits(lines, config={"wrap_width": 80})
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from docmark.comments import convert as _convert
from docmark.comments import reflow as _reflow
from docmark.comments import spans as _spans
from docmark.comments import title_case as _title_case
from docmark.comments.types import InsertEdit, ReplaceEdit, Span, SpanKind, SpanLayer
from docmark.config.logging import get_logger
from docmark.config.model import Config, MutableConfig
from docmark.constants import DOCMARK_VERSION

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

logger = get_logger(__name__)

__all__ = [
    "Config",
    "InsertEdit",
    "ReplaceEdit",
    "Span",
    "SpanKind",
    "SpanLayer",
    "classify",
    "compute_convert_edits",
    "compute_title_case_edits",
    "compute_wrap_edits",
    "get_version",
    "resolve_config",
]


def get_version() -> str:
    """Return the installed DocMark version."""
    return DOCMARK_VERSION


def resolve_config(config: Mapping[str, Any] | Config | None = None) -> Config:
    """Normalize the ``config`` argument accepted by the API functions.

    Args:
        config (Mapping[str, Any] | Config | None): A frozen config (returned as
            is), a mapping of ``[docmark]`` keys layered over the defaults, or
            None for the defaults alone.

    Returns:
        Config: The frozen configuration to use.
    """
    if isinstance(config, Config):
        return config
    draft: MutableConfig = MutableConfig.from_defaults()
    if config is not None:
        draft = draft.merge_with(MutableConfig.from_toml_dict(dict(config), source="<api>"))
    return draft.freeze()


def classify(
    lines: Sequence[str],
    config: Mapping[str, Any] | Config | None = None,
) -> list[Span]:
    """Produce all typed spans for one document snapshot.

    Args:
        lines (Sequence[str]): Document lines without end-of-line markers.
        config (Mapping[str, Any] | Config | None): Span-production settings.

    Returns:
        list[Span]: Spans ordered by line and start column.
    """
    cfg: Config = resolve_config(config)
    return _spans.classify(
        lines,
        enabled=cfg.enabled,
        bold_mark_lines=cfg.bold_mark_lines,
        render_mark_separators=cfg.render_mark_separators,
        color_inline_code_in_comments=cfg.color_inline_code_in_comments,
    )


def compute_convert_edits(lines: Sequence[str]) -> list[InsertEdit]:
    """Return the insertions that turn ``//`` comment lines into ``///`` lines."""
    return _convert.compute_convert_edits(lines)


def compute_wrap_edits(
    lines: Sequence[str],
    max_width: int | None = None,
    eol: str = "\n",
    *,
    count_from_comment_start: bool | None = None,
    avoid_punctuation_breaks: bool | None = None,
    config: Mapping[str, Any] | Config | None = None,
) -> list[ReplaceEdit]:
    """Compute replacement edits that re-wrap every comment block.

    Args:
        lines (Sequence[str]): Document lines without end-of-line markers.
        max_width (int | None): Wrap width; ``wrap_width`` from the config when None.
            Always clamped to a floor of 40.
        eol (str): End-of-line marker joining the lines of each replacement.
        count_from_comment_start (bool | None): Overrides ``wrap_count_from_comment_start``.
        avoid_punctuation_breaks (bool | None): Overrides ``avoid_punctuation_breaks``.
        config (Mapping[str, Any] | Config | None): Reflow settings.

    Returns:
        list[ReplaceEdit]: One edit per changed block, in document order.
    """
    cfg: Config = resolve_config(config)
    return _reflow.compute_wrap_edits(
        lines,
        max_width if max_width is not None else cfg.wrap_width,
        eol,
        count_from_comment_start=(
            count_from_comment_start
            if count_from_comment_start is not None
            else cfg.wrap_count_from_comment_start
        ),
        avoid_punctuation_breaks=(
            avoid_punctuation_breaks
            if avoid_punctuation_breaks is not None
            else cfg.avoid_punctuation_breaks
        ),
    )


def compute_title_case_edits(lines: Sequence[str], eol: str = "\n") -> list[ReplaceEdit]:
    """Return whole-line replacements that title-case every ``// MARK:`` header."""
    return _title_case.compute_title_case_edits(lines, eol)
