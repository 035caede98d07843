# docmark:header:start
#
#   project      : DocMark
#   file         : spans.py
#   file_relpath : src/docmark/cli/commands/spans.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""DocMark `spans` command.

Lists the semantic spans of each file. Positions are 0-based and ranges are
half-open (``start-end`` excludes ``end``), matching the JSON output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from docmark import api
from docmark.cli.cmd_common import build_config, get_console
from docmark.cli.io import read_document
from docmark.cli.options import CONTEXT_SETTINGS, files_argument
from docmark.comments.types import SpanLayer
from docmark.config.logging import get_logger

if TYPE_CHECKING:
    from docmark.comments.types import Span

logger = get_logger(__name__)


@click.command(
    name="spans",
    help="List the semantic spans of comment text in FILES.",
    context_settings=CONTEXT_SETTINGS,
)
@files_argument
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--layer",
    "layers",
    multiple=True,
    type=click.Choice([layer.value for layer in SpanLayer]),
    help="Only list spans of this layer (repeatable).",
)
def spans_command(*, files: tuple[str, ...], output_format: str, layers: tuple[str, ...]) -> None:
    """List spans for every file."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = build_config(ctx)
    wanted: set[SpanLayer] = {SpanLayer(v) for v in layers} or set(SpanLayer)

    report: list[dict[str, Any]] = []
    for name in files:
        doc = read_document(name)
        spans: list[Span] = [s for s in api.classify(doc.lines, config) if s.layer in wanted]
        logger.debug("%s: %d span(s)", name, len(spans))

        if output_format == "json":
            report.append(
                {
                    "path": name,
                    "spans": [
                        {**s.to_dict(), "text": doc.lines[s.line][s.start : s.end]} for s in spans
                    ],
                }
            )
            continue

        for s in spans:
            text = doc.lines[s.line][s.start : s.end]
            console.print(
                f"{name}:{s.line}:{s.start}-{s.end}  "
                f"{console.styled(s.kind.value, fg='cyan')}  {text!r}"
            )

    if output_format == "json":
        console.print(json.dumps(report, indent=2))
