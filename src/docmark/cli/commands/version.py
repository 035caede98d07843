# docmark:header:start
#
#   project      : DocMark
#   file         : version.py
#   file_relpath : src/docmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""DocMark `version` command.

Prints the current DocMark version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from docmark.cli.cmd_common import get_console, get_effective_verbosity
from docmark.constants import DOCMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of DocMark.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of DocMark."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if output_format == "json":
        console.print(json.dumps({"version": DOCMARK_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("DocMark version:", bold=True, underline=True))
        console.print(f"    {console.styled(DOCMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(DOCMARK_VERSION, bold=True))
