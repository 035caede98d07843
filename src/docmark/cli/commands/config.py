# docmark:header:start
#
#   project      : DocMark
#   file         : config.py
#   file_relpath : src/docmark/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""DocMark `config` command group.

Provides subcommands for inspecting and scaffolding DocMark configuration:

  * ``docmark config dump``: show the effective merged configuration.
  * ``docmark config defaults``: show the built-in default values.
  * ``docmark config init``: print the annotated starter configuration file.

Every subcommand accepts ``--pyproject`` to render the document under
``[tool.docmark]`` for inclusion into ``pyproject.toml``.
"""

from __future__ import annotations

import click

from docmark.cli.cmd_common import build_config, get_console
from docmark.cli.options import CONTEXT_SETTINGS
from docmark.config import default_config
from docmark.config.io import load_defaults_text, nest_toml_under_section, to_toml
from docmark.config.logging import get_logger

logger = get_logger(__name__)

pyproject_option = click.option(
    "--pyproject",
    is_flag=True,
    help="Render for inclusion in pyproject.toml (under [tool.docmark]).",
)


def _render(toml_doc: str, pyproject: bool) -> str:
    return nest_toml_under_section(toml_doc, "tool") if pyproject else toml_doc


@click.group(
    name="config",
    help="Inspect and scaffold DocMark configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""


@config_command.command(
    name="dump",
    help="Show the effective configuration after merging defaults and config files.",
)
@pyproject_option
def config_dump_command(*, pyproject: bool) -> None:
    """Print the merged configuration as TOML."""
    ctx = click.get_current_context()
    config = build_config(ctx)
    logger.trace("Dumping config: %s", config)
    console = get_console(ctx)
    sources = ", ".join(str(p) for p in config.config_files)
    console.print(f"# Sources: {sources}")
    console.print(_render(to_toml(config.to_toml_dict()), pyproject), nl=False)


@config_command.command(name="defaults", help="Show the built-in default configuration.")
@pyproject_option
def config_defaults_command(*, pyproject: bool) -> None:
    """Print the defaults as a comment-free TOML document."""
    console = get_console(click.get_current_context())
    console.print(_render(to_toml(default_config().to_toml_dict()), pyproject), nl=False)


@config_command.command(name="init", help="Print an annotated starter configuration file.")
@pyproject_option
def config_init_command(*, pyproject: bool) -> None:
    """Print the packaged, commented default configuration."""
    console = get_console(click.get_current_context())
    console.print(_render(load_defaults_text(), pyproject), nl=False)
