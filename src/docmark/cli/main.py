# docmark:header:start
#
#   project      : DocMark
#   file         : main.py
#   file_relpath : src/docmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""DocMark command-line interface.

Key ideas:
- Group-level options (verbosity, color, config sources) are initialized once
  and placed into ``ctx.obj``.
- Subcommands build the effective configuration from that state through
  [`build_config`][docmark.cli.cmd_common.build_config].
"""

from __future__ import annotations

import click

from docmark.cli.commands.config import config_command
from docmark.cli.commands.convert import convert_command
from docmark.cli.commands.spans import spans_command
from docmark.cli.commands.title_case import title_case_command
from docmark.cli.commands.version import version_command
from docmark.cli.commands.wrap import wrap_command
from docmark.cli.console import ClickConsole
from docmark.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from docmark.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Initialize shared state on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        no_config (bool): Skip project config discovery.
        config_paths (tuple[str, ...]): Extra config files, in merge order.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.obj["no_config"] = no_config
    ctx.obj["config_paths"] = tuple(config_paths)

    enable_color = not no_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="DocMark: semantic spans and reflow for // and /// comments.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Entry point for the DocMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        no_config=no_config,
        config_paths=config_paths,
    )
    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(spans_command)
cli.add_command(wrap_command)
cli.add_command(title_case_command)
cli.add_command(convert_command)
cli.add_command(config_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
