# topmark:header:start
#
#   project      : VCardScribe
#   file         : main.py
#   file_relpath : src/vcardscribe/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point of the VCardScribe CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

import click

from vcardscribe.cli.commands.config import config_command
from vcardscribe.cli.commands.scribes import scribes_command
from vcardscribe.cli.commands.version import version_command
from vcardscribe.cli.commands.write import write_command
from vcardscribe.cli.console import ClickConsole
from vcardscribe.cli.options import common_verbose_options, resolve_verbosity
from vcardscribe.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # VCARDSCRIBE_LOG_LEVEL wins over -v/-q for internal logging
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    ctx.color = False if no_color else None
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="VCardScribe CLI: write contact records as vCard 2.1, 3.0 or 4.0.",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the VCardScribe CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'vcardscribe write CONTACTS.toml' to write vCards.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(scribes_command)

cli.add_command(config_command)

cli.add_command(write_command)

if __name__ == "__main__":
    cli()
