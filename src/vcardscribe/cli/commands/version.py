# topmark:header:start
#
#   project      : VCardScribe
#   file         : version.py
#   file_relpath : src/vcardscribe/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""VCardScribe `version` command.

Prints the current VCardScribe version as installed in the active Python environment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from vcardscribe.cli.cmd_common import get_console, get_effective_verbosity
from vcardscribe.constants import VCARDSCRIBE_VERSION
from vcardscribe.core.versions import VCardVersion

if TYPE_CHECKING:
    from vcardscribe.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of VCardScribe.",
)
def version_command() -> None:
    """Show the current version of VCardScribe.

    With ``-v`` on the group, the supported vCard versions are listed as well.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = get_console(ctx)

    if get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled("VCardScribe version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(VCARDSCRIBE_VERSION, bold=True)}")
        console.print()
        console.print("Supported vCard versions:")
        for v in VCardVersion:
            console.print(f"    {v.value}  ({v.label})")
    else:
        console.print(console.styled(VCARDSCRIBE_VERSION, bold=True))
