# topmark:header:start
#
#   project      : VCardScribe
#   file         : scribes.py
#   file_relpath : src/vcardscribe/cli/commands/scribes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI command to list registered property scribes.

Lists every scribe of the default registry with the property name it writes,
the property class it handles and the vCard versions it supports.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

import click

from vcardscribe.cli.cmd_common import get_console, get_effective_verbosity
from vcardscribe.cli.options import OutputFormat, common_output_format_option
from vcardscribe.scribes.registry import ScribeRegistry

if TYPE_CHECKING:
    from vcardscribe.cli.console import ClickConsole
    from vcardscribe.scribes.registry import ScribeMeta


@click.command(
    name="scribes",
    help="List registered property scribes.",
    epilog="""
Lists the scribes used by 'vcardscribe write', with the vCard versions each
property can be written to.""",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extended information (property and scribe classes, description).",
)
@common_output_format_option
def scribes_command(*, show_details: bool = False, output_format: str) -> None:
    """List registered property scribes.

    Args:
        show_details (bool): Also show the classes and description of each scribe.
        output_format (str): ``default``, ``json`` or ``markdown``.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = get_console(ctx)

    fmt: OutputFormat = OutputFormat.parse(output_format) or OutputFormat.DEFAULT
    metas: list[ScribeMeta] = list(ScribeRegistry.default().iter_meta())
    # -v on the group level implies --long
    show_details = show_details or get_effective_verbosity(ctx) <= logging.INFO

    if fmt is OutputFormat.JSON:
        payload = [asdict(m) for m in metas]
        if not show_details:
            payload = [{"property": m.property_name, "versions": list(m.versions)} for m in metas]
        console.print(json.dumps(payload, indent=2))
        return

    if fmt is OutputFormat.MARKDOWN:
        console.print("| Property | Versions | Description |")
        console.print("|---|---|---|")
        for m in metas:
            console.print(f"| `{m.property_name}` | {', '.join(m.versions)} | {m.description} |")
        return

    console.print(console.styled("Registered scribes:\n", bold=True, underline=True))
    width: int = max((len(m.property_name) for m in metas), default=0)
    for m in metas:
        versions: str = ", ".join(m.versions)
        console.print(f"  {console.styled(m.property_name.ljust(width), bold=True)}  {versions}")
        if show_details:
            console.print(f"      property: {m.property_class}")
            console.print(f"      scribe:   {m.scribe_class}")
            if m.description:
                console.print(f"      {m.description}")
