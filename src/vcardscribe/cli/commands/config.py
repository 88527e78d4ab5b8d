# topmark:header:start
#
#   project      : VCardScribe
#   file         : config.py
#   file_relpath : src/vcardscribe/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""VCardScribe `config` command.

Prints the effective writer configuration as TOML, after layering the
``--config`` file and the writer flags over the defaults. The output can be
saved as ``vcardscribe.toml`` or, with ``--pyproject``, pasted into
``pyproject.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vcardscribe.cli.cmd_common import get_console, resolve_writer_config
from vcardscribe.cli.options import common_writer_options, writer_overrides
from vcardscribe.config.model import render_config_toml

if TYPE_CHECKING:
    from pathlib import Path

    from vcardscribe.cli.console import ClickConsole
    from vcardscribe.config.model import WriterConfig


@click.command(
    name="config",
    help="Show the effective writer configuration as TOML.",
)
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    default=False,
    help="Nest the output under [tool.vcardscribe] for use in pyproject.toml.",
)
@common_writer_options
def config_command(
    *,
    for_pyproject: bool,
    config_path: Path | None,
    add_prodid: bool | None,
    version_strict: bool | None,
    caret_encoding: bool | None,
    folding_enabled: bool | None,
    fold_width: int | None,
    newline: str | None,
) -> None:
    """Show the effective writer configuration as TOML.

    Args:
        for_pyproject (bool): Render the ``pyproject.toml`` layout.
        config_path (Path | None): Optional configuration file to layer in.
        add_prodid (bool | None): Override of `WriterConfig.add_prodid`.
        version_strict (bool | None): Override of `WriterConfig.version_strict`.
        caret_encoding (bool | None): Override of `WriterConfig.caret_encoding`.
        folding_enabled (bool | None): Enable or disable line folding.
        fold_width (int | None): Folding width override.
        newline (str | None): ``crlf`` or ``lf``.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = get_console(ctx)

    config: WriterConfig = resolve_writer_config(
        config_path,
        writer_overrides(
            add_prodid=add_prodid,
            version_strict=version_strict,
            caret_encoding=caret_encoding,
            folding_enabled=folding_enabled,
            fold_width=fold_width,
            newline=newline,
        ),
    )
    console.print(render_config_toml(config, for_pyproject=for_pyproject), nl=False)
