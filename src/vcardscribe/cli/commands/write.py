# topmark:header:start
#
#   project      : VCardScribe
#   file         : write.py
#   file_relpath : src/vcardscribe/cli/commands/write.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""VCardScribe `write` command.

Reads contact records from a TOML document and writes them as vCard text to
stdout or to a file. Write warnings go to stderr, colored by kind.

Input:
    CONTACTS is a TOML file holding ``[[contact]]`` tables (see
    `vcardscribe.cli.contacts`), or ``-`` to read the document from stdin.

Exit codes:
    SUCCESS (0) when every record was written; FAILURE (1) with
    ``--fail-on-warning`` when warnings were reported; DATA_ERROR (65) for
    malformed contacts or nesting too deep; FILE_NOT_FOUND (66);
    SOFTWARE_ERROR (70) for a property class without a scribe; IO_ERROR (74);
    CONFIG_ERROR (78).
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING

import click
from tomlkit.exceptions import ParseError as TomlkitParseError

from vcardscribe.cli.cmd_common import get_console, resolve_writer_config
from vcardscribe.cli.contacts import ContactsFormatError, contacts_from_document, load_contacts
from vcardscribe.cli.errors import (
    ScribeCliError,
    ScribeDataError,
    ScribeFileNotFoundError,
    ScribeIOError,
    ScribeUnregisteredTypeError,
)
from vcardscribe.cli.options import VersionParam, common_writer_options, writer_overrides
from vcardscribe.config.io.loaders import TomlLoadError, parse_toml_text
from vcardscribe.config.logging import get_logger
from vcardscribe.core.errors import NestingDepthError, UnregisteredPropertyTypeError
from vcardscribe.core.versions import VCardVersion
from vcardscribe.pipeline.writer import VCardWriter

if TYPE_CHECKING:
    from vcardscribe.cli.console import ClickConsole
    from vcardscribe.config.logging import ScribeLogger
    from vcardscribe.config.model import WriterConfig
    from vcardscribe.model.vcard import VCard

logger: ScribeLogger = get_logger(__name__)


def _read_contacts(source: Path) -> list[VCard]:
    """Load the records from ``source`` (``-`` reads stdin)."""
    try:
        if str(source) == "-":
            text: str = click.get_text_stream("stdin").read()
            return contacts_from_document(parse_toml_text(text))
        if not source.exists():
            raise ScribeFileNotFoundError(f"Contacts file not found: {source}")
        return load_contacts(source)
    except TomlkitParseError as exc:
        raise ScribeDataError(f"Invalid TOML on stdin: {exc}") from exc
    except TomlLoadError as exc:
        raise ScribeDataError(str(exc)) from exc
    except ContactsFormatError as exc:
        raise ScribeDataError(f"Malformed contacts in {source}: {exc}") from exc


def _render_all(
    vcards: list[VCard], version: VCardVersion, config: WriterConfig, console: ClickConsole
) -> tuple[str, int]:
    """Write every record to a buffer; return the text and the warning count."""
    sink = io.StringIO()
    writer = VCardWriter(sink, version, config=config)
    warning_count: int = 0
    for idx, vcard in enumerate(vcards, start=1):
        try:
            writer.write(vcard)
        except UnregisteredPropertyTypeError as exc:
            raise ScribeUnregisteredTypeError(f"vCard #{idx}: {exc}") from exc
        except NestingDepthError as exc:
            raise ScribeDataError(f"vCard #{idx}: {exc}") from exc
        for warning in writer.warnings:
            console.report_warning(warning, record=idx)
        warning_count += len(writer.warnings)
    return sink.getvalue(), warning_count


@click.command(
    name="write",
    help="Write contacts from a TOML document as vCards.",
    epilog="""
CONTACTS holds [[contact]] tables; use '-' to read it from stdin.
Flags that are not given fall back to the --config file, then to the defaults.""",
)
@click.argument(
    "contacts",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--vcard-version",
    "-V",
    "version",
    type=VersionParam(),
    default=VCardVersion.V3_0.value,
    show_default=True,
    help="Target vCard version (2.1, 3.0 or 4.0).",
)
@click.option(
    "--output",
    "-o",
    "output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the vCards to this file instead of stdout.",
)
@click.option(
    "--fail-on-warning",
    is_flag=True,
    default=False,
    help="Exit with status 1 when any warning was reported.",
)
@common_writer_options
def write_command(
    *,
    contacts: Path,
    version: VCardVersion,
    output: Path | None,
    fail_on_warning: bool,
    config_path: Path | None,
    add_prodid: bool | None,
    version_strict: bool | None,
    caret_encoding: bool | None,
    folding_enabled: bool | None,
    fold_width: int | None,
    newline: str | None,
) -> None:
    """Write contacts from a TOML document as vCards.

    Args:
        contacts (Path): The contacts TOML file, or ``-`` for stdin.
        version (VCardVersion): Target version.
        output (Path | None): Destination file; stdout when ``None``.
        fail_on_warning (bool): Exit with FAILURE when warnings were reported.
        config_path (Path | None): Optional configuration file.
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
    vcards: list[VCard] = _read_contacts(contacts)
    logger.info("Writing %d contact(s) as vCard %s", len(vcards), version)

    text, warning_count = _render_all(vcards, version, config, console)

    if output is None:
        console.write_raw(text)
    else:
        try:
            with output.open("w", encoding="utf-8", newline="") as fh:
                fh.write(text)
        except OSError as exc:
            raise ScribeIOError(f"Cannot write {output}: {exc.strerror or exc}") from exc
        logger.info("Wrote %d vCard(s) to %s", len(vcards), output)

    if warning_count and fail_on_warning:
        raise ScribeCliError(f"{warning_count} warning(s) reported")
