# topmark:header:start
#
#   project      : VCardScribe
#   file         : options.py
#   file_relpath : src/vcardscribe/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

Reusable options (verbosity, writer settings) and their resolution logic, so
commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from vcardscribe.cli.errors import ScribeUsageError
from vcardscribe.config.logging import TRACE_LEVEL
from vcardscribe.config.model import MutableWriterConfig
from vcardscribe.core.enum_mixins import KeyedStrEnum
from vcardscribe.core.versions import VCardVersion

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        The logging level as an integer.

    Raises:
        ScribeUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more ``-v`` set TRACE, two set DEBUG, one sets INFO.
        One or more ``-q`` set ERROR. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ScribeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


class VersionParam(click.ParamType):
    """Click parameter type accepting vCard versions (``2.1``, ``3``, ``v4.0``...)."""

    name = "version"

    def convert(
        self, value: object, param: click.Parameter | None, ctx: click.Context | None
    ) -> VCardVersion:
        if isinstance(value, VCardVersion):
            return value
        member = VCardVersion.parse(str(value))
        if member is None:
            choices = ", ".join(v.value for v in VCardVersion)
            self.fail(f"{value!r} is not a vCard version ({choices})", param, ctx)
        return member


def common_writer_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the writer configuration options to a command.

    Flags left unset do not override the configuration file (tri-state).
    """
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read writer settings from a vcardscribe.toml or pyproject.toml file.",
    )(f)
    f = click.option(
        "--prodid/--no-prodid",
        "add_prodid",
        default=None,
        help="Add a PRODID (X-PRODID for 2.1) property to each vCard.",
    )(f)
    f = click.option(
        "--strict/--no-strict",
        "version_strict",
        default=None,
        help="Drop properties the target version does not support.",
    )(f)
    f = click.option(
        "--caret/--no-caret",
        "caret_encoding",
        default=None,
        help="Use caret encoding for parameter values (3.0 and 4.0).",
    )(f)
    f = click.option(
        "--fold/--no-fold",
        "folding_enabled",
        default=None,
        help="Fold long lines.",
    )(f)
    f = click.option(
        "--fold-width",
        type=click.IntRange(min=2),
        default=None,
        help="Maximum line width when folding (default 75).",
    )(f)
    f = click.option(
        "--newline",
        type=click.Choice(["crlf", "lf"]),
        default=None,
        help="Line terminator (default crlf).",
    )(f)
    return f


_NEWLINES: dict[str, str] = {"crlf": "\r\n", "lf": "\n"}


def writer_overrides(
    *,
    add_prodid: bool | None,
    version_strict: bool | None,
    caret_encoding: bool | None,
    folding_enabled: bool | None,
    fold_width: int | None,
    newline: str | None,
) -> MutableWriterConfig:
    """Build a `MutableWriterConfig` from the CLI flags (unset flags stay ``None``)."""
    return MutableWriterConfig(
        add_prodid=add_prodid,
        version_strict=version_strict,
        caret_encoding=caret_encoding,
        folding_enabled=folding_enabled,
        fold_width=fold_width,
        newline=_NEWLINES[newline] if newline else None,
    )


class OutputFormat(KeyedStrEnum):
    """Output formats of the listing commands."""

    DEFAULT = ("default", "Human-readable text")
    JSON = ("json", "JSON document")
    MARKDOWN = ("markdown", "Markdown table", ("md",))


def common_output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--output-format`` to a listing command."""
    return click.option(
        "--output-format",
        "output_format",
        type=click.Choice(
            [name for fmt in OutputFormat for name in (fmt.value, *fmt.aliases)],
            case_sensitive=False,
        ),
        default=OutputFormat.DEFAULT.value,
        help=f"Output format ({', '.join(fmt.value for fmt in OutputFormat)}).",
    )(f)
