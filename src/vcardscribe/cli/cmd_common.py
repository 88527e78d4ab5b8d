# topmark:header:start
#
#   project      : VCardScribe
#   file         : cmd_common.py
#   file_relpath : src/vcardscribe/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small, focused helpers used by multiple CLI commands: console lookup and
writer configuration resolution. Exit code policy stays in the commands.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from vcardscribe.cli.console import ClickConsole
from vcardscribe.cli.errors import ScribeConfigError, ScribeFileNotFoundError
from vcardscribe.config.io.loaders import TomlLoadError
from vcardscribe.config.logging import get_logger
from vcardscribe.config.model import MutableWriterConfig, WriterConfig

if TYPE_CHECKING:
    from pathlib import Path

    from vcardscribe.config.logging import ScribeLogger

logger: ScribeLogger = get_logger(__name__)


def get_console(ctx: click.Context | None = None) -> ClickConsole:
    """Return the console stored on the Click context (a fresh one if absent)."""
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None and isinstance(ctx.obj, dict):
        console = ctx.obj.get("console")
        if isinstance(console, ClickConsole):
            return console
    return ClickConsole()


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the logging level resolved from ``-v``/``-q`` (WARNING if unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", logging.WARNING))


def resolve_writer_config(
    config_path: Path | None,
    overrides: MutableWriterConfig,
) -> WriterConfig:
    """Resolve the writer configuration for a command.

    Resolution order (last wins): defaults, the ``--config`` file, CLI flags.

    Args:
        config_path (Path | None): Optional ``vcardscribe.toml``/``pyproject.toml``.
        overrides (MutableWriterConfig): Values set on the command line.

    Returns:
        WriterConfig: The effective configuration.

    Raises:
        ScribeFileNotFoundError: If ``config_path`` does not exist.
        ScribeConfigError: If the file cannot be parsed or holds invalid values.
    """
    layered = MutableWriterConfig()
    if config_path is not None:
        if not config_path.is_file():
            raise ScribeFileNotFoundError(f"Config file not found: {config_path}")
        try:
            layered = MutableWriterConfig.from_toml_file(config_path)
        except TomlLoadError as exc:
            raise ScribeConfigError(str(exc)) from exc

    layered = layered.merge_with(overrides)
    try:
        config: WriterConfig = layered.freeze()
    except ValueError as exc:
        raise ScribeConfigError(f"Invalid writer configuration: {exc}") from exc
    logger.debug("Effective writer config: %r", config)
    return config
