# topmark:header:start
#
#   project      : VCardScribe
#   file         : errors.py
#   file_relpath : src/vcardscribe/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the VCardScribe CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. Click prints the message and exits with ``exit_code``.
"""

from __future__ import annotations

from typing import IO, Any

import click

from vcardscribe.cli.exit_codes import ExitCode


class ScribeCliError(click.ClickException):
    """Base class for all VCardScribe CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error through the project console when one is set up.

        Falls back to Click's default error display otherwise.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class ScribeUsageError(ScribeCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ScribeDataError(ScribeCliError):
    """Error for malformed contacts input or records that cannot be written."""

    exit_code = ExitCode.DATA_ERROR


class ScribeFileNotFoundError(ScribeCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ScribeUnregisteredTypeError(ScribeCliError):
    """Error for property classes without a registered scribe."""

    exit_code = ExitCode.SOFTWARE_ERROR


class ScribeIOError(ScribeCliError):
    """Error for I/O errors reading or writing files."""

    exit_code = ExitCode.IO_ERROR


class ScribeConfigError(ScribeCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
