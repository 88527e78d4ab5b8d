# topmark:header:start
#
#   project      : VCardScribe
#   file         : console.py
#   file_relpath : src/vcardscribe/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module provides a `ClickConsole` class that separates CLI output from
internal logging. Use it for messages intended for end users (vCard text,
write warnings, summaries), and reserve `logging` for diagnostics.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, TextIO

import click

if TYPE_CHECKING:
    from vcardscribe.diagnostic.model import ScribeWarning


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        out (TextIO | None): Stream for standard output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for error output. Defaults to `sys.stderr`.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def write_raw(self, text: str) -> None:
        """Write text to stdout unchanged (no newline translation, no color)."""
        click.echo(text, nl=False, file=self.out, color=False)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style (plain text if color is disabled)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

    def report_warning(self, warning: ScribeWarning, *, record: int | None = None) -> None:
        """Write one write warning to stderr, colored by its kind.

        Args:
            warning (ScribeWarning): The warning.
            record (int | None): 1-based index of the record it belongs to.
        """
        prefix: str = f"vCard #{record}: " if record is not None else ""
        text: str = f"{prefix}{warning}"
        if self.enable_color:
            text = warning.kind.color(text)
        click.echo(text, file=self.err, color=self.enable_color)
