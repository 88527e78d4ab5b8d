# topmark:header:start
#
#   project      : VCardScribe
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running VCardScribe through Click's `CliRunner`.

`run_cli_in()` changes the working directory to ``tmp_path`` first, so relative
contacts and config paths resolve against the temporary test directory.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from vcardscribe.cli.exit_codes import ExitCode
from vcardscribe.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

# A record holding the properties every version requires, so it writes
# without warnings at 2.1, 3.0 and 4.0.
MINIMAL_CONTACTS: str = """
[[contact]]
fn = "John Doe"

[contact.n]
family = "Doe"
given = "John"
"""


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    return CliRunner().invoke(cli, argv, input=input_text)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, input_text=input_text)
    finally:
        os.chdir(cwd)


def stdout_text(result: Result) -> str:
    """Return stdout exactly as written (``CRLF`` line endings preserved)."""
    return result.stdout_bytes.decode("utf-8")


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert the exit code, showing the combined output on failure."""
    assert result.exit_code == code, result.output
