# topmark:header:start
#
#   project      : VCardScribe
#   file         : test_info_commands.py
#   file_relpath : tests/cli/test_info_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the informational commands: `version`, `scribes` and `config`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import tomlkit

from tests.cli.conftest import assert_exit, run_cli, run_cli_in
from tests.conftest import mark_cli, parametrize
from vcardscribe.cli.exit_codes import ExitCode
from vcardscribe.constants import VCARDSCRIBE_VERSION

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_no_subcommand_prints_help() -> None:
    result = run_cli([])
    assert_exit(result, ExitCode.SUCCESS)
    assert "Hint:" in result.output
    assert "write" in result.output


@mark_cli
def test_version() -> None:
    result = run_cli(["--no-color", "version"])
    assert_exit(result, ExitCode.SUCCESS)
    assert result.output.strip() == VCARDSCRIBE_VERSION


@mark_cli
def test_version_verbose_lists_vcard_versions() -> None:
    result = run_cli(["--no-color", "-v", "version"])
    assert_exit(result, ExitCode.SUCCESS)
    for version in ("2.1", "3.0", "4.0"):
        assert f"    {version}  (vCard {version})" in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert_exit(result, ExitCode.USAGE_ERROR)
    assert "mutually exclusive" in result.output


@mark_cli
def test_scribes_default_listing() -> None:
    result = run_cli(["--no-color", "scribes"])
    assert_exit(result, ExitCode.SUCCESS)
    assert "Registered scribes:" in result.output
    for name in ("ADR", "AGENT", "FN", "KIND", "LABEL", "MEMBER", "N", "NOTE", "PRODID"):
        assert f"  {name}" in result.output
    assert "scribe:" not in result.output


@mark_cli
def test_scribes_long() -> None:
    result = run_cli(["--no-color", "scribes", "--long"])
    assert_exit(result, ExitCode.SUCCESS)
    assert "scribe:   vcardscribe.scribes.builtins.agent.AgentScribe" in result.output


@mark_cli
def test_scribes_json() -> None:
    result = run_cli(["scribes", "--output-format", "json"])
    assert_exit(result, ExitCode.SUCCESS)
    payload: list[dict[str, Any]] = json.loads(result.stdout)
    by_name = {entry["property"]: entry for entry in payload}
    assert by_name["KIND"]["versions"] == ["4.0"]
    assert by_name["AGENT"]["versions"] == ["2.1", "3.0"]
    assert by_name["FN"]["versions"] == ["2.1", "3.0", "4.0"]


@mark_cli
def test_scribes_json_long() -> None:
    result = run_cli(["scribes", "--long", "--output-format", "json"])
    assert_exit(result, ExitCode.SUCCESS)
    payload: list[dict[str, Any]] = json.loads(result.stdout)
    entry = next(e for e in payload if e["property_name"] == "LABEL")
    assert entry["property_class"] == "vcardscribe.model.properties.Label"
    assert entry["versions"] == ["2.1", "3.0"]


@mark_cli
@parametrize("fmt", ["markdown", "md"])
def test_scribes_markdown(fmt: str) -> None:
    result = run_cli(["scribes", "--output-format", fmt])
    assert_exit(result, ExitCode.SUCCESS)
    lines = result.stdout.splitlines()
    assert lines[0] == "| Property | Versions | Description |"
    assert "| `MEMBER` | 4.0 |" in result.stdout


@mark_cli
def test_config_defaults() -> None:
    result = run_cli(["config"])
    assert_exit(result, ExitCode.SUCCESS)
    doc = tomlkit.parse(result.stdout).unwrap()
    writer = doc["writer"]
    assert writer["add_prodid"] is True
    assert writer["newline"] == "\r\n"
    assert writer["folding"] == {"enabled": True, "width": 75, "indent": " "}


@mark_cli
def test_config_flags_and_pyproject_layout() -> None:
    result = run_cli(["config", "--pyproject", "--no-prodid", "--no-fold", "--newline", "lf"])
    assert_exit(result, ExitCode.SUCCESS)
    doc = tomlkit.parse(result.stdout).unwrap()
    writer = doc["tool"]["vcardscribe"]["writer"]
    assert writer["add_prodid"] is False
    assert writer["newline"] == "\n"
    assert writer["folding"] == {"enabled": False}


@mark_cli
def test_config_layers_file(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.vcardscribe.writer]\ncaret_encoding = true\n", encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["config", "--config", "pyproject.toml"])
    assert_exit(result, ExitCode.SUCCESS)
    assert tomlkit.parse(result.stdout).unwrap()["writer"]["caret_encoding"] is True
