# topmark:header:start
#
#   project      : VCardScribe
#   file         : test_contacts.py
#   file_relpath : tests/cli/test_contacts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for reading contact records from TOML documents."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from tests.conftest import parametrize
from vcardscribe.cli.contacts import ContactsFormatError, contacts_from_document, load_contacts
from vcardscribe.cli.errors import ScribeUsageError
from vcardscribe.cli.options import resolve_verbosity, writer_overrides
from vcardscribe.config.io import TomlLoadError, parse_toml_text
from vcardscribe.config.logging import TRACE_LEVEL
from vcardscribe.model import (
    Address,
    Agent,
    FormattedName,
    Kind,
    Label,
    Member,
    Note,
    ProductId,
    RawProperty,
    StructuredName,
)

if TYPE_CHECKING:
    from pathlib import Path

    from vcardscribe.model import VCard

FULL_CONTACT: str = """
[[contact]]
fn = "John Doe"
note = ["Likes coffee", { value = "Allergic to cats", group = "item1" }]
prodid = "Acme"
kind = "group"
member = { uri = "urn:uuid:1234" }

[contact.n]
family = "Doe"
given = "John"
prefixes = ["Dr."]
params = { LANGUAGE = "en" }

[[contact.adr]]
types = ["home", "pref"]
street = "123 Main St."
locality = "Austin"
label = "123 Main St.\\nAustin"

[[contact.label]]
value = "PO Box 1"
types = ["parcel"]

[[contact.extra]]
name = "X-LUCKY-NUMBER"
value = "13"
params = { TYPE = ["work", "pref"] }

[[contact.agent]]
url = "http://example.com/agent.vcf"

[[contact]]
fn = "Jane"
"""


def _load(text: str) -> list[VCard]:
    return contacts_from_document(parse_toml_text(text))


def test_full_contact() -> None:
    first, second = _load(FULL_CONTACT)
    assert [type(p) for p in first] == [
        FormattedName,
        Note,
        Note,
        ProductId,
        Kind,
        Member,
        StructuredName,
        Address,
        Label,
        RawProperty,
        Agent,
    ]
    notes = first.properties_of(Note)
    assert [n.value for n in notes] == ["Likes coffee", "Allergic to cats"]
    assert notes[1].group == "item1"

    member = first.first(Member)
    assert member is not None and member.uri == "urn:uuid:1234"

    n = first.first(StructuredName)
    assert n is not None
    assert (n.family, n.given, n.prefixes) == ("Doe", "John", ["Dr."])
    assert n.parameters.language == "en"

    adr = first.first(Address)
    assert adr is not None
    assert adr.types == ["home", "pref"]
    assert adr.label == "123 Main St.\nAustin"

    label = first.first(Label)
    assert label is not None and label.types == ["parcel"]

    extra = first.first(RawProperty)
    assert extra is not None
    assert (extra.name, extra.value) == ("X-LUCKY-NUMBER", "13")
    assert extra.parameters.types == ["work", "pref"]

    agent = first.first(Agent)
    assert agent is not None
    assert agent.url == "http://example.com/agent.vcf"
    assert agent.vcard is None

    assert [type(p) for p in second] == [FormattedName]


def test_nested_agent_contact() -> None:
    (vcard,) = _load(
        """
[[contact]]
fn = "Boss"

[[contact.agent]]
fn = "Agent"
group = "a1"

[[contact.agent.agent]]
fn = "Sub-agent"
"""
    )
    agent = vcard.first(Agent)
    assert agent is not None and agent.vcard is not None
    assert agent.group == "a1"
    inner = agent.vcard.first(Agent)
    assert inner is not None and inner.vcard is not None
    fn = inner.vcard.first(FormattedName)
    assert fn is not None and fn.value == "Sub-agent"


def test_wrong_types_are_ignored(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("WARNING")
    (vcard,) = _load('[[contact]]\nfn = 42\nnote = { text = "x" }\nnickname = "JD"\n')
    assert len(vcard) == 0
    messages = [r.getMessage() for r in caplog.records]
    assert any("Unknown key in [contact[0]]: nickname" in m for m in messages)
    assert any("Missing 'value'" in m for m in messages)


@parametrize(
    "text",
    [
        "title = 'x'\n",
        "contact = 1\n",
        "contact = [1, 2]\n",
        "[[contact]]\n[[contact.extra]]\nvalue = 'x'\n",
    ],
)
def test_format_errors(text: str) -> None:
    with pytest.raises(ContactsFormatError):
        _load(text)


def test_load_contacts(tmp_path: Path) -> None:
    path = tmp_path / "c.toml"
    path.write_text('[[contact]]\nfn = "x"\n', encoding="utf-8")
    assert len(load_contacts(path)) == 1
    with pytest.raises(TomlLoadError):
        load_contacts(tmp_path / "missing.toml")


@parametrize(
    ("verbose", "quiet", "level"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
        (0, 2, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, level: int) -> None:
    assert resolve_verbosity(verbose, quiet) == level


def test_resolve_verbosity_conflict() -> None:
    with pytest.raises(ScribeUsageError):
        resolve_verbosity(1, 1)


def test_writer_overrides_leave_unset_flags_none() -> None:
    builder = writer_overrides(
        add_prodid=None,
        version_strict=False,
        caret_encoding=None,
        folding_enabled=None,
        fold_width=60,
        newline="lf",
    )
    assert builder.add_prodid is None
    assert builder.version_strict is False
    assert builder.fold_width == 60
    assert builder.newline == "\n"
