# topmark:header:start
#
#   project      : VCardScribe
#   file         : test_vcard_model.py
#   file_relpath : tests/model/test_vcard_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the record, property and parameter model."""

from __future__ import annotations

from vcardscribe.core.versions import ALL_VERSIONS, VCardVersion
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
    VCard,
    VCardParameters,
)


def test_vcard_keeps_insertion_order() -> None:
    fn = FormattedName("John Doe")
    note1 = Note("one")
    note2 = Note("two")
    vcard = VCard().add(note1).add(fn).add(note2)
    assert list(vcard) == [note1, fn, note2]
    assert len(vcard) == 3
    assert vcard.properties_of(Note) == [note1, note2]
    assert vcard.first(FormattedName) is fn
    assert vcard.first(Kind) is None


def test_vcard_remove_all() -> None:
    vcard = VCard([Note("a"), FormattedName("b"), Note("c")])
    vcard.remove_all(Note)
    assert [type(p) for p in vcard] == [FormattedName]


def test_supported_versions() -> None:
    assert FormattedName.supported_versions == ALL_VERSIONS
    assert Label.supported_versions == frozenset({VCardVersion.V2_1, VCardVersion.V3_0})
    assert Agent.supported_versions == frozenset({VCardVersion.V2_1, VCardVersion.V3_0})
    assert ProductId.supported_versions == frozenset({VCardVersion.V3_0, VCardVersion.V4_0})
    assert Kind.supported_versions == frozenset({VCardVersion.V4_0})
    assert Member.supported_versions == frozenset({VCardVersion.V4_0})
    assert not Kind.individual().is_supported_by(VCardVersion.V3_0)


def test_kind_is_group() -> None:
    assert Kind.group_kind().is_group()
    assert Kind("GROUP").is_group()
    assert not Kind.org().is_group()
    assert not Kind().is_group()


def test_address_types() -> None:
    adr = Address.with_types("work", "dom", street="1 Main St.")
    assert adr.types == ["work", "dom"]
    assert adr.street == "1 Main St."
    adr.add_type("parcel")
    assert adr.parameters.get_all("type") == ["work", "dom", "parcel"]


def test_parameters_are_case_insensitive_and_ordered() -> None:
    params = VCardParameters()
    params.add("X-DOORMAN", "true")
    params.add("language", "FR")
    params.add("LANGUAGE", "es")
    assert list(params.items()) == [("X-DOORMAN", ["true"]), ("language", ["FR", "es"])]
    assert "Language" in params
    assert params.first("LANGUAGE") == "FR"
    params.put("language", "de")
    assert params.get_all("LANGUAGE") == ["de"]
    assert params.remove_all("x-doorman") == ["true"]
    assert len(params) == 1


def test_parameters_copy_is_independent() -> None:
    params = VCardParameters([("TYPE", "home")])
    clone = params.copy()
    clone.add_type("work")
    assert params.types == ["home"]
    assert clone == VCardParameters([("TYPE", "home"), ("TYPE", "work")])


def test_language_accessor() -> None:
    note = Note("Bonne soirée")
    note.parameters.language = "fr"
    assert note.parameters.first("LANGUAGE") == "fr"
    note.parameters.language = None
    assert "LANGUAGE" not in note.parameters


def test_encoding_charset_and_label_accessors() -> None:
    params = VCardParameters(
        [("encoding", "quoted-printable"), ("Charset", "UTF-8"), ("LABEL", "Main St.")]
    )
    assert params.encoding == "quoted-printable"
    assert params.charset == "UTF-8"
    assert params.label == "Main St."
    assert VCardParameters().encoding is None


def test_raw_property_defaults() -> None:
    raw = RawProperty(name="X-FOO", value="bar", group="item1")
    assert raw.is_supported_by(VCardVersion.V2_1)
    assert raw.group == "item1"
