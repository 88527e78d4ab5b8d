# topmark:header:start
#
#   project      : VCardScribe
#   file         : test_preparation.py
#   file_relpath : tests/pipeline/test_preparation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for property preparation (version filter, labels, generator id)."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from vcardscribe.core.errors import UnregisteredPropertyTypeError
from vcardscribe.core.versions import VCardVersion
from vcardscribe.model import (
    Address,
    FormattedName,
    Kind,
    Label,
    Note,
    ProductId,
    RawProperty,
    VCard,
)
from vcardscribe.pipeline.preparation import (
    X_PRODID,
    PreparedProperties,
    make_generator_id,
    prepare_properties,
)
from vcardscribe.pipeline.validation import missing_required
from vcardscribe.scribes import ScribeRegistry

PRODUCT = "vcardscribe test"


@dataclass
class Mood(Note):
    """Custom property without a scribe."""


@dataclass
class Hobby(Note):
    """Another custom property without a scribe."""


def _prepare(
    vcard: VCard,
    version: VCardVersion,
    *,
    add_prodid: bool = False,
    version_strict: bool = True,
    registry: ScribeRegistry | None = None,
) -> PreparedProperties:
    return prepare_properties(
        vcard,
        version,
        registry or ScribeRegistry.default(),
        add_prodid=add_prodid,
        version_strict=version_strict,
        product_id=PRODUCT,
    )


def test_unsupported_properties_dropped_when_strict() -> None:
    kind = Kind.individual()
    fn = FormattedName("John")
    prepared = _prepare(VCard([kind, fn]), VCardVersion.V3_0)
    assert prepared.properties == (fn,)
    assert prepared.dropped == (kind,)


def test_unsupported_properties_kept_when_lenient() -> None:
    kind = Kind.individual()
    prepared = _prepare(VCard([kind]), VCardVersion.V3_0, version_strict=False)
    assert prepared.properties == (kind,)
    assert prepared.dropped == ()


def test_generator_id_per_version() -> None:
    gen21 = make_generator_id(VCardVersion.V2_1, PRODUCT)
    assert isinstance(gen21, RawProperty)
    assert gen21.name == X_PRODID
    assert gen21.value == PRODUCT
    for version in (VCardVersion.V3_0, VCardVersion.V4_0):
        gen = make_generator_id(version, PRODUCT)
        assert isinstance(gen, ProductId)
        assert gen.value == PRODUCT


def test_generator_id_put_first_and_replaces_existing() -> None:
    fn = FormattedName("John")
    existing = ProductId("Acme Co.")
    prepared = _prepare(VCard([fn, existing]), VCardVersion.V3_0, add_prodid=True)
    assert len(prepared.properties) == 2
    first = prepared.properties[0]
    assert isinstance(first, ProductId)
    assert first.value == PRODUCT
    assert prepared.properties[1] is fn


def test_existing_prodid_kept_first_without_injection() -> None:
    fn = FormattedName("John")
    older = ProductId("Older")
    newer = ProductId("Acme Co.")
    prepared = _prepare(VCard([fn, older, newer]), VCardVersion.V3_0)
    assert prepared.properties == (newer, fn)


def test_label_synthesized_after_address_for_21_and_30() -> None:
    adr = Address.with_types("home", street="123 Main St.", label="123 Main St.\nAustin")
    adr.group = "item1"
    plain = Address.with_types("work", street="222 Broadway")
    for version in (VCardVersion.V2_1, VCardVersion.V3_0):
        props = _prepare(VCard([adr, plain]), version).properties
        assert [type(p) for p in props] == [Address, Label, Address]
        label = props[1]
        assert isinstance(label, Label)
        assert label.value == "123 Main St.\nAustin"
        assert label.types == ["home"]
        assert label.group == "item1"


def test_no_label_synthesized_for_40() -> None:
    adr = Address(street="123 Main St.", label="123 Main St.")
    props = _prepare(VCard([adr]), VCardVersion.V4_0).properties
    assert props == (adr,)


def test_record_not_modified() -> None:
    adr = Address(label="x")
    vcard = VCard([adr, ProductId("Acme")])
    _prepare(vcard, VCardVersion.V3_0, add_prodid=True)
    assert len(vcard) == 2
    assert adr.parameters.types == []


def test_unregistered_classes_reported_once_each() -> None:
    vcard = VCard([Mood("happy"), FormattedName("x"), Hobby("chess"), Mood("sad")])
    with pytest.raises(UnregisteredPropertyTypeError) as excinfo:
        _prepare(vcard, VCardVersion.V3_0)
    assert excinfo.value.classes == (Mood, Hobby)


def test_missing_label_scribe_is_unregistered() -> None:
    registry = ScribeRegistry.default()
    registry.unregister(Label)
    with pytest.raises(UnregisteredPropertyTypeError) as excinfo:
        _prepare(VCard([Address(label="x")]), VCardVersion.V3_0, registry=registry)
    assert excinfo.value.classes == (Label,)


def test_missing_required_per_version() -> None:
    assert missing_required((), VCardVersion.V2_1) == ["N"]
    assert missing_required((), VCardVersion.V3_0) == ["N", "FN"]
    assert missing_required((), VCardVersion.V4_0) == ["FN"]
    assert missing_required((FormattedName("x"),), VCardVersion.V3_0) == ["N"]
