# topmark:header:start
#
#   project      : VCardScribe
#   file         : test_scribe_registry.py
#   file_relpath : tests/scribes/test_scribe_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the scribe registry and the built-in scribes."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from vcardscribe.core.errors import UnregisteredPropertyTypeError
from vcardscribe.core.versions import VCardVersion
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
    VCardProperty,
)
from vcardscribe.scribes import PropertyScribe, ScribeRegistry
from vcardscribe.scribes.registry import (
    ScribeMeta,
    builtin_scribe,
    iter_builtin_scribes,
    register_all_scribes,
)

BUILTIN_CLASSES: set[type[VCardProperty]] = {
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
}


@dataclass
class Subtitle(Note):
    """A `Note` subclass without a scribe of its own."""


class LoudNoteScribe(PropertyScribe[Note]):
    property_class = Note
    property_name = "NOTE"

    def write_value(self, prop: Note, version: VCardVersion, context: object) -> str:
        return (prop.value or "").upper()


def test_default_registry_covers_every_builtin_class() -> None:
    registry = ScribeRegistry.default()
    assert {type(s).property_class for s in iter_builtin_scribes()} == BUILTIN_CLASSES
    for cls in BUILTIN_CLASSES:
        assert cls in registry
    assert len(registry) == len(BUILTIN_CLASSES)


def test_default_registries_are_independent() -> None:
    first = ScribeRegistry.default()
    second = ScribeRegistry.default()
    first.unregister(Note)
    assert Note not in first
    assert Note in second


def test_lookup_is_by_exact_class() -> None:
    registry = ScribeRegistry.default()
    assert registry.has_scribe_for(Note("x"))
    assert not registry.has_scribe_for(Subtitle("x"))
    with pytest.raises(UnregisteredPropertyTypeError) as excinfo:
        registry.resolve(Subtitle("x"))
    assert excinfo.value.classes == (Subtitle,)
    assert "Subtitle" in str(excinfo.value)


def test_register_replaces_existing_scribe() -> None:
    registry = ScribeRegistry.default()
    loud = LoudNoteScribe()
    registry.register(loud)
    assert registry.get(Note) is loud
    assert registry.resolve(Note("hi")) is loud


def test_copy_is_independent() -> None:
    registry = ScribeRegistry.default()
    clone = registry.copy()
    clone.unregister(Agent)
    assert Agent in registry
    assert Agent not in clone


def test_names_and_meta() -> None:
    registry = ScribeRegistry.default()
    names: tuple[str, ...] = registry.names()
    assert names == tuple(sorted(names))
    assert {"ADR", "AGENT", "FN", "KIND", "LABEL", "MEMBER", "N", "NOTE", "PRODID"} <= set(names)

    metas: dict[str, ScribeMeta] = {m.property_name: m for m in registry.iter_meta()}
    assert metas["KIND"].versions == ("4.0",)
    assert metas["AGENT"].versions == ("2.1", "3.0")
    assert metas["FN"].versions == ("2.1", "3.0", "4.0")
    assert metas["N"].property_class.endswith("StructuredName")


def test_as_mapping_is_read_only() -> None:
    mapping = ScribeRegistry.default().as_mapping()
    with pytest.raises(TypeError):
        mapping[Note] = LoudNoteScribe()  # type: ignore[index]


def test_duplicate_builtin_scribe_rejected() -> None:
    class DuplicateFnScribe(PropertyScribe[FormattedName]):
        property_class = FormattedName
        property_name = "FN"

    register_all_scribes()
    with pytest.raises(ValueError):
        builtin_scribe(DuplicateFnScribe)


def test_raw_property_name_comes_from_instance() -> None:
    registry = ScribeRegistry.default()
    raw = RawProperty(name="X-MS-CARDPICTURE", value="x")
    assert registry.resolve(raw).name_for(raw) == "X-MS-CARDPICTURE"
