# topmark:header:start
#
#   project      : VCardScribe
#   file         : properties.py
#   file_relpath : src/vcardscribe/model/properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in vCard property classes.

Every property carries an optional *group* label, a parameter multimap, and
kind-specific typed fields. The set of vCard versions a property class can be
written to is static class metadata (`VCardProperty.supported_versions`).

Custom property types subclass `VCardProperty` and are written by registering a
matching scribe (see `vcardscribe.scribes`). `RawProperty` is the generic
extension property: any name, one opaque text value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from vcardscribe.core.versions import ALL_VERSIONS, VCardVersion
from vcardscribe.model.parameters import VCardParameters

if TYPE_CHECKING:
    from collections.abc import Iterable

    from vcardscribe.model.vcard import VCard


@dataclass(kw_only=True)
class VCardProperty:
    """Base class of all vCard properties.

    Attributes:
        group (str | None): Optional group label, written as ``group.NAME``.
        parameters (VCardParameters): The property's parameters.
        supported_versions (ClassVar[frozenset[VCardVersion]]): Versions this
            property class can be written to.
    """

    supported_versions: ClassVar[frozenset[VCardVersion]] = ALL_VERSIONS

    group: str | None = None
    parameters: VCardParameters = field(default_factory=VCardParameters)

    def is_supported_by(self, version: VCardVersion) -> bool:
        """Return True if this property can be written to ``version``."""
        return version in self.supported_versions


class _TypesMixin:
    """``TYPE`` parameter helpers shared by address-like properties."""

    parameters: VCardParameters

    @property
    def types(self) -> list[str]:
        """The ``TYPE`` parameter values (e.g. ``["work", "dom"]``)."""
        return self.parameters.types

    def add_type(self, value: str) -> None:
        """Append a ``TYPE`` parameter value."""
        self.parameters.add_type(value)


@dataclass
class StructuredName(VCardProperty):
    """``N``: family name, given name, additional names, prefixes, suffixes."""

    family: str | None = None
    given: str | None = None
    additional: list[str] = field(default_factory=lambda: [])
    prefixes: list[str] = field(default_factory=lambda: [])
    suffixes: list[str] = field(default_factory=lambda: [])


@dataclass
class FormattedName(VCardProperty):
    """``FN``: the display name of the contact."""

    value: str | None = None


@dataclass
class Note(VCardProperty):
    """``NOTE``: free-form text."""

    value: str | None = None


@dataclass
class Address(_TypesMixin, VCardProperty):
    """``ADR``: a postal address.

    ``label`` is the formatted, free-form address text. It is written as a
    separate ``LABEL`` property for 2.1/3.0 and as the ``LABEL`` parameter for 4.0.
    """

    po_box: str | None = None
    extended: str | None = None
    street: str | None = None
    locality: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None
    label: str | None = None

    @classmethod
    def with_types(cls, *types: str, **fields: str | None) -> Address:
        """Build an address carrying the given ``TYPE`` values."""
        adr = cls(**fields)
        for t in types:
            adr.add_type(t)
        return adr


@dataclass
class Label(_TypesMixin, VCardProperty):
    """``LABEL``: formatted delivery address text (2.1 and 3.0 only)."""

    supported_versions: ClassVar[frozenset[VCardVersion]] = frozenset(
        {VCardVersion.V2_1, VCardVersion.V3_0}
    )

    value: str | None = None

    @classmethod
    def with_types(cls, value: str, types: Iterable[str]) -> Label:
        """Build a label carrying the given ``TYPE`` values."""
        label = cls(value)
        for t in types:
            label.add_type(t)
        return label


@dataclass
class ProductId(VCardProperty):
    """``PRODID``: identifies the software that generated the vCard (3.0 and 4.0)."""

    supported_versions: ClassVar[frozenset[VCardVersion]] = frozenset(
        {VCardVersion.V3_0, VCardVersion.V4_0}
    )

    value: str | None = None


@dataclass
class Kind(VCardProperty):
    """``KIND``: the kind of object the vCard represents (4.0 only)."""

    supported_versions: ClassVar[frozenset[VCardVersion]] = frozenset({VCardVersion.V4_0})

    INDIVIDUAL: ClassVar[str] = "individual"
    GROUP: ClassVar[str] = "group"
    ORG: ClassVar[str] = "org"
    LOCATION: ClassVar[str] = "location"

    value: str | None = None

    @classmethod
    def individual(cls) -> Kind:
        return cls(cls.INDIVIDUAL)

    @classmethod
    def group_kind(cls) -> Kind:
        return cls(cls.GROUP)

    @classmethod
    def org(cls) -> Kind:
        return cls(cls.ORG)

    @classmethod
    def location(cls) -> Kind:
        return cls(cls.LOCATION)

    def is_group(self) -> bool:
        """Return True if the value is ``group`` (case-insensitive)."""
        return (self.value or "").lower() == self.GROUP


@dataclass
class Member(VCardProperty):
    """``MEMBER``: a member of a group vCard (4.0 only, requires ``KIND:group``)."""

    supported_versions: ClassVar[frozenset[VCardVersion]] = frozenset({VCardVersion.V4_0})

    uri: str | None = None


@dataclass
class Agent(VCardProperty):
    """``AGENT``: someone acting on behalf of the contact (2.1 and 3.0 only).

    Either embeds a complete vCard or references one by URL. The data model
    does not prevent a record from embedding itself; the writer enforces a
    maximum nesting depth instead.
    """

    supported_versions: ClassVar[frozenset[VCardVersion]] = frozenset(
        {VCardVersion.V2_1, VCardVersion.V3_0}
    )

    vcard: VCard | None = None
    url: str | None = None


@dataclass
class RawProperty(VCardProperty):
    """An extension property with an arbitrary name and a pre-formatted value.

    The value is written without escaping, except that line breaks are
    quoted-printable encoded at 2.1 and written as ``\\n`` at 3.0 and 4.0.
    """

    name: str = "X-UNNAMED"
    value: str | None = None
