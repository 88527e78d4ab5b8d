# topmark:header:start
#
#   project      : VCardScribe
#   file         : text.py
#   file_relpath : src/vcardscribe/scribes/builtins/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scribes for single-valued properties: FN, NOTE, PRODID, KIND and MEMBER."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from vcardscribe.encoding.escaping import escape_value
from vcardscribe.model.properties import (
    FormattedName,
    Kind,
    Label,
    Member,
    Note,
    ProductId,
)
from vcardscribe.scribes.base import PropertyScribe
from vcardscribe.scribes.registry import builtin_scribe

if TYPE_CHECKING:
    from vcardscribe.core.versions import VCardVersion
    from vcardscribe.scribes.base import WriteContext

T = TypeVar("T", FormattedName, Note, ProductId, Kind, Label)


class TextScribe(PropertyScribe[T]):
    """Writes the ``value`` field as escaped text."""

    def write_value(self, prop: T, version: VCardVersion, context: WriteContext) -> str:
        return escape_value(prop.value or "", version)


@builtin_scribe
class FormattedNameScribe(TextScribe[FormattedName]):
    property_class = FormattedName
    property_name = "FN"
    description = "Formatted name"


@builtin_scribe
class NoteScribe(TextScribe[Note]):
    property_class = Note
    property_name = "NOTE"
    description = "Free-form note"


@builtin_scribe
class ProductIdScribe(TextScribe[ProductId]):
    property_class = ProductId
    property_name = "PRODID"
    description = "Product that generated the vCard"


@builtin_scribe
class KindScribe(TextScribe[Kind]):
    property_class = Kind
    property_name = "KIND"
    description = "Kind of object the vCard represents"


@builtin_scribe
class MemberScribe(PropertyScribe[Member]):
    """Writes ``MEMBER``; only a record whose ``KIND`` is ``group`` may have members."""

    property_class = Member
    property_name = "MEMBER"
    description = "Member of a group vCard"

    def skip_reason(
        self, prop: Member, version: VCardVersion, context: WriteContext
    ) -> str | None:
        kind: Kind | None = context.vcard.first(Kind)
        if kind is None or not kind.is_group():
            return "MEMBER is only allowed in a vCard whose KIND is 'group'"
        return None

    def write_value(self, prop: Member, version: VCardVersion, context: WriteContext) -> str:
        # URI values are not text-escaped
        return prop.uri or ""

