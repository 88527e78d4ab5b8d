# topmark:header:start
#
#   project      : VCardScribe
#   file         : raw.py
#   file_relpath : src/vcardscribe/scribes/builtins/raw.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Catch-all scribe for `RawProperty` (extension properties such as ``X-PRODID``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vcardscribe.model.properties import RawProperty
from vcardscribe.scribes.base import PropertyScribe
from vcardscribe.scribes.registry import builtin_scribe

if TYPE_CHECKING:
    from vcardscribe.core.versions import VCardVersion
    from vcardscribe.scribes.base import WriteContext


@builtin_scribe
class RawPropertyScribe(PropertyScribe[RawProperty]):
    """Writes the property under its own name with its value unchanged."""

    property_class = RawProperty
    property_name = "X-*"
    description = "Extension property written verbatim"

    def name_for(self, prop: RawProperty) -> str:
        return prop.name

    def write_value(self, prop: RawProperty, version: VCardVersion, context: WriteContext) -> str:
        return prop.value or ""
