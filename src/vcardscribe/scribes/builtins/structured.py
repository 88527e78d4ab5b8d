# topmark:header:start
#
#   project      : VCardScribe
#   file         : structured.py
#   file_relpath : src/vcardscribe/scribes/builtins/structured.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scribes for structured values (N, ADR) and delivery labels (LABEL).

Structured values are written as ``;``-separated components; a component
holding several values joins them with ``,``. Each value is escaped as a
structured component, so ``;`` and ``,`` inside it are always escaped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vcardscribe.core.versions import VCardVersion
from vcardscribe.encoding.escaping import escape_value
from vcardscribe.model.parameters import ParamName, VCardParameters
from vcardscribe.model.properties import Address, Label, StructuredName
from vcardscribe.scribes.base import PropertyScribe
from vcardscribe.scribes.builtins.text import TextScribe
from vcardscribe.scribes.registry import builtin_scribe

if TYPE_CHECKING:
    from collections.abc import Sequence

    from vcardscribe.scribes.base import WriteContext


def join_components(components: Sequence[str | Sequence[str] | None], version: VCardVersion) -> str:
    """Escape and join structured value components.

    Args:
        components (Sequence[str | Sequence[str] | None]): One entry per
            component; a sequence holds a multi-valued component.
        version (VCardVersion): Target version.

    Returns:
        str: The structured value, e.g. ``";;123 Main St.;Austin;TX;12345;"``.
    """
    parts: list[str] = []
    for component in components:
        if component is None:
            parts.append("")
        elif isinstance(component, str):
            parts.append(escape_value(component, version, structured_component=True))
        else:
            parts.append(
                ",".join(escape_value(v, version, structured_component=True) for v in component)
            )
    return ";".join(parts)


@builtin_scribe
class StructuredNameScribe(PropertyScribe[StructuredName]):
    property_class = StructuredName
    property_name = "N"
    description = "Structured name"

    def write_value(
        self, prop: StructuredName, version: VCardVersion, context: WriteContext
    ) -> str:
        return join_components(
            [prop.family, prop.given, prop.additional, prop.prefixes, prop.suffixes], version
        )


@builtin_scribe
class AddressScribe(PropertyScribe[Address]):
    """Writes ``ADR``.

    For 4.0 the free-form label becomes the first parameter (``LABEL="..."``).
    Earlier versions get a separate ``LABEL`` property instead, synthesized
    during preparation, so any ``LABEL`` parameter is dropped there.
    """

    property_class = Address
    property_name = "ADR"
    description = "Postal address"

    def prepare_parameters(
        self, prop: Address, version: VCardVersion, context: WriteContext
    ) -> VCardParameters:
        params = VCardParameters()
        if version is VCardVersion.V4_0 and prop.label is not None:
            params.add(ParamName.LABEL, prop.label)
        for name, values in prop.parameters.items():
            if name.upper() == ParamName.LABEL:
                continue
            for value in values:
                params.add(name, value)
        return params

    def write_value(self, prop: Address, version: VCardVersion, context: WriteContext) -> str:
        return join_components(
            [
                prop.po_box,
                prop.extended,
                prop.street,
                prop.locality,
                prop.region,
                prop.postal_code,
                prop.country,
            ],
            version,
        )


@builtin_scribe
class LabelScribe(TextScribe[Label]):
    property_class = Label
    property_name = "LABEL"
    description = "Delivery address label"
