# topmark:header:start
#
#   project      : VCardScribe
#   file         : validation.py
#   file_relpath : src/vcardscribe/pipeline/validation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Required-property checks per vCard version."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from vcardscribe.core.versions import VCardVersion
from vcardscribe.model.properties import FormattedName, StructuredName

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from vcardscribe.model.properties import VCardProperty


REQUIRED_PROPERTIES: Final[Mapping[VCardVersion, tuple[tuple[str, type[VCardProperty]], ...]]] = (
    MappingProxyType(
        {
            VCardVersion.V2_1: (("N", StructuredName),),
            VCardVersion.V3_0: (("N", StructuredName), ("FN", FormattedName)),
            VCardVersion.V4_0: (("FN", FormattedName),),
        }
    )
)


def missing_required(properties: Iterable[VCardProperty], version: VCardVersion) -> list[str]:
    """Return the names of the properties ``version`` requires but ``properties`` lacks."""
    props: list[VCardProperty] = list(properties)
    return [
        name
        for name, cls in REQUIRED_PROPERTIES[version]
        if not any(isinstance(p, cls) for p in props)
    ]
