# topmark:header:start
#
#   project      : VCardScribe
#   file         : preparation.py
#   file_relpath : src/vcardscribe/pipeline/preparation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property preparation: decide what gets written for one record.

`prepare_properties` makes a single pass over a record and returns the ordered
list of properties to emit at a target version:

1. with strict version compliance, properties the version does not support are
   dropped (reported back in `PreparedProperties.dropped`);
2. generator-identity properties (`ProductId`) are set aside, the last one wins;
3. properties without a registered scribe are collected, their classes deduplicated;
4. everything else is kept, in order;
5. at 2.1/3.0 an address with a label is followed by a synthesized `Label`;
6. any unregistered class fails the whole preparation;
7. the generator id is put in front: a fresh one when ``add_prodid`` is on,
   otherwise the set-aside instance (if any).

The record itself is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from vcardscribe.config.logging import get_logger
from vcardscribe.core.errors import UnregisteredPropertyTypeError
from vcardscribe.core.versions import VCardVersion
from vcardscribe.model.properties import Address, Label, ProductId, RawProperty

if TYPE_CHECKING:
    from vcardscribe.config.logging import ScribeLogger
    from vcardscribe.model.properties import VCardProperty
    from vcardscribe.model.vcard import VCard
    from vcardscribe.scribes.registry import ScribeRegistry

logger: ScribeLogger = get_logger(__name__)

# Name of the generator-identity extension property for 2.1, which has no PRODID.
X_PRODID: str = "X-PRODID"

_LABEL_VERSIONS: frozenset[VCardVersion] = frozenset({VCardVersion.V2_1, VCardVersion.V3_0})


@dataclass(frozen=True, slots=True)
class PreparedProperties:
    """Outcome of `prepare_properties`.

    Attributes:
        properties (tuple[VCardProperty, ...]): Properties to write, in order.
        dropped (tuple[VCardProperty, ...]): Properties removed because the
            target version does not support them.
    """

    properties: tuple[VCardProperty, ...]
    dropped: tuple[VCardProperty, ...]


def make_generator_id(version: VCardVersion, product_id: str) -> VCardProperty:
    """Return a fresh generator-identity property for ``version``.

    2.1 has no ``PRODID`` property, so an ``X-PRODID`` extension is used.
    """
    if version is VCardVersion.V2_1:
        return RawProperty(name=X_PRODID, value=product_id)
    return ProductId(product_id)


def synthesize_label(address: Address) -> Label:
    """Return the ``LABEL`` property derived from ``address`` (same group and types)."""
    label: Label = Label.with_types(address.label or "", address.types)
    label.group = address.group
    return label


def prepare_properties(
    vcard: VCard,
    version: VCardVersion,
    registry: ScribeRegistry,
    *,
    add_prodid: bool,
    version_strict: bool,
    product_id: str,
) -> PreparedProperties:
    """Return the ordered properties to write for ``vcard`` at ``version``.

    Args:
        vcard (VCard): The record (not modified).
        version (VCardVersion): Target version.
        registry (ScribeRegistry): Scribes available to the writer.
        add_prodid (bool): Insert a fresh generator-identity property.
        version_strict (bool): Drop properties that do not support ``version``.
        product_id (str): Value of the injected generator-identity property.

    Returns:
        PreparedProperties: The properties to write and the dropped ones.

    Raises:
        UnregisteredPropertyTypeError: If any property class has no scribe.
    """
    out: list[VCardProperty] = []
    dropped: list[VCardProperty] = []
    unregistered: dict[type, None] = {}
    set_aside: ProductId | None = None

    for prop in vcard:
        if version_strict and not prop.is_supported_by(version):
            logger.trace("Dropping %s: not supported by vCard %s", type(prop).__name__, version)
            dropped.append(prop)
            continue

        if isinstance(prop, ProductId):
            set_aside = prop
            continue

        if not registry.has_scribe_for(prop):
            unregistered.setdefault(type(prop), None)
            continue

        out.append(prop)

        if version in _LABEL_VERSIONS and isinstance(prop, Address) and prop.label is not None:
            label: Label = synthesize_label(prop)
            if registry.has_scribe_for(label):
                out.append(label)
            else:
                unregistered.setdefault(Label, None)

    if unregistered:
        raise UnregisteredPropertyTypeError(unregistered)

    if add_prodid:
        out.insert(0, make_generator_id(version, product_id))
    elif set_aside is not None:
        out.insert(0, set_aside)

    logger.debug(
        "Prepared %d properties for vCard %s (%d dropped)", len(out), version, len(dropped)
    )
    return PreparedProperties(properties=tuple(out), dropped=tuple(dropped))
