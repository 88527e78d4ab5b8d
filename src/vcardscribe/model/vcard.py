# topmark:header:start
#
#   project      : VCardScribe
#   file         : vcard.py
#   file_relpath : src/vcardscribe/model/vcard.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The vCard record: an ordered collection of properties."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from vcardscribe.model.properties import VCardProperty

P = TypeVar("P", bound="VCardProperty")


class VCard:
    """An ordered list of properties making up one contact record.

    Insertion order is the output order. The writer reads a record but never
    mutates it, so the same instance may be written several times, at
    different versions.

    Example:
        ```python
        vcard = VCard()
        vcard.add(FormattedName("John Doe"))
        assert vcard.first(FormattedName).value == "John Doe"
        ```
    """

    __slots__ = ("_properties",)

    def __init__(self, properties: Iterable[VCardProperty] = ()) -> None:
        self._properties: list[VCardProperty] = list(properties)

    def add(self, prop: VCardProperty) -> VCard:
        """Append a property and return ``self`` for chaining."""
        self._properties.append(prop)
        return self

    def extend(self, props: Iterable[VCardProperty]) -> VCard:
        """Append several properties and return ``self``."""
        self._properties.extend(props)
        return self

    def properties_of(self, cls: type[P]) -> list[P]:
        """Return the properties that are instances of ``cls``, in order."""
        return [p for p in self._properties if isinstance(p, cls)]

    def first(self, cls: type[P]) -> P | None:
        """Return the first property that is an instance of ``cls``, if any."""
        for p in self._properties:
            if isinstance(p, cls):
                return p
        return None

    def remove_all(self, cls: type[P]) -> list[P]:
        """Remove every instance of ``cls`` and return the removed properties."""
        removed: list[P] = self.properties_of(cls)
        self._properties = [p for p in self._properties if not isinstance(p, cls)]
        return removed

    @property
    def properties(self) -> tuple[VCardProperty, ...]:
        """Read-only snapshot of the properties, in insertion order."""
        return tuple(self._properties)

    def __iter__(self) -> Iterator[VCardProperty]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        names: str = ", ".join(type(p).__name__ for p in self._properties)
        return f"VCard([{names}])"
