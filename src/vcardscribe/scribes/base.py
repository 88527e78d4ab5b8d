# topmark:header:start
#
#   project      : VCardScribe
#   file         : base.py
#   file_relpath : src/vcardscribe/scribes/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scribe base class and the context handed to scribes while writing.

A scribe is a stateless strategy bound to exactly one property class. For a
given target version it produces the property's parameters and its value as
wire text (already escaped), and may decide that an instance cannot be written
at all. Scribes are the only components that know a property's internal shape.

To support a custom property type, subclass `PropertyScribe` and register an
instance with `ScribeRegistry.register`:

    ```python
    class LuckyNumScribe(PropertyScribe[LuckyNum]):
        property_class = LuckyNum
        property_name = "X-LUCKY-NUM"

        def write_value(self, prop, version, context):
            if prop.number == 13:
                raise SkipPropertyError("Unlucky number")
            return str(prop.number)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from vcardscribe.config.logging import get_logger
from vcardscribe.model.properties import VCardProperty

if TYPE_CHECKING:
    from collections.abc import Callable

    from vcardscribe.config.logging import ScribeLogger
    from vcardscribe.core.versions import VCardVersion
    from vcardscribe.model.parameters import VCardParameters
    from vcardscribe.model.vcard import VCard

logger: ScribeLogger = get_logger(__name__)

P = TypeVar("P", bound=VCardProperty)


class VerbatimText(str):
    """A property value written on its own lines, without escaping or folding.

    Returned by the nested-record scribe for vCard 2.1, where an embedded
    record follows the ``AGENT:`` line as ordinary content lines. The text
    must already end with the line terminator.
    """

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class WriteContext:
    """State shared with scribes while one record is written.

    Attributes:
        version (VCardVersion): Target version.
        vcard (VCard): The record being written (read-only).
        caret_encoding (bool): Whether parameter values use caret encoding.
        render_nested (Callable[[VCard], str]): Renders an embedded record
            with the writer's version and configuration and returns its text.
            Warnings of the embedded record are collected by the writer.
        depth (int): Nesting depth of ``vcard`` (0 for a top-level record).
    """

    version: VCardVersion
    vcard: VCard
    caret_encoding: bool
    render_nested: Callable[[VCard], str]
    depth: int = 0


class PropertyScribe(Generic[P]):
    """Base class of all scribes.

    Subclasses set `property_class` and `property_name` and implement
    `write_value`. The other hooks have sensible defaults.

    Attributes:
        property_class (type[VCardProperty]): The property class this scribe writes.
            Lookup is by exact class; subclasses need their own scribe.
        property_name (str): The property name written on the content line.
        description (str): Short human-readable description.
    """

    property_class: ClassVar[type[VCardProperty]]
    property_name: ClassVar[str]
    description: ClassVar[str] = ""

    def name_for(self, prop: P) -> str:
        """Return the property name used on the content line for ``prop``."""
        return self.property_name

    def supported_versions(self) -> frozenset[VCardVersion]:
        """Return the versions the bound property class supports."""
        return self.property_class.supported_versions

    def skip_reason(self, prop: P, version: VCardVersion, context: WriteContext) -> str | None:
        """Return why ``prop`` must not be written, or ``None`` to write it.

        Args:
            prop (P): The property instance.
            version (VCardVersion): Target version.
            context (WriteContext): Writer state.

        Returns:
            str | None: A human-readable reason; ``None`` writes the property.
        """
        return None

    def prepare_parameters(
        self, prop: P, version: VCardVersion, context: WriteContext
    ) -> VCardParameters:
        """Return the parameters to write for ``prop``.

        The default returns a copy of the property's own parameters. The
        returned object may be modified by the writer.
        """
        return prop.parameters.copy()

    def write_value(self, prop: P, version: VCardVersion, context: WriteContext) -> str:
        """Return the value of ``prop`` as escaped wire text.

        Raises:
            SkipPropertyError: If this instance cannot be written.
        """
        raise NotImplementedError(f"{type(self).__name__} must implement write_value()")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.property_name})"
