# topmark:header:start
#
#   project      : VCardScribe
#   file         : registry.py
#   file_relpath : src/vcardscribe/scribes/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scribe registry: maps property classes to the scribes that write them.

Built-in scribes register themselves with the `builtin_scribe` class decorator
when their module in `vcardscribe.scribes.builtins` is imported;
`register_all_scribes` imports every such module. `ScribeRegistry.default()`
returns a fresh registry holding one instance of each built-in scribe, so
custom registrations never leak between registries.

Notes:
    * Lookup is by exact property class. Only `RawProperty` instances match the
      raw catch-all scribe; an unknown subclass of `VCardProperty` is not
      treated as raw.
    * Read-only views (`as_mapping()`) are exposed as `MappingProxyType`.
    * A registry may be shared read-only between writers once registration
      is complete.
"""

from __future__ import annotations

import importlib
import pkgutil
from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from vcardscribe.config.logging import get_logger
from vcardscribe.core.errors import UnregisteredPropertyTypeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from vcardscribe.config.logging import ScribeLogger
    from vcardscribe.model.properties import VCardProperty
    from vcardscribe.scribes.base import PropertyScribe

logger: ScribeLogger = get_logger(__name__)


_builtin_classes: list[type[PropertyScribe[Any]]] = []


def builtin_scribe(
    cls: type[PropertyScribe[Any]],
) -> type[PropertyScribe[Any]]:
    """Class decorator declaring a built-in scribe.

    Args:
        cls (type[PropertyScribe]): The scribe class.

    Returns:
        type[PropertyScribe]: The class itself.

    Raises:
        ValueError: If a built-in scribe is already declared for the same property class.
    """
    for existing in _builtin_classes:
        if existing.property_class is cls.property_class:
            raise ValueError(
                f"Property class {cls.property_class.__name__} already has a built-in scribe "
                f"({existing.__name__})"
            )
    logger.debug("Declaring built-in scribe %s for %s", cls.__name__, cls.property_name)
    _builtin_classes.append(cls)
    return cls


def register_all_scribes() -> None:
    """Import all modules of the built-in scribes package."""
    from vcardscribe.scribes import builtins as builtins_pkg

    for module_info in pkgutil.iter_modules(builtins_pkg.__path__):
        if not module_info.ispkg:
            importlib.import_module(f"{builtins_pkg.__name__}.{module_info.name}")


def iter_builtin_scribes() -> Iterator[PropertyScribe[Any]]:
    """Yield a new instance of every built-in scribe."""
    register_all_scribes()
    for cls in _builtin_classes:
        yield cls()


@dataclass(frozen=True)
class ScribeMeta:
    """Stable, serializable metadata about a registered scribe."""

    property_name: str
    property_class: str
    scribe_class: str
    versions: tuple[str, ...]
    description: str = ""


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class ScribeRegistry:
    """Mapping of property classes to scribe instances.

    Example:
        ```python
        registry = ScribeRegistry.default()
        registry.register(LuckyNumScribe())
        writer = VCardWriter(sink, VCardVersion.V3_0, registry=registry)
        ```
    """

    def __init__(self, scribes: Iterable[PropertyScribe[Any]] = ()) -> None:
        self._lock = RLock()
        self._scribes: dict[type[VCardProperty], PropertyScribe[Any]] = {}
        for scribe in scribes:
            self.register(scribe)

    @classmethod
    def default(cls) -> ScribeRegistry:
        """Return a new registry holding every built-in scribe."""
        return cls(iter_builtin_scribes())

    def register(self, scribe: PropertyScribe[Any]) -> None:
        """Register ``scribe`` for its property class.

        A later registration for the same property class replaces the earlier one.
        """
        with self._lock:
            previous = self._scribes.get(scribe.property_class)
            if previous is not None:
                logger.debug("Replacing scribe %r with %r", previous, scribe)
            else:
                logger.trace("Registering scribe %r", scribe)
            self._scribes[scribe.property_class] = scribe

    def unregister(self, property_class: type[VCardProperty]) -> PropertyScribe[Any] | None:
        """Remove the scribe bound to ``property_class`` and return it (or ``None``)."""
        with self._lock:
            return self._scribes.pop(property_class, None)

    def get(self, property_class: type[VCardProperty]) -> PropertyScribe[Any] | None:
        """Return the scribe bound to ``property_class``, if any."""
        with self._lock:
            return self._scribes.get(property_class)

    def has_scribe_for(self, prop: VCardProperty) -> bool:
        """Return True if a scribe is registered for the exact class of ``prop``."""
        with self._lock:
            return type(prop) in self._scribes

    def resolve(self, prop: VCardProperty) -> PropertyScribe[Any]:
        """Return the scribe for ``prop``.

        Raises:
            UnregisteredPropertyTypeError: If no scribe is registered for the
                property's class.
        """
        with self._lock:
            scribe = self._scribes.get(type(prop))
        if scribe is None:
            raise UnregisteredPropertyTypeError([type(prop)])
        return scribe

    def copy(self) -> ScribeRegistry:
        """Return an independent registry holding the same scribes."""
        with self._lock:
            return ScribeRegistry(self._scribes.values())

    def names(self) -> tuple[str, ...]:
        """Return the property names of all registered scribes (sorted)."""
        with self._lock:
            return tuple(sorted(s.property_name for s in self._scribes.values()))

    def as_mapping(self) -> Mapping[type[VCardProperty], PropertyScribe[Any]]:
        """Return a read-only mapping of property classes to scribes."""
        with self._lock:
            return MappingProxyType(dict(self._scribes))

    def iter_meta(self) -> Iterator[ScribeMeta]:
        """Iterate over stable metadata for registered scribes, sorted by property name.

        Yields:
            ScribeMeta: Serializable metadata about each scribe.
        """
        with self._lock:
            scribes = sorted(self._scribes.values(), key=lambda s: s.property_name)
        for scribe in scribes:
            yield ScribeMeta(
                property_name=scribe.property_name,
                property_class=_qualified_name(scribe.property_class),
                scribe_class=_qualified_name(type(scribe)),
                versions=tuple(v.value for v in sorted(scribe.supported_versions())),
                description=scribe.description,
            )

    def __contains__(self, property_class: object) -> bool:
        with self._lock:
            return property_class in self._scribes

    def __len__(self) -> int:
        with self._lock:
            return len(self._scribes)
