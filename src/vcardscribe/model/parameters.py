# topmark:header:start
#
#   project      : VCardScribe
#   file         : parameters.py
#   file_relpath : src/vcardscribe/model/parameters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property parameters (``;NAME=value``) as an ordered, case-insensitive multimap.

Parameter names compare case-insensitively (``type`` and ``TYPE`` are the same
parameter) while the spelling used when a name was first added is preserved
for output. Each name maps to one or more string values; names keep their
first-insertion order, values keep their insertion order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class ParamName:
    """Well-known parameter names."""

    TYPE: Final[str] = "TYPE"
    LANGUAGE: Final[str] = "LANGUAGE"
    ENCODING: Final[str] = "ENCODING"
    CHARSET: Final[str] = "CHARSET"
    LABEL: Final[str] = "LABEL"
    VALUE: Final[str] = "VALUE"


class VCardParameters:
    """Ordered multimap of parameter names to string values.

    Example:
        ```python
        params = VCardParameters()
        params.add("LANGUAGE", "FR")
        params.add("language", "es")
        assert params.get_all("Language") == ["FR", "es"]
        assert list(params.names()) == ["LANGUAGE"]
        ```
    """

    __slots__ = ("_names", "_values")

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        # upper-cased key -> spelling used on output
        self._names: dict[str, str] = {}
        self._values: dict[str, list[str]] = {}
        for name, value in items:
            self.add(name, value)

    def add(self, name: str, value: str) -> None:
        """Append ``value`` to the values of ``name``."""
        key: str = name.upper()
        if key not in self._names:
            self._names[key] = name
            self._values[key] = []
        self._values[key].append(value)

    def put(self, name: str, value: str) -> None:
        """Replace every value of ``name`` with ``value``.

        A parameter that already exists keeps its position and spelling.
        """
        key: str = name.upper()
        if key in self._names:
            self._values[key] = [value]
        else:
            self.add(name, value)

    def remove_all(self, name: str) -> list[str]:
        """Remove ``name`` and return its values (empty list if absent)."""
        key: str = name.upper()
        self._names.pop(key, None)
        return self._values.pop(key, [])

    def first(self, name: str) -> str | None:
        """Return the first value of ``name`` or ``None``."""
        values = self._values.get(name.upper())
        return values[0] if values else None

    def get_all(self, name: str) -> list[str]:
        """Return a copy of every value of ``name`` (empty list if absent)."""
        return list(self._values.get(name.upper(), []))

    def names(self) -> Iterator[str]:
        """Iterate parameter names in first-insertion order, original spelling."""
        return iter(self._names.values())

    def items(self) -> Iterator[tuple[str, list[str]]]:
        """Iterate ``(name, values)`` pairs in first-insertion order."""
        for key, name in self._names.items():
            yield name, list(self._values[key])

    def copy(self) -> VCardParameters:
        """Return an independent copy."""
        clone = VCardParameters()
        for name, values in self.items():
            for value in values:
                clone.add(name, value)
        return clone

    # Convenience accessors for TYPE

    @property
    def types(self) -> list[str]:
        """The ``TYPE`` values."""
        return self.get_all(ParamName.TYPE)

    def add_type(self, value: str) -> None:
        """Append a ``TYPE`` value."""
        self.add(ParamName.TYPE, value)

    @property
    def language(self) -> str | None:
        """The ``LANGUAGE`` value, if set."""
        return self.first(ParamName.LANGUAGE)

    @language.setter
    def language(self, value: str | None) -> None:
        if value is None:
            self.remove_all(ParamName.LANGUAGE)
        else:
            self.put(ParamName.LANGUAGE, value)

    @property
    def encoding(self) -> str | None:
        """The ``ENCODING`` value, if set."""
        return self.first(ParamName.ENCODING)

    @property
    def charset(self) -> str | None:
        """The ``CHARSET`` value, if set."""
        return self.first(ParamName.CHARSET)

    @property
    def label(self) -> str | None:
        """The ``LABEL`` value (4.0 addresses), if set."""
        return self.first(ParamName.LABEL)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __bool__(self) -> bool:
        return bool(self._names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VCardParameters):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def __repr__(self) -> str:
        inner: str = ", ".join(f"{name}={values!r}" for name, values in self.items())
        return f"VCardParameters({inner})"
