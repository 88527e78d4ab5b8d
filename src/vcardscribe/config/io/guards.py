# topmark:header:start
#
#   project      : VCardScribe
#   file         : guards.py
#   file_relpath : src/vcardscribe/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards and normalization helpers for TOML parsing.

`TypeGuard`-based predicates narrow runtime values coming from TOML parsing,
and small side-effect-free helpers coerce parsed values into the plain-Python
table shapes used by VCardScribe.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

from vcardscribe.config.logging import get_logger

if TYPE_CHECKING:
    from vcardscribe.config.logging import ScribeLogger

    from .types import TomlTable


logger: ScribeLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value (item types are not checked)."""
    return isinstance(obj, list)


def is_str_list(obj: object) -> TypeGuard[list[str]]:
    """Type guard for a ``list[str]`` value."""
    return is_any_list(obj) and all(isinstance(x, str) for x in obj)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_nested_table(table: TomlTable, *path: str) -> TomlTable | None:
    """Follow ``path`` through nested tables.

    Returns:
        TomlTable | None: The innermost table, or ``None`` if any step is
        missing or not a table.
    """
    current: object = table
    for key in path:
        if not is_toml_table(current):
            return None
        current = cast("TomlTable", current).get(key)
    return current if is_toml_table(current) else None


def as_toml_table_list(obj: object) -> list[TomlTable]:
    """Return the tables of an array of tables, dropping non-table entries."""
    if not is_any_list(obj):
        if obj is not None:
            logger.debug("Not an array of tables: %r", obj)
        return []
    out: list[TomlTable] = []
    for item in obj:
        if is_toml_table(item):
            out.append(item)
        else:
            logger.debug("Ignoring non-table entry in array of tables: %r", item)
    return out
