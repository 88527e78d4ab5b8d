# topmark:header:start
#
#   project      : VCardScribe
#   file         : getters.py
#   file_relpath : src/vcardscribe/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value getters for TOML config tables.

All getters return ``None`` when the key is absent. A value of the wrong type
is reported with a logged warning and treated as absent, so user mistakes are
surfaced without crashing or changing defaulting behavior.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vcardscribe.config.logging import get_logger

from .guards import is_str_list

if TYPE_CHECKING:
    from vcardscribe.config.logging import ScribeLogger

    from .types import TomlTable

logger: ScribeLogger = get_logger(__name__)


def _loc(section: str, key: str) -> str:
    return f"[{section}].{key}" if section else key


def get_bool_value_or_none(table: TomlTable, key: str, *, section: str = "") -> bool | None:
    """Extract an optional boolean value.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        section (str): Section name, used in log messages only.

    Returns:
        bool | None: The boolean, or ``None`` when absent or not a boolean.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    logger.warning("Expected bool in %s, got %s: %r", _loc(section, key), type(value).__name__, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str, *, section: str = "") -> int | None:
    """Extract an optional integer value (booleans are rejected).

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        section (str): Section name, used in log messages only.

    Returns:
        int | None: The integer, or ``None`` when absent or not an integer.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return int(value)
    logger.warning("Expected int in %s, got %s: %r", _loc(section, key), type(value).__name__, value)
    return None


def get_string_value_or_none(table: TomlTable, key: str, *, section: str = "") -> str | None:
    """Extract an optional string value.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        section (str): Section name, used in log messages only.

    Returns:
        str | None: The string, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    logger.warning(
        "Expected string in %s, got %s: %r", _loc(section, key), type(value).__name__, value
    )
    return None


def get_string_list_value(table: TomlTable, key: str, *, section: str = "") -> list[str]:
    """Extract a list of strings; a single string becomes a one-element list.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        section (str): Section name, used in log messages only.

    Returns:
        list[str]: The strings, or an empty list when absent or malformed.
    """
    value: Any | None = table.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if is_str_list(value):
        return list(value)
    logger.warning(
        "Expected string list in %s, got %s: %r", _loc(section, key), type(value).__name__, value
    )
    return []
