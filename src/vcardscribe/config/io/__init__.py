# topmark:header:start
#
#   project      : VCardScribe
#   file         : __init__.py
#   file_relpath : src/vcardscribe/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for VCardScribe configuration.

Pure helpers for reading, validating and writing TOML, kept apart from the
model classes to avoid import cycles.

TOML parsing/formatting:
    VCardScribe uses `tomlkit` for parsing and rendering.

    - `load_toml_dict()` parses on-disk TOML and returns plain dicts.
    - `to_toml()` renders (after stripping TOML-incompatible values like `None`).
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_value,
    get_string_value_or_none,
)
from .guards import (
    as_toml_table_list,
    get_nested_table,
    get_table_value,
    is_any_list,
    is_str_list,
    is_toml_table,
)
from .loaders import TomlLoadError, load_toml_dict, parse_toml_text
from .render import nest_under, to_toml
from .types import TomlTable

__all__: list[str] = [
    "TomlLoadError",
    "TomlTable",
    "as_toml_table_list",
    "get_bool_value_or_none",
    "get_int_value_or_none",
    "get_nested_table",
    "get_string_list_value",
    "get_string_value_or_none",
    "get_table_value",
    "is_any_list",
    "is_str_list",
    "is_toml_table",
    "load_toml_dict",
    "nest_under",
    "parse_toml_text",
    "to_toml",
]
