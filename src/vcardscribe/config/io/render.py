# topmark:header:start
#
#   project      : VCardScribe
#   file         : render.py
#   file_relpath : src/vcardscribe/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render TOML for config dumps.

TOML has no `null` value, so `None` entries are stripped during rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from vcardscribe.config.logging import get_logger

if TYPE_CHECKING:
    from vcardscribe.config.logging import ScribeLogger

    from .types import TomlTable

logger: ScribeLogger = get_logger(__name__)


def _tomlkit_dumps(data: TomlTable) -> str:
    """Typed wrapper around tomlkit.dumps() for strict type checking."""
    cleaned: Any = _strip_none_for_toml(data)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists.

    Notes:
        The input is typed as `object` (not `Any`) so Pyright does not treat
        mapping/list iterators as `Unknown`.
    """
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            k: str = k_any if isinstance(k_any, str) else str(k_any)
            out[k] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]

    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    return _tomlkit_dumps(toml_dict)


def nest_under(toml_dict: TomlTable, *path: str) -> TomlTable:
    """Wrap ``toml_dict`` under the dotted section ``path`` (e.g. ``tool``, ``vcardscribe``)."""
    out: TomlTable = toml_dict
    for key in reversed(path):
        out = {key: out}
    return out
