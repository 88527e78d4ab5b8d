# topmark:header:start
#
#   project      : VCardScribe
#   file         : loaders.py
#   file_relpath : src/vcardscribe/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML documents from disk.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from vcardscribe.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from vcardscribe.config.logging import ScribeLogger

    from .types import TomlTable

logger: ScribeLogger = get_logger(__name__)


class TomlLoadError(ValueError):
    """A TOML document could not be read or parsed.

    Attributes:
        path (Path): The offending file.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path: Path = path
        super().__init__(f"Cannot load TOML file {path}: {reason}")


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        tomlkit.exceptions.ParseError: If ``text`` is not valid TOML.
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load a TOML file into a plain Python dict.

    Args:
        path (Path): Path to the TOML file.

    Returns:
        TomlTable: The parsed document.

    Raises:
        TomlLoadError: If the file cannot be read or is not valid TOML.
    """
    logger.debug("Loading TOML file: %s", path)
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TomlLoadError(path, exc.strerror or str(exc)) from exc
    try:
        data: TomlTable = parse_toml_text(text)
    except TomlkitParseError as exc:
        raise TomlLoadError(path, str(exc)) from exc
    logger.trace("Loaded TOML from %s: %r", path, data)
    return data
