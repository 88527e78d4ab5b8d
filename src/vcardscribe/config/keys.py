# topmark:header:start
#
#   project      : VCardScribe
#   file         : keys.py
#   file_relpath : src/vcardscribe/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for VCardScribe configuration.

These constants define the external configuration schema as it appears in
``vcardscribe.toml`` and in ``[tool.vcardscribe]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by the writer configuration."""

    # [writer]
    SECTION_WRITER: Final[str] = "writer"

    KEY_ADD_PRODID: Final[str] = "add_prodid"
    KEY_VERSION_STRICT: Final[str] = "version_strict"
    KEY_CARET_ENCODING: Final[str] = "caret_encoding"
    KEY_NEWLINE: Final[str] = "newline"
    KEY_VALIDATE_REQUIRED: Final[str] = "validate_required"
    KEY_WARN_ON_PARAM_CHAR_REMOVAL: Final[str] = "warn_on_param_char_removal"
    KEY_MAX_NESTING_DEPTH: Final[str] = "max_nesting_depth"
    KEY_PRODUCT_ID: Final[str] = "product_id"

    # [writer.folding]
    SECTION_FOLDING: Final[str] = "folding"

    KEY_FOLDING_ENABLED: Final[str] = "enabled"
    KEY_FOLDING_WIDTH: Final[str] = "width"
    KEY_FOLDING_INDENT: Final[str] = "indent"

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
