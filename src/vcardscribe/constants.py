# topmark:header:start
#
#   project      : VCardScribe
#   file         : constants.py
#   file_relpath : src/vcardscribe/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""VCardScribe Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

VCARDSCRIBE_VERSION: str = get_version("vcardscribe")

PRODUCT_NAME: str = "vcardscribe"

# Value of the generator-identity property (PRODID / X-PRODID):
PRODUCT_ID: str = f"{PRODUCT_NAME} {VCARDSCRIBE_VERSION}"

# Environment variable consulted by `vcardscribe.config.logging.resolve_env_log_level`:
LOG_LEVEL_ENV_VAR: str = "VCARDSCRIBE_LOG_LEVEL"

# Record delimiters
BEGIN_LINE: str = "BEGIN:VCARD"
END_LINE: str = "END:VCARD"

CRLF: str = "\r\n"

DEFAULT_FOLD_WIDTH: int = 75
DEFAULT_FOLD_INDENT: str = " "

DEFAULT_MAX_NESTING_DEPTH: int = 100
# Embedded records are rendered recursively (about four frames per level),
# so the limit has to stay well below the interpreter recursion limit.
MAX_NESTING_DEPTH_LIMIT: int = 150

# Table name holding writer settings in `vcardscribe.toml` / `[tool.vcardscribe]`:
PYPROJECT_TOOL_TABLE: str = "vcardscribe"
