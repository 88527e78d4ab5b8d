# topmark:header:start
#
#   project      : VCardScribe
#   file         : __init__.py
#   file_relpath : src/vcardscribe/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for VCardScribe.

Exposes the frozen `WriterConfig`, its mutable builder `MutableWriterConfig`,
and helpers to load a configuration from ``vcardscribe.toml`` or the
``[tool.vcardscribe]`` table of ``pyproject.toml`` and to render it back.
"""

from __future__ import annotations

from vcardscribe.config.model import (
    MutableWriterConfig,
    WriterConfig,
    load_writer_config,
    render_config_toml,
)

__all__ = [
    "MutableWriterConfig",
    "WriterConfig",
    "load_writer_config",
    "render_config_toml",
]
