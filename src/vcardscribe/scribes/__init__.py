# topmark:header:start
#
#   project      : VCardScribe
#   file         : __init__.py
#   file_relpath : src/vcardscribe/scribes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scribes: per-property-class serializers and their registry."""

from __future__ import annotations

from vcardscribe.scribes.base import PropertyScribe, VerbatimText, WriteContext
from vcardscribe.scribes.registry import (
    ScribeMeta,
    ScribeRegistry,
    builtin_scribe,
    iter_builtin_scribes,
    register_all_scribes,
)

__all__ = [
    "PropertyScribe",
    "ScribeMeta",
    "ScribeRegistry",
    "VerbatimText",
    "WriteContext",
    "builtin_scribe",
    "iter_builtin_scribes",
    "register_all_scribes",
]
