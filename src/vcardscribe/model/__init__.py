# topmark:header:start
#
#   project      : VCardScribe
#   file         : __init__.py
#   file_relpath : src/vcardscribe/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory vCard object model: records, properties and parameters."""

from __future__ import annotations

from vcardscribe.model.parameters import ParamName, VCardParameters
from vcardscribe.model.properties import (
    Address,
    Agent,
    FormattedName,
    Kind,
    Label,
    Member,
    Note,
    ProductId,
    RawProperty,
    StructuredName,
    VCardProperty,
)
from vcardscribe.model.vcard import VCard

__all__ = [
    "Address",
    "Agent",
    "FormattedName",
    "Kind",
    "Label",
    "Member",
    "Note",
    "ParamName",
    "ProductId",
    "RawProperty",
    "StructuredName",
    "VCard",
    "VCardParameters",
    "VCardProperty",
]
