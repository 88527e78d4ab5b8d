# topmark:header:start
#
#   project      : VCardScribe
#   file         : __init__.py
#   file_relpath : src/vcardscribe/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""VCardScribe package.

VCardScribe serializes contact records into vCard text (versions 2.1, 3.0 and
4.0). A pluggable scribe registry maps property classes to serializers, and a
version-aware text encoding layer takes care of escaping, quoted-printable
values and line folding.

Typical usage:
    ```python
    from vcardscribe import VCard, VCardVersion, write_vcards
    from vcardscribe.model import FormattedName

    vcard = VCard()
    vcard.add(FormattedName("John Doe"))
    text = write_vcards([vcard], VCardVersion.V3_0)
    ```
"""

from __future__ import annotations

from vcardscribe.config import MutableWriterConfig, WriterConfig
from vcardscribe.core.errors import (
    NestingDepthError,
    SkipPropertyError,
    UnregisteredPropertyTypeError,
    VCardScribeError,
)
from vcardscribe.core.versions import VCardVersion
from vcardscribe.diagnostic import ScribeWarning, WarningKind
from vcardscribe.encoding import FoldingScheme
from vcardscribe.model import VCard
from vcardscribe.pipeline.writer import VCardWriter, write_vcards
from vcardscribe.scribes import PropertyScribe, ScribeRegistry

__all__ = [
    "FoldingScheme",
    "MutableWriterConfig",
    "NestingDepthError",
    "PropertyScribe",
    "ScribeRegistry",
    "ScribeWarning",
    "SkipPropertyError",
    "UnregisteredPropertyTypeError",
    "VCard",
    "VCardScribeError",
    "VCardVersion",
    "VCardWriter",
    "WarningKind",
    "WriterConfig",
    "write_vcards",
]
