# topmark:header:start
#
#   project      : VCardScribe
#   file         : quoted_printable.py
#   file_relpath : src/vcardscribe/encoding/quoted_printable.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Quoted-printable encoding of vCard 2.1 property values.

vCard 2.1 cannot carry line breaks in a plain value. Such values are encoded
as quoted-printable and the property gets an ``ENCODING=quoted-printable``
parameter. Line breaks are encoded too (``=0D=0A``) so the whole value stays
on one content line; soft line breaks are never produced, folding is left to
the line folder which never splits an ``=XX`` triplet.
"""

from __future__ import annotations

from typing import Final

QUOTED_PRINTABLE: Final[str] = "quoted-printable"

DEFAULT_CHARSET: Final[str] = "UTF-8"

# Tab, space and printable ASCII except "=" pass through.
_LITERAL_BYTES: Final[frozenset[int]] = frozenset(
    {0x09, 0x20} | {b for b in range(0x21, 0x7F) if b != 0x3D}
)


def needs_quoted_printable(value: str) -> bool:
    """Return True if a 2.1 value must be quoted-printable encoded."""
    return "\r" in value or "\n" in value


def is_ascii(value: str) -> bool:
    """Return True if ``value`` only holds ASCII characters."""
    return value.isascii()


def encode_quoted_printable(text: str, charset: str = DEFAULT_CHARSET) -> str:
    """Encode ``text`` as quoted-printable.

    Args:
        text (str): The value to encode.
        charset (str): Character set used to turn ``text`` into bytes.

    Returns:
        str: The encoded value, e.g. ``"One=0D=0ATwo"`` for ``"One\\r\\nTwo"``.
    """
    out: list[str] = []
    for b in text.encode(charset):
        out.append(chr(b) if b in _LITERAL_BYTES else f"={b:02X}")
    return "".join(out)
