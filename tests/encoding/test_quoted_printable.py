# topmark:header:start
#
#   project      : VCardScribe
#   file         : test_quoted_printable.py
#   file_relpath : tests/encoding/test_quoted_printable.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for quoted-printable encoding of 2.1 values."""

from __future__ import annotations

from tests.conftest import parametrize
from vcardscribe.encoding.quoted_printable import (
    encode_quoted_printable,
    is_ascii,
    needs_quoted_printable,
)


@parametrize(
    ("value", "expected"),
    [("One\r\nTwo", True), ("One\nTwo", True), ("One\rTwo", True), ("Three Four", False)],
)
def test_needs_quoted_printable(value: str, expected: bool) -> None:
    assert needs_quoted_printable(value) is expected


def test_line_breaks_encoded() -> None:
    assert encode_quoted_printable("One\r\nTwo") == "One=0D=0ATwo"


def test_equals_sign_encoded() -> None:
    assert encode_quoted_printable("a=b") == "a=3Db"


def test_non_ascii_encoded_as_utf8_bytes() -> None:
    assert encode_quoted_printable("soirée\n") == "soir=C3=A9e=0A"
    assert not is_ascii("soirée")
    assert is_ascii("soiree")


def test_charset_is_used() -> None:
    assert encode_quoted_printable("é", "ISO-8859-1") == "=E9"


def test_tabs_and_spaces_kept() -> None:
    assert encode_quoted_printable("a b\tc") == "a b\tc"
