# topmark:header:start
#
#   project      : VCardScribe
#   file         : versions.py
#   file_relpath : src/vcardscribe/core/versions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""vCard format revisions.

`VCardVersion` is the discriminant behind every branch of the encoder and the
preparation stage. Members are ordered by release (2.1 < 3.0 < 4.0).
"""

from __future__ import annotations

from typing import Final

from vcardscribe.core.enum_mixins import KeyedStrEnum


class VCardVersion(KeyedStrEnum):
    """Supported vCard revisions.

    Members:
        V2_1: vCard 2.1 (versit consortium, 1996).
        V3_0: vCard 3.0 (RFC 2426).
        V4_0: vCard 4.0 (RFC 6350).
    """

    V2_1 = ("2.1", "vCard 2.1", ("21", "v2.1"))
    V3_0 = ("3.0", "vCard 3.0", ("3", "30", "v3.0"))
    V4_0 = ("4.0", "vCard 4.0", ("4", "40", "v4.0"))

    @property
    def rank(self) -> int:
        """Release order of the revision (0 for 2.1)."""
        return _RANKS[self.value]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VCardVersion):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, VCardVersion):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, VCardVersion):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, VCardVersion):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def from_string(cls, raw: str) -> VCardVersion:
        """Return the member matching ``raw`` (e.g. ``"3.0"``).

        Raises:
            ValueError: If ``raw`` names no known revision.
        """
        member = cls.parse(raw)
        if member is None:
            raise ValueError(f"Unknown vCard version: {raw!r}")
        return member


_RANKS: Final[dict[str, int]] = {"2.1": 0, "3.0": 1, "4.0": 2}

ALL_VERSIONS: Final[frozenset[VCardVersion]] = frozenset(VCardVersion)
