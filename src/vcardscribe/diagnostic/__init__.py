# topmark:header:start
#
#   project      : VCardScribe
#   file         : __init__.py
#   file_relpath : src/vcardscribe/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Warning primitives collected by the writer.

Design:
    - Individual warnings are immutable `ScribeWarning` instances.
    - During one `write` call they accumulate in a mutable `WarningLog`
      owned by the writer; callers read an immutable tuple afterwards.
"""

from __future__ import annotations

from vcardscribe.diagnostic.model import (
    ScribeWarning,
    WarningKind,
    WarningLog,
    WarningStats,
    compute_warning_stats,
)

__all__ = [
    "ScribeWarning",
    "WarningKind",
    "WarningLog",
    "WarningStats",
    "compute_warning_stats",
]
