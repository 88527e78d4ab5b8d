# topmark:header:start
#
#   project      : VCardScribe
#   file         : __init__.py
#   file_relpath : src/vcardscribe/encoding/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text encoding layer: escaping, quoted-printable and line folding.

Everything in this package is a pure function over strings and versions. It has
no knowledge of properties and does not log, so it can be imported by the
configuration layer without creating import cycles.
"""

from __future__ import annotations

from .escaping import (
    CARET_RULES,
    PARAM_RULES,
    VALUE_RULES,
    EscapedParam,
    ParamEscapeRules,
    ValueEscapeRules,
    escape_param_value,
    escape_value,
    param_rules_for,
)
from .folding import FoldingScheme, fold_line, iter_fold_units, unfold
from .quoted_printable import (
    DEFAULT_CHARSET,
    QUOTED_PRINTABLE,
    encode_quoted_printable,
    is_ascii,
    needs_quoted_printable,
)

__all__: list[str] = [
    "CARET_RULES",
    "DEFAULT_CHARSET",
    "PARAM_RULES",
    "QUOTED_PRINTABLE",
    "VALUE_RULES",
    "EscapedParam",
    "FoldingScheme",
    "ParamEscapeRules",
    "ValueEscapeRules",
    "encode_quoted_printable",
    "escape_param_value",
    "escape_value",
    "fold_line",
    "is_ascii",
    "iter_fold_units",
    "needs_quoted_printable",
    "param_rules_for",
    "unfold",
]
