# topmark:header:start
#
#   project      : VCardScribe
#   file         : escaping.py
#   file_relpath : src/vcardscribe/encoding/escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Version-specific escaping of property values and parameter values.

Each vCard revision has its own escaping grammar. The rules are kept as
immutable data keyed by `VCardVersion` (`VALUE_RULES`, `PARAM_RULES`,
`CARET_PARAM_RULES`) and applied by two pure functions:

* `escape_value`: text of a property value (or of one structured component).
* `escape_param_value`: one parameter value, including the quoting decision.

Neither function joins components or parameter values; the line formatter
decides which separator level it is encoding.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from vcardscribe.core.versions import VCardVersion

if TYPE_CHECKING:
    from collections.abc import Mapping

# ASCII "file separator"; never legal in a parameter value.
FS: Final[str] = "\x1c"

_NEWLINE_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")
_VALUE_SPECIALS_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|[\r\n\\,;]")


@dataclass(frozen=True, slots=True)
class ValueEscapeRules:
    """Escaping rules for property values at one version.

    Attributes:
        escape_semicolon (bool): Escape ``;`` outside structured components.
        escape_newlines (bool): Replace line breaks with the two characters ``\\n``.
            When False, line breaks are left in place and the line formatter
            switches the value to quoted-printable.
    """

    escape_semicolon: bool
    escape_newlines: bool


@dataclass(frozen=True, slots=True)
class ParamEscapeRules:
    """Escaping rules for parameter values.

    Attributes:
        removed (frozenset[str]): Characters dropped from the value.
        replacements (Mapping[str, str]): Single characters replaced by escape text.
        newline (str): Replacement for each line break (``\\r\\n``, ``\\r`` or ``\\n``).
        quote_triggers (frozenset[str]): The value is double-quoted if it
            contains any of these characters.
    """

    removed: frozenset[str]
    replacements: Mapping[str, str]
    newline: str
    quote_triggers: frozenset[str]


VALUE_RULES: Final[Mapping[VCardVersion, ValueEscapeRules]] = MappingProxyType(
    {
        VCardVersion.V2_1: ValueEscapeRules(escape_semicolon=True, escape_newlines=False),
        VCardVersion.V3_0: ValueEscapeRules(escape_semicolon=True, escape_newlines=True),
        VCardVersion.V4_0: ValueEscapeRules(escape_semicolon=True, escape_newlines=True),
    }
)

_QUOTE_TRIGGERS: Final[frozenset[str]] = frozenset(",;:")

PARAM_RULES: Final[Mapping[VCardVersion, ParamEscapeRules]] = MappingProxyType(
    {
        VCardVersion.V2_1: ParamEscapeRules(
            removed=frozenset({FS, ",", ":", "=", "[", "]"}),
            replacements=MappingProxyType({"\\": "\\\\", ";": "\\;"}),
            newline=" ",
            quote_triggers=frozenset(),
        ),
        VCardVersion.V3_0: ParamEscapeRules(
            removed=frozenset({FS}),
            replacements=MappingProxyType({"\\": "\\\\", '"': "'"}),
            newline=" ",
            quote_triggers=_QUOTE_TRIGGERS,
        ),
        VCardVersion.V4_0: ParamEscapeRules(
            removed=frozenset({FS}),
            replacements=MappingProxyType({"\\": "\\\\", '"': "'"}),
            newline="\\n",
            quote_triggers=_QUOTE_TRIGGERS,
        ),
    }
)

# Caret encoding (RFC 6868) is identical for 3.0 and 4.0; 2.1 has no such mechanism.
CARET_RULES: Final[ParamEscapeRules] = ParamEscapeRules(
    removed=frozenset({FS}),
    replacements=MappingProxyType({"^": "^^", '"': "^'"}),
    newline="^n",
    quote_triggers=_QUOTE_TRIGGERS,
)


@dataclass(frozen=True, slots=True)
class EscapedParam:
    """Result of `escape_param_value`.

    Attributes:
        text (str): Wire text of the parameter value (quoted when needed).
        chars_removed (bool): True if characters were dropped from the input.
    """

    text: str
    chars_removed: bool


def escape_value(raw: str, version: VCardVersion, structured_component: bool = False) -> str:
    r"""Escape a property value for ``version``.

    Backslash, comma and semicolon are escaped at every version. Line breaks
    become ``\n`` at 3.0/4.0 and are left untouched at 2.1.

    Args:
        raw (str): The unescaped value.
        version (VCardVersion): Target version.
        structured_component (bool): True when ``raw`` is one component of a
            structured value (``N``, ``ADR``) or a nested record.

    Returns:
        str: The escaped text.
    """
    rules: ValueEscapeRules = VALUE_RULES[version]
    escape_semicolon: bool = rules.escape_semicolon or structured_component

    def _sub(m: re.Match[str]) -> str:
        ch: str = m.group(0)
        if ch in ("\r\n", "\r", "\n"):
            return "\\n" if rules.escape_newlines else ch
        if ch == ";" and not escape_semicolon:
            return ch
        return "\\" + ch

    return _VALUE_SPECIALS_RE.sub(_sub, raw)


def escape_line_breaks(raw: str) -> str:
    r"""Replace every line break (``\r\n``, ``\r`` or ``\n``) with the two characters ``\n``."""
    return _NEWLINE_RE.sub(r"\\n", raw)


def param_rules_for(version: VCardVersion, caret_encoding: bool) -> ParamEscapeRules:
    """Return the parameter escaping rules in effect.

    The caret flag is ignored for 2.1.
    """
    if caret_encoding and version is not VCardVersion.V2_1:
        return CARET_RULES
    return PARAM_RULES[version]


def escape_param_value(raw: str, version: VCardVersion, caret_encoding: bool) -> EscapedParam:
    """Escape one parameter value for ``version``.

    Args:
        raw (str): The unescaped parameter value.
        version (VCardVersion): Target version.
        caret_encoding (bool): Use caret encoding (3.0 and 4.0 only).

    Returns:
        EscapedParam: The wire text and whether characters were removed.
    """
    rules: ParamEscapeRules = param_rules_for(version, caret_encoding)

    removed: bool = False
    out: list[str] = []
    for segment_idx, segment in enumerate(_NEWLINE_RE.split(raw)):
        if segment_idx:
            out.append(rules.newline)
        for ch in segment:
            if ch in rules.removed:
                removed = True
                continue
            out.append(rules.replacements.get(ch, ch))

    text: str = "".join(out)
    if any(ch in rules.quote_triggers for ch in text):
        text = f'"{text}"'
    return EscapedParam(text=text, chars_removed=removed)
