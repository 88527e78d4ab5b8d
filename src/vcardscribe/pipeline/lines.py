# topmark:header:start
#
#   project      : VCardScribe
#   file         : lines.py
#   file_relpath : src/vcardscribe/pipeline/lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content line formatting: ``[group.]NAME[;PARAM=value...]:VALUE``.

Parameter syntax differs per version:

* 2.1: ``TYPE`` values are bare uppercase tokens (``ADR;WORK;DOM:``); other
  multi-valued parameters repeat the name (``;LANGUAGE=FR;LANGUAGE=es``).
* 3.0/4.0: values of one parameter are comma-joined (``TYPE=work,dom``).

A 2.1 value containing line breaks is quoted-printable encoded. The finished
line is folded according to the active folding scheme.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from vcardscribe.core.versions import VCardVersion
from vcardscribe.encoding.escaping import escape_line_breaks, escape_param_value
from vcardscribe.encoding.folding import fold_line
from vcardscribe.encoding.quoted_printable import (
    DEFAULT_CHARSET,
    QUOTED_PRINTABLE,
    encode_quoted_printable,
    is_ascii,
    needs_quoted_printable,
)
from vcardscribe.model.parameters import ParamName
from vcardscribe.scribes.base import VerbatimText

if TYPE_CHECKING:
    from vcardscribe.encoding.escaping import EscapedParam
    from vcardscribe.encoding.folding import FoldingScheme
    from vcardscribe.model.parameters import VCardParameters


@dataclass(frozen=True, slots=True)
class RenderedParams:
    """Wire text of a parameter list.

    Attributes:
        text (str): ``;NAME=value...`` (empty when there are no parameters).
        chars_removed (bool): True if escaping removed characters from any value.
    """

    text: str
    chars_removed: bool


def render_parameters(
    params: VCardParameters, version: VCardVersion, caret_encoding: bool
) -> RenderedParams:
    """Render ``params`` for ``version``.

    Args:
        params (VCardParameters): The parameters, in output order.
        version (VCardVersion): Target version.
        caret_encoding (bool): Use caret encoding (3.0/4.0 only).

    Returns:
        RenderedParams: The rendered text and whether characters were removed.
    """
    parts: list[str] = []
    removed: bool = False
    for name, values in params.items():
        escaped: list[EscapedParam] = [
            escape_param_value(v, version, caret_encoding) for v in values
        ]
        removed = removed or any(e.chars_removed for e in escaped)

        if version is VCardVersion.V2_1:
            if name.upper() == ParamName.TYPE:
                parts.extend(e.text.upper() for e in escaped)
            else:
                parts.extend(f"{name}={e.text}" for e in escaped)
        else:
            parts.append(f"{name}={','.join(e.text for e in escaped)}")

    text: str = "".join(f";{p}" for p in parts)
    return RenderedParams(text=text, chars_removed=removed)


def apply_quoted_printable(value: str, params: VCardParameters) -> str:
    """Quoted-printable encode a 2.1 value and flag it in ``params``.

    ``CHARSET`` is only added when the value is not pure ASCII.
    """
    params.put(ParamName.ENCODING, QUOTED_PRINTABLE)
    if not is_ascii(value):
        params.put(ParamName.CHARSET, DEFAULT_CHARSET)
    return encode_quoted_printable(value, DEFAULT_CHARSET)


@dataclass(frozen=True, slots=True)
class FormattedLine:
    """One formatted property.

    Attributes:
        text (str): The folded content line(s), terminated by the newline.
        chars_removed (bool): True if parameter escaping removed characters.
    """

    text: str
    chars_removed: bool


def format_property_line(
    *,
    group: str | None,
    name: str,
    params: VCardParameters,
    value: str,
    version: VCardVersion,
    caret_encoding: bool,
    folding: FoldingScheme | None,
    newline: str,
) -> FormattedLine:
    """Format and fold one property.

    Args:
        group (str | None): Group label.
        name (str): Property name.
        params (VCardParameters): Parameters (may be modified).
        value (str): Escaped value text. Remaining line breaks are
            quoted-printable encoded at 2.1 and written as ``\\n`` at 3.0/4.0.
            A `VerbatimText` value is written on the lines following ``NAME:``
            without further processing.
        version (VCardVersion): Target version.
        caret_encoding (bool): Use caret encoding for parameter values.
        folding (FoldingScheme | None): Folding scheme; ``None`` disables folding.
        newline (str): Line terminator.

    Returns:
        FormattedLine: The text to append to the record.
    """
    verbatim: bool = isinstance(value, VerbatimText)
    if not verbatim:
        # A raw line break never reaches the wire: quoted-printable at 2.1,
        # the two-character escape otherwise.
        if version is VCardVersion.V2_1:
            if needs_quoted_printable(value):
                value = apply_quoted_printable(value, params)
        else:
            value = escape_line_breaks(value)

    head: str = f"{group}.{name}" if group else name
    rendered: RenderedParams = render_parameters(params, version, caret_encoding)

    if verbatim:
        text = fold_line(f"{head}{rendered.text}:", folding, newline) + newline + value
    else:
        text = fold_line(f"{head}{rendered.text}:{value}", folding, newline) + newline
    return FormattedLine(text=text, chars_removed=rendered.chars_removed)
