# topmark:header:start
#
#   project      : VCardScribe
#   file         : folding.py
#   file_relpath : src/vcardscribe/encoding/folding.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line folding.

A folded line is split into chunks joined by ``newline + indent``. Removing
every ``newline + indent`` from the folded text gives back the original line.

Widths are counted in characters and include the indent of continuation
lines. A break is never placed inside an escape sequence (``\\,``), a caret
sequence (``^n``), a quoted-printable triplet (``=0A``) or a surrogate pair.
When the character at a break position is a space or tab it is kept at the
end of the current line, so a continuation never starts with whitespace that
an unfolder would swallow.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final

from vcardscribe.constants import CRLF, DEFAULT_FOLD_INDENT, DEFAULT_FOLD_WIDTH

if TYPE_CHECKING:
    from collections.abc import Iterator

# Units that must stay on one line, longest alternatives first.
_UNIT_RE: Final[re.Pattern[str]] = re.compile(
    r"\\.|\^[\^n']|=[0-9A-F]{2}|[\ud800-\udbff][\udc00-\udfff]|.",
    re.DOTALL,
)

_WHITESPACE: Final[frozenset[str]] = frozenset(" \t")


@dataclass(frozen=True, slots=True)
class FoldingScheme:
    """Folding configuration.

    Attributes:
        max_width (int): Maximum line width in characters, continuation indent included.
        indent (str): Whitespace prefix of continuation lines.

    Raises:
        ValueError: If ``indent`` is empty or not whitespace, or leaves no room
            for content on a continuation line.
    """

    MIME_DIR: ClassVar[FoldingScheme]

    max_width: int = DEFAULT_FOLD_WIDTH
    indent: str = DEFAULT_FOLD_INDENT

    def __post_init__(self) -> None:
        if not self.indent or any(ch not in _WHITESPACE for ch in self.indent):
            raise ValueError(f"Folding indent must be spaces or tabs, got {self.indent!r}")
        if self.max_width <= len(self.indent):
            raise ValueError(
                f"Folding width {self.max_width} must exceed the indent length {len(self.indent)}"
            )


# The folding scheme of the MIME directory profile (RFC 2425): 75 characters, one space.
FoldingScheme.MIME_DIR = FoldingScheme()


def iter_fold_units(line: str) -> Iterator[str]:
    """Yield the unbreakable units of ``line`` in order."""
    for m in _UNIT_RE.finditer(line):
        yield m.group(0)


def fold_line(line: str, scheme: FoldingScheme | None, newline: str = CRLF) -> str:
    """Fold ``line`` according to ``scheme``.

    Args:
        line (str): One unfolded content line, without its line terminator.
        scheme (FoldingScheme | None): Folding configuration; ``None`` disables folding.
        newline (str): Line separator inserted before each continuation.

    Returns:
        str: The folded text (without a trailing newline).
    """
    if scheme is None or len(line) <= scheme.max_width:
        return line

    limit: int = scheme.max_width
    indent: str = scheme.indent

    chunks: list[str] = []
    buf: list[str] = []
    width: int = 0
    # Width of the part of the line that is not content (the indent).
    floor: int = 0
    break_pending: bool = False

    for unit in iter_fold_units(line):
        if break_pending:
            chunks.append("".join(buf))
            buf, width, floor = [indent], len(indent), len(indent)
            break_pending = False

        if width + len(unit) > limit and width > floor:
            if unit in _WHITESPACE:
                buf.append(unit)
                width += 1
                break_pending = True
                continue
            chunks.append("".join(buf))
            buf, width, floor = [indent], len(indent), len(indent)

        buf.append(unit)
        width += len(unit)

    chunks.append("".join(buf))
    return newline.join(chunks)


def unfold(text: str, scheme: FoldingScheme, newline: str = CRLF) -> str:
    """Undo `fold_line`: remove every ``newline + indent`` sequence."""
    return text.replace(newline + scheme.indent, "")
