# topmark:header:start
#
#   project      : VCardScribe
#   file         : model.py
#   file_relpath : src/vcardscribe/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Warning types collected while writing vCards.

Sections:
    * WarningKind: classification of recoverable conditions, with terminal colors.
    * ScribeWarning: immutable structured warning (kind + message + property name).
    * WarningStats: aggregated per-kind counts.
    * WarningLog: mutable per-write collection with helpers for adding,
      merging and summarizing warnings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from vcardscribe.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from vcardscribe.config.logging import ScribeLogger


logger: ScribeLogger = get_logger(__name__)


class WarningKind(Enum):
    """Classification of the recoverable conditions reported by the writer.

    Members:
        UNSUPPORTED_VERSION: Property dropped because it does not support the target version.
        SKIPPED_BY_SCRIBE: The property's scribe refused to write this instance.
        VALUE_ALTERED: Characters were removed from a parameter value during encoding.
        MISSING_REQUIRED: A property required by the target version is absent.
    """

    UNSUPPORTED_VERSION = "unsupported_version"
    SKIPPED_BY_SCRIBE = "skipped_by_scribe"
    VALUE_ALTERED = "value_altered"
    MISSING_REQUIRED = "missing_required"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this kind.

        Intended for human-readable output only.
        """
        return cast(
            "Callable[[str], str]",
            {
                WarningKind.UNSUPPORTED_VERSION: chalk.yellow,
                WarningKind.SKIPPED_BY_SCRIBE: chalk.yellow,
                WarningKind.VALUE_ALTERED: chalk.blue,
                WarningKind.MISSING_REQUIRED: chalk.magenta,
            }[self],
        )


@dataclass(frozen=True)
class ScribeWarning:
    """Non-fatal diagnostic produced while writing one record.

    Attributes:
        kind (WarningKind): What happened.
        message (str): Human-readable description.
        property_name (str | None): Name of the originating property (e.g. ``"MEMBER"``),
            or ``None`` for record-level warnings.
    """

    kind: WarningKind
    message: str
    property_name: str | None = None

    def __str__(self) -> str:
        if self.property_name:
            return f"[{self.property_name}] {self.message}"
        return self.message


@dataclass(frozen=True)
class WarningStats:
    """Aggregated counts of warnings by kind."""

    counts: dict[WarningKind, int]

    @property
    def total(self) -> int:
        """Return the total count of warnings."""
        return sum(self.counts.values())

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts keyed by kind value."""
        return {kind.value: self.counts.get(kind, 0) for kind in WarningKind}


@dataclass
class WarningLog:
    """Mutable collection of warnings for one `write` call.

    Embedded records write into the same log as their parent, so warnings keep
    emission order across nesting levels.
    """

    items: list[ScribeWarning] = field(default_factory=lambda: [])

    def add(
        self,
        kind: WarningKind,
        message: str,
        *,
        property_name: str | None = None,
    ) -> None:
        """Append a warning.

        Args:
            kind (WarningKind): Classification of the warning.
            message (str): The warning message.
            property_name (str | None): Originating property name, if any.
        """
        warning = ScribeWarning(kind=kind, message=message, property_name=property_name)
        self.items.append(warning)
        logger.debug("Warning [%s]: %s", kind.value, warning)

    def extend(self, warnings: Iterable[ScribeWarning]) -> None:
        """Append already-built warnings (e.g. from a nested record)."""
        self.items.extend(warnings)

    def clear(self) -> None:
        """Remove every warning."""
        self.items.clear()

    def freeze(self) -> tuple[ScribeWarning, ...]:
        """Return an immutable snapshot of the collected warnings."""
        return tuple(self.items)

    def of_kind(self, kind: WarningKind) -> list[ScribeWarning]:
        """Return the warnings of one kind, in emission order."""
        return [w for w in self.items if w.kind is kind]

    def stats(self) -> WarningStats:
        """Return per-kind counts for the warnings in this log."""
        return compute_warning_stats(self.items)

    def __iter__(self) -> Iterator[ScribeWarning]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def compute_warning_stats(warnings: Iterable[ScribeWarning]) -> WarningStats:
    """Return per-kind counts for a sequence of warnings.

    Args:
        warnings: The warnings to count.

    Returns:
        Per-kind counts; kinds without warnings are omitted from ``counts``.
    """
    counts: dict[WarningKind, int] = {}
    for w in warnings:
        counts[w.kind] = counts.get(w.kind, 0) + 1
    return WarningStats(counts=counts)
