# topmark:header:start
#
#   project      : VCardScribe
#   file         : errors.py
#   file_relpath : src/vcardscribe/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the VCardScribe writer pipeline.

Fatal conditions (configuration errors, runaway nesting) are raised to the
caller and abort the record being written. Data-dependent conditions are
recorded as warnings instead; `SkipPropertyError` is the only exception that
is raised *and* handled inside the library (scribe → writer).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class VCardScribeError(Exception):
    """Base class for all VCardScribe errors."""


class UnregisteredPropertyTypeError(VCardScribeError, ValueError):
    """No scribe is registered for one or more property classes of a record.

    This is a configuration error: register a scribe for each custom property
    class with `ScribeRegistry.register` before writing.

    Attributes:
        classes (tuple[type, ...]): The offending property classes, in first-seen order.
    """

    def __init__(self, classes: Iterable[type]) -> None:
        self.classes: tuple[type, ...] = tuple(classes)
        names: str = ", ".join(f"{c.__module__}.{c.__qualname__}" for c in self.classes)
        super().__init__(f"No scribes were found for the following property classes: {names}")


class NestingDepthError(VCardScribeError):
    """Embedded records are nested deeper than the configured maximum.

    Attributes:
        depth (int): The nesting depth that was about to be written.
        max_depth (int): The configured limit.
    """

    def __init__(self, depth: int, max_depth: int) -> None:
        self.depth: int = depth
        self.max_depth: int = max_depth
        super().__init__(
            f"Embedded vCard nesting depth {depth} exceeds the maximum of {max_depth} "
            "(is the record embedding itself?)"
        )


class SkipPropertyError(VCardScribeError):
    """Raised by a scribe to signal that a property instance must not be written.

    The writer catches it, records a warning carrying ``reason`` and continues
    with the next property.

    Attributes:
        reason (str): Human-readable explanation reported in the warning.
    """

    def __init__(self, reason: str) -> None:
        self.reason: str = reason
        super().__init__(reason)
