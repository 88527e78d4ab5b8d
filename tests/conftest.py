# topmark:header:start
#
#   project      : VCardScribe
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the VCardScribe test suite.

Sets up global fixtures and the logging configuration for test runs, and
provides typed wrappers around pytest marks and a few record builders shared
by the writer tests.

Notes:
    Writer tests build a frozen `WriterConfig` with `make_config(...)` (or
    `WriterConfig.with_changes`) rather than mutating a shared instance.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from vcardscribe.config import WriterConfig, logging
from vcardscribe.core.versions import VCardVersion
from vcardscribe.model import VCard
from vcardscribe.pipeline.writer import write_vcards

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_vcardscribe_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure VCardScribe's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("VCARDSCRIBE_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so detailed output is captured on failures.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> WriterConfig:
    """Return a frozen `WriterConfig` built from defaults and overrides.

    Generator-identity injection is off unless explicitly requested, which
    keeps expected outputs stable across releases.
    """
    overrides.setdefault("add_prodid", False)
    return WriterConfig(**overrides)


def write_one(vcard: VCard, version: VCardVersion, **overrides: Any) -> str:
    """Write a single record with `make_config(**overrides)` and return the text."""
    return write_vcards([vcard], version, config=make_config(**overrides))
