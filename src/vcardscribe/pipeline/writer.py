# topmark:header:start
#
#   project      : VCardScribe
#   file         : writer.py
#   file_relpath : src/vcardscribe/pipeline/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Record and stream writer.

`VCardWriter` writes complete records to a text sink at a fixed target
version. For each record it:

1. prepares the properties (version filter, label synthesis, generator id)
   and reports dropped and missing required properties as warnings;
2. writes ``BEGIN:VCARD`` and ``VERSION:<v>``;
3. writes each property through its scribe, turning skips into warnings and
   rendering embedded records recursively;
4. writes ``END:VCARD``.

A record is rendered into memory first and handed to the sink with a single
``write`` call, so a fatal error (unregistered property class, nesting too
deep) leaves nothing of that record in the sink. Errors raised by the sink
itself propagate unchanged.

A writer is not thread-safe. Share the `ScribeRegistry`, not the writer.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any, Protocol

from vcardscribe.config.logging import get_logger
from vcardscribe.config.model import WriterConfig
from vcardscribe.constants import BEGIN_LINE, END_LINE
from vcardscribe.core.errors import NestingDepthError, SkipPropertyError
from vcardscribe.core.versions import VCardVersion
from vcardscribe.diagnostic.model import WarningKind, WarningLog
from vcardscribe.pipeline.lines import format_property_line
from vcardscribe.pipeline.preparation import prepare_properties
from vcardscribe.pipeline.validation import missing_required
from vcardscribe.scribes.base import WriteContext
from vcardscribe.scribes.registry import ScribeRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import TracebackType

    from vcardscribe.config.logging import ScribeLogger
    from vcardscribe.diagnostic.model import ScribeWarning
    from vcardscribe.encoding.folding import FoldingScheme
    from vcardscribe.model.parameters import VCardParameters
    from vcardscribe.model.properties import VCardProperty
    from vcardscribe.model.vcard import VCard
    from vcardscribe.pipeline.lines import FormattedLine
    from vcardscribe.pipeline.preparation import PreparedProperties
    from vcardscribe.scribes.base import PropertyScribe

logger: ScribeLogger = get_logger(__name__)


class TextSink(Protocol):
    """Anything with a ``write(str)`` method (text files, `io.StringIO`, ...)."""

    def write(self, s: str, /) -> Any: ...


class VCardWriter:
    """Writes vCards of one version to a text sink.

    Args:
        sink (TextSink): Destination of the vCard text.
        version (VCardVersion): Target version.
        config (WriterConfig | None): Writer options (defaults to `WriterConfig()`).
        registry (ScribeRegistry | None): Scribes to use (defaults to
            `ScribeRegistry.default()`).
        close_sink (bool): Close the sink when the writer is closed.

    Example:
        ```python
        with open("contacts.vcf", "w", newline="") as fh:
            writer = VCardWriter(fh, VCardVersion.V3_0)
            writer.write(vcard)
            for warning in writer.warnings:
                print(warning)
        ```
    """

    def __init__(
        self,
        sink: TextSink,
        version: VCardVersion,
        *,
        config: WriterConfig | None = None,
        registry: ScribeRegistry | None = None,
        close_sink: bool = False,
    ) -> None:
        self._sink: TextSink = sink
        self._version: VCardVersion = version
        self._config: WriterConfig = config or WriterConfig()
        self._registry: ScribeRegistry = registry or ScribeRegistry.default()
        self._close_sink: bool = close_sink
        self._warnings: WarningLog = WarningLog()

    @property
    def version(self) -> VCardVersion:
        """The target version."""
        return self._version

    @property
    def config(self) -> WriterConfig:
        """The writer options."""
        return self._config

    @property
    def registry(self) -> ScribeRegistry:
        """The scribe registry in use."""
        return self._registry

    @property
    def warnings(self) -> tuple[ScribeWarning, ...]:
        """Warnings of the last `write` (or `write_all`) call, in emission order."""
        return self._warnings.freeze()

    @property
    def warning_log(self) -> WarningLog:
        """The live warning log of the last call."""
        return self._warnings

    def write(self, vcard: VCard) -> None:
        """Write one record.

        Args:
            vcard (VCard): The record (not modified).

        Raises:
            UnregisteredPropertyTypeError: If a property class has no scribe.
            NestingDepthError: If embedded records nest deeper than allowed.
        """
        self._warnings.clear()
        self._write_one(vcard)

    def write_all(self, vcards: Iterable[VCard]) -> int:
        """Write several records in turn; warnings of all of them are kept.

        Returns:
            int: The number of records written.
        """
        self._warnings.clear()
        count: int = 0
        for vcard in vcards:
            self._write_one(vcard)
            count += 1
        return count

    def flush(self) -> None:
        """Flush the sink if it supports flushing."""
        flush = getattr(self._sink, "flush", None)
        if callable(flush):
            flush()

    def close(self) -> None:
        """Flush the sink, and close it when the writer owns it."""
        self.flush()
        if self._close_sink:
            close = getattr(self._sink, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> VCardWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # --- rendering ---

    def _write_one(self, vcard: VCard) -> None:
        text: str = self._render(vcard, depth=0)
        self._sink.write(text)

    def _render(self, vcard: VCard, *, depth: int) -> str:
        """Render ``vcard`` (at nesting ``depth``) into a string."""
        cfg: WriterConfig = self._config
        version: VCardVersion = self._version
        # depth counts embedded levels below the top record (0)
        if depth > cfg.max_nesting_depth:
            raise NestingDepthError(depth, cfg.max_nesting_depth)

        nested: bool = depth > 0
        logger.debug("Writing vCard %s at depth %d (%d properties)", version, depth, len(vcard))

        prepared: PreparedProperties = prepare_properties(
            vcard,
            version,
            self._registry,
            add_prodid=cfg.add_prodid and not nested,
            version_strict=cfg.version_strict,
            product_id=cfg.product_id,
        )
        for prop in prepared.dropped:
            self._warnings.add(
                WarningKind.UNSUPPORTED_VERSION,
                f"Property is not supported by vCard {version} and was not written",
                property_name=self._display_name(prop),
            )
        if cfg.validate_required:
            for name in missing_required(prepared.properties, version):
                self._warnings.add(
                    WarningKind.MISSING_REQUIRED,
                    f"Property {name} is required by vCard {version} but is missing",
                    property_name=name,
                )

        # Embedded 3.0/4.0 records are escaped into a single value; folding
        # them would put continuation lines inside that value.
        folding: FoldingScheme | None = cfg.folding
        if nested and version is not VCardVersion.V2_1:
            folding = None

        context = WriteContext(
            version=version,
            vcard=vcard,
            caret_encoding=cfg.caret_encoding,
            render_nested=lambda inner: self._render(inner, depth=depth + 1),
            depth=depth,
        )

        buf = io.StringIO()
        buf.write(BEGIN_LINE + cfg.newline)
        buf.write(f"VERSION:{version.value}" + cfg.newline)
        for prop in prepared.properties:
            line: FormattedLine | None = self._render_property(prop, context, folding)
            if line is not None:
                buf.write(line.text)
        buf.write(END_LINE + cfg.newline)
        return buf.getvalue()

    def _render_property(
        self,
        prop: VCardProperty,
        context: WriteContext,
        folding: FoldingScheme | None,
    ) -> FormattedLine | None:
        """Render one property, or return ``None`` if its scribe skipped it."""
        version: VCardVersion = self._version
        scribe: PropertyScribe[Any] = self._registry.resolve(prop)
        name: str = scribe.name_for(prop)

        reason: str | None = scribe.skip_reason(prop, version, context)
        params: VCardParameters | None = None
        value: str = ""
        if reason is None:
            try:
                params = scribe.prepare_parameters(prop, version, context)
                value = scribe.write_value(prop, version, context)
            except SkipPropertyError as exc:
                reason = exc.reason
        if reason is not None or params is None:
            self._warnings.add(
                WarningKind.SKIPPED_BY_SCRIBE,
                reason or "Skipped by its scribe",
                property_name=name,
            )
            return None

        line: FormattedLine = format_property_line(
            group=prop.group,
            name=name,
            params=params,
            value=value,
            version=version,
            caret_encoding=self._config.caret_encoding,
            folding=folding,
            newline=self._config.newline,
        )
        if line.chars_removed and self._config.warn_on_param_char_removal:
            self._warnings.add(
                WarningKind.VALUE_ALTERED,
                f"Characters not allowed in vCard {version} parameter values were removed",
                property_name=name,
            )
        logger.trace("Wrote %s: %r", name, line.text)
        return line

    def _display_name(self, prop: VCardProperty) -> str:
        scribe: PropertyScribe[Any] | None = self._registry.get(type(prop))
        return scribe.name_for(prop) if scribe is not None else type(prop).__name__


def write_vcards(
    vcards: Iterable[VCard],
    version: VCardVersion,
    *,
    config: WriterConfig | None = None,
    registry: ScribeRegistry | None = None,
    **options: Any,
) -> str:
    """Write ``vcards`` and return the text.

    Args:
        vcards (Iterable[VCard]): The records.
        version (VCardVersion): Target version.
        config (WriterConfig | None): Base writer options.
        registry (ScribeRegistry | None): Scribes to use.
        **options (Any): `WriterConfig` fields overriding ``config``
            (e.g. ``add_prodid=False``).

    Returns:
        str: The vCard text.
    """
    cfg: WriterConfig = config or WriterConfig()
    if options:
        cfg = cfg.with_changes(**options)
    sink = io.StringIO()
    VCardWriter(sink, version, config=cfg, registry=registry).write_all(vcards)
    return sink.getvalue()
