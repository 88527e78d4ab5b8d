# topmark:header:start
#
#   project      : VCardScribe
#   file         : model.py
#   file_relpath : src/vcardscribe/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer configuration model and merge policy.

This module defines:
    - `WriterConfig`: an immutable, fully-resolved snapshot used by `VCardWriter`.
    - `MutableWriterConfig`: a mutable builder with tri-state fields (``None``
      means "inherit"), used when layering defaults, config files and CLI
      overrides. It can be frozen into `WriterConfig` and thawed back.

TOML mapping:

    [writer]
    add_prodid = true
    version_strict = true
    caret_encoding = false
    newline = "\\r\\n"
    validate_required = true
    warn_on_param_char_removal = true
    max_nesting_depth = 100
    product_id = "vcardscribe 1.0.0"

    [writer.folding]
    enabled = true
    width = 75
    indent = " "

Inside ``pyproject.toml`` the same tables live under ``[tool.vcardscribe]``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from vcardscribe.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_nested_table,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
    nest_under,
    to_toml,
)
from vcardscribe.config.keys import Toml
from vcardscribe.config.logging import get_logger
from vcardscribe.constants import (
    CRLF,
    DEFAULT_MAX_NESTING_DEPTH,
    MAX_NESTING_DEPTH_LIMIT,
    PRODUCT_ID,
    PYPROJECT_TOOL_TABLE,
)
from vcardscribe.encoding.folding import FoldingScheme

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from vcardscribe.config.io import TomlTable
    from vcardscribe.config.logging import ScribeLogger

logger: ScribeLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class WriterConfig:
    """Immutable writer configuration.

    Attributes:
        add_prodid (bool): Insert a fresh generator-identity property
            (``PRODID``, or ``X-PRODID`` for 2.1) at the top of each record.
        version_strict (bool): Drop properties that do not support the target
            version (each drop is reported as a warning).
        caret_encoding (bool): Use caret encoding for parameter values (3.0/4.0).
        folding (FoldingScheme | None): Line folding; ``None`` disables folding.
        newline (str): Line terminator.
        validate_required (bool): Warn about properties the version requires
            but the record lacks.
        warn_on_param_char_removal (bool): Warn when characters are removed
            from a parameter value.
        max_nesting_depth (int): Maximum number of embedded record levels below
            the top record (0 forbids embedded records). At most
            ``MAX_NESTING_DEPTH_LIMIT``.
        product_id (str): Value of the injected generator-identity property.

    Raises:
        ValueError: If ``newline`` is empty or ``max_nesting_depth`` is out of range.
    """

    add_prodid: bool = True
    version_strict: bool = True
    caret_encoding: bool = False
    folding: FoldingScheme | None = FoldingScheme.MIME_DIR
    newline: str = CRLF
    validate_required: bool = True
    warn_on_param_char_removal: bool = True
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH
    product_id: str = PRODUCT_ID

    def __post_init__(self) -> None:
        if not self.newline:
            raise ValueError("newline must not be empty")
        if not 0 <= self.max_nesting_depth <= MAX_NESTING_DEPTH_LIMIT:
            raise ValueError(
                f"max_nesting_depth must be between 0 and {MAX_NESTING_DEPTH_LIMIT},"
                f" got {self.max_nesting_depth}"
            )

    def with_changes(self, **changes: Any) -> WriterConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def thaw(self) -> MutableWriterConfig:
        """Return a mutable builder initialized from this frozen config.

        Returns:
            MutableWriterConfig: A builder with every field set explicitly.
        """
        return MutableWriterConfig(
            add_prodid=self.add_prodid,
            version_strict=self.version_strict,
            caret_encoding=self.caret_encoding,
            folding_enabled=self.folding is not None,
            fold_width=self.folding.max_width if self.folding else None,
            fold_indent=self.folding.indent if self.folding else None,
            newline=self.newline,
            validate_required=self.validate_required,
            warn_on_param_char_removal=self.warn_on_param_char_removal,
            max_nesting_depth=self.max_nesting_depth,
            product_id=self.product_id,
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the ``[writer]`` table (with ``[writer.folding]``) for this config."""
        return {Toml.SECTION_WRITER: self.thaw().to_toml_table()}


# ------------------ Mutable builder ------------------


@dataclass
class MutableWriterConfig:
    """Mutable builder for `WriterConfig`, merged last-wins across sources.

    Every field is tri-state: ``None`` means "inherit from the base config".

    Attributes:
        add_prodid (bool | None): See `WriterConfig`.
        version_strict (bool | None): See `WriterConfig`.
        caret_encoding (bool | None): See `WriterConfig`.
        folding_enabled (bool | None): ``False`` disables folding.
        fold_width (int | None): Folding width (``[writer.folding].width``).
        fold_indent (str | None): Continuation indent (``[writer.folding].indent``).
        newline (str | None): See `WriterConfig`.
        validate_required (bool | None): See `WriterConfig`.
        warn_on_param_char_removal (bool | None): See `WriterConfig`.
        max_nesting_depth (int | None): See `WriterConfig`.
        product_id (str | None): See `WriterConfig`.
    """

    add_prodid: bool | None = None
    version_strict: bool | None = None
    caret_encoding: bool | None = None
    folding_enabled: bool | None = None
    fold_width: int | None = None
    fold_indent: str | None = None
    newline: str | None = None
    validate_required: bool | None = None
    warn_on_param_char_removal: bool | None = None
    max_nesting_depth: int | None = None
    product_id: str | None = None

    def merge_with(self, other: MutableWriterConfig) -> MutableWriterConfig:
        """Return a new builder applying ``other`` over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override explicit values in ``self``.

        Args:
            other (MutableWriterConfig): The builder whose values override current ones.

        Returns:
            MutableWriterConfig: Merged builder.
        """

        def pick(current: Any, override: Any) -> Any:
            return override if override is not None else current

        return MutableWriterConfig(
            add_prodid=pick(self.add_prodid, other.add_prodid),
            version_strict=pick(self.version_strict, other.version_strict),
            caret_encoding=pick(self.caret_encoding, other.caret_encoding),
            folding_enabled=pick(self.folding_enabled, other.folding_enabled),
            fold_width=pick(self.fold_width, other.fold_width),
            fold_indent=pick(self.fold_indent, other.fold_indent),
            newline=pick(self.newline, other.newline),
            validate_required=pick(self.validate_required, other.validate_required),
            warn_on_param_char_removal=pick(
                self.warn_on_param_char_removal, other.warn_on_param_char_removal
            ),
            max_nesting_depth=pick(self.max_nesting_depth, other.max_nesting_depth),
            product_id=pick(self.product_id, other.product_id),
        )

    def _resolve_folding(self, base: FoldingScheme | None) -> FoldingScheme | None:
        if self.folding_enabled is False:
            return None
        if self.folding_enabled is None and self.fold_width is None and self.fold_indent is None:
            return base
        template: FoldingScheme = base or FoldingScheme.MIME_DIR
        return FoldingScheme(
            max_width=template.max_width if self.fold_width is None else self.fold_width,
            indent=template.indent if self.fold_indent is None else self.fold_indent,
        )

    def resolve(self, base: WriterConfig) -> WriterConfig:
        """Resolve tri-state fields against a base frozen config.

        Args:
            base (WriterConfig): Config that provides values for unset fields.

        Returns:
            WriterConfig: A fully-resolved immutable config.

        Raises:
            ValueError: If the resolved values are invalid (e.g. a folding
                width not larger than the indent).
        """
        return WriterConfig(
            add_prodid=base.add_prodid if self.add_prodid is None else self.add_prodid,
            version_strict=(
                base.version_strict if self.version_strict is None else self.version_strict
            ),
            caret_encoding=(
                base.caret_encoding if self.caret_encoding is None else self.caret_encoding
            ),
            folding=self._resolve_folding(base.folding),
            newline=base.newline if self.newline is None else self.newline,
            validate_required=(
                base.validate_required
                if self.validate_required is None
                else self.validate_required
            ),
            warn_on_param_char_removal=(
                base.warn_on_param_char_removal
                if self.warn_on_param_char_removal is None
                else self.warn_on_param_char_removal
            ),
            max_nesting_depth=(
                base.max_nesting_depth
                if self.max_nesting_depth is None
                else self.max_nesting_depth
            ),
            product_id=base.product_id if self.product_id is None else self.product_id,
        )

    def freeze(self) -> WriterConfig:
        """Freeze to a concrete `WriterConfig`, using the defaults for unset fields."""
        return self.resolve(WriterConfig())

    @classmethod
    def from_toml_table(cls, tbl: Mapping[str, Any] | None) -> MutableWriterConfig:
        """Create a builder from a ``[writer]`` table.

        Unspecified keys become ``None`` (inherit from base at freeze time).
        Values of the wrong type are logged and ignored.

        Args:
            tbl (Mapping[str, Any] | None): The ``[writer]`` table.

        Returns:
            MutableWriterConfig: Parsed builder.
        """
        if not tbl:
            return cls()
        table: TomlTable = dict(tbl)
        section: str = Toml.SECTION_WRITER
        folding: TomlTable = get_table_value(table, Toml.SECTION_FOLDING)
        folding_section: str = f"{section}.{Toml.SECTION_FOLDING}"

        known: set[str] = {
            Toml.KEY_ADD_PRODID,
            Toml.KEY_VERSION_STRICT,
            Toml.KEY_CARET_ENCODING,
            Toml.KEY_NEWLINE,
            Toml.KEY_VALIDATE_REQUIRED,
            Toml.KEY_WARN_ON_PARAM_CHAR_REMOVAL,
            Toml.KEY_MAX_NESTING_DEPTH,
            Toml.KEY_PRODUCT_ID,
            Toml.SECTION_FOLDING,
        }
        for key in table:
            if key not in known:
                logger.warning("Ignoring unknown key in [%s]: %s", section, key)

        return cls(
            add_prodid=get_bool_value_or_none(table, Toml.KEY_ADD_PRODID, section=section),
            version_strict=get_bool_value_or_none(
                table, Toml.KEY_VERSION_STRICT, section=section
            ),
            caret_encoding=get_bool_value_or_none(
                table, Toml.KEY_CARET_ENCODING, section=section
            ),
            folding_enabled=get_bool_value_or_none(
                folding, Toml.KEY_FOLDING_ENABLED, section=folding_section
            ),
            fold_width=get_int_value_or_none(
                folding, Toml.KEY_FOLDING_WIDTH, section=folding_section
            ),
            fold_indent=get_string_value_or_none(
                folding, Toml.KEY_FOLDING_INDENT, section=folding_section
            ),
            newline=get_string_value_or_none(table, Toml.KEY_NEWLINE, section=section),
            validate_required=get_bool_value_or_none(
                table, Toml.KEY_VALIDATE_REQUIRED, section=section
            ),
            warn_on_param_char_removal=get_bool_value_or_none(
                table, Toml.KEY_WARN_ON_PARAM_CHAR_REMOVAL, section=section
            ),
            max_nesting_depth=get_int_value_or_none(
                table, Toml.KEY_MAX_NESTING_DEPTH, section=section
            ),
            product_id=get_string_value_or_none(table, Toml.KEY_PRODUCT_ID, section=section),
        )

    @classmethod
    def from_toml_document(cls, doc: TomlTable) -> MutableWriterConfig:
        """Create a builder from a whole document.

        The ``[writer]`` table is looked up at the top level and, failing
        that, under ``[tool.vcardscribe]`` (``pyproject.toml`` layout).
        """
        table: TomlTable | None = get_nested_table(doc, Toml.SECTION_WRITER)
        if table is None:
            table = get_nested_table(
                doc, Toml.SECTION_TOOL, PYPROJECT_TOOL_TABLE, Toml.SECTION_WRITER
            )
        if table is None:
            logger.debug("No [%s] table found in TOML document", Toml.SECTION_WRITER)
        return cls.from_toml_table(table)

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableWriterConfig:
        """Load a builder from ``vcardscribe.toml`` or ``pyproject.toml``.

        Raises:
            TomlLoadError: If the file cannot be read or parsed.
        """
        logger.info("Loading writer configuration from %s", path)
        return cls.from_toml_document(load_toml_dict(path))

    def to_toml_table(self) -> TomlTable:
        """Serialize only explicitly set keys to a TOML-friendly dict."""
        folding: TomlTable = {
            Toml.KEY_FOLDING_ENABLED: self.folding_enabled,
            Toml.KEY_FOLDING_WIDTH: self.fold_width,
            Toml.KEY_FOLDING_INDENT: self.fold_indent,
        }
        out: TomlTable = {
            Toml.KEY_ADD_PRODID: self.add_prodid,
            Toml.KEY_VERSION_STRICT: self.version_strict,
            Toml.KEY_CARET_ENCODING: self.caret_encoding,
            Toml.KEY_NEWLINE: self.newline,
            Toml.KEY_VALIDATE_REQUIRED: self.validate_required,
            Toml.KEY_WARN_ON_PARAM_CHAR_REMOVAL: self.warn_on_param_char_removal,
            Toml.KEY_MAX_NESTING_DEPTH: self.max_nesting_depth,
            Toml.KEY_PRODUCT_ID: self.product_id,
        }
        out = {k: v for k, v in out.items() if v is not None}
        folding = {k: v for k, v in folding.items() if v is not None}
        if folding:
            out[Toml.SECTION_FOLDING] = folding
        return out


def load_writer_config(path: Path, *, base: WriterConfig | None = None) -> WriterConfig:
    """Load the writer configuration stored in ``path``.

    Args:
        path (Path): A ``vcardscribe.toml`` or ``pyproject.toml`` file.
        base (WriterConfig | None): Values for keys the file leaves unset
            (defaults to `WriterConfig()`).

    Returns:
        WriterConfig: The resolved configuration.
    """
    return MutableWriterConfig.from_toml_file(path).resolve(base or WriterConfig())


def render_config_toml(config: WriterConfig, *, for_pyproject: bool = False) -> str:
    """Render ``config`` as TOML text.

    Args:
        config (WriterConfig): The configuration to render.
        for_pyproject (bool): Nest the tables under ``[tool.vcardscribe]``.

    Returns:
        str: TOML document text.
    """
    data: TomlTable = config.to_toml_dict()
    if for_pyproject:
        data = nest_under(data, Toml.SECTION_TOOL, PYPROJECT_TOOL_TABLE)
    return to_toml(data)
