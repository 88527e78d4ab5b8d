# topmark:header:start
#
#   project      : VCardScribe
#   file         : test_writer_config.py
#   file_relpath : tests/config/test_writer_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `WriterConfig`, `MutableWriterConfig` and their TOML mapping.

Covers:
    - defaults and validation of the frozen config;
    - tri-state merge and resolution (``None`` inherits);
    - reading ``[writer]`` tables from standalone and ``pyproject.toml`` layouts;
    - rendering a config back to TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import tomlkit

from tests.conftest import parametrize
from vcardscribe.config import WriterConfig
from vcardscribe.config.io import TomlLoadError, parse_toml_text
from vcardscribe.config.model import (
    MutableWriterConfig,
    load_writer_config,
    render_config_toml,
)
from vcardscribe.constants import (
    CRLF,
    DEFAULT_MAX_NESTING_DEPTH,
    MAX_NESTING_DEPTH_LIMIT,
    PRODUCT_ID,
)
from vcardscribe.encoding.folding import FoldingScheme

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    cfg = WriterConfig()
    assert cfg.add_prodid is True
    assert cfg.version_strict is True
    assert cfg.caret_encoding is False
    assert cfg.folding == FoldingScheme.MIME_DIR
    assert cfg.newline == CRLF
    assert cfg.validate_required is True
    assert cfg.warn_on_param_char_removal is True
    assert cfg.max_nesting_depth == DEFAULT_MAX_NESTING_DEPTH
    assert cfg.product_id == PRODUCT_ID


@parametrize(
    "kwargs",
    [
        {"newline": ""},
        {"max_nesting_depth": -1},
        {"max_nesting_depth": MAX_NESTING_DEPTH_LIMIT + 1},
    ],
)
def test_invalid_values_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        WriterConfig(**kwargs)  # type: ignore[arg-type]


def test_with_changes_returns_new_instance() -> None:
    cfg = WriterConfig()
    changed = cfg.with_changes(caret_encoding=True)
    assert changed.caret_encoding is True
    assert cfg.caret_encoding is False


def test_thaw_then_freeze_round_trips() -> None:
    cfg = WriterConfig(
        add_prodid=False, folding=FoldingScheme(50, "  "), newline="\n", product_id="acme"
    )
    assert cfg.thaw().freeze() == cfg
    no_fold = WriterConfig(folding=None)
    assert no_fold.thaw().freeze() == no_fold


def test_merge_is_last_wins_and_none_inherits() -> None:
    base = MutableWriterConfig(add_prodid=False, caret_encoding=True, fold_width=60)
    override = MutableWriterConfig(add_prodid=True, fold_width=None)
    merged = base.merge_with(override)
    assert merged.add_prodid is True
    assert merged.caret_encoding is True
    assert merged.fold_width == 60


def test_resolve_uses_base_for_unset_fields() -> None:
    base = WriterConfig(newline="\n", version_strict=False)
    cfg = MutableWriterConfig(caret_encoding=True).resolve(base)
    assert cfg.newline == "\n"
    assert cfg.version_strict is False
    assert cfg.caret_encoding is True
    assert cfg.folding == base.folding


def test_folding_disabled_wins_over_width() -> None:
    cfg = MutableWriterConfig(folding_enabled=False, fold_width=40).freeze()
    assert cfg.folding is None


def test_folding_width_and_indent() -> None:
    cfg = MutableWriterConfig(fold_width=40).freeze()
    assert cfg.folding == FoldingScheme(40, " ")
    cfg = MutableWriterConfig(fold_indent="\t").freeze()
    assert cfg.folding == FoldingScheme(75, "\t")


def test_folding_reenabled_over_disabled_base() -> None:
    cfg = MutableWriterConfig(folding_enabled=True).resolve(WriterConfig(folding=None))
    assert cfg.folding == FoldingScheme.MIME_DIR


def test_invalid_folding_width_raises_on_resolve() -> None:
    with pytest.raises(ValueError):
        MutableWriterConfig(fold_width=1).freeze()


def test_from_toml_table() -> None:
    doc = parse_toml_text(
        """
[writer]
add_prodid = false
caret_encoding = true
newline = "\\n"
max_nesting_depth = 3
product_id = "acme"

[writer.folding]
width = 60
indent = "  "
"""
    )
    builder = MutableWriterConfig.from_toml_document(doc)
    assert builder.add_prodid is False
    assert builder.version_strict is None
    cfg = builder.freeze()
    assert cfg.add_prodid is False
    assert cfg.caret_encoding is True
    assert cfg.newline == "\n"
    assert cfg.max_nesting_depth == 3
    assert cfg.product_id == "acme"
    assert cfg.folding == FoldingScheme(60, "  ")


def test_pyproject_layout() -> None:
    doc = parse_toml_text(
        """
[project]
name = "something-else"

[tool.vcardscribe.writer]
version_strict = false

[tool.vcardscribe.writer.folding]
enabled = false
"""
    )
    cfg = MutableWriterConfig.from_toml_document(doc).freeze()
    assert cfg.version_strict is False
    assert cfg.folding is None


def test_document_without_writer_table() -> None:
    assert MutableWriterConfig.from_toml_document({"project": {}}) == MutableWriterConfig()


def test_unknown_keys_and_wrong_types_are_ignored(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("WARNING")
    builder = MutableWriterConfig.from_toml_table(
        {"add_prodid": "yes", "max_nesting_depth": True, "colour": "blue"}
    )
    assert builder == MutableWriterConfig()
    messages = [r.getMessage() for r in caplog.records]
    assert any("Ignoring unknown key in [writer]: colour" in m for m in messages)
    assert any("Expected bool in [writer].add_prodid" in m for m in messages)
    assert any("Expected int in [writer].max_nesting_depth" in m for m in messages)


def test_to_toml_table_only_set_keys() -> None:
    builder = MutableWriterConfig(caret_encoding=True, fold_width=40)
    assert builder.to_toml_table() == {"caret_encoding": True, "folding": {"width": 40}}
    assert MutableWriterConfig().to_toml_table() == {}


@parametrize("for_pyproject", [False, True])
def test_render_config_toml_round_trip(for_pyproject: bool) -> None:
    cfg = WriterConfig(caret_encoding=True, folding=FoldingScheme(60, "\t"), newline="\n")
    text = render_config_toml(cfg, for_pyproject=for_pyproject)
    doc = tomlkit.parse(text).unwrap()
    if for_pyproject:
        assert "writer" in doc["tool"]["vcardscribe"]
    else:
        assert "writer" in doc
    assert MutableWriterConfig.from_toml_document(doc).freeze() == cfg


def test_render_disabled_folding() -> None:
    text = render_config_toml(WriterConfig(folding=None))
    doc = tomlkit.parse(text).unwrap()
    assert doc["writer"]["folding"] == {"enabled": False}


def test_load_writer_config(tmp_path: Path) -> None:
    path = tmp_path / "vcardscribe.toml"
    path.write_text("[writer]\nadd_prodid = false\n", encoding="utf-8")
    cfg = load_writer_config(path, base=WriterConfig(caret_encoding=True))
    assert cfg.add_prodid is False
    assert cfg.caret_encoding is True


def test_load_writer_config_errors(tmp_path: Path) -> None:
    with pytest.raises(TomlLoadError):
        load_writer_config(tmp_path / "missing.toml")
    bad = tmp_path / "bad.toml"
    bad.write_text("[writer\n", encoding="utf-8")
    with pytest.raises(TomlLoadError) as excinfo:
        load_writer_config(bad)
    assert excinfo.value.path == bad
