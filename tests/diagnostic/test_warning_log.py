# topmark:header:start
#
#   project      : VCardScribe
#   file         : test_warning_log.py
#   file_relpath : tests/diagnostic/test_warning_log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for write warnings and the per-write warning log."""

from __future__ import annotations

from vcardscribe.diagnostic.model import ScribeWarning, WarningKind, WarningLog


def test_warning_str() -> None:
    assert str(ScribeWarning(WarningKind.MISSING_REQUIRED, "missing", property_name="N")) == (
        "[N] missing"
    )
    assert str(ScribeWarning(WarningKind.VALUE_ALTERED, "altered")) == "altered"


def test_log_keeps_order_and_counts_kinds() -> None:
    log = WarningLog()
    log.add(WarningKind.MISSING_REQUIRED, "a", property_name="N")
    log.add(WarningKind.SKIPPED_BY_SCRIBE, "b")
    log.add(WarningKind.MISSING_REQUIRED, "c", property_name="FN")

    assert [w.message for w in log] == ["a", "b", "c"]
    assert len(log.of_kind(WarningKind.MISSING_REQUIRED)) == 2

    stats = log.stats()
    assert stats.total == 3
    assert stats.to_dict() == {
        "unsupported_version": 0,
        "skipped_by_scribe": 1,
        "value_altered": 0,
        "missing_required": 2,
    }


def test_freeze_is_a_snapshot() -> None:
    log = WarningLog()
    log.add(WarningKind.VALUE_ALTERED, "x")
    snapshot = log.freeze()
    log.clear()
    assert len(snapshot) == 1
    assert len(log) == 0


def test_every_kind_has_a_color() -> None:
    for kind in WarningKind:
        assert isinstance(kind.color("text"), str)
