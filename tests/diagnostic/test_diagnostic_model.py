# topmark:header:start
#
#   project      : ManifestMark
#   file         : test_diagnostic_model.py
#   file_relpath : tests/diagnostic/test_diagnostic_model.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Tests for the diagnostic log and its frozen snapshot."""

from __future__ import annotations

from manifestmark.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    FrozenDiagnosticLog,
)


def test_log_records_in_order() -> None:
    """Findings keep their recording order and level."""
    log = DiagnosticLog()
    log.add_warning("w1")
    log.add_error("e1")
    log.add_warning("w2")

    assert len(log) == 3
    assert log.messages() == ("w1", "e1", "w2")
    assert [d.level for d in log] == [
        DiagnosticLevel.WARNING,
        DiagnosticLevel.ERROR,
        DiagnosticLevel.WARNING,
    ]
    assert log.count(DiagnosticLevel.WARNING) == 2
    assert log.count(DiagnosticLevel.ERROR) == 1


def test_empty_log_has_nothing() -> None:
    """A fresh log reports neither warnings nor errors."""
    log = DiagnosticLog()
    assert not log.has_warning()
    assert not log.has_error()
    assert len(log.freeze()) == 0


def test_freeze_is_a_detached_snapshot() -> None:
    """Later additions to the log do not show up in an earlier snapshot."""
    log = DiagnosticLog()
    log.add_error("bad")
    frozen: FrozenDiagnosticLog = log.freeze()
    log.add_warning("later")

    assert frozen.messages() == ("bad",)
    assert frozen.has_error()
    assert not frozen.has_warning()


def test_extend_appends_other_findings() -> None:
    """Merged logs keep the receiving log's findings first."""
    base = DiagnosticLog()
    base.add_warning("base")
    other = DiagnosticLog(items=[Diagnostic(DiagnosticLevel.ERROR, "other")])

    base.extend(other.freeze())

    assert base.messages() == ("base", "other")
    assert base.has_error()


def test_every_level_has_a_color() -> None:
    """Each level styles its tag without changing the text."""
    for level in DiagnosticLevel:
        assert "[tag]" in level.color("[tag]")
