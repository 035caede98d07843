# docmark:header:start
#
#   project      : DocMark
#   file         : test_diagnostics.py
#   file_relpath : tests/core/test_diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Diagnostic log helpers."""

from __future__ import annotations

from docmark.core.diagnostics import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    compute_diagnostic_stats,
)


def test_log_counts_and_errors() -> None:
    """Stats count each level; `has_error` reflects error entries."""
    log = DiagnosticLog()
    log.add_info("i")
    log.add_warning("w")
    assert not log.has_error()
    log.add_error("e")
    assert log.has_error()

    stats = log.stats()
    assert (stats.n_info, stats.n_warning, stats.n_error, stats.total) == (1, 1, 1, 3)
    assert len(log) == 3
    assert [d.message for d in log] == ["i", "w", "e"]


def test_extend_keeps_order() -> None:
    """Extending appends in the given order."""
    log = DiagnosticLog()
    log.extend([Diagnostic(DiagnosticLevel.ERROR, "a"), Diagnostic(DiagnosticLevel.INFO, "b")])
    assert [d.message for d in log] == ["a", "b"]
    assert compute_diagnostic_stats(log).n_error == 1


def test_level_colors_are_callables() -> None:
    """Each level renders through a color function."""
    for level in DiagnosticLevel:
        assert "msg" in level.color("msg")
