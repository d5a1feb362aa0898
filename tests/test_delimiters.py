import pytest

from zinglang.delimiters import DelimiterTracker
from zinglang.tokens import Ident


def test_matched_pairs_report_nothing():
    tracker = DelimiterTracker("a.zs")
    tracker.open(Ident.LPARENTH, 0, 0)
    tracker.open(Ident.LBRACKET, 0, 1)
    assert tracker.close(Ident.RBRACKET, 0, 2) is None
    assert tracker.close(Ident.RPARENTH, 0, 3) is None
    assert tracker.finish() == []
    assert tracker.errors == []


def test_close_without_open():
    tracker = DelimiterTracker("a.zs")
    error = tracker.close(Ident.RPARENTH, 2, 7)
    assert error.message == "Missing open parentheses"
    assert (error.file, error.line, error.column) == ("a.zs", 2, 7)
    assert tracker.errors == [error]


def test_missing_open_messages_per_kind():
    tracker = DelimiterTracker()
    assert tracker.close(Ident.RBRACKET, 0, 0).message == "Missing open square bracket"
    assert tracker.close(Ident.RBRACE, 0, 0).message == "Missing open curly brace"


def test_mismatch_reports_at_open_position():
    tracker = DelimiterTracker("a.zs")
    tracker.open(Ident.LBRACKET, 1, 4)
    error = tracker.close(Ident.RPARENTH, 3, 9)
    assert error.message == "Missing close square bracket"
    assert (error.line, error.column) == (1, 4)


def test_mismatch_consumes_the_open_delimiter():
    tracker = DelimiterTracker()
    tracker.open(Ident.LBRACE, 0, 0)
    tracker.close(Ident.RPARENTH, 0, 1)
    assert tracker.finish() == []
    assert len(tracker.errors) == 1


def test_finish_reports_latest_first():
    tracker = DelimiterTracker()
    tracker.open(Ident.LBRACE, 0, 0)
    tracker.open(Ident.LPARENTH, 0, 5)
    errors = tracker.finish()
    assert [e.message for e in errors] == [
        "Missing close parentheses",
        "Missing close curly brace",
    ]
    assert [e.column for e in errors] == [5, 0]
    assert tracker.finish() == []


def test_wrong_kinds_rejected():
    tracker = DelimiterTracker()
    with pytest.raises(ValueError):
        tracker.open(Ident.RPARENTH, 0, 0)
    with pytest.raises(ValueError):
        tracker.close(Ident.LBRACE, 0, 0)