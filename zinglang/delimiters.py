"""Tracking of parentheses, brackets and braces while scanning."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .tokens import CompileError, Ident

_PAIRS = {
    Ident.RPARENTH: Ident.LPARENTH,
    Ident.RBRACKET: Ident.LBRACKET,
    Ident.RBRACE: Ident.LBRACE,
}

_MISSING_OPEN = {
    Ident.RPARENTH: "Missing open parentheses",
    Ident.RBRACKET: "Missing open square bracket",
    Ident.RBRACE: "Missing open curly brace",
}

_MISSING_CLOSE = {
    Ident.LPARENTH: "Missing close parentheses",
    Ident.LBRACKET: "Missing close square bracket",
    Ident.LBRACE: "Missing close curly brace",
}


class DelimiterTracker:
    """Checks that opening and closing delimiters pair up.

    Errors found are collected in ``errors`` and also returned.
    """

    def __init__(self, file: Optional[str] = None) -> None:
        self.file = file
        self.errors: List[CompileError] = []
        self._open: List[Tuple[Ident, int, int]] = []

    def _report(self, message: str, line: int, column: int) -> CompileError:
        error = CompileError(message, self.file, line, column)
        self.errors.append(error)
        return error

    def open(self, kind: int, line: int, column: int) -> None:
        """Record an opening delimiter at the given position."""
        if kind not in _MISSING_CLOSE:
            raise ValueError(f"not an opening delimiter: {kind!r}")
        self._open.append((Ident(kind), line, column))

    def close(self, kind: int, line: int, column: int) -> Optional[CompileError]:
        """Match a closing delimiter against the latest open one.

        Returns the error found, or None when the pair matches.
        """
        if kind not in _PAIRS:
            raise ValueError(f"not a closing delimiter: {kind!r}")
        if not self._open:
            return self._report(_MISSING_OPEN[Ident(kind)], line, column)
        opened, open_line, open_column = self._open.pop()
        if opened != _PAIRS[Ident(kind)]:
            return self._report(_MISSING_CLOSE[opened], open_line, open_column)
        return None

    def finish(self) -> List[CompileError]:
        """Report every delimiter still open, latest first, and clear them."""
        found = []
        while self._open:
            opened, line, column = self._open.pop()
            found.append(self._report(_MISSING_CLOSE[opened], line, column))
        return found