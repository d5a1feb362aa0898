"""Splitting script source text into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, MutableSet, Optional, Tuple, Union

from .delimiters import DelimiterTracker
from .literals import NumberFormatError, parse_number, read_escape
from .operators import Operator, OperatorError, OperatorTable
from .tokens import CompileError, Ident, Token

UNKNOWN_ESCAPE = "Unknown escape sequence"

_DELIMITERS = {
    "(": Ident.LPARENTH,
    ")": Ident.RPARENTH,
    "[": Ident.LBRACKET,
    "]": Ident.RBRACKET,
    "{": Ident.LBRACE,
    "}": Ident.RBRACE,
    ",": Ident.COMMA,
    ";": Ident.SEMICOLON,
}
_OPENING = frozenset({Ident.LPARENTH, Ident.LBRACKET, Ident.LBRACE})
_CLOSING = frozenset({Ident.RPARENTH, Ident.RBRACKET, Ident.RBRACE})
_QUOTES = "\"'"
_LINE_BREAKS = "\r\n"


def _is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


@dataclass(frozen=True)
class CommentRules:
    """Comment markers: single-line openers and (open, close) pairs for block comments."""

    single_line: Tuple[str, ...] = ()
    multi_line: Tuple[Tuple[str, str], ...] = ()


class _Run:
    """State of one pass of the scanner over a text."""

    def __init__(self, scanner: "Scanner", text: str) -> None:
        self.scanner = scanner
        self.text = text
        self.errors = scanner.errors
        self.tokens: List[Token] = []
        self.tracker = DelimiterTracker(scanner.file)

        self.pos = 0
        self.line = 0
        self.column = 0
        self.indent = 0

        self.kind = Ident.NONE
        self.buffer: List[str] = []
        self.start = (0, 0, 0)

        self.quote: Optional[str] = None
        self.comment_end: Optional[str] = None
        self.line_comment = False

    # movement

    def step(self) -> None:
        """Consume one character; a CR/LF pair in either order is one line break."""
        char = self.text[self.pos]
        self.pos += 1
        if char in _LINE_BREAKS:
            partner = "\r" if char == "\n" else "\n"
            if self.pos < len(self.text) and self.text[self.pos] == partner:
                self.pos += 1
            self.line += 1
            self.column = 0
            self.indent = 0
            self.line_comment = False
        else:
            self.column += 1

    def skip(self, count: int) -> None:
        for _ in range(count):
            if self.pos >= len(self.text):
                break
            self.step()

    # token assembly

    def error(self, message: str, line: int, column: int) -> None:
        self.errors.append(CompileError(message, self.scanner.file, line, column))

    def emit(self, kind: int, line: int, column: int, indent: int = 0,
             meta: object = None, value: object = None) -> None:
        self.tokens.append(Token(kind, line, column, indent, meta, value, self.scanner.file))

    def begin(self, kind: int) -> None:
        self.finish()
        self.kind = kind
        self.buffer = []
        self.start = (self.line, self.column, self.indent)
        self.indent = 0

    def finish(self) -> None:
        kind, symbol = self.kind, "".join(self.buffer)
        line, column, indent = self.start
        self.kind = Ident.NONE
        self.buffer = []

        if kind == Ident.NONE:
            return
        if kind == Ident.UNKNOWN:
            self._emit_operators(symbol, line, column)
        elif kind == Ident.IDENTIFIER:
            self._emit_word(symbol, line, column, indent)
        elif kind == Ident.NUMERIC_LITERAL:
            self._emit_number(symbol, line, column, indent)
        elif kind == Ident.STRING_LITERAL:
            self.emit(Ident.LITERAL, line, column, indent, value=symbol)
        else:
            self.emit(kind, line, column, indent)

    def _emit_operators(self, symbol: str, line: int, column: int) -> None:
        try:
            parts = self.scanner.operators.split(symbol)
        except OperatorError as exc:
            at = column + len(symbol) if exc.offset > 0 else column
            self.error(exc.message, line, at)
            self.emit(Ident.UNKNOWN, line, column, meta=symbol)
            return
        for operator, offset in parts:
            self.emit(Ident.OPERATOR, line, column + offset, meta=operator.value)

    def _emit_word(self, symbol: str, line: int, column: int, indent: int) -> None:
        keyword = self.scanner.keywords.get(symbol)
        if keyword is not None:
            self.emit(Ident.KEYWORD, line, column, indent, meta=keyword)
            return
        operator = self.scanner.operators.lookup(symbol)
        if operator is not None:
            self.emit(Ident.OPERATOR, line, column, indent, meta=operator.value)
            return
        if self.scanner.symbol_table is not None:
            self.scanner.symbol_table.add(symbol)
        self.emit(Ident.IDENTIFIER, line, column, indent, meta=symbol)

    def _emit_number(self, symbol: str, line: int, column: int, indent: int) -> None:
        try:
            value = parse_number(symbol)
        except NumberFormatError as exc:
            for problem in exc.problems:
                self.error(problem, line, column)
            value = None
        self.emit(Ident.LITERAL, line, column, indent, value=value)

    # character classes

    def _string_char(self, char: str) -> None:
        if char == self.quote:
            self.quote = None
            self.step()
            return
        found = read_escape(self.text, self.pos, self.scanner.escapes)
        if found is not None:
            replacement, length = found
            self.buffer.append(replacement)
            self.skip(length)
            return
        self.buffer.append(char)
        if char == "\\":
            line, column, _ = self.start
            self.error(UNKNOWN_ESCAPE, line, column)
        self.step()

    def _open_comment(self) -> bool:
        rules = self.scanner.comment_rules
        for opener, closer in rules.multi_line:
            if opener and self.text.startswith(opener, self.pos):
                self.finish()
                self.comment_end = closer
                self.skip(len(opener))
                return True
        for opener in rules.single_line:
            if opener and self.text.startswith(opener, self.pos):
                self.finish()
                self.line_comment = True
                self.skip(len(opener))
                return True
        return False

    def _word_char(self, char: str) -> None:
        if self.kind not in (Ident.NUMERIC_LITERAL, Ident.IDENTIFIER):
            self.begin(Ident.NUMERIC_LITERAL if _is_digit(char) else Ident.IDENTIFIER)
        self.buffer.append(char)
        self.step()

    def _period(self) -> None:
        following = self.text[self.pos + 1:self.pos + 2]
        if self.kind == Ident.NUMERIC_LITERAL:
            self.buffer.append(".")
            self.step()
        elif self.kind == Ident.NONE and _is_digit(following):
            self.begin(Ident.NUMERIC_LITERAL)
            self.buffer.append(".")
            self.step()
        else:
            self._delimiter(Ident.PERIOD)

    def _delimiter(self, kind: Ident) -> None:
        self.begin(kind)
        if kind in _OPENING:
            self.tracker.open(kind, self.line, self.column)
        elif kind in _CLOSING:
            problem = self.tracker.close(kind, self.line, self.column)
            if problem is not None:
                self.errors.append(problem)
        self.finish()
        self.step()

    def _operator_char(self, char: str) -> None:
        if self.kind != Ident.UNKNOWN:
            self.begin(Ident.UNKNOWN)
        self.buffer.append(char)
        self.step()

    def run(self) -> List[Token]:
        text = self.text
        while self.pos < len(text):
            char = text[self.pos]
            if self.quote is not None:
                self._string_char(char)
            elif self.comment_end is not None:
                if self.comment_end and text.startswith(self.comment_end, self.pos):
                    self.skip(len(self.comment_end))
                    self.comment_end = None
                else:
                    self.step()
            elif self.line_comment:
                self.step()
            elif char in _QUOTES:
                self.begin(Ident.STRING_LITERAL)
                self.quote = char
                self.step()
            elif self._open_comment():
                continue
            elif char.isspace():
                self.finish()
                line_break = char in _LINE_BREAKS
                self.step()
                if not line_break:
                    self.indent += 1
            elif char.isalnum() or char == "_":
                self._word_char(char)
            elif char == ".":
                self._period()
            elif char in _DELIMITERS:
                self._delimiter(_DELIMITERS[char])
            else:
                self._operator_char(char)

        self.errors.extend(self.tracker.finish())
        self.finish()
        return self.tokens


class Scanner:
    """Separates script text into labelled tokens.

    Identifiers that match a keyword become keyword tokens and those that
    match an alphanumeric operator become operator tokens. String and
    numeric literals become LITERAL tokens carrying their value. Problems
    found are collected in ``errors``; scanning always runs to the end.
    """

    def __init__(
        self,
        keywords: Optional[Mapping[str, int]] = None,
        operators: Union[OperatorTable, Iterable[Operator], None] = None,
        comment_rules: Optional[CommentRules] = None,
        escapes: Optional[Mapping[str, str]] = None,
        file: Optional[str] = None,
        symbol_table: Optional[MutableSet[str]] = None,
    ) -> None:
        self.keywords = dict(keywords or {})
        if isinstance(operators, OperatorTable):
            self.operators = operators
        else:
            self.operators = OperatorTable(operators or ())
        self.comment_rules = comment_rules or CommentRules()
        self.escapes = dict(escapes or {})
        self.file = file
        self.symbol_table = symbol_table
        self.errors: List[CompileError] = []

    def scan(self, text: str) -> List[Token]:
        """Return the tokens of ``text``; errors of this run replace earlier ones."""
        self.errors = []
        return _Run(self, text).run()

    def good(self) -> bool:
        """True when the last scan reported no errors."""
        return not self.errors