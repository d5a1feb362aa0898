"""Token and phrase types shared by the scanner, the lexer and the syntax rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, List, Optional


class Ident(IntEnum):
    """Kinds of tokens and phrases.

    The numeric order matters: several syntax rules test ranges of kinds.
    """

    NONE = 0
    LPARENTH = 1
    RPARENTH = 2
    LBRACE = 3
    RBRACE = 4
    LBRACKET = 5
    RBRACKET = 6
    COMMA = 7
    SEMICOLON = 8
    PERIOD = 9
    STRING_LITERAL = 10
    NUMERIC_LITERAL = 11
    COMPLEX_LITERAL = 12
    LITERAL = 13
    IDENTIFIER = 14
    KEYWORD = 15
    OPERATOR = 16
    UNKNOWN = 17

    IDENTIFIERLIST = 18
    ID_COUNT = 18
    COMMAND = 19
    STATEMENTLIST = 20
    STATEMENT = 21
    IF_STATEMENT = 22
    FOR_STATEMENT = 23
    FOREACH_STATEMENT = 24
    LOOP_STATEMENT = 25
    WHILE_PRE_STMT = 26
    WHILE_POST_STMT = 27
    RUN_STATEMENT = 28
    STOP_STATEMENT = 29
    RETURN_STATEMENT = 30
    WAIT_STATEMENT = 31
    UNTIL_STATEMENT = 32
    LABEL_STATEMENT = 33
    GOTO_STATEMENT = 34
    GOSUB_STATEMENT = 35
    SUBROUTINE_DECL = 36
    VARIABLE_DECL = 37
    TYPEVAR_DECL = 38
    INT_DECLLIST = 39
    TYPEDECL = 40
    EXTERNALDECL = 41
    SHAREDDECL = 42
    FUNC_PROTOTYPE = 43
    FUNCTION_DECL = 44
    RANGE = 45
    RANGELIST = 46
    INDEX = 47
    INDEXLIST = 48
    EXPRLIST = 49
    LIST = 50
    FUNCCALL = 51
    TYPE_FUNCCALL = 52
    VARINDEX = 53
    TYPEVAR = 54
    VARIABLE = 55
    OPERAND = 56
    PARENTHEXPR = 57
    FACTORIALEXPR = 58
    ADD1EXPR = 59
    NEGATEXPR = 60
    POWEREXPR = 61
    MULTIPLYEXPR = 62
    ADDEXPR = 63
    BOOLEXPR = 64
    ASSIGNEXPR = 65
    DIMENSIONEXPR = 66
    SIZEOFEXPR = 67
    FORMALVARDECL = 68
    FORMALTYPEDECL = 69
    FORMALDECLLIST = 70
    PROGRAM = 71
    FUNCCALL_BUILTIN = 72


class Keyword(IntEnum):
    """Keyword identifiers carried in a keyword token's ``meta``.

    IF through WHILE are the keywords that may directly precede a block.
    """

    IF = 1
    ELSE = 2
    FOR = 3
    EACH = 4
    IN = 5
    LOOP = 6
    WHILE = 7
    RUN = 8
    STOP = 9
    RETURN = 10
    WAIT = 11
    UNTIL = 12
    LABEL = 13
    GOTO = 14
    GOSUB = 15
    SUBR = 16
    VAR = 17
    TYPE = 18
    EXTERNAL = 19
    SHARED = 20
    DIM = 21


class Op(IntEnum):
    """Operator identifiers carried in an operator token's ``meta``.

    ASSIGN through MOD_ASSIGN and MUL through MOD are contiguous ranges.
    """

    ASSIGN = 1
    ADD_ASSIGN = 2
    SUB_ASSIGN = 3
    MUL_ASSIGN = 4
    DIV_ASSIGN = 5
    IDIV_ASSIGN = 6
    MOD_ASSIGN = 7
    ADD = 8
    SUB = 9
    MUL = 10
    DIV = 11
    IDIV = 12
    MOD = 13
    POW = 14
    FACTORIAL = 15
    ADD1 = 16
    SUB1 = 17
    EQUALS = 18
    NOT_EQUALS = 19
    GREATER = 20
    GREATER_OR_EQUAL = 21
    LESS = 22
    LESS_OR_EQUAL = 23
    AND = 24
    OR = 25
    XOR = 26
    NOT = 27
    BIT_AND = 28
    BIT_OR = 29
    BIT_XOR = 30
    BIT_NOT = 31
    L_SHIFT = 32
    R_SHIFT = 33
    R_ARROW = 34
    L_ARROW = 35
    SIZEOF = 36


@dataclass
class CompileError(Exception):
    """A problem found in script source, with its position."""

    message: str
    file: Optional[str] = None
    line: int = 0
    column: int = 0

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.file or '<input>'}:{self.line}:{self.column}: {self.message}"


@dataclass
class Token:
    """One scanned token.

    ``meta`` holds the symbol text of identifiers and the keyword or
    operator value of keywords and operators.
    """

    type: int
    line: int = 0
    column: int = 0
    indent: int = 0
    meta: Any = None
    value: Any = None
    file: Optional[str] = None


@dataclass(eq=False)
class Phrase:
    """A node of the syntax tree built by the lexer."""

    type: int = Ident.NONE
    line: int = 0
    column: int = 0
    indent: int = 0
    meta: Any = None
    value: Any = None
    file: Optional[str] = None
    orig_type: int = Ident.NONE
    parent: Optional["Phrase"] = field(default=None, repr=False)
    children: List["Phrase"] = field(default_factory=list)

    @classmethod
    def from_token(cls, token: Token) -> "Phrase":
        """Make a leaf phrase from a scanned token."""
        return cls(
            type=token.type,
            line=token.line,
            column=token.column,
            indent=token.indent,
            meta=token.meta,
            value=token.value,
            file=token.file,
        )

    def derive(self, new_type: int) -> "Phrase":
        """Make a fresh childless phrase at this one's position.

        The new phrase takes ``new_type``, or this phrase's type when
        ``new_type`` is NONE; it carries no meta or value.
        """
        return Phrase(
            type=new_type if new_type != Ident.NONE else self.type,
            line=self.line,
            column=self.column,
            indent=self.indent,
            file=self.file,
        )

    def set_super_type(self, new_type: int) -> None:
        """Promote the phrase to ``new_type``, remembering its first type."""
        if self.orig_type == Ident.NONE:
            self.orig_type = self.type
        self.type = new_type

    def adopt(self, *children: "Phrase") -> "Phrase":
        """Append children in order and make this phrase their parent."""
        for child in children:
            child.parent = self
            self.children.append(child)
        return self

    def is_keyword(self, *keywords: int) -> bool:
        """True for a keyword phrase, optionally one of ``keywords``."""
        return self.type == Ident.KEYWORD and (not keywords or self.meta in keywords)

    def is_operator(self, *operators: int) -> bool:
        """True for an operator phrase, optionally one of ``operators``."""
        return self.type == Ident.OPERATOR and (not operators or self.meta in operators)


class SyntaxRule(ABC):
    """A rewrite rule that groups phrases at one position of the phrase list."""

    @abstractmethod
    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        """Try to rewrite ``nodes`` at ``index``; return True if anything changed."""

    @staticmethod
    def _node(nodes: List[Phrase], index: int) -> Optional[Phrase]:
        """The phrase at ``index``, or None when the index is out of range."""
        if 0 <= index < len(nodes):
            return nodes[index]
        return None

    @staticmethod
    def _error(node: Phrase, message: str) -> CompileError:
        return CompileError(message, node.file, node.line, node.column)