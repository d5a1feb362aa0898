"""Syntax rules for declarations and the program that holds them."""

from __future__ import annotations

from typing import FrozenSet, List

from ..tokens import CompileError, Ident, Keyword, Op, Phrase, SyntaxRule

SYNTAX_ERROR = "Syntax error"

_VARIABLE_DECLARATIONS = frozenset({Ident.VARIABLE_DECL, Ident.TYPEVAR_DECL})

_TYPE_MEMBERS = frozenset(
    {
        Ident.VARIABLE_DECL,
        Ident.TYPEVAR_DECL,
        Ident.FUNC_PROTOTYPE,
        Ident.FUNCTION_DECL,
        Ident.INT_DECLLIST,
    }
)

_SUBROUTINE_BODIES = frozenset({Ident.STATEMENT, Ident.STATEMENTLIST})

_TOP_LEVEL = frozenset(
    {
        Ident.VARIABLE_DECL,
        Ident.TYPEVAR_DECL,
        Ident.FUNC_PROTOTYPE,
        Ident.FUNCTION_DECL,
        Ident.TYPEDECL,
        Ident.EXTERNALDECL,
        Ident.SHAREDDECL,
        Ident.SUBROUTINE_DECL,
    }
)


class SharedDecl(SyntaxRule):
    """shared variable_decl, or shared typevar_decl."""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        declaration = self._node(nodes, index + 1)
        keyword = nodes[index]
        if (
            declaration is None
            or not keyword.is_keyword(Keyword.SHARED)
            or declaration.type not in _VARIABLE_DECLARATIONS
        ):
            return False
        nodes[index:index + 2] = [keyword.derive(Ident.SHAREDDECL).adopt(declaration)]
        return True


class VariableDecl(SyntaxRule):
    """var IDENTIFIER ; or var IDENTIFIER = boolexpr ;"""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        if self._node(nodes, index + 2) is None:
            return False
        keyword, name, following = nodes[index:index + 3]
        if not (keyword.is_keyword(Keyword.VAR) and name.type == Ident.IDENTIFIER):
            return False

        if following.type == Ident.SEMICOLON:
            nodes[index:index + 3] = [keyword.derive(Ident.VARIABLE_DECL).adopt(name)]
            return True

        value = self._node(nodes, index + 3)
        end = self._node(nodes, index + 4)
        if (
            end is not None
            and following.is_operator(Op.ASSIGN)
            and value.type == Ident.BOOLEXPR
            and end.type == Ident.SEMICOLON
        ):
            declaration = keyword.derive(Ident.VARIABLE_DECL).adopt(name, value)
            nodes[index:index + 5] = [declaration]
            return True
        return False


class _NamedBlock(SyntaxRule):
    """<keyword> IDENTIFIER { [body] } ; grouped under a new phrase.

    The closing semicolon is left in place after the new phrase.
    """

    keyword: int = 0
    result_type: int = Ident.NONE
    body_types: FrozenSet[int] = frozenset()

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        if self._node(nodes, index + 4) is None:
            return False
        keyword, name, opening = nodes[index:index + 3]
        if not (
            keyword.is_keyword(self.keyword)
            and name.type == Ident.IDENTIFIER
            and opening.type == Ident.LBRACE
        ):
            return False

        body = nodes[index + 3]
        closing = self._node(nodes, index + 4)
        end = self._node(nodes, index + 5)
        if (
            end is not None
            and body.type in self.body_types
            and closing.type == Ident.RBRACE
            and end.type == Ident.SEMICOLON
        ):
            nodes[index:index + 5] = [keyword.derive(self.result_type).adopt(name, body)]
            return True

        if body.type == Ident.RBRACE and closing.type == Ident.SEMICOLON:
            nodes[index:index + 4] = [keyword.derive(self.result_type).adopt(name)]
            return True
        return False


class TypeDecl(_NamedBlock):
    """type IDENTIFIER { members } ; or type IDENTIFIER { } ;"""

    keyword = Keyword.TYPE
    result_type = Ident.TYPEDECL
    body_types = _TYPE_MEMBERS

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        return super().apply(nodes, index, errors)


class SubroutineDecl(_NamedBlock):
    """subr IDENTIFIER { statements } ; or subr IDENTIFIER { } ;"""

    keyword = Keyword.SUBR
    result_type = Ident.SUBROUTINE_DECL
    body_types = _SUBROUTINE_BODIES

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        return super().apply(nodes, index, errors)


class ProgramRule(SyntaxRule):
    """Gathers top-level declarations into one program phrase.

    Anything else at the top level is reported as a syntax error, once.
    """

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        node = nodes[index]
        after = self._node(nodes, index + 1)

        if node.type == Ident.PROGRAM and after is not None and after.type in _TOP_LEVEL:
            node.adopt(after)
            del nodes[index + 1]
            return True

        if node.type in _TOP_LEVEL:
            nodes[index] = node.derive(Ident.PROGRAM).adopt(node)
            return True

        if node.type != Ident.PROGRAM and not errors:
            errors.append(self._error(node, SYNTAX_ERROR))
        return False