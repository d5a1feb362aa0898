"""Syntax rules for operands and parenthesised, sizeof and member expressions."""

from __future__ import annotations

from typing import List

from ..tokens import CompileError, Ident, Keyword, Op, Phrase, SyntaxRule

_ASSIGNMENTS = tuple(Op(value) for value in range(Op.ASSIGN, Op.MOD_ASSIGN + 1))

_ALWAYS_OPERANDS = frozenset(
    {
        Ident.LITERAL,
        Ident.VARINDEX,
        Ident.DIMENSIONEXPR,
        Ident.SIZEOFEXPR,
        Ident.TYPE_FUNCCALL,
        Ident.TYPEVAR,
    }
)


def _is_type(node, *types: int) -> bool:
    return node is not None and node.type in types


class ParenthExpr(SyntaxRule):
    """( boolexpr ) not following an identifier or keyword, or an operand."""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        node = nodes[index]
        inner = self._node(nodes, index + 1)
        closing = self._node(nodes, index + 2)
        before = self._node(nodes, index - 1)
        if (
            closing is not None
            and node.type == Ident.LPARENTH
            and closing.type == Ident.RPARENTH
            and inner.type == Ident.BOOLEXPR
            and not _is_type(before, Ident.IDENTIFIER, Ident.KEYWORD)
        ):
            inner.set_super_type(Ident.PARENTHEXPR)
            del nodes[index + 2]
            del nodes[index]
            return True
        if node.type == Ident.OPERAND:
            node.set_super_type(Ident.PARENTHEXPR)
            return True
        return False


class Operand(SyntaxRule):
    """Promotes values that can stand in an expression to operands."""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        node = nodes[index]
        before = self._node(nodes, index - 1)
        after = self._node(nodes, index + 1)

        if before is not None and before.is_keyword(Keyword.IN, Keyword.EACH):
            return False

        after_period = _is_type(before, Ident.PERIOD)
        if node.type == Ident.VARIABLE:
            is_operand = not (after is not None and after.is_operator(*_ASSIGNMENTS)) and not after_period
        elif node.type == Ident.FUNCCALL:
            is_operand = not after_period
        elif node.type == Ident.LIST:
            is_operand = not _is_type(before, Ident.IDENTIFIERLIST, Ident.IDENTIFIER)
        else:
            is_operand = node.type in _ALWAYS_OPERANDS

        if is_operand:
            node.set_super_type(Ident.OPERAND)
        return is_operand


class SizeofExpr(SyntaxRule):
    """sizeof ( boolexpr )"""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        if self._node(nodes, index + 3) is None:
            return False
        operator, opening, inner, closing = nodes[index:index + 4]
        if not (
            operator.is_operator(Op.SIZEOF)
            and opening.type == Ident.LPARENTH
            and inner.type == Ident.BOOLEXPR
            and closing.type == Ident.RPARENTH
        ):
            return False
        node = Phrase(
            type=Ident.SIZEOFEXPR,
            line=operator.line,
            column=operator.column,
            file=operator.file,
        ).adopt(inner)
        nodes[index:index + 4] = [node]
        return True


class _MemberAccess(SyntaxRule):
    """parenthexpr . <member> grouped under a new phrase."""

    member_type: int = Ident.NONE
    result_type: int = Ident.NONE

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        if self._node(nodes, index + 2) is None:
            return False
        owner, period, member = nodes[index:index + 3]
        if not (
            owner.type == Ident.PARENTHEXPR
            and period.type == Ident.PERIOD
            and member.type == self.member_type
        ):
            return False
        node = owner.derive(self.result_type).adopt(owner, member)
        nodes[index:index + 3] = [node]
        return True


class TypeVar(_MemberAccess):
    """parenthexpr . variable"""

    member_type = Ident.VARIABLE
    result_type = Ident.TYPEVAR

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        return super().apply(nodes, index, errors)


class TypeFuncCall(_MemberAccess):
    """parenthexpr . funccall"""

    member_type = Ident.FUNCCALL
    result_type = Ident.TYPE_FUNCCALL

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        return super().apply(nodes, index, errors)