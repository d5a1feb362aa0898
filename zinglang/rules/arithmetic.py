"""Syntax rules for negation, exponentiation and multiplication."""

from __future__ import annotations

from typing import List

from ..tokens import CompileError, Ident, Op, Phrase, SyntaxRule

_MULTIPLICATIVE = tuple(Op(value) for value in range(Op.MUL, Op.MOD + 1))


def _is_operator(node, *operators: int) -> bool:
    return node is not None and node.is_operator(*operators)


class NegateExpr(SyntaxRule):
    """- add1expr, or a bare add1expr promoted to negatexpr."""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        node = nodes[index]
        if node.type != Ident.ADD1EXPR:
            return False

        before = self._node(nodes, index - 1)
        two_before = self._node(nodes, index - 2)
        if (
            _is_operator(before, Op.SUB)
            and not (two_before is not None and two_before.type >= Ident.NEGATEXPR)
        ):
            negation = node.derive(Ident.NEGATEXPR).adopt(node)
            nodes[index - 1:index + 1] = [negation]
            return True

        node.set_super_type(Ident.NEGATEXPR)
        return True


class PowerExpr(SyntaxRule):
    """negatexpr ^ negatexpr, chained left to right, or a lone negatexpr."""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        node = nodes[index]
        before = self._node(nodes, index - 1)
        after = self._node(nodes, index + 1)

        if (
            node.type == Ident.NEGATEXPR
            and not _is_operator(after, Op.POW)
            and not _is_operator(before, Op.POW)
        ):
            node.set_super_type(Ident.POWEREXPR)
            return True

        right = self._node(nodes, index + 2)
        if (
            right is not None
            and node.type in (Ident.NEGATEXPR, Ident.POWEREXPR)
            and after.is_operator(Op.POW)
            and right.type == Ident.NEGATEXPR
        ):
            power = node.derive(Ident.POWEREXPR).adopt(node, right)
            nodes[index:index + 3] = [power]
            return True
        return False


class MultiplyExpr(SyntaxRule):
    """powerexpr (* / // %) powerexpr, chained left to right, or a lone powerexpr."""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        node = nodes[index]
        before = self._node(nodes, index - 1)
        after = self._node(nodes, index + 1)

        if (
            node.type == Ident.POWEREXPR
            and not _is_operator(after, *_MULTIPLICATIVE)
            and not _is_operator(before, *_MULTIPLICATIVE)
        ):
            node.set_super_type(Ident.MULTIPLYEXPR)
            return True

        right = self._node(nodes, index + 2)
        if (
            right is not None
            and node.type in (Ident.POWEREXPR, Ident.MULTIPLYEXPR)
            and after.is_operator(*_MULTIPLICATIVE)
            and right.type == Ident.POWEREXPR
        ):
            product = node.derive(Ident.MULTIPLYEXPR).adopt(node, after, right)
            nodes[index:index + 3] = [product]
            return True
        return False