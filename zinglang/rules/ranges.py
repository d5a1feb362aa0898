"""Syntax rules for ranges and range lists inside square brackets."""

from __future__ import annotations

from typing import List

from ..tokens import CompileError, Ident, Op, Phrase, SyntaxRule

_RANGE_ITEMS = (Ident.RANGE, Ident.BOOLEXPR)
_ITEM_ENDS = (Ident.COMMA, Ident.RBRACKET)


class RangeRule(SyntaxRule):
    """boolexpr -> boolexpr or boolexpr <- boolexpr, children ordered low to high."""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        if self._node(nodes, index + 2) is None:
            return False
        left, arrow, right = nodes[index:index + 3]
        if not (
            left.type == Ident.BOOLEXPR
            and arrow.is_operator(Op.R_ARROW, Op.L_ARROW)
            and right.type == Ident.BOOLEXPR
        ):
            return False
        ends = (left, right) if arrow.is_operator(Op.R_ARROW) else (right, left)
        nodes[index:index + 3] = [left.derive(Ident.RANGE).adopt(*ends)]
        return True


class RangeList(SyntaxRule):
    """[ item , item , ... ] gathered into a range list, items being ranges or expressions."""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        before = self._node(nodes, index - 1)
        if before is None or before.type != Ident.LBRACKET:
            return False

        node = nodes[index]
        item = self._node(nodes, index + 1)
        end = self._node(nodes, index + 2)

        if (
            end is not None
            and node.type == Ident.RANGELIST
            and item.type in _RANGE_ITEMS
            and end.type in _ITEM_ENDS
        ):
            node.adopt(item)
            if end.type == Ident.COMMA:
                del nodes[index + 1:index + 3]
            else:
                del nodes[index + 1]
            return True

        if item is not None and node.type in _RANGE_ITEMS and item.type == Ident.COMMA:
            nodes[index:index + 2] = [node.derive(Ident.RANGELIST).adopt(node)]
            return True
        return False