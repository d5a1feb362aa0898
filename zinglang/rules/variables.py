"""Syntax rules for variables, indexed variables and list literals."""

from __future__ import annotations

from typing import List

from ..tokens import CompileError, Ident, Keyword, Phrase, SyntaxRule

_BLOCK_KEYWORDS = tuple(Keyword(value) for value in range(Keyword.IF, Keyword.WHILE + 1))
_NOT_BEFORE_VARIABLE = (Ident.LPARENTH, Ident.IDENTIFIER, Ident.LBRACE)
_RANGE_TYPES = (Ident.RANGE, Ident.RANGELIST)


class Variable(SyntaxRule):
    """An identifier used as a variable, not a declaration, call or type name."""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        node = nodes[index]
        if node.type != Ident.IDENTIFIER:
            return False

        before = self._node(nodes, index - 1)
        after = self._node(nodes, index + 1)
        member = self._node(nodes, index + 2)

        if before is not None and (
            before.type == Ident.IDENTIFIER or before.is_keyword(Keyword.VAR)
        ):
            return False
        if after is not None and after.type in _NOT_BEFORE_VARIABLE:
            return False
        if member is not None and after.type == Ident.PERIOD and member.is_keyword(Keyword.DIM):
            return False

        nodes[index] = node.derive(Ident.VARIABLE).adopt(node)
        return True


class VarIndex(SyntaxRule):
    """parenthexpr index; marked as a sub-index when indexing a ranged index."""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        node = nodes[index]
        after = self._node(nodes, index + 1)
        if after is None or node.type != Ident.PARENTHEXPR or after.type != Ident.INDEX:
            return False

        indexed = node.derive(Ident.VARINDEX).adopt(node, after)
        if (
            node.orig_type == Ident.VARINDEX
            and len(node.children) > 1
            and node.children[1].orig_type in _RANGE_TYPES
        ):
            indexed.meta = 1
        nodes[index:index + 2] = [indexed]
        return True


class ListRule(SyntaxRule):
    """{ }, { boolexpr } or { exprlist } where a block cannot start."""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        before = self._node(nodes, index - 1)
        if before is not None and (
            before.is_keyword(*_BLOCK_KEYWORDS)
            or before.type in (Ident.IDENTIFIER, Ident.RPARENTH)
        ):
            return False

        node = nodes[index]
        if node.type != Ident.LBRACE:
            return False

        second = self._node(nodes, index + 1)
        third = self._node(nodes, index + 2)

        if second is not None and second.type == Ident.RBRACE:
            nodes[index:index + 2] = [node.derive(Ident.LIST)]
            return True

        if third is not None and third.type == Ident.RBRACE:
            if second.type == Ident.BOOLEXPR:
                nodes[index:index + 3] = [node.derive(Ident.LIST).adopt(second)]
                return True
            if second.type == Ident.EXPRLIST:
                second.type = Ident.LIST
                nodes[index:index + 3] = [second]
                return True
        return False