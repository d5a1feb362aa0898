"""Syntax rules for the return, run, stop, wait and wait-until statements."""

from __future__ import annotations

from typing import List

from ..tokens import CompileError, Ident, Keyword, Phrase, SyntaxRule


class _KeywordExpression(SyntaxRule):
    """<keyword> boolexpr ; grouped under a new phrase holding the expression."""

    keyword: int = 0
    result_type: int = Ident.NONE

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        if self._node(nodes, index + 2) is None:
            return False
        keyword, expression, semicolon = nodes[index:index + 3]
        if not (
            keyword.is_keyword(self.keyword)
            and expression.type == Ident.BOOLEXPR
            and semicolon.type == Ident.SEMICOLON
        ):
            return False
        nodes[index:index + 3] = [keyword.derive(self.result_type).adopt(expression)]
        return True


class ReturnStatement(_KeywordExpression):
    """return boolexpr ; or a bare return ;"""

    keyword = Keyword.RETURN
    result_type = Ident.RETURN_STATEMENT

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        if super().apply(nodes, index, errors):
            return True
        semicolon = self._node(nodes, index + 1)
        keyword = nodes[index]
        if (
            semicolon is not None
            and keyword.is_keyword(Keyword.RETURN)
            and semicolon.type == Ident.SEMICOLON
        ):
            nodes[index:index + 2] = [keyword.derive(Ident.RETURN_STATEMENT)]
            return True
        return False


class RunStatement(_KeywordExpression):
    """run boolexpr ;"""

    keyword = Keyword.RUN
    result_type = Ident.RUN_STATEMENT

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        return super().apply(nodes, index, errors)


class StopStatement(_KeywordExpression):
    """stop boolexpr ;"""

    keyword = Keyword.STOP
    result_type = Ident.STOP_STATEMENT

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        return super().apply(nodes, index, errors)


class WaitStatement(_KeywordExpression):
    """wait boolexpr ;"""

    keyword = Keyword.WAIT
    result_type = Ident.WAIT_STATEMENT

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        return super().apply(nodes, index, errors)


class UntilStatement(SyntaxRule):
    """wait until boolexpr ;"""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        if self._node(nodes, index + 3) is None:
            return False
        wait, until, expression, semicolon = nodes[index:index + 4]
        if not (
            wait.is_keyword(Keyword.WAIT)
            and until.is_keyword(Keyword.UNTIL)
            and expression.type == Ident.BOOLEXPR
            and semicolon.type == Ident.SEMICOLON
        ):
            return False
        nodes[index:index + 4] = [wait.derive(Ident.UNTIL_STATEMENT).adopt(expression)]
        return True