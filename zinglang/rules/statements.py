"""Syntax rules for statements, statement lists and labels."""

from __future__ import annotations

from typing import List, Optional

from ..tokens import CompileError, Ident, Keyword, Phrase, SyntaxRule

_TERMINATED = (Ident.BOOLEXPR, Ident.COMMAND)

_COMPLETE_STATEMENTS = frozenset(
    {
        Ident.FOR_STATEMENT,
        Ident.FOREACH_STATEMENT,
        Ident.LOOP_STATEMENT,
        Ident.WHILE_PRE_STMT,
        Ident.WHILE_POST_STMT,
        Ident.RUN_STATEMENT,
        Ident.STOP_STATEMENT,
        Ident.RETURN_STATEMENT,
        Ident.WAIT_STATEMENT,
        Ident.UNTIL_STATEMENT,
        Ident.VARIABLE_DECL,
        Ident.TYPEVAR_DECL,
        Ident.LABEL_STATEMENT,
        Ident.GOTO_STATEMENT,
        Ident.GOSUB_STATEMENT,
    }
)


def _is_type(node: Optional[Phrase], *types: int) -> bool:
    return node is not None and node.type in types


class Statement(SyntaxRule):
    """Drops stray semicolons and promotes terminated phrases to statements."""

    def _drops_semicolon(self, before: Optional[Phrase]) -> bool:
        return (
            before is None
            or Ident.STATEMENTLIST <= before.type <= Ident.FUNCTION_DECL
            or before.type in (Ident.SEMICOLON, Ident.LBRACE)
        )

    def _starts_statement(self, nodes: List[Phrase], index: int) -> bool:
        before = self._node(nodes, index - 1)
        if before is None:
            return False
        if before.type == Ident.LBRACE:
            type_keyword = self._node(nodes, index - 3)
            opens_type_body = (
                type_keyword is not None
                and nodes[index - 2].type == Ident.IDENTIFIER
                and type_keyword.is_keyword(Keyword.TYPE)
            )
            return not opens_type_body
        return before.type in (Ident.RPARENTH, Ident.STATEMENT, Ident.STATEMENTLIST)

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        node = nodes[index]
        if node.type == Ident.SEMICOLON and self._drops_semicolon(self._node(nodes, index - 1)):
            del nodes[index]
            return True

        if not self._starts_statement(nodes, index):
            return False

        after = self._node(nodes, index + 1)
        if node.type in _TERMINATED and _is_type(after, Ident.SEMICOLON):
            node.set_super_type(Ident.STATEMENT)
            del nodes[index + 1]
            return True

        if node.type == Ident.IF_STATEMENT:
            complete = not (after is not None and after.is_keyword(Keyword.ELSE))
        else:
            complete = node.type in _COMPLETE_STATEMENTS
        if complete:
            node.set_super_type(Ident.STATEMENT)
        return complete


class StatementList(SyntaxRule):
    """statement statement, or statementlist statement, gathered into one list."""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        after = self._node(nodes, index + 1)
        if not _is_type(after, Ident.STATEMENT):
            return False

        node = nodes[index]
        if node.type == Ident.STATEMENT:
            statements = Phrase(
                type=Ident.STATEMENTLIST,
                line=node.line,
                column=node.column,
                file=node.file,
            ).adopt(node, after)
            nodes[index:index + 2] = [statements]
            return True
        if node.type == Ident.STATEMENTLIST:
            node.adopt(after)
            del nodes[index + 1]
            return True
        return False


class LabelStatement(SyntaxRule):
    """label IDENTIFIER ;"""

    def apply(self, nodes: List[Phrase], index: int, errors: List[CompileError]) -> bool:
        if self._node(nodes, index + 2) is None:
            return False
        keyword, name, semicolon = nodes[index:index + 3]
        if not (
            keyword.is_keyword(Keyword.LABEL)
            and name.type == Ident.IDENTIFIER
            and semicolon.type == Ident.SEMICOLON
        ):
            return False
        nodes[index:index + 3] = [keyword.derive(Ident.LABEL_STATEMENT).adopt(name)]
        return True