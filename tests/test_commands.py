import pytest

from zinglang.rules.commands import (
    ReturnStatement,
    RunStatement,
    StopStatement,
    UntilStatement,
    WaitStatement,
)
from zinglang.tokens import Ident, Keyword, Phrase


def ph(kind):
    return Phrase(type=kind)


def kw(keyword, line=0, column=0):
    return Phrase(type=Ident.KEYWORD, meta=keyword, line=line, column=column)


@pytest.mark.parametrize(
    "rule, keyword, result_type",
    [
        (ReturnStatement(), Keyword.RETURN, Ident.RETURN_STATEMENT),
        (RunStatement(), Keyword.RUN, Ident.RUN_STATEMENT),
        (StopStatement(), Keyword.STOP, Ident.STOP_STATEMENT),
        (WaitStatement(), Keyword.WAIT, Ident.WAIT_STATEMENT),
    ],
)
def test_keyword_expression_statement(rule, keyword, result_type):
    head = kw(keyword, line=3, column=8)
    expr = ph(Ident.BOOLEXPR)
    tail = ph(Ident.IDENTIFIER)
    nodes = [head, expr, ph(Ident.SEMICOLON), tail]
    assert rule.apply(nodes, 0, []) is True
    assert len(nodes) == 2
    result = nodes[0]
    assert result.type == result_type
    assert result.children == [expr]
    assert expr.parent is result
    assert (result.line, result.column) == (3, 8)
    assert nodes[1] is tail


@pytest.mark.parametrize(
    "rule, keyword",
    [
        (RunStatement(), Keyword.RUN),
        (StopStatement(), Keyword.STOP),
        (WaitStatement(), Keyword.WAIT),
        (ReturnStatement(), Keyword.RETURN),
    ],
)
def test_missing_semicolon_is_rejected(rule, keyword):
    nodes = [kw(keyword), ph(Ident.BOOLEXPR), ph(Ident.COMMA)]
    assert rule.apply(nodes, 0, []) is False
    assert [n.type for n in nodes] == [Ident.KEYWORD, Ident.BOOLEXPR, Ident.COMMA]


@pytest.mark.parametrize("rule", [RunStatement(), StopStatement(), WaitStatement()])
def test_bare_keyword_needs_expression(rule):
    nodes = [kw(rule.keyword), ph(Ident.SEMICOLON)]
    assert rule.apply(nodes, 0, []) is False
    assert len(nodes) == 2


def test_wrong_keyword_is_rejected():
    nodes = [kw(Keyword.STOP), ph(Ident.BOOLEXPR), ph(Ident.SEMICOLON)]
    assert RunStatement().apply(nodes, 0, []) is False
    assert nodes[0].meta == Keyword.STOP


def test_bare_return():
    head = kw(Keyword.RETURN, line=2)
    nodes = [head, ph(Ident.SEMICOLON)]
    assert ReturnStatement().apply(nodes, 0, []) is True
    assert len(nodes) == 1
    assert nodes[0].type == Ident.RETURN_STATEMENT
    assert nodes[0].children == []
    assert nodes[0].line == 2


def test_return_at_end_of_input():
    nodes = [kw(Keyword.RETURN)]
    assert ReturnStatement().apply(nodes, 0, []) is False
    assert nodes[0].type == Ident.KEYWORD


def test_wait_until():
    wait = kw(Keyword.WAIT, line=9, column=1)
    expr = ph(Ident.BOOLEXPR)
    nodes = [wait, kw(Keyword.UNTIL), expr, ph(Ident.SEMICOLON)]
    assert UntilStatement().apply(nodes, 0, []) is True
    assert len(nodes) == 1
    result = nodes[0]
    assert result.type == Ident.UNTIL_STATEMENT
    assert result.children == [expr]
    assert expr.parent is result
    assert (result.line, result.column) == (9, 1)


def test_wait_until_is_not_a_plain_wait():
    nodes = [kw(Keyword.WAIT), kw(Keyword.UNTIL), ph(Ident.BOOLEXPR), ph(Ident.SEMICOLON)]
    assert WaitStatement().apply(nodes, 0, []) is False
    assert len(nodes) == 4


def test_until_needs_wait():
    nodes = [kw(Keyword.RUN), kw(Keyword.UNTIL), ph(Ident.BOOLEXPR), ph(Ident.SEMICOLON)]
    assert UntilStatement().apply(nodes, 0, []) is False
    assert len(nodes) == 4


def test_until_too_short():
    nodes = [kw(Keyword.WAIT), kw(Keyword.UNTIL), ph(Ident.BOOLEXPR)]
    assert UntilStatement().apply(nodes, 0, []) is False
    assert len(nodes) == 3


def test_rule_applies_at_inner_index():
    first = ph(Ident.STATEMENT)
    nodes = [first, kw(Keyword.RUN), ph(Ident.BOOLEXPR), ph(Ident.SEMICOLON)]
    assert RunStatement().apply(nodes, 1, []) is True
    assert nodes[0] is first
    assert nodes[1].type == Ident.RUN_STATEMENT
    assert len(nodes) == 2