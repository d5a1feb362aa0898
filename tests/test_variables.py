import pytest

from zinglang.rules.variables import ListRule, Variable, VarIndex
from zinglang.tokens import Ident, Keyword, Phrase


def _p(kind, meta=None, orig_type=Ident.NONE, line=0):
    return Phrase(type=kind, meta=meta, orig_type=orig_type, line=line, file="v.zs")


def _kw(value):
    return _p(Ident.KEYWORD, meta=value)


# Variable

def test_variable_wraps_identifier():
    name = _p(Ident.IDENTIFIER, meta="x", line=4)
    nodes = [name, _p(Ident.SEMICOLON)]
    assert Variable().apply(nodes, 0, []) is True
    node = nodes[0]
    assert node.type == Ident.VARIABLE
    assert node.children == [name]
    assert name.parent is node
    assert node.meta is None
    assert node.line == name.line
    assert len(nodes) == 2


@pytest.mark.parametrize("before", [_p(Ident.IDENTIFIER, meta="T"), _kw(Keyword.VAR)])
def test_variable_not_after_declarator(before):
    name = _p(Ident.IDENTIFIER, meta="x")
    nodes = [before, name]
    assert Variable().apply(nodes, 1, []) is False
    assert nodes[1] is name


@pytest.mark.parametrize("kind", [Ident.LPARENTH, Ident.IDENTIFIER, Ident.LBRACE])
def test_variable_not_before_call_or_block(kind):
    nodes = [_p(Ident.IDENTIFIER, meta="x"), _p(kind)]
    assert Variable().apply(nodes, 0, []) is False
    assert nodes[0].type == Ident.IDENTIFIER


def test_variable_not_before_dimension():
    nodes = [_p(Ident.IDENTIFIER, meta="x"), _p(Ident.PERIOD), _kw(Keyword.DIM)]
    assert Variable().apply(nodes, 0, []) is False
    assert nodes[0].type == Ident.IDENTIFIER


def test_variable_before_member_access():
    nodes = [_p(Ident.IDENTIFIER, meta="x"), _p(Ident.PERIOD), _p(Ident.IDENTIFIER, meta="y")]
    assert Variable().apply(nodes, 0, []) is True
    assert nodes[0].type == Ident.VARIABLE


# VarIndex

def test_varindex_groups_expression_and_index():
    expr, idx = _p(Ident.PARENTHEXPR), _p(Ident.INDEX)
    nodes = [expr, idx]
    assert VarIndex().apply(nodes, 0, []) is True
    assert len(nodes) == 1
    node = nodes[0]
    assert node.type == Ident.VARINDEX
    assert node.children == [expr, idx]
    assert node.meta is None


def test_varindex_marks_sub_index_of_range():
    inner = _p(Ident.PARENTHEXPR, orig_type=Ident.VARINDEX)
    inner.adopt(_p(Ident.PARENTHEXPR), _p(Ident.INDEX, orig_type=Ident.RANGE))
    nodes = [inner, _p(Ident.INDEX)]
    assert VarIndex().apply(nodes, 0, []) is True
    assert nodes[0].meta == 1


def test_varindex_plain_index_is_not_sub_index():
    inner = _p(Ident.PARENTHEXPR, orig_type=Ident.VARINDEX)
    inner.adopt(_p(Ident.PARENTHEXPR), _p(Ident.INDEX, orig_type=Ident.BOOLEXPR))
    nodes = [inner, _p(Ident.INDEX)]
    assert VarIndex().apply(nodes, 0, []) is True
    assert nodes[0].meta is None


def test_varindex_needs_index():
    nodes = [_p(Ident.PARENTHEXPR), _p(Ident.SEMICOLON)]
    assert VarIndex().apply(nodes, 0, []) is False
    assert len(nodes) == 2


# ListRule

def test_empty_list():
    nodes = [_p(Ident.LBRACE, line=2), _p(Ident.RBRACE)]
    assert ListRule().apply(nodes, 0, []) is True
    assert len(nodes) == 1
    assert nodes[0].type == Ident.LIST
    assert nodes[0].children == []
    assert nodes[0].line == 2


def test_single_element_list():
    item = _p(Ident.BOOLEXPR)
    nodes = [_p(Ident.LBRACE), item, _p(Ident.RBRACE)]
    assert ListRule().apply(nodes, 0, []) is True
    assert len(nodes) == 1
    assert nodes[0].type == Ident.LIST
    assert nodes[0].children == [item]
    assert item.parent is nodes[0]


def test_expression_list_becomes_list():
    items = _p(Ident.EXPRLIST)
    nodes = [_p(Ident.LBRACE), items, _p(Ident.RBRACE)]
    assert ListRule().apply(nodes, 0, []) is True
    assert nodes == [items]
    assert items.type == Ident.LIST


@pytest.mark.parametrize(
    "before", [_p(Ident.IDENTIFIER), _p(Ident.RPARENTH), _kw(Keyword.IF), _kw(Keyword.WHILE)]
)
def test_no_list_where_block_starts(before):
    nodes = [before, _p(Ident.LBRACE), _p(Ident.RBRACE)]
    assert ListRule().apply(nodes, 1, []) is False
    assert len(nodes) == 3


def test_list_after_other_keyword():
    nodes = [_kw(Keyword.RUN), _p(Ident.LBRACE), _p(Ident.RBRACE)]
    assert ListRule().apply(nodes, 1, []) is True
    assert nodes[1].type == Ident.LIST


def test_list_rejects_other_contents():
    nodes = [_p(Ident.LBRACE), _p(Ident.IDENTIFIER), _p(Ident.RBRACE)]
    assert ListRule().apply(nodes, 0, []) is False
    assert [node.type for node in nodes] == [Ident.LBRACE, Ident.IDENTIFIER, Ident.RBRACE]