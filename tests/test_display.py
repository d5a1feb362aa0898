from zinglang.display import format_tree, type_name
from zinglang.tokens import Ident, Keyword, Phrase


def test_type_names_match_source_table():
    assert type_name(Ident.NONE) == "none"
    assert type_name(Ident.IDENTIFIER) == "id"
    assert type_name(Ident.PROGRAM) == "program"
    assert type_name(Ident.FUNCCALL_BUILTIN) == "funccall_builtin"


def test_type_name_for_every_ident_is_distinct():
    names = {type_name(member.value) for member in Ident}
    assert len(names) == len({member.value for member in Ident})


def test_unknown_type_gives_number():
    assert type_name(500) == "500"


def test_format_none_is_empty():
    assert format_tree(None) == ""


def test_format_identifier_leaf():
    node = Phrase(type=Ident.IDENTIFIER, meta="x")
    assert format_tree(node) == ":id : {x} [none]\n"


def test_format_literal_leaf():
    node = Phrase(type=Ident.LITERAL, value=5)
    assert format_tree(node) == ":#const<5> [none]\n"


def test_format_nested_tree_indents_children():
    child = Phrase(type=Ident.IDENTIFIER, meta="name")
    root = Phrase(type=Ident.STATEMENT).adopt(child)
    assert format_tree(root) == ":statement ID=0 [none]\n:    id : {name} [none]\n"


def test_format_shows_original_type():
    node = Phrase(type=Ident.VARIABLE)
    node.set_super_type(Ident.OPERAND)
    assert format_tree(node).endswith("[variable]\n")


def test_keyword_shows_plain_name():
    node = Phrase(type=Ident.KEYWORD, meta=Keyword.LOOP)
    assert format_tree(node) == ":keyword [none]\n"


def test_line_count_matches_node_count():
    leaves = [Phrase(type=Ident.IDENTIFIER, meta=str(n)) for n in range(3)]
    inner = Phrase(type=Ident.STATEMENTLIST).adopt(*leaves)
    root = Phrase(type=Ident.PROGRAM).adopt(inner)
    lines = format_tree(root).splitlines()
    assert len(lines) == 5
    assert all(line.startswith(":") for line in lines)