"""Readable rendering of syntax trees, for inspection."""

from __future__ import annotations

from typing import Iterator, Optional

from .tokens import Ident, Phrase

_TYPE_NAMES = (
    "none",
    "(", ")",
    "{", "}",
    "[", "]",
    ",", ";", ".",
    "#str", "#num", "#compl", "#const",
    "id",
    "keyword",
    "operator",
    "unknown",
    "identifierlist",
    "command",
    "statementlist",
    "statement",
    "if_statement",
    "for_statement",
    "foreach_statement",
    "loop_statement",
    "while_pre_stmt",
    "while_post_stmt",
    "run_statement",
    "stop_statement",
    "return_statement",
    "wait_statement",
    "until_statement",
    "label_statement",
    "goto_statement",
    "gosub_statement",
    "subroutine_decl",
    "variable_decl",
    "typevar_decl",
    "int_decllist",
    "typedecl",
    "externaldecl",
    "shareddecl",
    "func_prototype",
    "function_decl",
    "range",
    "rangelist",
    "index",
    "indexlist",
    "exprlist",
    "list",
    "funccall",
    "type_funccall",
    "varindex",
    "typevar",
    "variable",
    "operand",
    "parenthexpr",
    "factorialexpr",
    "add1expr",
    "negatexpr",
    "powerexpr",
    "multiplyexpr",
    "addexpr",
    "boolexpr",
    "assignexpr",
    "dimensionexpr",
    "sizeofexpr",
    "formalvardecl",
    "formaltypedecl",
    "formaldecllist",
    "program",
    "funccall_builtin",
)


def type_name(type_id: int) -> str:
    """The display name of a token or phrase type; unknown types give their number."""
    if 0 <= type_id < len(_TYPE_NAMES):
        return _TYPE_NAMES[type_id]
    return str(int(type_id))


def _text(value: object) -> str:
    return "" if value is None else str(value)


def _describe(node: Phrase) -> str:
    if node.type in (Ident.STRING_LITERAL, Ident.NUMERIC_LITERAL):
        text = f"<{_text(node.value)}>"
    elif node.type == Ident.COMPLEX_LITERAL:
        text = f"<{_text(node.value)}i>"
    elif node.type == Ident.LITERAL:
        text = f"#const<{_text(node.value)}>"
    elif node.type == Ident.UNKNOWN:
        text = f"#unkn<{_text(node.meta)}>"
    elif node.type == Ident.IDENTIFIER:
        text = f"{type_name(node.type)} : {{{_text(node.meta)}}}"
    else:
        text = type_name(node.type)

    if node.type >= Ident.ID_COUNT:
        meta = node.meta if node.meta is not None else 0
        text += f" ID={int(meta) if isinstance(meta, int) else meta}"
    return f"{text} [{type_name(node.orig_type)}]"


def _lines(node: Phrase, level: int) -> Iterator[str]:
    yield ":" + "    " * level + _describe(node)
    for child in node.children:
        yield from _lines(child, level + 1)


def format_tree(node: Optional[Phrase]) -> str:
    """Render ``node`` and its descendants, one line per phrase, indented by depth."""
    if node is None:
        return ""
    return "".join(line + "\n" for line in _lines(node, 0))