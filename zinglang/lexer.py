"""Groups scanned tokens into a syntax tree by repeated rule application."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .tokens import CompileError, Ident, Phrase, SyntaxRule, Token


def _restore_types(root: Phrase) -> None:
    """Give every descendant of ``root`` back the type it had before promotion."""
    stack = list(root.children)
    while stack:
        node = stack.pop()
        if node.orig_type != Ident.NONE:
            node.type = node.orig_type
            node.orig_type = Ident.NONE
        stack.extend(node.children)


class Lexer:
    """Reduces a token list to a program tree.

    General rules are applied over the phrase list, first match wins at each
    position, until a full pass changes nothing; the program rule is then
    applied the same way. Errors reported by rules collect in ``errors``.
    """

    def __init__(self, rules: Iterable[SyntaxRule], program_rule: SyntaxRule) -> None:
        self.rules: List[SyntaxRule] = list(rules)
        self.program_rule = program_rule
        self.nodes: List[Phrase] = []
        self.errors: List[CompileError] = []

    def _reduce(self, rules: Sequence[SyntaxRule]) -> None:
        changed = True
        while changed:
            changed = False
            index = 0
            while index < len(self.nodes):
                if any(rule.apply(self.nodes, index, self.errors) for rule in rules):
                    changed = True
                else:
                    index += 1

    def lex(self, tokens: Iterable[Token]) -> Optional[Phrase]:
        """Build the tree for ``tokens``.

        Returns the single root phrase, or None when errors were reported or
        the tokens did not reduce to exactly one phrase; the leftover phrases
        then remain in ``nodes``.
        """
        self.errors = []
        self.nodes = [Phrase.from_token(token) for token in tokens]

        self._reduce(self.rules)
        self._reduce([self.program_rule])

        if self.nodes:
            _restore_types(self.nodes[0])

        if self.errors or len(self.nodes) != 1:
            return None
        root = self.nodes[0]
        self.nodes = []
        return root

    def good(self) -> bool:
        """True when the last run reported no errors."""
        return not self.errors