"""Operator definitions and splitting of operator runs into operators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

UNKNOWN_OPERATOR = "Unknown operator"
AMBIGUOUS_EXPRESSION = "Ambiguous expression"


@dataclass(frozen=True, order=True)
class Operator:
    """An operator symbol and the value it stands for.

    Operators compare and hash by symbol only.
    """

    symbol: str
    value: int = field(default=0, compare=False)


class OperatorError(ValueError):
    """A run of operator characters could not be split into operators.

    ``offset`` is the position in the run where splitting failed.
    """

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset


class OperatorTable:
    """The set of operators a script language knows."""

    def __init__(self, operators: Iterable[Operator]) -> None:
        self._by_symbol: Dict[str, Operator] = {}
        for operator in operators:
            self._by_symbol.setdefault(operator.symbol, operator)

    def __len__(self) -> int:
        return len(self._by_symbol)

    def __iter__(self) -> Iterator[Operator]:
        return iter(sorted(self._by_symbol.values()))

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._by_symbol

    def lookup(self, symbol: str) -> Optional[Operator]:
        """The operator written ``symbol``, or None."""
        return self._by_symbol.get(symbol)

    def _match_at(self, text: str, start: int) -> Optional[Operator]:
        """Grow a match from ``start`` for as long as each prefix is an operator."""
        found: Optional[Operator] = None
        stop = start + 1
        while stop <= len(text):
            candidate = self._by_symbol.get(text[start:stop])
            if candidate is None:
                break
            found = candidate
            stop += 1
        return found

    def split(self, text: str) -> List[Tuple[Operator, int]]:
        """Split a run of operator characters into operators.

        Returns each operator with its offset in ``text``. Raises
        OperatorError when some part of the run is not an operator:
        "Unknown operator" at the start of the run, "Ambiguous expression"
        further in.
        """
        result: List[Tuple[Operator, int]] = []
        offset = 0
        while offset < len(text):
            operator = self._match_at(text, offset)
            if operator is None:
                message = AMBIGUOUS_EXPRESSION if offset > 0 else UNKNOWN_OPERATOR
                raise OperatorError(message, offset)
            result.append((operator, offset))
            offset += len(operator.symbol)
        return result