"""Numeric literal parsing and escape-sequence recognition."""

from __future__ import annotations

from fractions import Fraction
from typing import Iterable, Mapping, Optional, Tuple, Union

EXCESS_DECIMALS = "Number contains excess decimals"
ILLEGAL_CHARACTERS = "Number contains illegal characters"

_PREFIXES = {"0b": 2, "0c": 8, "0o": 8, "0h": 16, "0x": 16}

Number = Union[int, float, complex]


class NumberFormatError(ValueError):
    """A numeric literal is malformed; ``problems`` lists each fault found."""

    def __init__(self, problems: Iterable[str]) -> None:
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


def _digit(char: str, base: int) -> Optional[int]:
    if "0" <= char <= "9":
        value = ord(char) - ord("0")
    elif "a" <= char.lower() <= "z":
        value = ord(char.lower()) - ord("a") + 10
    else:
        return None
    return value if value < base else None


def _digits_value(digits: str, base: int) -> int:
    return int(digits, base) if digits else 0


def parse_number(text: str) -> Number:
    """Convert a numeric literal to its value.

    Accepts the prefixes 0b (binary), 0c/0o (octal) and 0h/0x (hexadecimal),
    one optional decimal point, and a trailing ``i`` for an imaginary number.
    Raises NumberFormatError listing every fault in the literal.
    """
    symbol = text
    is_complex = symbol.endswith("i")
    if is_complex:
        symbol = symbol[:-1]

    base = _PREFIXES.get(symbol[:2], 10)
    if base != 10:
        symbol = symbol[2:]

    problems = []
    past_decimal = False
    for char in symbol:
        if char == ".":
            if past_decimal:
                problems.append(EXCESS_DECIMALS)
            past_decimal = True
        elif _digit(char, base) is None:
            problems.append(ILLEGAL_CHARACTERS)
    if problems:
        raise NumberFormatError(problems)

    whole, point, fraction = symbol.partition(".")
    value: Union[int, float] = _digits_value(whole, base)
    if point:
        value = float(value + Fraction(_digits_value(fraction, base), base ** len(fraction)))
    return complex(0, value) if is_complex else value


def read_escape(text: str, index: int, escapes: Mapping[str, str]) -> Optional[Tuple[str, int]]:
    """Find an escape sequence of ``escapes`` starting at ``index``.

    Returns the replacement text and the length of the sequence matched,
    preferring the longest match, or None when no sequence starts there.
    """
    best: Optional[Tuple[str, str]] = None
    for sequence, replacement in escapes.items():
        if sequence and text.startswith(sequence, index):
            if best is None or len(sequence) > len(best[0]):
                best = (sequence, replacement)
    if best is None:
        return None
    return best[1], len(best[0])