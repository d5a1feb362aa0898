"""Scanner, rule-driven phrase lexer and syntax rules for the ZScript scripting language."""

__version__ = "0.1.0"