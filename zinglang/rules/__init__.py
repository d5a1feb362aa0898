"""Syntax rules that fold phrases into operands, expressions, ranges, statements and declarations."""