# zinglang

zinglang turns ZScript source text into a syntax tree in two stages.

1. **Scanning.** `zinglang.scanner.Scanner` splits text into `Token`s. It
   recognises identifiers, keywords, numeric and string literals, operators
   and delimiters (`( ) [ ] { } , ; .`). It skips comments and checks that
   brackets pair up. Identifiers that match a keyword become `KEYWORD` tokens.
   Identifiers that match an operator symbol (such as `sizeof`) become
   `OPERATOR` tokens. String and numeric literals become `LITERAL` tokens that
   carry their value.
2. **Lexing.** `zinglang.lexer.Lexer` applies a list of syntax rules to the
   flat phrase list. At each position the first rule that matches wins. The
   pass repeats until a whole pass changes nothing, and then a program rule
   is applied in the same way. The result is a single `Phrase` tree.

## Installation

```
pip install .
```

## Scanning

The scanner is configured with five things:

- a keyword mapping;
- the operators;
- comment markers;
- escape sequences for strings;
- a file name used in error positions.

The `Keyword` and `Op` enums in `zinglang.tokens` provide the values the
syntax rules expect.

```python
from zinglang.operators import Operator
from zinglang.scanner import CommentRules, Scanner
from zinglang.tokens import Keyword, Op

scanner = Scanner(
    keywords={"var": Keyword.VAR, "return": Keyword.RETURN},
    operators=[Operator("=", Op.ASSIGN), Operator("+", Op.ADD), Operator("+=", Op.ADD_ASSIGN)],
    comment_rules=CommentRules(single_line=("//",), multi_line=(("/*", "*/"),)),
    escapes={"\\n": "\n", "\\\\": "\\"},
    file="example.zs",
)
tokens = scanner.scan("var x = 0x1F; // note")
# KEYWORD(meta=Keyword.VAR), IDENTIFIER(meta="x"), OPERATOR(meta=Op.ASSIGN),
# LITERAL(value=31), SEMICOLON
```

Scanner details:

- Numbers may be written in binary (`0b`), octal (`0c`, `0o`), hexadecimal
  (`0h`, `0x`) or decimal.
- A number may contain one decimal point.
- A trailing `i` makes the number imaginary.
- Runs of operator characters are split into operators with a greedy
  longest-prefix match (see `OperatorTable.split`).
- If a `symbol_table` set is given, the scanner adds every plain identifier
  to it.

Scanning always runs to the end of the text. Problems are collected in
`scanner.errors` as `CompileError` objects, which print as
`file:line:column: message` with 0-based lines and columns. `scanner.good()`
returns `True` when the last scan found no problems.

Helpers:

- `zinglang.literals.parse_number` parses numeric literals.
- `zinglang.literals.read_escape` finds escape sequences.
- `zinglang.delimiters.DelimiterTracker` checks that brackets pair up.

## Lexing

```python
from zinglang.display import format_tree
from zinglang.lexer import Lexer
from zinglang.rules.declarations import ProgramRule, VariableDecl

lexer = Lexer(rules=[VariableDecl()], program_rule=ProgramRule())
tree = lexer.lex(scanner.scan("var x;"))
print(format_tree(tree))
# :program ID=0 [none]
# :    variable_decl ID=0 [none]
# :        id : {x} [none]
```

`lex` returns `None` in either of these cases:

- a rule reported an error;
- the tokens did not reduce to exactly one phrase.

The leftover phrases are then kept in `lexer.nodes`, and the errors in
`lexer.errors`. `lexer.good()` returns `True` when no errors were reported.

### Syntax rules

Every rule subclasses `zinglang.tokens.SyntaxRule` and implements
`apply(nodes, index, errors)`. The method rewrites the phrase list in place
and returns `True` when it changed something.

| Module | Rules |
| --- | --- |
| `zinglang.rules.operands` | `ParenthExpr`, `Operand`, `SizeofExpr`, `TypeVar`, `TypeFuncCall` |
| `zinglang.rules.arithmetic` | `NegateExpr`, `PowerExpr`, `MultiplyExpr` |
| `zinglang.rules.variables` | `Variable`, `VarIndex`, `ListRule` |
| `zinglang.rules.ranges` | `RangeRule`, `RangeList` |
| `zinglang.rules.statements` | `Statement`, `StatementList`, `LabelStatement` |
| `zinglang.rules.commands` | `ReturnStatement`, `RunStatement`, `StopStatement`, `WaitStatement`, `UntilStatement` |
| `zinglang.rules.declarations` | `SharedDecl`, `VariableDecl`, `TypeDecl`, `SubroutineDecl`, `ProgramRule` |

`ProgramRule` is meant to be used as the lexer's program rule. It records a
single "Syntax error" for the first top-level phrase it cannot take in.

`zinglang.display.format_tree` renders a tree with one line per phrase.
`type_name` gives the display name of a phrase type.

## What it does not do

- **Incomplete grammar.** The package has no rules that build these phrases:
  - increment expressions;
  - addition and boolean expressions;
  - assignments;
  - function calls;
  - index and expression lists;
  - `if`, `for`, `foreach`, `loop` and `while` statements;
  - `goto` and `gosub`;
  - function and external declarations.

  Rules that expect such phrases (for example `BOOLEXPR` or `ADD1EXPR`) only
  fire when something else produces them. Out of the box, the package cannot
  reduce full ZScript programs.
- **No default configuration.** There is no built-in keyword, operator or
  escape table. The caller supplies them.
- **No backend.** There is no command-line tool, code generation or
  execution. The package stops at the syntax tree.

## Development

```
pip install -e .[test]
pytest
```