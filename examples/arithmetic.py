"""Arithmetic Expression Example - A Recursive Grammar on monadparse.

Demonstrates:

1. Tokenizing a string into a token list (the engine never sees characters)
2. A custom primitive parser built directly on Cursor.consume()
3. Recursive rules with lazy()
4. Alternation with the | operator
5. Filtering tokens with Parser.filter()

Grammar (fully parenthesised binary operators):

    expr := number | variable | "(" expr op expr ")"
    op   := "+" | "-" | "*"

The parse tree is built from plain tuples:
    ("const", 5.0)  ("var", "x")  ("+", lhs, rhs)

Usage:
    python examples/arithmetic.py "(7*((x+5)*(x+5)))"

Python 3.13+.
"""

from __future__ import annotations

import sys
from typing import Any

from monadparse import (
    Cursor,
    Ok,
    Parser,
    ParseResult,
    Result,
    UnexpectedToken,
    either,
    lazy,
    next_token,
    symbol,
)

OPERATORS = ("+", "-", "*")
DELIMITERS = ("(", ")", *OPERATORS)

type Expr = tuple[Any, ...]


def tokenize(source: str) -> list[str]:
    """Split on whitespace, keeping every delimiter as its own token."""
    tokens: list[str] = []
    for word in source.split():
        start = 0
        for index, char in enumerate(word):
            if char in DELIMITERS:
                if index > start:
                    tokens.append(word[start:index])
                tokens.append(char)
                start = index + 1
        if start < len(word):
            tokens.append(word[start:])
    return tokens


def number() -> Parser[float]:
    """Consume one token and read it as a float."""

    def parse(cursor: Cursor[Any]) -> Result[ParseResult[float]]:
        match cursor.consume():
            case Ok(value=ParseResult(value=token, cursor=rest)):
                try:
                    return Ok(ParseResult(float(token), rest))
                except ValueError:
                    return UnexpectedToken("number", token, cursor.pos)
            case failure:
                return failure

    return Parser(parse, "number()")


def binary(op: str) -> Parser[Expr]:
    """Parse "(" expr op expr ")"."""
    return (
        symbol("(")
        .then(lazy(expression))
        .bind(lambda lhs: symbol(op).then(lazy(expression)), lambda lhs, rhs: (op, lhs, rhs))
        .skip(symbol(")"))
    )


def expression() -> Parser[Expr]:
    """Top-level rule; refers to itself through lazy()."""
    const = number().map(lambda value: ("const", value))
    variable = (
        next_token()
        .filter(lambda token: token not in DELIMITERS)
        .map(lambda name: ("var", name))
    )
    return either(const, variable, *(binary(op) for op in OPERATORS))


def show(expr: Expr) -> str:
    """Render a parse tree back to infix notation."""
    match expr:
        case ("const", value):
            return f"{value:g}"
        case ("var", name):
            return str(name)
        case (op, lhs, rhs):
            return f"({show(lhs)} {op} {show(rhs)})"
    msg = f"Unknown expression node: {expr!r}"
    raise ValueError(msg)


def main(argv: list[str]) -> int:
    """Parse the expression given on the command line."""
    source = " ".join(argv) if argv else "(7*((x+5)*(x+5)))"
    print(f"Parsing: {source}")

    tokens = tokenize(source)
    print(f"Input was tokenized to: [{', '.join(tokens)}]")

    match expression().run(tokens, consume_all=True):
        case Ok(value=tree):
            print(f"Tree: {tree!r}")
            print(f"Parsed as: {show(tree)}")
            return 0
        case failure:
            print(f"Parse failed: {failure.diagnostic}")
            return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
