"""Primitive token-level parsers.

Every grammar bottoms out in these parsers: they are the only ones that
touch the cursor directly. Everything else is composed from them.

Examples:
    >>> symbol("add").run(["add", "sub"])
    Ok(value='add')
    >>> symbol("add").run(["sub"])
    UnexpectedToken(expected='add', actual='sub', position=0)
    >>> symbol("add").run([])
    UnexpectedEndOfInput(expected='add', position=0)
"""

from collections.abc import Callable
from typing import Any

from monadparse.cursor import Cursor, ParseResult
from monadparse.parser.core import Parser
from monadparse.result import Ok, Result, UnexpectedEndOfInput, UnexpectedToken

__all__ = [
    "end_of_input",
    "lift",
    "next_token",
    "satisfy",
    "symbol",
]


def lift[T](value: T) -> Parser[T]:
    """Succeed with ``value`` without consuming input.

    The unit of the parser monad; used wherever a rule must produce a value
    out of nothing (the empty case of a repetition, a default, etc.).
    """

    def parse(cursor: Cursor[Any]) -> Result[ParseResult[T]]:
        return Ok(ParseResult(value, cursor))

    return Parser(parse, f"lift({value!r})")


def next_token() -> Parser[Any]:
    """Consume and return one token, whatever it is.

    Fails with UnexpectedEndOfInput if the cursor is exhausted.
    """

    def parse(cursor: Cursor[Any]) -> Result[ParseResult[Any]]:
        return cursor.consume()

    return Parser(parse, "next_token()")


def symbol[Token](expected: Token) -> Parser[Token]:
    """Consume one token and require it to equal ``expected``.

    Args:
        expected: Literal token to match (compared with ``==``)

    Returns:
        Parser yielding the matched token. On mismatch it fails with
        UnexpectedToken(expected, actual, position); on exhausted input with
        UnexpectedEndOfInput(expected, position).

    Note:
        The token is consumed from this parser's own cursor even on mismatch.
        That cursor is dropped with the failure, so the caller's position is
        untouched.
    """

    def parse(cursor: Cursor[Any]) -> Result[ParseResult[Token]]:
        match cursor.consume():
            case Ok(value=step) if step.value == expected:
                return Ok(step)
            case Ok(value=step):
                return UnexpectedToken(expected, step.value, cursor.pos)
            case UnexpectedEndOfInput(position=position):
                return UnexpectedEndOfInput(expected=expected, position=position)
            case failure:
                return failure

    return Parser(parse, f"symbol({expected!r})")


def satisfy[Token](predicate: Callable[[Token], bool]) -> Parser[Token]:
    """Consume one token and require ``predicate`` to accept it.

    Rejected tokens produce AssertionFailed.

    Example:
        >>> identifier = satisfy(str.isidentifier)
        >>> identifier.run(["x1"])
        Ok(value='x1')
    """
    return next_token().filter(predicate)


def end_of_input() -> Parser[None]:
    """Succeed with None only if every token has been consumed.

    Fails with UnexpectedToken(None, leftover, position, trailing=True)
    otherwise.
    """

    def parse(cursor: Cursor[Any]) -> Result[ParseResult[None]]:
        if cursor.is_eof:
            return Ok(ParseResult(None, cursor))
        return UnexpectedToken(None, cursor.current, cursor.pos, trailing=True)

    return Parser(parse, "end_of_input()")
