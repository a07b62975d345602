"""Combinator library built on :class:`~monadparse.parser.core.Parser`.

Alternation, sequencing, repetition, optionality, laziness and bracketing.
All of them rely on cursor immutability for backtracking: an attempt that
fails simply leaves its cursor behind.

Examples:
    >>> from monadparse.parser.primitives import symbol
    >>> many(symbol("add")).run(["add", "add", "sub"])
    Ok(value=['add', 'add'])
    >>> wrap("(", symbol("x"), ")").run(["(", "x", ")"])
    Ok(value='x')
    >>> maybe(symbol("ok")).run(["fail"])
    Ok(value=None)
"""

from collections.abc import Callable
from functools import reduce
from typing import Any

from monadparse.constants import DEFAULT_AT_MOST_POLICY
from monadparse.cursor import Cursor, ParseResult
from monadparse.enums import AtMostPolicy
from monadparse.parser.core import Parser
from monadparse.parser.primitives import lift, symbol
from monadparse.result import Ok, Result

__all__ = [
    "at_least",
    "at_most",
    "either",
    "lazy",
    "many",
    "maybe",
    "sequence",
    "some",
    "wrap",
]


def either[T](left: Parser[T], right: Parser[T], *more: Parser[T]) -> Parser[T]:
    """Left-biased alternation over two or more parsers.

    Each alternative is tried from the original position until one succeeds;
    if all fail, the last failure is returned.
    """
    return reduce(Parser.or_else, more, left.or_else(right))


def _append[T](values: Parser[tuple[Any, ...]], parser: Parser[T]) -> Parser[tuple[Any, ...]]:
    return values.bind(lambda _: parser, lambda collected, value: (*collected, value))


def sequence(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Run parsers one after another, collecting all values in a tuple.

    Example:
        >>> from monadparse.parser.primitives import symbol
        >>> sequence(symbol("a"), symbol("b")).run(["a", "b"])
        Ok(value=('a', 'b'))
    """
    return reduce(_append, parsers, lift(()))


def _check_count(n: int) -> None:
    if n < 0:
        msg = f"Repetition count must be >= 0, got {n}"
        raise ValueError(msg)


def at_least[T](n: int, parser: Parser[T]) -> Parser[list[T]]:
    """Greedy repetition requiring at least ``n`` matches.

    Runs ``parser`` until it fails. If fewer than ``n`` values were
    collected the last failure is returned; otherwise the values are
    returned with the cursor left by the last successful match.

    Note:
        ``parser`` must consume input whenever it succeeds, or the loop
        never terminates.

    Raises:
        ValueError: If n is negative
    """
    _check_count(n)

    def parse(cursor: Cursor[Any]) -> Result[ParseResult[list[T]]]:
        values: list[T] = []
        while True:
            match parser.parse(cursor):
                case Ok(value=step):
                    values.append(step.value)
                    cursor = step.cursor
                case failure:
                    if len(values) < n:
                        return failure
                    return Ok(ParseResult(values, cursor))

    return Parser(parse, f"at_least({n}, {parser.name})")


def at_most[T](
    n: int,
    parser: Parser[T],
    *,
    policy: AtMostPolicy | str = DEFAULT_AT_MOST_POLICY,
) -> Parser[list[T]]:
    """Greedy repetition bounded above by ``n`` matches.

    Args:
        n: Upper bound on the number of matches
        parser: Parser to repeat
        policy: AtMostPolicy.POST_HOC (default) repeats until ``parser``
            fails and then rejects the parse with that failure if more than
            ``n`` values were collected. AtMostPolicy.CAPPED stops after
            ``n`` matches and always succeeds.

    Raises:
        ValueError: If n is negative or policy is unknown
    """
    _check_count(n)
    policy = AtMostPolicy(policy)

    def parse_post_hoc(cursor: Cursor[Any]) -> Result[ParseResult[list[T]]]:
        values: list[T] = []
        while True:
            match parser.parse(cursor):
                case Ok(value=step):
                    values.append(step.value)
                    cursor = step.cursor
                case failure:
                    if len(values) > n:
                        return failure
                    return Ok(ParseResult(values, cursor))

    def parse_capped(cursor: Cursor[Any]) -> Result[ParseResult[list[T]]]:
        values: list[T] = []
        while len(values) < n:
            match parser.parse(cursor):
                case Ok(value=step):
                    values.append(step.value)
                    cursor = step.cursor
                case _:
                    break
        return Ok(ParseResult(values, cursor))

    parse = parse_capped if policy is AtMostPolicy.CAPPED else parse_post_hoc
    return Parser(parse, f"at_most({n}, {parser.name}, {policy})")


def many[T](parser: Parser[T]) -> Parser[list[T]]:
    """Zero or more matches. Never fails."""
    return at_least(0, parser)


def some[T](parser: Parser[T]) -> Parser[list[T]]:
    """One or more matches."""
    return at_least(1, parser)


def maybe[T, D](parser: Parser[T], default: D = None) -> Parser[T | D]:  # type: ignore[assignment]
    """Optional parse.

    Returns the parser's value and cursor on success. On failure succeeds
    with ``default`` at the original position, consuming nothing.
    """

    def parse(cursor: Cursor[Any]) -> Result[ParseResult[T | D]]:
        match parser.parse(cursor):
            case Ok() as success:
                return success
            case _:
                return Ok(ParseResult(default, cursor))

    return Parser(parse, f"maybe({parser.name})")


def lazy[T](factory: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until it runs.

    ``factory`` is called again on every run, which lets a rule refer to
    itself without recursing forever at definition time.

    Example:
        >>> from monadparse.parser.primitives import symbol
        >>> def nested() -> Parser[str]:
        ...     return symbol("x") | wrap("(", lazy(nested), ")")
        >>> nested().run(["(", "(", "x", ")", ")"])
        Ok(value='x')
    """

    def parse(cursor: Cursor[Any]) -> Result[ParseResult[T]]:
        return factory().parse(cursor)

    return Parser(parse, f"lazy({getattr(factory, '__name__', 'factory')})")


def wrap[Token, T](before: Token, parser: Parser[T], after: Token) -> Parser[T]:
    """Parse ``before``, then ``parser``, then ``after``; keep the middle value."""
    return (
        symbol(before)
        .bind(lambda _: parser)
        .bind(lambda _: symbol(after), lambda value, _: value)
    )
