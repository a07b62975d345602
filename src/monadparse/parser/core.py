"""Core parser type.

A :class:`Parser` wraps a function ``Cursor -> Result[ParseResult[T]]``.
Parsers own no mutable state: they are built once (typically when a grammar
is defined) and run any number of times against different cursors.

Architecture:
    Sequencing is expressed through :meth:`Parser.bind`, which is built on
    :meth:`monadparse.result.Ok.bind`: the first parse yields a value and a
    cursor, the value selects the next parser, and that parser continues
    from the cursor. Every other combinator in
    :mod:`monadparse.parser.combinators` is defined in terms of these
    operations plus alternation.

Example:
    >>> from monadparse.parser.primitives import symbol
    >>> greeting = symbol("hello").then(symbol("world"))
    >>> greeting.run(["hello", "world"])
    Ok(value='world')

See Also:
    - :mod:`monadparse.parser.primitives` - Token-level parsers
    - :mod:`monadparse.parser.combinators` - Repetition, optionality, laziness
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from monadparse.cursor import Cursor, ParseResult
from monadparse.result import Ok, Result, UnexpectedToken

__all__ = ["Parser"]

logger = logging.getLogger(__name__)

type ParseFn[T] = Callable[[Cursor[Any]], Result[ParseResult[T]]]


class Parser[T]:
    """Composable parser producing values of type ``T``.

    Design:
    - Immutable cursor makes backtracking free (failed branches drop their cursor)
    - Failures are Result values, never exceptions
    - Safe to share across threads; a parse keeps all state on the call stack

    Attributes:
        name: Human-readable description used in reprs and log records
    """

    __slots__ = ("_name", "_parse")

    def __init__(self, parse: ParseFn[T], name: str | None = None) -> None:
        """Initialize parser from a parse function.

        Args:
            parse: Function taking a cursor and returning the parse outcome
            name: Optional description (default: the function's name)
        """
        self._parse = parse
        self._name = name if name is not None else getattr(parse, "__name__", "parser")

    def __repr__(self) -> str:
        return f"<Parser {self._name}>"

    @property
    def name(self) -> str:
        """Human-readable description of this parser."""
        return self._name

    # =========================================================================
    # RUNNING
    # =========================================================================

    def parse(self, cursor: Cursor[Any]) -> Result[ParseResult[T]]:
        """Apply the parser at ``cursor``.

        Returns:
            Ok(ParseResult(value, cursor_after)) or a failure
        """
        return self._parse(cursor)

    def __call__(self, cursor: Cursor[Any]) -> Result[ParseResult[T]]:
        """Alias for :meth:`parse`."""
        return self._parse(cursor)

    def run(self, tokens: Sequence[Any], *, consume_all: bool = False) -> Result[T]:
        """Parse a token sequence from the beginning.

        The cursor remaining after the parse is discarded.

        Args:
            tokens: Token sequence (any random-access sequence)
            consume_all: Fail with a trailing UnexpectedToken if tokens are left over

        Returns:
            Ok(value) on success, otherwise the failure
        """
        match self.parse(Cursor(tokens)):
            case Ok(value=ParseResult(value=value, cursor=rest)):
                if consume_all and not rest.is_eof:
                    leftover = UnexpectedToken(None, rest.current, rest.pos, trailing=True)
                    if logger.isEnabledFor(logging.DEBUG):
                        logger.debug("%r stopped early: %s", self, leftover.diagnostic)
                    return leftover
                return Ok(value)
            case failure:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("%r failed: %s", self, failure.diagnostic)
                return failure

    def parse_or_raise(self, tokens: Sequence[Any], *, consume_all: bool = False) -> T:
        """Parse a token sequence and return the value.

        Raises:
            ParseFailedError: If the parse fails
        """
        return self.run(tokens, consume_all=consume_all).unwrap()

    # =========================================================================
    # MONADIC OPERATIONS
    # =========================================================================

    def map[U](self, f: Callable[[T], U]) -> "Parser[U]":
        """Transform the value of a successful parse.

        The cursor position after the parse is unchanged.
        """

        def parse(cursor: Cursor[Any]) -> Result[ParseResult[U]]:
            return self.parse(cursor).map(
                lambda step: ParseResult(f(step.value), step.cursor)
            )

        return Parser(parse, f"{self._name}.map")

    def bind[U, V](
        self,
        then: "Callable[[T], Parser[U]]",
        combine: Callable[[T, U], V] | None = None,
    ) -> "Parser[V]":
        """Run this parser, then the parser chosen by its value.

        The second parser continues from the cursor the first one left. Any
        failure short-circuits the chain and is returned unchanged; the second
        parser is never built if the first parse fails.

        Args:
            then: Builds the next parser from the first value
            combine: Merges both values; when omitted the second value is kept

        Returns:
            Parser yielding combine(first, second)
        """

        def join(first: ParseResult[T], second: ParseResult[U]) -> ParseResult[V]:
            if combine is None:
                return ParseResult(second.value, second.cursor)  # type: ignore[arg-type]
            return ParseResult(combine(first.value, second.value), second.cursor)

        def parse(cursor: Cursor[Any]) -> Result[ParseResult[V]]:
            return self.parse(cursor).bind(
                lambda first: then(first.value).parse(first.cursor), join
            )

        return Parser(parse, f"{self._name}.bind")

    def filter(self, predicate: Callable[[T], bool]) -> "Parser[T]":
        """Reject successful parses whose value fails ``predicate``.

        Rejected parses become AssertionFailed.
        """

        def parse(cursor: Cursor[Any]) -> Result[ParseResult[T]]:
            return self.parse(cursor).filter(lambda step: predicate(step.value))

        return Parser(parse, f"{self._name}.filter")

    # =========================================================================
    # ALTERNATION AND SEQUENCING
    # =========================================================================

    def or_else(self, other: "Parser[T]") -> "Parser[T]":
        """Try this parser; on failure try ``other`` from the same position.

        ``other`` always starts from the original cursor, never from wherever
        this parser got to before failing.
        """

        def parse(cursor: Cursor[Any]) -> Result[ParseResult[T]]:
            match self.parse(cursor):
                case Ok() as success:
                    return success
                case _:
                    return other.parse(cursor)

        return Parser(parse, f"({self._name} | {other._name})")

    def __or__(self, other: "Parser[T]") -> "Parser[T]":
        """Operator form of :meth:`or_else`."""
        return self.or_else(other)

    def then[U](self, other: "Parser[U]") -> "Parser[U]":
        """Sequence two parsers, keeping the value of ``other``."""
        return self.bind(lambda _: other)

    def skip(self, other: "Parser[Any]") -> "Parser[T]":
        """Sequence two parsers, keeping the value of this one."""
        return self.bind(lambda _: other, lambda value, _: value)

    # =========================================================================
    # DEBUGGING
    # =========================================================================

    def do(self, action: Callable[[], object]) -> "Parser[T]":
        """Call ``action`` after every successful parse.

        The result is returned unchanged; failed parses skip the action.
        """

        def parse(cursor: Cursor[Any]) -> Result[ParseResult[T]]:
            result = self.parse(cursor)
            if result.is_ok():
                action()
            return result

        return Parser(parse, self._name)

    def log(self, message: str, level: int = logging.DEBUG) -> "Parser[T]":
        """Emit ``message`` to the module logger after every successful parse."""
        return self.do(lambda: logger.log(level, "%s", message))
