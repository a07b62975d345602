"""Immutable cursor infrastructure for token-stream parsing.

Implements the immutable cursor pattern over an arbitrary token sequence.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - The token sequence is shared, never copied; only the position changes
    - Every consume()/advance() returns a NEW cursor
    - Running out of tokens is a parse failure value, not an exception

Backtracking:
    Because a cursor can never be mutated, a parser that fails simply drops
    its local cursor. Any other branch still holds the cursor it started
    from, so alternation and optional parsing need no undo log.

Pattern Reference:
    - Haskell Parsec
    - F# FParsec
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from monadparse.constants import CURSOR_PREVIEW_TOKENS
from monadparse.result import Ok, Result, UnexpectedEndOfInput

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor[Token]:
    """Immutable read position within a token sequence.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Cursors are created once per consumed token
        3. Shared tokens - Only ``pos`` differs between cursors of one parse
        4. consume() returns a Result - Exhaustion is ordinary data

    Example:
        >>> cursor = Cursor(["a", "b"])
        >>> match cursor.consume():
        ...     case Ok(value=step):
        ...         print(step.value, step.cursor.pos)
        a 1
        >>> cursor.pos  # Original unchanged (immutability)
        0
        >>> Cursor(["a"], 1).consume()
        UnexpectedEndOfInput(expected=None, position=1)
    """

    tokens: Sequence[Token]
    pos: int = 0

    def __post_init__(self) -> None:
        """Validate the position invariant 0 <= pos <= len(tokens).

        Raises:
            ValueError: If pos lies outside the token sequence
        """
        if self.pos < 0:
            msg = f"Cursor.pos must be >= 0, got {self.pos}"
            raise ValueError(msg)
        if self.pos > len(self.tokens):
            msg = f"Cursor.pos ({self.pos}) must be <= len(tokens) ({len(self.tokens)})"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Render the unconsumed tokens, e.g. ``[b, c]``."""
        remaining = self.tokens[self.pos : self.pos + CURSOR_PREVIEW_TOKENS]
        preview = ", ".join(str(token) for token in remaining)
        if len(self.tokens) - self.pos > CURSOR_PREVIEW_TOKENS:
            preview += ", ..."
        return f"[{preview}]"

    @property
    def is_eof(self) -> bool:
        """Check if every token has been consumed.

        Returns:
            True if pos == len(tokens)
        """
        return self.pos >= len(self.tokens)

    @property
    def current(self) -> Token:
        """Get the token at the current position.

        Returns:
            Token at position

        Raises:
            EOFError: If at end of input

        Note:
            Parsers should prefer consume(), which reports exhaustion as an
            UnexpectedEndOfInput value instead of raising.
        """
        if self.is_eof:
            raise EOFError(str(UnexpectedEndOfInput(position=self.pos)))
        return self.tokens[self.pos]

    @property
    def remaining(self) -> tuple[Token, ...]:
        """Tokens not yet consumed."""
        return tuple(self.tokens[self.pos :])

    def peek(self, offset: int = 0) -> Token | None:
        """Look at a token without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Token at position + offset, or None if beyond the end
        """
        target_pos = self.pos + offset
        if target_pos < 0 or target_pos >= len(self.tokens):
            return None
        return self.tokens[target_pos]

    def advance(self, count: int = 1) -> "Cursor[Token]":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance, clamped to the end of the sequence
        """
        new_pos = min(self.pos + count, len(self.tokens))
        return Cursor(self.tokens, new_pos)

    def consume(self) -> "Result[ParseResult[Token]]":
        """Take the next token.

        Returns:
            Ok(ParseResult(token, advanced_cursor)) if a token remains,
            UnexpectedEndOfInput(position=pos) otherwise

        Example:
            >>> Cursor(["x"]).consume()
            Ok(value=ParseResult(value='x', cursor=Cursor(tokens=['x'], pos=1)))
        """
        if self.is_eof:
            return UnexpectedEndOfInput(position=self.pos)
        return Ok(ParseResult(self.tokens[self.pos], Cursor(self.tokens, self.pos + 1)))


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parsed value paired with the cursor positioned after it.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every parser has signature:
            def parse_foo(cursor: Cursor) -> Result[ParseResult[Foo]]:
                ...
                return Ok(ParseResult(parsed_value, new_cursor))

    Example:
        >>> cursor = Cursor(["a", "b"])
        >>> result = ParseResult("a", cursor.advance())
        >>> result.value
        'a'
        >>> result.cursor.current
        'b'
    """

    value: T
    cursor: Cursor[Any]
