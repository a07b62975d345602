"""Parse outcome type: success value or structured failure.

A Result is a tagged union of four frozen dataclasses:

    Ok(value)                                   - the parse succeeded
    UnexpectedToken(expected, actual, position) - a literal token did not match
    UnexpectedEndOfInput(expected, position)    - input ran out mid-parse
    AssertionFailed()                           - a predicate rejected the value

Design Philosophy:
    - Failures are values, never exceptions
    - Variants are discriminated by ``match``, not by flags
    - Failure variants carry no success type, so a failure produced while
      parsing a ``T`` is already a valid failure of any other type. map(),
      bind() and filter() return the very same failure object.

Example:
    >>> match Ok(2).map(lambda x: x * 21):
    ...     case Ok(value=v):
    ...         print(v)
    ...     case failure:
    ...         print(failure)
    42

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal, NoReturn, Self

from monadparse.diagnostics import Diagnostic, ErrorTemplate, ParseFailedError

__all__ = [
    "AssertionFailed",
    "Fail",
    "Ok",
    "Result",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome carrying the produced value.

    Example:
        >>> Ok(3).bind(lambda x: Ok(x + 1), lambda x, y: (x, y))
        Ok(value=(3, 4))
        >>> Ok(3).filter(lambda x: x > 5)
        AssertionFailed()
    """

    value: T

    def __str__(self) -> str:
        return f"Ok({self.value})"

    def is_ok(self) -> Literal[True]:
        """Check if this is the Ok variant."""
        return True

    def is_fail(self) -> Literal[False]:
        """Check if this is a failure variant."""
        return False

    @property
    def diagnostic(self) -> None:
        """Successful results carry no diagnostic."""
        return None

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply ``f`` to the carried value."""
        return Ok(f(self.value))

    def bind[U, V](
        self,
        then: Callable[[T], Result[U]],
        combine: Callable[[T, U], V] | None = None,
    ) -> Result[V]:
        """Sequence a second fallible step after this one.

        Args:
            then: Computes the second result from this value
            combine: Merges both values; when omitted the second value is kept

        Returns:
            Ok(combine(value, second)) if ``then`` succeeds, else its failure
        """
        match then(self.value):
            case Ok(value=second):
                if combine is None:
                    return Ok(second)  # type: ignore[arg-type]
                return Ok(combine(self.value, second))
            case failure:
                return failure

    def filter(self, predicate: Callable[[T], bool]) -> Result[T]:
        """Keep the value only if ``predicate`` holds, else AssertionFailed."""
        if predicate(self.value):
            return self
        return AssertionFailed()

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value

    def unwrap_or(self, default: object) -> T:  # noqa: ARG002
        """Return the carried value (``default`` is ignored)."""
        return self.value


class _Failure(ABC):
    """Operations shared by every failure variant.

    Each failure short-circuits map/bind/filter by returning itself.
    Variants supply their own ``diagnostic``.
    """

    __slots__ = ()

    def is_ok(self) -> Literal[False]:
        """Check if this is the Ok variant."""
        return False

    def is_fail(self) -> Literal[True]:
        """Check if this is a failure variant."""
        return True

    @property
    @abstractmethod
    def diagnostic(self) -> Diagnostic:
        """Structured description of the failure."""

    def map(self, f: Callable[[Any], object]) -> Self:  # noqa: ARG002
        """Failures pass through map unchanged."""
        return self

    def bind(
        self,
        then: Callable[[Any], object],  # noqa: ARG002
        combine: Callable[[Any, Any], object] | None = None,  # noqa: ARG002
    ) -> Self:
        """Failures short-circuit; ``then`` is never evaluated."""
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> Self:  # noqa: ARG002
        """Failures pass through filter unchanged."""
        return self

    def unwrap(self) -> NoReturn:
        """Raise ParseFailedError describing this failure.

        Raises:
            ParseFailedError: Always
        """
        raise ParseFailedError(ErrorTemplate.unwrap_failed(self.diagnostic))

    def unwrap_or[D](self, default: D) -> D:
        """Return ``default`` in place of the missing value."""
        return default


@dataclass(frozen=True, slots=True)
class UnexpectedToken[Token](_Failure):
    """A required literal token did not match.

    Attributes:
        expected: Token the grammar required (None when the end of input
            was required)
        actual: Token found in the input
        position: Token index of ``actual`` (None if unknown)
        trailing: True when the end of input was required and ``actual``
            is the first leftover token. ``None`` is an ordinary token
            value, so ``expected`` alone cannot tell the two cases apart.
    """

    expected: Token | None
    actual: Token
    position: int | None = None
    trailing: bool = False

    def __str__(self) -> str:
        return (
            "Unexpected token\n"
            "  Expected:\n"
            f"    {self.expected}\n"
            "  But got:\n"
            f"    {self.actual}\n"
        )

    @property
    def diagnostic(self) -> Diagnostic:
        """Structured description of the mismatch."""
        if self.trailing:
            return ErrorTemplate.trailing_tokens(self.actual, self.position)
        return ErrorTemplate.unexpected_token(self.expected, self.actual, self.position)


@dataclass(frozen=True, slots=True)
class UnexpectedEndOfInput(_Failure):
    """Input was exhausted while a token was still required.

    Attributes:
        expected: Token the grammar required, if a specific one was required
        position: Cursor position at which input ran out
    """

    expected: object = None
    position: int | None = None

    def __str__(self) -> str:
        return self.diagnostic.message

    @property
    def diagnostic(self) -> Diagnostic:
        """Structured description of the exhaustion."""
        return ErrorTemplate.unexpected_eof(self.position, self.expected)


@dataclass(frozen=True, slots=True)
class AssertionFailed(_Failure):
    """A filter predicate rejected an otherwise successful parse.

    Carries no payload: the rejected value is discarded.
    """

    def __str__(self) -> str:
        return "Assertion failed during parsing."

    @property
    def diagnostic(self) -> Diagnostic:
        """Structured description of the rejection."""
        return ErrorTemplate.assertion_failed()


type Fail = UnexpectedToken[Any] | UnexpectedEndOfInput | AssertionFailed
"""Any failure variant. Not parameterised by the success type."""

type Result[T] = Ok[T] | Fail
"""Outcome of a parse step producing ``T``."""
