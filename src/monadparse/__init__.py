"""monadparse - monadic parser combinators over arbitrary token sequences.

Builds recursive-descent parsers by composing small parsing functions with
sequencing (bind), alternation, repetition and optionality. Works on any
random-access sequence of equatable tokens; tokenizing is left to the caller.

Public API:
    Parser - Parser type with map/bind/filter/or_else/run
    Cursor, ParseResult - Immutable token cursor and (value, cursor) pair
    Ok, UnexpectedToken, UnexpectedEndOfInput, AssertionFailed - Result variants
    Result, Fail - Type aliases over the variants
    lift, next_token, symbol, satisfy, end_of_input - Primitive parsers
    either, sequence, at_least, at_most, many, some, maybe, lazy, wrap - Combinators
    AtMostPolicy - Upper-bound enforcement for at_most()

Exceptions:
    MonadParseError - Base exception class
    ParseFailedError - A failed result was unwrapped

Example:
    >>> from monadparse import either, symbol
    >>> either(symbol("add"), symbol("sub")).run(["sub"])
    Ok(value='sub')
"""

from .cursor import Cursor, ParseResult
from .diagnostics import Diagnostic, DiagnosticCode, MonadParseError, ParseFailedError
from .enums import AtMostPolicy
from .parser import (
    Parser,
    at_least,
    at_most,
    either,
    end_of_input,
    lazy,
    lift,
    many,
    maybe,
    next_token,
    satisfy,
    sequence,
    some,
    symbol,
    wrap,
)
from .result import (
    AssertionFailed,
    Fail,
    Ok,
    Result,
    UnexpectedEndOfInput,
    UnexpectedToken,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("monadparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AssertionFailed",
    "AtMostPolicy",
    "Cursor",
    "Diagnostic",
    "DiagnosticCode",
    "Fail",
    "MonadParseError",
    "Ok",
    "ParseFailedError",
    "ParseResult",
    "Parser",
    "Result",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "__version__",
    "at_least",
    "at_most",
    "either",
    "end_of_input",
    "lazy",
    "lift",
    "many",
    "maybe",
    "next_token",
    "satisfy",
    "sequence",
    "some",
    "symbol",
    "wrap",
]
