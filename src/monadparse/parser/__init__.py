"""Parser type, primitive parsers and the combinator library."""

from .combinators import (
    at_least,
    at_most,
    either,
    lazy,
    many,
    maybe,
    sequence,
    some,
    wrap,
)
from .core import Parser
from .primitives import end_of_input, lift, next_token, satisfy, symbol

__all__ = [
    "Parser",
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
