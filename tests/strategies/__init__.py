"""Hypothesis strategies for monadparse property-based testing.

Strategies are organized by domain:

- tokens: token alphabet, token lists and cursors
- parsers: generated parsers and parser-building functions for law checks

Usage:
    from tests.strategies import token_lists, parsers
    from tests.strategies.parsers import binders
"""

from .parsers import binders, consuming_parsers, parsers, value_functions
from .tokens import TOKEN_ALPHABET, cursors, token_lists, tokens

__all__ = [
    "TOKEN_ALPHABET",
    "binders",
    "consuming_parsers",
    "cursors",
    "parsers",
    "token_lists",
    "tokens",
    "value_functions",
]
