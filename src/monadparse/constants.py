"""Shared constants for monadparse.

Single source of truth for the default values used by the cursor and the
combinator library. Keyword arguments on the individual constructors
override these per call site.

Python 3.13+. Zero external dependencies.
"""

from monadparse.enums import AtMostPolicy

__all__ = [
    "CURSOR_PREVIEW_TOKENS",
    "DEFAULT_AT_MOST_POLICY",
]

# Number of unconsumed tokens rendered by str(Cursor) before the preview is
# truncated with an ellipsis. Keeps debug logging of long token streams short.
CURSOR_PREVIEW_TOKENS: int = 20

# at_most() keeps the greedy, count-checked-afterwards behaviour unless the
# caller asks for the capped variant explicitly.
DEFAULT_AT_MOST_POLICY: AtMostPolicy = AtMostPolicy.POST_HOC
