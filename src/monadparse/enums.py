"""Enumerations for monadparse configuration values.

Uses StrEnum (Python 3.11+) so members compare equal to their string values
and render as plain strings in logs and reprs.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["AtMostPolicy"]


class AtMostPolicy(StrEnum):
    """How at_most() enforces its upper bound.

    StrEnum provides automatic string conversion: str(AtMostPolicy.CAPPED) == "capped"
    """

    POST_HOC = "post_hoc"
    """Repeat greedily until the inner parser fails, then reject the whole
    parse if more than n values were collected."""

    CAPPED = "capped"
    """Stop requesting matches once n values were collected; never fails."""
