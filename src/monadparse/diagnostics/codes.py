"""Diagnostic codes and data structures.

Defines the error codes and the structured diagnostic record attached to
every parse failure.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Syntax errors (token-level parse failures)
        4000-4999: Usage errors (results unwrapped without checking)
    """

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    UNEXPECTED_TOKEN = 3002
    ASSERTION_FAILED = 3003
    TRAILING_TOKENS = 3004

    # Usage errors (4000-4999)
    UNWRAP_FAILED = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Carries enough information for a caller to render its own error report;
    the engine itself never formats diagnostics for display beyond ``message``.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        position: Token index where the failure was detected (None if unknown)
        expected: Token the parser required (None if not applicable)
        actual: Token the parser found instead (None if not applicable)
        hint: Suggestion for fixing the grammar or the input
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    position: int | None = None
    expected: object = None
    actual: object = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message
