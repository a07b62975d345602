"""monadparse exception hierarchy with structured diagnostics.

Parse failures are ordinary values (see :mod:`monadparse.result`); these
exceptions are raised only when a caller explicitly asks for a value that
does not exist.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["MonadParseError", "ParseFailedError"]


class MonadParseError(Exception):
    """Base exception for all monadparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MonadParseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseFailedError(MonadParseError):
    """A failed parse result was unwrapped.

    Raised by ``unwrap()`` on failure variants and by
    ``Parser.parse_or_raise()``.
    """
