"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    Every failure variant of :mod:`monadparse.result` builds its
    ``diagnostic`` through one of these factories.
    """

    @staticmethod
    def unexpected_token(
        expected: object, actual: object, position: int | None = None
    ) -> Diagnostic:
        """A required literal token did not match.

        Args:
            expected: The token the grammar required
            actual: The token found in the input
            position: Token index of ``actual``

        Returns:
            Diagnostic for UNEXPECTED_TOKEN
        """
        location = "" if position is None else f" at position {position}"
        msg = f"Unexpected token{location}: expected {expected!r}, got {actual!r}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TOKEN,
            message=msg,
            position=position,
            expected=expected,
            actual=actual,
        )

    @staticmethod
    def unexpected_eof(position: int | None, expected: object = None) -> Diagnostic:
        """Input ran out while a token was still required.

        Args:
            position: Cursor position at which input was exhausted
            expected: The token the grammar required, if any

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        location = "" if position is None else f" at position {position}"
        msg = f"Unexpected end of input{location}"
        if expected is not None:
            msg += f": expected {expected!r}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            position=position,
            expected=expected,
            hint="Check for unclosed brackets or incomplete input",
        )

    @staticmethod
    def assertion_failed() -> Diagnostic:
        """A filter predicate rejected an otherwise successful parse.

        Returns:
            Diagnostic for ASSERTION_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.ASSERTION_FAILED,
            message="Assertion failed during parsing.",
        )

    @staticmethod
    def trailing_tokens(actual: object, position: int | None) -> Diagnostic:
        """A complete parse was required but tokens were left over.

        Args:
            actual: First unconsumed token
            position: Token index of ``actual``

        Returns:
            Diagnostic for TRAILING_TOKENS
        """
        location = "" if position is None else f" at position {position}"
        msg = f"Unexpected trailing token{location}: {actual!r}"
        return Diagnostic(
            code=DiagnosticCode.TRAILING_TOKENS,
            message=msg,
            position=position,
            actual=actual,
            hint="The grammar stopped before the end of the input",
        )

    @staticmethod
    def unwrap_failed(reason: Diagnostic) -> Diagnostic:
        """unwrap() was called on a failed result.

        Args:
            reason: Diagnostic of the failure that was unwrapped

        Returns:
            Diagnostic for UNWRAP_FAILED
        """
        msg = f"Called unwrap() on a failed parse: {reason.message}"
        return Diagnostic(
            code=DiagnosticCode.UNWRAP_FAILED,
            message=msg,
            position=reason.position,
            expected=reason.expected,
            actual=reason.actual,
            hint="Match on the result or use unwrap_or() to supply a default",
        )
