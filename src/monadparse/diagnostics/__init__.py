"""Diagnostic system for parse failures.

Provides structured error diagnostics with codes, positions and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import MonadParseError, ParseFailedError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "MonadParseError",
    "ParseFailedError",
]
