"""Diagnostic system for monetary codec errors.

Provides structured error diagnostics with codes, hints, and the exception
hierarchy. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    MonetaryError,
    MonetaryFormatError,
    MonetaryParseError,
    RegistryConfigurationError,
    StyleConfigurationError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "MonetaryError",
    "MonetaryFormatError",
    "MonetaryParseError",
    "OutputFormat",
    "RegistryConfigurationError",
    "StyleConfigurationError",
]
