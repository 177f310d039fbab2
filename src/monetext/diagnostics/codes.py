"""Diagnostic codes and data structures.

Defines error codes, error categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for MonetaryError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        PARSE: Malformed input text (recoverable, reported as data)
        RESOLUTION: Currency indicator found but not resolvable
        FORMATTING: Invalid format specifier
        CONFIGURATION: Invalid style switches or registry contents
    """

    PARSE = "parse"
    RESOLUTION = "resolution"
    FORMATTING = "formatting"
    CONFIGURATION = "configuration"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Parse failures (malformed text)
        2000-2999: Resolution failures (unresolvable currency indicator)
        3000-3999: Formatting errors
        4000-4999: Configuration errors (styles, registries)
    """

    # Parse failures (1000-1999)
    PARSE_INVALID_FORMAT = 1001
    PARSE_AMOUNT_INVALID = 1002
    PARSE_INDICATOR_MISSING = 1003

    # Resolution failures (2000-2999)
    PARSE_INDICATOR_UNRESOLVED = 2001

    # Formatting errors (3000-3999)
    INVALID_FORMAT_SPECIFIER = 3001

    # Configuration errors (4000-4999)
    STYLE_NO_INDICATOR = 4001
    REGISTRY_INVALID_CODE = 4002
    REGISTRY_INVALID_SYMBOL = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: Text that failed to parse (parse diagnostics only)
        locale_code: Locale used for parsing (parse diagnostics only)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[PARSE_AMOUNT_INVALID]: The input string '$' does not contain a valid amount.
              --> input: '$' (locale en_US)
              = help: Provide digits for the amount, e.g. '$1.00'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
