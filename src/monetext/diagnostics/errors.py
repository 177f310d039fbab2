"""Monetary exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Parse failures are normally returned as data (see
``monetext.parsing.parse_monetary``); MonetaryParseError is raised only by
the strict ``parse`` entry points. Configuration errors are always raised.

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic, ErrorCategory

if TYPE_CHECKING:
    from monetext.parsing.resolver import (
        CurrencyCodeError,
        LocalSymbolError,
        UnambiguousSymbolError,
    )

__all__ = [
    "MonetaryError",
    "MonetaryFormatError",
    "MonetaryParseError",
    "RegistryConfigurationError",
    "StyleConfigurationError",
]


class MonetaryError(Exception):
    """Base exception for all monetext errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Broad error category
    """

    category: ErrorCategory = ErrorCategory.PARSE

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MonetaryError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def message(self) -> str:
        """Plain error message without diagnostic decoration."""
        if self.diagnostic is not None:
            return self.diagnostic.message
        return str(self)


class MonetaryParseError(MonetaryError):
    """Text could not be parsed into a monetary value.

    Attributes:
        input_value: The string that failed to parse
        locale_code: The locale used for parsing
        indicator: Currency indicator extracted from the input, if any
        local_symbol_error: Why the local symbol lookup failed, if attempted
        currency_code_error: Why the currency code lookup failed, if attempted
        unambiguous_symbol_error: Why the unambiguous symbol lookup failed,
            if attempted

    Example:
        >>> value, errors = parse_monetary("USD", "en_US", registry=registry)
        >>> for error in errors:
        ...     print(error.input_value, error.category)
        USD parse
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
        indicator: str | None = None,
        local_symbol_error: "LocalSymbolError | None" = None,
        currency_code_error: "CurrencyCodeError | None" = None,
        unambiguous_symbol_error: "UnambiguousSymbolError | None" = None,
    ) -> None:
        super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code
        self.indicator = indicator
        self.local_symbol_error = local_symbol_error
        self.currency_code_error = currency_code_error
        self.unambiguous_symbol_error = unambiguous_symbol_error
        if indicator is not None:
            self.category = ErrorCategory.RESOLUTION


class MonetaryFormatError(MonetaryError, ValueError):
    """Format specifier does not follow ``[G|I|R|C|L][N|D][*|B[n]|A[n]]``."""

    category = ErrorCategory.FORMATTING


class StyleConfigurationError(MonetaryError, ValueError):
    """Parse style enables no currency indicator strategy."""

    category = ErrorCategory.CONFIGURATION


class RegistryConfigurationError(MonetaryError):
    """Registry holds a currency code or symbol the parser cannot match.

    Discovered lazily at first parse, not at registry construction.
    """

    category = ErrorCategory.CONFIGURATION
