"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    _SPECIFIER_GRAMMAR = "[G|I|R|C|L][N|D][*|B[n]|A[n]]"

    # ------------------------------------------------------------------
    # Parse failures
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_format(value: str, locale_code: str) -> Diagnostic:
        """Input layout could not be recognized.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing

        Returns:
            Diagnostic for PARSE_INVALID_FORMAT
        """
        msg = f"The input string '{value}' was not in a correct format."
        return Diagnostic(
            code=DiagnosticCode.PARSE_INVALID_FORMAT,
            message=msg,
            hint="Check sign, parenthesis and whitespace placement against the parse style",
            input_value=value,
            locale_code=locale_code,
        )

    @staticmethod
    def amount_invalid(value: str, locale_code: str) -> Diagnostic:
        """Numeric body is empty or malformed.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing

        Returns:
            Diagnostic for PARSE_AMOUNT_INVALID
        """
        msg = f"The input string '{value}' does not contain a valid amount."
        return Diagnostic(
            code=DiagnosticCode.PARSE_AMOUNT_INVALID,
            message=msg,
            hint="Use the locale's decimal and group separators between ASCII digits",
            input_value=value,
            locale_code=locale_code,
        )

    @staticmethod
    def indicator_missing(value: str, locale_code: str) -> Diagnostic:
        """No currency code or symbol was found around the amount.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing

        Returns:
            Diagnostic for PARSE_INDICATOR_MISSING
        """
        msg = f"The input string '{value}' does not contain a currency indicator."
        return Diagnostic(
            code=DiagnosticCode.PARSE_INDICATOR_MISSING,
            message=msg,
            hint="Add an ISO currency code (USD, EUR) or a currency symbol",
            input_value=value,
            locale_code=locale_code,
        )

    @staticmethod
    def indicator_unresolved(
        value: str,
        locale_code: str,
        indicator: str,
        failures: Iterable[str],
    ) -> Diagnostic:
        """Currency indicator did not resolve through any enabled lookup.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing
            indicator: The extracted currency indicator
            failures: One "<lookup>: <reason>" entry per attempted lookup

        Returns:
            Diagnostic for PARSE_INDICATOR_UNRESOLVED
        """
        msg = (
            f"The input string '{value}' had a currency indicator '{indicator}' that "
            "could not be resolved. The following lookups were attempted but failed: "
            + ", ".join(failures)
        )
        return Diagnostic(
            code=DiagnosticCode.PARSE_INDICATOR_UNRESOLVED,
            message=msg,
            hint="Use an ISO currency code or enable more lookups in the parse style",
            input_value=value,
            locale_code=locale_code,
        )

    # ------------------------------------------------------------------
    # Formatting errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_format_specifier(specifier: str) -> Diagnostic:
        """Format specifier does not follow the grammar.

        Args:
            specifier: The rejected format specifier

        Returns:
            Diagnostic for INVALID_FORMAT_SPECIFIER
        """
        msg = f"Format specifier '{specifier}' was invalid."
        return Diagnostic(
            code=DiagnosticCode.INVALID_FORMAT_SPECIFIER,
            message=msg,
            hint=f"Expected {ErrorTemplate._SPECIFIER_GRAMMAR} with digit counts 0-28",
        )

    # ------------------------------------------------------------------
    # Configuration errors
    # ------------------------------------------------------------------

    @staticmethod
    def style_no_indicator() -> Diagnostic:
        """Parse style enables none of the currency indicator lookups.

        Returns:
            Diagnostic for STYLE_NO_INDICATOR
        """
        msg = (
            "The style must have at least one of the following switches set: "
            "allow_currency_code, allow_local_symbol, allow_unambiguous_symbols."
        )
        return Diagnostic(
            code=DiagnosticCode.STYLE_NO_INDICATOR,
            message=msg,
            hint="Start from a preset such as MonetaryStyles.CURRENCY_CODE",
        )

    @staticmethod
    def registry_invalid_code(registry_name: str, code: str, reason: str) -> Diagnostic:
        """Registry contains a currency code that text could never match.

        Args:
            registry_name: Name of the offending registry
            code: The unparsable currency code
            reason: Why the code cannot be parsed

        Returns:
            Diagnostic for REGISTRY_INVALID_CODE
        """
        msg = (
            f"Currency registry '{registry_name}' contains currency code '{code}' "
            f"that cannot be parsed: {reason}"
        )
        return Diagnostic(
            code=DiagnosticCode.REGISTRY_INVALID_CODE,
            message=msg,
            hint="Disable allow_currency_code or fix the registry contents",
        )

    @staticmethod
    def registry_invalid_symbol(
        registry_name: str,
        locale_code: str,
        code: str,
        symbol: str,
        reason: str,
    ) -> Diagnostic:
        """Registry contains a localized symbol that text could never match.

        Args:
            registry_name: Name of the offending registry
            locale_code: Locale the symbol was localized for
            code: Code of the currency owning the symbol
            symbol: The unparsable symbol
            reason: Why the symbol cannot be parsed

        Returns:
            Diagnostic for REGISTRY_INVALID_SYMBOL
        """
        msg = (
            f"Currency registry '{registry_name}' contains currency '{code}' with symbol "
            f"'{symbol}' for locale '{locale_code}' that cannot be parsed: {reason}"
        )
        return Diagnostic(
            code=DiagnosticCode.REGISTRY_INVALID_SYMBOL,
            message=msg,
            hint="Disable symbol lookups or give the currency a parsable symbol",
        )
