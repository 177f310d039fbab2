"""monetext - Locale-aware monetary text codec.

Parses free-form monetary text ("USD 1,234.56", "(1.234,56 €)", "-$100")
into an exact (amount, currency) value and formats values back through
locale currency patterns driven by compact format specifiers.

Public API:
    MonetaryValue - Immutable (Decimal amount, Currency) pair
    Currency - Currency metadata with localized symbol and name
    CurrencyRegistry - Named currency set used to resolve indicators
    MonetaryStyles - Parser switches and presets
    LocaleContext - Locale number and currency conventions (CLDR via Babel)
    FormatSpecifier - Parsed "[G|I|R|C|L][N|D][*|B[n]|A[n]]" specifier
    FormatBuffer - Fixed-capacity output buffer
    format_money, try_format_money - Formatting
    parse_monetary - Parsing; returns (result, errors)

Exceptions:
    MonetaryError - Base exception class
    MonetaryParseError - Text could not be parsed (returned, or raised by parse)
    MonetaryFormatError - Invalid format specifier
    StyleConfigurationError - Style without any indicator lookup
    RegistryConfigurationError - Registry codes or symbols unusable for parsing

Submodules:
    monetext.runtime - LocaleContext, conventions, number rules, pattern tables
    monetext.parsing - Parser engine and indicator resolver
    monetext.formatting - Formatter engine, specifier and buffer
    monetext.currency - Currency and registry collaborators
    monetext.diagnostics - Error types, templates and formatter
"""

from .constants import FORMAT_BUFFER_SIZE
from .currency import Currency, CurrencyRegistry
from .diagnostics import (
    MonetaryError,
    MonetaryFormatError,
    MonetaryParseError,
    RegistryConfigurationError,
    StyleConfigurationError,
)
from .formatting import FormatBuffer, FormatSpecifier, format_money, try_format_money
from .money import MonetaryValue
from .parsing import MonetaryStyles, parse_monetary
from .runtime import LocaleContext

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("monetext")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FORMAT_BUFFER_SIZE",
    "Currency",
    "CurrencyRegistry",
    "FormatBuffer",
    "FormatSpecifier",
    "LocaleContext",
    "MonetaryError",
    "MonetaryFormatError",
    "MonetaryParseError",
    "MonetaryStyles",
    "MonetaryValue",
    "RegistryConfigurationError",
    "StyleConfigurationError",
    "__version__",
    "format_money",
    "parse_monetary",
    "try_format_money",
]
