"""Monetary text parsing.

- parse_monetary() never raises for malformed text; errors are returned
  in the result tuple
- Registry contents the style cannot support raise
  RegistryConfigurationError

Public API:
    parse_monetary - Returns tuple[MonetaryValue | None, tuple[MonetaryParseError, ...]]
    MonetaryStyles - Accepted layouts and currency indicator lookups
    LocalSymbolError, CurrencyCodeError, UnambiguousSymbolError - Why
        each indicator lookup failed

Example:
    >>> from monetext.parsing import MonetaryStyles, parse_monetary
    >>> result, errors = parse_monetary(
    ...     "(100.00 USD)", "en_US", registry=registry, style=MonetaryStyles.CURRENCY_CODE
    ... )
    >>> result.amount
    Decimal('-100.00')

Python 3.13+.
"""

from .monetary import parse_monetary, parse_monetary_value
from .resolver import (
    CurrencyCodeError,
    LocalSymbolError,
    Resolution,
    UnambiguousSymbolError,
    resolve_indicator,
)
from .styles import MonetaryStyles

__all__ = [
    "CurrencyCodeError",
    "LocalSymbolError",
    "MonetaryStyles",
    "Resolution",
    "UnambiguousSymbolError",
    "parse_monetary",
    "parse_monetary_value",
    "resolve_indicator",
]
