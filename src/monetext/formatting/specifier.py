"""Monetary format specifier.

Grammar (case-insensitive, every part optional but ordered):

    [G|I|R|C|L][N|D][*|B[n]|A[n]]

    Currency style
        G  general: ISO code, before the amount in en/ga/lv/mt, after it
           elsewhere (default)
        I  international: ISO code before the amount
        R  reverse international: ISO code after the amount
        C  symbol: localized symbol in the locale's currency pattern
        L  local: C for the locale's region currency, G otherwise

    Number style
        N  grouped digits (default)
        D  digits without group separators

    Decimals style
        (none)  natural digits, at least the currency's standard digits
        *       natural digits only (trailing zeros trimmed, may be 0)
        B[n]    round half to even to n digits (default: currency digits)
        A[n]    round half away from zero to n digits

    n is 0-28.

Python 3.13+. Zero external dependencies.
"""

import functools
from dataclasses import dataclass
from enum import StrEnum

from monetext.constants import MAX_DECIMAL_PLACES, MAX_SPECIFIER_CACHE_SIZE
from monetext.diagnostics import ErrorTemplate, MonetaryFormatError

__all__ = ["CurrencyStyle", "DecimalsStyle", "FormatSpecifier"]


class CurrencyStyle(StrEnum):
    """How the currency is shown."""

    GENERAL = "G"
    INTERNATIONAL = "I"
    REVERSE_INTERNATIONAL = "R"
    SYMBOL = "C"
    LOCAL = "L"


class DecimalsStyle(StrEnum):
    """How many decimals are shown and how the amount is rounded."""

    SHORTEST = "*"
    BANKERS = "B"
    AWAY_FROM_ZERO = "A"


_ASCII_DIGITS = frozenset("0123456789")
_CURRENCY_STYLES = frozenset(style.value for style in CurrencyStyle)
_DECIMALS_STYLES = frozenset(style.value for style in DecimalsStyle)


@dataclass(frozen=True, slots=True)
class FormatSpecifier:
    """Parsed monetary format specifier.

    Attributes:
        currency_style: How the currency is shown
        grouped: Whether integer digits are grouped
        decimals_style: Decimal handling, None for the default
        decimal_places: Explicit digit count for B/A, None for the
            currency's standard digits
    """

    currency_style: CurrencyStyle = CurrencyStyle.GENERAL
    grouped: bool = True
    decimals_style: DecimalsStyle | None = None
    decimal_places: int | None = None

    @staticmethod
    def parse(specifier: str | None) -> "FormatSpecifier":
        """Parse a format specifier string.

        Args:
            specifier: Specifier text, None or "" for the default

        Returns:
            Parsed FormatSpecifier

        Raises:
            MonetaryFormatError: If the specifier does not follow the grammar

        Examples:
            >>> FormatSpecifier.parse("RA").currency_style
            <CurrencyStyle.REVERSE_INTERNATIONAL: 'R'>
            >>> FormatSpecifier.parse("b4").decimal_places
            4
        """
        return _parse_specifier(specifier or "")


@functools.lru_cache(maxsize=MAX_SPECIFIER_CACHE_SIZE)
def _parse_specifier(specifier: str) -> FormatSpecifier:
    spec = specifier.rstrip("\0").upper()
    if not spec:
        return FormatSpecifier()

    pos = 0
    currency_style = CurrencyStyle.GENERAL
    grouped = True
    decimals_style: DecimalsStyle | None = None
    decimal_places: int | None = None

    if spec[pos] in _CURRENCY_STYLES:
        currency_style = CurrencyStyle(spec[pos])
        pos += 1

    if pos < len(spec) and spec[pos] in ("N", "D"):
        grouped = spec[pos] == "N"
        pos += 1

    if pos < len(spec) and spec[pos] in _DECIMALS_STYLES:
        decimals_style = DecimalsStyle(spec[pos])
        pos += 1
        digits = spec[pos:]
        if digits and decimals_style is not DecimalsStyle.SHORTEST:
            if len(digits) > 2 or not set(digits) <= _ASCII_DIGITS:
                raise MonetaryFormatError(ErrorTemplate.invalid_format_specifier(specifier))
            decimal_places = int(digits)
            if decimal_places > MAX_DECIMAL_PLACES:
                raise MonetaryFormatError(ErrorTemplate.invalid_format_specifier(specifier))
            pos = len(spec)

    if pos != len(spec):
        raise MonetaryFormatError(ErrorTemplate.invalid_format_specifier(specifier))

    return FormatSpecifier(currency_style, grouped, decimals_style, decimal_places)
