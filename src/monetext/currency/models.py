"""Currency metadata.

A Currency is immutable metadata: ISO code, standard decimal digits, and a
localizer supplying its name and symbol for a given LocaleContext. Two
localizers are provided:

    InvariantCurrencyLocalizer  the same name and symbol for every locale
    CldrCurrencyLocalizer       names and symbols from CLDR via Babel

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

from babel import numbers as babel_numbers

from monetext.constants import (
    INVALID_SYMBOL_CHARS,
    MAX_DECIMAL_PLACES,
    NARROW_NBSP,
    ZERO_WIDTH_SPACE,
)
from monetext.runtime.locale_context import LocaleContext

if TYPE_CHECKING:
    from monetext.money import MonetaryValue

__all__ = [
    "CldrCurrencyLocalizer",
    "Currency",
    "CurrencyLocalizer",
    "InvariantCurrencyLocalizer",
    "check_symbol_or_code",
]

logger = logging.getLogger(__name__)


def check_symbol_or_code(value: str) -> str | None:
    """Check that text could ever be matched as a currency indicator.

    The parser splits indicators from amounts at digits, whitespace and
    sign characters, so a symbol or code containing any of them could
    never be recognized.

    Args:
        value: Currency symbol or code

    Returns:
        None if parsable, otherwise the reason it is not

    Example:
        >>> check_symbol_or_code("US$") is None
        True
        >>> check_symbol_or_code("F CFA")
        'Symbol/code cannot contain any numbers or whitespace.'
    """
    if not value:
        return "Symbol/code cannot be empty."
    for ch in value:
        if ch.isnumeric() or (ch.isspace() and ch != NARROW_NBSP):
            return "Symbol/code cannot contain any numbers or whitespace."
        if ch in INVALID_SYMBOL_CHARS:
            return "Symbol/code cannot contain any of the following characters: + - ( )"
    return None


class CurrencyLocalizer(Protocol):
    """Supplies localized currency names and symbols."""

    def get_name(self, currency: Currency, ctx: LocaleContext) -> str: ...

    def get_symbol(self, currency: Currency, ctx: LocaleContext) -> str: ...


@dataclass(frozen=True, slots=True)
class InvariantCurrencyLocalizer:
    """Localizer returning the same name and symbol for every locale."""

    name: str
    symbol: str

    def get_name(self, currency: Currency, ctx: LocaleContext) -> str:  # noqa: ARG002
        return self.name

    def get_symbol(self, currency: Currency, ctx: LocaleContext) -> str:  # noqa: ARG002
        return self.symbol


@dataclass(frozen=True, slots=True)
class CldrCurrencyLocalizer:
    """Localizer reading names and symbols from CLDR via Babel.

    CLDR gives some currencies a zero-width space as symbol where the
    locale writes the symbol as its currency decimal separator; that
    separator is returned instead. Under "$" conventions the Cape Verdean
    escudo then reads "1 123$45". CLDR kea_CV data gives "," as currency
    separator, so there "1 123,45" is the escudo with no separate mark.
    Symbols the parser could never match (digits, whitespace, sign
    characters) are replaced by the ISO code.
    """

    def get_name(self, currency: Currency, ctx: LocaleContext) -> str:
        return babel_numbers.get_currency_name(currency.code, locale=ctx.symbol_locale)

    def get_symbol(self, currency: Currency, ctx: LocaleContext) -> str:
        symbol = babel_numbers.get_currency_symbol(currency.code, ctx.symbol_locale)
        if symbol == ZERO_WIDTH_SPACE:
            return ctx.currency.decimal_separator
        if check_symbol_or_code(symbol) is not None:
            logger.debug(
                "CLDR symbol %r for %s in '%s' is not parsable, using the code",
                symbol,
                currency.code,
                ctx.locale_code,
            )
            return currency.code
        return symbol


_CLDR_LOCALIZER = CldrCurrencyLocalizer()


@dataclass(frozen=True, slots=True, eq=False)
class Currency:
    """Immutable currency metadata.

    Currencies compare by identity: two Currency objects with the same
    code from different registries are different currencies.

    Attributes:
        code: ISO 4217 (or custom) currency code
        decimal_digits: Standard number of decimal digits (0-28)
        localizer: Source of localized names and symbols

    Example:
        >>> usd = Currency.create("USD", 2, "US Dollar", "$")
        >>> usd.symbol
        '$'
        >>> jpy = Currency.from_cldr("JPY")
        >>> jpy.decimal_digits
        0
    """

    code: str
    decimal_digits: int
    localizer: CurrencyLocalizer = field(repr=False)

    def __post_init__(self) -> None:
        if not self.code or self.code.strip() != self.code:
            msg = (
                "Currency code must be non-empty without surrounding whitespace, "
                f"got {self.code!r}"
            )
            raise ValueError(msg)
        if not 0 <= self.decimal_digits <= MAX_DECIMAL_PLACES:
            msg = (
                f"Currency decimal_digits must be between 0 and {MAX_DECIMAL_PLACES}, "
                f"got {self.decimal_digits}"
            )
            raise ValueError(msg)

    @classmethod
    def create(cls, code: str, decimal_digits: int, name: str, symbol: str) -> Currency:
        """Create a currency with the same name and symbol in every locale."""
        return cls(code, decimal_digits, InvariantCurrencyLocalizer(name, symbol))

    @classmethod
    def from_cldr(cls, code: str) -> Currency:
        """Create a currency whose digits, names and symbols come from CLDR.

        Args:
            code: ISO 4217 currency code (case-insensitive)
        """
        code = code.upper()
        return cls(code, babel_numbers.get_currency_precision(code), _CLDR_LOCALIZER)

    @property
    def name(self) -> str:
        """Culture-neutral currency name."""
        return self.localizer.get_name(self, LocaleContext.invariant())

    @property
    def symbol(self) -> str:
        """Culture-neutral currency symbol."""
        return self.localizer.get_symbol(self, LocaleContext.invariant())

    @property
    def minor_unit(self) -> MonetaryValue:
        """Smallest amount representable in this currency's standard digits."""
        from monetext.money import MonetaryValue  # noqa: PLC0415 - circular

        return MonetaryValue.create(Decimal(1).scaleb(-self.decimal_digits), self)

    def get_localized_name(self, ctx: LocaleContext) -> str:
        """Currency name for a locale."""
        return self.localizer.get_name(self, ctx)

    def get_localized_symbol(self, ctx: LocaleContext) -> str:
        """Currency symbol for a locale."""
        return self.localizer.get_symbol(self, ctx)

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"
