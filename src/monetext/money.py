"""Monetary value: an exact decimal amount tied to a currency.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import TYPE_CHECKING

from monetext.currency.models import Currency
from monetext.formatting.monetary import format_money, try_format_money

if TYPE_CHECKING:
    from monetext.currency.registry import CurrencyRegistry
    from monetext.diagnostics import MonetaryParseError
    from monetext.formatting.buffer import FormatBuffer
    from monetext.parsing.styles import MonetaryStyles
    from monetext.runtime.locale_context import LocaleContext

__all__ = ["MonetaryValue"]


@dataclass(frozen=True, slots=True)
class MonetaryValue:
    """Immutable (amount, currency) pair.

    The default value has a zero amount and no currency; it stands for an
    absent or neutral amount and formats as an empty string. Any non-zero
    amount requires a currency.

    Attributes:
        amount: Exact decimal amount
        currency_or_default: Currency, or None for the default value

    Examples:
        >>> usd = Currency.create("USD", 2, "US Dollar", "$")
        >>> value = MonetaryValue.create(Decimal("1234.5"), usd)
        >>> value.to_string("C", LocaleContext.create("en-US"))
        '$1,234.50'
        >>> MonetaryValue.default().is_default
        True
        >>> MonetaryValue(Decimal("1"))
        Traceback (most recent call last):
            ...
        ValueError: A non-zero monetary value requires a currency, got amount 1
    """

    amount: Decimal = Decimal(0)
    currency_or_default: Currency | None = None

    def __post_init__(self) -> None:
        amount = self.amount
        if isinstance(amount, bool) or not isinstance(amount, (Decimal, int)):
            msg = f"Monetary amount must be Decimal or int, got {type(amount).__name__}"
            raise TypeError(msg)
        if isinstance(amount, int):
            amount = Decimal(amount)
            object.__setattr__(self, "amount", amount)
        if not amount.is_finite():
            msg = f"Monetary amount must be finite, got {amount}"
            raise ValueError(msg)
        if self.currency_or_default is None and amount != 0:
            msg = f"A non-zero monetary value requires a currency, got amount {amount}"
            raise ValueError(msg)

    @classmethod
    def default(cls) -> MonetaryValue:
        """The default value: zero amount, no currency."""
        return cls()

    @classmethod
    def create(cls, amount: Decimal | int, currency: Currency) -> MonetaryValue:
        """Create a value with a currency.

        Raises:
            ValueError: If currency is None
        """
        if currency is None:
            msg = "Currency is required; use create_defaultable() to allow the default value"
            raise ValueError(msg)
        return cls(amount, currency)

    @classmethod
    def create_defaultable(cls, amount: Decimal | int, currency: Currency | None) -> MonetaryValue:
        """Create a value, or the default value for a zero amount without currency.

        Raises:
            ValueError: If amount is non-zero and currency is None
        """
        if currency is None:
            return cls(amount)
        return cls(amount, currency)

    @property
    def is_default(self) -> bool:
        """True for the zero-amount, no-currency default value."""
        return self.currency_or_default is None

    @property
    def has_currency(self) -> bool:
        return self.currency_or_default is not None

    @property
    def currency(self) -> Currency:
        """The value's currency.

        Raises:
            ValueError: On the default value
        """
        if self.currency_or_default is None:
            msg = "The default monetary value has no currency"
            raise ValueError(msg)
        return self.currency_or_default

    def round_to_currency_digits(self, rounding: str = ROUND_HALF_EVEN) -> MonetaryValue:
        """Round the amount to the currency's standard decimal digits.

        Args:
            rounding: A decimal rounding mode (default banker's rounding)
        """
        currency = self.currency_or_default
        if currency is None:
            return self
        places = currency.decimal_digits
        with localcontext() as ctx:
            ctx.prec = max(self.amount.adjusted() + 1, 1) + places + 1
            amount = self.amount.quantize(Decimal(1).scaleb(-places), rounding=rounding)
        return MonetaryValue(amount, currency)

    def to_default_if_zero(self) -> MonetaryValue:
        """Return the default value if the amount is zero, else self."""
        if self.amount == 0:
            return MonetaryValue.default()
        return self

    # ------------------------------------------------------------------
    # Parsing (delegates to the registry holding the currencies)
    # ------------------------------------------------------------------

    @classmethod
    def parse(
        cls,
        text: str,
        registry: CurrencyRegistry,
        style: MonetaryStyles | None = None,
        locale: LocaleContext | None = None,
    ) -> MonetaryValue:
        """Parse text into a value.

        Raises:
            MonetaryParseError: If text cannot be parsed
        """
        return registry.parse_money(text, style, locale)

    @classmethod
    def try_parse(
        cls,
        text: str,
        registry: CurrencyRegistry,
        style: MonetaryStyles | None = None,
        locale: LocaleContext | None = None,
    ) -> MonetaryValue | None:
        """Parse text into a value, returning None on failure."""
        return registry.try_parse_money(text, style, locale)

    @classmethod
    def try_parse_detailed(
        cls,
        text: str,
        registry: CurrencyRegistry,
        style: MonetaryStyles | None = None,
        locale: LocaleContext | None = None,
    ) -> tuple[MonetaryValue | None, MonetaryParseError | None]:
        """Parse text into a value, returning a detailed error on failure."""
        return registry.try_parse_money_detailed(text, style, locale)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def to_string(self, format_spec: str | None = None, locale: LocaleContext | None = None) -> str:
        """Format the value.

        Args:
            format_spec: ``[G|I|R|C|L][N|D][*|B[n]|A[n]]`` (default "G")
            locale: Locale conventions (default: system locale)

        Raises:
            MonetaryFormatError: If format_spec is invalid
        """
        return format_money(self, format_spec, locale)

    def try_format(
        self,
        destination: FormatBuffer,
        format_spec: str | None = None,
        locale: LocaleContext | None = None,
    ) -> tuple[bool, int]:
        """Format into a caller-owned buffer.

        Returns:
            ``(True, chars_written)``, or ``(False, 0)`` if the buffer is
            too small

        Raises:
            MonetaryFormatError: If format_spec is invalid
        """
        return try_format_money(self, destination, format_spec, locale)

    def __str__(self) -> str:
        return format_money(self)

    def __format__(self, format_spec: str) -> str:
        return format_money(self, format_spec or None)
