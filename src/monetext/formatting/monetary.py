"""Monetary value formatting.

Renders a MonetaryValue through a currency pattern row ("$n", "($n)",
"$ -n", ...) into a bounded FormatBuffer. format_money() retries with a
doubled buffer until the rendering fits; try_format_money() reports a
too-small buffer to the caller instead.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING

from monetext.constants import (
    FORMAT_BUFFER_SIZE,
    INTERNATIONAL_CODE_FIRST_LANGUAGES,
    NBSP,
)
from monetext.formatting.buffer import FormatBuffer
from monetext.formatting.specifier import CurrencyStyle, DecimalsStyle, FormatSpecifier
from monetext.runtime.locale_context import LocaleContext
from monetext.runtime.number_rules import derive_rules
from monetext.runtime.patterns import (
    NEGATIVE_EMPTY_SYMBOL_PATTERNS,
    NEGATIVE_INTERNATIONAL_PATTERNS,
    NEGATIVE_PATTERNS,
    NEGATIVE_REVERSE_INTERNATIONAL_PATTERNS,
    POSITIVE_EMPTY_SYMBOL_PATTERN,
    POSITIVE_INTERNATIONAL_PATTERN,
    POSITIVE_PATTERNS,
    POSITIVE_REVERSE_INTERNATIONAL_PATTERN,
)

if TYPE_CHECKING:
    from monetext.money import MonetaryValue

__all__ = ["format_money", "try_format_money"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Rendering:
    """Everything needed to emit one formatted value."""

    pattern: str
    symbol: str
    number: str
    negative_sign: str

    def write_to(self, destination: FormatBuffer) -> bool:
        """Emit the pattern into destination; on overflow leave it empty."""
        destination.reset()
        for token in self.pattern:
            match token:
                case "n":
                    piece = self.number
                case "$":
                    piece = self.symbol
                case "-":
                    piece = self.negative_sign
                case " ":
                    piece = NBSP
                case _:
                    piece = token
            if not destination.write(piece):
                destination.reset()
                return False
        return True


def _natural_digits(amount: Decimal) -> int:
    """Decimal digits needed to show amount exactly (trailing zeros ignored)."""
    if not amount:
        return 0
    # Read from the digit tuple: normalize() would round past 28 digits.
    _, digits, exponent = amount.as_tuple()
    assert isinstance(exponent, int)  # Type narrowing: amount is finite
    trailing_zeros = len(digits) - len("".join(map(str, digits)).rstrip("0"))
    return max(-(exponent + trailing_zeros), 0)


def _round(amount: Decimal, places: int, rounding: str) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(amount.adjusted() + 1, 1) + places + 1
        return amount.quantize(Decimal(1).scaleb(-places), rounding=rounding)


def _prepare(value: MonetaryValue, spec: FormatSpecifier, ctx: LocaleContext) -> _Rendering:
    currency = value.currency
    native, currency_rules = derive_rules(ctx)
    conventions = ctx.currency

    amount = value.amount.copy_abs()
    negative = value.amount < 0

    decimals_style = spec.decimals_style
    if decimals_style is None or decimals_style is DecimalsStyle.SHORTEST:
        digits = _natural_digits(amount)
        if decimals_style is DecimalsStyle.SHORTEST and digits == 0:
            places = 0
        else:
            places = max(digits, currency.decimal_digits)
    else:
        places = (
            spec.decimal_places if spec.decimal_places is not None else currency.decimal_digits
        )
        rounding = ROUND_HALF_EVEN if decimals_style is DecimalsStyle.BANKERS else ROUND_HALF_UP
        amount = _round(amount, places, rounding)
        negative = negative and bool(amount)

    currency_style = spec.currency_style
    if currency_style is CurrencyStyle.LOCAL:
        if ctx.region_currency == currency.code:
            currency_style = CurrencyStyle.SYMBOL
        else:
            currency_style = CurrencyStyle.GENERAL

    # Body rules: the quirk locale's currency rules would print the symbol
    # as the decimal separator, so its native rules are used instead.
    rules = native if currency_rules.decimal_separator_is_symbol else currency_rules

    if currency_style is CurrencyStyle.SYMBOL:
        symbol = currency.get_localized_symbol(ctx)
        if symbol == conventions.decimal_separator:
            # The separator itself shows the currency.
            rules = currency_rules
            symbol = ""
            if negative:
                pattern = NEGATIVE_EMPTY_SYMBOL_PATTERNS[conventions.negative_pattern]
            else:
                pattern = POSITIVE_EMPTY_SYMBOL_PATTERN
            if places == 0:
                places = currency.decimal_digits or 2
        elif negative:
            pattern = NEGATIVE_PATTERNS[conventions.negative_pattern]
        else:
            pattern = POSITIVE_PATTERNS[conventions.positive_pattern]
    else:
        symbol = currency.code
        reverse = currency_style is CurrencyStyle.REVERSE_INTERNATIONAL or (
            currency_style is CurrencyStyle.GENERAL
            and ctx.language not in INTERNATIONAL_CODE_FIRST_LANGUAGES
        )
        if reverse:
            if negative:
                pattern = NEGATIVE_REVERSE_INTERNATIONAL_PATTERNS[conventions.negative_pattern]
            else:
                pattern = POSITIVE_REVERSE_INTERNATIONAL_PATTERN
        elif negative:
            pattern = NEGATIVE_INTERNATIONAL_PATTERNS[conventions.negative_pattern]
        else:
            pattern = POSITIVE_INTERNATIONAL_PATTERN

    number = rules.format_fixed(amount, places, grouped=spec.grouped)
    return _Rendering(pattern, symbol, number, native.negative_sign)


def try_format_money(
    value: MonetaryValue,
    destination: FormatBuffer,
    format_spec: str | None = None,
    locale: LocaleContext | None = None,
) -> tuple[bool, int]:
    """Format a monetary value into a caller-owned buffer.

    The buffer is cleared first. If the rendering does not fit, the buffer
    is left empty and ``(False, 0)`` is returned; retry with
    ``destination.grown()``.

    Args:
        value: Value to format; the default value writes nothing
        destination: Output buffer
        format_spec: ``[G|I|R|C|L][N|D][*|B[n]|A[n]]`` (default "G")
        locale: Locale conventions (default: system locale)

    Returns:
        ``(success, chars_written)``

    Raises:
        MonetaryFormatError: If format_spec is invalid
    """
    spec = FormatSpecifier.parse(format_spec)
    destination.reset()
    if value.is_default:
        return True, 0

    ctx = locale if locale is not None else LocaleContext.current()
    if not _prepare(value, spec, ctx).write_to(destination):
        return False, 0
    return True, len(destination)


def format_money(
    value: MonetaryValue,
    format_spec: str | None = None,
    locale: LocaleContext | None = None,
) -> str:
    """Format a monetary value as text.

    Args:
        value: Value to format; the default value formats as ""
        format_spec: ``[G|I|R|C|L][N|D][*|B[n]|A[n]]`` (default "G")
        locale: Locale conventions (default: system locale)

    Returns:
        Formatted text

    Raises:
        MonetaryFormatError: If format_spec is invalid

    Examples:
        >>> ctx = LocaleContext.create("en-US")
        >>> jpy = Currency.from_cldr("JPY")
        >>> format_money(MonetaryValue.create(1000, jpy), "I*", ctx)
        'JPY\\xa01,000'
    """
    spec = FormatSpecifier.parse(format_spec)
    if value.is_default:
        return ""

    ctx = locale if locale is not None else LocaleContext.current()
    rendering = _prepare(value, spec, ctx)

    buffer = FormatBuffer(FORMAT_BUFFER_SIZE)
    while not rendering.write_to(buffer):
        logger.debug(
            "Format buffer of %d chars too small, retrying with %d",
            buffer.capacity,
            buffer.capacity * 2,
        )
        buffer = buffer.grown()
    return buffer.getvalue()
