"""Numeric rule sets derived from a LocaleContext.

derive_rules() turns a LocaleContext into two parallel NumberRules:

    native_rules    the locale's generic number conventions
    currency_rules  native_rules with separators, grouping, digits and
                    signs taken from the locale's currency conventions

NumberRules renders the absolute numeric body of a formatted amount and
reads it back when parsing. Derivation is pure, so results are memoized
per LocaleContext in a BuildOnceCache.

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal, localcontext

from monetext.constants import NARROW_NBSP, NBSP
from monetext.core.memo import BuildOnceCache
from monetext.runtime.locale_context import LocaleContext

__all__ = ["NumberRules", "derive_rules"]

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")

# Group separators a plain space may stand in for when parsing.
_SPACE_GROUP_SEPARATORS = frozenset({NBSP, NARROW_NBSP})


@dataclass(frozen=True, slots=True)
class NumberRules:
    """One set of numeric formatting rules.

    Attributes:
        decimal_separator: Decimal separator
        group_separator: Group separator, "" when grouping is disabled
        group_sizes: Group sizes from the decimal point outward
        decimal_digits: Default number of decimal digits
        positive_sign: Positive sign token
        negative_sign: Negative sign token
        decimal_separator_is_symbol: The local currency symbol is the
            decimal separator character (only set on currency rules)
    """

    decimal_separator: str
    group_separator: str
    group_sizes: tuple[int, ...]
    decimal_digits: int
    positive_sign: str
    negative_sign: str
    decimal_separator_is_symbol: bool = False

    def format_fixed(self, amount: Decimal, places: int, *, grouped: bool) -> str:
        """Render a non-negative amount with exactly ``places`` decimals.

        Args:
            amount: Absolute amount to render
            places: Number of decimal digits to emit
            grouped: Insert group separators into the integer part

        Returns:
            Digits with this rule set's separators, no sign
        """
        integer_digits = max(amount.adjusted() + 1, 1)
        with localcontext() as ctx:
            ctx.prec = integer_digits + places + 1
            quantized = amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
        text = format(quantized, "f")

        integer, _, fraction = text.partition(".")
        if grouped:
            integer = self._group(integer)
        if places == 0:
            return integer
        return f"{integer}{self.decimal_separator}{fraction}"

    def _group(self, digits: str) -> str:
        sizes = self.group_sizes
        if not sizes or not self.group_separator:
            return digits

        groups: list[str] = []
        end = len(digits)
        index = 0
        size = sizes[0]
        while size > 0 and end > size:
            groups.append(digits[end - size : end])
            end -= size
            if index < len(sizes) - 1:
                index += 1
                size = sizes[index]
        groups.append(digits[:end])
        return self.group_separator.join(reversed(groups))

    def parse_amount(
        self,
        text: str,
        *,
        allow_decimal_point: bool,
        allow_thousands: bool,
    ) -> Decimal | None:
        """Read an unsigned numeric body written with these rules.

        Only ASCII digits are accepted. Group separators may appear in the
        integer part after its first digit; the fraction scale is preserved
        ("100.00" reads as Decimal("100.00")).

        Args:
            text: Numeric body with sign, symbol and whitespace removed
            allow_decimal_point: Accept a decimal separator
            allow_thousands: Accept group separators

        Returns:
            Parsed amount, or None if text is not a valid numeric body
        """
        length = len(text)
        decimal = self.decimal_separator
        integer: list[str] = []
        fraction: list[str] = []
        pos = 0

        while pos < length:
            ch = text[pos]
            if ch in _DIGITS:
                integer.append(ch)
                pos += 1
                continue
            if allow_decimal_point and text.startswith(decimal, pos):
                break
            if allow_thousands and integer:
                matched = self._match_group_separator(text, pos)
                if matched:
                    pos += matched
                    continue
            return None

        if pos < length:
            pos += len(decimal)
            while pos < length and text[pos] in _DIGITS:
                fraction.append(text[pos])
                pos += 1
            if pos < length:
                return None

        if not integer and not fraction:
            return None
        if fraction:
            return Decimal(f"{''.join(integer) or '0'}.{''.join(fraction)}")
        return Decimal("".join(integer))

    def _match_group_separator(self, text: str, pos: int) -> int:
        separator = self.group_separator
        if not separator:
            return 0
        if text.startswith(separator, pos):
            return len(separator)
        if separator in _SPACE_GROUP_SEPARATORS and text[pos] == " ":
            return 1
        return 0


_RULES_CACHE: BuildOnceCache[LocaleContext, tuple[NumberRules, NumberRules]] = BuildOnceCache()


def _build_rules(ctx: LocaleContext) -> tuple[NumberRules, NumberRules]:
    number = ctx.number
    currency = ctx.currency

    native = NumberRules(
        decimal_separator=number.decimal_separator,
        group_separator=number.group_separator,
        group_sizes=number.group_sizes,
        decimal_digits=number.decimal_digits,
        positive_sign=number.positive_sign,
        negative_sign=number.negative_sign,
    )

    group_separator = currency.group_separator
    if group_separator == currency.decimal_separator:
        group_separator = ""

    altered = replace(
        native,
        decimal_separator=currency.decimal_separator,
        group_separator=group_separator,
        group_sizes=currency.group_sizes,
        decimal_digits=currency.decimal_digits,
        positive_sign=currency.positive_sign or number.positive_sign,
        negative_sign=currency.negative_sign or number.negative_sign,
        decimal_separator_is_symbol=currency.decimal_separator_is_symbol,
    )
    logger.debug("Derived number rules for locale '%s'", ctx.locale_code)
    return native, altered


def derive_rules(ctx: LocaleContext) -> tuple[NumberRules, NumberRules]:
    """Return ``(native_rules, currency_rules)`` for a locale context.

    currency_rules copies native_rules and overwrites decimal separator,
    group separator, group sizes, decimal digits and signs from the
    context's currency conventions. A currency group separator equal to
    the decimal separator is cleared so amounts stay unambiguous.

    Thread-safe; built once per context and shared.

    Example:
        >>> native, currency = derive_rules(LocaleContext.create("en-US"))
        >>> currency.format_fixed(Decimal("1234.5"), 2, grouped=True)
        '1,234.50'
    """
    return _RULES_CACHE.get_or_build(ctx, lambda: _build_rules(ctx))
