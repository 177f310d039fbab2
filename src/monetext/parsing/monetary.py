"""Monetary text parsing.

Parses free-form monetary text ("USD 1,234.56", "(1.234,56 €)", "-$100")
into a MonetaryValue. The text is scanned in passes:

    1. trailing NUL removal and whitespace trimming (per style)
    2. parenthesis negative notation, with an optional indicator outside
    3. leading signs and currency indicator
    4. trailing signs and currency indicator
    5. the numeric body, read with the locale's currency rules
    6. indicator resolution against the registry

At most one sign and one currency indicator are accepted; a second one
anywhere fails the parse.

Malformed text is reported as data, never raised. Only configuration
problems (registry contents the style cannot support) raise.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from monetext.constants import NARROW_NBSP
from monetext.diagnostics import Diagnostic, ErrorTemplate, MonetaryParseError
from monetext.money import MonetaryValue
from monetext.parsing.resolver import resolve_indicator
from monetext.parsing.styles import MonetaryStyles
from monetext.runtime.locale_context import LocaleContext
from monetext.runtime.number_rules import NumberRules, derive_rules

if TYPE_CHECKING:
    from monetext.currency import CurrencyRegistry

__all__ = ["parse_monetary", "parse_monetary_value"]

_DIGITS = frozenset("0123456789")


def _is_break_char(ch: str) -> bool:
    """Characters that end a currency indicator run (besides signs)."""
    return ch in _DIGITS or (ch.isspace() and ch != NARROW_NBSP)


class _Scanner:
    """Mutable scan state for one parse call."""

    __slots__ = (
        "indicator",
        "is_symbol",
        "native",
        "currency_rules",
        "search_decimal",
        "sign",
        "style",
        "text",
    )

    def __init__(
        self,
        text: str,
        style: MonetaryStyles,
        native: NumberRules,
        currency_rules: NumberRules,
    ) -> None:
        self.text = text
        self.style = style
        self.native = native
        self.currency_rules = currency_rules
        self.sign = 0
        self.indicator: str | None = None
        self.is_symbol: bool | None = None
        # The quirk locale writes its currency symbol as the decimal
        # separator, so numbers start at the native separator instead.
        if currency_rules.decimal_separator_is_symbol:
            self.search_decimal = native.decimal_separator
        else:
            self.search_decimal = currency_rules.decimal_separator

    def _sign_tokens(self) -> tuple[tuple[str, int], ...]:
        tokens = [(self.native.negative_sign, -1)]
        if self.native.positive_sign:
            tokens.append((self.native.positive_sign, 1))
        return tuple(tokens)

    def _sign_at_start(self, s: str, pos: int = 0) -> tuple[str, int] | None:
        for token, value in self._sign_tokens():
            if s.startswith(token, pos):
                return token, value
        return None

    def _sign_at_end(self, s: str, end: int | None = None) -> tuple[str, int] | None:
        head = s if end is None else s[:end]
        for token, value in self._sign_tokens():
            if head.endswith(token):
                return token, value
        return None

    def _starts_with_number(self, s: str) -> bool:
        if s[0] in _DIGITS:
            return True
        decimal = self.search_decimal
        return (
            s.startswith(decimal) and len(s) > len(decimal) and s[len(decimal)] in _DIGITS
        )

    def _ends_with_number(self, s: str) -> bool:
        if s[-1] in _DIGITS:
            return True
        decimal = self.search_decimal
        return (
            s.endswith(decimal) and len(s) > len(decimal) and s[-len(decimal) - 1] in _DIGITS
        )

    def parentheses(self) -> bool:
        s = self.text
        if not self.style.allow_parentheses or len(s) < 3:
            return True

        if s[0] == "(":
            close = s.rfind(")")
            if close < 0:
                return False
            outside = s[close + 1 :]
            if outside:
                indicator = outside.lstrip()
                if not indicator:
                    return False
                self.indicator = indicator
                self.is_symbol = len(indicator) == len(outside)
            self.text = s[1:close]
            self.sign = -1
        elif s[-1] == ")":
            open_ = s.find("(")
            if open_ < 0:
                return False
            outside = s[:open_]
            if outside:
                indicator = outside.rstrip()
                if not indicator:
                    return False
                self.indicator = indicator
                self.is_symbol = len(indicator) == len(outside)
            self.text = s[open_ + 1 : -1]
            self.sign = -1
        return True

    def leading(self) -> bool:
        s = self.text
        only_symbols = False
        while s and not self._starts_with_number(s):
            if s[0].isspace():
                return False
            sign = self._sign_at_start(s)
            if sign is not None:
                token, value = sign
                if not self.style.allow_leading_sign or self.sign != 0:
                    return False
                self.sign = value
                only_symbols = True
                s = s[len(token) :]
            else:
                if self.indicator is not None:
                    return False
                end = 1
                while (
                    end < len(s)
                    and not _is_break_char(s[end])
                    and self._sign_at_start(s, end) is None
                ):
                    end += 1
                self.indicator = s[:end]
                if only_symbols:
                    self.is_symbol = True
                s = s[end:]
            s = s.lstrip()
        self.text = s
        return True

    def trailing(self) -> bool:
        s = self.text
        only_symbols = False
        while s and not self._ends_with_number(s):
            if s[-1].isspace():
                return False
            sign = self._sign_at_end(s)
            if sign is not None:
                token, value = sign
                if not self.style.allow_trailing_sign or self.sign != 0:
                    return False
                self.sign = value
                only_symbols = True
                s = s[: -len(token)]
            else:
                if self.indicator is not None:
                    return False
                start = len(s) - 1
                while (
                    start > 0
                    and not _is_break_char(s[start - 1])
                    and self._sign_at_end(s, start) is None
                ):
                    start -= 1
                self.indicator = s[start:]
                if only_symbols:
                    self.is_symbol = True
                s = s[:start]
            s = s.rstrip()
        self.text = s
        return True

    def amount(self) -> Decimal | None:
        s = self.text
        if not s:
            return None

        rules = self.currency_rules
        if rules.decimal_separator_is_symbol:
            if self.indicator is None:
                # The separator doubles as the local symbol: its presence
                # in the body is the indicator.
                if self.is_symbol is False or rules.decimal_separator not in s:
                    return None
                self.indicator = rules.decimal_separator
                self.is_symbol = True
            else:
                rules = self.native

        return rules.parse_amount(
            s,
            allow_decimal_point=self.style.allow_decimal_point,
            allow_thousands=self.style.allow_thousands,
        )


def _failure(
    diagnostic: Diagnostic,
    original: str,
    ctx: LocaleContext,
    indicator: str | None = None,
) -> tuple[None, MonetaryParseError]:
    return None, MonetaryParseError(
        diagnostic,
        input_value=original,
        locale_code=ctx.locale_code,
        indicator=indicator,
    )


def parse_monetary_value(
    text: str,
    style: MonetaryStyles | None,
    locale: LocaleContext | None,
    registry: CurrencyRegistry,
    *,
    detailed: bool,
) -> tuple[MonetaryValue | None, MonetaryParseError | None]:
    """Parse monetary text against a registry.

    Args:
        text: Text to parse
        style: Accepted layouts and indicators (default CURRENCY_CODE)
        locale: Locale conventions (default: system locale)
        registry: Currencies the indicator may resolve to
        detailed: Build a MonetaryParseError describing a failure; when
            False failures return ``(None, None)`` without building one

    Returns:
        ``(value, None)`` on success, ``(None, error_or_None)`` on failure

    Raises:
        RegistryConfigurationError: If an enabled lookup cannot work with
            the registry's codes or symbols
    """
    style = style if style is not None else MonetaryStyles.CURRENCY_CODE
    ctx = locale if locale is not None else LocaleContext.current()

    if style.allow_currency_code:
        registry.ensure_codes_parsable()
    if style.allow_local_symbol or style.allow_unambiguous_symbols:
        registry.ensure_symbols_parsable(ctx)

    if not isinstance(text, str):
        if not detailed:
            return None, None
        return _failure(ErrorTemplate.invalid_format(repr(text), ctx.locale_code), repr(text), ctx)

    original = text.rstrip("\0")
    s = original
    if style.allow_leading_white:
        s = s.lstrip()
    if style.allow_trailing_white:
        s = s.rstrip()

    native, currency_rules = derive_rules(ctx)
    scanner = _Scanner(s, style, native, currency_rules)

    if not (scanner.parentheses() and scanner.leading() and scanner.trailing()):
        if not detailed:
            return None, None
        return _failure(ErrorTemplate.invalid_format(original, ctx.locale_code), original, ctx)

    amount = scanner.amount()
    if amount is None:
        if not detailed:
            return None, None
        return _failure(ErrorTemplate.amount_invalid(original, ctx.locale_code), original, ctx)

    if scanner.sign < 0 and amount:
        amount = amount.copy_negate()

    indicator = scanner.indicator
    if indicator is None:
        if not detailed:
            return None, None
        return _failure(ErrorTemplate.indicator_missing(original, ctx.locale_code), original, ctx)

    resolution = resolve_indicator(indicator, scanner.is_symbol, style, ctx, registry)
    if resolution.currency is not None:
        return MonetaryValue(amount, resolution.currency), None

    if not detailed:
        return None, None
    diagnostic = ErrorTemplate.indicator_unresolved(
        original, ctx.locale_code, indicator, resolution.failure_descriptions()
    )
    return None, MonetaryParseError(
        diagnostic,
        input_value=original,
        locale_code=ctx.locale_code,
        indicator=indicator,
        local_symbol_error=resolution.local_symbol_error,
        currency_code_error=resolution.currency_code_error,
        unambiguous_symbol_error=resolution.unambiguous_symbol_error,
    )


def parse_monetary(
    value: str,
    locale: str | LocaleContext,
    *,
    registry: CurrencyRegistry,
    style: MonetaryStyles | None = None,
) -> tuple[MonetaryValue | None, tuple[MonetaryParseError, ...]]:
    """Parse locale-formatted monetary text.

    No exceptions are raised for malformed text. Errors are returned in the
    tuple.

    Args:
        value: Monetary text (e.g., "USD 1,234.56", "1.234,56 €")
        locale: Locale code (e.g., "en_US", "de-DE") or LocaleContext
        registry: Currencies the indicator may resolve to
        style: Accepted layouts and indicators (default CURRENCY_CODE)

    Returns:
        Tuple of (result, errors):
        - result: MonetaryValue, or None if parsing failed
        - errors: Tuple of MonetaryParseError (empty on success)

    Raises:
        RegistryConfigurationError: If an enabled lookup cannot work with
            the registry's codes or symbols

    Examples:
        >>> registry = CurrencyRegistry.from_codes("Majors", ["USD", "EUR"])
        >>> result, errors = parse_monetary("USD 1,234.56", "en_US", registry=registry)
        >>> result.amount, result.currency.code
        (Decimal('1234.56'), 'USD')

        >>> result, errors = parse_monetary("$", "en_US", registry=registry)
        >>> result is None, errors[0].message
        (True, "The input string '$' does not contain a valid amount.")
    """
    ctx = locale if isinstance(locale, LocaleContext) else LocaleContext.create(locale)
    result, error = parse_monetary_value(value, style, ctx, registry, detailed=True)
    if error is not None:
        return None, (error,)
    return result, ()
