"""Currency indicator resolution.

Resolves the currency indicator extracted from parsed text to a registry
currency. Three lookups are tried in order, each only if enabled by the
parse style:

    1. Local symbol: the symbol of the locale's region currency
    2. Currency code: case-insensitive ISO code lookup
    3. Unambiguous symbol: a symbol shared by exactly one currency

The first success wins. Each failed lookup records its reason so the
parser can report every attempt.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monetext.currency import Currency, CurrencyRegistry
    from monetext.parsing.styles import MonetaryStyles
    from monetext.runtime.locale_context import LocaleContext

__all__ = [
    "CurrencyCodeError",
    "LocalSymbolError",
    "Resolution",
    "UnambiguousSymbolError",
    "resolve_indicator",
]


class LocalSymbolError(StrEnum):
    """Why the local currency symbol lookup failed."""

    INDICATOR_IS_NOT_SYMBOL = "indicator is not a symbol"
    NO_REGION_INFO = "no region info"
    LOCAL_CURRENCY_NOT_FOUND = "local currency not found"
    SYMBOL_DOES_NOT_MATCH = "symbol does not match"


class CurrencyCodeError(StrEnum):
    """Why the currency code lookup failed."""

    INDICATOR_IS_NOT_CODE = "indicator is not a code"
    CODE_NOT_FOUND = "code not found"


class UnambiguousSymbolError(StrEnum):
    """Why the unambiguous symbol lookup failed."""

    INDICATOR_IS_NOT_SYMBOL = "indicator is not a symbol"
    CODE_NOT_FOUND = "code not found"
    MULTIPLE_MATCHES_FOUND = "multiple matches found"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving a currency indicator.

    Attributes:
        currency: Resolved currency, None if every lookup failed
        local_symbol_error: Failure reason if the local lookup was attempted
        currency_code_error: Failure reason if the code lookup was attempted
        unambiguous_symbol_error: Failure reason if the unambiguous symbol
            lookup was attempted
    """

    currency: Currency | None
    local_symbol_error: LocalSymbolError | None = None
    currency_code_error: CurrencyCodeError | None = None
    unambiguous_symbol_error: UnambiguousSymbolError | None = None

    def failure_descriptions(self) -> list[str]:
        """One "<lookup>: <reason>" entry per failed lookup, in order."""
        failures: list[str] = []
        if self.local_symbol_error is not None:
            failures.append(f"Local currency symbol: {self.local_symbol_error}")
        if self.currency_code_error is not None:
            failures.append(f"Currency code: {self.currency_code_error}")
        if self.unambiguous_symbol_error is not None:
            failures.append(f"Unambiguous currency symbol: {self.unambiguous_symbol_error}")
        return failures


def _resolve_local_symbol(
    indicator: str,
    is_symbol: bool | None,
    ctx: LocaleContext,
    registry: CurrencyRegistry,
) -> Currency | LocalSymbolError:
    if is_symbol is False:
        return LocalSymbolError.INDICATOR_IS_NOT_SYMBOL
    if ctx.territory is None:
        return LocalSymbolError.NO_REGION_INFO
    local_currency = registry.get_local_currency(ctx)
    if local_currency is None:
        return LocalSymbolError.LOCAL_CURRENCY_NOT_FOUND
    if local_currency.get_localized_symbol(ctx) != indicator:
        return LocalSymbolError.SYMBOL_DOES_NOT_MATCH
    return local_currency


def _resolve_currency_code(
    indicator: str,
    is_symbol: bool | None,
    registry: CurrencyRegistry,
) -> Currency | CurrencyCodeError:
    if is_symbol is True:
        return CurrencyCodeError.INDICATOR_IS_NOT_CODE
    currency = registry.get_currency(indicator)
    if currency is None:
        return CurrencyCodeError.CODE_NOT_FOUND
    return currency


def _resolve_unambiguous_symbol(
    indicator: str,
    is_symbol: bool | None,
    ctx: LocaleContext,
    registry: CurrencyRegistry,
) -> Currency | UnambiguousSymbolError:
    if is_symbol is False:
        return UnambiguousSymbolError.INDICATOR_IS_NOT_SYMBOL
    matches = registry.get_currencies_by_symbol(indicator, ctx)
    if not matches:
        return UnambiguousSymbolError.CODE_NOT_FOUND
    if len(matches) > 1:
        return UnambiguousSymbolError.MULTIPLE_MATCHES_FOUND
    return matches[0]


def resolve_indicator(
    indicator: str,
    is_symbol: bool | None,
    style: MonetaryStyles,
    ctx: LocaleContext,
    registry: CurrencyRegistry,
) -> Resolution:
    """Resolve a currency indicator to a registry currency.

    Args:
        indicator: Indicator text extracted by the parser
        is_symbol: True if the layout marks it symbol-shaped, False if
            code-shaped, None if unknown
        style: Parse style selecting the enabled lookups
        ctx: Locale whose region and symbols apply
        registry: Currencies to resolve against

    Returns:
        Resolution with the currency, or the reason of every failed lookup

    Raises:
        RegistryConfigurationError: If a symbol lookup is enabled and the
            registry's symbols for this locale cannot be parsed
    """
    local_error: LocalSymbolError | None = None
    code_error: CurrencyCodeError | None = None

    if style.allow_local_symbol:
        local = _resolve_local_symbol(indicator, is_symbol, ctx, registry)
        if not isinstance(local, LocalSymbolError):
            return Resolution(local)
        local_error = local

    if style.allow_currency_code:
        by_code = _resolve_currency_code(indicator, is_symbol, registry)
        if not isinstance(by_code, CurrencyCodeError):
            return Resolution(by_code)
        code_error = by_code

    if style.allow_unambiguous_symbols:
        by_symbol = _resolve_unambiguous_symbol(indicator, is_symbol, ctx, registry)
        if not isinstance(by_symbol, UnambiguousSymbolError):
            return Resolution(by_symbol)
        return Resolution(None, local_error, code_error, by_symbol)

    return Resolution(None, local_error, code_error)
