"""Currency registry.

A CurrencyRegistry is an immutable, named set of currencies with
case-insensitive code lookup, region currency lookup, and a per-locale
symbol index used to resolve unambiguous symbols. It is also the entry
point for parsing text into monetary values.

Registries are built by callers from explicit currency lists; invariant
violations in their codes or symbols surface at first parse, not here.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, NamedTuple

from monetext.core.memo import BuildOnceCache
from monetext.currency.models import Currency, check_symbol_or_code
from monetext.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    MonetaryParseError,
    RegistryConfigurationError,
)

if TYPE_CHECKING:
    from monetext.money import MonetaryValue
    from monetext.parsing.styles import MonetaryStyles
    from monetext.runtime.locale_context import LocaleContext

__all__ = ["CurrencyRegistry"]

logger = logging.getLogger(__name__)


class _SymbolIndex(NamedTuple):
    by_symbol: dict[str, tuple[Currency, ...]]
    error: Diagnostic | None


class CurrencyRegistry:
    """Named, immutable set of currencies.

    Example:
        >>> registry = CurrencyRegistry.from_codes("Majors", ["USD", "EUR", "JPY"])
        >>> registry["usd"].code
        'USD'
        >>> value = registry.parse_money("USD 1,234.56")
        >>> value.amount
        Decimal('1234.56')
    """

    __slots__ = ("_by_code", "_code_error", "_currencies", "_name", "_symbol_indexes")

    def __init__(self, name: str, currencies: Iterable[Currency]) -> None:
        """Create a registry.

        Args:
            name: Registry name used in diagnostics
            currencies: Currencies to register; codes must be unique
                (case-insensitive)

        Raises:
            ValueError: If name is empty or a code is registered twice
        """
        if not name or not name.strip():
            msg = "Currency registry name must not be empty"
            raise ValueError(msg)

        by_code: dict[str, Currency] = {}
        code_error: Diagnostic | None = None
        for currency in currencies:
            key = currency.code.upper()
            if key in by_code:
                msg = (
                    f"Currency registry '{name}' already contains a currency "
                    f"with code '{currency.code}'"
                )
                raise ValueError(msg)
            by_code[key] = currency
            if code_error is None:
                reason = check_symbol_or_code(currency.code)
                if reason is not None:
                    code_error = ErrorTemplate.registry_invalid_code(name, currency.code, reason)

        self._name = name
        self._by_code = by_code
        self._currencies = tuple(sorted(by_code.values(), key=lambda c: c.code))
        self._code_error = code_error
        self._symbol_indexes: BuildOnceCache[LocaleContext, _SymbolIndex] = BuildOnceCache()

    @classmethod
    def from_codes(cls, name: str, codes: Iterable[str]) -> CurrencyRegistry:
        """Create a registry of CLDR-backed currencies for the listed codes."""
        return cls(name, (Currency.from_cldr(code) for code in codes))

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        return len(self._currencies)

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Currency):
            return self._by_code.get(item.code.upper()) is item
        if isinstance(item, str):
            return item.upper() in self._by_code
        return False

    def __getitem__(self, code: str) -> Currency:
        currency = self.get_currency(code)
        if currency is None:
            msg = f"Currency code '{code}' not found in registry '{self._name}'"
            raise KeyError(msg)
        return currency

    def __repr__(self) -> str:
        return f"CurrencyRegistry(name={self._name!r}, currencies={len(self._currencies)})"

    def get_currency(self, code: str) -> Currency | None:
        """Look up a currency by code (case-insensitive)."""
        return self._by_code.get(code.upper())

    def get_local_currency(self, ctx: LocaleContext) -> Currency | None:
        """Return this registry's currency for the context's region, if any."""
        if ctx.region_currency is None:
            return None
        return self.get_currency(ctx.region_currency)

    def get_currencies_by_symbol(self, symbol: str, ctx: LocaleContext) -> tuple[Currency, ...]:
        """Return every currency whose localized symbol is ``symbol``.

        Raises:
            RegistryConfigurationError: If any currency's localized symbol
                for this locale cannot be parsed
        """
        return self._symbol_index(ctx).by_symbol.get(symbol, ())

    def ensure_symbols_parsable(self, ctx: LocaleContext) -> None:
        """Raise if any localized symbol for ctx could never be matched in text.

        Builds (once) and validates the symbol index for the locale.

        Raises:
            RegistryConfigurationError: If a symbol is empty or contains
                digits, whitespace or sign characters
        """
        self._symbol_index(ctx)

    def ensure_codes_parsable(self) -> None:
        """Raise if any registered code could never be matched in text.

        Raises:
            RegistryConfigurationError: If a code contains digits,
                whitespace or sign characters
        """
        if self._code_error is not None:
            raise RegistryConfigurationError(self._code_error)

    def _symbol_index(self, ctx: LocaleContext) -> _SymbolIndex:
        index = self._symbol_indexes.get_or_build(ctx, lambda: self._build_symbol_index(ctx))
        if index.error is not None:
            raise RegistryConfigurationError(index.error)
        return index

    def _build_symbol_index(self, ctx: LocaleContext) -> _SymbolIndex:
        grouped: dict[str, list[Currency]] = {}
        error: Diagnostic | None = None
        for currency in self._currencies:
            symbol = currency.get_localized_symbol(ctx)
            if error is None:
                reason = check_symbol_or_code(symbol)
                if reason is not None:
                    error = ErrorTemplate.registry_invalid_symbol(
                        self._name, ctx.locale_code, currency.code, symbol, reason
                    )
            grouped.setdefault(symbol, []).append(currency)

        logger.debug(
            "Built symbol index for registry '%s', locale '%s': %d symbols",
            self._name,
            ctx.locale_code,
            len(grouped),
        )
        return _SymbolIndex({s: tuple(c) for s, c in grouped.items()}, error)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def try_parse_money(
        self,
        text: str,
        style: MonetaryStyles | None = None,
        locale: LocaleContext | None = None,
    ) -> MonetaryValue | None:
        """Parse text into a monetary value, returning None on failure.

        No diagnostic message is built on this path.

        Args:
            text: Text such as "USD 1,234.56" or "(1.234,56 €)"
            style: Accepted layouts and indicators (default CURRENCY_CODE)
            locale: Locale conventions (default: system locale)

        Raises:
            RegistryConfigurationError: If the registry cannot support the
                lookups enabled by style
        """
        from monetext.parsing.monetary import parse_monetary_value  # noqa: PLC0415 - circular

        value, _ = parse_monetary_value(text, style, locale, self, detailed=False)
        return value

    def try_parse_money_detailed(
        self,
        text: str,
        style: MonetaryStyles | None = None,
        locale: LocaleContext | None = None,
    ) -> tuple[MonetaryValue | None, MonetaryParseError | None]:
        """Parse text, returning the value or a detailed error.

        Returns:
            ``(value, None)`` on success, ``(None, error)`` on failure. The
            error message lists the extracted indicator and the reason each
            attempted lookup failed.
        """
        from monetext.parsing.monetary import parse_monetary_value  # noqa: PLC0415 - circular

        return parse_monetary_value(text, style, locale, self, detailed=True)

    def parse_money(
        self,
        text: str,
        style: MonetaryStyles | None = None,
        locale: LocaleContext | None = None,
    ) -> MonetaryValue:
        """Parse text into a monetary value.

        Raises:
            MonetaryParseError: If text cannot be parsed
            RegistryConfigurationError: If the registry cannot support the
                lookups enabled by style
        """
        value, error = self.try_parse_money_detailed(text, style, locale)
        if error is not None:
            raise error
        assert value is not None  # Type narrowing: no error means a value
        return value
