"""Tests for MonetaryStyles switches and currency indicator resolution.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from monetext import MonetaryStyles
from monetext.currency import Currency, CurrencyRegistry
from monetext.diagnostics import DiagnosticCode, ErrorCategory, StyleConfigurationError
from monetext.parsing import (
    CurrencyCodeError,
    LocalSymbolError,
    Resolution,
    UnambiguousSymbolError,
    resolve_indicator,
)
from monetext.runtime import LocaleContext


class TestMonetaryStyles:
    """Preset composition and validation."""

    def test_presets_enable_every_layout_switch(self) -> None:
        style = MonetaryStyles.CURRENCY_CODE
        assert style.allow_leading_white
        assert style.allow_trailing_white
        assert style.allow_leading_sign
        assert style.allow_trailing_sign
        assert style.allow_parentheses
        assert style.allow_decimal_point
        assert style.allow_thousands
        assert style.allow_currency_code
        assert not style.allow_local_symbol
        assert not style.allow_unambiguous_symbols

    def test_union(self) -> None:
        assert (
            MonetaryStyles.CURRENCY_CODE | MonetaryStyles.LOCAL_SYMBOL
            == MonetaryStyles.CURRENCY_CODE_OR_LOCAL_SYMBOL
        )
        assert (
            MonetaryStyles.CURRENCY_CODE | MonetaryStyles.UNAMBIGUOUS_SYMBOLS
            == MonetaryStyles.CURRENCY_CODE_OR_UNAMBIGUOUS_SYMBOLS
        )
        assert (
            MonetaryStyles.CURRENCY_CODE_OR_LOCAL_SYMBOL | MonetaryStyles.UNAMBIGUOUS_SYMBOLS
            == MonetaryStyles.ANY
        )

    def test_union_with_other_type(self) -> None:
        with pytest.raises(TypeError):
            MonetaryStyles.ANY | 1  # type: ignore[operator]

    def test_with_options(self) -> None:
        strict = MonetaryStyles.ANY.with_options(allow_parentheses=False, allow_thousands=False)
        assert not strict.allow_parentheses
        assert not strict.allow_thousands
        assert strict.allow_currency_code
        assert MonetaryStyles.ANY.allow_parentheses

    def test_no_indicator_rejected(self) -> None:
        with pytest.raises(StyleConfigurationError) as exc_info:
            MonetaryStyles(allow_leading_white=True)
        error = exc_info.value
        assert error.category is ErrorCategory.CONFIGURATION
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.STYLE_NO_INDICATOR
        assert "allow_currency_code" in error.message

    def test_with_options_revalidates(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            MonetaryStyles.CURRENCY_CODE.with_options(allow_currency_code=False)

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            MonetaryStyles.ANY.allow_thousands = False  # type: ignore[misc]


class TestResolveIndicator:
    """resolve_indicator() lookup order and failure reasons."""

    def test_code_lookup_case_insensitive(
        self, en_ctx: LocaleContext, registry: CurrencyRegistry, eur: Currency
    ) -> None:
        resolution = resolve_indicator("eur", None, MonetaryStyles.CURRENCY_CODE, en_ctx, registry)
        assert resolution == Resolution(eur)

    def test_code_not_found(self, en_ctx: LocaleContext, registry: CurrencyRegistry) -> None:
        resolution = resolve_indicator("GBP", None, MonetaryStyles.CURRENCY_CODE, en_ctx, registry)
        assert resolution.currency is None
        assert resolution.currency_code_error is CurrencyCodeError.CODE_NOT_FOUND
        assert resolution.failure_descriptions() == ["Currency code: code not found"]

    def test_symbol_shaped_skips_code(
        self, en_ctx: LocaleContext, registry: CurrencyRegistry
    ) -> None:
        resolution = resolve_indicator("USD", True, MonetaryStyles.CURRENCY_CODE, en_ctx, registry)
        assert resolution.currency_code_error is CurrencyCodeError.INDICATOR_IS_NOT_CODE

    def test_code_shaped_skips_symbols(
        self, en_ctx: LocaleContext, registry: CurrencyRegistry
    ) -> None:
        style = MonetaryStyles.LOCAL_SYMBOL | MonetaryStyles.UNAMBIGUOUS_SYMBOLS
        resolution = resolve_indicator("$", False, style, en_ctx, registry)
        assert resolution.local_symbol_error is LocalSymbolError.INDICATOR_IS_NOT_SYMBOL
        assert resolution.unambiguous_symbol_error is UnambiguousSymbolError.INDICATOR_IS_NOT_SYMBOL

    def test_local_symbol(
        self, en_ctx: LocaleContext, registry: CurrencyRegistry, usd: Currency
    ) -> None:
        resolution = resolve_indicator("$", None, MonetaryStyles.LOCAL_SYMBOL, en_ctx, registry)
        assert resolution.currency is usd

    def test_no_region_info(self, registry: CurrencyRegistry) -> None:
        resolution = resolve_indicator(
            "$", None, MonetaryStyles.LOCAL_SYMBOL, LocaleContext.invariant(), registry
        )
        assert resolution.local_symbol_error is LocalSymbolError.NO_REGION_INFO

    def test_local_currency_not_in_registry(self, en_ctx: LocaleContext, eur: Currency) -> None:
        registry = CurrencyRegistry("Euro", [eur])
        resolution = resolve_indicator("$", None, MonetaryStyles.LOCAL_SYMBOL, en_ctx, registry)
        assert resolution.local_symbol_error is LocalSymbolError.LOCAL_CURRENCY_NOT_FOUND

    def test_local_symbol_mismatch(self, en_ctx: LocaleContext, registry: CurrencyRegistry) -> None:
        resolution = resolve_indicator("€", None, MonetaryStyles.LOCAL_SYMBOL, en_ctx, registry)
        assert resolution.local_symbol_error is LocalSymbolError.SYMBOL_DOES_NOT_MATCH

    def test_local_lookup_first(self, en_ctx: LocaleContext, usd: Currency) -> None:
        """The local lookup wins even when a code of the same text exists."""
        dollar_code = Currency.create("$", 2, "Dollar Code", "D")
        registry = CurrencyRegistry("Mixed", [usd, dollar_code])
        resolution = resolve_indicator("$", None, MonetaryStyles.ANY, en_ctx, registry)
        assert resolution.currency is usd

    def test_code_before_unambiguous_symbol(self, en_ctx: LocaleContext, usd: Currency) -> None:
        odd = Currency.create("XYZ", 2, "Odd", "USD")
        registry = CurrencyRegistry("Odd", [usd, odd])
        style = MonetaryStyles.CURRENCY_CODE_OR_UNAMBIGUOUS_SYMBOLS
        assert resolve_indicator("USD", None, style, en_ctx, registry).currency is usd
        assert resolve_indicator("USD", True, style, en_ctx, registry).currency is odd

    def test_unambiguous_not_found(
        self, en_ctx: LocaleContext, registry: CurrencyRegistry
    ) -> None:
        resolution = resolve_indicator(
            "£", None, MonetaryStyles.UNAMBIGUOUS_SYMBOLS, en_ctx, registry
        )
        assert resolution.unambiguous_symbol_error is UnambiguousSymbolError.CODE_NOT_FOUND

    def test_failure_descriptions_in_lookup_order(
        self, en_ctx: LocaleContext, registry: CurrencyRegistry
    ) -> None:
        resolution = resolve_indicator("£", None, MonetaryStyles.ANY, en_ctx, registry)
        assert resolution.failure_descriptions() == [
            "Local currency symbol: symbol does not match",
            "Currency code: code not found",
            "Unambiguous currency symbol: code not found",
        ]

    def test_disabled_lookups_not_reported(
        self, en_ctx: LocaleContext, registry: CurrencyRegistry
    ) -> None:
        resolution = resolve_indicator("£", None, MonetaryStyles.LOCAL_SYMBOL, en_ctx, registry)
        assert resolution.currency_code_error is None
        assert resolution.unambiguous_symbol_error is None
