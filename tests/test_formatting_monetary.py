"""Tests for monetary value formatting.

Covers format_money() and try_format_money() across currency styles,
decimal styles, locale patterns, the Cape Verdean decimal-symbol layout
and buffer growth.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest

from monetext import (
    FormatBuffer,
    MonetaryFormatError,
    MonetaryStyles,
    MonetaryValue,
    parse_monetary,
)
from monetext.constants import FORMAT_BUFFER_SIZE, NBSP
from monetext.currency import Currency, CurrencyRegistry
from monetext.formatting import format_money, try_format_money
from monetext.runtime import LocaleContext


def _money(amount: str | int, currency: Currency) -> MonetaryValue:
    return MonetaryValue.create(Decimal(amount), currency)


class TestGeneralStyle:
    """Default "G" specifier: code before the amount in English."""

    def test_positive_uses_currency_digits(self, en_ctx: LocaleContext, usd: Currency) -> None:
        """Whole amounts get the currency's standard digits."""
        assert format_money(_money(1000, usd), None, en_ctx) == f"USD{NBSP}1,000.00"

    def test_negative_keeps_extra_digits(self, en_ctx: LocaleContext, usd: Currency) -> None:
        """Negative pattern 0 renders parentheses; natural digits are kept."""
        value = _money("-1000.1234", usd)
        assert format_money(value, None, en_ctx) == f"USD{NBSP}(1,000.1234)"

    def test_empty_specifier_is_general(self, en_ctx: LocaleContext, usd: Currency) -> None:
        assert format_money(_money(5, usd), "", en_ctx) == format_money(_money(5, usd), "G", en_ctx)

    def test_non_english_places_code_after(self, fr_ctx: LocaleContext, cad: Currency) -> None:
        """General style in French reverses the code; D disables grouping."""
        assert format_money(_money(1000, cad), "D", fr_ctx) == f"1000.00{NBSP}CAD"

    @pytest.mark.parametrize("language", ["en", "ga", "lv", "mt"])
    def test_code_first_languages(
        self, en_ctx: LocaleContext, usd: Currency, language: str
    ) -> None:
        ctx = replace(en_ctx, language=language)
        assert format_money(_money(1, usd), "G", ctx) == f"USD{NBSP}1.00"


class TestInternationalStyles:
    """I and R specifiers."""

    def test_international_shortest_jpy(self, en_ctx: LocaleContext, jpy: Currency) -> None:
        assert format_money(_money(1000, jpy), "I*", en_ctx) == f"JPY{NBSP}1,000"

    def test_international_in_french(self, fr_ctx: LocaleContext, eur: Currency) -> None:
        """I always puts the code first, whatever the language."""
        assert format_money(_money(1234, eur), "I*", fr_ctx) == f"EUR{NBSP}1,234"

    def test_reverse_international(self, fr_ctx: LocaleContext, eur: Currency) -> None:
        assert format_money(_money(100, eur), "R", fr_ctx) == f"100.00{NBSP}EUR"

    def test_reverse_international_away_from_zero(
        self, fr_ctx: LocaleContext, usd: Currency
    ) -> None:
        assert format_money(_money(1234, usd), "RA", fr_ctx) == f"1,234.00{NBSP}USD"

    def test_reverse_negative_uses_row_sign_style(
        self, fr_ctx: LocaleContext, eur: Currency
    ) -> None:
        """Negative pattern 8 ("-n $") keeps its leading minus for codes."""
        assert format_money(_money(-5, eur), "R", fr_ctx) == f"-5.00{NBSP}EUR"

    def test_international_negative_parentheses(
        self, en_ctx: LocaleContext, usd: Currency
    ) -> None:
        assert format_money(_money(-5, usd), "I", en_ctx) == f"USD{NBSP}(5.00)"


class TestSymbolStyle:
    """C and L specifiers."""

    def test_symbol_positive(self, en_ctx: LocaleContext, usd: Currency) -> None:
        assert format_money(_money(100, usd), "C", en_ctx) == "$100.00"

    def test_symbol_negative_parentheses(self, en_ctx: LocaleContext, usd: Currency) -> None:
        assert format_money(_money("-1234.5", usd), "C", en_ctx) == "($1,234.50)"

    def test_symbol_after_amount(self, fr_ctx: LocaleContext, eur: Currency) -> None:
        assert format_money(_money("1234.5", eur), "C", fr_ctx) == f"1,234.50{NBSP}€"

    def test_symbol_negative_minus(self, fr_ctx: LocaleContext, eur: Currency) -> None:
        assert format_money(_money(-5, eur), "C", fr_ctx) == f"-5.00{NBSP}€"

    def test_local_style_for_region_currency(self, en_ctx: LocaleContext, usd: Currency) -> None:
        """L renders the region's own currency with its symbol."""
        assert format_money(_money(100, usd), "L", en_ctx) == "$100.00"

    def test_local_style_for_foreign_currency(self, en_ctx: LocaleContext, eur: Currency) -> None:
        """L falls back to the general style for other currencies."""
        assert format_money(_money(100, eur), "L", en_ctx) == f"EUR{NBSP}100.00"


class TestDecimalsStyle:
    """Default, shortest and rounding decimal styles."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            ("100", f"USD{NBSP}100"),
            ("100.4", f"USD{NBSP}100.40"),
            ("100.4123", f"USD{NBSP}100.4123"),
            ("100.000", f"USD{NBSP}100"),
        ],
    )
    def test_shortest(
        self, en_ctx: LocaleContext, usd: Currency, amount: str, expected: str
    ) -> None:
        assert format_money(_money(amount, usd), "*", en_ctx) == expected

    def test_default_never_hides_digits(self, en_ctx: LocaleContext, usd: Currency) -> None:
        assert format_money(_money("0.125", usd), None, en_ctx) == f"USD{NBSP}0.125"

    @pytest.mark.parametrize(
        ("specifier", "amount"),
        [
            ("I", "1234567890123456789012345678.915"),
            ("I*", "1234567890123456789012345678.9150"),
            ("I", "-98765432109876543210987654321.0001"),
        ],
    )
    def test_long_amounts_not_rounded(
        self,
        en_ctx: LocaleContext,
        usd: Currency,
        registry: CurrencyRegistry,
        specifier: str,
        amount: str,
    ) -> None:
        """Amounts beyond 28 significant digits keep every decimal."""
        text = format_money(_money(amount, usd), specifier, en_ctx)
        value, errors = parse_monetary(
            text, en_ctx, registry=registry, style=MonetaryStyles.CURRENCY_CODE
        )
        assert errors == ()
        assert value is not None
        assert value.amount == Decimal(amount)

    def test_long_amount_text(self, en_ctx: LocaleContext, usd: Currency) -> None:
        value = _money("1234567890123456789012345678.915", usd)
        assert format_money(value, "I", en_ctx) == (
            f"USD{NBSP}1,234,567,890,123,456,789,012,345,678.915"
        )

    @pytest.mark.parametrize(
        ("specifier", "expected"),
        [
            ("B", f"USD{NBSP}10.00"),
            ("A", f"USD{NBSP}10.01"),
            ("B2", f"USD{NBSP}10.00"),
            ("A2", f"USD{NBSP}10.01"),
        ],
    )
    def test_rounding_boundary(
        self, en_ctx: LocaleContext, usd: Currency, specifier: str, expected: str
    ) -> None:
        """10.005 is a tie: banker's rounding goes down, away-from-zero up."""
        assert format_money(_money("10.005", usd), specifier, en_ctx) == expected

    def test_explicit_places(self, en_ctx: LocaleContext, usd: Currency) -> None:
        assert format_money(_money("1.5", usd), "IB4", en_ctx) == f"USD{NBSP}1.5000"

    def test_zero_places_rounds(self, en_ctx: LocaleContext, usd: Currency) -> None:
        assert format_money(_money("2.5", usd), "IA0", en_ctx) == f"USD{NBSP}3"
        assert format_money(_money("2.5", usd), "IB0", en_ctx) == f"USD{NBSP}2"

    def test_negative_rounding_to_zero_is_positive(
        self, en_ctx: LocaleContext, usd: Currency
    ) -> None:
        """A negative amount that rounds to zero uses the positive pattern."""
        assert format_money(_money("-0.001", usd), "CB", en_ctx) == "$0.00"

    def test_negative_rounding_is_symmetric(self, en_ctx: LocaleContext, usd: Currency) -> None:
        assert format_money(_money("-10.005", usd), "CA", en_ctx) == "($10.01)"


class TestDecimalSymbolLocale:
    """Cape Verdean layout: the local symbol is written as the separator."""

    def test_local_currency_symbol_replaces_separator(
        self, kea_ctx: LocaleContext, cve: Currency
    ) -> None:
        assert format_money(_money("1123.45", cve), "C", kea_ctx) == f"1{NBSP}123$45"

    def test_local_currency_forces_fraction(self, kea_ctx: LocaleContext, cve: Currency) -> None:
        """Zero decimal places would lose the symbol; currency digits are used."""
        assert format_money(_money(1123, cve), "C*", kea_ctx) == f"1{NBSP}123$00"

    def test_local_currency_negative(self, kea_ctx: LocaleContext, cve: Currency) -> None:
        assert format_money(_money(-5, cve), "C", kea_ctx) == "-5$00"

    def test_foreign_currency_uses_native_separator(
        self, kea_ctx: LocaleContext, eur: Currency
    ) -> None:
        assert format_money(_money("1123.45", eur), "C", kea_ctx) == f"1{NBSP}123,45{NBSP}€"

    def test_codes_use_native_separator(self, kea_ctx: LocaleContext, cve: Currency) -> None:
        assert format_money(_money("1123.45", cve), "R", kea_ctx) == f"1{NBSP}123,45{NBSP}CVE"


class TestDefaultValue:
    """The default value formats as an empty string."""

    def test_format_money_empty(self, en_ctx: LocaleContext) -> None:
        assert format_money(MonetaryValue.default(), "C", en_ctx) == ""

    def test_str_empty(self) -> None:
        assert str(MonetaryValue.default()) == ""

    def test_try_format_writes_nothing(self, en_ctx: LocaleContext) -> None:
        buffer = FormatBuffer(8)
        assert try_format_money(MonetaryValue.default(), buffer, None, en_ctx) == (True, 0)
        assert buffer.getvalue() == ""

    def test_invalid_specifier_still_raises(self) -> None:
        """Specifier validation happens before the default-value shortcut."""
        with pytest.raises(MonetaryFormatError):
            format_money(MonetaryValue.default(), "X")


class TestBoundedOutput:
    """try_format_money() capacity handling and format_money() growth."""

    def test_exact_fit(self, en_ctx: LocaleContext, usd: Currency) -> None:
        buffer = FormatBuffer(7)
        ok, written = try_format_money(_money(100, usd), buffer, "C", en_ctx)
        assert (ok, written) == (True, 7)
        assert buffer.getvalue() == "$100.00"

    def test_too_small_leaves_buffer_empty(self, en_ctx: LocaleContext, usd: Currency) -> None:
        buffer = FormatBuffer(6)
        assert try_format_money(_money(100, usd), buffer, "C", en_ctx) == (False, 0)
        assert buffer.getvalue() == ""
        assert len(buffer) == 0

    def test_retry_with_grown_buffer(self, en_ctx: LocaleContext, usd: Currency) -> None:
        buffer = FormatBuffer(4)
        value = _money("1234567.89", usd)
        while not value.try_format(buffer, "C", en_ctx)[0]:
            buffer = buffer.grown()
        assert buffer.getvalue() == "$1,234,567.89"
        assert buffer.capacity == 16

    def test_previous_contents_cleared(self, en_ctx: LocaleContext, usd: Currency) -> None:
        buffer = FormatBuffer(32)
        buffer.write("stale")
        try_format_money(_money(1, usd), buffer, "C", en_ctx)
        assert buffer.getvalue() == "$1.00"

    def test_large_output_grows_buffer(self, en_ctx: LocaleContext) -> None:
        """A render longer than the initial buffer is produced in full."""
        code = "X" * 40
        currency = Currency.create(code, 28, "Wide", "W")
        ctx = en_ctx.with_currency_conventions(group_sizes=(2,))
        value = MonetaryValue.create(Decimal("79228162514264337593543950335"), currency)

        result = format_money(value, "I", ctx)

        expected = f"{code}{NBSP}7,92,28,16,25,14,26,43,37,59,35,43,95,03,35.{'0' * 28}"
        assert result == expected
        assert len(result) > FORMAT_BUFFER_SIZE

    def test_large_output_try_format_fails_at_default_size(self, en_ctx: LocaleContext) -> None:
        currency = Currency.create("X" * 95, 2, "Wide", "W")
        buffer = FormatBuffer()
        assert try_format_money(_money(1, currency), buffer, "I", en_ctx) == (False, 0)


class TestInvalidSpecifier:
    """Invalid specifiers raise MonetaryFormatError."""

    @pytest.mark.parametrize("specifier", ["X", "GG", "B29", "A123", "*5", "C N"])
    def test_rejected(self, en_ctx: LocaleContext, usd: Currency, specifier: str) -> None:
        with pytest.raises(MonetaryFormatError, match="was invalid"):
            format_money(_money(1, usd), specifier, en_ctx)

    def test_rejected_by_try_format(self, en_ctx: LocaleContext, usd: Currency) -> None:
        with pytest.raises(MonetaryFormatError):
            try_format_money(_money(1, usd), FormatBuffer(), "Q", en_ctx)
