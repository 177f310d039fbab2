"""Locale context carrying the numeric and currency conventions of a locale.

This module provides the immutable bundle of region and number-formatting
conventions that drives both parsing and formatting. Conventions are read
from CLDR via Babel once per locale and cached.

Architecture:
    - NumberConventions: generic number separators, grouping and signs
    - CurrencyConventions: currency separators, grouping, digits and the
      positive/negative pattern indices into runtime.patterns
    - LocaleContext: immutable container plus region data (territory and
      its currency), created through LocaleContext.create()

Design Principles:
    - Explicit over implicit (every convention is a visible field)
    - Immutable by default (frozen dataclasses)
    - Thread-safe (cache operations protected by RLock)
    - Overridable (with_currency_conventions() for pinned layouts)

Python 3.13+. Uses Babel for CLDR data.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field, replace
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers
from babel.numbers import NumberPattern

from monetext.constants import (
    DEFAULT_CURRENCY_FORMAT,
    FALLBACK_LOCALE,
    MAX_DECIMAL_PLACES,
    MAX_LOCALE_CACHE_SIZE,
    ZERO_WIDTH_SPACE,
)
from monetext.locale_utils import get_babel_locale, get_system_locale, normalize_locale
from monetext.runtime.patterns import (
    NEGATIVE_PATTERNS,
    POSITIVE_PATTERNS,
    find_negative_pattern,
    find_positive_pattern,
)

__all__ = ["CurrencyConventions", "LocaleContext", "NumberConventions"]

logger = logging.getLogger(__name__)

# Babel reports "no grouping" as a group size of 1000.
_NO_GROUPING = 1000

# Directional marks some locales wrap around signs and symbols.
_BIDI_MARKS = frozenset({"\u200e", "\u200f", "\u061c"})


def _validate_group_sizes(group_sizes: tuple[int, ...]) -> None:
    for size in group_sizes:
        if size < 0:
            msg = f"group_sizes must be non-negative, got {group_sizes!r}"
            raise ValueError(msg)


def _validate_digits(name: str, digits: int) -> None:
    if not 0 <= digits <= MAX_DECIMAL_PLACES:
        msg = f"{name} must be between 0 and {MAX_DECIMAL_PLACES}, got {digits}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class NumberConventions:
    """Generic number formatting conventions of a locale.

    Defaults are culture-neutral: "." decimal, "," group of 3, ASCII signs.

    Attributes:
        decimal_separator: Decimal separator
        group_separator: Group (thousands) separator, "" for none
        group_sizes: Group sizes from the decimal point outward; the last
            size repeats, a size of 0 stops grouping
        decimal_digits: Default number of decimal digits
        positive_sign: Positive sign token
        negative_sign: Negative sign token
    """

    decimal_separator: str = "."
    group_separator: str = ","
    group_sizes: tuple[int, ...] = (3,)
    decimal_digits: int = 2
    positive_sign: str = "+"
    negative_sign: str = "-"

    def __post_init__(self) -> None:
        if not self.decimal_separator:
            msg = "decimal_separator must not be empty"
            raise ValueError(msg)
        if not self.negative_sign:
            msg = "negative_sign must not be empty"
            raise ValueError(msg)
        _validate_group_sizes(self.group_sizes)
        _validate_digits("decimal_digits", self.decimal_digits)


@dataclass(frozen=True, slots=True)
class CurrencyConventions:
    """Currency formatting conventions of a locale.

    Attributes:
        decimal_separator: Decimal separator used for currency amounts
        group_separator: Group separator used for currency amounts
        group_sizes: Group sizes used for currency amounts
        decimal_digits: Standard decimal digits of the local currency
        positive_pattern: Index into POSITIVE_PATTERNS
        negative_pattern: Index into NEGATIVE_PATTERNS
        positive_sign: Currency-specific positive sign (None: number sign)
        negative_sign: Currency-specific negative sign (None: number sign)
        decimal_separator_is_symbol: The local currency symbol is the
            decimal separator character. With "$" as separator the escudo
            reads "1 123$45"; where the separator is also the number
            separator (CLDR kea_CV gives ",") amounts carry no separate mark
    """

    decimal_separator: str = "."
    group_separator: str = ","
    group_sizes: tuple[int, ...] = (3,)
    decimal_digits: int = 2
    positive_pattern: int = 0
    negative_pattern: int = 0
    positive_sign: str | None = None
    negative_sign: str | None = None
    decimal_separator_is_symbol: bool = False

    def __post_init__(self) -> None:
        if not self.decimal_separator:
            msg = "decimal_separator must not be empty"
            raise ValueError(msg)
        _validate_group_sizes(self.group_sizes)
        _validate_digits("decimal_digits", self.decimal_digits)
        if not 0 <= self.positive_pattern < len(POSITIVE_PATTERNS):
            msg = (
                f"positive_pattern must be between 0 and {len(POSITIVE_PATTERNS) - 1}, "
                f"got {self.positive_pattern}"
            )
            raise ValueError(msg)
        if not 0 <= self.negative_pattern < len(NEGATIVE_PATTERNS):
            msg = (
                f"negative_pattern must be between 0 and {len(NEGATIVE_PATTERNS) - 1}, "
                f"got {self.negative_pattern}"
            )
            raise ValueError(msg)


def _group_sizes(grouping: tuple[int, int]) -> tuple[int, ...]:
    primary, secondary = grouping
    if primary <= 0 or primary >= _NO_GROUPING:
        return ()
    if secondary == primary or secondary <= 0 or secondary >= _NO_GROUPING:
        return (primary,)
    return (primary, secondary)


def _affix_tokens(affix: str) -> str:
    tokens: list[str] = []
    for ch in affix:
        if ch in _BIDI_MARKS:
            continue
        if ch == "¤":
            tokens.append("$")
        elif ch.isspace():
            tokens.append(" ")
        else:
            tokens.append(ch)
    return "".join(tokens)


def _pattern_indices(pattern: NumberPattern) -> tuple[int, int]:
    """Map a CLDR currency pattern onto positive/negative table rows."""
    positive = _affix_tokens(pattern.prefix[0]) + "n" + _affix_tokens(pattern.suffix[0])
    negative = _affix_tokens(pattern.prefix[1]) + "n" + _affix_tokens(pattern.suffix[1])

    positive_index = find_positive_pattern(positive)
    if positive_index is None:
        positive_index = 0 if positive.startswith("$") else 1
    negative_index = find_negative_pattern(negative)
    if negative_index is None:
        negative_index = 1 if positive.startswith("$") else 5
        logger.debug(
            "Currency pattern %r has no negative row, using %d", pattern.pattern, negative_index
        )
    return positive_index, negative_index


def _read_conventions(
    babel_locale: Locale,
    currency_format: str,
) -> tuple[NumberConventions, CurrencyConventions, str | None]:
    """Read number and currency conventions for a locale from CLDR."""
    decimal = babel_numbers.get_decimal_symbol(babel_locale)
    group = babel_numbers.get_group_symbol(babel_locale)
    plus = babel_numbers.get_plus_sign_symbol(babel_locale)
    minus = babel_numbers.get_minus_sign_symbol(babel_locale)

    symbols = babel_locale.number_symbols.get("latn", {})
    currency_decimal = symbols.get("currencyDecimal", decimal)
    currency_group = symbols.get("currencyGroup", group)

    decimal_pattern = babel_locale.decimal_formats.get(None)
    number = NumberConventions(
        decimal_separator=decimal,
        group_separator=group,
        group_sizes=_group_sizes(decimal_pattern.grouping) if decimal_pattern else (3,),
        decimal_digits=min(decimal_pattern.frac_prec[1], MAX_DECIMAL_PLACES)
        if decimal_pattern
        else 2,
        positive_sign=plus,
        negative_sign=minus,
    )

    region_currency: str | None = None
    if babel_locale.territory:
        territory_currencies = babel_numbers.get_territory_currencies(babel_locale.territory)
        if territory_currencies:
            region_currency = territory_currencies[0]

    currency_pattern = babel_locale.currency_formats.get(
        currency_format
    ) or babel_locale.currency_formats.get("standard")
    if currency_pattern is None:
        return number, CurrencyConventions(), region_currency

    if region_currency is not None:
        digits = babel_numbers.get_currency_precision(region_currency)
    else:
        digits = currency_pattern.frac_prec[1]

    symbol_is_decimal = False
    if region_currency is not None:
        local_symbol = babel_numbers.get_currency_symbol(region_currency, babel_locale)
        # A zero-width symbol stands for the currency decimal separator.
        if local_symbol == ZERO_WIDTH_SPACE:
            local_symbol = currency_decimal
        symbol_is_decimal = local_symbol == currency_decimal

    positive_index, negative_index = _pattern_indices(currency_pattern)
    currency = CurrencyConventions(
        decimal_separator=currency_decimal,
        group_separator=currency_group,
        group_sizes=_group_sizes(currency_pattern.grouping),
        decimal_digits=min(digits, MAX_DECIMAL_PLACES),
        positive_pattern=positive_index,
        negative_pattern=negative_index,
        decimal_separator_is_symbol=symbol_is_decimal,
    )
    return number, currency, region_currency


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale conventions for parsing and formatting money.

    Use LocaleContext.create() to read conventions from CLDR. Direct
    construction is supported for fully explicit conventions (tests,
    locales absent from CLDR).

    Cache Management:
        LocaleContext.create() uses an internal LRU cache for instance reuse:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.territory, ctx.region_currency
        ('US', 'USD')

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.is_fallback
        True

        >>> # Pin the negative pattern to "($n)"
        >>> pinned = ctx.with_currency_conventions(negative_pattern=0)

    Thread Safety:
        LocaleContext is immutable and thread-safe. Multiple threads can
        share the same instance without synchronization. Cache operations
        are protected by RLock.
    """

    # OrderedDict provides LRU semantics with O(1) operations
    _cache: ClassVar[OrderedDict[tuple[str, str], "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    language: str
    territory: str | None = None
    region_currency: str | None = None
    number: NumberConventions = field(default_factory=NumberConventions)
    currency: CurrencyConventions = field(default_factory=CurrencyConventions)
    is_fallback: bool = False
    _babel_locale: Locale | None = field(default=None, compare=False, repr=False)

    @property
    def symbol_locale(self) -> Locale:
        """Babel locale used to localize currency names and symbols."""
        if self._babel_locale is not None:
            return self._babel_locale
        return get_babel_locale(FALLBACK_LOCALE)

    def with_number_conventions(self, **changes: object) -> "LocaleContext":
        """Return a copy with number conventions fields replaced."""
        return replace(self, number=replace(self.number, **changes))  # type: ignore[arg-type]

    def with_currency_conventions(self, **changes: object) -> "LocaleContext":
        """Return a copy with currency conventions fields replaced.

        Example:
            >>> ctx = LocaleContext.create("en-US").with_currency_conventions(
            ...     negative_pattern=1
            ... )
        """
        return replace(self, currency=replace(self.currency, **changes))  # type: ignore[arg-type]

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache.

        Thread-safe via RLock.
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(code for code, _ in cls._cache),
            }

    @classmethod
    def invariant(cls) -> "LocaleContext":
        """Culture-neutral conventions with no region.

        Local symbol lookups always fail with "no region info"; currency
        symbols are localized with the fallback locale.
        """
        return cls(locale_code="", language="iv")

    @classmethod
    def current(cls) -> "LocaleContext":
        """LocaleContext for the system locale (LC_ALL, LC_MESSAGES, LANG)."""
        return cls.create(get_system_locale())

    @classmethod
    def _from_babel(
        cls,
        locale_code: str,
        babel_locale: Locale,
        currency_format: str,
        *,
        is_fallback: bool = False,
    ) -> "LocaleContext":
        number, currency, region_currency = _read_conventions(babel_locale, currency_format)
        return cls(
            locale_code=locale_code,
            language=babel_locale.language,
            territory=babel_locale.territory,
            region_currency=region_currency,
            number=number,
            currency=currency,
            is_fallback=is_fallback,
            _babel_locale=babel_locale,
        )

    @classmethod
    def create(
        cls,
        locale_code: str,
        *,
        currency_format: str = DEFAULT_CURRENCY_FORMAT,
    ) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to
        en_US. This method always succeeds; use create_or_raise() for strict
        validation.

        Thread Safety:
            Uses OrderedDict with RLock for thread-safe LRU caching.
            Concurrent calls with same locale_code return the same instance.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'en-US', 'kea-CV')
            currency_format: CLDR currency pattern to read ("accounting"
                or "standard")

        Returns:
            LocaleContext instance. For unknown/invalid locales, uses en_US
            conventions while preserving the original locale_code.
        """
        # "en-US", "en_US" map to the same cache entry
        cache_key = (normalize_locale(locale_code), currency_format)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = Locale.parse(cache_key[0])
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
            )
            babel_locale = Locale.parse(FALLBACK_LOCALE)
            used_fallback = True
        except ValueError as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                FALLBACK_LOCALE,
            )
            babel_locale = Locale.parse(FALLBACK_LOCALE)
            used_fallback = True

        ctx = cls._from_babel(
            locale_code, babel_locale, currency_format, is_fallback=used_fallback
        )

        # Double-check: another thread may have published meanwhile
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(
        cls,
        locale_code: str,
        *,
        currency_format: str = DEFAULT_CURRENCY_FORMAT,
    ) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'en-US', 'de-DE')
            currency_format: CLDR currency pattern to read

        Returns:
            LocaleContext instance with valid locale

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = Locale.parse(normalize_locale(locale_code))
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls._from_babel(locale_code, babel_locale, currency_format)
