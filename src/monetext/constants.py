"""Shared constants for monetext.

This module provides centralized configuration constants used across
the parsing, formatting, and runtime packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Formatting limits: Output buffer sizing and decimal precision bounds
- Cache limits: Memory bounds for caching subsystems
- Locale defaults: Fallback locale and international layout languages
- Characters: Special characters recognized by the codec

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Formatting limits
    "FORMAT_BUFFER_SIZE",
    "MAX_DECIMAL_PLACES",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_SPECIFIER_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_LOCALE",
    "FALLBACK_LOCALE",
    "DEFAULT_CURRENCY_FORMAT",
    "INTERNATIONAL_CODE_FIRST_LANGUAGES",
    # Characters
    "NBSP",
    "NARROW_NBSP",
    "ZERO_WIDTH_SPACE",
    "INVALID_SYMBOL_CHARS",
]

# ============================================================================
# FORMATTING LIMITS
# ============================================================================

# Starting capacity (in characters) of the buffer used by format_money().
# Large enough for a maximum precision decimal, the longest symbol, and
# pattern decoration. Longer renders double the buffer and retry.
FORMAT_BUFFER_SIZE: int = 96

# Upper bound on decimal digits, both for explicit counts in format
# specifiers (B0..B28, A0..A28) and for a currency's standard digit count.
MAX_DECIMAL_PLACES: int = 28

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of LocaleContext instances kept in the LRU cache.
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum number of parsed format specifiers kept by functools.lru_cache.
MAX_SPECIFIER_CACHE_SIZE: int = 256

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when a caller provides none and the system locale is unknown.
DEFAULT_LOCALE: str = "en_US"

# Locale substituted by LocaleContext.create() for unknown locale codes.
FALLBACK_LOCALE: str = "en_US"

# CLDR currency pattern read by LocaleContext.create() ("accounting" renders
# negatives in parentheses where the locale defines it, "standard" does not).
DEFAULT_CURRENCY_FORMAT: str = "accounting"

# Languages whose general ("G") currency style places the ISO code before
# the amount. All other languages place it after.
INTERNATIONAL_CODE_FIRST_LANGUAGES: frozenset[str] = frozenset({"en", "ga", "lv", "mt"})

# ============================================================================
# CHARACTERS
# ============================================================================

NBSP: str = "\u00a0"
NARROW_NBSP: str = "\u202f"
ZERO_WIDTH_SPACE: str = "\u200b"

# Characters that may never appear in a currency symbol or code because
# they would collide with sign or parenthesis detection.
INVALID_SYMBOL_CHARS: frozenset[str] = frozenset({"+", "-", "\u2212", "(", ")"})
