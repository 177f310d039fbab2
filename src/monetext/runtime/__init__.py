"""Locale runtime: conventions, derived number rules and pattern tables.

Python 3.13+.
"""

from .locale_context import CurrencyConventions, LocaleContext, NumberConventions
from .number_rules import NumberRules, derive_rules
from .patterns import find_negative_pattern, find_positive_pattern

__all__ = [
    "CurrencyConventions",
    "LocaleContext",
    "NumberConventions",
    "NumberRules",
    "derive_rules",
    "find_negative_pattern",
    "find_positive_pattern",
]
