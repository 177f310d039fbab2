"""Currency metadata and registries consumed by the monetary codec."""

from .models import (
    CldrCurrencyLocalizer,
    Currency,
    CurrencyLocalizer,
    InvariantCurrencyLocalizer,
    check_symbol_or_code,
)
from .registry import CurrencyRegistry

__all__ = [
    "CldrCurrencyLocalizer",
    "Currency",
    "CurrencyLocalizer",
    "CurrencyRegistry",
    "InvariantCurrencyLocalizer",
    "check_symbol_or_code",
]
