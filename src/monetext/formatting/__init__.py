"""Monetary value formatting into bounded buffers.

Python 3.13+.
"""

from .buffer import FormatBuffer
from .monetary import format_money, try_format_money
from .specifier import CurrencyStyle, DecimalsStyle, FormatSpecifier

__all__ = [
    "CurrencyStyle",
    "DecimalsStyle",
    "FormatBuffer",
    "FormatSpecifier",
    "format_money",
    "try_format_money",
]
