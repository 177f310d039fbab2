"""Currency pattern tables.

Each pattern is a token string rendered left to right:
    n   the formatted absolute amount
    $   the currency symbol or code
    -   the locale's negative sign
    " " a no-break space (U+00A0)
Any other character is emitted literally.

A locale selects its rows through the positive and negative pattern
indices carried by its CurrencyConventions.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "POSITIVE_PATTERNS",
    "NEGATIVE_PATTERNS",
    "POSITIVE_INTERNATIONAL_PATTERN",
    "POSITIVE_REVERSE_INTERNATIONAL_PATTERN",
    "POSITIVE_EMPTY_SYMBOL_PATTERN",
    "NEGATIVE_EMPTY_SYMBOL_PATTERNS",
    "NEGATIVE_INTERNATIONAL_PATTERNS",
    "NEGATIVE_REVERSE_INTERNATIONAL_PATTERNS",
    "find_positive_pattern",
    "find_negative_pattern",
]

POSITIVE_PATTERNS: tuple[str, ...] = ("$n", "n$", "$ n", "n $")

NEGATIVE_PATTERNS: tuple[str, ...] = (
    "($n)",  # 0
    "-$n",  # 1
    "$-n",  # 2
    "$n-",  # 3
    "(n$)",  # 4
    "-n$",  # 5
    "n-$",  # 6
    "n$-",  # 7
    "-n $",  # 8
    "-$ n",  # 9
    "n $-",  # 10
    "$ n-",  # 11
    "$ -n",  # 12
    "n- $",  # 13
    "($ n)",  # 14
    "(n $)",  # 15
    "$- n",  # 16
)

POSITIVE_INTERNATIONAL_PATTERN = "$ n"
POSITIVE_REVERSE_INTERNATIONAL_PATTERN = "n $"
POSITIVE_EMPTY_SYMBOL_PATTERN = "n"

# Rows below are indexed by the negative pattern index and keep that row's
# sign style while moving the symbol (or dropping it).

NEGATIVE_EMPTY_SYMBOL_PATTERNS: tuple[str, ...] = (
    "(n)", "-n", "-n", "n-", "(n)", "-n", "n-", "n-", "-n",
    "- n", "n -", "n-", "-n", "n-", "(n)", "(n)", "- n",
)  # fmt: skip

NEGATIVE_INTERNATIONAL_PATTERNS: tuple[str, ...] = (
    "$ (n)", "$ -n", "$ -n", "$ n-", "$ (n)", "$ -n", "$ n-", "$ n-", "$ -n",
    "$ -n", "$ n-", "$ n-", "$ -n", "$ n-", "$ (n)", "$ (n)", "$ -n",
)  # fmt: skip

NEGATIVE_REVERSE_INTERNATIONAL_PATTERNS: tuple[str, ...] = (
    "(n) $", "-n $", "-n $", "n- $", "(n) $", "-n $", "n- $", "n- $", "-n $",
    "-n $", "n- $", "n- $", "-n $", "n- $", "(n) $", "(n) $", "-n $",
)  # fmt: skip


def find_positive_pattern(tokens: str) -> int | None:
    """Return the positive pattern index for a token string, if tabled."""
    try:
        return POSITIVE_PATTERNS.index(tokens)
    except ValueError:
        return None


def find_negative_pattern(tokens: str) -> int | None:
    """Return the negative pattern index for a token string, if tabled."""
    try:
        return NEGATIVE_PATTERNS.index(tokens)
    except ValueError:
        return None
