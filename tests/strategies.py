"""Hypothesis strategies for monetary property-based testing.

Usage:
    from tests.strategies import monetary_amounts, padding, format_specifiers

Event-Emitting Strategies (HypoFuzz-Optimized):
    - monetary_amounts: emits amount sign and magnitude events

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

__all__ = [
    "format_specifiers",
    "monetary_amounts",
    "padding",
]


@composite
def monetary_amounts(
    draw: st.DrawFn,
    *,
    places: int = 2,
    max_magnitude: int = 10**12,
    allow_negative: bool = True,
) -> Decimal:
    """Generate finite amounts with at most ``places`` decimal digits.

    Events emitted:
    - amount_sign={negative|zero|positive}
    - amount_magnitude={small|medium|large}
    """
    min_value = -max_magnitude if allow_negative else 0
    amount = draw(
        st.decimals(
            min_value=min_value,
            max_value=max_magnitude,
            places=places,
            allow_nan=False,
            allow_infinity=False,
        )
    )

    if amount < 0:
        event("amount_sign=negative")
    elif amount == 0:
        event("amount_sign=zero")
    else:
        event("amount_sign=positive")

    magnitude = abs(amount)
    if magnitude < 1000:
        event("amount_magnitude=small")
    elif magnitude < 10**9:
        event("amount_magnitude=medium")
    else:
        event("amount_magnitude=large")
    return amount


def padding() -> st.SearchStrategy[str]:
    """Whitespace runs accepted around monetary text."""
    return st.text(alphabet=" \t\n\u00a0", max_size=4)


@composite
def format_specifiers(draw: st.DrawFn) -> str:
    """Generate valid format specifiers, in either case."""
    currency = draw(st.sampled_from(["", "G", "I", "R", "C", "L"]))
    number = draw(st.sampled_from(["", "N", "D"]))
    decimals = draw(st.sampled_from(["", "*", "B", "A"]))
    if decimals in ("B", "A") and draw(st.booleans()):
        decimals += str(draw(st.integers(min_value=0, max_value=28)))
    spec = currency + number + decimals
    return spec.lower() if draw(st.booleans()) else spec
