"""Parse style configuration.

MonetaryStyles is an immutable record of named switches controlling which
layouts and currency indicators the parser accepts. At least one currency
indicator lookup must be enabled; this is checked at construction so a
bad style can never reach the parser.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, fields, replace
from typing import ClassVar

from monetext.diagnostics import ErrorTemplate, StyleConfigurationError

__all__ = ["MonetaryStyles"]


@dataclass(frozen=True, slots=True)
class MonetaryStyles:
    """Switches controlling what text the monetary parser accepts.

    Layout switches:
        allow_leading_white: Leading whitespace is ignored
        allow_trailing_white: Trailing whitespace is ignored
        allow_leading_sign: A sign token may precede the amount
        allow_trailing_sign: A sign token may follow the amount
        allow_parentheses: "(...)" marks a negative amount
        allow_decimal_point: The amount may contain a decimal separator
        allow_thousands: The amount may contain group separators

    Currency indicator switches (at least one required):
        allow_currency_code: ISO 4217 code, matched case-insensitively
        allow_local_symbol: Symbol of the locale's region currency
        allow_unambiguous_symbols: Any symbol that maps to exactly one
            currency in the registry

    Presets enable every layout switch plus their indicator switches:
        CURRENCY_CODE, LOCAL_SYMBOL, UNAMBIGUOUS_SYMBOLS,
        CURRENCY_CODE_OR_LOCAL_SYMBOL, CURRENCY_CODE_OR_UNAMBIGUOUS_SYMBOLS,
        ANY

    Example:
        >>> style = MonetaryStyles.CURRENCY_CODE | MonetaryStyles.LOCAL_SYMBOL
        >>> style == MonetaryStyles.CURRENCY_CODE_OR_LOCAL_SYMBOL
        True
        >>> strict = MonetaryStyles.CURRENCY_CODE.with_options(allow_parentheses=False)
        >>> strict.allow_parentheses
        False
    """

    CURRENCY_CODE: ClassVar["MonetaryStyles"]
    LOCAL_SYMBOL: ClassVar["MonetaryStyles"]
    UNAMBIGUOUS_SYMBOLS: ClassVar["MonetaryStyles"]
    CURRENCY_CODE_OR_LOCAL_SYMBOL: ClassVar["MonetaryStyles"]
    CURRENCY_CODE_OR_UNAMBIGUOUS_SYMBOLS: ClassVar["MonetaryStyles"]
    ANY: ClassVar["MonetaryStyles"]

    allow_leading_white: bool = False
    allow_trailing_white: bool = False
    allow_leading_sign: bool = False
    allow_trailing_sign: bool = False
    allow_parentheses: bool = False
    allow_decimal_point: bool = False
    allow_thousands: bool = False
    allow_currency_code: bool = False
    allow_local_symbol: bool = False
    allow_unambiguous_symbols: bool = False

    def __post_init__(self) -> None:
        if not (
            self.allow_currency_code or self.allow_local_symbol or self.allow_unambiguous_symbols
        ):
            raise StyleConfigurationError(ErrorTemplate.style_no_indicator())

    def __or__(self, other: object) -> "MonetaryStyles":
        """Union of two styles: a switch is on if it is on in either."""
        if not isinstance(other, MonetaryStyles):
            return NotImplemented
        merged = {
            f.name: getattr(self, f.name) or getattr(other, f.name) for f in fields(self)
        }
        return MonetaryStyles(**merged)

    def with_options(self, **changes: bool) -> "MonetaryStyles":
        """Return a copy with the given switches replaced (re-validated)."""
        return replace(self, **changes)

    @classmethod
    def _preset(cls, **indicators: bool) -> "MonetaryStyles":
        return cls(
            allow_leading_white=True,
            allow_trailing_white=True,
            allow_leading_sign=True,
            allow_trailing_sign=True,
            allow_parentheses=True,
            allow_decimal_point=True,
            allow_thousands=True,
            **indicators,
        )


MonetaryStyles.CURRENCY_CODE = MonetaryStyles._preset(allow_currency_code=True)
MonetaryStyles.LOCAL_SYMBOL = MonetaryStyles._preset(allow_local_symbol=True)
MonetaryStyles.UNAMBIGUOUS_SYMBOLS = MonetaryStyles._preset(allow_unambiguous_symbols=True)
MonetaryStyles.CURRENCY_CODE_OR_LOCAL_SYMBOL = MonetaryStyles._preset(
    allow_currency_code=True, allow_local_symbol=True
)
MonetaryStyles.CURRENCY_CODE_OR_UNAMBIGUOUS_SYMBOLS = MonetaryStyles._preset(
    allow_currency_code=True, allow_unambiguous_symbols=True
)
MonetaryStyles.ANY = MonetaryStyles._preset(
    allow_currency_code=True, allow_local_symbol=True, allow_unambiguous_symbols=True
)
