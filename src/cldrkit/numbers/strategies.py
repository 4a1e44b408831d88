"""Substitutable strategies for the number formatting pipeline.

Two extension points are injected into NumberFormatter at construction:
- Normalizer: transforms the raw value before rounding (percent scales by 100)
- DefaultOptions: per-number option defaults merged under caller options

Python 3.13+. Uses Babel for currency digits.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from decimal import Decimal
from numbers import Real

from babel import numbers as babel_numbers

__all__ = [
    "DefaultOptions",
    "FormatOptions",
    "Normalizer",
    "Number",
    "currency_defaults",
    "identity",
    "no_defaults",
    "percent_defaults",
    "scale_percent",
]

type Number = int | float | Decimal | Real
"""Numeric input accepted by NumberFormatter.format()."""

type FormatOptions = Mapping[str, object]
"""Formatting options; 'precision' is the recognized key."""

type Normalizer = Callable[[Decimal], Decimal]
type DefaultOptions = Callable[[Number], FormatOptions]


def identity(value: Decimal) -> Decimal:
    """Return value unchanged."""
    return value


def scale_percent(value: Decimal) -> Decimal:
    """Scale a ratio to percent."""
    return value * 100


def no_defaults(number: Number) -> FormatOptions:  # noqa: ARG001
    """Contribute no defaults; precision is derived from the number."""
    return {}


def percent_defaults(number: Number) -> FormatOptions:  # noqa: ARG001
    """Percentages render as whole numbers unless a precision is given."""
    return {"precision": 0}


def currency_defaults(currency: str) -> DefaultOptions:
    """Build defaults applying the currency's ISO 4217 minor-unit digits.

    Args:
        currency: ISO 4217 code (e.g., 'EUR', 'JPY')

    Returns:
        DefaultOptions setting precision to the currency's digits

    Example:
        >>> currency_defaults("JPY")(1234)
        {'precision': 0}
        >>> currency_defaults("EUR")(1234)
        {'precision': 2}
    """
    digits = babel_numbers.get_currency_precision(currency)

    def defaults(number: Number) -> FormatOptions:  # noqa: ARG001
        return {"precision": digits}

    return defaults
