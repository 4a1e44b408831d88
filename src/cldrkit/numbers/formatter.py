"""Pattern-driven number formatting pipeline.

NumberFormatter renders a number through five stages:
    1. Token resolution: classify sign, select SignPattern, resolve literals
    2. Normalize: apply the injected Normalizer (identity unless percent)
    3. Round: resolve precision, round half away from zero
    4. Split: fixed-decimal string into integer and fraction digits
    5. Assemble: prefix + grouped integer + decimal fraction + suffix

Architecture:
    - Pure function of (number, options, symbols, patterns); no mutable state
    - Arithmetic in Decimal; floats enter through their shortest repr, so
      2.675 rounds to 2.68 rather than suffering binary representation error
    - Strategies are injected values, not subclass overrides

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import MAX_EMAX, MIN_EMIN, ROUND_DOWN, ROUND_HALF_UP, Context, Decimal, localcontext
from numbers import Rational, Real
from typing import TYPE_CHECKING

from cldrkit.constants import (
    DEFAULT_GROUPING_SIZE,
    DEFAULT_NUMBER_PATTERN,
    INFINITY_SYMBOL,
    MAX_PRECISION,
    NAN_SYMBOL,
)
from cldrkit.enums import FormatStyle, NumberSign

from .strategies import (
    DefaultOptions,
    FormatOptions,
    Normalizer,
    Number,
    currency_defaults,
    identity,
    no_defaults,
    percent_defaults,
    scale_percent,
)
from .symbols import PatternTable, SymbolTable
from .tokenizer import grouping_widths, parse_pattern

if TYPE_CHECKING:
    from .providers import NumberDataProvider

__all__ = ["NumberFormatter", "classify_sign", "group_digits", "precision_from"]

logger = logging.getLogger(__name__)

_DEFAULT_PATTERNS = parse_pattern(DEFAULT_NUMBER_PATTERN)

# Exponent range wide enough that no finite Decimal overflows or underflows;
# precision is set per operation from the operand size.
_WIDE = Context(rounding=ROUND_HALF_UP, Emax=MAX_EMAX, Emin=MIN_EMIN)


def classify_sign(number: Number) -> NumberSign:
    """Classify sign as positive when abs(number) == number.

    Zero and negative zero are positive. NaN is treated as positive.

    Example:
        >>> classify_sign(-0.0)
        <NumberSign.POSITIVE: 'positive'>
        >>> classify_sign(-1)
        <NumberSign.NEGATIVE: 'negative'>
    """
    if number != number:  # NaN compares unequal to itself
        return NumberSign.POSITIVE
    return NumberSign.POSITIVE if abs(number) == number else NumberSign.NEGATIVE


def _to_decimal(number: Number) -> Decimal:
    match number:
        case bool():
            msg = f"Cannot format boolean value {number!r} as a number"
            raise TypeError(msg)
        case Decimal():
            return number
        case int():
            return Decimal(number)
        case float():
            return Decimal(repr(number))
        case Rational():
            # Truncated one digit past MAX_PRECISION so half-up rounding
            # afterwards sees the same side of every tie.
            whole = abs(number.numerator) // number.denominator
            prec = whole.bit_length() * 31 // 100 + MAX_PRECISION + 3
            with localcontext(_WIDE, prec=prec, rounding=ROUND_DOWN):
                return Decimal(number.numerator) / Decimal(number.denominator)
        case Real():
            return Decimal(repr(float(number)))
        case _:
            msg = f"Cannot format {type(number).__name__} value as a number"
            raise TypeError(msg)


def precision_from(value: Decimal) -> int:
    """Count significant fractional digits; 0 for integral values.

    Trailing fractional zeros do not count.

    Example:
        >>> precision_from(Decimal("1234.50"))
        1
        >>> precision_from(Decimal("1E+3"))
        0
    """
    if not value.is_finite() or value.is_zero():
        return 0
    _, digits, exponent = value.as_tuple()
    trailing = 0
    while exponent + trailing < 0 and trailing < len(digits) and digits[-1 - trailing] == 0:
        trailing += 1
    return max(0, -(exponent + trailing))


def _round_half_away(magnitude: Decimal, precision: int) -> Decimal:
    """Quantize a non-negative value to precision places, ties away from zero."""
    digits = max(magnitude.adjusted(), 0) + precision + 2
    with localcontext(_WIDE, prec=max(digits, 28)):
        return magnitude.quantize(Decimal(1).scaleb(-precision))


def _normalized(normalize: Normalizer, value: Decimal) -> Decimal:
    """Apply a normalizer with enough precision to keep every input digit."""
    digits = len(value.as_tuple().digits) if value.is_finite() else 0
    with localcontext(_WIDE, prec=max(digits + MAX_PRECISION, 28)):
        return normalize(value)


def group_digits(digits: str, separator: str, widths: tuple[int, ...]) -> str:
    """Insert separator between digit groups counted from the right.

    Args:
        digits: Integer digit string
        separator: Group separator
        widths: Primary width, then optional secondary width; () disables grouping

    Example:
        >>> group_digits("1234567", ",", (3,))
        '1,234,567'
        >>> group_digits("1234567", ",", (3, 2))
        '12,34,567'
    """
    if not widths or widths[0] <= 0 or len(digits) <= widths[0]:
        return digits
    primary = widths[0]
    secondary = widths[1] if len(widths) > 1 and widths[1] > 0 else primary

    head, tail = digits[:-primary], digits[-primary:]
    first = len(head) % secondary or secondary
    groups = [head[:first]]
    groups.extend(head[start : start + secondary] for start in range(first, len(head), secondary))
    groups.append(tail)
    return separator.join(groups)


class NumberFormatter:
    """Render numbers with a locale's symbols and sign patterns.

    Use NumberFormatter.for_locale() to build instances from a data
    provider; construct directly to supply symbols and patterns by hand.

    Examples:
        >>> NumberFormatter().format(1234567)
        '1,234,567'

        >>> de = NumberFormatter({"group": ".", "decimal": ","})
        >>> de.format(1234.5)
        '1.234,5'
        >>> de.format(-1234.567, precision=2)
        '-1.234,57'

        >>> percent = NumberFormatter(
        ...     patterns=parse_pattern("#,##0%"),
        ...     normalize=scale_percent,
        ...     defaults=percent_defaults,
        ... )
        >>> percent.format(0.256)
        '26%'

    Thread Safety:
        Instances are immutable after construction and safe to share.
    """

    __slots__ = ("_defaults", "_grouping_size", "_normalize", "_patterns", "_symbols")

    def __init__(
        self,
        symbols: SymbolTable | Mapping[str, object] | None = None,
        patterns: PatternTable | None = None,
        *,
        normalize: Normalizer = identity,
        defaults: DefaultOptions = no_defaults,
        grouping_size: int = DEFAULT_GROUPING_SIZE,
    ) -> None:
        """Initialize number formatter.

        Args:
            symbols: Symbol table, or a mapping with any subset of its keys
            patterns: Sign-keyed patterns (default: CLDR root '#,##0.###')
            normalize: Value transform applied before rounding
            defaults: Per-number option defaults, overridden by caller options
            grouping_size: Group width for patterns without a numeric part

        Raises:
            ValueError: If grouping_size is negative
        """
        if grouping_size < 0:
            msg = "grouping_size must be non-negative"
            raise ValueError(msg)
        self._symbols = (
            symbols if isinstance(symbols, SymbolTable) else SymbolTable.from_mapping(symbols)
        )
        self._patterns = patterns if patterns is not None else _DEFAULT_PATTERNS
        self._normalize = normalize
        self._defaults = defaults
        self._grouping_size = grouping_size

    @classmethod
    def for_locale(
        cls,
        provider: NumberDataProvider,
        locale: str,
        style: FormatStyle | str = FormatStyle.DECIMAL,
        *,
        currency: str | None = None,
        grouping_size: int = DEFAULT_GROUPING_SIZE,
    ) -> NumberFormatter:
        """Build a formatter from a locale's number data.

        Args:
            provider: Source of symbols and patterns
            locale: Locale code
            style: Pattern family: decimal, percent or currency
            currency: ISO 4217 code, required for currency style
            grouping_size: Group width for patterns without a numeric part

        Returns:
            NumberFormatter wired with the style's strategies

        Raises:
            ValueError: If style is unknown, or currency style lacks a code
        """
        style = FormatStyle(style)
        symbols = provider.symbols(locale)
        patterns = provider.patterns(locale, style)

        match style:
            case FormatStyle.PERCENT:
                return cls(
                    symbols,
                    patterns,
                    normalize=scale_percent,
                    defaults=percent_defaults,
                    grouping_size=grouping_size,
                )
            case FormatStyle.CURRENCY:
                if currency is None:
                    msg = "currency code is required for currency formatting"
                    raise ValueError(msg)
                symbol = provider.currency_symbol(locale, currency)
                return cls(
                    symbols,
                    patterns.with_currency(symbol, currency),
                    defaults=currency_defaults(currency),
                    grouping_size=grouping_size,
                )
            case _:
                return cls(symbols, patterns, grouping_size=grouping_size)

    @property
    def symbols(self) -> SymbolTable:
        """Symbol table used for separators and signs."""
        return self._symbols

    @property
    def patterns(self) -> PatternTable:
        """Sign-keyed pattern table."""
        return self._patterns

    def format(self, number: Number, options: FormatOptions | None = None, **kwargs: object) -> str:
        """Format a number.

        Options may be passed as a mapping, as keyword arguments, or both
        (keywords win). Caller options override the formatter's defaults.

        Args:
            number: int, float, Decimal, or any numbers.Real (Fraction is
                converted exactly up to MAX_PRECISION digits)
            options: Formatting options; 'precision' sets fractional digits
            **kwargs: Additional options

        Returns:
            Formatted number string. Never has more fractional digits than
            the resolved precision.

        Raises:
            TypeError: If number is a bool or not a supported numeric type
        """
        opts = {**self._defaults(number), **(options or {}), **kwargs}

        # Token resolution
        pattern = self._patterns.for_sign(classify_sign(number))
        prefix = self._symbols.substitute(pattern.prefix)
        suffix = self._symbols.substitute(pattern.suffix)

        value = _normalized(self._normalize, _to_decimal(number))
        if not value.is_finite():
            body = NAN_SYMBOL if value.is_nan() else INFINITY_SYMBOL
            return f"{prefix}{body}{suffix}"

        precision = self._resolve_precision(opts.get("precision"), value)
        integer_digits, fraction_digits = self._split(value, precision)

        widths = (
            grouping_widths(pattern.integer_fraction_pattern)
            if pattern.integer_fraction_pattern
            else self._default_widths()
        )
        result = group_digits(integer_digits, self._symbols.group, widths)
        if fraction_digits:
            result += self._symbols.decimal + fraction_digits
        return f"{prefix}{result}{suffix}"

    def _default_widths(self) -> tuple[int, ...]:
        return (self._grouping_size,) if self._grouping_size > 0 else ()

    @staticmethod
    def _resolve_precision(requested: object, value: Decimal) -> int:
        if requested is None:
            precision = precision_from(value)
        else:
            try:
                precision = int(requested)  # type: ignore[call-overload]
            except (TypeError, ValueError):
                logger.debug("Ignoring unusable precision %r", requested)
                precision = precision_from(value)
        return min(max(precision, 0), MAX_PRECISION)

    @staticmethod
    def _split(value: Decimal, precision: int) -> tuple[str, str]:
        rendered = f"{_round_half_away(abs(value), precision):f}"
        integer_digits, _, fraction_digits = rendered.partition(".")
        return integer_digits, fraction_digits
