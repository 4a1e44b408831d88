"""CLDR number pattern tokenizing on top of Babel.

babel.numbers.parse_pattern splits a pattern such as '¤#,##0.00;(¤#,##0.00)'
into per-sign prefix and suffix plus the numeric pattern; this module maps
the result onto PatternTable. Group widths come from babel's parse_grouping.

Prefixes and suffixes keep CLDR quoting ('text' literals, '' for an
apostrophe); SymbolTable.substitute resolves it at render time.

Python 3.13+. Uses Babel for pattern parsing.
"""

from __future__ import annotations

from babel import numbers as babel_numbers

from .symbols import PatternTable, SignPattern

__all__ = ["grouping_widths", "parse_pattern", "pattern_table"]

# parse_grouping's width for patterns without a ',' separator
_NO_GROUPING = 1000


def pattern_table(number_pattern: babel_numbers.NumberPattern) -> PatternTable:
    """Build a sign-keyed table from a Babel NumberPattern.

    Both signs share the positive numeric pattern; CLDR ignores the numeric
    part of an explicit negative subpattern.
    """
    positive_prefix, negative_prefix = number_pattern.prefix
    positive_suffix, negative_suffix = number_pattern.suffix
    numeric = number_pattern.number_pattern or ""
    return PatternTable(
        positive=SignPattern(positive_prefix, numeric, positive_suffix),
        negative=SignPattern(negative_prefix, numeric, negative_suffix),
    )


def parse_pattern(pattern: str) -> PatternTable:
    """Tokenize a full CLDR pattern into a sign-keyed table.

    A pattern without an explicit negative subpattern gets one derived by
    prefixing '-' to the positive prefix, per CLDR convention.

    Raises:
        ValueError: If Babel rejects the pattern

    Example:
        >>> table = parse_pattern("#,##0.###")
        >>> table.negative.prefix
        '-'
        >>> parse_pattern("#,##0.00;(#,##0.00)").negative.suffix
        ')'
    """
    return pattern_table(babel_numbers.parse_pattern(pattern))


def grouping_widths(numeric_pattern: str) -> tuple[int, ...]:
    """Read digit group widths from a numeric pattern.

    Returns the primary width (nearest the decimal point) followed by the
    secondary width when it differs. An empty tuple means no grouping.

    Example:
        >>> grouping_widths("#,##0.###")
        (3,)
        >>> grouping_widths("#,##,##0")
        (3, 2)
        >>> grouping_widths("0.00")
        ()
    """
    integer_part = numeric_pattern.split("E", 1)[0].split(".", 1)[0]
    primary, secondary = babel_numbers.parse_grouping(integer_part)
    if primary <= 0 or primary >= _NO_GROUPING:
        return ()
    if 0 < secondary != primary:
        return (primary, secondary)
    return (primary,)
