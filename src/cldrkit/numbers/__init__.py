"""Pattern-driven number formatting.

Provides NumberFormatter, the locale data tables it renders with, the CLDR
pattern tokenizer, formatting strategies and locale data providers.

Python 3.13+. Uses Babel for CLDR data.
"""

from .formatter import NumberFormatter, classify_sign, group_digits, precision_from
from .providers import (
    BabelNumberDataProvider,
    NumberDataProvider,
    ResourceNumberDataProvider,
    StaticNumberDataProvider,
)
from .strategies import (
    currency_defaults,
    identity,
    no_defaults,
    percent_defaults,
    scale_percent,
)
from .symbols import PatternTable, SignPattern, SymbolTable
from .tokenizer import grouping_widths, parse_pattern, pattern_table

__all__ = [
    "BabelNumberDataProvider",
    "NumberDataProvider",
    "NumberFormatter",
    "PatternTable",
    "ResourceNumberDataProvider",
    "SignPattern",
    "StaticNumberDataProvider",
    "SymbolTable",
    "classify_sign",
    "currency_defaults",
    "group_digits",
    "grouping_widths",
    "identity",
    "no_defaults",
    "parse_pattern",
    "pattern_table",
    "percent_defaults",
    "precision_from",
    "scale_percent",
]
