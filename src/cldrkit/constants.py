"""Shared constants for cldrkit.

Centralizes the defaults used by the resource store and the number
formatting pipeline. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Resource layout: directory names and file extensions of the data tree
- Number symbols: fallback symbol table for locales with partial data
- Number rendering: grouping, precision bounds, non-finite placeholders

Python 3.13+.
"""

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resource layout
    "LOCALES_DIR",
    "CUSTOM_DIR",
    "YAML_EXTENSIONS",
    "BINARY_EXTENSIONS",
    "DEFAULT_EXTENSION",
    "ALL_RESOURCES",
    "DEFAULT_LOCALE_ALIASES",
    "DISABLE_CUSTOM_ENV_VAR",
    # Number symbols
    "DEFAULT_SYMBOLS",
    "DEFAULT_NUMBER_PATTERN",
    # Number rendering
    "DEFAULT_GROUPING_SIZE",
    "MAX_PRECISION",
    "INFINITY_SYMBOL",
    "NAN_SYMBOL",
    "FALLBACK_LOCALE",
]

# ============================================================================
# RESOURCE LAYOUT
# ============================================================================

LOCALES_DIR: str = "locales"

# Override mirror. custom/<relative path> shadows <relative path>.
CUSTOM_DIR: str = "custom"

YAML_EXTENSIONS: frozenset[str] = frozenset((".yml", ".yaml"))
BINARY_EXTENSIONS: frozenset[str] = frozenset((".pickle",))

# Appended to a path whose last segment carries no recognized extension.
DEFAULT_EXTENSION: str = ".yml"

# Preload wildcard: expands to every resource present for a locale.
ALL_RESOURCES: str = "all"

# Legacy and product-specific locale codes mapped to the directory name
# under locales/. Keys are lowercase with hyphens.
DEFAULT_LOCALE_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        "in": "id",
        "iw": "he",
        "ji": "yi",
        "msa": "ms",
        "zh-cn": "zh",
        "zh-tw": "zh-Hant",
    }
)

DISABLE_CUSTOM_ENV_VAR: str = "CLDRKIT_DISABLE_CUSTOM_RESOURCES"

# ============================================================================
# NUMBER SYMBOLS
# ============================================================================

# Any key absent from locale data falls back to this table.
DEFAULT_SYMBOLS: MappingProxyType[str, str] = MappingProxyType(
    {
        "group": ",",
        "decimal": ".",
        "plus_sign": "+",
        "minus_sign": "-",
    }
)

# CLDR root decimal pattern.
DEFAULT_NUMBER_PATTERN: str = "#,##0.###"

# ============================================================================
# NUMBER RENDERING
# ============================================================================

# Used only when a sign pattern carries no numeric pattern to read widths from.
DEFAULT_GROUPING_SIZE: int = 3

# Requested precision is clamped into [0, MAX_PRECISION].
MAX_PRECISION: int = 100

INFINITY_SYMBOL: str = "∞"
NAN_SYMBOL: str = "NaN"

# Babel locale used when a requested locale is unknown.
FALLBACK_LOCALE: str = "en_US"
