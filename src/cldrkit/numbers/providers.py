"""Sources of locale number data for NumberFormatter.

Components:
    NumberDataProvider - Protocol the formatter factory consumes
    StaticNumberDataProvider - Fixed tables, for embedding and tests
    ResourceNumberDataProvider - Reads locales/<locale>/numbers.yml via ResourceStore
    BabelNumberDataProvider - Reads CLDR data bundled with Babel

numbers.yml layout read by ResourceNumberDataProvider:

    symbols:
      group: "."
      decimal: ","
    formats:
      decimal:
        pattern: "#,##0.###"
      percent:
        positive: "#,##0 %"
        negative: "-#,##0 %"
    currencies:
      EUR:
        symbol: "€"

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Protocol

from babel import numbers as babel_numbers

from cldrkit.constants import DEFAULT_NUMBER_PATTERN
from cldrkit.enums import FormatStyle
from cldrkit.locale_utils import get_babel_locale

from .symbols import PatternTable, SymbolTable
from .tokenizer import parse_pattern, pattern_table

if TYPE_CHECKING:
    from cldrkit.resources import ResourceStore

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "NumberDataProvider",
    # Concrete providers
    "StaticNumberDataProvider",
    "ResourceNumberDataProvider",
    "BabelNumberDataProvider",
]

NUMBERS_RESOURCE = "numbers"


class NumberDataProvider(Protocol):
    """Protocol for locale number data.

    This is a Protocol (structural typing) rather than ABC so callers can
    adapt any data source without inheriting from cldrkit classes.
    """

    def symbols(self, locale: str) -> SymbolTable:
        """Return the locale's symbol table."""

    def patterns(self, locale: str, style: FormatStyle) -> PatternTable:
        """Return the locale's sign-keyed patterns for a format style.

        Raises:
            ValueError: If the locale has no pattern for the style
        """

    def currency_symbol(self, locale: str, currency: str) -> str:
        """Return the display symbol for an ISO 4217 code in the locale."""


@dataclass(frozen=True, slots=True)
class StaticNumberDataProvider:
    """Provider returning the same tables for every locale.

    Attributes:
        symbol_table: Symbols for all locales
        pattern_tables: Patterns per style; missing styles are errors
        currency_symbols: ISO code -> symbol; missing codes render as the code
    """

    symbol_table: SymbolTable = field(default_factory=SymbolTable)
    pattern_tables: Mapping[FormatStyle, PatternTable] = field(
        default_factory=lambda: {FormatStyle.DECIMAL: parse_pattern(DEFAULT_NUMBER_PATTERN)}
    )
    currency_symbols: Mapping[str, str] = field(default_factory=dict)

    def symbols(self, locale: str) -> SymbolTable:  # noqa: ARG002
        return self.symbol_table

    def patterns(self, locale: str, style: FormatStyle) -> PatternTable:
        try:
            return self.pattern_tables[style]
        except KeyError:
            msg = f"No '{style}' number pattern for locale '{locale}'"
            raise ValueError(msg) from None

    def currency_symbol(self, locale: str, currency: str) -> str:  # noqa: ARG002
        return self.currency_symbols.get(currency, currency)


class ResourceNumberDataProvider:
    """Provider reading each locale's numbers resource from a ResourceStore.

    Loads are memoized by the store; this class keeps no state of its own.
    """

    __slots__ = ("_resource_name", "_store")

    def __init__(self, store: ResourceStore, resource_name: str = NUMBERS_RESOURCE) -> None:
        """Initialize provider.

        Args:
            store: Resource store holding locales/<locale>/<resource_name>.yml
            resource_name: Name of the numbers resource
        """
        self._store = store
        self._resource_name = resource_name

    def _data(self, locale: str) -> Mapping[str, object]:
        data = self._store.get_locale_resource(locale, self._resource_name)
        if not isinstance(data, Mapping):
            msg = f"Numbers resource for locale '{locale}' must be a mapping"
            raise ValueError(msg)
        return data

    def _section(self, locale: str, name: str) -> Mapping[str, object]:
        section = self._data(locale).get(name)
        return section if isinstance(section, Mapping) else {}

    def symbols(self, locale: str) -> SymbolTable:
        return SymbolTable.from_mapping(self._section(locale, "symbols"))

    def patterns(self, locale: str, style: FormatStyle) -> PatternTable:
        entry = self._section(locale, "formats").get(str(style))
        match entry:
            case str():
                return parse_pattern(entry)
            case {"pattern": str() as pattern}:
                return parse_pattern(pattern)
            case {"positive": str() as positive, "negative": str() as negative}:
                return parse_pattern(f"{positive};{negative}")
            case _:
                msg = f"No '{style}' number pattern for locale '{locale}'"
                raise ValueError(msg)

    def currency_symbol(self, locale: str, currency: str) -> str:
        entry = self._section(locale, "currencies").get(currency)
        if isinstance(entry, Mapping) and isinstance(entry.get("symbol"), str):
            return entry["symbol"]
        return currency


class BabelNumberDataProvider:
    """Provider sourcing CLDR number data from Babel.

    Unknown locales fall back to en_US with a warning logged.

    Example:
        >>> provider = BabelNumberDataProvider()
        >>> provider.symbols("de-DE").decimal
        ','
        >>> provider.patterns("en", FormatStyle.PERCENT).positive.suffix
        '%'
    """

    __slots__ = ()

    _FORMAT_KEYS: ClassVar[Mapping[FormatStyle, tuple[str, str | None]]] = {
        FormatStyle.DECIMAL: ("decimal_formats", None),
        FormatStyle.PERCENT: ("percent_formats", None),
        FormatStyle.CURRENCY: ("currency_formats", "standard"),
    }

    def symbols(self, locale: str) -> SymbolTable:
        babel_locale = get_babel_locale(locale)
        return SymbolTable(
            group=babel_numbers.get_group_symbol(babel_locale),
            decimal=babel_numbers.get_decimal_symbol(babel_locale),
            plus_sign=babel_numbers.get_plus_sign_symbol(babel_locale),
            minus_sign=babel_numbers.get_minus_sign_symbol(babel_locale),
        )

    def patterns(self, locale: str, style: FormatStyle) -> PatternTable:
        attribute, key = self._FORMAT_KEYS[FormatStyle(style)]
        formats = getattr(get_babel_locale(locale), attribute)
        number_pattern = formats.get(key)
        if number_pattern is None:
            msg = f"No '{style}' number pattern for locale '{locale}'"
            raise ValueError(msg)
        return pattern_table(number_pattern)

    def currency_symbol(self, locale: str, currency: str) -> str:
        return babel_numbers.get_currency_symbol(currency, locale=get_babel_locale(locale))
