"""Tests for number data providers and the symbol/pattern tables.

Python 3.13+.
"""

import logging

import pytest

from cldrkit.enums import FormatStyle, NumberSign
from cldrkit.numbers import (
    BabelNumberDataProvider,
    NumberFormatter,
    PatternTable,
    ResourceNumberDataProvider,
    SignPattern,
    StaticNumberDataProvider,
    SymbolTable,
    parse_pattern,
)
from cldrkit.resources import MemoryBackend, ResourceStore

DE_NUMBERS = """\
symbols:
  group: "."
  decimal: ","
  unknown_key: "?"
  minus_sign: 7
formats:
  decimal: "#,##0.###"
  percent:
    pattern: "#,##0 %"
  currency:
    positive: "#,##0.00 ¤"
    negative: "-#,##0.00 ¤"
currencies:
  EUR:
    symbol: "€"
"""


@pytest.fixture
def backend() -> MemoryBackend:
    """Backend with German number data."""
    return MemoryBackend(
        {
            "locales/de/numbers.yml": DE_NUMBERS,
            "locales/xx/numbers.yml": "symbols: {}\n",
            "locales/yy/numbers.yml": "- not\n- a mapping\n",
        }
    )


@pytest.fixture
def provider(backend: MemoryBackend) -> ResourceNumberDataProvider:
    """Provider over the German number data."""
    return ResourceNumberDataProvider(ResourceStore(backend))


class TestSymbolTable:
    """Test SymbolTable construction and substitution."""

    def test_defaults(self) -> None:
        """Defaults are the root locale symbols."""
        table = SymbolTable()
        assert (table.group, table.decimal, table.plus_sign, table.minus_sign) == (
            ",",
            ".",
            "+",
            "-",
        )

    def test_from_mapping_ignores_unknown_and_non_string(self) -> None:
        """Unknown keys and non-string values fall back to defaults."""
        table = SymbolTable.from_mapping({"decimal": ",", "minus_sign": 7, "other": "x"})
        assert table == SymbolTable(decimal=",")

    def test_from_none(self) -> None:
        """None yields the default table."""
        assert SymbolTable.from_mapping(None) == SymbolTable()

    def test_substitute(self) -> None:
        """Only '-' and '+' are substituted."""
        table = SymbolTable(plus_sign="⁺", minus_sign="−")
        assert table.substitute("(-+%)") == "(−⁺%)"

    def test_substitute_leaves_quoted_signs(self) -> None:
        """Quoted text is unquoted verbatim; '' is an apostrophe."""
        table = SymbolTable(plus_sign="⁺", minus_sign="−")
        assert table.substitute("'-+'-") == "-+−"
        assert table.substitute("''+") == "'⁺"


class TestPatternTable:
    """Test PatternTable selection and currency filling."""

    def test_for_sign(self) -> None:
        """Patterns are selected by sign."""
        table = parse_pattern("#,##0")
        assert table.for_sign(NumberSign.POSITIVE) is table.positive
        assert table.for_sign(NumberSign.NEGATIVE) is table.negative

    def test_with_currency(self) -> None:
        """Single '¤' becomes the symbol, doubled or tripled the ISO code."""
        table = PatternTable(
            positive=SignPattern(prefix="¤", suffix=" ¤¤"),
            negative=SignPattern(prefix="-¤¤¤ "),
        )
        filled = table.with_currency("$", "USD")
        render = SymbolTable().substitute
        assert render(filled.positive.prefix) == "$"
        assert render(filled.positive.suffix) == " USD"
        assert render(filled.negative.prefix) == "-USD "
        assert filled.positive.integer_fraction_pattern == table.positive.integer_fraction_pattern

    def test_with_currency_keeps_symbol_signs(self) -> None:
        """Signs inside a currency symbol are not localized."""
        formatter = NumberFormatter(
            SymbolTable(minus_sign="−"),
            parse_pattern("¤#,##0").with_currency("US-$", "USD"),
        )
        assert formatter.format(5) == "US-$5"
        assert formatter.format(-5) == "−US-$5"

    def test_with_currency_skips_quoted_placeholder(self) -> None:
        """A quoted '¤' is literal text, not a placeholder."""
        filled = parse_pattern("'¤'#,##0 ¤").with_currency("€", "EUR")
        assert NumberFormatter(patterns=filled).format(3) == "¤3 €"

    def test_with_currency_apostrophe_in_symbol(self) -> None:
        """Apostrophes in an inserted symbol survive quoting."""
        filled = parse_pattern("¤0").with_currency("l'€", "XXX")
        assert NumberFormatter(patterns=filled).format(1) == "l'€1"

    def test_sign_pattern_from_mapping(self) -> None:
        """Both pattern key spellings are accepted."""
        assert SignPattern.from_mapping({"pattern": "0.00", "suffix": "%"}) == SignPattern(
            "", "0.00", "%"
        )
        assert SignPattern.from_mapping(
            {"prefix": "-", "integer_fraction_pattern": "#,##0"}
        ) == SignPattern("-", "#,##0", "")


class TestStaticNumberDataProvider:
    """Test the fixed-table provider."""

    def test_same_data_for_every_locale(self) -> None:
        """Locale is ignored."""
        provider = StaticNumberDataProvider()
        assert provider.symbols("de") == provider.symbols("ja") == SymbolTable()
        assert provider.patterns("de", FormatStyle.DECIMAL) == parse_pattern("#,##0.###")

    def test_missing_style(self) -> None:
        """Styles without tables raise ValueError."""
        with pytest.raises(ValueError, match="currency"):
            StaticNumberDataProvider().patterns("en", FormatStyle.CURRENCY)

    def test_currency_symbol_fallback(self) -> None:
        """Unknown currencies render as their code."""
        provider = StaticNumberDataProvider(currency_symbols={"EUR": "€"})
        assert provider.currency_symbol("de", "EUR") == "€"
        assert provider.currency_symbol("de", "CHF") == "CHF"


class TestResourceNumberDataProvider:
    """Test the provider reading numbers.yml through a ResourceStore."""

    def test_symbols(self, provider: ResourceNumberDataProvider) -> None:
        """Symbols are read with per-key defaults."""
        assert provider.symbols("de") == SymbolTable(group=".", decimal=",")

    def test_missing_symbols_section(self, provider: ResourceNumberDataProvider) -> None:
        """An empty symbols section yields defaults."""
        assert provider.symbols("xx") == SymbolTable()

    def test_string_pattern(self, provider: ResourceNumberDataProvider) -> None:
        """A plain string entry is a full CLDR pattern."""
        assert provider.patterns("de", FormatStyle.DECIMAL) == parse_pattern("#,##0.###")

    def test_pattern_key(self, provider: ResourceNumberDataProvider) -> None:
        """A mapping with 'pattern' is a full CLDR pattern."""
        table = provider.patterns("de", FormatStyle.PERCENT)
        assert table.positive.suffix == " %"
        assert table.negative.prefix == "-"

    def test_positive_negative_keys(self, provider: ResourceNumberDataProvider) -> None:
        """Explicit positive and negative subpatterns."""
        table = provider.patterns("de", FormatStyle.CURRENCY)
        assert table.positive == SignPattern("", "#,##0.00", " ¤")
        assert table.negative == SignPattern("-", "#,##0.00", " ¤")

    def test_missing_formats(self, provider: ResourceNumberDataProvider) -> None:
        """Locales without a style's pattern raise ValueError."""
        with pytest.raises(ValueError, match="decimal"):
            provider.patterns("xx", FormatStyle.DECIMAL)

    def test_non_mapping_resource(self, provider: ResourceNumberDataProvider) -> None:
        """A numbers resource that is not a mapping is rejected."""
        with pytest.raises(ValueError, match="mapping"):
            provider.symbols("yy")

    def test_currency_symbol(self, provider: ResourceNumberDataProvider) -> None:
        """Currency symbols come from the currencies section."""
        assert provider.currency_symbol("de", "EUR") == "€"
        assert provider.currency_symbol("de", "GBP") == "GBP"

    def test_formatting_end_to_end(self, provider: ResourceNumberDataProvider) -> None:
        """Formatter built from stored data renders German conventions."""
        decimal = NumberFormatter.for_locale(provider, "de")
        assert decimal.format(1234567.891) == "1.234.567,891"

        percent = NumberFormatter.for_locale(provider, "de", FormatStyle.PERCENT)
        assert percent.format(0.256) == "26 %"

        currency = NumberFormatter.for_locale(provider, "de", FormatStyle.CURRENCY, currency="EUR")
        assert currency.format(1234.5) == "1.234,50 €"
        assert currency.format(-1234.5) == "-1.234,50 €"

    def test_override_changes_output(self, backend: MemoryBackend) -> None:
        """Custom overrides flow into formatting."""
        backend.write("custom/locales/de/numbers.yml", "symbols:\n  group: \"'\"\n")
        provider = ResourceNumberDataProvider(ResourceStore(backend))
        assert NumberFormatter.for_locale(provider, "de").format(1234.5) == "1'234,5"

    def test_custom_resource_name(self, backend: MemoryBackend) -> None:
        """The resource name is configurable."""
        backend.write("locales/de/numerals.yml", "symbols:\n  decimal: '·'\n")
        provider = ResourceNumberDataProvider(ResourceStore(backend), "numerals")
        assert provider.symbols("de").decimal == "·"


class TestBabelNumberDataProvider:
    """Test the provider backed by Babel's CLDR data."""

    def test_english_symbols(self) -> None:
        """English uses ',' grouping and '.' decimal."""
        symbols = BabelNumberDataProvider().symbols("en_US")
        assert (symbols.group, symbols.decimal) == (",", ".")

    def test_german_symbols(self) -> None:
        """German uses '.' grouping and ',' decimal; BCP-47 codes accepted."""
        symbols = BabelNumberDataProvider().symbols("de-DE")
        assert (symbols.group, symbols.decimal) == (".", ",")

    def test_english_decimal(self) -> None:
        """English decimal formatting."""
        formatter = NumberFormatter.for_locale(BabelNumberDataProvider(), "en_US")
        assert formatter.format(1234567.891) == "1,234,567.891"
        assert formatter.format(-1234.5) == "-1,234.5"

    def test_german_decimal(self) -> None:
        """German decimal formatting."""
        formatter = NumberFormatter.for_locale(BabelNumberDataProvider(), "de_DE")
        assert formatter.format(1234.5) == "1.234,5"

    def test_english_percent(self) -> None:
        """English percent formatting."""
        formatter = NumberFormatter.for_locale(BabelNumberDataProvider(), "en", "percent")
        assert formatter.format(0.256) == "26%"

    def test_english_currency(self) -> None:
        """English USD formatting."""
        formatter = NumberFormatter.for_locale(
            BabelNumberDataProvider(), "en_US", FormatStyle.CURRENCY, currency="USD"
        )
        assert formatter.format(1234.5) == "$1,234.50"
        assert formatter.format(-1234.5) == "-$1,234.50"

    def test_german_currency(self) -> None:
        """German EUR formatting puts the symbol after the amount."""
        formatter = NumberFormatter.for_locale(
            BabelNumberDataProvider(), "de_DE", FormatStyle.CURRENCY, currency="EUR"
        )
        result = formatter.format(1234.5)
        assert result.startswith("1.234,50")
        assert result.endswith("€")

    def test_zero_digit_currency(self) -> None:
        """JPY renders without minor units."""
        formatter = NumberFormatter.for_locale(
            BabelNumberDataProvider(), "en_US", FormatStyle.CURRENCY, currency="JPY"
        )
        assert formatter.format(1234.5) == "¥1,235"

    def test_unknown_locale_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown locales use en_US data and log a warning."""
        with caplog.at_level(logging.WARNING, logger="cldrkit.locale_utils"):
            symbols = BabelNumberDataProvider().symbols("xx")
        assert symbols == BabelNumberDataProvider().symbols("en_US")
        assert "xx" in caplog.text
