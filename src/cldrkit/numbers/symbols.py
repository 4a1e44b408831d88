"""Locale number data: symbol table and sign-keyed pattern table.

Prefixes and suffixes hold CLDR literal text: quoted runs ('text') are
literal, '' is an apostrophe, and only unquoted '-', '+' and '¤' are
placeholders.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace

from cldrkit.constants import DEFAULT_NUMBER_PATTERN, DEFAULT_SYMBOLS
from cldrkit.enums import NumberSign

__all__ = ["PatternTable", "SignPattern", "SymbolTable"]

_SIGN_TOKEN = re.compile(r"'([^']*)'|[-+]")
_CURRENCY_TOKEN = re.compile(r"'[^']*'|¤+")


def _quote_literal(text: str) -> str:
    """Quote text so every character renders literally.

    Example:
        >>> _quote_literal("US$")
        "'US$'"
        >>> _quote_literal("l'€")
        "'l''''€'"
    """
    return "''".join(f"'{part}'" if part else "" for part in text.split("'"))


@dataclass(frozen=True, slots=True)
class SymbolTable:
    """Locale number symbols.

    Attributes:
        group: Digit group separator
        decimal: Decimal separator
        plus_sign: Substituted for '+' in pattern literals
        minus_sign: Substituted for '-' in pattern literals
    """

    group: str = DEFAULT_SYMBOLS["group"]
    decimal: str = DEFAULT_SYMBOLS["decimal"]
    plus_sign: str = DEFAULT_SYMBOLS["plus_sign"]
    minus_sign: str = DEFAULT_SYMBOLS["minus_sign"]

    @classmethod
    def from_mapping(cls, data: Mapping[str, object] | None) -> SymbolTable:
        """Build a table from locale data, falling back per key to defaults.

        Unknown keys and non-string values are ignored.

        Example:
            >>> SymbolTable.from_mapping({"group": ".", "decimal": ","})
            SymbolTable(group='.', decimal=',', plus_sign='+', minus_sign='-')
        """
        values = {
            name: value
            for name, value in (data or {}).items()
            if name in DEFAULT_SYMBOLS and isinstance(value, str)
        }
        return cls(**values)

    def substitute(self, literal: str) -> str:
        """Render a pattern literal with locale signs and quoting removed.

        Example:
            >>> SymbolTable(minus_sign="\\u2212").substitute("'-'-")
            '-−'
            >>> SymbolTable().substitute("''")
            "'"
        """

        def resolve(token: re.Match[str]) -> str:
            match token.group(0):
                case "-":
                    return self.minus_sign
                case "+":
                    return self.plus_sign
                case _:
                    return token.group(1) or "'"

        return _SIGN_TOKEN.sub(resolve, literal)


@dataclass(frozen=True, slots=True)
class SignPattern:
    """Prefix, numeric pattern and suffix rendered for one sign.

    Attributes:
        prefix: Literal text before the digits
        integer_fraction_pattern: Numeric pattern such as '#,##0.###'
        suffix: Literal text after the digits
    """

    prefix: str = ""
    integer_fraction_pattern: str = DEFAULT_NUMBER_PATTERN
    suffix: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> SignPattern:
        """Build from a mapping with optional prefix/pattern/suffix keys.

        Both 'integer_fraction_pattern' and the shorter 'pattern' are accepted.
        """
        pattern = data.get("integer_fraction_pattern", data.get("pattern", DEFAULT_NUMBER_PATTERN))
        return cls(
            prefix=data.get("prefix", ""),
            integer_fraction_pattern=pattern,
            suffix=data.get("suffix", ""),
        )


@dataclass(frozen=True, slots=True)
class PatternTable:
    """Sign-keyed pattern pair. Both patterns are required.

    Attributes:
        positive: Pattern for values where abs(value) == value
        negative: Pattern for all other values
    """

    positive: SignPattern
    negative: SignPattern

    def for_sign(self, sign: NumberSign) -> SignPattern:
        """Select the pattern for a sign classification."""
        return self.positive if sign is NumberSign.POSITIVE else self.negative

    def with_currency(self, symbol: str, code: str) -> PatternTable:
        """Replace CLDR currency placeholders in prefixes and suffixes.

        '¤¤' (and longer runs) becomes the ISO code; a single '¤' the symbol.
        Quoted '¤' is left alone, and the inserted text is quoted so signs
        inside a symbol are not localized.
        """

        def fill(literal: str) -> str:
            def resolve(match: re.Match[str]) -> str:
                token = match.group(0)
                if token.startswith("'"):
                    return token
                return _quote_literal(symbol if token == "¤" else code)

            return _CURRENCY_TOKEN.sub(resolve, literal)

        def filled(pattern: SignPattern) -> SignPattern:
            return replace(pattern, prefix=fill(pattern.prefix), suffix=fill(pattern.suffix))

        return PatternTable(positive=filled(self.positive), negative=filled(self.negative))
