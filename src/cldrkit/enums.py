"""Enumerations for cldrkit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ResourceFormat(StrEnum):
    """Serialization kind of a stored resource.

    Fixed when a ResourcePath is constructed; the store dispatches on this
    tag instead of re-reading file suffixes at load time.
    """

    YAML = "yaml"
    """Structured text decoded with an allow-list of rich types."""

    BINARY = "binary"
    """Trusted pickled object graph, returned without validation."""

    RAW = "raw"
    """Stored bytes returned unmodified."""


class NumberSign(StrEnum):
    """Sign classification selecting a sign pattern.

    StrEnum provides automatic string conversion: str(NumberSign.POSITIVE) == "positive"
    """

    POSITIVE = "positive"
    """abs(value) == value, which includes zero and negative zero."""

    NEGATIVE = "negative"


class FormatStyle(StrEnum):
    """Number format style, naming the locale pattern family to render with."""

    DECIMAL = "decimal"
    PERCENT = "percent"
    CURRENCY = "currency"


__all__ = [
    "FormatStyle",
    "NumberSign",
    "ResourceFormat",
]
