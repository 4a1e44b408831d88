"""cldrkit - locale resource store and CLDR-style number formatting.

Resolves locale data from a path-addressed resource tree with lazy,
memoized loading and custom overrides, and renders numbers through a
pattern-driven pipeline using locale symbols and sign patterns.

Public API:
    ResourceStore - Memoizing accessor over locales/, shared/ and custom/
    ResourcePath - Immutable resource address with its serialization kind
    StoreConfig - Store configuration (override merging, locale aliases)
    FileSystemBackend, MemoryBackend - Backing storage implementations
    NumberFormatter - Five-stage number rendering pipeline
    SymbolTable, SignPattern, PatternTable - Locale number data
    BabelNumberDataProvider, ResourceNumberDataProvider - Locale data sources
    Cursor, TransformRule, NullTransform - Text transform rule interface

Exceptions:
    CldrError - Base exception class
    ResourceLoadError - Resource could not be read or decoded
    ResourceNotFound - Resource absent from storage
    DeserializationRejected - YAML named a type outside the allow-list

Submodules:
    cldrkit.resources - Store, paths, backends, codecs, memo cache
    cldrkit.numbers - Formatter, tokenizer, strategies, providers
    cldrkit.transforms - Cursor and transform rules
    cldrkit.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import CldrError, DeserializationRejected, ResourceLoadError, ResourceNotFound
from .enums import FormatStyle, NumberSign, ResourceFormat
from .numbers import (
    BabelNumberDataProvider,
    NumberFormatter,
    PatternTable,
    ResourceNumberDataProvider,
    SignPattern,
    SymbolTable,
)
from .resources import FileSystemBackend, MemoryBackend, ResourcePath, ResourceStore, StoreConfig
from .transforms import Cursor, NullTransform, TransformRule

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cldrkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelNumberDataProvider",
    "CldrError",
    "Cursor",
    "DeserializationRejected",
    "FileSystemBackend",
    "FormatStyle",
    "MemoryBackend",
    "NullTransform",
    "NumberFormatter",
    "NumberSign",
    "PatternTable",
    "ResourceFormat",
    "ResourceLoadError",
    "ResourceNotFound",
    "ResourceNumberDataProvider",
    "ResourcePath",
    "ResourceStore",
    "SignPattern",
    "StoreConfig",
    "SymbolTable",
    "TransformRule",
    "__version__",
]
