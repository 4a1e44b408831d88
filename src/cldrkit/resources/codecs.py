"""Payload decoders, one per ResourceFormat.

YAML payloads are decoded with AllowListLoader, a SafeLoader subclass that
reconstructs only a fixed set of rich types. Any other tag raises
DeserializationRejected, so data files cannot instantiate arbitrary objects.

Allow-listed rich types:
    !range    "1..5" (inclusive), "1...5" (exclusive), or {begin, end, exclude_end}
    !regexp   "/pattern/flags" or a bare pattern; flags i, m, x
    !symbol   atomic name, decoded to Symbol
    timestamps (implicit or !!timestamp), decoded to datetime/date

Plain YAML core types (null, bool, int, float, str, seq, map) decode as
usual. The other YAML 1.1 types (!!binary, !!set, !!omap, !!pairs) are not
allow-listed and are rejected like any unknown tag.

Pickled payloads are trusted authored data and decoded without validation.
RAW payloads are returned as the stored bytes.

Python 3.13+. Uses PyYAML.
"""

from __future__ import annotations

import pickle
import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import ClassVar, Protocol

import yaml
from yaml.constructor import ConstructorError

from cldrkit.diagnostics import (
    DeserializationRejected,
    Diagnostic,
    DiagnosticCode,
    ResourceLoadError,
)
from cldrkit.enums import ResourceFormat

__all__ = [
    "CODECS",
    "AllowListLoader",
    "BinaryCodec",
    "RawCodec",
    "ResourceCodec",
    "Symbol",
    "YamlCodec",
    "codec_for",
]


class Symbol(str):
    """Atomic name decoded from a !symbol tag.

    Compares and hashes equal to the plain string with the same text, so
    symbols work as mapping keys interchangeably with strings.

    Example:
        >>> Symbol("decimal") == "decimal"
        True
        >>> Symbol("decimal")
        Symbol('decimal')
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Symbol({str(self)!r})"


_REGEXP_FLAGS: Mapping[str, re.RegexFlag] = MappingProxyType(
    {
        "i": re.IGNORECASE,
        "m": re.DOTALL,
        "x": re.VERBOSE,
    }
)

_RANGE_SCALAR = re.compile(r"^\s*(-?\d+)\s*(\.\.\.?)\s*(-?\d+)\s*$")
_REGEXP_SCALAR = re.compile(r"^/(.*)/([a-z]*)$", re.DOTALL)


_CORE_TAGS: tuple[str, ...] = tuple(
    f"tag:yaml.org,2002:{name}"
    for name in ("null", "bool", "int", "float", "str", "seq", "map", "timestamp")
)


def _strict(
    constructor: Callable[[yaml.SafeLoader, yaml.Node], object],
) -> Callable[[yaml.SafeLoader, yaml.Node], object]:
    """Report a core constructor's value errors as ConstructorError.

    SafeConstructor raises KeyError for '!!bool maybe', AttributeError for
    '!!timestamp x' and ValueError for impossible dates or unparsable numbers.
    """

    def construct(loader: yaml.SafeLoader, node: yaml.Node) -> object:
        try:
            return constructor(loader, node)
        except (KeyError, AttributeError, ValueError) as e:
            kind = str(node.tag).rsplit(":", 1)[-1]
            msg = f"invalid {kind} value: {e}"
            raise ConstructorError(None, None, msg, node.start_mark) from e

    return construct


class AllowListLoader(yaml.SafeLoader):
    """SafeLoader that rejects every tag outside the allow-list.

    The constructor table is built from the core tags alone instead of
    inheriting SafeLoader's, so set, omap, pairs and binary fall through to
    the rejecting constructor.

    ``resource_key`` names the resource being decoded so rejections can
    report where the offending tag came from.
    """

    resource_key: str = ""
    yaml_constructors: ClassVar[dict[str | None, Callable[..., object]]] = {
        tag: _strict(yaml.SafeLoader.yaml_constructors[tag]) for tag in _CORE_TAGS
    }


def _construct_range(loader: AllowListLoader, node: yaml.Node) -> range:
    if isinstance(node, yaml.MappingNode):
        data = loader.construct_mapping(node, deep=True)
        begin, end = data.get("begin"), data.get("end")
        exclude_end = bool(data.get("exclude_end", False))
    else:
        match = _RANGE_SCALAR.match(str(loader.construct_scalar(node)))
        if match is None:
            msg = "expected a range like '1..5' or '1...5'"
            raise ConstructorError(None, None, msg, node.start_mark)
        begin, end = int(match.group(1)), int(match.group(3))
        exclude_end = match.group(2) == "..."

    if not isinstance(begin, int) or not isinstance(end, int):
        msg = "range bounds must be integers"
        raise ConstructorError(None, None, msg, node.start_mark)
    return range(begin, end if exclude_end else end + 1)


def _construct_regexp(loader: AllowListLoader, node: yaml.Node) -> re.Pattern[str]:
    source = str(loader.construct_scalar(node))
    flags = 0
    match = _REGEXP_SCALAR.match(source)
    if match is not None:
        source = match.group(1)
        for letter in match.group(2):
            if letter not in _REGEXP_FLAGS:
                msg = f"unsupported regexp flag '{letter}'"
                raise ConstructorError(None, None, msg, node.start_mark)
            flags |= _REGEXP_FLAGS[letter]
    try:
        return re.compile(source, flags)
    except re.error as e:
        msg = f"invalid regexp: {e}"
        raise ConstructorError(None, None, msg, node.start_mark) from e


def _construct_symbol(loader: AllowListLoader, node: yaml.Node) -> Symbol:
    return Symbol(str(loader.construct_scalar(node)))


def _reject_undefined(loader: AllowListLoader, node: yaml.Node) -> None:
    key = loader.resource_key
    diagnostic = Diagnostic(
        code=DiagnosticCode.DESERIALIZATION_REJECTED,
        message=f"Tag '{node.tag}' is not in the deserialization allow-list.",
        hint="Only !range, !regexp, !symbol and timestamps may be reconstructed",
        resource_key=key or None,
    )
    raise DeserializationRejected(diagnostic, key=key, tag=node.tag)


AllowListLoader.add_constructor("!range", _construct_range)
AllowListLoader.add_constructor("!regexp", _construct_regexp)
AllowListLoader.add_constructor("!symbol", _construct_symbol)
AllowListLoader.add_constructor(None, _reject_undefined)


class ResourceCodec(Protocol):
    """Protocol for turning a stored payload into a value."""

    def decode(self, payload: bytes, key: str) -> object:
        """Decode payload read from storage key.

        Raises:
            ResourceLoadError: If the payload is malformed
        """


def _decode_failed(key: str, kind: str, error: Exception) -> ResourceLoadError:
    diagnostic = Diagnostic(
        code=DiagnosticCode.RESOURCE_DECODE_FAILED,
        message=f"Resource '{key}' is not valid {kind}: {error}",
        resource_key=key,
    )
    return ResourceLoadError(diagnostic, key=key)


class YamlCodec:
    """Decode structured text through AllowListLoader."""

    __slots__ = ()

    def decode(self, payload: bytes, key: str) -> object:
        """Decode YAML payload.

        Raises:
            DeserializationRejected: If a tag outside the allow-list is present
            ResourceLoadError: If the YAML is malformed or names an
                impossible value such as the date 2024-13-45
        """
        loader = AllowListLoader(payload)
        loader.resource_key = key
        try:
            return loader.get_single_data()
        except yaml.YAMLError as e:
            raise _decode_failed(key, "YAML", e) from e
        finally:
            loader.dispose()


class BinaryCodec:
    """Decode trusted pickled object graphs without validation."""

    __slots__ = ()

    def decode(self, payload: bytes, key: str) -> object:
        """Unpickle payload.

        Raises:
            ResourceLoadError: If the payload is truncated or not a pickle, or
                references a class that cannot be imported
        """
        try:
            return pickle.loads(payload)  # noqa: S301
        except (
            pickle.UnpicklingError,
            EOFError,
            AttributeError,
            ImportError,
            IndexError,
            ValueError,
        ) as e:
            raise _decode_failed(key, "pickle data", e) from e


class RawCodec:
    """Return the stored bytes unmodified, with no decoding."""

    __slots__ = ()

    def decode(self, payload: bytes, key: str) -> object:  # noqa: ARG002
        return payload


CODECS: Mapping[ResourceFormat, ResourceCodec] = MappingProxyType(
    {
        ResourceFormat.YAML: YamlCodec(),
        ResourceFormat.BINARY: BinaryCodec(),
        ResourceFormat.RAW: RawCodec(),
    }
)


def codec_for(resource_format: ResourceFormat) -> ResourceCodec:
    """Return the codec registered for a format."""
    return CODECS[resource_format]
