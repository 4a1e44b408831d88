"""Resource path addressing.

A ResourcePath is an ordered sequence of naming segments plus the closed
serialization tag that decides how the store decodes it. The tag is fixed
at construction, so loading never re-inspects file suffixes.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from cldrkit.constants import BINARY_EXTENSIONS, CUSTOM_DIR, DEFAULT_EXTENSION, YAML_EXTENSIONS
from cldrkit.enums import ResourceFormat

__all__ = ["ResourcePath", "format_for_name"]


def format_for_name(name: str) -> ResourceFormat | None:
    """Return the format implied by a file name's extension.

    Args:
        name: Final path segment (e.g., 'numbers.yml')

    Returns:
        Matching ResourceFormat, or None if the extension is not recognized
    """
    suffix = PurePosixPath(name).suffix
    if suffix in YAML_EXTENSIONS:
        return ResourceFormat.YAML
    if suffix in BINARY_EXTENSIONS:
        return ResourceFormat.BINARY
    return None


@dataclass(frozen=True, slots=True)
class ResourcePath:
    """Immutable address of a stored resource.

    Build instances with ResourcePath.of(), which normalizes segments and
    infers the format. Direct construction takes segments verbatim.

    Example:
        >>> ResourcePath.of("locales", "en", "numbers").key
        'locales/en/numbers.yml'
        >>> ResourcePath.of("shared", "table.pickle").format
        <ResourceFormat.BINARY: 'binary'>
        >>> ResourcePath.of("shared", "notes.txt", format=ResourceFormat.RAW).key
        'shared/notes.txt'

    Attributes:
        segments: Naming segments, outermost first
        format: Serialization kind used to decode the payload
    """

    segments: tuple[str, ...]
    format: ResourceFormat

    def __post_init__(self) -> None:
        """Validate segments.

        Raises:
            ValueError: If there are no segments or any segment is empty
        """
        if not self.segments:
            msg = "ResourcePath requires at least one segment"
            raise ValueError(msg)
        if any(not segment for segment in self.segments):
            msg = f"ResourcePath segments must be non-empty, got {self.segments!r}"
            raise ValueError(msg)

    @classmethod
    def of(cls, *segments: object, format: ResourceFormat | None = None) -> ResourcePath:  # noqa: A002
        """Build a path from naming segments.

        Segments are converted with str(). Without an explicit format, a last
        segment lacking a recognized extension gets DEFAULT_EXTENSION appended
        and the path is YAML. An explicit format keeps segments as given.

        Args:
            *segments: Naming segments (strings, enums, or other str()-able values)
            format: Explicit serialization kind, overriding extension inference

        Returns:
            New ResourcePath
        """
        parts = tuple(str(segment) for segment in segments)
        if format is not None:
            return cls(parts, format)
        if not parts:
            return cls(parts, ResourceFormat.YAML)

        inferred = format_for_name(parts[-1])
        if inferred is None:
            parts = (*parts[:-1], parts[-1] + DEFAULT_EXTENSION)
            inferred = ResourceFormat.YAML
        return cls(parts, inferred)

    @property
    def key(self) -> str:
        """Storage key: segments joined with '/'."""
        return "/".join(self.segments)

    @property
    def name(self) -> str:
        """Final segment without its extension."""
        return PurePosixPath(self.segments[-1]).stem

    def custom(self) -> ResourcePath:
        """Return the mirrored override path under custom/."""
        return ResourcePath((CUSTOM_DIR, *self.segments), self.format)

    def __str__(self) -> str:
        """Return the storage key."""
        return self.key
