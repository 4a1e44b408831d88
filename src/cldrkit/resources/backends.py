"""Backing storage for the resource store.

Provides the protocol the store reads through, a filesystem implementation
with path-traversal prevention, and an in-memory implementation that
counts reads.

Components:
    ResourceBackend - Protocol for key-addressed byte storage (structural typing)
    FileSystemBackend - Disk-based storage rooted at a directory
    MemoryBackend - Dict-based storage for embedding and tests

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from threading import RLock
from typing import Protocol

from cldrkit.diagnostics import ResourceNotFound

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "ResourceBackend",
    # Concrete backends
    "FileSystemBackend",
    "MemoryBackend",
]


class ResourceBackend(Protocol):
    """Protocol for key-addressed resource storage.

    Keys are '/'-separated relative paths such as 'locales/en/numbers.yml'.
    Implementations must raise ResourceNotFound from read() when the key is
    absent; the store relies on that to report missing resources.
    """

    def exists(self, key: str) -> bool:
        """Check whether key is present, without reading it."""

    def read(self, key: str) -> bytes:
        """Read the payload stored under key.

        Raises:
            ResourceNotFound: If key is absent
        """

    def list_dir(self, prefix: str) -> tuple[str, ...]:
        """List the immediate child names below a '/'-separated prefix.

        Returns an empty tuple when the prefix does not exist.
        """

    def describe(self, key: str) -> str:
        """Return human-readable location of key for diagnostics."""


@dataclass(frozen=True, slots=True)
class FileSystemBackend:
    """File system storage rooted at a fixed directory.

    Security:
        Keys containing '..' segments or absolute paths are rejected.
        All resolved paths are validated against the root directory, which
        also catches symlinks pointing outside it.

    Example:
        >>> backend = FileSystemBackend("resources")
        >>> backend.read("locales/en/numbers.yml")
        # Reads from: resources/locales/en/numbers.yml

    Attributes:
        root: Directory holding locales/, shared/ and custom/
    """

    root: str | Path
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory."""
        object.__setattr__(self, "_resolved_root", Path(self.root).resolve())

    @staticmethod
    def _validate_key(key: str) -> None:
        """Validate key for path traversal attacks.

        Raises:
            ValueError: If key is empty, absolute, or contains '..'
        """
        if not key:
            msg = "Resource key cannot be empty"
            raise ValueError(msg)
        if key.startswith(("/", "\\")) or Path(key).is_absolute():
            msg = f"Absolute paths not allowed in resource key: '{key}'"
            raise ValueError(msg)
        if ".." in PurePosixPath(key.replace("\\", "/")).parts:
            msg = f"Path traversal sequences not allowed in resource key: '{key}'"
            raise ValueError(msg)

    def _resolve(self, key: str) -> Path:
        self._validate_key(key)
        full_path = (self._resolved_root / key).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path traversal detected: resolved path escapes root directory. key='{key}'"
            raise ValueError(msg) from None
        return full_path

    def exists(self, key: str) -> bool:
        return self._resolve(key).is_file()

    def read(self, key: str) -> bytes:
        """Read file bytes.

        Raises:
            ResourceNotFound: If the file does not exist
            ValueError: If key escapes the root directory
            OSError: If the file cannot be read
        """
        path = self._resolve(key)
        if not path.is_file():
            raise ResourceNotFound.for_key(key)
        return path.read_bytes()

    def list_dir(self, prefix: str) -> tuple[str, ...]:
        directory = self._resolve(prefix) if prefix else self._resolved_root
        if not directory.is_dir():
            return ()
        return tuple(sorted(child.name for child in directory.iterdir()))

    def describe(self, key: str) -> str:
        return str(Path(self.root) / key)


class MemoryBackend:
    """In-memory storage keyed by '/'-separated paths.

    Every successful read is counted per key in ``reads``, which makes this
    backend a convenient load-counting stub.

    Thread Safety:
        All operations protected by RLock.

    Example:
        >>> backend = MemoryBackend({"shared/meta.yml": "version: 1"})
        >>> backend.read("shared/meta.yml")
        b'version: 1'
        >>> backend.reads["shared/meta.yml"]
        1
    """

    __slots__ = ("_files", "_lock", "reads")

    def __init__(self, files: dict[str, str | bytes] | None = None) -> None:
        """Initialize memory backend.

        Args:
            files: Initial contents; str values are encoded as UTF-8
        """
        self._files: dict[str, bytes] = {}
        self._lock = RLock()
        self.reads: Counter[str] = Counter()
        for key, data in (files or {}).items():
            self.write(key, data)

    def write(self, key: str, data: str | bytes) -> None:
        """Store data under key, replacing any previous payload."""
        payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        with self._lock:
            self._files[key] = payload

    def delete(self, key: str) -> None:
        """Remove key if present."""
        with self._lock:
            self._files.pop(key, None)

    def exists(self, key: str) -> bool:
        with self._lock:
            return key in self._files

    def read(self, key: str) -> bytes:
        with self._lock:
            if key not in self._files:
                raise ResourceNotFound.for_key(key)
            self.reads[key] += 1
            return self._files[key]

    def list_dir(self, prefix: str) -> tuple[str, ...]:
        base = prefix.rstrip("/") + "/" if prefix else ""
        with self._lock:
            names = {
                key[len(base) :].split("/", 1)[0]
                for key in self._files
                if key.startswith(base) and len(key) > len(base)
            }
        return tuple(sorted(names))

    def describe(self, key: str) -> str:
        return f"memory:{key}"
