"""Lazy, memoizing access to locale and shared resources.

ResourceStore reads through a ResourceBackend, decodes payloads with the
codec registered for each path's ResourceFormat, and memoizes every
successful load. YAML resources are deep-merged with a mirrored
custom/<path> override when one exists and merging is enabled.

Storage layout:
    locales/<locale>/<name>.<ext>   locale-specific resource
    shared/<name>.<ext>             locale-independent resource
    custom/<relative path>          override mirror (YAML only)

Thread Safety:
    Loads go through MemoCache.get_or_compute, so each path is read from
    storage at most once per store even under concurrent access.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from cldrkit.constants import ALL_RESOURCES, LOCALES_DIR
from cldrkit.enums import ResourceFormat
from cldrkit.locale_utils import convert_locale

from .cache import MemoCache
from .codecs import codec_for
from .config import StoreConfig
from .merge import deep_merge
from .paths import ResourcePath

if TYPE_CHECKING:
    from .backends import ResourceBackend

__all__ = ["ResourceStore"]

logger = logging.getLogger(__name__)


class ResourceStore:
    """Memoizing accessor over a path-addressed resource tree.

    Values are shared between callers: treat returned mappings as read-only.

    Example:
        >>> store = ResourceStore(FileSystemBackend("resources"))
        >>> store.get_locale_resource("de", "numbers")["symbols"]["decimal"]
        ','
        >>> store.is_loaded("locales", "de", "numbers")
        True
    """

    __slots__ = ("_backend", "_cache", "_config")

    def __init__(self, backend: ResourceBackend, config: StoreConfig | None = None) -> None:
        """Initialize resource store.

        Args:
            backend: Backing storage
            config: Store configuration (default: StoreConfig())
        """
        self._backend = backend
        self._config = config if config is not None else StoreConfig()
        self._cache: MemoCache[str, object] = MemoCache()

    @property
    def backend(self) -> ResourceBackend:
        """Backing storage."""
        return self._backend

    @property
    def config(self) -> StoreConfig:
        """Store configuration."""
        return self._config

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def locale_path(self, locale: str, resource_name: str) -> ResourcePath:
        """Build the path of a named resource for a locale.

        This is the only rule used to address locale resources.

        Args:
            locale: Locale code (aliases and POSIX form accepted)
            resource_name: Resource name, with or without extension

        Returns:
            ResourcePath under locales/<converted locale>/
        """
        directory = convert_locale(locale, self._config.locale_aliases)
        return ResourcePath.of(LOCALES_DIR, directory, resource_name)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get(self, *segments: object, format: ResourceFormat | None = None) -> object:  # noqa: A002
        """Return the resource at the given segments, loading it on first use.

        Args:
            *segments: Naming segments (see ResourcePath.of)
            format: Explicit serialization kind

        Returns:
            Decoded (and possibly override-merged) resource value

        Raises:
            ResourceNotFound: If the resource is absent from storage
            DeserializationRejected: If YAML names a disallowed type
            ResourceLoadError: If the payload is malformed
        """
        return self.get_path(ResourcePath.of(*segments, format=format))

    def get_path(self, path: ResourcePath) -> object:
        """Return the resource at path, loading it on first use."""
        return self._cache.get_or_compute(path.key, lambda: self._load(path))

    def exists(self, *segments: object, format: ResourceFormat | None = None) -> bool:  # noqa: A002
        """Check storage for a resource without loading it."""
        return self._backend.exists(ResourcePath.of(*segments, format=format).key)

    def is_loaded(self, *segments: object, format: ResourceFormat | None = None) -> bool:  # noqa: A002
        """Check whether a resource is already memoized."""
        return ResourcePath.of(*segments, format=format).key in self._cache

    def get_locale_resource(self, locale: str, resource_name: str) -> object:
        """Return a named resource for a locale."""
        return self.get_path(self.locale_path(locale, resource_name))

    def locale_resource_exists(self, locale: str, resource_name: str) -> bool:
        """Check storage for a locale resource without loading it."""
        return self._backend.exists(self.locale_path(locale, resource_name).key)

    def locale_resource_loaded(self, locale: str, resource_name: str) -> bool:
        """Check whether a locale resource is already memoized."""
        return self.locale_path(locale, resource_name).key in self._cache

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def resource_types_for(self, locale: str) -> tuple[str, ...]:
        """List resource names stored for a locale.

        Args:
            locale: Locale code

        Returns:
            Sorted resource names without extensions (e.g., ('numbers', 'units'))
        """
        directory = convert_locale(locale, self._config.locale_aliases)
        entries = self._backend.list_dir(f"{LOCALES_DIR}/{directory}")
        return tuple(sorted({PurePosixPath(entry).stem for entry in entries}))

    def supported_locales(self) -> tuple[str, ...]:
        """Locales covered by the all-locale preloads.

        Returns:
            config.supported_locales when set, else directories under locales/
        """
        if self._config.supported_locales is not None:
            return self._config.supported_locales
        return self._backend.list_dir(LOCALES_DIR)

    # ------------------------------------------------------------------
    # Preloading
    # ------------------------------------------------------------------

    def preload_resources_for_locale(self, locale: str, *resource_names: str) -> None:
        """Eagerly load resources for one locale.

        Args:
            locale: Locale code
            *resource_names: Names to load; a first name of "all" loads every
                resource stored for the locale
        """
        if not resource_names:
            return
        names = (
            self.resource_types_for(locale)
            if resource_names[0] == ALL_RESOURCES
            else resource_names
        )
        for name in names:
            self.get_locale_resource(locale, name)

    def preload_resource_for_locales(self, resource_name: str, *locales: str) -> None:
        """Eagerly load one resource for several locales."""
        for locale in locales:
            self.preload_resources_for_locale(locale, resource_name)

    def preload_resources_for_all_locales(self, *resource_names: str) -> None:
        """Eagerly load resources for every supported locale."""
        for locale in self.supported_locales():
            self.preload_resources_for_locale(locale, *resource_names)

    def preload_all_resources(self) -> None:
        """Eagerly load every resource of every supported locale."""
        for locale in self.supported_locales():
            self.preload_resources_for_locale(locale, ALL_RESOURCES)

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    def cache_info(self) -> dict[str, int | tuple[str, ...]]:
        """Get memo cache statistics.

        Returns:
            Dictionary with:
            - size: Number of memoized resources
            - loads: Successful loads since creation or last clear
            - keys: Memoized storage keys in load order
        """
        return {
            "size": len(self._cache),
            "loads": self._cache.loads,
            "keys": self._cache.keys(),
        }

    def clear_cache(self) -> None:
        """Forget all memoized resources."""
        self._cache.clear()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _load(self, path: ResourcePath) -> object:
        value = codec_for(path.format).decode(self._backend.read(path.key), path.key)
        if path.format is ResourceFormat.YAML and self._config.merge_custom:
            value = self._merge_custom(path, value)
        logger.debug("Loaded resource %s", self._backend.describe(path.key))
        return value

    def _merge_custom(self, path: ResourcePath, base: object) -> object:
        custom = path.custom()
        if not self._backend.exists(custom.key):
            return base
        override = codec_for(custom.format).decode(self._backend.read(custom.key), custom.key)
        logger.debug("Merged custom override %s", self._backend.describe(custom.key))
        return deep_merge(base, override)
