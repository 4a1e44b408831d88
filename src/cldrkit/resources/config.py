"""Configuration for ResourceStore.

A single frozen dataclass replaces process-wide switches: each store is
told at construction whether custom overrides apply and how locale codes
map to storage directories.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from cldrkit.constants import DEFAULT_LOCALE_ALIASES, DISABLE_CUSTOM_ENV_VAR

__all__ = ["StoreConfig"]

_TRUTHY = frozenset(("1", "true", "yes", "on"))


@dataclass(frozen=True, slots=True)
class StoreConfig:
    """Immutable configuration for ResourceStore.

    All fields have sensible defaults; ``StoreConfig()`` merges custom
    overrides and discovers locales from storage.

    Attributes:
        merge_custom: Deep-merge custom/<path> YAML overrides over bundled
            data (default: True)
        supported_locales: Locales used by the all-locale preloads. None
            means the directory names found under locales/ (default: None)
        locale_aliases: Lowercase hyphenated locale code -> storage
            directory name (default: DEFAULT_LOCALE_ALIASES)

    Example:
        >>> config = StoreConfig(merge_custom=False, supported_locales=("en", "de"))
        >>> store = ResourceStore(FileSystemBackend("resources"), config)
    """

    merge_custom: bool = True
    supported_locales: tuple[str, ...] | None = None
    locale_aliases: Mapping[str, str] = field(default_factory=lambda: DEFAULT_LOCALE_ALIASES)

    def __post_init__(self) -> None:
        """Validate and freeze configuration values.

        Raises:
            ValueError: If supported_locales contains an empty code, or an
                alias key is not lowercase
        """
        if self.supported_locales is not None:
            locales = tuple(self.supported_locales)
            if any(not code for code in locales):
                msg = "supported_locales must not contain empty locale codes"
                raise ValueError(msg)
            object.__setattr__(self, "supported_locales", locales)

        for alias in self.locale_aliases:
            if alias != alias.lower():
                msg = f"locale_aliases keys must be lowercase, got '{alias}'"
                raise ValueError(msg)
        if not isinstance(self.locale_aliases, MappingProxyType):
            object.__setattr__(self, "locale_aliases", MappingProxyType(dict(self.locale_aliases)))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StoreConfig:
        """Build a configuration honoring CLDRKIT_DISABLE_CUSTOM_RESOURCES.

        Args:
            environ: Environment mapping (default: os.environ)

        Returns:
            StoreConfig with merge_custom False when the variable is truthy
        """
        env = os.environ if environ is None else environ
        disabled = env.get(DISABLE_CUSTOM_ENV_VAR, "").strip().lower() in _TRUTHY
        return cls(merge_custom=not disabled)
