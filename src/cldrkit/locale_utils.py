"""Locale utilities for storage addressing and Babel lookups.

Two normal forms are in play:
- Storage form (BCP-47 style, hyphenated): names directories under locales/
- POSIX form (underscored): what Babel's Locale.parse() expects

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from cldrkit.constants import DEFAULT_LOCALE_ALIASES, FALLBACK_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "convert_locale",
    "get_babel_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def convert_locale(
    locale_code: str,
    aliases: Mapping[str, str] = DEFAULT_LOCALE_ALIASES,
) -> str:
    """Convert a caller-supplied locale code to its storage directory name.

    Underscores become hyphens, then the lowercased code is looked up in
    ``aliases``. Unaliased codes keep their original casing.

    Args:
        locale_code: Locale code in either BCP-47 or POSIX form
        aliases: Lowercase hyphenated code -> storage directory name

    Returns:
        Directory name under locales/

    Raises:
        ValueError: If locale_code is empty

    Example:
        >>> convert_locale("en_GB")
        'en-GB'
        >>> convert_locale("zh-CN")
        'zh'
        >>> convert_locale("iw")
        'he'
    """
    if not locale_code:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)
    hyphenated = locale_code.replace("_", "-")
    return aliases.get(hyphenated.lower(), hyphenated)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching, falling back for unknown codes.

    Unknown or malformed locale codes log a warning and resolve to
    ``FALLBACK_LOCALE`` so callers always receive a usable Locale.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    try:
        return Locale.parse(normalized)
    except UnknownLocaleError as e:
        logger.warning("Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE)
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
        )
    return Locale.parse(FALLBACK_LOCALE)
