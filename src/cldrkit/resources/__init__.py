"""Locale resource storage.

Provides the memoizing ResourceStore together with its addressing,
storage, decoding and configuration pieces.

Python 3.13+.
"""

from .backends import FileSystemBackend, MemoryBackend, ResourceBackend
from .cache import MemoCache
from .codecs import CODECS, AllowListLoader, ResourceCodec, Symbol, codec_for
from .config import StoreConfig
from .merge import deep_merge
from .paths import ResourcePath, format_for_name
from .store import ResourceStore

__all__ = [
    "CODECS",
    "AllowListLoader",
    "FileSystemBackend",
    "MemoCache",
    "MemoryBackend",
    "ResourceBackend",
    "ResourceCodec",
    "ResourcePath",
    "ResourceStore",
    "StoreConfig",
    "Symbol",
    "codec_for",
    "deep_merge",
    "format_for_name",
]
