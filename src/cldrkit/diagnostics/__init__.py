"""Diagnostic system for cldrkit errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import CldrError, DeserializationRejected, ResourceLoadError, ResourceNotFound

__all__ = [
    "CldrError",
    "DeserializationRejected",
    "Diagnostic",
    "DiagnosticCode",
    "ResourceLoadError",
    "ResourceNotFound",
]
