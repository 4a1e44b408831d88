"""cldrkit exception hierarchy with structured diagnostics.

All exceptions optionally carry Diagnostic objects for rich error information.

Hierarchy:
    CldrError (base)
    └─ ResourceLoadError (resource could not be produced)
       ├─ ResourceNotFound (key absent from backing storage)
       └─ DeserializationRejected (structured text names a disallowed type)

Number formatting has no error class: out-of-range precision is clamped.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class CldrError(Exception):
    """Base exception for all cldrkit errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CldrError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ResourceLoadError(CldrError):
    """A resource could not be read or decoded.

    Attributes:
        key: Storage key of the resource (empty when unknown)
    """

    def __init__(self, message: str | Diagnostic, *, key: str = "") -> None:
        """Initialize ResourceLoadError.

        Args:
            message: Error message string OR Diagnostic object
            key: Storage key of the resource
        """
        super().__init__(message)
        self.key = key


class ResourceNotFound(ResourceLoadError):
    """Resource key is absent from backing storage at access time.

    Raised on first access only, never speculatively. Not cached: a later
    read succeeds once the resource has been written.
    """

    @classmethod
    def for_key(cls, key: str) -> "ResourceNotFound":
        """Build the canonical not-found error for a storage key."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.RESOURCE_NOT_FOUND,
            message=f"Resource '{key}' not found.",
            resource_key=key,
        )
        return cls(diagnostic, key=key)


class DeserializationRejected(ResourceLoadError):
    """Structured text tried to reconstruct a type outside the allow-list.

    This is a security boundary. It must propagate to the caller and is
    never downgraded to a warning.

    Attributes:
        tag: YAML tag that was rejected
    """

    def __init__(self, message: str | Diagnostic, *, key: str = "", tag: str = "") -> None:
        """Initialize DeserializationRejected.

        Args:
            message: Error message string OR Diagnostic object
            key: Storage key of the offending resource
            tag: Rejected YAML tag
        """
        super().__init__(message, key=key)
        self.tag = tag
