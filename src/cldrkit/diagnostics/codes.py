"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Resource errors (lookup, decoding, override merging)
    """

    # Resource errors (1000-1999)
    RESOURCE_NOT_FOUND = 1001
    RESOURCE_DECODE_FAILED = 1002
    DESERIALIZATION_REJECTED = 1003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        resource_key: Storage key of the resource involved (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    resource_key: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as a compact multi-line report.

        Example output:
            error[RESOURCE_NOT_FOUND]: Resource 'locales/xx/numbers.yml' not found.
              --> locales/xx/numbers.yml
              = help: Check the resource root and locale code

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.resource_key is not None:
            lines.append(f"  --> {self.resource_key}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
