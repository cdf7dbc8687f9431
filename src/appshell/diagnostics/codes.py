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
        1000-1999: Configuration errors (detected at construction)
        2000-2999: Lifecycle errors (mount/unmount/navigation misuse)
        3000-3999: Composition errors (raised while describing the tree)
    """

    # Configuration errors (1000-1999)
    SUPPORTED_LOCALES_EMPTY = 1001
    REQUIRED_FIELD_MISSING = 1002
    INVALID_FIELD_TYPE = 1003
    INVALID_LOCALE = 1004

    # Lifecycle errors (2000-2999)
    ALREADY_MOUNTED = 2001
    NAVIGATOR_NOT_MOUNTED = 2002
    NAVIGATOR_ALREADY_ATTACHED = 2003
    SUBSCRIPTION_CONFLICT = 2004
    SHELL_NOT_MOUNTED = 2005

    # Composition errors (3000-3999)
    TITLE_GENERATION_FAILED = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        field_name: Configuration field involved (configuration errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    field_name: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[SUPPORTED_LOCALES_EMPTY]: supported_locales must not be empty
              = field: supported_locales
              = help: Declare at least one locale; the first entry is the fallback

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.field_name:
            lines.append(f"  = field: {self.field_name}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
