"""appshell exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic object for rich error information.
Precondition failures double as the matching builtin exception type
(ValueError for bad configuration, AssertionError for contract violations)
so callers can catch them either way.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConfigurationError",
    "NavigatorNotMountedError",
    "ShellError",
    "ShellStateError",
    "TitleGenerationError",
]


class ShellError(Exception):
    """Base exception for all appshell errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ShellError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(ShellError, ValueError):
    """Invalid shell configuration detected at construction.

    Examples:
    - Empty supported locale list
    - Missing required field (color, on_generate_route)

    Not recoverable: fix the configuration.
    """


class ShellStateError(ShellError):
    """Lifecycle misuse, such as mounting a shell twice."""


class NavigatorNotMountedError(ShellStateError, AssertionError):
    """Navigation requested before a Router was attached to the shell.

    A programming error: the composition never mounted a navigator, or the
    platform delivered a navigation event before the first composition.
    """


class TitleGenerationError(ShellError, AssertionError):
    """on_generate_title returned None instead of a string."""
