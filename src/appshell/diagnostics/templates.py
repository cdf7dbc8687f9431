"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All shell error messages are created here so tests can assert on codes
    instead of message wording.
    """

    @staticmethod
    def supported_locales_empty() -> Diagnostic:
        """Supported locale list is empty.

        Returns:
            Diagnostic for SUPPORTED_LOCALES_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.SUPPORTED_LOCALES_EMPTY,
            message="supported_locales must contain at least one locale",
            hint="Declare at least one locale; the first entry is the fallback",
            field_name="supported_locales",
        )

    @staticmethod
    def required_field_missing(field_name: str) -> Diagnostic:
        """Required configuration field is None.

        Args:
            field_name: Name of the missing field

        Returns:
            Diagnostic for REQUIRED_FIELD_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.REQUIRED_FIELD_MISSING,
            message=f"{field_name} is required",
            field_name=field_name,
        )

    @staticmethod
    def invalid_field_type(field_name: str, expected: str, received: object) -> Diagnostic:
        """Configuration field has the wrong type.

        Args:
            field_name: Name of the offending field
            expected: Human-readable expected type
            received: The value that was passed

        Returns:
            Diagnostic for INVALID_FIELD_TYPE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_FIELD_TYPE,
            message=(
                f"{field_name} must be {expected}, got {type(received).__name__}"
            ),
            field_name=field_name,
        )

    @staticmethod
    def invalid_locale(value: object, reason: str) -> Diagnostic:
        """Locale value is malformed.

        Args:
            value: The rejected value
            reason: Why it was rejected

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=f"Invalid locale {value!r}: {reason}",
        )

    @staticmethod
    def already_mounted() -> Diagnostic:
        """mount() called on a shell that is already mounted.

        Returns:
            Diagnostic for ALREADY_MOUNTED
        """
        return Diagnostic(
            code=DiagnosticCode.ALREADY_MOUNTED,
            message="Shell is already mounted",
            hint="Call unmount() before mounting again, or create a new shell",
        )

    @staticmethod
    def not_mounted(operation: str) -> Diagnostic:
        """Operation that needs a mounted shell was called on an unmounted one.

        Args:
            operation: Name of the attempted operation

        Returns:
            Diagnostic for SHELL_NOT_MOUNTED
        """
        return Diagnostic(
            code=DiagnosticCode.SHELL_NOT_MOUNTED,
            message=f"Cannot {operation}: shell is not mounted",
            hint="Call mount() first",
        )

    @staticmethod
    def navigator_not_mounted(operation: str) -> Diagnostic:
        """Navigation attempted with no Router attached.

        Args:
            operation: Navigation operation that was attempted

        Returns:
            Diagnostic for NAVIGATOR_NOT_MOUNTED
        """
        return Diagnostic(
            code=DiagnosticCode.NAVIGATOR_NOT_MOUNTED,
            message=f"Cannot {operation}: no navigator is mounted",
            hint="The composition must attach a Router via description.navigator.attach()",
        )

    @staticmethod
    def navigator_already_attached() -> Diagnostic:
        """A second Router was attached to an occupied slot.

        Returns:
            Diagnostic for NAVIGATOR_ALREADY_ATTACHED
        """
        return Diagnostic(
            code=DiagnosticCode.NAVIGATOR_ALREADY_ATTACHED,
            message="A different navigator is already attached to this shell",
            hint="Detach the current navigator first; one Router per mounted shell",
        )

    @staticmethod
    def subscription_conflict(owner: str) -> Diagnostic:
        """Owner already holds an active platform subscription.

        Args:
            owner: Description of the subscribing owner

        Returns:
            Diagnostic for SUBSCRIPTION_CONFLICT
        """
        return Diagnostic(
            code=DiagnosticCode.SUBSCRIPTION_CONFLICT,
            message=f"{owner} already has an active platform subscription",
        )

    @staticmethod
    def title_generation_failed() -> Diagnostic:
        """on_generate_title returned None.

        Returns:
            Diagnostic for TITLE_GENERATION_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.TITLE_GENERATION_FAILED,
            message="on_generate_title must return a non-None string",
        )
