"""Enumerations for appshell type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

import os
from enum import StrEnum

from appshell.constants import BUILD_MODE_ENV_VAR


class PlatformChannel(StrEnum):
    """Typed platform notification channel.

    Each channel carries exactly one payload type. A shell subscribes to
    all of them through a single callback table.
    """

    BACK_REQUEST = "back_request"
    """System back button pressed. No payload; handler returns bool."""

    PUSH_ROUTE = "push_route"
    """Deep link or host asked to open a route. Payload: route name."""

    LOCALE_CHANGE = "locale_change"
    """User changed the system locale. Payload: Locale."""

    METRICS_CHANGE = "metrics_change"
    """Viewport or device metrics changed. No payload."""

    MEMORY_PRESSURE = "memory_pressure"
    """Operating system reported low memory. No payload."""

    LIFECYCLE_STATE_CHANGE = "lifecycle_state_change"
    """Application moved between foreground/background. Payload: AppLifecycleState."""


class AppLifecycleState(StrEnum):
    """Application lifecycle state as reported by the platform.

    StrEnum provides automatic string conversion: str(AppLifecycleState.PAUSED) == "paused"
    """

    RESUMED = "resumed"
    """Visible and responding to user input."""

    INACTIVE = "inactive"
    """Visible but not receiving input (e.g. during a phone call overlay)."""

    PAUSED = "paused"
    """Not visible, running in the background."""

    SUSPENDING = "suspending"
    """About to be suspended by the operating system."""


class BuildMode(StrEnum):
    """Build flavor controlling debug-only presentation layers.

    The widget inspector and the non-production banner are only composed
    in DEBUG builds.
    """

    DEBUG = "debug"
    PROFILE = "profile"
    RELEASE = "release"

    @property
    def is_debug(self) -> bool:
        """True for builds that may show debug-only layers."""
        return self is BuildMode.DEBUG

    @classmethod
    def from_environment(cls, default: "BuildMode | None" = None) -> "BuildMode":
        """Read build mode from the APPSHELL_BUILD_MODE environment variable.

        Args:
            default: Mode used when the variable is unset (default: DEBUG)

        Returns:
            Parsed BuildMode

        Raises:
            ValueError: If the variable holds an unknown mode name
        """
        raw = os.environ.get(BUILD_MODE_ENV_VAR, "").strip().lower()
        if not raw:
            return default if default is not None else cls.DEBUG
        try:
            return cls(raw)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            msg = f"{BUILD_MODE_ENV_VAR}={raw!r} is not a build mode (expected one of: {valid})"
            raise ValueError(msg) from None


class LayerKind(StrEnum):
    """Kind of presentation node assembled by the shell.

    Declared in composition order, innermost first.
    """

    NAVIGATOR = "navigator"
    TEXT_STYLE = "text_style"
    STACK = "stack"
    PERFORMANCE_OVERLAY = "performance_overlay"
    SEMANTICS_DEBUGGER = "semantics_debugger"
    WIDGET_INSPECTOR = "widget_inspector"
    NON_PRODUCTION_BANNER = "non_production_banner"
    LOCALIZATIONS = "localizations"
    TITLE = "title"


class TextDirection(StrEnum):
    """Reading direction of a locale's script."""

    LTR = "ltr"
    RTL = "rtl"


__all__ = [
    "AppLifecycleState",
    "BuildMode",
    "LayerKind",
    "PlatformChannel",
    "TextDirection",
]
