"""appshell - Root application shell for declarative UIs.

Binds platform lifecycle notifications (back requests, deep links, locale
and metrics changes, memory pressure) to navigation and localization state,
and describes the layered presentation tree for a rendering capability.

Public API:
    Locale - Immutable language/region pair
    LocaleResolver - Resolution of a platform locale against supported locales
    resolve_locale - Functional form of LocaleResolver.resolve
    LifecycleBridge - Stateful shell root driven by platform notifications
    PlatformDispatcher - Typed platform notification channels
    ShellConfig - Validated shell configuration
    debug_overrides - Process-wide debug layer toggles

Exceptions:
    ShellError - Base exception class
    ConfigurationError - Invalid configuration (also a ValueError)
    ShellStateError - Lifecycle misuse
    NavigatorNotMountedError - Navigation before a Router was attached
    TitleGenerationError - on_generate_title returned None

Submodules:
    appshell.localization - Locale value, resolution and delegates
    appshell.runtime - Bridge, platform dispatcher, composition description
    appshell.diagnostics - Error codes and exception hierarchy
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    ConfigurationError,
    NavigatorNotMountedError,
    ShellError,
    ShellStateError,
    TitleGenerationError,
)
from .enums import AppLifecycleState, BuildMode, PlatformChannel
from .localization import Locale, LocaleResolver, resolve_locale
from .runtime import (
    LifecycleBridge,
    PlatformDispatcher,
    PlatformMetrics,
    ShellConfig,
    debug_overrides,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("appshell")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

__all__ = [
    "AppLifecycleState",
    "BuildMode",
    "ConfigurationError",
    "LifecycleBridge",
    "Locale",
    "LocaleResolver",
    "NavigatorNotMountedError",
    "PlatformChannel",
    "PlatformDispatcher",
    "PlatformMetrics",
    "ShellConfig",
    "ShellError",
    "ShellStateError",
    "TitleGenerationError",
    "__version__",
    "debug_overrides",
    "resolve_locale",
]
