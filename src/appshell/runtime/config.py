"""Shell configuration and process-wide debug overrides.

Provides a frozen dataclass that encapsulates every option the application
passes to its shell, validated at construction time (fail-fast), and the
process-wide override flags used by runtime debugging toggles.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from appshell.constants import DEFAULT_COUNTRY_CODE, DEFAULT_LANGUAGE_CODE, DEFAULT_TITLE
from appshell.diagnostics import ConfigurationError, ErrorTemplate
from appshell.enums import BuildMode
from appshell.localization import Locale, validate_supported_locales

if TYPE_CHECKING:
    from appshell.localization import (
        LocaleResolutionCallback,
        LocalizationsDelegate,
        SupportedLocales,
    )
    from appshell.runtime.composition import TitleContext

__all__ = [
    "DebugOverrides",
    "ShellConfig",
    "debug_overrides",
]

type RouteFactory = Callable[[str], Any]
"""Builds a route object for a route name; None means 'unknown route'."""

type TitleGenerator = Callable[[TitleContext], str | None]


def _default_supported_locales() -> tuple[Locale, ...]:
    return (Locale(DEFAULT_LANGUAGE_CODE, DEFAULT_COUNTRY_CODE),)


@dataclass(frozen=True, slots=True, kw_only=True)
class ShellConfig:
    """Immutable configuration for a LifecycleBridge.

    ``color`` and ``on_generate_route`` are required; everything else has a
    default. Iterable fields are frozen into tuples.

    Attributes:
        color: Primary color handed to the title layer (opaque to the shell)
        on_generate_route: Route factory used by the navigator
        title: Static title (default: "")
        on_generate_title: Builds the title from the localized context;
            overrides ``title`` and must not return None
        on_unknown_route: Factory used when on_generate_route returns None
        initial_route: First route name (default: platform default route)
        navigator_observers: Observers handed to the navigator
        text_style: Default text style wrapper, or None to omit the layer
        locale: Explicit locale shown to the composition. Resolution of the
            platform locale still runs; only the displayed value is replaced.
        localization_delegates: Application delegates, in priority order
        locale_resolution_callback: Override consulted before built-in matching
        supported_locales: Non-empty, priority-ordered (default: en_US)
        show_performance_overlay: Stack a performance overlay above content
        checkerboard_raster_cache_images: Checkerboard raster cache images
        checkerboard_offscreen_layers: Checkerboard offscreen layers
        show_semantics_debugger: Wrap in the accessibility debugger
        show_widget_inspector: Wrap in the inspector (DEBUG builds only)
        inspector_select_button_builder: Custom select button for the inspector
        show_non_production_banner: Show the banner (DEBUG builds only)
        build_mode: Build flavor (default: from APPSHELL_BUILD_MODE, else DEBUG)

    Example:
        >>> config = ShellConfig(
        ...     color="#2196f3",
        ...     on_generate_route=lambda name: name,
        ...     supported_locales=[Locale("lv"), Locale("en", "US")],
        ... )
        >>> config.supported_locales[0]
        Locale(language_code='lv', country_code=None)
    """

    color: object
    on_generate_route: RouteFactory
    title: str = DEFAULT_TITLE
    on_generate_title: TitleGenerator | None = None
    on_unknown_route: RouteFactory | None = None
    initial_route: str | None = None
    navigator_observers: tuple[Any, ...] = ()
    text_style: object | None = None
    locale: Locale | None = None
    localization_delegates: tuple[LocalizationsDelegate[Any], ...] = ()
    locale_resolution_callback: LocaleResolutionCallback | None = None
    supported_locales: SupportedLocales = field(default_factory=_default_supported_locales)
    show_performance_overlay: bool = False
    checkerboard_raster_cache_images: bool = False
    checkerboard_offscreen_layers: bool = False
    show_semantics_debugger: bool = False
    show_widget_inspector: bool = False
    inspector_select_button_builder: Callable[..., Any] | None = None
    show_non_production_banner: bool = True
    build_mode: BuildMode = field(default_factory=BuildMode.from_environment)

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ConfigurationError: If a required field is None, a callable field
                is not callable, a flag is not a bool, or supported_locales
                is empty.
        """
        if self.color is None:
            raise ConfigurationError(ErrorTemplate.required_field_missing("color"))
        if self.on_generate_route is None:
            raise ConfigurationError(ErrorTemplate.required_field_missing("on_generate_route"))
        if self.title is None:
            raise ConfigurationError(ErrorTemplate.required_field_missing("title"))
        if self.supported_locales is None:
            raise ConfigurationError(ErrorTemplate.required_field_missing("supported_locales"))

        for name in (
            "on_generate_route",
            "on_generate_title",
            "on_unknown_route",
            "locale_resolution_callback",
            "inspector_select_button_builder",
        ):
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise ConfigurationError(
                    ErrorTemplate.invalid_field_type(name, "callable", value)
                )

        for name in (
            "show_performance_overlay",
            "checkerboard_raster_cache_images",
            "checkerboard_offscreen_layers",
            "show_semantics_debugger",
            "show_widget_inspector",
            "show_non_production_banner",
        ):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(ErrorTemplate.invalid_field_type(name, "bool", value))

        if self.locale is not None and not isinstance(self.locale, Locale):
            raise ConfigurationError(
                ErrorTemplate.invalid_field_type("locale", "Locale", self.locale)
            )
        if not isinstance(self.build_mode, BuildMode):
            raise ConfigurationError(
                ErrorTemplate.invalid_field_type("build_mode", "BuildMode", self.build_mode)
            )

        # Frozen dataclass: normalize iterables through object.__setattr__
        object.__setattr__(
            self, "supported_locales", validate_supported_locales(self.supported_locales)
        )
        object.__setattr__(
            self, "localization_delegates", _freeze(self.localization_delegates)
        )
        object.__setattr__(self, "navigator_observers", _freeze(self.navigator_observers))


def _freeze(values: Iterable[Any] | None) -> tuple[Any, ...]:
    return tuple(values) if values is not None else ()


class DebugOverrides:
    """Process-wide switches that force debug layers on or off.

    Intended for runtime debugging toggles (e.g. a developer menu) that
    apply to every shell regardless of its own configuration. Flags live
    for the whole process and need no teardown. There is no synchronization
    contract: the last write wins, and shells read the flags on each
    composition.

    Attributes:
        show_performance_overlay: Force the performance overlay on
        show_widget_inspector: Force the widget inspector on (DEBUG builds)
        allow_banner: When False, suppress the non-production banner
    """

    __slots__ = ("allow_banner", "show_performance_overlay", "show_widget_inspector")

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Restore initial values."""
        self.show_performance_overlay = False
        self.show_widget_inspector = False
        self.allow_banner = True

    def __repr__(self) -> str:
        return (
            f"DebugOverrides(show_performance_overlay={self.show_performance_overlay}, "
            f"show_widget_inspector={self.show_widget_inspector}, "
            f"allow_banner={self.allow_banner})"
        )


debug_overrides = DebugOverrides()
"""Shared instance read by every shell that is not given its own."""
