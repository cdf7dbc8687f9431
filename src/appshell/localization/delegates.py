"""Localization delegates and their combination rules.

A delegate is a factory that loads one type of localized resource for a
locale. The shell always appends its own built-in delegate after the
application's delegates; when loading, only the first supporting delegate
of each type is used, so an application delegate placed earlier overrides
the built-in one.

Components:
    LocalizationsDelegate - Protocol for delegates (structural typing)
    ShellLocalizations - Resources provided by the built-in delegate
    DefaultShellLocalizationsDelegate - Built-in delegate backed by Babel CLDR data
    LoadedLocalizations - Immutable result of loading a delegate list
    combine_delegates / load_localizations - Combination and loading rules

Python 3.13+. Uses Babel for text direction and display names.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from babel import UnknownLocaleError

from appshell.enums import TextDirection

if TYPE_CHECKING:
    from appshell.localization.locale import Locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "LocalizationsDelegate",
    # Built-in delegate
    "ShellLocalizations",
    "DefaultShellLocalizationsDelegate",
    "DEFAULT_SHELL_DELEGATE",
    # Combination and loading
    "LoadedLocalizations",
    "combine_delegates",
    "load_localizations",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class LocalizationsDelegate[T](Protocol):
    """Protocol for loading one type of localized resource.

    This is a Protocol (structural typing) rather than ABC so applications
    can supply plain classes.

    Example:
        >>> class GreetingDelegate:
        ...     type_key = "greetings"
        ...     def is_supported(self, locale: Locale) -> bool:
        ...         return locale.language_code in ("en", "lv")
        ...     def load(self, locale: Locale) -> dict[str, str]:
        ...         return {"hello": "Sveiki" if locale.language_code == "lv" else "Hello"}
        ...     def should_reload(self, old: object) -> bool:
        ...         return False
    """

    @property
    def type_key(self) -> Hashable:
        """Identifies the resource type; only one delegate per key is loaded."""
        ...

    def is_supported(self, locale: Locale) -> bool:
        """Whether this delegate can load resources for ``locale``."""
        ...

    def load(self, locale: Locale) -> T:
        """Load resources for ``locale``."""
        ...

    def should_reload(self, old: LocalizationsDelegate[T]) -> bool:
        """Whether resources loaded by ``old`` must be reloaded for this delegate."""
        ...


@dataclass(frozen=True, slots=True)
class ShellLocalizations:
    """Resources every shell provides regardless of app delegates.

    Attributes:
        locale: Locale the resources were loaded for
        text_direction: Reading direction of the locale's script
        language_name: Language name in its own language (CLDR), or the code
            when CLDR has no data
    """

    locale: Locale
    text_direction: TextDirection
    language_name: str


@dataclass(frozen=True, slots=True)
class DefaultShellLocalizationsDelegate:
    """Built-in delegate appended after all application delegates.

    Supports every locale. Locales without CLDR data load as left-to-right
    with the raw language code as name.
    """

    type_key: Hashable = ShellLocalizations

    def is_supported(self, locale: Locale) -> bool:  # noqa: ARG002
        return True

    def load(self, locale: Locale) -> ShellLocalizations:
        try:
            babel_locale = locale.to_babel()
        except (UnknownLocaleError, ValueError) as e:
            logger.warning("No CLDR data for locale '%s': %s. Assuming LTR", locale, e)
            return ShellLocalizations(locale, TextDirection.LTR, locale.language_code)

        direction = TextDirection(babel_locale.text_direction)
        name = babel_locale.language_name or locale.language_code
        return ShellLocalizations(locale, direction, name)

    def should_reload(self, old: object) -> bool:  # noqa: ARG002
        return False


DEFAULT_SHELL_DELEGATE = DefaultShellLocalizationsDelegate()


def combine_delegates(
    app_delegates: Iterable[LocalizationsDelegate[Any]] | None,
) -> tuple[LocalizationsDelegate[Any], ...]:
    """Application delegates in caller order, then the built-in default.

    The result always ends with exactly one built-in delegate, however many
    application delegates are supplied.

    Example:
        >>> len(combine_delegates(None))
        1
        >>> combine_delegates([app_delegate])[-1] is DEFAULT_SHELL_DELEGATE
        True
    """
    combined: list[LocalizationsDelegate[Any]] = list(app_delegates or ())
    combined.append(DEFAULT_SHELL_DELEGATE)
    return tuple(combined)


@dataclass(frozen=True, slots=True)
class LoadedLocalizations:
    """Resources loaded for one locale, keyed by delegate type.

    Attributes:
        locale: Locale the resources were loaded for
        resources: Read-only mapping from type_key to loaded value
    """

    locale: Locale
    resources: Mapping[Hashable, Any] = field(default_factory=lambda: MappingProxyType({}))

    def of(self, type_key: Hashable) -> Any | None:
        """Loaded resource for ``type_key``, or None."""
        return self.resources.get(type_key)

    @property
    def shell(self) -> ShellLocalizations:
        """Built-in resources (always present after load_localizations)."""
        return self.resources[ShellLocalizations]

    def __contains__(self, type_key: object) -> bool:
        return type_key in self.resources


def load_localizations(
    locale: Locale,
    delegates: Iterable[LocalizationsDelegate[Any]],
) -> LoadedLocalizations:
    """Load the first supporting delegate of each type, in list order.

    Delegates that do not support ``locale`` never claim their type, so a
    later delegate of the same type may still load.

    Args:
        locale: Locale to load resources for
        delegates: Ordered delegates, typically from combine_delegates()

    Returns:
        LoadedLocalizations with one entry per loaded type
    """
    loaded: dict[Hashable, Any] = {}
    for delegate in delegates:
        key = delegate.type_key
        if key in loaded or not delegate.is_supported(locale):
            continue
        loaded[key] = delegate.load(locale)
        logger.debug("Loaded %r for locale %s", key, locale)
    return LoadedLocalizations(locale, MappingProxyType(loaded))
