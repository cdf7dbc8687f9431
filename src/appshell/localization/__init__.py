"""Locale selection package for the application shell.

Provides the locale value type, the resolution algorithm and localization
delegates.

Submodules:
    types      - PEP 695 type aliases (LanguageCode, LocaleResolutionCallback, ...)
    locale     - Locale immutable value
    resolver   - LocaleResolver, resolve_locale, normalize_legacy_locale
    delegates  - LocalizationsDelegate protocol, built-in delegate, loading rules

Python 3.13+. Uses Babel for identifier parsing and CLDR data.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from appshell.localization.delegates import (
    DEFAULT_SHELL_DELEGATE,
    DefaultShellLocalizationsDelegate,
    LoadedLocalizations,
    LocalizationsDelegate,
    ShellLocalizations,
    combine_delegates,
    load_localizations,
)
from appshell.localization.locale import Locale
from appshell.localization.resolver import (
    LocaleResolver,
    normalize_legacy_locale,
    resolve_locale,
    validate_supported_locales,
)
from appshell.localization.types import (
    CountryCode,
    LanguageCode,
    LocaleCode,
    LocaleResolutionCallback,
    SupportedLocales,
)

__all__ = [
    # Value type
    "Locale",
    # Resolution
    "LocaleResolver",
    "normalize_legacy_locale",
    "resolve_locale",
    "validate_supported_locales",
    # Delegates
    "LocalizationsDelegate",
    "DefaultShellLocalizationsDelegate",
    "DEFAULT_SHELL_DELEGATE",
    "ShellLocalizations",
    "LoadedLocalizations",
    "combine_delegates",
    "load_localizations",
    # Type aliases for user code type annotations
    "CountryCode",
    "LanguageCode",
    "LocaleCode",
    "LocaleResolutionCallback",
    "SupportedLocales",
]
