"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating shell call sites.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from appshell.localization.locale import Locale

__all__ = [
    "CountryCode",
    "LanguageCode",
    "LocaleCode",
    "LocaleResolutionCallback",
    "SupportedLocales",
]

type LanguageCode = str
"""ISO 639 language code (e.g., 'en', 'he')."""

type CountryCode = str
"""ISO 3166 region code (e.g., 'US', 'IL') or UN M.49 numeric area ('419')."""

type LocaleCode = str
"""BCP-47 or POSIX locale code (e.g., 'en-US', 'pt_BR')."""

type SupportedLocales = tuple[Locale, ...]
"""Priority-ordered, non-empty locale tuple. Index 0 is the fallback."""

type LocaleResolutionCallback = Callable[[Locale, SupportedLocales], Locale | None]
"""App override consulted before built-in matching. None defers to matching."""
