"""Locale resolution against a prioritized supported-locale list.

Maps a raw platform locale to exactly one locale the application serves.
The algorithm is deterministic and total:

1. Legacy language codes are rewritten (iw->he, ji->yi, in->id).
2. The app override callback, if any, is consulted; a non-None answer wins
   even when it is not in the supported list.
3. The first supported locale structurally equal to the candidate wins.
4. Otherwise the first supported locale with the same language wins. This
   is first-encountered in list order, not the closest country.
5. Otherwise the first supported locale is returned.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from appshell.constants import LEGACY_LANGUAGE_CODES
from appshell.diagnostics import ConfigurationError, ErrorTemplate
from appshell.localization.locale import Locale

if TYPE_CHECKING:
    from appshell.localization.types import LocaleResolutionCallback, SupportedLocales

__all__ = [
    "LocaleResolver",
    "normalize_legacy_locale",
    "resolve_locale",
    "validate_supported_locales",
]

logger = logging.getLogger(__name__)


def normalize_legacy_locale(locale: Locale) -> Locale:
    """Rewrite deprecated language codes to their modern equivalents.

    Example:
        >>> normalize_legacy_locale(Locale("iw", "IL"))
        Locale(language_code='he', country_code='IL')
        >>> normalize_legacy_locale(Locale("en", "US"))
        Locale(language_code='en', country_code='US')
    """
    modern = LEGACY_LANGUAGE_CODES.get(locale.language_code)
    if modern is None:
        return locale
    return locale.replace_language(modern)


def validate_supported_locales(supported: Iterable[Locale]) -> SupportedLocales:
    """Freeze a supported-locale iterable into a tuple, enforcing non-emptiness.

    Args:
        supported: Locales in priority order

    Returns:
        Tuple preserving order and duplicates

    Raises:
        ConfigurationError: If empty or any element is not a Locale
    """
    frozen = tuple(supported)
    if not frozen:
        raise ConfigurationError(ErrorTemplate.supported_locales_empty())
    for entry in frozen:
        if not isinstance(entry, Locale):
            raise ConfigurationError(
                ErrorTemplate.invalid_field_type("supported_locales", "a sequence of Locale", entry)
            )
    return frozen


def resolve_locale(
    candidate: Locale,
    supported: SupportedLocales,
    override: LocaleResolutionCallback | None = None,
) -> Locale:
    """Choose the locale to use for a platform-reported candidate.

    Pure: the same inputs always produce the same output.

    Args:
        candidate: Raw locale reported by the platform
        supported: Non-empty, priority-ordered supported locales
        override: Optional app callback consulted before built-in matching

    Returns:
        The override's answer, or a member of ``supported``

    Raises:
        ConfigurationError: If ``supported`` is empty

    Example:
        >>> supported = (Locale("en", "US"), Locale("fr", "CA"), Locale("fr", "FR"))
        >>> resolve_locale(Locale("fr", "BE"), supported)
        Locale(language_code='fr', country_code='CA')
    """
    if not supported:
        raise ConfigurationError(ErrorTemplate.supported_locales_empty())

    normalized = normalize_legacy_locale(candidate)

    if override is not None:
        chosen = override(normalized, supported)
        if chosen is not None:
            logger.debug("Locale %s resolved to %s by override", candidate, chosen)
            return chosen

    language_match: Locale | None = None
    for locale in supported:
        if locale == normalized:
            logger.debug("Locale %s resolved to exact match %s", candidate, locale)
            return locale
        if language_match is None and locale.language_code == normalized.language_code:
            language_match = locale

    if language_match is not None:
        logger.debug("Locale %s resolved to language match %s", candidate, language_match)
        return language_match

    logger.debug("Locale %s unsupported; falling back to %s", candidate, supported[0])
    return supported[0]


class LocaleResolver:
    """Resolution bound to one supported-locale list and override.

    Validates the supported list once at construction (fail-fast), then
    resolves any number of candidates.

    Example:
        >>> resolver = LocaleResolver([Locale("he", "IL"), Locale("en")])
        >>> resolver.resolve(Locale("iw", "IL"))
        Locale(language_code='he', country_code='IL')

    Attributes:
        supported: Immutable tuple of supported locales in priority order
        override: App resolution callback, or None
    """

    __slots__ = ("_override", "_supported")

    def __init__(
        self,
        supported: Iterable[Locale],
        override: LocaleResolutionCallback | None = None,
    ) -> None:
        """Initialize resolver.

        Raises:
            ConfigurationError: If supported is empty or holds non-Locale values
        """
        self._supported: SupportedLocales = validate_supported_locales(supported)
        self._override = override

    @property
    def supported(self) -> SupportedLocales:
        return self._supported

    @property
    def override(self) -> LocaleResolutionCallback | None:
        return self._override

    @property
    def fallback(self) -> Locale:
        """Locale returned when nothing else matches."""
        return self._supported[0]

    def resolve(self, candidate: Locale) -> Locale:
        """Resolve ``candidate`` against the bound list. Never returns None."""
        return resolve_locale(candidate, self._supported, self._override)

    def __repr__(self) -> str:
        supported = ", ".join(str(locale) for locale in self._supported)
        return f"LocaleResolver(supported=[{supported}], override={self._override is not None})"
