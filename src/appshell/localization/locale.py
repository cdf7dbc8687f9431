"""Immutable locale value.

A Locale is a (language, country) pair with structural equality. It carries
no ordering; lists of locales are ordered by caller-assigned priority.

Python 3.13+. Uses Babel for identifier parsing and CLDR lookups.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from appshell.diagnostics import ConfigurationError, ErrorTemplate
from appshell.locale_utils import get_babel_locale, get_system_locale, split_locale

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

    from appshell.localization.types import CountryCode, LanguageCode, LocaleCode

__all__ = ["Locale"]


@dataclass(frozen=True, slots=True)
class Locale:
    """Language/region identifier pair.

    Equality and hashing are structural over both fields, so
    ``Locale("fr", "CA") == Locale("fr", "CA")`` and
    ``Locale("fr") != Locale("fr", "FR")``.

    Example:
        >>> Locale("en", "US")
        Locale(language_code='en', country_code='US')
        >>> str(Locale.parse("pt-BR"))
        'pt_BR'
        >>> Locale.parse("he_IL.UTF-8").to_language_tag()
        'he-IL'

    Attributes:
        language_code: ISO 639 language code (required, non-empty)
        country_code: Region code, or None for language-only locales
    """

    language_code: LanguageCode
    country_code: CountryCode | None = None

    def __post_init__(self) -> None:
        """Validate field shapes.

        Raises:
            ConfigurationError: If language_code is empty or a field is not a string
        """
        if not isinstance(self.language_code, str) or not self.language_code:
            raise ConfigurationError(
                ErrorTemplate.invalid_locale(self.language_code, "language_code must be non-empty")
            )
        if self.country_code is not None and not isinstance(self.country_code, str):
            raise ConfigurationError(
                ErrorTemplate.invalid_locale(self.country_code, "country_code must be a string")
            )

    @classmethod
    def parse(cls, locale_code: LocaleCode) -> Locale:
        """Build a Locale from a BCP-47 or POSIX identifier.

        Script and variant subtags are dropped. Empty country components
        become None.

        Args:
            locale_code: Identifier such as "en-US", "en_US.UTF-8" or "fr"

        Returns:
            Parsed Locale

        Raises:
            ValueError: If the identifier is malformed
        """
        language, territory = split_locale(locale_code)
        return cls(language, territory or None)

    @classmethod
    def from_system(cls) -> Locale:
        """Locale of the current process environment (en_US if undetectable)."""
        return cls.parse(get_system_locale())

    def replace_language(self, language_code: LanguageCode) -> Locale:
        """Return a copy with a different language and the same country."""
        return Locale(language_code, self.country_code)

    def to_language_tag(self) -> str:
        """BCP-47 form, e.g. 'en-US'."""
        if self.country_code:
            return f"{self.language_code}-{self.country_code}"
        return self.language_code

    def to_babel(self) -> BabelLocale:
        """Babel Locale for CLDR lookups.

        Raises:
            babel.core.UnknownLocaleError: If CLDR has no data for this locale
        """
        return get_babel_locale(str(self))

    def __str__(self) -> str:
        """POSIX form, e.g. 'en_US'."""
        if self.country_code:
            return f"{self.language_code}_{self.country_code}"
        return self.language_code
