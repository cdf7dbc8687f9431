"""Platform locale identifier handling.

Hosts report locales in several shapes: BCP-47 tags ("en-US"), POSIX names
with an encoding ("he_IL.UTF-8") or a modifier ("ca_ES@valencia"), and bare
language codes. This module reduces all of them to the underscore form Babel
parses, splits them into language and territory, and detects the locale of
the running process.

Python 3.13+. Uses Babel for identifier parsing and CLDR data.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from appshell.constants import (
    DEFAULT_COUNTRY_CODE,
    DEFAULT_LANGUAGE_CODE,
    MAX_BABEL_LOCALE_CACHE_SIZE,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "split_locale",
]

# Values the C library reports when no real locale is configured.
_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})

# Consulted in order after the OS query comes back empty.
_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def normalize_locale(locale_code: str) -> str:
    """Reduce a platform identifier to Babel's underscore form.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("he_IL.UTF-8")
        'he_IL'
        >>> normalize_locale("ca_ES@valencia")
        'ca_ES'
    """
    head, _, _ = locale_code.strip().partition(".")
    head, _, _ = head.partition("@")
    return head.replace("-", "_")


def split_locale(locale_code: str) -> tuple[str, str | None]:
    """Return (language, territory) for a platform identifier.

    Only the shape is checked; CLDR data is not required, so identifiers
    Babel has never heard of still split. Script and variant subtags are
    discarded.

    Raises:
        ValueError: If the identifier is empty or malformed

    Example:
        >>> split_locale("zh-Hans-CN")
        ('zh', 'CN')
        >>> split_locale("lv")
        ('lv', None)
    """
    from babel.core import parse_locale  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    if not normalized:
        msg = f"Empty locale identifier: {locale_code!r}"
        raise ValueError(msg)
    parts = parse_locale(normalized)
    return parts[0], parts[1]


@functools.lru_cache(maxsize=MAX_BABEL_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Babel Locale for an identifier, cached per identifier string.

    Every composition asks the built-in delegate for text direction and
    language name, so the parsed Locale is kept. Failed lookups are not
    cached.

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If the identifier is malformed
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Drop cached Babel locales."""
    get_babel_locale.cache_clear()


def _configured(value: str | None) -> str | None:
    """Normalized value, or None for unset and pseudo-locales such as C.UTF-8."""
    if value is None:
        return None
    normalized = normalize_locale(value)
    if normalized in _PSEUDO_LOCALES:
        return None
    return normalized


def _os_locale() -> str | None:
    import locale as locale_module  # noqa: PLC0415

    try:
        language_code, _encoding = locale_module.getlocale()
    except ValueError:
        return None
    return _configured(language_code)


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Locale identifier of the running process, in underscore form.

    The OS query (locale.getlocale) is tried first, then LC_ALL,
    LC_MESSAGES and LANG. The "C" and "POSIX" pseudo-locales count as unset
    with or without an encoding suffix.

    Args:
        raise_on_failure: Raise instead of falling back to en_US

    Raises:
        RuntimeError: If nothing is configured and raise_on_failure is set
    """
    detected = _os_locale()
    if detected is None:
        detected = next(
            (
                value
                for name in _LOCALE_ENV_VARS
                if (value := _configured(os.environ.get(name))) is not None
            ),
            None,
        )
    if detected is not None:
        return detected

    if raise_on_failure:
        msg = "Could not determine system locale; set LC_ALL, LC_MESSAGES or LANG"
        raise RuntimeError(msg)
    return f"{DEFAULT_LANGUAGE_CODE}_{DEFAULT_COUNTRY_CODE}"
