"""Shared constants for appshell.

Centralizes the values that both the localization and runtime packages
depend on. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Locale tables: Legacy language code rewrites
- Defaults: Values used when the application does not configure them
- Environment: Variable names read at process start

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale tables
    "LEGACY_LANGUAGE_CODES",
    # Defaults
    "DEFAULT_LANGUAGE_CODE",
    "DEFAULT_COUNTRY_CODE",
    "DEFAULT_ROUTE_NAME",
    "DEFAULT_TITLE",
    "MAX_BABEL_LOCALE_CACHE_SIZE",
    # Environment
    "BUILD_MODE_ENV_VAR",
]

# ============================================================================
# LOCALE TABLES
# ============================================================================

# Deprecated ISO 639 codes still reported by some platforms (notably older
# JVM-based ones). Rewritten to their modern equivalents before matching.
# Country codes are never touched by this table.
LEGACY_LANGUAGE_CODES: MappingProxyType[str, str] = MappingProxyType(
    {
        "iw": "he",  # Hebrew
        "ji": "yi",  # Yiddish
        "in": "id",  # Indonesian
    }
)

# ============================================================================
# DEFAULTS
# ============================================================================

# Default supported locale list is a single English (United States) entry.
DEFAULT_LANGUAGE_CODE: str = "en"
DEFAULT_COUNTRY_CODE: str = "US"

# Route name reported by the platform when no deep link started the process.
DEFAULT_ROUTE_NAME: str = "/"

DEFAULT_TITLE: str = ""

# Bound for the Babel Locale lru_cache in locale_utils.
MAX_BABEL_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# ENVIRONMENT
# ============================================================================

BUILD_MODE_ENV_VAR: str = "APPSHELL_BUILD_MODE"
