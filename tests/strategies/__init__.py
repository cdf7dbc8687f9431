"""Hypothesis strategies for appshell property-based testing.

Usage:
    from tests.strategies import locales, supported_locale_lists
"""

from .locales import locales, supported_locale_lists

__all__ = [
    "locales",
    "supported_locale_lists",
]
