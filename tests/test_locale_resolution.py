"""Tests for locale resolution against a supported-locale list.

Covers legacy code normalization, override consultation, exact and
language-only matching, default fallback, and the LocaleResolver wrapper.
Includes property-based tests with Hypothesis for totality and purity.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from appshell.diagnostics import ConfigurationError, DiagnosticCode
from appshell.localization import (
    Locale,
    LocaleResolver,
    normalize_legacy_locale,
    resolve_locale,
)
from tests.strategies import locales, supported_locale_lists


class TestLegacyNormalization:
    """Deprecated language codes are rewritten before matching."""

    @pytest.mark.parametrize(
        ("legacy", "modern"),
        [("iw", "he"), ("ji", "yi"), ("in", "id")],
    )
    def test_legacy_code_rewritten(self, legacy: str, modern: str) -> None:
        assert normalize_legacy_locale(Locale(legacy, "XX")) == Locale(modern, "XX")

    def test_country_code_preserved(self) -> None:
        assert normalize_legacy_locale(Locale("in", "ID")) == Locale("id", "ID")

    def test_language_only_locale_rewritten(self) -> None:
        assert normalize_legacy_locale(Locale("iw")) == Locale("he")

    def test_modern_code_untouched(self) -> None:
        locale = Locale("en", "US")
        assert normalize_legacy_locale(locale) is locale

    def test_hebrew_legacy_resolves_to_supported(self) -> None:
        result = resolve_locale(Locale("iw", "IL"), (Locale("he", "IL"),))
        assert result == Locale("he", "IL")

    def test_yiddish_legacy_resolves_to_supported(self) -> None:
        result = resolve_locale(Locale("ji", "US"), (Locale("en", "US"), Locale("yi", "US")))
        assert result == Locale("yi", "US")

    def test_indonesian_legacy_resolves_to_supported(self) -> None:
        result = resolve_locale(Locale("in", "ID"), (Locale("en", "US"), Locale("id", "ID")))
        assert result == Locale("id", "ID")

    def test_override_receives_normalized_candidate(self) -> None:
        seen: list[Locale] = []

        def override(candidate: Locale, supported: tuple[Locale, ...]) -> Locale | None:
            seen.append(candidate)
            return None

        resolve_locale(Locale("iw", "IL"), (Locale("en"),), override)
        assert seen == [Locale("he", "IL")]


class TestMatching:
    """Exact match, then first language match, then first entry."""

    def test_exact_match_wins_over_later_language_match(self) -> None:
        supported = (Locale("fr", "FR"), Locale("fr", "CA"))
        assert resolve_locale(Locale("fr", "FR"), supported) == Locale("fr", "FR")

    def test_exact_match_wins_over_earlier_language_match(self) -> None:
        supported = (Locale("fr", "CA"), Locale("fr", "FR"))
        assert resolve_locale(Locale("fr", "FR"), supported) == Locale("fr", "FR")

    def test_language_fallback_is_first_in_list_order(self) -> None:
        """First language match wins, not the closest country.

        fr_BE is arguably closer to fr_FR than to fr_CA, but the algorithm
        deliberately picks the first entry that shares the language.
        """
        supported = (Locale("en", "US"), Locale("fr", "CA"), Locale("fr", "FR"))
        assert resolve_locale(Locale("fr", "BE"), supported) == Locale("fr", "CA")

    def test_language_only_candidate_matches_country_entry(self) -> None:
        supported = (Locale("en", "US"), Locale("de", "AT"))
        assert resolve_locale(Locale("de"), supported) == Locale("de", "AT")

    def test_language_only_entry_matches_exactly(self) -> None:
        supported = (Locale("de", "AT"), Locale("de"))
        assert resolve_locale(Locale("de"), supported) == Locale("de")

    def test_default_fallback_is_first_entry(self) -> None:
        supported = (Locale("en", "US"), Locale("fr", "FR"))
        assert resolve_locale(Locale("zz", "ZZ"), supported) == Locale("en", "US")

    def test_single_entry_list_always_returns_it(self) -> None:
        assert resolve_locale(Locale("ja", "JP"), (Locale("lv"),)) == Locale("lv")

    def test_empty_supported_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_locale(Locale("en"), ())
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SUPPORTED_LOCALES_EMPTY


class TestOverride:
    """The app callback is consulted first and trusted as-is."""

    def test_override_result_returned_unchanged_even_if_unsupported(self) -> None:
        custom = Locale("tlh")
        result = resolve_locale(
            Locale("en", "US"), (Locale("en", "US"),), lambda candidate, supported: custom
        )
        assert result is custom

    def test_override_none_defers_to_matching(self) -> None:
        supported = (Locale("en", "US"), Locale("fr", "CA"))
        result = resolve_locale(Locale("fr", "BE"), supported, lambda c, s: None)
        assert result == Locale("fr", "CA")

    def test_override_receives_full_supported_tuple(self) -> None:
        supported = (Locale("en", "US"), Locale("fr", "CA"))
        received: list[tuple[Locale, ...]] = []

        def override(candidate: Locale, given_supported: tuple[Locale, ...]) -> None:
            received.append(given_supported)

        resolve_locale(Locale("fr"), supported, override)
        assert received == [supported]


class TestLocaleResolver:
    """Bound resolver validates once and resolves many candidates."""

    def test_resolve_matches_function(self) -> None:
        resolver = LocaleResolver([Locale("he", "IL"), Locale("en")])
        assert resolver.resolve(Locale("iw", "IL")) == Locale("he", "IL")
        assert resolver.resolve(Locale("en", "GB")) == Locale("en")

    def test_supported_frozen_to_tuple(self) -> None:
        resolver = LocaleResolver([Locale("en")])
        assert resolver.supported == (Locale("en"),)
        assert resolver.fallback == Locale("en")

    def test_empty_list_fails_fast(self) -> None:
        with pytest.raises(ConfigurationError):
            LocaleResolver([])

    def test_non_locale_entry_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="supported_locales"):
            LocaleResolver(["en_US"])  # type: ignore[list-item]

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            LocaleResolver([])

    def test_repr_lists_locales(self) -> None:
        resolver = LocaleResolver([Locale("en", "US"), Locale("lv")])
        assert repr(resolver) == "LocaleResolver(supported=[en_US, lv], override=False)"


class TestResolutionProperties:
    """Universal properties of resolve_locale."""

    @given(candidate=locales(), supported=supported_locale_lists())
    def test_total_and_member_of_supported(
        self, candidate: Locale, supported: tuple[Locale, ...]
    ) -> None:
        """Without an override the result is always a supported entry."""
        result = resolve_locale(candidate, supported)
        event(f"fallback={result == supported[0]}")
        assert result is not None
        assert result in supported

    @given(candidate=locales(), supported=supported_locale_lists())
    def test_deterministic(self, candidate: Locale, supported: tuple[Locale, ...]) -> None:
        assert resolve_locale(candidate, supported) == resolve_locale(candidate, supported)

    @given(candidate=locales(), supported=supported_locale_lists())
    def test_language_preserved_when_available(
        self, candidate: Locale, supported: tuple[Locale, ...]
    ) -> None:
        """If any entry shares the normalized language, the result does too."""
        normalized = normalize_legacy_locale(candidate)
        result = resolve_locale(candidate, supported)
        if any(entry.language_code == normalized.language_code for entry in supported):
            event("language_available=True")
            assert result.language_code == normalized.language_code
        else:
            event("language_available=False")
            assert result == supported[0]

    @given(
        candidate=locales(),
        supported=supported_locale_lists(),
        forced=st.one_of(st.none(), locales()),
    )
    def test_override_short_circuit(
        self,
        candidate: Locale,
        supported: tuple[Locale, ...],
        forced: Locale | None,
    ) -> None:
        result = resolve_locale(candidate, supported, lambda c, s: forced)
        if forced is None:
            assert result == resolve_locale(candidate, supported)
        else:
            assert result is forced
