"""Tests for the Locale value type and locale_utils helpers.

Python 3.13+.
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from babel import Locale as BabelLocale
from babel import UnknownLocaleError

from appshell.diagnostics import ConfigurationError
from appshell.locale_utils import (
    clear_locale_cache,
    get_babel_locale,
    get_system_locale,
    normalize_locale,
    split_locale,
)
from appshell.localization import Locale


class TestLocaleValue:
    """Structural equality, hashing and rendering."""

    def test_structural_equality(self) -> None:
        assert Locale("fr", "CA") == Locale("fr", "CA")
        assert Locale("fr") != Locale("fr", "FR")
        assert Locale("fr", "CA") != Locale("fr", "FR")

    def test_hashable_and_usable_as_key(self) -> None:
        table = {Locale("en", "US"): "a"}
        assert table[Locale("en", "US")] == "a"

    def test_immutable(self) -> None:
        locale = Locale("en", "US")
        with pytest.raises(AttributeError):
            locale.language_code = "fr"  # type: ignore[misc]

    def test_no_ordering(self) -> None:
        with pytest.raises(TypeError):
            _ = Locale("a") < Locale("b")  # type: ignore[operator]

    def test_str_is_posix(self) -> None:
        assert str(Locale("en", "US")) == "en_US"
        assert str(Locale("fr")) == "fr"

    def test_language_tag_is_bcp47(self) -> None:
        assert Locale("en", "US").to_language_tag() == "en-US"
        assert Locale("fr").to_language_tag() == "fr"

    def test_empty_language_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="language_code"):
            Locale("")

    def test_non_string_country_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="country_code"):
            Locale("en", 840)  # type: ignore[arg-type]

    def test_replace_language_keeps_country(self) -> None:
        assert Locale("iw", "IL").replace_language("he") == Locale("he", "IL")


class TestLocaleParse:
    """Parsing platform identifiers."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("en-US", Locale("en", "US")),
            ("en_US", Locale("en", "US")),
            ("de_DE.UTF-8", Locale("de", "DE")),
            ("fr", Locale("fr")),
            ("zh-Hans-CN", Locale("zh", "CN")),
            ("EN-gb", Locale("en", "GB")),
            ("es-419", Locale("es", "419")),
        ],
    )
    def test_parse(self, code: str, expected: Locale) -> None:
        assert Locale.parse(code) == expected

    def test_legacy_code_parsed_verbatim(self) -> None:
        """Parsing does not normalize; resolution does."""
        assert Locale.parse("iw_IL") == Locale("iw", "IL")

    @pytest.mark.parametrize("code", ["", "en-US-!!", "12"])
    def test_malformed_rejected(self, code: str) -> None:
        with pytest.raises(ValueError):
            Locale.parse(code)

    def test_from_system_uses_environment(self) -> None:
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {"LC_ALL": "", "LC_MESSAGES": "", "LANG": "lv_LV.UTF-8"}),
        ):
            assert Locale.from_system() == Locale("lv", "LV")


class TestBabelInterop:
    """Conversion to Babel locales for CLDR lookups."""

    def test_to_babel(self) -> None:
        babel_locale = Locale("pt", "BR").to_babel()
        assert isinstance(babel_locale, BabelLocale)
        assert babel_locale.language == "pt"
        assert babel_locale.territory == "BR"

    def test_to_babel_unknown_raises(self) -> None:
        with pytest.raises(UnknownLocaleError):
            Locale("zz", "ZZ").to_babel()


class TestLocaleUtils:
    """normalize_locale, split_locale, get_babel_locale, get_system_locale."""

    def test_normalize_strips_encoding_and_modifier(self) -> None:
        assert normalize_locale("en-US") == "en_US"
        assert normalize_locale("de_DE.UTF-8") == "de_DE"
        assert normalize_locale("ca_ES@valencia") == "ca_ES"

    def test_split_locale(self) -> None:
        assert split_locale("pt-BR") == ("pt", "BR")
        assert split_locale("fr") == ("fr", None)

    def test_babel_locale_cached(self) -> None:
        clear_locale_cache()
        first = get_babel_locale("en-US")
        assert get_babel_locale("en-US") is first
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0

    def test_system_locale_from_os(self) -> None:
        with patch("locale.getlocale", return_value=("he_IL", "UTF-8")):
            assert get_system_locale() == "he_IL"

    def test_system_locale_skips_posix_pseudo_locale(self) -> None:
        with (
            patch("locale.getlocale", return_value=("C", None)),
            patch.dict(os.environ, {"LC_ALL": "", "LC_MESSAGES": "", "LANG": "fr_CA.UTF-8"}),
        ):
            assert get_system_locale() == "fr_CA"

    @pytest.mark.parametrize("pseudo", ["C.UTF-8", "POSIX", "C"])
    def test_system_locale_skips_pseudo_locale_with_encoding(self, pseudo: str) -> None:
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {"LC_ALL": pseudo, "LC_MESSAGES": "", "LANG": "de_AT.UTF-8"}),
        ):
            assert get_system_locale() == "de_AT"

    def test_system_locale_c_utf8_only_uses_default(self) -> None:
        with (
            patch("locale.getlocale", return_value=("C", "UTF-8")),
            patch.dict(os.environ, {"LC_ALL": "", "LC_MESSAGES": "", "LANG": "C.UTF-8"}),
        ):
            assert get_system_locale() == "en_US"
            assert Locale.from_system() == Locale("en", "US")

    def test_system_locale_default(self) -> None:
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {"LC_ALL": "", "LC_MESSAGES": "", "LANG": ""}),
        ):
            assert get_system_locale() == "en_US"

    def test_system_locale_raise_on_failure(self) -> None:
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {"LC_ALL": "", "LC_MESSAGES": "", "LANG": ""}),
            pytest.raises(RuntimeError, match="Could not determine system locale"),
        ):
            get_system_locale(raise_on_failure=True)
