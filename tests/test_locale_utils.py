"""Tests for locale_utils.py.

Covers normalize_locale, locale_candidates, get_babel_locale, and
get_system_locale. Includes property-based tests with Hypothesis for
locale normalization.

Python 3.13+.
"""

import os
from unittest.mock import patch

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from dtlexengine.locale_utils import (
    get_babel_locale,
    get_system_locale,
    locale_candidates,
    normalize_locale,
)


class TestNormalizeLocale:
    """Test normalize_locale function.

    Case is preserved; Babel parses identifiers case-insensitively and the
    LocaleContext cache keys on this form.
    """

    def test_bcp47_to_posix(self) -> None:
        """Hyphens become underscores."""
        assert normalize_locale("en-US") == "en_US"

    def test_already_normalized(self) -> None:
        """POSIX identifiers are unchanged."""
        assert normalize_locale("de_DE") == "de_DE"

    def test_simple_locale(self) -> None:
        """Language-only identifiers are unchanged."""
        assert normalize_locale("lv") == "lv"

    def test_encoding_suffix_stripped(self) -> None:
        """Encoding suffixes reported by the C library are dropped."""
        assert normalize_locale("de_DE.UTF-8") == "de_DE"
        assert normalize_locale("C.UTF-8") == "C"

    def test_multiple_hyphens(self) -> None:
        """Script and region subtags are all converted."""
        assert normalize_locale("zh-Hant-TW") == "zh_Hant_TW"

    @given(
        st.text(
            alphabet=st.characters(categories=("Ll", "Lu")) | st.sampled_from("-_"),
            max_size=16,
        )
    )
    def test_no_hyphens_remain(self, code: str) -> None:
        """Output never contains hyphens and keeps its length."""
        event(f"has_hyphen={'-' in code}")

        result = normalize_locale(code)

        assert "-" not in result
        assert len(result) == len(code)

    @given(st.text(max_size=16))
    def test_idempotent(self, code: str) -> None:
        """Normalizing twice changes nothing further."""
        once = normalize_locale(code)

        assert normalize_locale(once) == once


class TestLocaleCandidates:
    """Test locale_candidates function."""

    def test_single_string(self) -> None:
        """A string is a single candidate, unnormalized."""
        assert locale_candidates("en-US") == ("en-US",)

    def test_empty_string(self) -> None:
        """An empty string yields no candidates."""
        assert locale_candidates("") == ()

    def test_sequence_keeps_order(self) -> None:
        """Sequences keep their order and drop empty entries."""
        assert locale_candidates(["xx", "", "de-DE", "en"]) == ("xx", "de-DE", "en")

    def test_tuple(self) -> None:
        """Tuples work like lists."""
        assert locale_candidates(("lv",)) == ("lv",)


class TestGetBabelLocale:
    """Test get_babel_locale function."""

    def test_bcp47_format(self) -> None:
        """BCP-47 identifiers parse."""
        locale = get_babel_locale("en-US")

        assert isinstance(locale, Locale)
        assert (locale.language, locale.territory) == ("en", "US")

    def test_posix_format(self) -> None:
        """POSIX identifiers with an encoding parse."""
        locale = get_babel_locale("de_DE.UTF-8")

        assert (locale.language, locale.territory) == ("de", "DE")

    def test_caching(self) -> None:
        """Repeated calls return the cached Locale."""
        assert get_babel_locale("lv_LV") is get_babel_locale("lv_LV")

    def test_unknown_locale_raises(self) -> None:
        """Well-formed but unknown identifiers raise UnknownLocaleError."""
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx_XX")

    def test_invalid_locale_raises(self) -> None:
        """Malformed identifiers raise ValueError."""
        with pytest.raises(ValueError):
            get_babel_locale("12!")


class TestGetSystemLocale:
    """Test get_system_locale function."""

    def test_getlocale_success(self) -> None:
        """The OS locale is used when available."""
        with patch("locale.getlocale", return_value=("en_US", "UTF-8")):
            assert get_system_locale() == "en_US"

    def test_getlocale_wins_over_environment(self) -> None:
        """The OS locale is consulted before LC_ALL, LC_MESSAGES, and LANG."""
        env = {"LC_ALL": "lv_LV", "LC_MESSAGES": "de_DE", "LANG": "en_GB"}
        with (
            patch("locale.getlocale", return_value=("fr_FR", "UTF-8")),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == "fr_FR"

    def test_getlocale_with_encoding(self) -> None:
        """Encoding suffixes are stripped."""
        with patch("locale.getlocale", return_value=("de_DE.UTF-8", "UTF-8")):
            assert get_system_locale() == "de_DE"

    @pytest.mark.parametrize("pseudo", ["C", "POSIX"])
    def test_pseudo_locales_skipped(self, pseudo: str) -> None:
        """C and POSIX fall through to the environment."""
        with (
            patch("locale.getlocale", return_value=(pseudo, None)),
            patch.dict(os.environ, {"LANG": "fr_FR.UTF-8"}, clear=True),
        ):
            assert get_system_locale() == "fr_FR"

    @pytest.mark.parametrize("error", [ValueError("mock error"), AttributeError("mock error")])
    def test_getlocale_errors_fall_back_to_environment(self, error: Exception) -> None:
        """getlocale() failures are tolerated."""
        with (
            patch("locale.getlocale", side_effect=error),
            patch.dict(os.environ, {"LANG": "pt_BR"}, clear=True),
        ):
            assert get_system_locale() == "pt_BR"

    def test_lc_all_priority(self) -> None:
        """LC_ALL wins over LC_MESSAGES and LANG."""
        env = {"LC_ALL": "lv_LV", "LC_MESSAGES": "de_DE", "LANG": "en_GB"}
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == "lv_LV"

    def test_lc_messages_fallback(self) -> None:
        """LC_MESSAGES is used when LC_ALL is unset."""
        env = {"LC_MESSAGES": "de_DE", "LANG": "en_GB"}
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == "de_DE"

    def test_pseudo_environment_values_skipped(self) -> None:
        """C.UTF-8 in the environment is skipped like C."""
        env = {"LC_ALL": "C.UTF-8", "LANG": "nl_NL.UTF-8"}
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == "nl_NL"

    def test_default_when_nothing_found(self) -> None:
        """en_US when neither the OS nor the environment helps."""
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {}, clear=True),
        ):
            assert get_system_locale() == "en_US"
