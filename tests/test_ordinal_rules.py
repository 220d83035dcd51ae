"""Tests for CLDR ordinal category selection and suffix rendering.

Property-Based Tests:
    Suffixes for English follow the last two digits of the number.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from dtlexengine.core.errors import FormattingError
from dtlexengine.diagnostics import DiagnosticCode, LocaleResolutionError
from dtlexengine.runtime import ORDINAL_SUFFIXES, LocaleContext, ordinal


class TestOrdinalCategory:
    """LocaleContext.ordinal_category() uses Babel's CLDR ordinal rules."""

    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            (1, "one"),
            (2, "two"),
            (3, "few"),
            (4, "other"),
            (11, "other"),
            (12, "other"),
            (13, "other"),
            (21, "one"),
            (22, "two"),
            (23, "few"),
            (101, "one"),
        ],
    )
    def test_english_categories(self, number: int, expected: str) -> None:
        """English ordinals distinguish one/two/few/other."""
        en_us = LocaleContext.create_or_raise("en_US")

        assert en_us.ordinal_category(number) == expected

    def test_german_is_always_other(self) -> None:
        """German has a single ordinal category."""
        de_de = LocaleContext.create_or_raise("de-DE")

        assert {de_de.ordinal_category(n) for n in range(1, 30)} == {"other"}

    @pytest.mark.parametrize("code", ["not a locale!", "xx-XX"])
    def test_unknown_locale_has_no_categories(self, code: str) -> None:
        """Ordinal rules are only reachable through a resolved locale."""
        with pytest.raises(LocaleResolutionError):
            LocaleContext.create_or_raise(code)


class TestOrdinal:
    """ordinal() appends the suffix for the locale's category."""

    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            (0, "0th"),
            (1, "1st"),
            (2, "2nd"),
            (3, "3rd"),
            (4, "4th"),
            (11, "11th"),
            (12, "12th"),
            (13, "13th"),
            (52, "52nd"),
            (94, "94th"),
            (111, "111th"),
            (366, "366th"),
        ],
    )
    def test_english(self, en_us: LocaleContext, number: int, expected: str) -> None:
        """English suffixes."""
        assert ordinal(number, en_us) == expected

    def test_single_category_locale_uses_th(self, de_de: LocaleContext) -> None:
        """Locales whose only category is 'other' always get 'th'."""
        assert ordinal(1, de_de) == "1th"

    def test_unmapped_category_raises(self) -> None:
        """Italian 'many' has no suffix; the fallback is the bare number."""
        italian = LocaleContext.create_or_raise("it_IT")

        with pytest.raises(FormattingError, match="Unable to get ordinal suffix for 8") as exc_info:
            ordinal(8, italian)

        error = exc_info.value
        assert error.fallback_value == "8"
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.ORDINAL_SUFFIX_UNAVAILABLE

    def test_suffix_table_is_read_only(self) -> None:
        """The suffix table cannot be modified."""
        with pytest.raises(TypeError):
            ORDINAL_SUFFIXES["many"] = "th"  # type: ignore[index]


class TestOrdinalProperties:
    """Property-based checks of English suffixes."""

    @given(number=st.integers(min_value=0, max_value=100_000))
    def test_english_suffix_follows_last_digits(self, number: int) -> None:
        """11-13 take 'th'; otherwise the last digit decides."""
        en_us = LocaleContext.create_or_raise("en_US")
        if number % 100 in {11, 12, 13}:
            expected = "th"
        else:
            expected = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
        event(f"suffix={expected}")

        assert ordinal(number, en_us) == f"{number}{expected}"
