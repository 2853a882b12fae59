from __future__ import annotations

import pytest

from pyvocab._locale import LocaleMatcher, generalize, normalize_locale


def test_generalize_most_specific_first() -> None:
    assert list(generalize("en-us-x")) == ["en-us-x", "en-us", "en"]


def test_generalize_single_subtag() -> None:
    assert list(generalize("fr")) == ["fr"]


def test_normalize_locale() -> None:
    assert normalize_locale(" zh-Hant-TW ") == "zh-hant-tw"


def test_normalize_locale_rejects_empty() -> None:
    with pytest.raises(ValueError):
        normalize_locale("   ")


def test_locale_matcher_compares_as_string() -> None:
    assert LocaleMatcher.LOOKUP == "lookup"
    assert LocaleMatcher("exact") is LocaleMatcher.EXACT
