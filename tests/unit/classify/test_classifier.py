"""Unit tests for the TextCat classifier with constructed profiles."""

from __future__ import annotations

from pathlib import Path

import pytest

from classify.classifier import TextCat
from core.errors import NoEnabledProfilesError, TextcatConfigError
from core.types import ClassifierOptions, Profile
from profiles.ngram_extraction import extract_profile
from profiles.profile_format import write_profile_file

_SAMPLE_TEXT = "abcd da"
_THRESHOLD_BASE_SWAPS = ((0, 24), (1, 23), (2, 22), (3, 21), (4, 20))


def _swapped(profile: Profile, pairs: tuple[tuple[int, int], ...]) -> Profile:
    """Swap rank pairs; each swap of ranks i and j adds 2 * |i - j| distance."""
    ngrams = list(profile.ngrams)
    for first, second in pairs:
        ngrams[first], ngrams[second] = ngrams[second], ngrams[first]
    return Profile(kind=profile.kind, ngrams=tuple(ngrams))


def _register(classifier: TextCat, tmp_path: Path, label: str, profile: Profile) -> None:
    path = write_profile_file(profile, tmp_path / f"{label}.{profile.kind}.lm")
    classifier.add_language(label, path)


def test_classify_raises_without_enabled_profiles() -> None:
    """A fresh classifier has defaults registered but none enabled."""
    classifier = TextCat()

    with pytest.raises(NoEnabledProfilesError):
        classifier.classify("The river and the bridge")

    assert classifier.active_languages() == []


def test_classify_is_short_below_min_doc_size(tmp_path: Path) -> None:
    """Input with 24 distinct n-grams is too short."""
    classifier = TextCat(load_defaults=False)
    _register(classifier, tmp_path, "custom", extract_profile(_SAMPLE_TEXT, "utf8"))
    classifier.enable_all_utf8()

    assert len(extract_profile("abcd bd", "utf8")) == 24
    assert classifier.classify("abcd bd") == ["short"]


def test_classify_accepts_exactly_min_doc_size(tmp_path: Path) -> None:
    """Input with exactly 25 distinct n-grams is classified."""
    classifier = TextCat(load_defaults=False)
    _register(classifier, tmp_path, "custom", extract_profile(_SAMPLE_TEXT, "utf8"))
    classifier.enable_all_utf8()

    assert len(extract_profile(_SAMPLE_TEXT, "utf8")) == 25
    assert classifier.classify(_SAMPLE_TEXT) == ["custom"]


def test_classify_empty_input_is_short_with_many_profiles(tmp_path: Path) -> None:
    """Empty input is short even when every profile ties at distance zero."""
    classifier = TextCat(load_defaults=False)
    base = extract_profile(_SAMPLE_TEXT, "utf8")
    for index in range(7):
        _register(classifier, tmp_path, f"lang{index}", base)
    classifier.enable_all_utf8()

    assert classifier.classify("") == ["short"]
    assert classifier.classify(b"   \n\t ") == ["short"]


def test_classify_threshold_is_inclusive(tmp_path: Path) -> None:
    """Distances 200 and 206 survive while 208 falls outside the 3% band."""
    classifier = TextCat(load_defaults=False)
    base = extract_profile(_SAMPLE_TEXT, "utf8")
    _register(classifier, tmp_path, "alpha", _swapped(base, _THRESHOLD_BASE_SWAPS))
    _register(classifier, tmp_path, "beta", _swapped(base, _THRESHOLD_BASE_SWAPS + ((5, 8),)))
    _register(classifier, tmp_path, "gamma", _swapped(base, _THRESHOLD_BASE_SWAPS + ((5, 9),)))
    classifier.enable_all_utf8()

    result = classifier.classify_detailed(_SAMPLE_TEXT)

    assert result.labels == ("alpha", "beta")
    assert [score.distance for score in result.candidates] == [200, 206]


def test_classify_reports_unknown_for_one_candidate_too_many(tmp_path: Path) -> None:
    """Six tied profiles exceed the five-candidate limit."""
    classifier = TextCat(load_defaults=False)
    base = extract_profile(_SAMPLE_TEXT, "utf8")
    for index in range(6):
        _register(classifier, tmp_path, f"lang{index}", base)
    classifier.enable_all_utf8()

    assert classifier.classify(_SAMPLE_TEXT) == ["unknown"]


def test_classify_returns_five_tied_candidates_in_label_order(tmp_path: Path) -> None:
    """Five tied profiles are all reported, lexicographically."""
    classifier = TextCat(load_defaults=False)
    base = extract_profile(_SAMPLE_TEXT, "utf8")
    for label in ("echo", "delta", "charlie", "bravo", "alpha"):
        _register(classifier, tmp_path, label, base)
    classifier.enable_all_utf8()

    assert classifier.classify(_SAMPLE_TEXT) == ["alpha", "bravo", "charlie", "delta", "echo"]


def test_classify_suffixes_kinds_when_both_variants_survive(tmp_path: Path) -> None:
    """Both variants of one label are reported with their kinds."""
    classifier = TextCat(load_defaults=False)
    _register(classifier, tmp_path, "custom", extract_profile(_SAMPLE_TEXT, "utf8"))
    _register(classifier, tmp_path, "custom", extract_profile(_SAMPLE_TEXT, "raw"))
    classifier.enable_all_raw()
    classifier.enable_all_utf8()

    assert classifier.classify(_SAMPLE_TEXT) == ["custom.raw", "custom.utf8"]


def test_single_kind_profile_only_joins_its_own_kind(tmp_path: Path) -> None:
    """A utf8-only profile does not compete when only raw profiles are enabled."""
    classifier = TextCat(load_defaults=False)
    _register(classifier, tmp_path, "custom", extract_profile(_SAMPLE_TEXT, "utf8"))
    raw_profile = _swapped(extract_profile(_SAMPLE_TEXT, "raw"), ((0, 1),))
    _register(classifier, tmp_path, "other", raw_profile)
    classifier.enable_all_raw()

    assert classifier.classify(_SAMPLE_TEXT) == ["other"]
    assert classifier.active_languages() == ["other.raw"]


def test_classify_is_deterministic(tmp_path: Path) -> None:
    """Repeated classification of the same input gives equal results."""
    classifier = TextCat(load_defaults=False)
    base = extract_profile(_SAMPLE_TEXT, "utf8")
    _register(classifier, tmp_path, "alpha", _swapped(base, ((0, 3),)))
    _register(classifier, tmp_path, "beta", _swapped(base, ((0, 3),)))
    classifier.enable_all_utf8()

    first = classifier.classify(_SAMPLE_TEXT)

    assert first == classifier.classify(_SAMPLE_TEXT) == ["alpha", "beta"]


def test_available_languages_lists_registered_keys(tmp_path: Path) -> None:
    """Every registered profile is listed as label.kind."""
    classifier = TextCat(load_defaults=False)
    _register(classifier, tmp_path, "custom", extract_profile(_SAMPLE_TEXT, "raw"))

    assert classifier.available_languages() == ["custom.raw"]
    assert "english.utf8" in TextCat().available_languages()


def test_textcat_rejects_invalid_options() -> None:
    """Options are validated at construction."""
    with pytest.raises(TextcatConfigError):
        TextCat(ClassifierOptions(threshold=0.5), load_defaults=False)


@pytest.mark.parametrize("threshold", [float("nan"), float("inf")])
def test_textcat_rejects_non_finite_threshold(threshold: float) -> None:
    """A non-finite threshold fails at construction instead of during selection."""
    with pytest.raises(TextcatConfigError):
        TextCat(ClassifierOptions(threshold=threshold), load_defaults=False)
