"""End-to-end classification against the embedded default profiles."""

from __future__ import annotations

from pathlib import Path

import pytest

from textcat import TextCat

_ENGLISH = "The quick brown fox jumps over the lazy dog."
_FRENCH = "Le vif renard brun saute par-dessus le chien paresseux."


def test_english_sentence_is_english(utf8_textcat: TextCat) -> None:
    """A short English pangram should be recognized."""
    assert utf8_textcat.classify(_ENGLISH) == ["english"]


def test_french_sentence_is_french(utf8_textcat: TextCat) -> None:
    """A short French sentence should be recognized."""
    assert utf8_textcat.classify(_FRENCH) == ["french"]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Der schnelle braune Fuchs springt über den faulen Hund.", ["german"]),
        ("Het is vandaag mooi weer, en de kinderen spelen buiten in de tuin.", ["dutch"]),
        ("Il pane e il vino sono sulla tavola.", ["italian"]),
        ("La casa de la familia es grande.", ["spanish"]),
    ],
)
def test_default_languages_are_recognized(
    utf8_textcat: TextCat,
    text: str,
    expected: list[str],
) -> None:
    """Each default language should win on a typical sentence."""
    assert utf8_textcat.classify(text) == expected


def test_single_character_is_short(utf8_textcat: TextCat) -> None:
    """A single character cannot be classified."""
    assert utf8_textcat.classify("x") == ["short"]


def test_empty_input_is_short(utf8_textcat: TextCat) -> None:
    """Empty input is short rather than an error."""
    assert utf8_textcat.classify("") == ["short"]


def test_text_matching_no_profile_is_unknown(utf8_textcat: TextCat) -> None:
    """Digit strings tie across every language and are ambiguous."""
    result = utf8_textcat.classify_detailed("1234567 7654321 2468135 9081726")

    assert result.as_labels() == ["unknown"]
    assert len({score.distance for score in result.candidates}) == 1


def test_closely_related_languages_are_both_reported(utf8_textcat: TextCat) -> None:
    """Spanish and Portuguese fall within 3% of each other on shared words."""
    result = utf8_textcat.classify_detailed("casa grande")

    assert result.labels == ("spanish", "portuguese")
    assert result.candidates[0].distance < result.candidates[1].distance


def test_classification_ignores_surrounding_whitespace(utf8_textcat: TextCat) -> None:
    """Padding and collapsible whitespace runs do not change the result."""
    padded = "  The   quick brown fox\tjumps over the lazy dog.  \n"

    assert utf8_textcat.classify(padded) == utf8_textcat.classify(_ENGLISH)


def test_long_input_never_yields_empty_list(utf8_textcat: TextCat) -> None:
    """Input above the minimum size always yields labels or a sentinel."""
    for text in (_ENGLISH, _FRENCH, "zzzz qqqq xxxx vvvv wwww kkkk"):
        assert utf8_textcat.classify(text) != []


def test_raw_profiles_recognize_english() -> None:
    """Raw byte profiles classify ASCII English on their own."""
    classifier = TextCat()
    classifier.enable_all_raw()

    assert classifier.classify(_ENGLISH) == ["english"]


def test_both_kinds_report_suffixed_variants() -> None:
    """When both variants survive, labels carry their kinds."""
    classifier = TextCat()
    classifier.enable_all_raw()
    classifier.enable_all_utf8()

    assert classifier.classify("the river and the bridge are still there") == [
        "english.utf8",
        "english.raw",
    ]


def test_both_kinds_report_bare_label_when_one_variant_survives() -> None:
    """Only the utf8 variant is close enough for mixed-case English."""
    classifier = TextCat()
    classifier.enable_all_raw()
    classifier.enable_all_utf8()

    assert classifier.classify(_ENGLISH) == ["english"]


def test_custom_profile_participates_after_enable(fixtures_dir: Path) -> None:
    """A registered utf8 profile file becomes a candidate once enabled."""
    classifier = TextCat()
    classifier.add_language("klingon", fixtures_dir / "profiles" / "klingon.lm")
    classifier.enable_all_utf8()
    text = (fixtures_dir / "text" / "klingon.txt").read_bytes()

    assert classifier.classify(text) == ["klingon"]
    assert "klingon.utf8" in classifier.active_languages()
