"""Character n-gram extraction.

This module turns text into frequency-ranked n-gram profiles.
One code path serves both kinds: raw input is mapped byte-for-byte onto
latin-1 code points, utf8 input is decoded and case folded.
"""

from __future__ import annotations

from collections import Counter
import re
from typing import Iterable, Iterator

from core.constants import (
    MAX_NGRAM_LENGTH,
    MAX_PROFILE,
    MIN_NGRAM_LENGTH,
    RAW_KIND,
    UTF8_KIND,
    WORD_BOUNDARY,
)
from core.errors import InvalidProfileError
from core.types import Profile, ProfileKind

_SEPARATOR_PATTERN = re.compile(r"[\x00-\x20\x7f_]+")


def extract_profile(
    data: bytes | str,
    kind: ProfileKind,
    max_size: int = MAX_PROFILE,
) -> Profile:
    """Build a ranked profile from one text buffer.

    Args:
        data: Input bytes, or text that is encoded to UTF-8 first.
        kind: Normalization kind, ``raw`` or ``utf8``.
        max_size: Maximum number of ranked n-grams kept.

    Returns:
        Profile sorted by descending frequency, ties by n-gram.
    """
    return rank_ngrams(count_ngrams(data, kind), kind, max_size)


def build_profile(
    documents: Iterable[bytes | str],
    kind: ProfileKind,
    max_size: int = MAX_PROFILE,
) -> Profile:
    """Build one profile from the pooled n-gram counts of several documents.

    Args:
        documents: Corpus documents.
        kind: Normalization kind, ``raw`` or ``utf8``.
        max_size: Maximum number of ranked n-grams kept.

    Returns:
        Ranked corpus profile.
    """
    counts: Counter[str] = Counter()
    for document in documents:
        counts.update(count_ngrams(document, kind))
    return rank_ngrams(counts, kind, max_size)


def count_ngrams(data: bytes | str, kind: ProfileKind) -> Counter[str]:
    """Count 1- to 5-grams over the padded words of a text buffer.

    Args:
        data: Input bytes or text.
        kind: Normalization kind.

    Returns:
        Mapping of n-gram to occurrence count.
    """
    counts: Counter[str] = Counter()
    for word in iter_padded_words(normalize_text(data, kind)):
        counts.update(iter_ngrams(word))
    return counts


def rank_ngrams(counts: Counter[str], kind: ProfileKind, max_size: int = MAX_PROFILE) -> Profile:
    """Order counted n-grams into a truncated profile.

    Args:
        counts: N-gram occurrence counts.
        kind: Kind of the resulting profile.
        max_size: Maximum number of ranked n-grams kept.

    Returns:
        Ranked profile.

    Raises:
        InvalidProfileError: If ``max_size`` exceeds the profile limit.
    """
    if not 0 <= max_size <= MAX_PROFILE:
        raise InvalidProfileError(
            f"Invalid profile size {max_size}: expected 0 to {MAX_PROFILE} entries."
        )
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return Profile(kind=kind, ngrams=tuple(ngram for ngram, _ in ordered[:max_size]))


def normalize_text(data: bytes | str, kind: ProfileKind) -> str:
    """Decode input for a kind and apply its case folding.

    Args:
        data: Input bytes or text.
        kind: Normalization kind.

    Returns:
        Text in the kind's alphabet, ready for word splitting.

    Raises:
        InvalidProfileError: If the kind is not supported.
    """
    raw_bytes = to_bytes(data)
    if kind == RAW_KIND:
        return raw_bytes.decode("latin-1")
    if kind == UTF8_KIND:
        text = raw_bytes.decode("utf-8", errors="replace")
        return "".join(_fold_character(character) for character in text)
    raise InvalidProfileError(f"Unsupported profile kind '{kind}'.")


def to_bytes(data: bytes | str) -> bytes:
    """Return input as bytes, encoding text as UTF-8."""
    if isinstance(data, str):
        return data.encode("utf-8", errors="replace")
    return bytes(data)


def iter_padded_words(text: str) -> Iterator[str]:
    """Yield each word wrapped in word-boundary markers.

    Runs of ASCII whitespace, control characters and ``_`` separate words.
    """
    for word in _SEPARATOR_PATTERN.split(text):
        if word:
            yield f"{WORD_BOUNDARY}{word}{WORD_BOUNDARY}"


def iter_ngrams(padded_word: str) -> Iterator[str]:
    """Yield every 1- to 5-character window of a padded word."""
    word_length = len(padded_word)
    for size in range(MIN_NGRAM_LENGTH, MAX_NGRAM_LENGTH + 1):
        for start in range(word_length - size + 1):
            yield padded_word[start : start + size]


def _fold_character(character: str) -> str:
    """Apply simple case folding, keeping characters with no one-to-one fold."""
    folded = character.casefold()
    if len(folded) == 1:
        return folded
    lowered = character.lower()
    return lowered if len(lowered) == 1 else character
