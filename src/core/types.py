"""Shared typed models.

This module defines the profile, store entry, option and result models
used by the extractor, profile store, classifier and CLI layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Literal, Mapping

from core.constants import (
    DEFAULT_MAX_CANDIDATES,
    DEFAULT_MIN_DOC_SIZE,
    DEFAULT_THRESHOLD,
    MAX_PROFILE,
    RAW_KIND,
    UTF8_KIND,
)
from core.errors import InvalidProfileError

ProfileKind = Literal["raw", "utf8"]
ClassificationStatus = Literal["ok", "short", "unknown"]


@dataclass(frozen=True)
class Profile:
    """Immutable ranked n-gram profile.

    The rank of an n-gram is its position in ``ngrams``. Raw profiles hold
    byte n-grams as strings whose code points are the byte values.

    Attributes:
        kind: Normalization kind the profile was built with.
        ngrams: N-grams ordered from most to least frequent.
    """

    kind: ProfileKind
    ngrams: tuple[str, ...]
    _ranks: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.kind not in (RAW_KIND, UTF8_KIND):
            raise InvalidProfileError(f"Unsupported profile kind '{self.kind}'.")
        if len(self.ngrams) > MAX_PROFILE:
            raise InvalidProfileError(
                f"Profile holds {len(self.ngrams)} n-grams; at most {MAX_PROFILE} are allowed."
            )
        ranks = {ngram: rank for rank, ngram in enumerate(self.ngrams)}
        if len(ranks) != len(self.ngrams):
            raise InvalidProfileError("Profile contains duplicate n-grams.")
        object.__setattr__(self, "_ranks", ranks)

    def __len__(self) -> int:
        return len(self.ngrams)

    def __contains__(self, ngram: object) -> bool:
        return ngram in self._ranks

    def rank(self, ngram: str) -> int | None:
        """Return the 0-based rank of an n-gram, or None when absent."""
        return self._ranks.get(ngram)

    def entries(self) -> Iterator[tuple[str, int]]:
        """Iterate ``(ngram, rank)`` pairs in rank order."""
        for rank, ngram in enumerate(self.ngrams):
            yield ngram, rank


@dataclass(frozen=True)
class StoredProfile:
    """Profile store entry keyed by ``(label, kind)``.

    Entries are immutable snapshots; the store replaces an entry when it
    is enabled.

    Attributes:
        label: Language label the profile is registered under.
        profile: Ranked n-gram profile.
        enabled: Whether the entry takes part in classification.
    """

    label: str
    profile: Profile
    enabled: bool = False

    @property
    def kind(self) -> ProfileKind:
        """Return the kind declared by the stored profile."""
        return self.profile.kind

    @property
    def key(self) -> tuple[str, ProfileKind]:
        """Return the composite store key."""
        return self.label, self.profile.kind


@dataclass(frozen=True)
class ClassifierOptions:
    """Candidate selection tunables.

    Attributes:
        max_candidates: Largest candidate set reported before giving up.
        min_doc_size: Minimum distinct input n-grams needed to classify.
        threshold: Factor over the best distance that still counts as a match.
    """

    max_candidates: int = DEFAULT_MAX_CANDIDATES
    min_doc_size: int = DEFAULT_MIN_DOC_SIZE
    threshold: float = DEFAULT_THRESHOLD


@dataclass(frozen=True)
class CandidateScore:
    """Out-of-place distance of one stored profile.

    Attributes:
        label: Stored profile label.
        kind: Stored profile kind.
        distance: Out-of-place distance to the input profile.
    """

    label: str
    kind: ProfileKind
    distance: int


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of one classification.

    Attributes:
        status: ``ok`` for a label list, ``short`` or ``unknown`` otherwise.
        labels: Selected labels in ascending distance order.
        candidates: Surviving candidate scores in the same order as labels.
    """

    status: ClassificationStatus
    labels: tuple[str, ...] = ()
    candidates: tuple[CandidateScore, ...] = ()

    def as_labels(self) -> list[str]:
        """Render the result as a label list with sentinels inlined."""
        if self.status == "ok":
            return list(self.labels)
        return [self.status]
