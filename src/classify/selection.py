"""Candidate selection policy.

Candidates within ``threshold`` times the best distance survive. Too
many survivors means the input is ambiguous; otherwise survivors are
ordered by distance with ties broken by label.
"""

from __future__ import annotations

from collections import Counter
from decimal import Decimal
from typing import Sequence

from core.constants import SHORT_SENTINEL, UNKNOWN_SENTINEL
from core.types import CandidateScore, ClassificationResult, ClassifierOptions, Profile


def is_short_input(input_profiles: Sequence[Profile], options: ClassifierOptions) -> bool:
    """Return True when no input profile reaches the minimum document size."""
    return all(len(profile) < options.min_doc_size for profile in input_profiles)


def short_result() -> ClassificationResult:
    """Build the result for input too small to classify."""
    return ClassificationResult(status=SHORT_SENTINEL)


def select_candidates(
    scores: Sequence[CandidateScore],
    options: ClassifierOptions,
) -> ClassificationResult:
    """Apply threshold, candidate limit and ordering to scored profiles.

    Args:
        scores: Distances of every enabled stored profile.
        options: Selection tunables.

    Returns:
        ``ok`` result with ordered labels, or an ``unknown`` result when
        more than ``options.max_candidates`` candidates survive.
    """
    if not scores:
        return ClassificationResult(status=UNKNOWN_SENTINEL)
    survivors = within_threshold(scores, options.threshold)
    if len(survivors) > options.max_candidates:
        return ClassificationResult(status=UNKNOWN_SENTINEL, candidates=tuple(survivors))
    labelled = sorted(
        ((score, label) for score, label in zip(survivors, display_labels(survivors))),
        key=lambda pair: (pair[0].distance, pair[1]),
    )
    return ClassificationResult(
        status="ok",
        labels=tuple(label for _, label in labelled),
        candidates=tuple(score for score, _ in labelled),
    )


def within_threshold(scores: Sequence[CandidateScore], threshold: float) -> list[CandidateScore]:
    """Keep candidates whose distance is at most ``threshold`` times the best.

    The cutoff is inclusive and computed in decimal arithmetic, so a
    distance of exactly ``best * threshold`` is kept.
    """
    best = min(score.distance for score in scores)
    cutoff = Decimal(str(threshold)) * best
    return [score for score in scores if score.distance <= cutoff]


def display_labels(survivors: Sequence[CandidateScore]) -> list[str]:
    """Render output labels, suffixing the kind only when both variants survived."""
    variant_counts = Counter(score.label for score in survivors)
    return [
        f"{score.label}.{score.kind}" if variant_counts[score.label] > 1 else score.label
        for score in survivors
    ]
