"""Out-of-place rank distance scoring."""

from __future__ import annotations

from typing import Iterable, Mapping

from core.constants import MAX_PROFILE
from core.types import CandidateScore, Profile, ProfileKind, StoredProfile


def out_of_place_distance(
    input_profile: Profile,
    stored_profile: Profile,
    missing_penalty: int = MAX_PROFILE,
) -> int:
    """Compute the Cavnar-Trenkle out-of-place distance.

    Only n-grams of the input profile contribute: each adds the absolute
    difference of its two ranks, or ``missing_penalty`` when the stored
    profile lacks it.

    Args:
        input_profile: Profile of the document being classified.
        stored_profile: Reference language profile.
        missing_penalty: Cost of an input n-gram absent from the reference.

    Returns:
        Non-negative distance, lower is closer.
    """
    total = 0
    for ngram, input_rank in input_profile.entries():
        stored_rank = stored_profile.rank(ngram)
        if stored_rank is None:
            total += missing_penalty
        else:
            total += abs(input_rank - stored_rank)
    return total


def score_entries(
    input_profiles: Mapping[ProfileKind, Profile],
    entries: Iterable[StoredProfile],
) -> list[CandidateScore]:
    """Score each stored entry against the input profile of its own kind.

    Entries whose kind has no input profile are skipped.

    Args:
        input_profiles: Input profile per extracted kind.
        entries: Stored entries to score.

    Returns:
        One candidate score per scored entry, in entry order.
    """
    scores: list[CandidateScore] = []
    for entry in entries:
        input_profile = input_profiles.get(entry.kind)
        if input_profile is None:
            continue
        distance = out_of_place_distance(input_profile, entry.profile)
        scores.append(CandidateScore(label=entry.label, kind=entry.kind, distance=distance))
    return scores
