"""Public SDK surface for textcat.

This module provides a stable import path for library users.
It re-exports the classifier, typed models and profile helpers.
"""

from __future__ import annotations

from classify.classifier import TextCat
from classify.scoring import out_of_place_distance
from core.config import TextcatConfig
from core.errors import (
    DuplicateProfileError,
    InvalidProfileError,
    NoEnabledProfilesError,
    ProfileParseError,
    ProfileReadError,
    TextcatConfigError,
    TextcatError,
    TextcatStoreError,
)
from core.types import (
    CandidateScore,
    ClassificationResult,
    ClassifierOptions,
    Profile,
    StoredProfile,
)
from profiles.ngram_extraction import build_profile, extract_profile
from profiles.profile_format import (
    format_profile,
    parse_profile_text,
    read_profile_file,
    write_profile_file,
)

__all__ = [
    "CandidateScore",
    "ClassificationResult",
    "ClassifierOptions",
    "DuplicateProfileError",
    "InvalidProfileError",
    "NoEnabledProfilesError",
    "Profile",
    "ProfileParseError",
    "ProfileReadError",
    "StoredProfile",
    "TextCat",
    "TextcatConfig",
    "TextcatConfigError",
    "TextcatError",
    "TextcatStoreError",
    "build_profile",
    "extract_profile",
    "format_profile",
    "out_of_place_distance",
    "parse_profile_text",
    "read_profile_file",
    "write_profile_file",
]
