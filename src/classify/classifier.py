"""Text categorization engine.

This module exposes the ``TextCat`` classifier: it owns a profile
store, builds transient input profiles per enabled kind, scores them
against every enabled stored profile and applies the selection policy.
"""

from __future__ import annotations

from pathlib import Path

from classify.scoring import score_entries
from classify.selection import is_short_input, select_candidates, short_result
from core.config import validate_classifier_options
from core.constants import SUPPORTED_PROFILE_KINDS
from core.errors import NoEnabledProfilesError
from core.logging_config import get_logger
from core.types import ClassificationResult, ClassifierOptions, Profile, ProfileKind, StoredProfile
from profiles.default_profiles import load_default_profiles
from profiles.ngram_extraction import extract_profile, to_bytes
from profiles.profile_store import ProfileStore

_LOGGER = get_logger(__name__)


class TextCat:
    """N-gram language classifier over a store of language profiles."""

    def __init__(
        self,
        options: ClassifierOptions | None = None,
        load_defaults: bool = True,
    ) -> None:
        """Create a classifier.

        Default profiles are registered but left disabled until one of the
        ``enable_all_*`` methods is called.

        Args:
            options: Optional selection tunables.
            load_defaults: Register the embedded default profiles.

        Raises:
            TextcatConfigError: If options are out of range.
        """
        self._options = options or ClassifierOptions()
        validate_classifier_options(self._options)
        self._store = ProfileStore()
        if load_defaults:
            load_default_profiles(self._store)

    @property
    def options(self) -> ClassifierOptions:
        """Return the selection tunables."""
        return self._options

    @property
    def store(self) -> ProfileStore:
        """Return the owned profile store."""
        return self._store

    def add_language(self, label: str, source: str | Path) -> StoredProfile:
        """Register a profile file under ``label`` and the kind it declares.

        Args:
            label: Language label.
            source: Profile file path.

        Returns:
            The new, disabled store entry.

        Raises:
            ProfileReadError: If the file cannot be read.
            ProfileParseError: If the file is malformed.
            DuplicateProfileError: If ``(label, kind)`` is already registered.
            TextcatStoreError: If the label is reserved.
        """
        return self._store.add_language(label, source)

    def enable_all_raw(self) -> int:
        """Enable every raw profile, returning the number of raw entries."""
        return self._store.enable_all_raw()

    def enable_all_utf8(self) -> int:
        """Enable every utf8 profile, returning the number of utf8 entries."""
        return self._store.enable_all_utf8()

    def available_languages(self) -> list[str]:
        """List every registered profile as ``label.kind``."""
        return [f"{label}.{kind}" for label, kind in self._store.keys()]

    def active_languages(self) -> list[str]:
        """List enabled profiles as ``label.kind``."""
        return [f"{entry.label}.{entry.kind}" for entry in self._store.enabled_entries()]

    def classify(self, text: bytes | str) -> list[str]:
        """Classify a text buffer.

        Args:
            text: Input bytes or text.

        Returns:
            Labels in ascending distance order, ``["short"]`` for input
            too small to classify, or ``["unknown"]`` when too many
            languages match equally well.

        Raises:
            NoEnabledProfilesError: If no profile is enabled.
        """
        return self.classify_detailed(text).as_labels()

    def classify_detailed(self, text: bytes | str) -> ClassificationResult:
        """Classify a text buffer and keep status and candidate distances.

        Args:
            text: Input bytes or text.

        Returns:
            Structured classification result.

        Raises:
            NoEnabledProfilesError: If no profile is enabled.
        """
        entries = self._store.enabled_entries()
        if not entries:
            raise NoEnabledProfilesError(
                "No language profiles are enabled. "
                "Call enable_all_utf8() or enable_all_raw() before classifying."
            )
        input_profiles = self._extract_inputs(to_bytes(text), entries)
        if is_short_input(list(input_profiles.values()), self._options):
            result = short_result()
        else:
            scores = score_entries(input_profiles, entries)
            result = select_candidates(scores, self._options)
        _LOGGER.debug(
            "classification_completed",
            status=result.status,
            labels=list(result.labels),
            candidates=len(result.candidates),
        )
        return result

    def _extract_inputs(
        self,
        data: bytes,
        entries: tuple[StoredProfile, ...],
    ) -> dict[ProfileKind, Profile]:
        """Build one input profile per kind present among enabled entries."""
        enabled_kinds = {entry.kind for entry in entries}
        return {
            kind: extract_profile(data, kind)
            for kind in SUPPORTED_PROFILE_KINDS
            if kind in enabled_kinds
        }
