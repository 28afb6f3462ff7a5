"""Registry of language profiles keyed by label and kind.

The store only grows: entries are added once and enabled in bulk per
kind. Mutations and enabled-entry snapshots share one lock so that a
classification never observes a half-applied change.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
import threading

from core.constants import RAW_KIND, RESERVED_LABELS, UTF8_KIND
from core.errors import DuplicateProfileError, TextcatStoreError
from core.logging_config import get_logger
from core.types import Profile, ProfileKind, StoredProfile
from profiles.profile_format import read_profile_file

_LOGGER = get_logger(__name__)


class ProfileStore:
    """Mapping of ``(label, kind)`` to stored profile entries."""

    def __init__(self) -> None:
        self._entries: dict[tuple[str, ProfileKind], StoredProfile] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def add(self, label: str, profile: Profile) -> StoredProfile:
        """Register a profile under ``(label, profile.kind)``.

        Args:
            label: Language label.
            profile: Non-empty ranked profile.

        Returns:
            The new, disabled store entry.

        Raises:
            TextcatStoreError: If the label is empty or reserved, or the
                profile is empty.
            DuplicateProfileError: If the key is already registered.
        """
        _validate_label(label)
        if not profile.ngrams:
            raise TextcatStoreError(
                f"Cannot register an empty {profile.kind} profile for '{label}'."
            )
        entry = StoredProfile(label=label, profile=profile)
        with self._lock:
            if entry.key in self._entries:
                raise DuplicateProfileError(
                    f"Profile '{label}' of kind {profile.kind} is already registered. "
                    "Choose a different label."
                )
            self._entries[entry.key] = entry
        _LOGGER.debug("profile_registered", label=label, kind=profile.kind, size=len(profile))
        return entry

    def add_language(self, label: str, source: str | Path) -> StoredProfile:
        """Load a profile file and register it under its declared kind.

        Args:
            label: Language label.
            source: Profile file path.

        Returns:
            The new, disabled store entry.

        Raises:
            ProfileReadError: If the file cannot be read.
            ProfileParseError: If the file is malformed.
            DuplicateProfileError: If the key is already registered.
        """
        profile = read_profile_file(source)
        return self.add(label, profile)

    def get(self, label: str, kind: ProfileKind) -> StoredProfile | None:
        """Return the entry for a key, or None."""
        with self._lock:
            return self._entries.get((label, kind))

    def enable_all_raw(self) -> int:
        """Enable every raw entry and return how many entries were touched."""
        return self._enable_kind(RAW_KIND)

    def enable_all_utf8(self) -> int:
        """Enable every utf8 entry and return how many entries were touched."""
        return self._enable_kind(UTF8_KIND)

    def enabled_entries(self) -> tuple[StoredProfile, ...]:
        """Snapshot the enabled entries in key order."""
        with self._lock:
            return tuple(
                entry for _, entry in sorted(self._entries.items()) if entry.enabled
            )

    def keys(self) -> tuple[tuple[str, ProfileKind], ...]:
        """Return every registered key in sorted order."""
        with self._lock:
            return tuple(sorted(self._entries))

    def _enable_kind(self, kind: ProfileKind) -> int:
        """Set the enabled flag on all entries of one kind."""
        with self._lock:
            entries = [entry for entry in self._entries.values() if entry.kind == kind]
            for entry in entries:
                self._entries[entry.key] = replace(entry, enabled=True)
        _LOGGER.info("profiles_enabled", kind=kind, count=len(entries))
        return len(entries)


def _validate_label(label: str) -> None:
    """Reject empty and reserved labels.

    Raises:
        TextcatStoreError: If the label cannot be used.
    """
    if not isinstance(label, str) or not label:
        raise TextcatStoreError("Profile labels must be non-empty strings.")
    if label in RESERVED_LABELS:
        raise TextcatStoreError(
            f"Label '{label}' is reserved for classification results. "
            f"Reserved labels: {', '.join(RESERVED_LABELS)}."
        )
