"""Embedded default language profiles.

This module loads the profile files shipped inside the package and
registers both kinds of every default language into a store. Shipped
files go through the same parser as user profile files.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources

from core.constants import (
    DEFAULT_PROFILE_DATA_DIR,
    DEFAULT_PROFILE_LABELS,
    DEFAULT_PROFILE_PACKAGE,
    PROFILE_FILE_SUFFIX,
    SUPPORTED_PROFILE_KINDS,
)
from core.errors import ProfileParseError, ProfileReadError
from core.logging_config import get_logger
from core.types import Profile, ProfileKind
from profiles.profile_format import parse_profile_text
from profiles.profile_store import ProfileStore

_LOGGER = get_logger(__name__)


def load_default_profiles(store: ProfileStore) -> int:
    """Register every embedded default profile, disabled.

    Args:
        store: Store to populate.

    Returns:
        Number of registered entries.

    Raises:
        ProfileReadError: If an embedded resource is missing.
        ProfileParseError: If an embedded resource is malformed.
        DuplicateProfileError: If a default key is already registered.
    """
    count = 0
    for label in DEFAULT_PROFILE_LABELS:
        for kind in SUPPORTED_PROFILE_KINDS:
            store.add(label, load_default_profile(label, kind))
            count += 1
    _LOGGER.debug("default_profiles_loaded", count=count)
    return count


@lru_cache(maxsize=None)
def load_default_profile(label: str, kind: ProfileKind) -> Profile:
    """Parse one embedded profile resource.

    Profiles are immutable, so parsed resources are shared between stores.

    Args:
        label: Default language label.
        kind: Profile kind.

    Returns:
        Parsed profile.

    Raises:
        ProfileReadError: If the resource does not exist.
        ProfileParseError: If the resource is malformed or declares another kind.
    """
    resource_name = f"{label}.{kind}{PROFILE_FILE_SUFFIX}"
    resource = resources.files(DEFAULT_PROFILE_PACKAGE) / DEFAULT_PROFILE_DATA_DIR / resource_name
    try:
        text = resource.read_text(encoding="utf-8")
    except OSError as error:
        raise ProfileReadError(
            f"Embedded profile {resource_name} is missing from the "
            f"'{DEFAULT_PROFILE_PACKAGE}' package data. Reinstall textcat."
        ) from error
    profile = parse_profile_text(text, source=f"{DEFAULT_PROFILE_PACKAGE}/{resource_name}")
    if profile.kind != kind:
        raise ProfileParseError(
            f"Embedded profile {resource_name} declares kind {profile.kind}, expected {kind}."
        )
    return profile
