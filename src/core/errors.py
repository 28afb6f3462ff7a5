"""Textcat exception hierarchy.

Loader, store and classifier failures each raise their own error type.
Inconclusive classifications are reported as results, not errors.
"""

from __future__ import annotations


class TextcatError(Exception):
    """Base exception for all textcat failures."""


class TextcatConfigError(TextcatError):
    """Raised for invalid runtime configuration or classifier options."""


class InvalidProfileError(TextcatError):
    """Raised when a profile violates its rank invariants."""


class ProfileReadError(TextcatError):
    """Raised when a profile file cannot be read."""


class ProfileParseError(TextcatError):
    """Raised for malformed profile file content."""


class TextcatStoreError(TextcatError):
    """Raised for profile store registration failures."""


class DuplicateProfileError(TextcatStoreError):
    """Raised when a (label, kind) key is already registered."""


class NoEnabledProfilesError(TextcatError):
    """Raised when classification runs without any enabled profile."""
