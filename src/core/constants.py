"""Core constants used across textcat modules.

Classifier tunables, profile file literals and the default
language set live here so every layer agrees on them.
"""

from __future__ import annotations

MAX_PROFILE = 400
MIN_NGRAM_LENGTH = 1
MAX_NGRAM_LENGTH = 5
WORD_BOUNDARY = "_"
DEFAULT_MAX_CANDIDATES = 5
DEFAULT_MIN_DOC_SIZE = 25
DEFAULT_THRESHOLD = 1.03
RAW_KIND = "raw"
UTF8_KIND = "utf8"
SUPPORTED_PROFILE_KINDS = (RAW_KIND, UTF8_KIND)
SHORT_SENTINEL = "short"
UNKNOWN_SENTINEL = "unknown"
RESERVED_LABELS = (SHORT_SENTINEL, UNKNOWN_SENTINEL)
PROFILE_HEADER_PREFIX = "kind:"
PROFILE_COMMENT_PREFIX = "#"
PROFILE_FIELD_SEPARATOR = "\t"
PROFILE_FILE_SUFFIX = ".lm"
DEFAULT_PROFILE_PACKAGE = "profiles"
DEFAULT_PROFILE_DATA_DIR = "data"
DEFAULT_PROFILE_LABELS = (
    "dutch",
    "english",
    "french",
    "german",
    "italian",
    "portuguese",
    "spanish",
)
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
