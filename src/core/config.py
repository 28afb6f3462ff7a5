"""Runtime configuration model for textcat.

Environment variables are read here and nowhere else. The CLI turns
the config into classifier options; the engine never reads the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import os

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_CANDIDATES,
    DEFAULT_MIN_DOC_SIZE,
    DEFAULT_THRESHOLD,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import TextcatConfigError
from core.types import ClassifierOptions


@dataclass(frozen=True)
class TextcatConfig:
    """Validated runtime configuration for the command-line front end.

    Attributes:
        max_candidates: Largest candidate set reported before ``unknown``.
        min_doc_size: Minimum distinct input n-grams before ``short``.
        threshold: Distance factor over the best candidate still accepted.
        log_level: Lowest structured log level that is emitted.
    """

    max_candidates: int
    min_doc_size: int
    threshold: float
    log_level: str

    @classmethod
    def from_env(cls) -> "TextcatConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            TextcatConfigError: If environment values are invalid.
        """
        max_candidates = _parse_int("TEXTCAT_MAX_CANDIDATES", DEFAULT_MAX_CANDIDATES)
        min_doc_size = _parse_int("TEXTCAT_MIN_DOC_SIZE", DEFAULT_MIN_DOC_SIZE)
        threshold = _parse_float("TEXTCAT_THRESHOLD", DEFAULT_THRESHOLD)
        log_level = _parse_log_level(os.getenv("TEXTCAT_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        config = cls(
            max_candidates=max_candidates,
            min_doc_size=min_doc_size,
            threshold=threshold,
            log_level=log_level,
        )
        validate_classifier_options(config.classifier_options())
        return config

    def classifier_options(self) -> ClassifierOptions:
        """Return the classifier options carried by this config."""
        return ClassifierOptions(
            max_candidates=self.max_candidates,
            min_doc_size=self.min_doc_size,
            threshold=self.threshold,
        )


def validate_classifier_options(options: ClassifierOptions) -> None:
    """Check classifier options for usable values.

    Args:
        options: Options to validate.

    Raises:
        TextcatConfigError: If any option is out of range.
    """
    if options.max_candidates < 1:
        raise TextcatConfigError(
            f"Invalid max_candidates {options.max_candidates}: expected a positive integer."
        )
    if options.min_doc_size < 0:
        raise TextcatConfigError(
            f"Invalid min_doc_size {options.min_doc_size}: expected zero or more."
        )
    if not math.isfinite(options.threshold) or options.threshold < 1.0:
        raise TextcatConfigError(
            f"Invalid threshold {options.threshold}: expected a finite factor of at least 1.0."
        )


def _parse_int(env_name: str, default: int) -> int:
    """Parse an integer environment value.

    Args:
        env_name: Environment variable name.
        default: Value used when the variable is unset.

    Returns:
        Parsed integer.

    Raises:
        TextcatConfigError: If value cannot be parsed into int.
    """
    raw_value = os.getenv(env_name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError as error:
        raise TextcatConfigError(
            f"Invalid {env_name} value: expected integer, got '{raw_value}'. "
            f"Set {env_name} to a numeric value."
        ) from error


def _parse_float(env_name: str, default: float) -> float:
    """Parse a float environment value.

    Args:
        env_name: Environment variable name.
        default: Value used when the variable is unset.

    Returns:
        Parsed float.

    Raises:
        TextcatConfigError: If value cannot be parsed into float.
    """
    raw_value = os.getenv(env_name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError as error:
        raise TextcatConfigError(
            f"Invalid {env_name} value: expected number, got '{raw_value}'. "
            f"Set {env_name} to a decimal factor such as 1.03."
        ) from error


def _parse_log_level(raw_value: str) -> str:
    """Normalize and validate the log level value."""
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise TextcatConfigError(
            f"Invalid TEXTCAT_LOG_LEVEL value '{raw_value}'. "
            f"Supported levels: {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return level
