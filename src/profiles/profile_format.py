"""Profile file parsing and serialization.

A profile file is UTF-8 text: a ``kind:raw`` or ``kind:utf8`` header
followed by ``<ngram>\\t<rank>`` lines in ascending rank order from 0.
Lines starting with ``#`` that hold no tab are comments; blank lines
are ignored. Raw n-grams are written as their latin-1 code points.
"""

from __future__ import annotations

from pathlib import Path
import re
from typing import cast

from core.constants import (
    MAX_NGRAM_LENGTH,
    MAX_PROFILE,
    PROFILE_COMMENT_PREFIX,
    PROFILE_FIELD_SEPARATOR,
    PROFILE_HEADER_PREFIX,
    RAW_KIND,
    SUPPORTED_PROFILE_KINDS,
)
from core.errors import ProfileParseError, ProfileReadError
from core.types import Profile, ProfileKind

_RANK_PATTERN = re.compile(r"[0-9]+")
_MAX_RAW_CODE_POINT = 0xFF


def read_profile_file(path: str | Path) -> Profile:
    """Read and parse a profile file from disk.

    Args:
        path: Profile file path.

    Returns:
        Parsed profile.

    Raises:
        ProfileReadError: If the file cannot be read.
        ProfileParseError: If the content is malformed.
    """
    profile_path = Path(path).expanduser()
    try:
        payload = profile_path.read_bytes()
    except OSError as error:
        raise ProfileReadError(
            f"Failed to read profile file at {profile_path}: {error.strerror or error}. "
            "Provide an existing, readable profile file."
        ) from error
    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError as error:
        raise ProfileParseError(
            f"Failed to parse profile file at {profile_path}: not valid UTF-8 "
            f"(byte offset {error.start})."
        ) from error
    return parse_profile_text(text, source=str(profile_path))


def parse_profile_text(text: str, source: str = "<string>") -> Profile:
    """Parse profile file content.

    Args:
        text: Full file content.
        source: Name used in error messages.

    Returns:
        Parsed profile.

    Raises:
        ProfileParseError: On a missing header, malformed line, bad rank
            sequence, duplicate n-gram or empty profile.
    """
    kind: ProfileKind | None = None
    ngrams: list[str] = []
    seen: set[str] = set()
    for line_number, line in enumerate(text.split("\n"), 1):
        line = line.rstrip("\r")
        if not line.strip() or _is_comment(line):
            continue
        if kind is None:
            kind = _parse_header(line, source, line_number)
            continue
        ngram, rank = _parse_entry(line, kind, source, line_number)
        if rank != len(ngrams):
            raise ProfileParseError(
                f"{source}:{line_number}: expected rank {len(ngrams)}, got {rank}. "
                "Ranks must start at 0 and increase by one without gaps."
            )
        if ngram in seen:
            raise ProfileParseError(f"{source}:{line_number}: duplicate n-gram {ngram!r}.")
        if len(ngrams) == MAX_PROFILE:
            raise ProfileParseError(
                f"{source}:{line_number}: profile exceeds {MAX_PROFILE} entries."
            )
        seen.add(ngram)
        ngrams.append(ngram)
    if kind is None:
        raise ProfileParseError(
            f"{source}: missing header. The first entry line must be "
            f"'{PROFILE_HEADER_PREFIX}raw' or '{PROFILE_HEADER_PREFIX}utf8'."
        )
    if not ngrams:
        raise ProfileParseError(f"{source}: profile has no n-gram entries.")
    return Profile(kind=kind, ngrams=tuple(ngrams))


def format_profile(profile: Profile) -> str:
    """Serialize a profile into file content.

    Args:
        profile: Profile to serialize.

    Returns:
        Header line plus one ``<ngram>\\t<rank>`` line per entry.
    """
    lines = [f"{PROFILE_HEADER_PREFIX}{profile.kind}"]
    lines.extend(f"{ngram}{PROFILE_FIELD_SEPARATOR}{rank}" for ngram, rank in profile.entries())
    return "\n".join(lines) + "\n"


def write_profile_file(profile: Profile, path: str | Path) -> Path:
    """Write a profile file to disk.

    Args:
        profile: Profile to serialize.
        path: Destination file path.

    Returns:
        Written file path.

    Raises:
        ProfileReadError: If the file cannot be written.
    """
    profile_path = Path(path).expanduser()
    try:
        profile_path.write_text(format_profile(profile), encoding="utf-8", newline="\n")
    except OSError as error:
        raise ProfileReadError(
            f"Failed to write profile file at {profile_path}: {error.strerror or error}."
        ) from error
    return profile_path


def _is_comment(line: str) -> bool:
    return line.startswith(PROFILE_COMMENT_PREFIX) and PROFILE_FIELD_SEPARATOR not in line


def _parse_header(line: str, source: str, line_number: int) -> ProfileKind:
    """Parse the ``kind:<kind>`` header line.

    Raises:
        ProfileParseError: If the line is not a supported header.
    """
    header = line.strip()
    if not header.startswith(PROFILE_HEADER_PREFIX):
        raise ProfileParseError(
            f"{source}:{line_number}: missing header, got {header!r}. "
            f"Start the file with '{PROFILE_HEADER_PREFIX}raw' or '{PROFILE_HEADER_PREFIX}utf8'."
        )
    kind = header[len(PROFILE_HEADER_PREFIX) :]
    if kind not in SUPPORTED_PROFILE_KINDS:
        raise ProfileParseError(
            f"{source}:{line_number}: unsupported profile kind {kind!r}. "
            f"Supported kinds: {', '.join(SUPPORTED_PROFILE_KINDS)}."
        )
    return cast(ProfileKind, kind)


def _parse_entry(
    line: str,
    kind: ProfileKind,
    source: str,
    line_number: int,
) -> tuple[str, int]:
    """Parse one ``<ngram>\\t<rank>`` line.

    Raises:
        ProfileParseError: If the line is malformed.
    """
    fields = line.split(PROFILE_FIELD_SEPARATOR)
    if len(fields) != 2:
        raise ProfileParseError(
            f"{source}:{line_number}: malformed entry {line!r}. "
            "Expected '<ngram><TAB><rank>'."
        )
    ngram, rank_text = fields[0], fields[1].strip()
    if not 1 <= len(ngram) <= MAX_NGRAM_LENGTH:
        raise ProfileParseError(
            f"{source}:{line_number}: n-gram {ngram!r} must hold 1 to "
            f"{MAX_NGRAM_LENGTH} characters."
        )
    if kind == RAW_KIND and any(ord(character) > _MAX_RAW_CODE_POINT for character in ngram):
        raise ProfileParseError(
            f"{source}:{line_number}: raw n-gram {ngram!r} holds characters above U+00FF."
        )
    if not _RANK_PATTERN.fullmatch(rank_text):
        raise ProfileParseError(
            f"{source}:{line_number}: rank {rank_text!r} is not a non-negative integer."
        )
    return ngram, int(rank_text)
