"""Textcat CLI entry points.
This module classifies text from arguments, a file or stdin.
It maps argparse options onto classifier calls.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Sequence

from classify.classifier import TextCat
from core.config import TextcatConfig
from core.errors import TextcatError
from core.logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="textcat",
        description="Classify text by language",
        epilog="If both -f and text are missing, read from stdin.",
    )
    parser.add_argument(
        "-b",
        "--both",
        action="store_true",
        help="Use both raw and utf-8 profiles, overriding -r",
    )
    parser.add_argument(
        "-r",
        "--raw",
        action="store_true",
        help="Use raw profiles instead of utf-8 profiles",
    )
    parser.add_argument(
        "-l",
        "--lines",
        action="store_true",
        help="Classify individual lines instead of the whole document",
    )
    parser.add_argument("-f", "--file", help="Read text from this file")
    parser.add_argument(
        "-p",
        "--profiles",
        help="Extra profile files, separated by commas (no spaces)",
    )
    parser.add_argument("text", nargs="*", help="Text to classify")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the textcat CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.file and not args.text and sys.stdin.isatty():
        parser.print_help(sys.stderr)
        return 0
    try:
        config = TextcatConfig.from_env()
        configure_logging(config.log_level)
        classifier = _build_classifier(config, args)
        payload = _read_input(args)
        if args.lines:
            _print_line_results(classifier, payload)
        else:
            print("\n".join(classifier.classify(payload)))
    except TextcatError as error:
        print(f"textcat: {error}", file=sys.stderr)
        return 1
    return 0


def _build_classifier(config: TextcatConfig, args: argparse.Namespace) -> TextCat:
    """Create the classifier, register extra profiles and enable kinds.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Classifier ready to classify.
    """
    classifier = TextCat(config.classifier_options())
    if args.profiles:
        for profile_path in args.profiles.split(","):
            classifier.add_language(Path(profile_path).name, profile_path)
    if args.raw or args.both:
        classifier.enable_all_raw()
    if args.both or not args.raw:
        classifier.enable_all_utf8()
    return classifier


def _read_input(args: argparse.Namespace) -> bytes:
    """Read the text to classify as bytes.

    Args:
        args: Parsed CLI args.

    Returns:
        Raw input bytes.

    Raises:
        TextcatError: If the input file cannot be read.
    """
    if args.file:
        try:
            return Path(args.file).expanduser().read_bytes()
        except OSError as error:
            raise TextcatError(
                f"Failed to read input file {args.file}: {error.strerror or error}."
            ) from error
    if args.text:
        return " ".join(args.text).encode("utf-8")
    return sys.stdin.buffer.read()


def _print_line_results(classifier: TextCat, payload: bytes) -> None:
    """Classify and print each input line as ``labels<TAB>line``.

    Args:
        classifier: Ready classifier.
        payload: Full input bytes.
    """
    for raw_line in payload.splitlines():
        labels = classifier.classify(raw_line)
        line = raw_line.decode("utf-8", errors="replace")
        print(f"{','.join(labels)}\t{line}")
