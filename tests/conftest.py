"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the tests/fixtures directory."""
    return Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def utf8_textcat():
    """Return a classifier with the default utf8 profiles enabled."""
    from classify.classifier import TextCat

    classifier = TextCat()
    classifier.enable_all_utf8()
    return classifier
