"""Shared fixtures for slideedit tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from slideedit import LocalFileTransport, SlideEditor
from slideedit.config import Settings

GOLDEN_DIR = Path(__file__).parent / "golden"
DECK_ID = "sample_deck"


@pytest.fixture
def presentation() -> dict[str, Any]:
    """Raw presentation JSON for the sample deck."""
    data: dict[str, Any] = json.loads(
        (GOLDEN_DIR / DECK_ID / "presentation.json").read_text()
    )
    return data


@pytest.fixture
def transport() -> LocalFileTransport:
    """Create a LocalFileTransport for testing."""
    return LocalFileTransport(GOLDEN_DIR)


@pytest.fixture
def settings() -> Settings:
    return Settings(indent_increment_pt=18.0)


@pytest.fixture
def editor(transport: LocalFileTransport, settings: Settings) -> SlideEditor:
    """Create a SlideEditor backed by the golden files."""
    return SlideEditor(transport, settings=settings)
