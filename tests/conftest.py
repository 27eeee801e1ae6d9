"""
Pytest configuration and fixtures for webhookgen tests.
"""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def events_markdown(fixtures_dir) -> bytes:
    """Excerpt of the "Events that trigger workflows" document."""
    return (fixtures_dir / "events-that-trigger-workflows.md").read_bytes()


@pytest.fixture
def reader():
    """Markdown reader instance."""
    from webhookgen.readers import MarkdownReader

    return MarkdownReader()


@pytest.fixture
def parse(reader):
    """Parse a markdown string into a DOCUMENT node."""
    return reader.parse
