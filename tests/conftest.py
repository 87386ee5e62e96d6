"""Test setup for md2html."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running end-to-end tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as end-to-end tests (read and write real files)",
    )


@pytest.fixture
def sample_markdown() -> str:
    """Small document touching every node kind."""
    return (
        "# Title\n"
        "\n"
        "## Section\n"
        "### Detail\n"
        "plain line\n"
        "> note\n"
        "**bold**\n"
        "*italic*\n"
        "---\n"
    )
