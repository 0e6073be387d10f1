"""Shared pytest fixtures."""

import io

import pytest

from ansi_charts.core.ansi_text import strip_ansi


@pytest.fixture
def out() -> io.StringIO:
    """In-memory output sink for renderers."""
    return io.StringIO()


@pytest.fixture
def plain_lines():
    """Split rendered output into lines with ANSI escapes removed."""
    def _split(text: str) -> list[str]:
        return strip_ansi(text).splitlines()
    return _split
