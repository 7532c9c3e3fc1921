"""
Unit test fixtures.

All unit tests should be:
- Fast (< 100ms)
- Isolated (no workspace scans; at most a single temp file)
- Deterministic (same result every time)
"""

import pytest

from models import Document


@pytest.fixture
def make_document():
    """Factory for in-memory documents."""
    def make(path: str, source: str = "") -> Document:
        return Document(path=path, source=source)
    return make


@pytest.fixture
def project_paths():
    """A small project layout, as normalized paths."""
    return {
        "root": "/ws/p1",
        "docs": ["/ws/p1/a.woo", "/ws/p1/chapters/b.woo", "/ws/p1/chapters/c.woo"],
    }
